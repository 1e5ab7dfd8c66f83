"""Terrain types and the rules that pick one from latitude, elevation and moisture."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hexcolony.latlon import Latitude
from hexcolony.relief import Elevation, Moisture


class TerrainType(Enum):
    BARE = "Bare"
    GRASSLAND = "Grassland"
    ICE = "Ice"
    MARSH = "Marsh"
    OCEAN = "Ocean"
    SCORCHED = "Scorched"
    SHRUBLAND = "Shrubland"
    SNOW = "Snow"
    SUBTROPICAL_DESERT = "SubtropicalDesert"
    TAIGA = "Taiga"
    TEMPERATE_DECIDUOUS_FOREST = "TemperateDeciduousForest"
    TEMPERATE_DESERT = "TemperateDesert"
    TEMPERATE_RAIN_FOREST = "TemperateRainForest"
    TROPICAL_RAIN_FOREST = "TropicalRainForest"
    TROPICAL_SEASONAL_FOREST = "TropicalSeasonalForest"
    TUNDRA = "Tundra"
    TUNDRA_MARSH = "TundraMarsh"
    DESERT_MOUNTAIN = "DesertMountain"
    MOUNTAIN = "Mountain"
    WOODED_HILLS = "WoodedHills"
    TAIGA_HILLS = "TaigaHills"
    SNOW_HILLS = "SnowHills"
    DESERT_HILLS = "DesertHills"
    HILLS = "Hills"
    FRESH_WATER = "FreshWater"
    SALT_FLAT = "SaltFlat"

    def __str__(self) -> str:
        return self.value

    def is_ocean(self) -> bool:
        return self is TerrainType.OCEAN

    def is_water(self) -> bool:
        return self.is_ocean() or self is TerrainType.FRESH_WATER

    def is_hill_with_snow(self) -> bool:
        return self in (TerrainType.TAIGA_HILLS, TerrainType.SNOW_HILLS)

    def is_hill(self) -> bool:
        return self in (
            TerrainType.HILLS,
            TerrainType.WOODED_HILLS,
            TerrainType.TAIGA_HILLS,
            TerrainType.SNOW_HILLS,
            TerrainType.DESERT_HILLS,
        )

    def is_mountain(self) -> bool:
        return self in (TerrainType.MOUNTAIN, TerrainType.DESERT_MOUNTAIN)

    def is_rainforest(self) -> bool:
        return self in (TerrainType.TROPICAL_RAIN_FOREST, TerrainType.TEMPERATE_RAIN_FOREST)

    def is_wooded(self) -> bool:
        return self in (
            TerrainType.TROPICAL_RAIN_FOREST,
            TerrainType.TEMPERATE_RAIN_FOREST,
            TerrainType.TEMPERATE_DECIDUOUS_FOREST,
            TerrainType.TROPICAL_SEASONAL_FOREST,
        )

    def is_ground(self) -> bool:
        if self in (
            TerrainType.OCEAN,
            TerrainType.FRESH_WATER,
            TerrainType.MARSH,
            TerrainType.ICE,
            TerrainType.TUNDRA_MARSH,
        ):
            return False
        return not self.is_mountain()

    def is_flat_ground(self) -> bool:
        return not self.is_hill() and self.is_ground()


@dataclass(frozen=True)
class TerrainConstants:
    freshwater_moisture_threshold: Moisture
    hill_elevation_threshold: Elevation
    mountain_elevation_threshold: Elevation
    ocean_elevation_threshold: Elevation
    saltflat_elevation_threshold: Elevation


TERRAIN_CONSTANTS = TerrainConstants(
    freshwater_moisture_threshold=Moisture.from_float(0.87),
    hill_elevation_threshold=Elevation.from_float(0.55),
    mountain_elevation_threshold=Elevation.from_float(0.75),
    ocean_elevation_threshold=Elevation.from_float(0.1),
    saltflat_elevation_threshold=Elevation.from_float(0.12),
)

_WOODED_BASES = (
    TerrainType.TEMPERATE_DECIDUOUS_FOREST,
    TerrainType.TEMPERATE_RAIN_FOREST,
    TerrainType.TROPICAL_SEASONAL_FOREST,
    TerrainType.TROPICAL_RAIN_FOREST,
)


class TerrainTypeFactory:
    """Chooses the terrain type of a location."""

    def create(
        self, latitude: Latitude, elevation: Elevation, moisture: Moisture
    ) -> TerrainType:
        e = float(elevation)
        m = float(moisture)
        constants = TERRAIN_CONSTANTS
        if e > float(constants.mountain_elevation_threshold):
            return TerrainType.DESERT_MOUNTAIN if m < 0.1 else TerrainType.MOUNTAIN
        base = self._base_terrain_type(abs(float(latitude)), e, m)
        if e > float(constants.hill_elevation_threshold):
            if m < 0.1:
                return TerrainType.DESERT_HILLS
            if base in _WOODED_BASES:
                return TerrainType.WOODED_HILLS
            if base is TerrainType.TAIGA:
                return TerrainType.TAIGA_HILLS
            if base is TerrainType.SNOW:
                return TerrainType.SNOW_HILLS
            return TerrainType.HILLS
        return base

    @staticmethod
    def _base_terrain_type(abs_latitude: float, e: float, m: float) -> TerrainType:
        constants = TERRAIN_CONSTANTS
        ocean = float(constants.ocean_elevation_threshold)
        if abs_latitude > 89.25:
            return TerrainType.ICE if e < 0.1 else TerrainType.SNOW
        if e > 0.2 and m > float(constants.freshwater_moisture_threshold):
            return TerrainType.FRESH_WATER
        # arctic
        if abs_latitude > 87.0:
            if e < ocean:
                return TerrainType.OCEAN if m > 0.5 else TerrainType.ICE
            if m < 0.1:
                return TerrainType.SCORCHED
            if m < 0.2:
                return TerrainType.BARE
            if e < 0.7:
                return TerrainType.TUNDRA if m < 0.7 else TerrainType.TUNDRA_MARSH
            return TerrainType.SNOW

        if e < ocean:
            return TerrainType.OCEAN
        if e > 0.8:
            if m < 0.1:
                return TerrainType.SCORCHED
            if m < 0.2:
                return TerrainType.BARE
            return TerrainType.SNOW

        if e < float(constants.saltflat_elevation_threshold) and m < 0.2:
            return TerrainType.SALT_FLAT

        if abs_latitude > 80.0:
            if m < 0.1:
                return TerrainType.SCORCHED
            if m < 0.2:
                return TerrainType.BARE
            if m < 0.85:
                return TerrainType.TAIGA
            return TerrainType.MARSH

        if abs_latitude > 30.0:
            if e > 0.6:
                if m < 0.33:
                    return TerrainType.TEMPERATE_DESERT
                if m < 0.66:
                    return TerrainType.SHRUBLAND
                return TerrainType.GRASSLAND
            if m < 0.1:
                return TerrainType.TEMPERATE_DESERT
            if m < 0.70:
                return TerrainType.GRASSLAND
            if m < 0.83:
                return TerrainType.TEMPERATE_DECIDUOUS_FOREST
            return TerrainType.TEMPERATE_RAIN_FOREST

        if m < 0.1:
            return TerrainType.SUBTROPICAL_DESERT
        if m < 0.5:
            return TerrainType.GRASSLAND
        if m < 0.72:
            return TerrainType.TROPICAL_SEASONAL_FOREST
        return TerrainType.TROPICAL_RAIN_FOREST