"""Natural resources and harvestable goods a location yields."""

from __future__ import annotations

import math
from typing import Callable, Dict

from hexcolony.good import Good, HarvestableGood, NaturalGood
from hexcolony.inventory import Inventory
from hexcolony.latlon import Latitude, Longitude
from hexcolony.relief import Elevation, Moisture, Perlin
from hexcolony.terrain_type import TERRAIN_CONSTANTS, TerrainType
from hexcolony.yields import Yield

TerrainYields = Inventory

_YIELD_THRESHOLD = 0.1

_Rand = Callable[[float, int], float]


def _powf(base: float, exponent: float) -> float:
    """Power with float semantics: NaN instead of complex results."""
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _reciprocal(value: float) -> float:
    """1 / value, giving infinity for zero instead of raising."""
    if value == 0.0:
        return math.copysign(math.inf, value)
    return 1.0 / value


class TerrainYieldsFactory:
    """Computes yields with one noise source per natural and harvestable good."""

    def __init__(self, seed: int) -> None:
        self._noise: Dict[Good, Perlin] = {}
        naturals = list(NaturalGood)
        for idx, good in enumerate(naturals):
            self._noise[good] = Perlin(seed + idx)
        for idx, good in enumerate(HarvestableGood):
            self._noise[good] = Perlin(seed + len(naturals) + idx)

    def _random(
        self,
        good: Good,
        latitude: Latitude,
        longitude: Longitude,
        base_noise: float,
        num_harmonics: int,
    ) -> float:
        if num_harmonics == 0:
            return 0.0
        perlin = self._noise.get(good)
        if perlin is None:
            return 0.0
        value = 0.0
        for harmonic in range(num_harmonics):
            noise = base_noise * float(2**harmonic)
            value += (
                perlin.get(noise * latitude.normalized, noise * longitude.normalized)
                / num_harmonics
            )
        return value

    def create(
        self,
        latitude: Latitude,
        longitude: Longitude,
        elevation: Elevation,
        moisture: Moisture,
        terrain_type: TerrainType,
    ) -> Inventory:
        """The yields of a location; only goods above a small threshold are included."""
        yields: Inventory = Inventory()
        abs_latitude = float(latitude.abs())
        abs_longitude = float(longitude.abs())
        m = float(moisture)

        for good in NaturalGood:
            rand = self._rand_for(good, latitude, longitude)
            value = self._natural(good, terrain_type, abs_latitude, m, rand)
            if value > _YIELD_THRESHOLD:
                yields[good] = Yield.from_float(value)

        for good in HarvestableGood:
            rand = self._rand_for(good, latitude, longitude)
            value = self._harvestable(good, terrain_type, abs_latitude, abs_longitude, m, rand)
            if value > _YIELD_THRESHOLD:
                yields[good] = Yield.from_float(value)
        return yields

    def _rand_for(self, good: Good, latitude: Latitude, longitude: Longitude) -> _Rand:
        def rand(base_noise: float, num_harmonics: int) -> float:
            return self._random(good, latitude, longitude, base_noise, num_harmonics)

        return rand

    @staticmethod
    def _natural(
        good: NaturalGood, t: TerrainType, abs_latitude: float, m: float, rand: _Rand
    ) -> float:
        if good is NaturalGood.FRESH_WATER:
            if t is not TerrainType.FRESH_WATER:
                return 0.0
            threshold = float(TERRAIN_CONSTANTS.freshwater_moisture_threshold)
            # bias towards 100 %
            return 1.0 - _powf((1.0 - m) / (1.0 - threshold), 5.0)
        if good is NaturalGood.CLAY_REPO:
            if not t.is_ground():
                return 0.0
            productivity = m * 0.8 if t.is_hill() else m
            return productivity * rand(16.0, 1)
        if good is NaturalGood.COAL_REPO:
            if t.is_hill_with_snow():
                productivity = 0.75
            elif t.is_hill():
                productivity = 1.0
            elif t.is_mountain():
                productivity = 0.75
            else:
                productivity = 0.0
            return productivity * rand(2.0, 1)
        if good is NaturalGood.COPPER_ORE_REPO:
            return rand(3.0, 2) if t.is_mountain() else 0.0
        if good is NaturalGood.GEM_STONE_REPO:
            return rand(6.0, 3) if t.is_mountain() else 0.0
        if good is NaturalGood.IRON_ORE_REPO:
            return rand(1.0, 2) if t.is_mountain() else 0.0
        if good is NaturalGood.MARBLE_REPO:
            if t.is_mountain():
                productivity = 1.0
            elif t.is_hill_with_snow():
                productivity = 0.5
            elif t.is_hill():
                productivity = 0.75
            else:
                productivity = 0.0
            return productivity * rand(1.0, 2)
        if good is NaturalGood.SALT_REPO:
            if t.is_mountain():
                return rand(1.0, 2)
            if t is TerrainType.SALT_FLAT:
                return _reciprocal(m)
            return 0.0
        if good is NaturalGood.SILVER_ORE_REPO:
            return rand(5.0, 3) if t.is_mountain() else 0.0
        if good is NaturalGood.STONE_REPO:
            if t.is_mountain():
                return 1.0
            if t.is_hill_with_snow():
                return _powf(rand(1.0, 1), 0.25) / 1.5
            if t.is_hill():
                return _powf(rand(1.0, 1), 0.25)
            return 0.0
        if good is NaturalGood.WHALE:
            if t.is_ocean() and abs_latitude > 70.0:
                return _powf(m, 2.0) * rand(32.0, 8)
            return 0.0
        if good is NaturalGood.WILD_FISH:
            if t.is_water():
                return _powf(m, 2.0) * rand(128.0, 1)
            return 0.0
        return 0.0

    @staticmethod
    def _woodland(t: TerrainType, rainforest: float, wooded: float) -> float:
        if t is TerrainType.WOODED_HILLS:
            return 0.75
        if t is TerrainType.TAIGA:
            return 0.65
        if t is TerrainType.TAIGA_HILLS:
            return 0.45
        if t.is_rainforest():
            return rainforest
        if t.is_wooded():
            return wooded
        return 0.0

    @classmethod
    def _harvestable(
        cls,
        good: HarvestableGood,
        t: TerrainType,
        lat: float,
        lon: float,
        m: float,
        rand: _Rand,
    ) -> float:
        if good is HarvestableGood.GAME:
            return cls._woodland(t, 0.85, 1.0) * rand(32.0, 3)
        if good is HarvestableGood.TREE:
            return cls._woodland(t, 1.0, 0.9) * _powf(rand(1.0, 1), 0.25)
        if good is HarvestableGood.CATTLE:
            productivity = {
                TerrainType.GRASSLAND: 1.0,
                TerrainType.HILLS: 0.75,
                TerrainType.TUNDRA: 0.3,
            }.get(t, 0.0)
            return productivity * rand(128.0, 1)
        if good is HarvestableGood.COCOA_PLANT:
            if lat < 30.0 and t.is_flat_ground():
                return rand(96.0, 5)
            return 0.0
        if good is HarvestableGood.COTTON_PLANT:
            if lat < 30.0 and t.is_flat_ground():
                return rand(8.0, 4)
            return 0.0
        if good is HarvestableGood.EARS:
            if 30.0 < lat < 65.0 and t.is_flat_ground():
                return rand(8.0, 1)
            return 0.0
        if good is HarvestableGood.FLOWER_PLANT:
            if lat < 80.0 and t.is_ground():
                productivity = 0.75 * m if t.is_hill() else m
                return productivity * rand(128.0, 1)
            return 0.0
        if good is HarvestableGood.GRAPE:
            if 35.0 < lat < 60.0 and t.is_ground():
                productivity = m if t.is_hill() else 0.75 * m
                return productivity * rand(256.0, 2)
            return 0.0
        if good is HarvestableGood.HEMP_PLANT:
            if t.is_ground() and lat < 70.0:
                productivity = 0.75 * m if t.is_hill() else m
                return productivity * rand(1.0, 1)
            return 0.0
        if good is HarvestableGood.HOPS_PLANT:
            if 35.0 < lat < 60.0 and t.is_ground():
                productivity = m if t.is_hill() else 0.75 * m
                return productivity * rand(128.0, 3)
            return 0.0
        if good is HarvestableGood.INDIGO_PLANT:
            if lat < 30.0 and t.is_flat_ground():
                return m * rand(512.0, 6)
            return 0.0
        if good is HarvestableGood.PELT_ANIMAL:
            if t.is_ground() and (lat < 10.0 or 70.0 < lat < 85.0):
                productivity = 0.75 if t.is_hill() else 1.0
                return productivity * rand(256.0, 6)
            return 0.0
        if good is HarvestableGood.POTATO_PLANT:
            if t.is_flat_ground():
                return m * rand(1.0, 1)
            return 0.0
        if good is HarvestableGood.SHEEP:
            if 15.0 < lat < 70.0 and t.is_ground():
                productivity = 0.75 if t.is_hill() else 1.0
                return productivity * rand(1.0, 1)
            return 0.0
        if good is HarvestableGood.SILK_WORM:
            if 10.0 < lat < 35.0 and lon > 100.0 and t.is_flat_ground():
                return rand(512.0, 6)
            return 0.0
        if good is HarvestableGood.SPICE_PLANT:
            if lat < 35.0 and t.is_flat_ground():
                return rand(3.0, 3) * _reciprocal(m)
            return 0.0
        if good is HarvestableGood.SUGAR_CANE_PLANT:
            if 10.0 < lat < 35.0 and t.is_ground():
                return m * rand(128.0, 2)
            return 0.0
        if good is HarvestableGood.TOBACCO_PLANT:
            if lat < 47.0 and t.is_flat_ground():
                return m * rand(128.0, 2)
            return 0.0
        if good is HarvestableGood.UNTAMED_HORSE:
            if 30.0 < lat < 70.0 and lon > 100.0 and t.is_flat_ground():
                return rand(32.0, 2)
            return 0.0
        return 0.0