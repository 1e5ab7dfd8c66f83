"""Procedural terrain: elevation, moisture, type and yields at every coordinate."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from hexcolony.coordinate import Coordinate
from hexcolony.inventory import Inventory
from hexcolony.latlon import Latitude, Longitude
from hexcolony.minimap import Minimap
from hexcolony.relief import (
    Elevation,
    Moisture,
    Perlin,
    TerrainElevationFactory,
    TerrainMoistureFactory,
)
from hexcolony.terrain_type import TerrainType, TerrainTypeFactory
from hexcolony.terrain_yields import TerrainYieldsFactory

DEFAULT_SEED = 1234


@dataclass
class TerrainMeta:
    """Everything known about the terrain of one location."""

    elevation: Elevation = field(default_factory=Elevation)
    moisture: Moisture = field(default_factory=Moisture)
    terrain_type: TerrainType = TerrainType.BARE
    yields: Inventory = field(default_factory=Inventory)


class TerrainFactory:
    """Builds terrain from normalized map positions."""

    def __init__(self, seed: int, island_noise: float) -> None:
        self._elevation = TerrainElevationFactory(seed, island_noise)
        self._moisture = TerrainMoistureFactory(seed * 3, island_noise * 4.0)
        self._yields = TerrainYieldsFactory(seed * 4)
        self._type = TerrainTypeFactory()

    def create_terrain_type(self, nx: float, ny: float) -> TerrainType:
        """Only the terrain type; cheaper than :meth:`create`."""
        elevation = self._elevation.create(nx, ny)
        moisture = self._moisture.create(nx, ny)
        return self._type.create(Latitude.from_float(ny), elevation, moisture)

    def create(self, nx: float, ny: float) -> TerrainMeta:
        elevation = self._elevation.create(nx, ny)
        moisture = self._moisture.create(nx, ny)
        latitude = Latitude.from_float(ny)
        longitude = Longitude.from_float(nx)
        terrain_type = self._type.create(latitude, elevation, moisture)
        yields = self._yields.create(latitude, longitude, elevation, moisture, terrain_type)
        return TerrainMeta(elevation, moisture, terrain_type, yields)


class Terrain(Minimap[TerrainType]):
    """A seeded terrain of the given size, centred on the origin."""

    def __init__(
        self, rows: int, columns: int, island_noise: float, seed: int = DEFAULT_SEED
    ) -> None:
        if rows < 1 or columns < 1:
            raise ValueError(f"terrain needs at least one row and column, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self.seed = seed
        self._random_latitude = Perlin(7 * seed)
        self._factory = TerrainFactory(seed, island_noise)

    @classmethod
    def new_seeded(cls, seed: int, rows: int, columns: int, island_noise: float) -> Terrain:
        return cls(rows, columns, island_noise, seed=seed)

    def _smudge_latitude(self, x: float, y: float) -> float:
        return y + (self._random_latitude.get(x * 4.0, y * 4.0) * max(abs(y), 0.1)) / 10.0

    def _normalized_coords(self, coordinate: Coordinate) -> Tuple[float, float]:
        offset = coordinate.to_offset()
        x = offset.column + self.columns / 2.0
        y = offset.row + self.rows / 2.0
        nx = 2.0 * ((x / self.columns) - 0.5)
        true_ny = 2.0 * ((y / self.rows) - 0.5)
        return nx, self._smudge_latitude(nx, true_ny)

    def get(self, coordinate: Coordinate) -> TerrainType:
        nx, ny = self._normalized_coords(coordinate)
        return self._factory.create_terrain_type(nx, ny)

    def meta(self, coordinate: Coordinate) -> TerrainMeta:
        nx, ny = self._normalized_coords(coordinate)
        return self._factory.create(nx, ny)