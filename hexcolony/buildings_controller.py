"""Checks and carries out the construction of buildings."""

from __future__ import annotations

import threading
from enum import Enum
from typing import Any, ContextManager, Optional, Union

from hexcolony.coordinate import Coordinate
from hexcolony.good import ImmaterialGood
from hexcolony.territories_state import freeze_mut
from hexcolony.tile import Tile, TileInstance, TileName, get_tile

_STARTING_MONEY = 1000


class ConstructionErrorKind(Enum):
    INVALID_TERRAIN = "InvalidTerrain"
    INVALID_TERRITORY = "InvalidTerritory"
    INSUFFICIENT_RESOURCES = "InsufficientResources"
    COORDINATE_OCCUPIED = "CoordinateOccupied"

    def __str__(self) -> str:
        return self.value


class ConstructionError(Exception):
    """A building could not be constructed; ``kind`` tells why."""

    def __init__(self, kind: ConstructionErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value


class BuildingsController:
    """Places buildings on a map storage, paying for them from the territory."""

    def __init__(self, map_storage: Any, lock: Optional[ContextManager] = None) -> None:
        self._map_storage = map_storage
        self._lock = lock if lock is not None else threading.RLock()

    def try_construct(self, coordinate: Coordinate, tile_name: Union[TileName, str]) -> None:
        """Construct a building or raise ConstructionError."""
        tile_name = TileName(tile_name)
        with self._lock:
            map_storage = self._map_storage
            territory_id = map_storage.territories.get(coordinate)
            is_warehouse = tile_name is TileName.WAREHOUSE
            if territory_id is None and not is_warehouse:
                raise ConstructionError(ConstructionErrorKind.INVALID_TERRITORY)
            if map_storage.buildings.get(coordinate) is not None:
                raise ConstructionError(ConstructionErrorKind.COORDINATE_OCCUPIED)
            tile = get_tile(tile_name)
            if not tile.allowed(coordinate, map_storage):
                raise ConstructionError(ConstructionErrorKind.INVALID_TERRAIN)
            costs = tile.costs
            if costs is not None and territory_id is not None:
                territory_state = freeze_mut(map_storage, territory_id)
                state = territory_state.state()
                covered = all(state.get(good, 0) >= amount for good, amount in costs.items())
                if state < costs or not covered:
                    raise ConstructionError(ConstructionErrorKind.INSUFFICIENT_RESOURCES)
                territory_state -= state.blueprint(costs)
            # after paying, construction must not fail any more
            self.do_construct(map_storage, coordinate, tile)

    @staticmethod
    def do_construct(map_storage: Any, coordinate: Coordinate, tile: Tile) -> None:
        """Build without any checks, uncover its influence and claim territory."""
        map_storage.buildings.set(coordinate, TileInstance.from_tile(tile))
        influence = tile.influence_at(coordinate)
        map_storage.fow.fill(influence, True)
        if tile.name is not TileName.WAREHOUSE:
            return
        territory_id = map_storage.territories.get(coordinate)
        if territory_id is not None:
            map_storage.territories.extend(territory_id, influence)
            return
        map_storage.territories.create(influence)
        # a new settlement starts with some money
        state = map_storage.buildings.get(coordinate).state
        state += state.blueprint_from_iter([(ImmaterialGood.MONEY, _STARTING_MONEY)])