"""Two-way index between coordinates and the territories that own them."""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional, Set

from hexcolony.coordinate import Coordinate

TerritoryID = int


class TerritoriesStorage:
    """Maps each coordinate to a territory and each territory to its coordinates."""

    def __init__(self) -> None:
        self._by_coordinate: Dict[Coordinate, TerritoryID] = {}
        self._by_territory_id: Dict[TerritoryID, Set[Coordinate]] = {}

    def insert(self, coordinate: Coordinate, territory_id: TerritoryID) -> Optional[TerritoryID]:
        """Assign a coordinate to a territory; return the territory it belonged to before."""
        self._by_territory_id.setdefault(territory_id, set()).add(coordinate)
        old_territory_id = self._by_coordinate.get(coordinate)
        self._by_coordinate[coordinate] = territory_id
        if old_territory_id is not None:
            old_range = self._by_territory_id.get(old_territory_id)
            if old_range is not None:
                old_range.discard(coordinate)
        return old_territory_id

    def remove(self, coordinate: Coordinate) -> Optional[TerritoryID]:
        """Release a coordinate; a territory left without coordinates is dropped."""
        territory_id = self._by_coordinate.pop(coordinate, None)
        if territory_id is not None:
            territory = self._by_territory_id[territory_id]
            if len(territory) <= 1:
                del self._by_territory_id[territory_id]
            else:
                territory.discard(coordinate)
        return territory_id

    def remove_territory(self, territory_id: TerritoryID) -> Optional[FrozenSet[Coordinate]]:
        """Drop a territory and release all of its coordinates."""
        territory = self._by_territory_id.pop(territory_id, None)
        if territory is None:
            return None
        for coordinate in territory:
            self._by_coordinate.pop(coordinate, None)
        return frozenset(territory)

    def get_range(self, territory_id: TerritoryID) -> Optional[FrozenSet[Coordinate]]:
        territory = self._by_territory_id.get(territory_id)
        return None if territory is None else frozenset(territory)

    def get_territory_id(self, coordinate: Coordinate) -> Optional[TerritoryID]:
        return self._by_coordinate.get(coordinate)