"""Territories: which coordinates belong to which territory, with change events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional

from hexcolony.coordinate import Coordinate
from hexcolony.minimap import Minimap
from hexcolony.observable import Observers
from hexcolony.territories_storage import TerritoriesStorage, TerritoryID


@dataclass(frozen=True)
class TerritoryJoined:
    """Event: a coordinate became part of a territory."""

    coordinate: Coordinate
    territory_id: TerritoryID


@dataclass(frozen=True)
class TerritoryLeft:
    """Event: a coordinate stopped being part of a territory."""

    coordinate: Coordinate
    territory_id: TerritoryID


class Territories(Minimap[Optional[TerritoryID]]):
    """Owns the territories of the map and publishes joins and departures."""

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        self.rows = rows
        self.columns = columns
        self._storage = TerritoriesStorage()
        self._next_territory_id: TerritoryID = 0
        self.joiners: Observers[TerritoryJoined] = Observers()
        self.leavers: Observers[TerritoryLeft] = Observers()

    def create(self, coordinates: Iterable[Coordinate]) -> TerritoryID:
        """Start a new territory over the unowned ones of ``coordinates``."""
        territory_id = self._next_territory_id
        self._next_territory_id += 1
        self.extend(territory_id, coordinates)
        return territory_id

    def extend(self, territory_id: TerritoryID, coordinates: Iterable[Coordinate]) -> None:
        """Add the coordinates that no territory owns yet."""
        free = [c for c in dict.fromkeys(coordinates) if self.get(c) is None]
        self.fill(free, territory_id)

    def get_territory(self, territory_id: TerritoryID) -> Optional[FrozenSet[Coordinate]]:
        return self._storage.get_range(territory_id)

    def get(self, coordinate: Coordinate) -> Optional[TerritoryID]:
        return self._storage.get_territory_id(coordinate)

    def range_at(self, coordinate: Coordinate) -> Optional[FrozenSet[Coordinate]]:
        """All coordinates of the territory that owns ``coordinate``."""
        territory_id = self._storage.get_territory_id(coordinate)
        if territory_id is None:
            return None
        return self._storage.get_range(territory_id)

    def set(self, coordinate: Coordinate, territory_id: Optional[TerritoryID]) -> None:
        """Assign a coordinate to a territory, or release it with None."""
        if territory_id is None:
            old_territory_id = self._storage.remove(coordinate)
            if old_territory_id is not None:
                self.leavers.publish(TerritoryLeft(coordinate, old_territory_id))
            return
        old_territory_id = self._storage.insert(coordinate, territory_id)
        if old_territory_id is not None:
            self.leavers.publish(TerritoryLeft(coordinate, old_territory_id))
        self.joiners.publish(TerritoryJoined(coordinate, territory_id))

    def fill(
        self, coordinates: Iterable[Coordinate], territory_id: Optional[TerritoryID]
    ) -> None:
        for coordinate in coordinates:
            self.set(coordinate, territory_id)