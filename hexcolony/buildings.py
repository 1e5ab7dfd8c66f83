"""The buildings placed on the map, each guarded by its own lock."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from hexcolony.coordinate import Coordinate
from hexcolony.observable import Observers
from hexcolony.tile import DEFAULT_TILE_NAME, TileInstance, TileName


@dataclass(frozen=True)
class BuildingCreated:
    """Event: a building of this tile now stands at the coordinate."""

    coordinate: Coordinate = Coordinate()
    tile_name: TileName = DEFAULT_TILE_NAME


@dataclass(frozen=True)
class BuildingDestroyed:
    """Event: the building at the coordinate was removed."""

    coordinate: Coordinate = Coordinate()


@dataclass(eq=False)
class _Entry:
    instance: TileInstance
    lock: threading.Lock = field(default_factory=threading.Lock)


class Buildings:
    """Tile instances by coordinate; changes are published to observers."""

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        self.rows = rows
        self.columns = columns
        self._buildings: Dict[Coordinate, _Entry] = {}
        self._guard = threading.Lock()
        self.creators: Observers[BuildingCreated] = Observers()
        self.destroyers: Observers[BuildingDestroyed] = Observers()

    def get(self, coordinate: Coordinate) -> Optional[TileInstance]:
        """The building at ``coordinate``, or None."""
        with self._guard:
            entry = self._buildings.get(coordinate)
        return None if entry is None else entry.instance

    def _store(self, coordinate: Coordinate, instance: Optional[TileInstance]) -> None:
        if instance is None:
            self._buildings.pop(coordinate, None)
        else:
            self._buildings[coordinate] = _Entry(instance)

    def _announce(self, coordinate: Coordinate, instance: Optional[TileInstance]) -> None:
        if instance is None:
            self.destroyers.publish(BuildingDestroyed(coordinate))
        else:
            self.creators.publish(BuildingCreated(coordinate, instance.tile.name))

    def set(self, coordinate: Coordinate, instance: Optional[TileInstance]) -> None:
        """Place a building, replacing any existing one, or remove it with None."""
        with self._guard:
            self._store(coordinate, instance)
        self._announce(coordinate, instance)

    def try_set(self, coordinate: Coordinate, instance: Optional[TileInstance]) -> bool:
        """Like :meth:`set`, but only if the coordinate is free; return whether it was."""
        with self._guard:
            if coordinate in self._buildings:
                return False
            self._store(coordinate, instance)
        self._announce(coordinate, instance)
        return True

    def coordinates(self) -> List[Coordinate]:
        """A snapshot of the occupied coordinates."""
        with self._guard:
            return list(self._buildings)

    @contextmanager
    def locked(self, coordinate: Coordinate) -> Iterator[TileInstance]:
        """Hold the building's lock while the block runs; KeyError if there is none."""
        with self._guard:
            entry = self._buildings.get(coordinate)
        if entry is None:
            raise KeyError(coordinate)
        with entry.lock:
            yield entry.instance