"""The map: terrain, territories, fog of war and buildings behind one lock."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from hexcolony.buildings import Buildings
from hexcolony.buildings_controller import BuildingsController
from hexcolony.buildings_updater import BuildingsUpdater
from hexcolony.clock import Clock
from hexcolony.fow import FOW
from hexcolony.terrain import Terrain
from hexcolony.territories import Territories


@dataclass
class MapStorage:
    """The layers of the map."""

    terrain: Terrain
    territories: Territories = field(default_factory=Territories)
    fow: FOW = field(default_factory=FOW)
    buildings: Buildings = field(default_factory=Buildings)


class Map:
    """Owns the map storage and the controllers working on it."""

    def __init__(self, clock: Clock, rows: int, columns: int, island_noise: float) -> None:
        self._lock = threading.RLock()
        self._storage = MapStorage(
            terrain=Terrain(rows, columns, island_noise),
            territories=Territories(rows, columns),
            fow=FOW(rows, columns),
            buildings=Buildings(rows, columns),
        )
        self._buildings_controller = BuildingsController(self._storage, self._lock)
        self._buildings_updater = BuildingsUpdater(clock, self._storage, self._lock)

    @contextmanager
    def locked(self) -> Iterator[MapStorage]:
        """Hold the map lock while the block runs."""
        with self._lock:
            yield self._storage

    @property
    def storage(self) -> MapStorage:
        return self._storage

    @property
    def terrain(self) -> Terrain:
        return self._storage.terrain

    @property
    def territories(self) -> Territories:
        return self._storage.territories

    @property
    def fow(self) -> FOW:
        return self._storage.fow

    @property
    def buildings(self) -> Buildings:
        return self._storage.buildings

    @property
    def buildings_controller(self) -> BuildingsController:
        return self._buildings_controller