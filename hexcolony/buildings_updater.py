"""Moves goods between buildings on each tick and runs production on each tock."""

from __future__ import annotations

import contextlib
from typing import Any, ContextManager, Optional

from hexcolony.clock import Clock, Tick, Tock


class BuildingsUpdater:
    """Clock observer driving the buildings of a map storage.

    ``map_storage`` needs a ``buildings`` attribute; ``lock``, if given, is
    held while the buildings are processed.
    """

    def __init__(
        self, clock: Clock, map_storage: Any, lock: Optional[ContextManager] = None
    ) -> None:
        self._map_storage = map_storage
        self._lock = lock if lock is not None else contextlib.nullcontext()
        self._registrations = (
            clock.tickers.register(self),
            clock.tockers.register(self),
        )

    def notify(self, event: object) -> None:
        """On a Tick every building consumes from its neighbours; on a Tock it produces."""
        if isinstance(event, Tick):
            self._consume_all()
        elif isinstance(event, Tock):
            self._produce_all()
        else:
            raise TypeError(f"unsupported event: {event!r}")

    def _consume_all(self) -> None:
        with self._lock:
            buildings = self._map_storage.buildings
            occupied = set(buildings.coordinates())
            for coordinate in sorted(occupied):
                with buildings.locked(coordinate) as instance:
                    for other_coordinate in sorted(instance.tile.influence_at(coordinate)):
                        if other_coordinate == coordinate or other_coordinate not in occupied:
                            continue
                        with buildings.locked(other_coordinate) as other:
                            instance.consume(other)

    def _produce_all(self) -> None:
        with self._lock:
            buildings = self._map_storage.buildings
            for coordinate in buildings.coordinates():
                with buildings.locked(coordinate) as instance:
                    instance.produce()