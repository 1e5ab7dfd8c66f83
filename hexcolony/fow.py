"""Fog of war: which coordinates have been uncovered."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Set, Tuple

from hexcolony.coordinate import Coordinate
from hexcolony.minimap import Minimap
from hexcolony.observable import Observers


@dataclass(frozen=True)
class Uncover:
    """Event: the visibility of these coordinates was set."""

    coordinates: Tuple[Coordinate, ...] = ()


class FOW(Minimap[bool]):
    """Set of uncovered coordinates; every change is published as an Uncover."""

    def __init__(self, rows: int = 0, columns: int = 0) -> None:
        self.rows = rows
        self.columns = columns
        self._uncovered: Set[Coordinate] = set()
        self.observers: Observers[Uncover] = Observers()

    def _set_silent(self, coordinate: Coordinate, value: bool) -> None:
        if value:
            self._uncovered.add(coordinate)
        else:
            self._uncovered.discard(coordinate)

    def get(self, coordinate: Coordinate) -> bool:
        return coordinate in self._uncovered

    def set(self, coordinate: Coordinate, value: bool) -> None:
        self._set_silent(coordinate, value)
        self.observers.publish(Uncover((coordinate,)))

    def fill(self, coordinates: Iterable[Coordinate], value: bool) -> None:
        """Set every coordinate to ``value`` and publish them in a single event."""
        changed = tuple(coordinates)
        for coordinate in changed:
            self._set_silent(coordinate, value)
        self.observers.publish(Uncover(changed))