"""Grid-backed maps that can be sampled into a small overview picture."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, List, TypeVar

from hexcolony.coordinate import Coordinate, Offset

T = TypeVar("T")

_MAX_SIZE = 0xFFFF


class Minimap(ABC, Generic[T]):
    """Base for maps with a size and a value at every coordinate.

    Subclasses provide ``rows`` and ``columns`` and implement :meth:`get`.
    """

    rows: int
    columns: int

    @abstractmethod
    def get(self, coordinate: Coordinate) -> T:
        """The value at ``coordinate``."""

    def get_range(self, coordinates: Iterable[Coordinate]) -> List[T]:
        """The values at each of ``coordinates``, in their order."""
        return [self.get(coordinate) for coordinate in coordinates]

    def minimap(self, width: int, height: int) -> List[T]:
        """Sample the map into ``width`` by ``height`` values, row by row around the centre."""
        for name, size in (("width", width), ("height", height)):
            if not 0 <= size <= _MAX_SIZE:
                raise ValueError(f"{name} must be between 0 and {_MAX_SIZE}, got {size}")
        height_half = height // 2
        width_half = width // 2
        if width % 2 and height_half > 0:
            raise ValueError(f"width must be even, got {width}")
        if width_half == 0 or height_half == 0:
            return []
        scale_x = self.columns / width
        scale_y = self.rows / height
        result: List[T] = []
        for y in range(-height_half, height_half):
            row = int(y * scale_y)
            for x in range(-width_half, width_half):
                column = int(x * scale_x)
                result.append(self.get(Coordinate.from_offset(Offset(column, row))))
        return result