"""Cube coordinates on a hex grid, offset conversion and coordinate ranges."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto

_MAX_RADIUS = 0xFFFF


class Face(Enum):
    """Which side of a hex touches a neighbouring hex."""

    LEFT = auto()
    TOP_LEFT = auto()
    TOP_RIGHT = auto()
    RIGHT = auto()
    BOTTOM_RIGHT = auto()
    BOTTOM_LEFT = auto()
    NONE = auto()


@dataclass(frozen=True)
class Offset:
    """Column/row position on an even-q offset grid."""

    column: int
    row: int


def _round_half_away(value: float) -> int:
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


@dataclass(frozen=True, order=True)
class Coordinate:
    """Cube coordinate with implicit z = -x - y."""

    x: int = 0
    y: int = 0

    @property
    def z(self) -> int:
        return -self.x - self.y

    @classmethod
    def round(cls, x: float, y: float) -> Coordinate:
        """The coordinate nearest to floating point coordinates."""
        return cls(_round_half_away(x), _round_half_away(y))

    @classmethod
    def from_offset(cls, offset: Offset) -> Coordinate:
        x = offset.column
        z = offset.row - (offset.column + (offset.column & 1)) // 2
        return cls(x, -x - z)

    def to_offset(self) -> Offset:
        x = self.x
        return Offset(column=x, row=self.z + (x + (x & 1)) // 2)

    def __add__(self, other: object) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: object) -> Coordinate:
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Coordinate.round(self.x * scale, self.y * scale)

    def dist(self, other: Coordinate) -> int:
        """Hex distance: the largest difference along the three cube axes."""
        return max(abs(self.x - other.x), abs(self.y - other.y), abs(self.z - other.z))

    def touching_face(self, other: Coordinate) -> Face:
        if self.dist(other) != 1:
            return Face.NONE
        delta = self - other
        if delta.x == 0:
            return Face.BOTTOM_LEFT if delta.y < 0 else Face.TOP_RIGHT
        if delta.x < 0:
            return Face.BOTTOM_RIGHT if delta.y == 0 else Face.RIGHT
        return Face.TOP_LEFT if delta.y == 0 else Face.LEFT

    def circle(self, radius: int) -> Range:
        return circle(self, radius)

    def ring(self, radius: int) -> Range:
        return ring(self, radius)

    def rectangle_to(self, to_corner: Coordinate) -> Range:
        return rectangle(self, to_corner)


Range = set[Coordinate]
CoordinateIndexed = dict

ZERO = Coordinate(0, 0)

DIRECTIONS = (
    Coordinate(1, -1),
    Coordinate(1, 0),
    Coordinate(0, 1),
    Coordinate(-1, 1),
    Coordinate(-1, 0),
    Coordinate(0, -1),
)


def _check_radius(radius: int) -> None:
    if not 0 <= radius <= _MAX_RADIUS:
        raise ValueError(f"radius must be between 0 and {_MAX_RADIUS}, got {radius}")


def neighbors(coordinate: Coordinate) -> Range:
    """The six coordinates adjacent to ``coordinate``."""
    return {coordinate + direction for direction in DIRECTIONS}


def ring(center: Coordinate, radius: int) -> Range:
    """Every coordinate within ``radius`` of ``center``."""
    _check_radius(radius)
    return {
        Coordinate(x + center.x, y + center.y)
        for x in range(-radius, radius + 1)
        for y in range(max(-radius, -x - radius), min(radius, -x + radius) + 1)
    }


def circle(center: Coordinate, radius: int) -> Range:
    """Union of the rings of every radius up to ``radius``."""
    _check_radius(radius)
    result: Range = set()
    for sub_radius in range(radius + 1):
        result |= ring(center, sub_radius)
    return result


def rectangle(from_corner: Coordinate, to_corner: Coordinate) -> Range:
    """All coordinates between two corners in offset space, corners included."""
    start = from_corner.to_offset()
    end = to_corner.to_offset()
    return {
        Coordinate.from_offset(Offset(column, row))
        for row in range(start.row, end.row + 1)
        for column in range(start.column, end.column + 1)
    }