"""Latitude and longitude derived from normalized map positions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional


def _clamp_unit(value: float) -> float:
    return min(max(value, -1.0), 1.0)


@dataclass(frozen=True, eq=False)
class _Angle:
    normalized: float = 0.0
    value: float = 0.0

    @staticmethod
    def _degrees(normalized: float) -> float:
        raise NotImplementedError

    @classmethod
    def _new(cls, normalized: float):
        return cls(normalized=normalized, value=cls._degrees(normalized))

    @classmethod
    def from_float(cls, value: float):
        """Build from a normalized position, saturating to the range -1 to 1."""
        return cls._new(_clamp_unit(value))

    def abs(self):
        return self._new(abs(self.normalized))

    def __float__(self) -> float:
        return self.value

    def __hash__(self) -> int:
        return hash((self.normalized, self.value))

    def _key(self, other: object) -> Optional[tuple]:
        if isinstance(other, type(self)):
            return (self.normalized, self.value), (other.normalized, other.value)
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.value, float(other)
        return None

    def __eq__(self, other: object) -> bool:
        pair = self._key(other)
        return NotImplemented if pair is None else pair[0] == pair[1]

    def __lt__(self, other: object) -> bool:
        pair = self._key(other)
        return NotImplemented if pair is None else pair[0] < pair[1]

    def __le__(self, other: object) -> bool:
        pair = self._key(other)
        return NotImplemented if pair is None else pair[0] <= pair[1]

    def __gt__(self, other: object) -> bool:
        pair = self._key(other)
        return NotImplemented if pair is None else pair[0] > pair[1]

    def __ge__(self, other: object) -> bool:
        pair = self._key(other)
        return NotImplemented if pair is None else pair[0] >= pair[1]


@dataclass(frozen=True, eq=False)
class Latitude(_Angle):
    """Degrees north or south; the normalized position follows a sine curve."""

    @staticmethod
    def _degrees(normalized: float) -> float:
        return math.sin(normalized * math.pi / 2) * 90.0

    @classmethod
    def from_float(cls, value: float) -> Latitude:
        return super().from_float(value)

    def abs(self) -> Latitude:
        return super().abs()


@dataclass(frozen=True, eq=False)
class Longitude(_Angle):
    """Degrees east or west, linear in the normalized position."""

    @staticmethod
    def _degrees(normalized: float) -> float:
        return normalized * 180.0

    @classmethod
    def from_float(cls, value: float) -> Longitude:
        return super().from_float(value)

    def abs(self) -> Longitude:
        return super().abs()