"""Yield: a productivity factor between 0 % and 200 % stored in a byte."""

from __future__ import annotations

import math
from dataclasses import dataclass

PERCENT100_YIELD = float(255 // 2)
PERCENT200_YIELD = 255.0


@dataclass(frozen=True, eq=False)
class Yield:
    """A byte-sized yield; 127 stands for 100 %."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 255:
            raise ValueError(f"yield value must fit in a byte, got {self.value}")

    @classmethod
    def from_float(cls, value: float) -> Yield:
        """Convert a fraction, saturating to the range 0 to 2."""
        if math.isnan(value):
            return cls(0)
        return cls(int(min(max(value, 0.0), 2.0) * PERCENT100_YIELD))

    def percent(self) -> float:
        return self.value / PERCENT100_YIELD

    def __float__(self) -> float:
        return self.percent()

    def __hash__(self) -> int:
        return hash(self.value)

    @staticmethod
    def _as_float(other: object) -> float | None:
        if isinstance(other, Yield):
            return other.percent()
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other)
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Yield):
            return self.value == other.value
        value = self._as_float(other)
        return NotImplemented if value is None else self.percent() == value

    def __lt__(self, other: object) -> bool:
        value = self._as_float(other)
        return NotImplemented if value is None else self.percent() < value

    def __le__(self, other: object) -> bool:
        value = self._as_float(other)
        return NotImplemented if value is None else self.percent() <= value

    def __gt__(self, other: object) -> bool:
        value = self._as_float(other)
        return NotImplemented if value is None else self.percent() > value

    def __ge__(self, other: object) -> bool:
        value = self._as_float(other)
        return NotImplemented if value is None else self.percent() >= value