"""Perlin noise, elevation and moisture values and their factories."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional

_GRADIENTS = (
    (1.0, 1.0),
    (-1.0, 1.0),
    (1.0, -1.0),
    (-1.0, -1.0),
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _saturate(value: float) -> float:
    return value if value > 0.0 else 0.0


class Perlin:
    """Seeded two-dimensional gradient noise with values in [-1, 1]."""

    def __init__(self, seed: int = 0) -> None:
        self.seed = seed
        permutation = list(range(256))
        random.Random(seed).shuffle(permutation)
        self._permutation = permutation * 2

    def _gradient(self, xi: int, yi: int, dx: float, dy: float) -> float:
        perm = self._permutation
        gx, gy = _GRADIENTS[perm[perm[xi] + yi] & 7]
        return gx * dx + gy * dy

    def get(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        fx = x - x0
        fy = y - y0
        xi = x0 & 255
        yi = y0 & 255
        xj = (xi + 1) & 255
        yj = (yi + 1) & 255
        n00 = self._gradient(xi, yi, fx, fy)
        n10 = self._gradient(xj, yi, fx - 1.0, fy)
        n01 = self._gradient(xi, yj, fx, fy - 1.0)
        n11 = self._gradient(xj, yj, fx - 1.0, fy - 1.0)
        u = _fade(fx)
        v = _fade(fy)
        value = _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v)
        return min(max(value, -1.0), 1.0)


@dataclass(frozen=True, eq=False)
class _Level:
    value: float = 0.0

    def __float__(self) -> float:
        return self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def _other(self, other: object) -> Optional[float]:
        if isinstance(other, type(self)):
            return other.value
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return float(other)
        return None

    def __eq__(self, other: object) -> bool:
        value = self._other(other)
        return NotImplemented if value is None else self.value == value

    def __lt__(self, other: object) -> bool:
        value = self._other(other)
        return NotImplemented if value is None else self.value < value

    def __le__(self, other: object) -> bool:
        value = self._other(other)
        return NotImplemented if value is None else self.value <= value

    def __gt__(self, other: object) -> bool:
        value = self._other(other)
        return NotImplemented if value is None else self.value > value

    def __ge__(self, other: object) -> bool:
        value = self._other(other)
        return NotImplemented if value is None else self.value >= value


@dataclass(frozen=True, eq=False)
class Elevation(_Level):
    """Height above the lowest point, never negative."""

    @classmethod
    def from_float(cls, value: float) -> Elevation:
        """Build from a float, saturating negative values to zero."""
        return cls(_saturate(value))


@dataclass(frozen=True, eq=False)
class Moisture(_Level):
    """Wetness of a location, never negative."""

    @classmethod
    def from_float(cls, value: float) -> Moisture:
        """Build from a float, saturating negative values to zero."""
        return cls(_saturate(value))


class TerrainElevationFactory:
    """Produces island-shaped elevations from layered noise."""

    def __init__(self, seed: int, island_noise: float) -> None:
        self._noise = Perlin(seed)
        self.island_noise = island_noise

    def _random(self, x: float, y: float) -> float:
        return (self._noise.get(x, y) + 1.0) / 2.0

    def create(self, nx: float, ny: float) -> Elevation:
        noise = self.island_noise
        elevation = ((self._random(nx, ny) + self._random(noise * nx, noise * ny)) * 0.5) ** 3
        if elevation > 0.12:
            elevation = max(self._random(nx * noise**2, ny * noise**2) ** 3, 0.12)
        return Elevation.from_float(elevation)


class TerrainMoistureFactory:
    """Produces moistures; the tropics are never completely dry."""

    def __init__(self, seed: int, moisture_noise: float) -> None:
        self._noise = Perlin(seed)
        self.moisture_noise = moisture_noise

    def _random(self, x: float, y: float) -> float:
        return (self._noise.get(x, y) + 1.0) / 2.0

    def create(self, nx: float, ny: float) -> Moisture:
        moisture = self._random(self.moisture_noise * nx, self.moisture_noise * ny) * 1.1
        floor = 0.1 if abs(ny) < 0.083 else 0.0
        return Moisture.from_float(max(moisture, floor))