"""Points, vectors and colours in homogeneous coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterator

EPSILON = 0.001


def _close(a: float, b: float) -> bool:
    return abs(a - b) <= EPSILON


@dataclass(frozen=True, eq=False)
class _Tuple4:
    """Shared behaviour of points and vectors: an (x, y, z, w) quadruple."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: ClassVar[float] = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __getitem__(self, index: int) -> float:
        if not 0 <= index <= 3:
            raise IndexError(f"index out of bound {index}")
        return (self.x, self.y, self.z, self.w)[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Tuple4):
            return NotImplemented
        return all(_close(a, b) for a, b in zip(self, other))

    def __neg__(self):
        return type(self)(-self.x, -self.y, -self.z)

    def __mul__(self, factor):
        if isinstance(factor, Real):
            return type(self)(self.x * factor, self.y * factor, self.z * factor)
        return NotImplemented

    def __rmul__(self, factor):
        return self.__mul__(factor)

    def __truediv__(self, divisor):
        if isinstance(divisor, Real):
            return type(self)(self.x / divisor, self.y / divisor, self.z / divisor)
        return NotImplemented


@dataclass(frozen=True, eq=False)
class Point(_Tuple4):
    """A position in space (w = 1)."""

    w: ClassVar[float] = 1.0

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other):
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented


@dataclass(frozen=True, eq=False)
class Vector(_Tuple4):
    """A direction with a magnitude (w = 0)."""

    w: ClassVar[float] = 0.0

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        """Return the unit vector; a zero vector gives NaN components."""
        length = self.magnitude()
        if length == 0.0:
            return Vector(math.nan, math.nan, math.nan)
        return Vector(self.x / length, self.y / length, self.z / length)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def reflect(self, normal: Vector) -> Vector:
        return self - normal * (2.0 * self.dot(normal))


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB colour with floating-point channels, nominally in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return all(_close(a, b) for a, b in zip(self, other))

    def __add__(self, other):
        if isinstance(other, Color):
            return Color(self.r + other.r, self.g + other.g, self.b + other.b)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.__mul__(other)
        return NotImplemented