"""Rays: a starting point and a direction."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.matrices import Matrix
from raytracer.tuples import Point, Vector


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Return the point at distance ``t`` along the ray."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return a new ray with ``matrix`` applied to origin and direction."""
        return Ray(matrix * self.origin, matrix * self.direction)