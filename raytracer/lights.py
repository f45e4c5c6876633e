"""Light sources."""

from __future__ import annotations

from dataclasses import dataclass

from raytracer.tuples import Color, Point


@dataclass
class PointLight:
    """A light with no size, emitting from a single position."""

    position: Point
    intensity: Color