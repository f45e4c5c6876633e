"""Spheres, the only shape the tracer renders."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raytracer.intersections import Intersection, Intersections
from raytracer.materials import Material
from raytracer.matrices import Matrix, inverse, transpose
from raytracer.rays import Ray
from raytracer.tuples import Point, Vector


@dataclass
class Sphere:
    """A sphere in object space, placed in the world by ``transform``."""

    origin: Point = field(default_factory=Point)
    radius: float = 1.0
    transform: Matrix = field(default_factory=Matrix.identity)
    material: Material = field(default_factory=Material)
    inverse_transform: Matrix | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        if self.transform != Matrix.identity():
            self.inverse_transform = inverse(self.transform)

    def set_transform(self, transform: Matrix) -> None:
        """Replace the transform and cache its inverse."""
        self.transform = transform
        self.inverse_transform = inverse(transform)

    def intersect(self, ray: Ray) -> Intersections:
        """Return the points where ``ray`` enters and leaves the sphere."""
        if self.inverse_transform is not None:
            ray = ray.transform(self.inverse_transform)

        sphere_to_ray = ray.origin - self.origin
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - self.radius**2

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0 or a == 0.0:
            return Intersections()

        root = math.sqrt(discriminant)
        t1 = (-b - root) / (2.0 * a)
        t2 = (-b + root) / (2.0 * a)
        return Intersections([Intersection(t1, self), Intersection(t2, self)])

    def normal_at(self, world_point: Point) -> Vector:
        """Return the unit surface normal at ``world_point``."""
        inv = self.inverse_transform
        if inv is None:
            return (world_point - self.origin).normalize()
        object_point = inv * world_point
        object_normal = object_point - Point()
        world_normal = transpose(inv) * object_normal
        return world_normal.normalize()