"""A scene: a collection of objects lit by a single light."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.intersections import Computations, Intersections
from raytracer.lights import PointLight
from raytracer.materials import Material, lighting
from raytracer.rays import Ray
from raytracer.spheres import Sphere
from raytracer.transformations import scaling
from raytracer.tuples import Color, Point

_BLACK = Color(0.0, 0.0, 0.0)


@dataclass
class World:
    """The objects of a scene and the light that illuminates them."""

    objects: list[Sphere] = field(default_factory=list)
    light: PointLight | None = None

    @classmethod
    def default(cls) -> World:
        """Return the standard two-sphere test scene."""
        light = PointLight(Point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
        outer = Sphere(
            material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2)
        )
        inner = Sphere()
        inner.set_transform(scaling(0.5, 0.5, 0.5))
        return cls(objects=[outer, inner], light=light)

    def intersect_world(self, ray: Ray) -> Intersections:
        """Return every intersection of ``ray`` with the scene, sorted by ``t``."""
        intersections = Intersections()
        for obj in self.objects:
            intersections.extend(obj.intersect(ray))
        return intersections

    def shade_hit(self, comps: Computations) -> Color:
        """Return the colour at a precomputed hit; black when there is no light."""
        shadowed = self.is_shadowed(comps.over_point)
        if self.light is None:
            return _BLACK
        return lighting(
            comps.object.material,
            self.light,
            comps.point,
            comps.eyev,
            comps.normalv,
            shadowed,
        )

    def color_at(self, ray: Ray) -> Color:
        """Return the colour seen along ``ray``; black when it hits nothing."""
        hit = self.intersect_world(ray).hit()
        if hit is None:
            return _BLACK
        return self.shade_hit(hit.prepare_computations(ray))

    def is_shadowed(self, point: Point) -> bool:
        """Tell whether an object lies between ``point`` and the light.

        Without a light every point is in shadow.
        """
        if self.light is None:
            return True
        to_light = self.light.position - point
        distance = to_light.magnitude()
        hit = self.intersect_world(Ray(point, to_light.normalize())).hit()
        return hit is not None and hit.t < distance