"""Surface materials and the Phong reflection model."""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.lights import PointLight
from raytracer.tuples import Color, Point, Vector

_BLACK = Color(0.0, 0.0, 0.0)


@dataclass
class Material:
    """The surface properties used by the Phong model."""

    color: Color = field(default_factory=lambda: Color(1.0, 1.0, 1.0))
    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0


def lighting(
    material: Material,
    light: PointLight,
    point: Point,
    eyev: Vector,
    normalv: Vector,
    in_shadow: bool,
) -> Color:
    """Return the colour of ``point`` as lit by ``light`` and seen along ``eyev``."""
    effective_color = material.color * light.intensity
    lightv = (light.position - point).normalize()
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    diffuse = _BLACK
    specular = _BLACK
    light_dot_normal = lightv.dot(normalv)
    if light_dot_normal >= 0.0:
        diffuse = effective_color * material.diffuse * light_dot_normal
        reflect_dot_eye = (-lightv).reflect(normalv).dot(eyev)
        if reflect_dot_eye > 0.0:
            factor = reflect_dot_eye**material.shininess
            specular = light.intensity * material.specular * factor
    return ambient + diffuse + specular