"""Demonstration scenes, each rendered to a PPM file, and the command that runs them."""

from __future__ import annotations

import argparse
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, Sequence

from raytracer.camera import Camera
from raytracer.canvas import Canvas, PpmFormat
from raytracer.colors import Pixel
from raytracer.lights import PointLight
from raytracer.materials import Material, lighting
from raytracer.matrices import Matrix
from raytracer.rays import Ray
from raytracer.spheres import Sphere
from raytracer.transformations import (
    PI,
    radians,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from raytracer.tuples import Color, Point, Vector
from raytracer.worlds import World

PathLike = str | os.PathLike[str]


@dataclass(frozen=True)
class Projectile:
    """A body in flight: where it is and how fast it moves."""

    position: Point
    velocity: Vector


@dataclass(frozen=True)
class Environment:
    """The constant forces acting on a projectile."""

    gravity: Vector
    wind: Vector


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance ``proj`` by one time step under ``env``."""
    return Projectile(
        position=proj.position + proj.velocity,
        velocity=proj.velocity + env.gravity + env.wind,
    )


def _round(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value >= 0.0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _clamped_index(value: float, upper: int) -> int:
    return min(max(_round(value), 0), upper)


def _save(canvas: Canvas, path: PathLike, fmt: PpmFormat) -> Path:
    target = Path(path)
    canvas.write_ppm(target, fmt)
    return target


def _trajectory(projectile: Projectile, environment: Environment) -> Iterator[Point]:
    while projectile.position.y > 0.0:
        yield projectile.position
        projectile = tick(environment, projectile)


def _projectile_canvas() -> Canvas:
    width, height = 900, 550
    projectile = Projectile(
        Point(0.0, 1.0, 0.0), Vector(1.0, 1.8, 0.0).normalize() * 11.25
    )
    environment = Environment(Vector(0.0, -0.1, 0.0), Vector(-0.01, 0.0, 0.0))
    canvas = Canvas(width, height, 255)
    for position in _trajectory(projectile, environment):
        y = _clamped_index(position.y, height - 1)
        x = _clamped_index(position.x, width - 1)
        canvas[min(height - y, height - 1), x] = Pixel.white()
    return canvas


def projectile_scene(path: PathLike) -> Path:
    """Plot the arc of a projectile and write it to ``path`` as binary PPM."""
    return _save(_projectile_canvas(), path, PpmFormat.P6)


def _clock_canvas() -> Canvas:
    size = 400
    hours = 12
    step = 360.0 / hours
    place = scaling(150.0, 150.0, 150.0).then(translation(200.0, 200.0, 200.0))
    start = Point(0.0, 0.0, 1.0)
    canvas = Canvas(size, size, 255)
    for hour in range(hours):
        transform = rotation_y(radians(hour * step)).then(place)
        p = transform * start
        x = _clamped_index(p.x, size - 1)
        z = _clamped_index(p.z, size - 1)
        canvas[x, z] = Pixel.white()
    return canvas


def clock_scene(path: PathLike) -> Path:
    """Mark the twelve hour positions of a clock face and write plain PPM."""
    return _save(_clock_canvas(), path, PpmFormat.P3)


def _silhouette_canvas() -> Canvas:
    ray_origin = Point(0.0, 0.0, -5.0)
    wall_z = 10.0
    wall_size = 7.0
    pixels = 100
    pixel_size = wall_size / pixels
    half = wall_size / 2.0
    canvas = Canvas(pixels, pixels, 255)
    shape = Sphere(
        transform=Matrix.identity()
        .then(scaling(0.5, 1.0, 1.0))
        .then(rotation_z(PI / 6.0))
        .then(shearing(1.0, 0.0, 0.0, 0.0, 0.0, 0.0))
    )
    red = Pixel.red()
    # The last row and column are left untouched.
    for y in range(pixels - 1):
        world_y = half - pixel_size * y
        for x in range(pixels - 1):
            world_x = -half + pixel_size * x
            target = Point(world_x, world_y, wall_z)
            ray = Ray(ray_origin, (target - ray_origin).normalize())
            if shape.intersect(ray).hit() is not None:
                canvas[y, x] = red
    return canvas


def silhouette_scene(path: PathLike) -> Path:
    """Cast rays at a deformed sphere, draw its silhouette and write plain PPM."""
    return _save(_silhouette_canvas(), path, PpmFormat.P3)


def _shaded_sphere_canvas(pixels: int = 1000) -> Canvas:
    sphere = Sphere(
        transform=Matrix.identity().then(scaling(0.1, 0.1, 0.1)),
        material=Material(color=Color(1.0, 0.2, 1.0)),
    )
    light = PointLight(Point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
    ray_origin = Point(0.0, 0.0, -0.5)
    wall_z = 10.0
    wall_size = 7.0
    pixel_size = wall_size / pixels
    half = wall_size / 2.0
    canvas = Canvas(pixels, pixels, 255)
    for y in range(pixels):
        world_y = half - pixel_size * y
        for x in range(pixels):
            world_x = -half + pixel_size * x
            target = Point(world_x, world_y, wall_z)
            ray = Ray(ray_origin, (target - ray_origin).normalize())
            hit = sphere.intersect(ray).hit()
            if hit is None:
                continue
            point = ray.position(hit.t)
            normal = hit.object.normal_at(point)
            color = lighting(
                hit.object.material, light, point, -ray.direction, normal, False
            )
            canvas.write_pixel(color, y, x)
    return canvas


def shaded_sphere_scene(path: PathLike) -> Path:
    """Render a single Phong-shaded sphere and write it as binary PPM."""
    return _save(_shaded_sphere_canvas(), path, PpmFormat.P6)


def _world_objects() -> list[Sphere]:
    def wall_material() -> Material:
        return Material(color=Color(1.0, 0.9, 0.9), specular=0.0)

    wall_shape = scaling(10.0, 0.01, 10.0)
    floor = Sphere(transform=wall_shape, material=wall_material())
    left_wall = Sphere(
        transform=wall_shape.then(rotation_x(PI / 2.0))
        .then(rotation_y(-PI / 4.0))
        .then(translation(0.0, 0.0, 5.0)),
        material=wall_material(),
    )
    right_wall = Sphere(
        transform=wall_shape.then(rotation_x(PI / 2.0))
        .then(rotation_y(PI / 4.0))
        .then(translation(0.0, 0.0, 5.0))
    )
    middle = Sphere(
        transform=translation(-0.5, 1.0, 0.5),
        material=Material(color=Color(0.1, 1.0, 0.5), diffuse=0.7, specular=0.3),
    )
    right = Sphere(
        transform=scaling(0.5, 0.5, 0.5).then(translation(1.5, 0.5, -0.5)),
        material=Material(color=Color(0.5, 1.0, 0.1), diffuse=0.7, specular=0.3),
    )
    left = Sphere(
        transform=scaling(0.33, 0.33, 0.33).then(translation(-1.5, 0.33, -0.75)),
        material=Material(color=Color(1.0, 0.8, 0.1), diffuse=0.7, specular=0.3),
    )
    return [floor, left_wall, right_wall, middle, right, left]


def _world_canvas(size: int = 1000) -> Canvas:
    world = World.default()
    world.objects = _world_objects()
    camera = Camera(size, size, PI / 3.0)
    camera.set_transform(
        view_transform(
            Point(0.0, 1.5, -5.0), Point(0.0, 1.0, 0.0), Vector(0.0, 1.0, 0.0)
        )
    )
    return camera.render(world)


def world_scene(path: PathLike) -> Path:
    """Render a room of flattened spheres with three balls and write binary PPM."""
    return _save(_world_canvas(), path, PpmFormat.P6)


SCENES: dict[str, tuple[str, Callable[[PathLike], Path]]] = {
    "projectile": ("chapter1.ppm", projectile_scene),
    "clock": ("chapter4.ppm", clock_scene),
    "silhouette": ("chapter5.ppm", silhouette_scene),
    "shaded-sphere": ("chapter6.ppm", shaded_sphere_scene),
    "world": ("chapter7.ppm", world_scene),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Render the chosen scenes (all of them by default) into PPM files."""
    parser = argparse.ArgumentParser(
        prog="raytracer", description="Render the demonstration scenes as PPM images."
    )
    parser.add_argument(
        "scenes",
        nargs="*",
        metavar="SCENE",
        help=f"scenes to render, from: {', '.join(SCENES)} (default: all)",
    )
    parser.add_argument(
        "--output-dir",
        default=".",
        help="directory to write the images into (default: current directory)",
    )
    args = parser.parse_args(argv)

    unknown = [name for name in args.scenes if name not in SCENES]
    if unknown:
        parser.error(f"unknown scene(s): {', '.join(unknown)}")

    failed = False
    for name in args.scenes or list(SCENES):
        filename, render = SCENES[name]
        try:
            render(Path(args.output_dir) / filename)
        except OSError as err:
            failed = True
            print(f"Something went wrong! {err}")
        else:
            print(f"Successfully written {filename}!")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())