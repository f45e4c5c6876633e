"""A pinhole camera that maps canvas pixels to rays into the world."""

from __future__ import annotations

import math

from raytracer.canvas import Canvas
from raytracer.matrices import Matrix, inverse
from raytracer.rays import Ray
from raytracer.tuples import Point
from raytracer.worlds import World


class Camera:
    """A camera producing an ``hsize`` x ``vsize`` image with the given field of view."""

    def __init__(self, hsize: int, vsize: int, field_of_view: float) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"camera size must be positive, not {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = Matrix.identity()
        self.inverse_transform: Matrix | None = None

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if aspect >= 1.0:
            self.half_width, self.half_height = half_view, half_view / aspect
        else:
            self.half_width, self.half_height = half_view * aspect, half_view
        self.pixel_size = (self.half_width * 2.0) / hsize

    def set_transform(self, transform: Matrix) -> None:
        """Place the camera with ``transform`` and cache its inverse."""
        self.transform = transform
        self.inverse_transform = inverse(transform)

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Return the ray from the camera through the centre of pixel ``(px, py)``."""
        world_x = self.half_width - (px + 0.5) * self.pixel_size
        world_y = self.half_height - (py + 0.5) * self.pixel_size
        pixel = Point(world_x, world_y, -1.0)
        origin = Point()
        if self.inverse_transform is not None:
            pixel = self.inverse_transform * pixel
            origin = self.inverse_transform * origin
        return Ray(origin, (pixel - origin).normalize())

    def render(self, world: World) -> Canvas:
        """Trace one ray per pixel through ``world`` and return the image."""
        image = Canvas(self.hsize, self.vsize, 255)
        for y in range(self.vsize):
            for x in range(self.hsize):
                image.write_pixel(world.color_at(self.ray_for_pixel(x, y)), y, x)
        return image