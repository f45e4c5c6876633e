"""Constructors for the 4x4 affine transformation matrices."""

from __future__ import annotations

import math

from raytracer.matrices import Matrix
from raytracer.tuples import Point, Vector

PI = math.pi


def radians(degree: float) -> float:
    """Convert an angle in degrees to radians."""
    return degree * PI / 180.0


def translation(x: float, y: float, z: float) -> Matrix:
    """Return a matrix that moves points by ``(x, y, z)`` and leaves vectors alone."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Return a matrix that scales each axis by the given factor."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(r: float) -> Matrix:
    """Return a rotation of ``r`` radians around the x axis."""
    cos, sin = math.cos(r), math.sin(r)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, cos, -sin, 0.0],
            [0.0, sin, cos, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(r: float) -> Matrix:
    """Return a rotation of ``r`` radians around the y axis."""
    cos, sin = math.cos(r), math.sin(r)
    return Matrix(
        [
            [cos, 0.0, sin, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-sin, 0.0, cos, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(r: float) -> Matrix:
    """Return a rotation of ``r`` radians around the z axis."""
    cos, sin = math.cos(r), math.sin(r)
    return Matrix(
        [
            [cos, -sin, 0.0, 0.0],
            [sin, cos, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(
    x_y: float, x_z: float, y_x: float, y_z: float, z_x: float, z_y: float
) -> Matrix:
    """Return a shear; ``x_y`` moves x in proportion to y, and so on."""
    return Matrix(
        [
            [1.0, x_y, x_z, 0.0],
            [y_x, 1.0, y_z, 0.0],
            [z_x, z_y, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def view_transform(from_point: Point, to_point: Point, up: Vector) -> Matrix:
    """Return the transformation that orients the world for an eye at ``from_point``."""
    forward = (to_point - from_point).normalize()
    left = forward.cross(up.normalize())
    true_up = left.cross(forward)
    orientation = Matrix(
        [
            [left.x, left.y, left.z, 0.0],
            [true_up.x, true_up.y, true_up.z, 0.0],
            [-forward.x, -forward.y, -forward.z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    return orientation * translation(-from_point.x, -from_point.y, -from_point.z)