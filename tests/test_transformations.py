import math

import pytest

from raytracer.matrices import Matrix, inverse
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
from raytracer.tuples import Point, Vector

HALF_SQRT2 = math.sqrt(2.0) / 2.0


def test_multiplying_by_a_translation_matrix():
    assert translation(5.0, -3.0, 2.0) * Point(-3.0, 4.0, 5.0) == Point(2.0, 1.0, 7.0)


def test_multiplying_by_the_inverse_of_a_translation_matrix():
    inv = inverse(translation(5.0, -3.0, 2.0))
    assert inv * Point(-3.0, 4.0, 5.0) == Point(-8.0, 7.0, 3.0)


def test_translation_does_not_affect_vectors():
    v = Vector(-3.0, 4.0, 5.0)
    assert translation(5.0, -3.0, 2.0) * v == v


def test_a_scaling_matrix_applied_to_a_point():
    assert scaling(2.0, 3.0, 4.0) * Point(-4.0, 6.0, 8.0) == Point(-8.0, 18.0, 32.0)


def test_a_scaling_matrix_applied_to_a_vector():
    assert scaling(2.0, 3.0, 4.0) * Vector(-4.0, 6.0, 8.0) == Vector(-8.0, 18.0, 32.0)


def test_multiplying_by_the_inverse_of_a_scaling_matrix():
    inv = inverse(scaling(2.0, 3.0, 4.0))
    assert inv * Vector(-4.0, 6.0, 8.0) == Vector(-2.0, 2.0, 2.0)


def test_reflection_is_scaling_by_a_negative_value():
    assert scaling(-1.0, 1.0, 1.0) * Point(2.0, 3.0, 4.0) == Point(-2.0, 3.0, 4.0)


def test_rotating_a_point_around_the_x_axis():
    p = Point(0.0, 1.0, 0.0)
    assert rotation_x(PI / 4.0) * p == Point(0.0, HALF_SQRT2, HALF_SQRT2)
    assert rotation_x(PI / 2.0) * p == Point(0.0, 0.0, 1.0)


def test_the_inverse_of_an_x_rotation_rotates_in_the_opposite_direction():
    inv = inverse(rotation_x(PI / 4.0))
    assert inv * Point(0.0, 1.0, 0.0) == Point(0.0, HALF_SQRT2, -HALF_SQRT2)


def test_rotating_a_point_around_the_y_axis():
    p = Point(0.0, 0.0, 1.0)
    assert rotation_y(PI / 4.0) * p == Point(HALF_SQRT2, 0.0, HALF_SQRT2)
    assert rotation_y(PI / 2.0) * p == Point(1.0, 0.0, 0.0)


def test_rotating_a_point_around_the_z_axis():
    p = Point(0.0, 1.0, 0.0)
    assert rotation_z(PI / 4.0) * p == Point(-HALF_SQRT2, HALF_SQRT2, 0.0)
    assert rotation_z(PI / 2.0) * p == Point(-1.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "args, expected",
    [
        ((1.0, 0.0, 0.0, 0.0, 0.0, 0.0), Point(5.0, 3.0, 4.0)),
        ((0.0, 1.0, 0.0, 0.0, 0.0, 0.0), Point(6.0, 3.0, 4.0)),
        ((0.0, 0.0, 1.0, 0.0, 0.0, 0.0), Point(2.0, 5.0, 4.0)),
        ((0.0, 0.0, 0.0, 1.0, 0.0, 0.0), Point(2.0, 7.0, 4.0)),
        ((0.0, 0.0, 0.0, 0.0, 1.0, 0.0), Point(2.0, 3.0, 6.0)),
        ((0.0, 0.0, 0.0, 0.0, 0.0, 1.0), Point(2.0, 3.0, 7.0)),
    ],
)
def test_shearing_moves_components_in_proportion(args, expected):
    assert shearing(*args) * Point(2.0, 3.0, 4.0) == expected


def test_individual_transformations_are_applied_in_sequence():
    p = Point(1.0, 0.0, 1.0)
    p2 = rotation_x(PI / 2.0) * p
    assert p2 == Point(1.0, -1.0, 0.0)
    p3 = scaling(5.0, 5.0, 5.0) * p2
    assert p3 == Point(5.0, -5.0, 0.0)
    p4 = translation(10.0, 5.0, 7.0) * p3
    assert p4 == Point(15.0, 0.0, 7.0)


def test_chained_transformations_must_be_applied_in_normal_order():
    t = rotation_x(PI / 2.0).then(scaling(5.0, 5.0, 5.0)).then(translation(10.0, 5.0, 7.0))
    assert t * Point(1.0, 0.0, 1.0) == Point(15.0, 0.0, 7.0)


def test_fluent_api_transformations_must_be_applied_in_normal_order():
    t = (
        Matrix.identity()
        .then(rotation_x(PI / 2.0))
        .then(scaling(5.0, 5.0, 5.0))
        .then(translation(10.0, 5.0, 7.0))
    )
    assert t * Point(1.0, 0.0, 1.0) == Point(15.0, 0.0, 7.0)


def test_radians_converts_degrees():
    assert radians(180.0) == pytest.approx(PI)
    assert radians(90.0) == pytest.approx(PI / 2.0)


def test_the_transformation_matrix_for_the_default_orientation():
    t = view_transform(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, -1.0), Vector(0.0, 1.0, 0.0))
    assert t == Matrix.identity()


def test_a_view_transformation_matrix_looking_in_positive_z_direction():
    t = view_transform(Point(0.0, 0.0, 0.0), Point(0.0, 0.0, 1.0), Vector(0.0, 1.0, 0.0))
    assert t == scaling(-1.0, 1.0, -1.0)


def test_an_arbitrary_view_transformation():
    t = view_transform(Point(1.0, 3.0, 2.0), Point(4.0, -2.0, 8.0), Vector(1.0, 1.0, 0.0))
    assert t == Matrix(
        [
            [-0.50709, 0.50709, 0.67612, -2.36643],
            [0.76772, 0.60609, 0.12122, -2.82843],
            [-0.35857, 0.59761, -0.71714, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )