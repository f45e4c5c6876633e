import math

import pytest

from raytracer.materials import Material
from raytracer.matrices import Matrix
from raytracer.rays import Ray
from raytracer.spheres import Sphere
from raytracer.transformations import PI, rotation_z, scaling, translation
from raytracer.tuples import Point, Vector

SQRT2_2 = math.sqrt(2.0) / 2.0
SQRT3_3 = math.sqrt(3.0) / 3.0


def test_a_ray_intersects_a_sphere_at_two_points():
    xs = Sphere().intersect(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0)))
    assert len(xs) == 2
    assert xs[0].t == pytest.approx(4.0)
    assert xs[1].t == pytest.approx(6.0)


def test_a_ray_intersects_a_sphere_at_a_tangent():
    xs = Sphere().intersect(Ray(Point(0.0, 1.0, -5.0), Vector(0.0, 0.0, 1.0)))
    assert xs[0].t == pytest.approx(5.0)
    assert xs[1].t == pytest.approx(5.0)


def test_a_ray_misses_a_sphere():
    xs = Sphere().intersect(Ray(Point(0.0, 2.0, -5.0), Vector(0.0, 0.0, 1.0)))
    assert len(xs) == 0


def test_a_ray_originates_inside_a_sphere():
    xs = Sphere().intersect(Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0)))
    assert xs[0].t == pytest.approx(-1.0)
    assert xs[1].t == pytest.approx(1.0)


def test_a_sphere_is_behind_a_ray():
    xs = Sphere().intersect(Ray(Point(0.0, 0.0, 5.0), Vector(0.0, 0.0, 1.0)))
    assert xs[0].t == pytest.approx(-6.0)
    assert xs[1].t == pytest.approx(-4.0)


def test_intersect_sets_the_object_on_the_intersection():
    s = Sphere()
    xs = s.intersect(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0)))
    assert xs[0].object is s
    assert xs[1].object is s


def test_a_spheres_default_transformation():
    s = Sphere()
    assert s.transform == Matrix.identity()
    assert s.inverse_transform is None


def test_changing_a_spheres_transformation():
    s = Sphere()
    t = translation(2.0, 3.0, 4.0)
    s.set_transform(t)
    assert s.transform == t
    assert s.inverse_transform == translation(-2.0, -3.0, -4.0)


def test_intersecting_a_scaled_sphere_with_a_ray():
    s = Sphere()
    s.set_transform(scaling(2.0, 2.0, 2.0))
    xs = s.intersect(Ray(Point(0.0, 0.0, -5.0), Vector(0.0, 0.0, 1.0)))
    assert len(xs) == 2
    assert xs[0].t == pytest.approx(3.0)
    assert xs[1].t == pytest.approx(7.0)


def test_intersecting_a_translated_sphere_with_a_ray():
    s = Sphere()
    s.set_transform(translation(5.0, 0.0, 0.0))
    xs = s.intersect(Ray(Point(0.0, 0.0, 0.0), Vector(0.0, 0.0, 1.0)))
    assert len(xs) == 0


@pytest.mark.parametrize(
    "point, expected",
    [
        (Point(1.0, 0.0, 0.0), Vector(1.0, 0.0, 0.0)),
        (Point(0.0, 1.0, 0.0), Vector(0.0, 1.0, 0.0)),
        (Point(0.0, 0.0, 1.0), Vector(0.0, 0.0, 1.0)),
        (Point(SQRT3_3, SQRT3_3, SQRT3_3), Vector(SQRT3_3, SQRT3_3, SQRT3_3)),
    ],
)
def test_the_normal_on_a_sphere(point, expected):
    assert Sphere().normal_at(point) == expected


def test_the_normal_is_a_normalized_vector():
    n = Sphere().normal_at(Point(SQRT3_3, SQRT3_3, SQRT3_3))
    assert n == n.normalize()


def test_computing_the_normal_on_a_translated_sphere():
    s = Sphere()
    s.set_transform(translation(0.0, 1.0, 0.0))
    n = s.normal_at(Point(0.0, 1.70711, -0.70711))
    assert n == Vector(0.0, 0.70711, -0.70711)


def test_computing_the_normal_on_a_transformed_sphere():
    s = Sphere()
    s.set_transform(Matrix.identity().then(rotation_z(PI / 5.0)).then(scaling(1.0, 0.5, 1.0)))
    n = s.normal_at(Point(0.0, SQRT2_2, -SQRT2_2))
    assert n == Vector(0.0, 0.97014, -0.24254)


def test_a_sphere_has_a_default_material():
    assert Sphere().material == Material()


def test_a_sphere_may_be_assigned_a_material():
    s = Sphere()
    m = Material(ambient=1.0)
    s.material = m
    assert s.material == m
    assert s.material.ambient == 1.0


def test_spheres_compare_by_value():
    a = Sphere()
    b = Sphere()
    assert a == b
    b.set_transform(translation(1.0, 0.0, 0.0))
    assert a != b