from raytracer.rays import Ray
from raytracer.transformations import scaling, translation
from raytracer.tuples import Point, Vector


def test_creating_and_querying_a_ray():
    origin = Point(1.0, 2.0, 3.0)
    direction = Vector(4.0, 5.0, 6.0)
    r = Ray(origin, direction)
    assert r.origin == origin
    assert r.direction == direction


def test_computing_a_point_from_a_distance():
    r = Ray(Point(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
    assert r.position(0.0) == Point(2.0, 3.0, 4.0)
    assert r.position(1.0) == Point(3.0, 3.0, 4.0)
    assert r.position(-1.0) == Point(1.0, 3.0, 4.0)
    assert r.position(2.5) == Point(4.5, 3.0, 4.0)


def test_translating_a_ray():
    r = Ray(Point(1.0, 2.0, 3.0), Vector(0.0, 1.0, 0.0))
    r2 = r.transform(translation(3.0, 4.0, 5.0))
    assert r2.origin == Point(4.0, 6.0, 8.0)
    assert r2.direction == Vector(0.0, 1.0, 0.0)


def test_scaling_a_ray():
    r = Ray(Point(1.0, 2.0, 3.0), Vector(0.0, 1.0, 0.0))
    r2 = r.transform(scaling(2.0, 3.0, 4.0))
    assert r2.origin == Point(2.0, 6.0, 12.0)
    assert r2.direction == Vector(0.0, 3.0, 0.0)


def test_transform_leaves_the_original_ray_unchanged():
    r = Ray(Point(1.0, 2.0, 3.0), Vector(0.0, 1.0, 0.0))
    r.transform(translation(3.0, 4.0, 5.0))
    assert r.origin == Point(1.0, 2.0, 3.0)