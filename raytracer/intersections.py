"""Ray-object intersections and the values precomputed for shading a hit."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import TYPE_CHECKING, Iterable, Iterator

from raytracer.rays import Ray
from raytracer.tuples import EPSILON, Point, Vector

if TYPE_CHECKING:
    from raytracer.spheres import Sphere

_by_t = attrgetter("t")


@dataclass(frozen=True)
class Computations:
    """Everything needed to shade the point where a ray meets an object."""

    t: float
    object: Sphere
    point: Point
    eyev: Vector
    normalv: Vector
    inside: bool
    over_point: Point


@dataclass(frozen=True, eq=False)
class Intersection:
    """The distance ``t`` along a ray at which it meets ``object``."""

    t: float
    object: Sphere

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and (
            self.object is other.object or self.object == other.object
        )

    __hash__ = None  # type: ignore[assignment]

    def prepare_computations(self, ray: Ray) -> Computations:
        """Return the shading state for this intersection along ``ray``."""
        point = ray.position(self.t)
        normalv = self.object.normal_at(point)
        eyev = -ray.direction
        inside = normalv.dot(eyev) < 0.0
        if inside:
            normalv = -normalv
        over_point = point + normalv * EPSILON
        return Computations(
            t=self.t,
            object=self.object,
            point=point,
            eyev=eyev,
            normalv=normalv,
            inside=inside,
            over_point=over_point,
        )


class Intersections:
    """A collection of intersections kept sorted by ``t``."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Intersection] = ()) -> None:
        self._items = sorted(items, key=_by_t)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Intersection]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Intersection:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersections):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Intersections({self._items!r})"

    def hit(self) -> Intersection | None:
        """Return the intersection with the lowest positive ``t``, if any."""
        return min((i for i in self._items if i.t > 0.0), key=_by_t, default=None)

    def extend(self, other: Iterable[Intersection]) -> None:
        """Add the intersections of ``other`` and keep the whole sorted."""
        self._items.extend(other)
        self._items.sort(key=_by_t)