"""Vector and polygon value objects in millimeter units."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator


@dataclass(frozen=True)
class Vec2:
    """2D vector used for profile and path points."""

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(self.x * factor, self.y * factor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Vec3:
    """3D vector used for translations, points and rotation angles."""

    x: float
    y: float
    z: float = 0.0

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> "Vec3":
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    @property
    def xy(self) -> Vec2:
        """Projection onto the XY plane."""
        return Vec2(self.x, self.y)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Polygon2D:
    """Implicitly closed polygon; the last point connects back to the first.

    Winding order is kept exactly as given, since it decides inside and
    outside for boolean subtraction.
    """

    points: tuple[Vec2, ...]

    @classmethod
    def from_points(cls, points: Iterable[tuple[float, float] | Vec2]) -> "Polygon2D":
        """Build a polygon from plain tuples or Vec2 values."""
        return cls(
            tuple(p if isinstance(p, Vec2) else Vec2(float(p[0]), float(p[1])) for p in points)
        )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Vec2]:
        return iter(self.points)

    @property
    def signed_area(self) -> float:
        """Shoelace area; positive for counter-clockwise winding."""
        total = 0.0
        count = len(self.points)
        for i, p in enumerate(self.points):
            q = self.points[(i + 1) % count]
            total += p.x * q.y - q.x * p.y
        return total / 2

    @property
    def bounds(self) -> tuple[Vec2, Vec2]:
        """Return (min corner, max corner) of the axis-aligned bounds."""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return Vec2(min(xs), min(ys)), Vec2(max(xs), max(ys))

    def translated(self, offset: Vec2) -> "Polygon2D":
        """Return a copy shifted by offset."""
        return Polygon2D(tuple(p + offset for p in self.points))

    def as_tuples(self) -> list[tuple[float, float]]:
        return [p.as_tuple() for p in self.points]
