"""Homogeneous 4x4 transforms and small vector helpers.

Angles are in degrees. Rotations follow the right-handed convention and
``rotate((x, y, z))`` applies X first, then Y, then Z. Composition reads
right to left: ``a @ b`` applies ``b`` first, then ``a``.
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Iterable, Sequence

import numpy as np

from ..value_objects import Vec2, Vec3


def _cos_sin(angle_deg: float) -> tuple[float, float]:
    """Cosine and sine of an angle, exact on quarter turns."""
    quarter, rest = divmod(angle_deg, 90.0)
    if rest == 0:
        return ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))[int(quarter) % 4]
    rad = math.radians(angle_deg)
    return math.cos(rad), math.sin(rad)


class AffineTransform:
    """Immutable 4x4 homogeneous transform."""

    __slots__ = ("_matrix",)

    def __init__(self, matrix: Sequence[Sequence[float]] | np.ndarray) -> None:
        array = np.array(matrix, dtype=float)
        if array.shape != (4, 4):
            raise ValueError(f"Affine transform must be 4x4, got {array.shape}")
        array.setflags(write=False)
        self._matrix = array

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls(np.identity(4))

    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the underlying matrix."""
        return self._matrix

    @property
    def translation(self) -> Vec3:
        x, y, z = self._matrix[:3, 3]
        return Vec3(float(x), float(y), float(z))

    def __matmul__(self, other: "AffineTransform") -> "AffineTransform":
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return AffineTransform(self._matrix @ other._matrix)

    __mul__ = __matmul__

    def apply(self, point: Vec3) -> Vec3:
        """Map a point (translation included)."""
        x, y, z, _ = self._matrix @ np.array([point.x, point.y, point.z, 1.0])
        return Vec3(float(x), float(y), float(z))

    def apply_direction(self, vector: Vec3) -> Vec3:
        """Map a direction (translation ignored)."""
        x, y, z = self._matrix[:3, :3] @ np.array([vector.x, vector.y, vector.z])
        return Vec3(float(x), float(y), float(z))

    def is_close(self, other: "AffineTransform", atol: float = 1e-9) -> bool:
        return bool(np.allclose(self._matrix, other._matrix, atol=atol))

    def as_rows(self) -> list[list[float]]:
        """Plain nested lists, row major."""
        return [[float(v) for v in row] for row in self._matrix]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    def __hash__(self) -> int:
        return hash(tuple(self._matrix.flatten().tolist()))

    def __repr__(self) -> str:
        return f"AffineTransform({self.as_rows()!r})"


def translate(vector: Vec3) -> AffineTransform:
    """Pure translation."""
    matrix = np.identity(4)
    matrix[:3, 3] = (vector.x, vector.y, vector.z)
    return AffineTransform(matrix)


def rotate_x(angle_deg: float) -> AffineTransform:
    c, s = _cos_sin(angle_deg)
    return AffineTransform(
        [
            [1, 0, 0, 0],
            [0, c, -s, 0],
            [0, s, c, 0],
            [0, 0, 0, 1],
        ]
    )


def rotate_y(angle_deg: float) -> AffineTransform:
    c, s = _cos_sin(angle_deg)
    return AffineTransform(
        [
            [c, 0, s, 0],
            [0, 1, 0, 0],
            [-s, 0, c, 0],
            [0, 0, 0, 1],
        ]
    )


def rotate_z(angle_deg: float) -> AffineTransform:
    c, s = _cos_sin(angle_deg)
    return AffineTransform(
        [
            [c, -s, 0, 0],
            [s, c, 0, 0],
            [0, 0, 1, 0],
            [0, 0, 0, 1],
        ]
    )


def rotate(angles: Vec3) -> AffineTransform:
    """Rotate about X, then Y, then Z."""
    return rotate_z(angles.z) @ rotate_y(angles.y) @ rotate_x(angles.x)


def compose(*transforms: AffineTransform) -> AffineTransform:
    """Multiply transforms left to right; the last one is applied first."""
    return reduce(lambda acc, t: acc @ t, transforms, AffineTransform.identity())


def angle_of(vector: Vec2) -> float:
    """Direction of a 2D vector in degrees, in (-180, 180]."""
    angle = math.degrees(math.atan2(vector.y, vector.x))
    return 180.0 if angle == -180.0 else angle


def magnitude(vector: Vec2 | Vec3 | Iterable[float]) -> float:
    """Euclidean norm of a 2 or 3 component vector."""
    return math.sqrt(sum(c * c for c in vector))
