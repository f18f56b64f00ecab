"""Unit tests for homogeneous transforms and vector helpers."""

import math

import numpy as np
import pytest

from baseplates.domain.services.affine import (
    AffineTransform,
    angle_of,
    compose,
    magnitude,
    rotate,
    rotate_x,
    rotate_y,
    rotate_z,
    translate,
)
from baseplates.domain.value_objects import Vec2, Vec3


def assert_vec_close(actual: Vec3, expected: Vec3, tol: float = 1e-9) -> None:
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert actual.z == pytest.approx(expected.z, abs=tol)


class TestAffineTransform:
    """Tests for the transform value type."""

    def test_identity_leaves_points_unchanged(self) -> None:
        point = Vec3(1.5, -2.0, 3.25)
        assert AffineTransform.identity().apply(point) == point

    def test_rejects_non_4x4_matrix(self) -> None:
        with pytest.raises(ValueError, match="4x4"):
            AffineTransform(np.identity(3))

    def test_matrix_is_read_only(self) -> None:
        transform = translate(Vec3(1, 2, 3))
        with pytest.raises(ValueError):
            transform.matrix[0, 0] = 5.0

    def test_translation_property(self) -> None:
        assert translate(Vec3(4, 5, 6)).translation == Vec3(4, 5, 6)

    def test_equal_transforms_hash_equal(self) -> None:
        a = translate(Vec3(1, 2, 3)) @ rotate_z(90)
        b = translate(Vec3(1, 2, 3)) @ rotate_z(90)
        assert a == b
        assert hash(a) == hash(b)

    def test_apply_direction_ignores_translation(self) -> None:
        transform = translate(Vec3(10, 10, 10)) @ rotate_z(90)
        assert_vec_close(transform.apply_direction(Vec3(1, 0, 0)), Vec3(0, 1, 0))

    def test_as_rows_round_trips(self) -> None:
        transform = rotate(Vec3(10, 20, 30)) @ translate(Vec3(1, 2, 3))
        assert AffineTransform(transform.as_rows()) == transform


class TestRotations:
    """Tests for the axis rotations."""

    def test_quarter_turns_are_exact(self) -> None:
        assert rotate_z(90).apply(Vec3(1, 0, 0)) == Vec3(0.0, 1.0, 0.0)
        assert rotate_z(-180).apply(Vec3(1, 0, 0)) == Vec3(-1.0, 0.0, 0.0)
        assert rotate_x(-90).apply(Vec3(0, 1, 0)) == Vec3(0.0, 0.0, -1.0)

    def test_rotate_y_direction(self) -> None:
        assert_vec_close(rotate_y(90).apply(Vec3(0, 0, 1)), Vec3(1, 0, 0))

    def test_rotate_applies_x_then_y_then_z(self) -> None:
        angles = Vec3(30, 45, 60)
        expected = rotate_z(60) @ rotate_y(45) @ rotate_x(30)
        assert rotate(angles).is_close(expected)

    def test_lay_flat_rotation_axes(self) -> None:
        """rotate((90, 0, 90)) maps X to Y, Y to Z and Z to X."""
        flat = rotate(Vec3(90, 0, 90))
        assert_vec_close(flat.apply(Vec3(1, 0, 0)), Vec3(0, 1, 0))
        assert_vec_close(flat.apply(Vec3(0, 1, 0)), Vec3(0, 0, 1))
        assert_vec_close(flat.apply(Vec3(0, 0, 1)), Vec3(1, 0, 0))

    def test_non_quarter_angle(self) -> None:
        point = rotate_z(30).apply(Vec3(1, 0, 0))
        assert_vec_close(point, Vec3(math.sqrt(3) / 2, 0.5, 0))


class TestComposition:
    """Tests for composition order."""

    def test_composition_reads_right_to_left(self) -> None:
        """translate @ rotate rotates first, then translates."""
        transform = translate(Vec3(10, 0, 0)) @ rotate_z(90)
        assert_vec_close(transform.apply(Vec3(1, 0, 0)), Vec3(10, 1, 0))

    def test_compose_matches_chained_matmul(self) -> None:
        a, b, c = translate(Vec3(1, 2, 3)), rotate_x(45), rotate_z(-30)
        assert compose(a, b, c).is_close(a @ b @ c)

    def test_compose_with_no_transforms_is_identity(self) -> None:
        assert compose() == AffineTransform.identity()

    def test_mul_alias(self) -> None:
        a, b = translate(Vec3(1, 0, 0)), rotate_y(90)
        assert a * b == a @ b

    def test_matmul_with_other_type_is_not_supported(self) -> None:
        with pytest.raises(TypeError):
            translate(Vec3(1, 0, 0)) @ 3


class TestVectorHelpers:
    """Tests for angle_of and magnitude."""

    @pytest.mark.parametrize(
        ("vector", "expected"),
        [
            (Vec2(1, 0), 0.0),
            (Vec2(0, 1), 90.0),
            (Vec2(-1, 0), 180.0),
            (Vec2(0, -1), -90.0),
            (Vec2(1, 1), 45.0),
            (Vec2(-1, -1), -135.0),
        ],
    )
    def test_angle_of(self, vector: Vec2, expected: float) -> None:
        assert angle_of(vector) == pytest.approx(expected)

    def test_angle_of_negative_x_axis_is_positive_180(self) -> None:
        assert angle_of(Vec2(-1.0, -0.0)) == 180.0

    def test_magnitude(self) -> None:
        assert magnitude(Vec3(3, 4, 12)) == pytest.approx(13.0)
        assert magnitude(Vec2(3, 4)) == pytest.approx(5.0)
        assert magnitude([0.0, 0.0]) == 0.0
