"""Unit tests for the CSG tree and the recording kernel."""

import pytest

from baseplates.contracts import GeometryKernel
from baseplates.domain import GeometryError
from baseplates.domain.csg import (
    Circle,
    CsgKernel,
    Difference,
    LinearExtrude,
    MultMatrix,
    Render,
    Union,
    count_nodes,
    iter_nodes,
)
from baseplates.domain.services.affine import translate
from baseplates.domain.value_objects import Polygon2D, Vec2, Vec3


@pytest.fixture
def kernel() -> CsgKernel:
    return CsgKernel()


@pytest.fixture
def triangle() -> Polygon2D:
    return Polygon2D.from_points([(0, 0), (1, 0), (0, 1)])


class TestKernelProtocol:
    """The recording kernel satisfies the kernel protocol."""

    def test_is_geometry_kernel(self, kernel: CsgKernel) -> None:
        assert isinstance(kernel, GeometryKernel)


class TestPrimitives:
    """Tests for primitive validation."""

    def test_polygon_needs_three_points(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError):
            kernel.polygon(Polygon2D.from_points([(0, 0), (1, 0)]))

    def test_polygon_rejects_zero_area(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError, match="zero area"):
            kernel.polygon(Polygon2D.from_points([(0, 0), (1, 0), (2, 0)]))

    def test_polygon_keeps_points(self, kernel: CsgKernel, triangle: Polygon2D) -> None:
        assert kernel.polygon(triangle).polygon == triangle

    @pytest.mark.parametrize("size", [Vec2(0, 1), Vec2(1, -1)])
    def test_square_requires_positive_size(self, kernel: CsgKernel, size: Vec2) -> None:
        with pytest.raises(GeometryError):
            kernel.square(size)

    def test_circle_requires_positive_radius(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError):
            kernel.circle(0)

    def test_cube_requires_positive_size(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError):
            kernel.cube(Vec3(1, 1, 0))

    def test_2d_flags(self, kernel: CsgKernel) -> None:
        assert kernel.circle(1).is_2d
        assert not kernel.cube(Vec3(1, 1, 1)).is_2d


class TestExtrusions:
    """Tests for linear and rotate extrusion."""

    def test_linear_extrude(self, kernel: CsgKernel) -> None:
        solid = kernel.linear_extrude(5.0, kernel.circle(2.0))
        assert isinstance(solid, LinearExtrude)
        assert solid.height == 5.0
        assert solid.children == (Circle(2.0),)

    def test_linear_extrude_rejects_3d_input(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError, match="2D"):
            kernel.linear_extrude(1.0, kernel.cube(Vec3(1, 1, 1)))

    def test_linear_extrude_rejects_non_positive_height(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError):
            kernel.linear_extrude(0.0, kernel.circle(1.0))

    @pytest.mark.parametrize("angle", [0.0, -90.0, 400.0])
    def test_rotate_extrude_angle_range(self, kernel: CsgKernel, angle: float) -> None:
        with pytest.raises(GeometryError):
            kernel.rotate_extrude(angle, kernel.circle(1.0))

    def test_rotate_extrude_quarter(self, kernel: CsgKernel, triangle: Polygon2D) -> None:
        solid = kernel.rotate_extrude(90.0, kernel.polygon(triangle))
        assert solid.angle == 90.0


class TestBooleans:
    """Tests for union, difference and render."""

    def test_union_of_one_returns_it(self, kernel: CsgKernel) -> None:
        cube = kernel.cube(Vec3(1, 1, 1))
        assert kernel.union(cube) is cube

    def test_union_requires_members(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError):
            kernel.union()

    def test_union_keeps_order(self, kernel: CsgKernel) -> None:
        a, b = kernel.cube(Vec3(1, 1, 1)), kernel.cube(Vec3(2, 2, 2))
        solid = kernel.union(a, b)
        assert isinstance(solid, Union)
        assert solid.members == (a, b)

    def test_difference_without_tools_returns_base(self, kernel: CsgKernel) -> None:
        cube = kernel.cube(Vec3(1, 1, 1))
        assert kernel.difference(cube) is cube

    def test_difference_children_start_with_base(self, kernel: CsgKernel) -> None:
        base, tool = kernel.cube(Vec3(2, 2, 2)), kernel.cube(Vec3(1, 1, 1))
        solid = kernel.difference(base, tool)
        assert isinstance(solid, Difference)
        assert solid.children == (base, tool)

    def test_difference_rejects_mixed_dimensions(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError):
            kernel.difference(kernel.square(Vec2(1, 1)), kernel.cube(Vec3(1, 1, 1)))
        with pytest.raises(GeometryError):
            kernel.difference(kernel.cube(Vec3(1, 1, 1)), kernel.circle(1))

    def test_2d_difference(self, kernel: CsgKernel) -> None:
        shape = kernel.difference(kernel.square(Vec2(2, 2)), kernel.circle(1))
        assert shape.is_2d

    def test_3d_difference_is_not_2d(self, kernel: CsgKernel) -> None:
        solid = kernel.difference(kernel.cube(Vec3(2, 2, 2)), kernel.cube(Vec3(1, 1, 1)))
        assert not solid.is_2d

    def test_2d_difference_can_be_extruded(self, kernel: CsgKernel) -> None:
        shape = kernel.difference(kernel.square(Vec2(2, 2)), kernel.circle(1))
        solid = kernel.linear_extrude(3.0, shape)
        assert isinstance(solid, LinearExtrude)
        assert solid.shape == shape
        assert kernel.rotate_extrude(90.0, shape).shape == shape

    def test_2d_union(self, kernel: CsgKernel) -> None:
        shape = kernel.union(kernel.square(Vec2(2, 2)), kernel.circle(1))
        assert shape.is_2d
        assert kernel.linear_extrude(1.0, shape).shape == shape

    def test_3d_union_is_not_2d(self, kernel: CsgKernel) -> None:
        solid = kernel.union(kernel.cube(Vec3(1, 1, 1)), kernel.cube(Vec3(2, 2, 2)))
        assert not solid.is_2d
        with pytest.raises(GeometryError):
            kernel.linear_extrude(1.0, solid)

    def test_union_rejects_mixed_dimensions(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError):
            kernel.union(kernel.square(Vec2(1, 1)), kernel.cube(Vec3(1, 1, 1)))

    def test_render_rejects_2d(self, kernel: CsgKernel) -> None:
        with pytest.raises(GeometryError):
            kernel.render(kernel.circle(1))

    def test_render_wraps_child(self, kernel: CsgKernel) -> None:
        cube = kernel.cube(Vec3(1, 1, 1))
        assert kernel.render(cube) == Render(cube)


class TestTreeWalking:
    """Tests for iter_nodes and count_nodes."""

    def test_iter_nodes_is_preorder(self, kernel: CsgKernel) -> None:
        a = kernel.cube(Vec3(1, 1, 1))
        moved = kernel.multmatrix(translate(Vec3(1, 0, 0)), a)
        tree = kernel.union(moved, kernel.cube(Vec3(2, 2, 2)))
        kinds = [node.kind for node in iter_nodes(tree)]
        assert kinds == ["union", "multmatrix", "cube", "cube"]

    def test_count_nodes(self, kernel: CsgKernel) -> None:
        cube = kernel.cube(Vec3(1, 1, 1))
        tree = kernel.union(cube, kernel.multmatrix(translate(Vec3(3, 0, 0)), cube))
        assert count_nodes(tree, "cube") == 2
        assert count_nodes(tree, "multmatrix") == 1

    def test_nodes_are_hashable_values(self, kernel: CsgKernel) -> None:
        a = kernel.multmatrix(translate(Vec3(1, 0, 0)), kernel.cube(Vec3(1, 1, 1)))
        b = kernel.multmatrix(translate(Vec3(1, 0, 0)), kernel.cube(Vec3(1, 1, 1)))
        assert a == b
        assert isinstance(a, MultMatrix)
        assert len({a, b}) == 1
