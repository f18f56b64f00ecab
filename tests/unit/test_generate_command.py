"""Unit tests for the generation command, DTOs and the service factory."""

import pytest

from baseplates.application import BaseplateInput, BaseplateOutput, GenerateBaseplateCommand
from baseplates.application.factory import (
    ServiceFactory,
    get_factory,
    reset_factory,
    set_factory,
)
from baseplates.contracts import GeometryKernel
from baseplates.domain import GridSpec, PlateKind, PlateStandard
from baseplates.domain.csg import CsgKernel, Difference
from baseplates.domain.value_objects import Vec3


class TestBaseplateInput:
    """Tests for BaseplateInput validation and conversion."""

    def test_valid_input_has_no_errors(self) -> None:
        assert BaseplateInput(gridx=2, gridy=1).validate() == []

    def test_reports_every_problem(self) -> None:
        errors = BaseplateInput(what=3, gridx=-1, fitx=2.0).validate()
        assert any("what" in e for e in errors)
        assert any("negative" in e for e in errors)
        assert any("between -1 and 1" in e for e in errors)
        assert "Set gridy or distancey" in errors

    def test_missing_axis(self) -> None:
        assert BaseplateInput(gridx=2).validate() == ["Set gridy or distancey"]

    def test_to_grid_spec(self) -> None:
        grid = BaseplateInput(gridx=0, gridy=2, distancex=100, fitx=-1).to_grid_spec()
        assert grid == GridSpec(units_x=0, units_y=2, min_size_x_mm=100.0, fit_x=-1.0)

    def test_to_lip_style(self) -> None:
        assert BaseplateInput(what=1).to_lip_style().kind is PlateKind.SPACER


class TestBaseplateOutput:
    def test_is_valid_follows_errors(self) -> None:
        assert BaseplateOutput(solid=None, dimensions=None).is_valid
        assert not BaseplateOutput(solid=None, dimensions=None, errors=["x"]).is_valid


class TestGenerateBaseplateCommand:
    """Tests for GenerateBaseplateCommand.execute."""

    def test_generates_plate(self, generate_command: GenerateBaseplateCommand) -> None:
        result = generate_command.execute(BaseplateInput(gridx=2, gridy=1))
        assert result.is_valid
        assert isinstance(result.solid, Difference)
        assert result.dimensions.actual_units == (2, 1)
        assert result.lip.kind is PlateKind.BASEPLATE

    def test_spacer(self, generate_command: GenerateBaseplateCommand) -> None:
        result = generate_command.execute(BaseplateInput(what=1, gridx=1, gridy=1))
        assert result.is_valid
        assert result.dimensions.grid_size_mm == Vec3(42.0, 42.0, 0.2)

    def test_validation_errors_return_no_solid(
        self, generate_command: GenerateBaseplateCommand
    ) -> None:
        result = generate_command.execute(BaseplateInput(gridx=2))
        assert not result.is_valid
        assert result.solid is None
        assert result.dimensions is None

    def test_domain_errors_become_messages(
        self, generate_command: GenerateBaseplateCommand
    ) -> None:
        result = generate_command.execute(BaseplateInput(distancex=20.0, gridy=1))
        assert not result.is_valid
        assert "smaller than one grid unit" in result.errors[0]

    def test_default_construction(self) -> None:
        result = GenerateBaseplateCommand().execute(BaseplateInput(gridx=1, gridy=1))
        assert result.is_valid


class TestServiceFactory:
    """Tests for ServiceFactory and the default factory helpers."""

    def test_caches_kernel_and_layout(self) -> None:
        factory = ServiceFactory()
        assert factory.get_kernel() is factory.get_kernel()
        assert factory.get_layout_service() is factory.get_layout_service()
        assert isinstance(factory.get_kernel(), GeometryKernel)

    def test_set_kernel_rebuilds_layout(self) -> None:
        factory = ServiceFactory()
        first = factory.get_layout_service()
        kernel = CsgKernel()
        factory.set_kernel(kernel)
        second = factory.get_layout_service()
        assert second is not first
        assert second.kernel is kernel

    def test_uses_configured_standard(self) -> None:
        factory = ServiceFactory(standard=PlateStandard(grid_unit_size=50.0))
        result = factory.create_generate_command().execute(BaseplateInput(gridx=1, gridy=1))
        assert result.dimensions.grid_size_mm.x == 50.0

    def test_default_factory_is_shared(self) -> None:
        assert get_factory() is get_factory()

    def test_set_and_reset_factory(self) -> None:
        custom = ServiceFactory()
        set_factory(custom)
        assert get_factory() is custom
        reset_factory()
        assert get_factory() is not custom
