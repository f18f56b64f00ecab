"""Pytest configuration and shared fixtures for plate tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from baseplates.application.commands import GenerateBaseplateCommand
    from baseplates.domain import GridLayoutService, LipStyle


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: end-to-end tests through the CLI and exporters"
    )


@pytest.fixture
def generate_command() -> "GenerateBaseplateCommand":
    """GenerateBaseplateCommand built by the service factory."""
    from baseplates.application.factory import get_factory

    return get_factory().create_generate_command()


@pytest.fixture
def layout_service() -> "GridLayoutService":
    from baseplates.domain import GridLayoutService

    return GridLayoutService()


@pytest.fixture
def baseplate_lip() -> "LipStyle":
    from baseplates.domain import LipStyle, PlateKind

    return LipStyle.for_kind(PlateKind.BASEPLATE)


@pytest.fixture
def spacer_lip() -> "LipStyle":
    from baseplates.domain import LipStyle, PlateKind

    return LipStyle.for_kind(PlateKind.SPACER)


@pytest.fixture(autouse=True)
def _reset_factory():
    """Keep tests from sharing a cached default factory."""
    from baseplates.application.factory import reset_factory

    reset_factory()
    yield
    reset_factory()
