"""Exceptions raised by the baseplate domain.

All errors are detected eagerly through precondition checks, before any
geometry is built. They are programmer or input errors and are never
retried.
"""

from __future__ import annotations


class BaseplateError(Exception):
    """Base class for all baseplate domain errors."""


class ConfigurationError(BaseplateError, ValueError):
    """Invalid generation parameters.

    Raised when a grid axis has neither a unit count nor a minimum size,
    when a vector parameter does not have exactly two components, or when a
    flag that must be a boolean receives another type.

    Attributes:
        message: Human-readable description of the problem.
        field: Name of the offending parameter, if known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class GeometryError(BaseplateError, ValueError):
    """Degenerate geometry passed to a construction primitive.

    Raised for non-positive sweep path sizes and for cross-sections that do
    not describe an area.
    """
