"""Contracts shared between layers."""

from baseplates.contracts.protocols import GeometryKernel, GridLayoutProtocol

__all__ = ["GeometryKernel", "GridLayoutProtocol"]
