"""Application layer - use cases and orchestration."""

from .commands import GenerateBaseplateCommand
from .dtos import BaseplateInput, BaseplateOutput

__all__ = [
    "BaseplateInput",
    "BaseplateOutput",
    "GenerateBaseplateCommand",
]
