"""Application layer - use cases and orchestration."""

from .commands import GenerateLayoutCommand
from .dtos import (
    LayoutOutput,
    ObstacleInput,
    PanelSpecInput,
    RoofInput,
    SpacingInput,
)
from .services import LayoutPlanner

__all__ = [
    "GenerateLayoutCommand",
    "LayoutOutput",
    "LayoutPlanner",
    "ObstacleInput",
    "PanelSpecInput",
    "RoofInput",
    "SpacingInput",
]
