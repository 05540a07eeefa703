"""Application services that orchestrate the domain."""

from .layout_planner import LayoutPlanner

__all__ = ["LayoutPlanner"]
