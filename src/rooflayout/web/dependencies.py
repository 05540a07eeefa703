"""FastAPI dependency injection for layout services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from rooflayout.application import LayoutPlanner
from rooflayout.domain.services import RoofAnalyzer


@lru_cache(maxsize=1)
def get_layout_planner() -> LayoutPlanner:
    """Get the shared LayoutPlanner; it holds no per-request state."""
    return LayoutPlanner()


@lru_cache(maxsize=1)
def get_roof_analyzer() -> RoofAnalyzer:
    return RoofAnalyzer()


LayoutPlannerDep = Annotated[LayoutPlanner, Depends(get_layout_planner)]
RoofAnalyzerDep = Annotated[RoofAnalyzer, Depends(get_roof_analyzer)]
