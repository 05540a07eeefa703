"""Domain services for roof analysis, obstacles, scoring and production.

This package provides:
- Geometry primitives and the local planar projection
- Shape classification and RoofRegion construction
- Obstacle conflict detection and filtering
- Panel construction, scoring and aggregate statistics
- Production and financial estimates
"""

from .geometry import (
    bounding_box,
    edge_bearing,
    estimate_azimuth,
    great_circle_distance,
    horizontal_span,
    initial_bearing,
    interior_angle,
    longest_edge,
    planar_distance,
    point_in_polygon,
    polygon_area,
)
from .obstacle import ObstacleCollisionService, conflicts, filter_conflicting
from .panel_builder import PanelBuilder
from .production import (
    ProductionAssumptions,
    ProductionEstimate,
    ProductionEstimator,
)
from .projection import LocalFrame
from .roof_analyzer import DEFAULT_PITCH_DEG, RoofAnalyzer
from .scoring import LayoutScorer
from .shape_classifier import ShapeClassifier, azimuth_penalty

__all__ = [
    # Geometry
    "bounding_box",
    "edge_bearing",
    "estimate_azimuth",
    "great_circle_distance",
    "horizontal_span",
    "initial_bearing",
    "interior_angle",
    "longest_edge",
    "planar_distance",
    "point_in_polygon",
    "polygon_area",
    "LocalFrame",
    # Classification
    "DEFAULT_PITCH_DEG",
    "RoofAnalyzer",
    "ShapeClassifier",
    "azimuth_penalty",
    # Obstacle handling
    "ObstacleCollisionService",
    "conflicts",
    "filter_conflicting",
    # Panels and scoring
    "LayoutScorer",
    "PanelBuilder",
    # Production
    "ProductionAssumptions",
    "ProductionEstimate",
    "ProductionEstimator",
]
