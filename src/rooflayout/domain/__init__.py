"""Domain layer - roof geometry, obstacles, panels and scoring."""

from .entities import LayoutResult, Obstacle, Panel, RoofRegion
from .services import (
    LayoutScorer,
    LocalFrame,
    ObstacleCollisionService,
    PanelBuilder,
    ProductionAssumptions,
    ProductionEstimator,
    RoofAnalyzer,
    ShapeClassifier,
)
from .value_objects import (
    BoundingBox,
    GeoPoint,
    ObstacleKind,
    PanelSpec,
    Point,
    Polygon,
    RoofClassification,
    RoofShape,
    SpacingSpec,
)

__all__ = [
    # Entities
    "LayoutResult",
    "Obstacle",
    "Panel",
    "RoofRegion",
    # Value objects
    "BoundingBox",
    "GeoPoint",
    "ObstacleKind",
    "PanelSpec",
    "Point",
    "Polygon",
    "RoofClassification",
    "RoofShape",
    "SpacingSpec",
    # Services
    "LayoutScorer",
    "LocalFrame",
    "ObstacleCollisionService",
    "PanelBuilder",
    "ProductionAssumptions",
    "ProductionEstimator",
    "RoofAnalyzer",
    "ShapeClassifier",
]
