"""Roof outline classification and scoring."""

from __future__ import annotations

import logging

from ..value_objects import Polygon, RoofClassification, RoofShape
from .geometry import interior_angle

__all__ = [
    "ShapeClassifier",
    "azimuth_penalty",
]

logger = logging.getLogger(__name__)


def azimuth_penalty(azimuth_deg: float) -> float:
    """Suitability penalty for facing away from due south.

    0 at 180 degrees, growing linearly to 0.4 at due north.
    """
    deviation = abs(azimuth_deg - 180.0)
    normalized = min(deviation, 360.0 - deviation)
    return (normalized / 180.0) * 0.4


class ShapeClassifier:
    """Classifies a roof outline and derives its scores.

    Attributes:
        right_angle_tolerance: Maximum deviation from 90 degrees, per corner,
            for a four-sided outline to count as rectangular.
        small_roof_area: Roofs below this area (sq ft) get a suitability penalty.
        optimal_pitch: Pitch (degrees) with full exposure.
    """

    BASE_SUITABILITY = 0.8
    SMALL_ROOF_PENALTY = 0.2
    COMPLEXITY_WEIGHT = 0.2
    PITCH_SPREAD = 55.0

    def __init__(
        self,
        right_angle_tolerance: float = 15.0,
        small_roof_area: float = 200.0,
        optimal_pitch: float = 35.0,
    ) -> None:
        self.right_angle_tolerance = right_angle_tolerance
        self.small_roof_area = small_roof_area
        self.optimal_pitch = optimal_pitch

    def classify(
        self,
        boundary: Polygon,
        area_sqft: float,
        azimuth_deg: float,
        pitch_deg: float,
    ) -> RoofClassification:
        """Derive shape, complexity, suitability and sun exposure.

        An outline with fewer than three vertices cannot be scored; it is
        reported as UNKNOWN with every score set to None.

        Args:
            boundary: Roof outline.
            area_sqft: Plan area of the outline.
            azimuth_deg: Compass direction the roof faces.
            pitch_deg: Roof slope from horizontal.

        Returns:
            The derived RoofClassification.
        """
        if boundary.is_degenerate:
            logger.warning(
                f"Outline has {boundary.vertex_count} vertices; classification is uncomputable"
            )
            return RoofClassification.uncomputable()

        shape = self.classify_shape(boundary)
        complexity = self.complexity(boundary.vertex_count, shape)
        suitability = self.suitability(area_sqft, azimuth_deg, complexity)
        exposure = self.sun_exposure(azimuth_deg, pitch_deg)
        logger.debug(
            f"Classified outline as {shape.value}: complexity={complexity:.2f}, "
            f"suitability={suitability:.2f}, sun_exposure={exposure:.3f}"
        )
        return RoofClassification(
            shape=shape,
            complexity=complexity,
            suitability=suitability,
            sun_exposure=exposure,
        )

    def classify_shape(self, boundary: Polygon) -> RoofShape:
        """Shape category from the vertex count and corner angles."""
        count = boundary.vertex_count
        if count == 3:
            return RoofShape.TRIANGULAR
        if count == 4:
            if self.is_rectangular(boundary):
                return RoofShape.RECTANGULAR
            return RoofShape.QUADRILATERAL
        if count > 4:
            return RoofShape.COMPLEX
        return RoofShape.UNKNOWN

    def is_rectangular(self, boundary: Polygon) -> bool:
        """True for a four-sided outline whose corners are all near 90 degrees."""
        points = boundary.points
        if len(points) != 4:
            return False
        for i, curr in enumerate(points):
            prev = points[i - 1]
            nxt = points[(i + 1) % 4]
            if abs(interior_angle(prev, curr, nxt) - 90.0) >= self.right_angle_tolerance:
                return False
        return True

    @staticmethod
    def complexity(vertex_count: int, shape: RoofShape) -> float:
        """0.1 per vertex, plus 0.3 for complex outlines, clamped to [0, 1]."""
        value = vertex_count * 0.1
        if shape is RoofShape.COMPLEX:
            value += 0.3
        return max(0.0, min(value, 1.0))

    def suitability(self, area_sqft: float, azimuth_deg: float, complexity: float) -> float:
        """Overall suitability in [0, 1]."""
        value = self.BASE_SUITABILITY
        if area_sqft < self.small_roof_area:
            value -= self.SMALL_ROOF_PENALTY
        value -= azimuth_penalty(azimuth_deg)
        value -= complexity * self.COMPLEXITY_WEIGHT
        return max(0.0, min(value, 1.0))

    def sun_exposure(self, azimuth_deg: float, pitch_deg: float) -> float:
        """Directional exposure factor.

        Product of an orientation term (1 at due south) and a pitch term (1 at
        the optimal pitch). Left unclamped; either term goes negative for
        extreme inputs and efficiency clamping happens downstream.
        """
        orientation = 1.0 - abs(azimuth_deg - 180.0) / 180.0
        pitch = 1.0 - abs(pitch_deg - self.optimal_pitch) / self.PITCH_SPREAD
        return orientation * pitch
