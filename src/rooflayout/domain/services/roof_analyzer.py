"""Builds RoofRegion entities from raw outlines."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from ..entities import Obstacle, RoofRegion
from ..value_objects import GeoPoint, Point, Polygon
from .geometry import estimate_azimuth, polygon_area
from .projection import LocalFrame
from .shape_classifier import ShapeClassifier

__all__ = [
    "DEFAULT_PITCH_DEG",
    "RoofAnalyzer",
]

logger = logging.getLogger(__name__)

DEFAULT_PITCH_DEG = 30.0


class RoofAnalyzer:
    """Turns an outline into a classified RoofRegion.

    Area defaults to the outline's plan area, and azimuth defaults to the
    direction perpendicular to the outline's longest edge.
    """

    def __init__(self, classifier: ShapeClassifier | None = None) -> None:
        self.classifier = classifier or ShapeClassifier()

    def analyze(
        self,
        boundary: Polygon,
        *,
        area_sqft: float | None = None,
        azimuth_deg: float | None = None,
        pitch_deg: float = DEFAULT_PITCH_DEG,
        obstacles: Sequence[Obstacle] = (),
        origin: GeoPoint | None = None,
    ) -> RoofRegion:
        """Classify a planar outline.

        Args:
            boundary: Outline in local feet.
            area_sqft: Optional area override; computed from the outline if None.
            azimuth_deg: Optional facing; estimated from the outline if None.
            pitch_deg: Roof slope from horizontal.
            obstacles: Obstacles to attach to the region.
            origin: Geographic origin of the frame, when there is one.

        Returns:
            A new RoofRegion.

        Raises:
            ValueError: If pitch or azimuth are not finite.
        """
        if not math.isfinite(pitch_deg):
            raise ValueError(f"Pitch must be finite, got {pitch_deg!r}")
        if azimuth_deg is not None and not math.isfinite(azimuth_deg):
            raise ValueError(f"Azimuth must be finite, got {azimuth_deg!r}")

        area = polygon_area(boundary) if area_sqft is None else area_sqft
        azimuth = (
            estimate_azimuth(boundary) if azimuth_deg is None else azimuth_deg % 360.0
        )
        classification = self.classifier.classify(boundary, area, azimuth, pitch_deg)
        logger.debug(
            f"Analyzed roof: {boundary.vertex_count} vertices, area={area:.1f} sq ft, "
            f"azimuth={azimuth:.1f}, pitch={pitch_deg:.1f}"
        )
        return RoofRegion(
            boundary=boundary,
            area_sqft=area,
            azimuth_deg=azimuth,
            pitch_deg=pitch_deg,
            classification=classification,
            obstacles=tuple(obstacles),
            origin=origin,
        )

    def analyze_points(
        self,
        points: Sequence[Point] | Sequence[tuple[float, float]],
        **kwargs,
    ) -> RoofRegion:
        """Classify an outline given as planar points or (x, y) pairs."""
        converted = tuple(p if isinstance(p, Point) else Point(*p) for p in points)
        return self.analyze(Polygon(converted), **kwargs)

    def analyze_geographic(
        self,
        coords: Sequence[GeoPoint],
        *,
        frame: LocalFrame | None = None,
        **kwargs,
    ) -> tuple[RoofRegion, LocalFrame]:
        """Project a geographic outline into local feet and classify it.

        Args:
            coords: Outline vertices in latitude/longitude.
            frame: Frame to project into; centered on the outline if None.
            **kwargs: Passed through to ``analyze``.

        Returns:
            The region and the frame used, so callers can project obstacles
            and map panels back to latitude/longitude.
        """
        frame = frame or LocalFrame.centered_on(coords)
        boundary = frame.project_polygon(coords)
        region = self.analyze(boundary, origin=frame.origin, **kwargs)
        return region, frame

    def reanalyze(self, region: RoofRegion, boundary: Polygon) -> RoofRegion:
        """Rebuild a region for a changed outline, keeping facing, pitch and obstacles.

        Area is recomputed from the new outline.
        """
        return self.analyze(
            boundary,
            azimuth_deg=region.azimuth_deg,
            pitch_deg=region.pitch_deg,
            obstacles=region.obstacles,
            origin=region.origin,
        )
