"""Projection of geographic outlines into a local planar frame.

Geographic input is projected exactly once, into an azimuthal equidistant
frame (feet) centered near the roof. Every tiling, scoring and obstacle
computation afterwards works in that frame, so lengths and positions always
share one unit.
"""

from __future__ import annotations

from typing import Sequence

from pyproj import CRS, Transformer

from ..value_objects import GeoPoint, Point, Polygon

__all__ = ["LocalFrame"]

_WGS84 = CRS.from_epsg(4326)


class LocalFrame:
    """Two-way mapping between WGS84 coordinates and local feet.

    Attributes:
        origin: Geographic point mapped to (0, 0).
    """

    def __init__(self, origin: GeoPoint) -> None:
        self.origin = origin
        local = CRS.from_proj4(
            f"+proj=aeqd +lat_0={origin.lat} +lon_0={origin.lng} "
            "+datum=WGS84 +units=ft +no_defs"
        )
        self._forward = Transformer.from_crs(_WGS84, local, always_xy=True)
        self._inverse = Transformer.from_crs(local, _WGS84, always_xy=True)

    @classmethod
    def centered_on(cls, coords: Sequence[GeoPoint]) -> "LocalFrame":
        """Frame whose origin is the midpoint of the coordinates' lat/lng extents.

        Raises:
            ValueError: If no coordinates are given.
        """
        if not coords:
            raise ValueError("Cannot center a frame on an empty coordinate list")
        lats = [c.lat for c in coords]
        lngs = [c.lng for c in coords]
        origin = GeoPoint(
            lat=(max(lats) + min(lats)) / 2,
            lng=(max(lngs) + min(lngs)) / 2,
        )
        return cls(origin)

    def to_local(self, point: GeoPoint) -> Point:
        """Project a geographic point into the frame."""
        x, y = self._forward.transform(point.lng, point.lat)
        return Point(float(x), float(y))

    def to_geographic(self, point: Point) -> GeoPoint:
        """Map a frame point back to latitude/longitude."""
        lng, lat = self._inverse.transform(point.x, point.y)
        return GeoPoint(lat=float(lat), lng=float(lng))

    def project_polygon(self, coords: Sequence[GeoPoint]) -> Polygon:
        """Project an outline given as geographic coordinates."""
        return Polygon(tuple(self.to_local(c) for c in coords))

    def __repr__(self) -> str:
        return f"LocalFrame(origin={self.origin!r})"
