"""Polygon measurement primitives.

Pure functions over Points and Polygons in the local planar frame, plus the
great-circle helpers used on raw geographic input. None of them mutate their
arguments.
"""

from __future__ import annotations

import math

from ..value_objects import BoundingBox, GeoPoint, Point, Polygon

__all__ = [
    "EARTH_RADIUS_M",
    "FEET_PER_METER",
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
]

EARTH_RADIUS_M = 6371000.0
FEET_PER_METER = 3.28084


def polygon_area(polygon: Polygon) -> float:
    """Unsigned area of the polygon (shoelace formula).

    Independent of winding order, starting vertex and translation. A polygon
    with fewer than three vertices has zero area.
    """
    points = polygon.points
    if len(points) < 3:
        return 0.0
    # Shift to the first vertex so large absolute offsets do not cost precision.
    ox, oy = points[0].x, points[0].y
    twice_area = 0.0
    n = len(points)
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        twice_area += (a.x - ox) * (b.y - oy) - (b.x - ox) * (a.y - oy)
    return abs(twice_area) / 2


def bounding_box(polygon: Polygon) -> BoundingBox:
    """Axis-aligned extents of the polygon.

    Raises:
        ValueError: If the polygon has no points.
    """
    if not polygon.points:
        raise ValueError("Cannot compute the bounding box of an empty polygon")
    xs = [p.x for p in polygon.points]
    ys = [p.y for p in polygon.points]
    return BoundingBox(north=max(ys), south=min(ys), east=max(xs), west=min(xs))


def point_in_polygon(point: Point, polygon: Polygon) -> bool:
    """Even-odd ray casting containment test.

    Points lying exactly on an edge are boundary-ambiguous: the answer is
    deterministic for a given input but may be either value.
    """
    points = polygon.points
    n = len(points)
    if n < 3:
        return False
    inside = False
    j = n - 1
    for i in range(n):
        pi = points[i]
        pj = points[j]
        if (pi.y > point.y) != (pj.y > point.y):
            x_cross = (pj.x - pi.x) * (point.y - pi.y) / (pj.y - pi.y) + pi.x
            if point.x < x_cross:
                inside = not inside
        j = i
    return inside


def great_circle_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance between two geographic points, in feet."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lat = lat2 - lat1
    d_lng = math.radians(b.lng - a.lng)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_M * c * FEET_PER_METER


def planar_distance(p1: Point, p2: Point) -> float:
    """Euclidean distance in the local frame."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def interior_angle(prev: Point, curr: Point, next: Point) -> float:
    """Angle at ``curr`` between the edges to ``prev`` and ``next``, in [0, 180]."""
    a1 = math.atan2(prev.y - curr.y, prev.x - curr.x)
    a2 = math.atan2(next.y - curr.y, next.x - curr.x)
    angle = abs(math.degrees(a1 - a2))
    if angle > 180:
        angle = 360 - angle
    return angle


def edge_bearing(p1: Point, p2: Point) -> float:
    """Compass bearing from p1 to p2 in [0, 360); 0 is north, 90 is east."""
    bearing = math.degrees(math.atan2(p2.x - p1.x, p2.y - p1.y)) % 360.0
    # -0.0 % 360 and tiny negatives can round up to 360.0
    return 0.0 if bearing >= 360.0 else bearing


def initial_bearing(a: GeoPoint, b: GeoPoint) -> float:
    """Initial great-circle bearing from a to b in [0, 360)."""
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    d_lng = math.radians(b.lng - a.lng)
    y = math.sin(d_lng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lng)
    bearing = math.degrees(math.atan2(y, x)) % 360.0
    return 0.0 if bearing >= 360.0 else bearing


def longest_edge(polygon: Polygon) -> tuple[int, int]:
    """Indices (start, end) of the longest edge; the first one wins ties.

    Raises:
        ValueError: If the polygon has fewer than two points.
    """
    n = len(polygon.points)
    if n < 2:
        raise ValueError("A polygon needs at least two points to have an edge")
    best = (0, 1 % n)
    best_length = -1.0
    for i in range(n):
        j = (i + 1) % n
        length = planar_distance(polygon.points[i], polygon.points[j])
        if length > best_length:
            best_length = length
            best = (i, j)
    return best


def horizontal_span(polygon: Polygon, y: float) -> tuple[float, float] | None:
    """West-most and east-most crossings of the horizontal line at ``y``.

    Uses the same half-open edge rule as ``point_in_polygon`` so a line through
    a vertex is not counted twice.

    Returns:
        (west, east) of the crossings, or None if the line misses the polygon.
    """
    crossings: list[float] = []
    for a, b in polygon.edges():
        if (a.y > y) != (b.y > y):
            crossings.append((b.x - a.x) * (y - a.y) / (b.y - a.y) + a.x)
    if len(crossings) < 2:
        return None
    return min(crossings), max(crossings)


def estimate_azimuth(polygon: Polygon, default: float = 180.0) -> float:
    """Facing of a roof outline: perpendicular to its longest edge.

    Args:
        polygon: Roof outline.
        default: Returned when the outline has no edge.

    Returns:
        Bearing of the longest edge plus 90 degrees, in [0, 360).
    """
    if len(polygon.points) < 2:
        return default
    i, j = longest_edge(polygon)
    return (edge_bearing(polygon.points[i], polygon.points[j]) + 90.0) % 360.0
