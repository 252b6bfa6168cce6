"""
Purpose: Geospatial distance primitive.
What it does:
Great-circle (haversine) distance between two (lat, lon) points, plus the
polyline helpers the route finder and the estimators build on.

Polyline distance is measured to VERTICES only, not to segments. This is a
known coarse approximation: a long straight segment with no intermediate
vertices can pass close to a point and still be reported as far away.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

LatLon = Tuple[float, float]

EARTH_RADIUS_M = 6_371_000.0


def distance_m(a: LatLon, b: LatLon) -> float:
    """Haversine distance in meters. Symmetric, and zero iff a == b."""
    lat1, lon1 = map(math.radians, a)
    lat2, lon2 = map(math.radians, b)
    d_lat = lat2 - lat1
    d_lon = lon2 - lon1

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # rounding can push h just past 1 for antipodal points
    h = min(1.0, max(0.0, h))
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def min_distance_to_polyline(point: LatLon, polyline: Sequence[LatLon]) -> float:
    """
    Minimum distance from `point` to any vertex of `polyline`.
    An empty polyline is never within reach (inf).
    """
    return min((distance_m(point, vertex) for vertex in polyline), default=math.inf)


def nearest_vertex_index(point: LatLon, polyline: Sequence[LatLon]) -> int:
    if not polyline:
        raise ValueError("polyline must contain at least one point")
    # ties go to the earliest vertex
    return min(range(len(polyline)), key=lambda index: distance_m(point, polyline[index]))


def along_polyline_m(polyline: Sequence[LatLon], start: LatLon, end: LatLon) -> float:
    """
    Path length along `polyline` between the vertices nearest to `start`
    and `end`. Direction is ignored: fixed routes run both ways.
    """
    first = nearest_vertex_index(start, polyline)
    last = nearest_vertex_index(end, polyline)
    if first > last:
        first, last = last, first

    return sum(distance_m(polyline[i], polyline[i + 1]) for i in range(first, last))
