#Purpose: Route finding (the "which combis go there" layer).
#Given a destination point and a radius, keeps every catalog route whose
#polyline passes within the radius of the destination.
#Output: routes in catalog order (empty is a valid answer, not a failure).

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from routing.distance import min_distance_to_polyline
from routing.validation import validate_point, validate_radius
from .models import Route

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


def find_candidate_routes(destination: LatLon, radius_m: float, catalog: Sequence[Route]) -> List[Route]:
    """
    Returns the routes from `catalog` that pass near `destination`.

    A route passes near the destination when one of its polyline vertices is
    within `radius_m` meters of it (vertex-only approximation, see
    routing.distance). Growing the radius can only add routes, never drop one.
    """
    destination = validate_point(destination, "destination")
    radius_m = validate_radius(radius_m)

    routes = [
        route for route in catalog
        if min_distance_to_polyline(destination, route.polyline) <= radius_m
    ]

    logger.debug("%d of %d routes within %.0fm of destination", len(routes), len(catalog), radius_m)
    return routes
