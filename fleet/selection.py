"""
Purpose: Business rules for finding the vehicles a rider can board.
What it does:
Accepts an origin, a radius and the routes that pass near the destination,
and keeps the vehicles that are close to the origin AND either run one of
those routes or are taxis (when the rider asked for taxis).
"""

from __future__ import annotations

import logging
from typing import AbstractSet, List, Optional, Sequence, Tuple

from routing.distance import distance_m
from routing.validation import validate_point, validate_radius
from .models import Vehicle
from .policy import LocatorPolicy, default_locator_policy

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


def find_vehicles_near(
    origin: LatLon,
    radius_m: float,
    matched_route_ids: AbstractSet[str],
    include_taxis: bool,
    fleet: Sequence[Vehicle],
    *,
    policy: Optional[LocatorPolicy] = None,
) -> List[Vehicle]:
    """
    Returns vehicles within `radius_m` of `origin` that either serve one of
    `matched_route_ids` or, if `include_taxis` is set, have no route at all.

    Fleet order is preserved. Status is only filtered when the policy says so.
    """
    policy = policy or default_locator_policy()
    origin = validate_point(origin, "origin")
    radius_m = validate_radius(radius_m)

    located: List[Vehicle] = []
    skipped_by_status = 0

    for vehicle in fleet:
        if distance_m(origin, vehicle.coords) > radius_m:
            continue

        on_route = vehicle.route_id is not None and vehicle.route_id in matched_route_ids
        if not (on_route or (include_taxis and vehicle.is_taxi)):
            continue

        if not policy.allows(vehicle.status):
            skipped_by_status += 1
            continue

        located.append(vehicle)

    logger.debug(
        "%d vehicles within %.0fm of origin (%d skipped by status)",
        len(located), radius_m, skipped_by_status,
    )
    return located
