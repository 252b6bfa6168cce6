"""
Purpose: Orchestrator / decision pipeline (the "glue").
What it does:
Accepts a DestinationQuery plus route catalog and fleet snapshots and runs

    find_candidate_routes -> find_vehicles_near -> rank_candidates

Data only flows forward; no stage calls back into an earlier one.
This is the one call the rider app or an API wrapper should make.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from fleet.models import Vehicle
from fleet.policy import LocatorPolicy
from fleet.selection import find_vehicles_near
from routing.eta_service import EtaEstimator
from transit.models import Route
from transit.route_finder import find_candidate_routes
from .models import CandidateVehicle, DestinationQuery
from .policy import RankingPolicy
from .pricing import FareEstimator
from .scoring import rank_candidates

logger = logging.getLogger(__name__)


def match_vehicles(
    query: DestinationQuery,
    route_catalog: Sequence[Route],
    fleet: Sequence[Vehicle],
    *,
    locator_policy: Optional[LocatorPolicy] = None,
    ranking_policy: Optional[RankingPolicy] = None,
    eta_estimator: Optional[EtaEstimator] = None,
    fare_estimator: Optional[FareEstimator] = None,
) -> List[CandidateVehicle]:
    """
    Ranked transport options for one rider query.

    The same radius is used twice: once around the destination (which routes
    go there) and once around the origin (which vehicles can pick up).
    """
    routes = find_candidate_routes(query.destination, query.radius_m, route_catalog)

    vehicles = find_vehicles_near(
        query.origin,
        query.radius_m,
        {route.id for route in routes},
        query.include_taxis,
        fleet,
        policy=locator_policy,
    )

    candidates = rank_candidates(
        vehicles,
        query.destination,
        route_catalog,
        policy=ranking_policy,
        eta_estimator=eta_estimator,
        fare_estimator=fare_estimator,
    )

    logger.info(
        "Matched %d candidates (%d routes near destination, taxis=%s, radius=%.0fm)",
        len(candidates), len(routes), query.include_taxis, query.radius_m,
    )
    return candidates
