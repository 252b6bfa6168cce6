"""
Purpose: Ranking model (the "which option is best" layer).
What it does:

Takes located vehicles (already eligible) and the rider's destination and
computes for each one:

eta_to_pickup_min = max(1, round(distance(vehicle, destination) / pickup speed))

eta_to_destination_min:
    combi: max(5, pickup + transit estimate along the route)
    taxi:  max(8, direct trip estimate)

fare_estimate from the fare estimator (combi band vs taxi band)

occupancy_pct = round(100 * occupancy / capacity)

is_over_capacity = occupancy >= capacity

Outputs: candidates sorted by eta_to_destination_min ascending. The sort is
stable, so ties keep the order the vehicles came in.

Rule: Ranking reads vehicles and routes, it never changes them.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from fleet.models import Vehicle
from routing.distance import along_polyline_m, distance_m
from routing.eta_service import DistanceProportionalEtaEstimator, EtaEstimator
from routing.validation import validate_point
from transit.catalog import index_routes
from transit.models import Route
from .models import CandidateVehicle
from .policy import RankingPolicy, default_ranking_policy
from .pricing import DistanceBandFareEstimator, FareEstimator, round_half_up

logger = logging.getLogger(__name__)

LatLon = Tuple[float, float]


def rank_candidates(
    vehicles: Sequence[Vehicle],
    destination: LatLon,
    catalog: Sequence[Route],
    *,
    policy: Optional[RankingPolicy] = None,
    eta_estimator: Optional[EtaEstimator] = None,
    fare_estimator: Optional[FareEstimator] = None,
) -> List[CandidateVehicle]:
    """
    Annotate and rank vehicles for a trip to `destination`.

    Inputs:
      - vehicles: output of the vehicle locator (any order, order is the tie-break)
      - destination: rider's (lat, lon) destination
      - catalog: route snapshot used to resolve vehicle.route_id
      - policy: speeds, ETA floors, fare bands (defaults to default_ranking_policy())
      - eta_estimator / fare_estimator: swap in other models without touching ranking

    A route_id that is not in the catalog is not an error: the vehicle is
    ranked like a taxi and a warning is logged.
    """
    policy = policy or default_ranking_policy()
    destination = validate_point(destination, "destination")

    if eta_estimator is None:
        eta_estimator = DistanceProportionalEtaEstimator(
            pickup_speed_m_per_min=policy.pickup_speed_m_per_min,
            transit_speed_m_per_min=policy.transit_speed_m_per_min,
            taxi_speed_m_per_min=policy.taxi_speed_m_per_min,
        )
    if fare_estimator is None:
        fare_estimator = DistanceBandFareEstimator(policy.route_fare, policy.taxi_fare)

    routes_by_id: Dict[str, Route] = index_routes(catalog)

    candidates = [
        _build_candidate(
            vehicle,
            destination,
            route=_resolve_route(vehicle, routes_by_id),
            policy=policy,
            eta_estimator=eta_estimator,
            fare_estimator=fare_estimator,
        )
        for vehicle in vehicles
    ]

    # list.sort is stable: equal ETAs keep input order
    candidates.sort(key=lambda candidate: candidate.eta_to_destination_min)
    return candidates


# -------------------------
# Helpers
# -------------------------

def _resolve_route(vehicle: Vehicle, routes_by_id: Dict[str, Route]) -> Optional[Route]:
    if vehicle.route_id is None:
        return None

    route = routes_by_id.get(vehicle.route_id)
    if route is None:
        logger.warning(
            "Vehicle %s references unknown route %r; ranking it as unrouted",
            vehicle.id, vehicle.route_id,
        )
    return route


def _build_candidate(
    vehicle: Vehicle,
    destination: LatLon,
    *,
    route: Optional[Route],
    policy: RankingPolicy,
    eta_estimator: EtaEstimator,
    fare_estimator: FareEstimator,
) -> CandidateVehicle:
    eta_to_pickup_min = max(
        policy.min_pickup_eta_min,
        round_half_up(eta_estimator.pickup_minutes(vehicle.coords, destination)),
    )

    if route is not None:
        ride_minutes = eta_estimator.transit_minutes(route.polyline, vehicle.coords, destination)
        eta_to_destination_min = max(policy.min_route_eta_min, eta_to_pickup_min + round_half_up(ride_minutes))
        trip_distance_m = along_polyline_m(route.polyline, vehicle.coords, destination)
    else:
        ride_minutes = eta_estimator.direct_trip_minutes(vehicle.coords, destination)
        eta_to_destination_min = max(policy.min_taxi_eta_min, round_half_up(ride_minutes))
        trip_distance_m = distance_m(vehicle.coords, destination)

    fare_estimate = fare_estimator.estimate(route, trip_distance_m)
    if fare_estimate <= 0:
        raise ValueError(f"Fare estimator returned a non-positive fare ({fare_estimate}) for vehicle {vehicle.id}")

    return CandidateVehicle(
        vehicle=vehicle,
        route=route,
        eta_to_pickup_min=eta_to_pickup_min,
        eta_to_destination_min=eta_to_destination_min,
        fare_estimate=fare_estimate,
        occupancy_pct=round_half_up(100 * vehicle.occupancy / vehicle.capacity),
        will_pass_near_destination=route is not None,
        is_over_capacity=vehicle.occupancy >= vehicle.capacity,
        currency=policy.currency,
    )
