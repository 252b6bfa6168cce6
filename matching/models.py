"""
Purpose: Input and output shapes of the matching engine.
What it does:
- DestinationQuery: the rider's request (origin, destination, radius, taxis?)
- CandidateVehicle: one ranked option, annotated with ETA, fare and occupancy

Both are frozen: the engine never mutates a query, a Vehicle or a Route,
every ranking run produces new CandidateVehicle values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from fleet.models import Vehicle
from routing.validation import InvalidInputError, validate_point, validate_radius
from transit.models import Route

LatLon = Tuple[float, float]

TAXI_LABEL = "Mobile Taxi"


@dataclass(frozen=True)
class DestinationQuery:
    origin: LatLon
    destination: LatLon
    radius_m: float
    include_taxis: bool = False

    def __post_init__(self):
        object.__setattr__(self, "origin", validate_point(self.origin, "origin"))
        object.__setattr__(self, "destination", validate_point(self.destination, "destination"))
        object.__setattr__(self, "radius_m", validate_radius(self.radius_m))
        if not isinstance(self.include_taxis, bool):
            raise InvalidInputError("include_taxis", "must be a boolean")


@dataclass(frozen=True)
class CandidateVehicle:
    """
    A vehicle judged eligible for the rider's trip.

    route is None for taxis, and for vehicles whose route_id did not resolve
    to a catalog entry. will_pass_near_destination is True iff route is set.
    """
    vehicle: Vehicle
    route: Optional[Route]
    eta_to_pickup_min: int
    eta_to_destination_min: int
    fare_estimate: float
    occupancy_pct: int
    will_pass_near_destination: bool
    is_over_capacity: bool
    currency: str = "BWP"

    @property
    def label(self) -> str:
        return self.route.name if self.route is not None else TAXI_LABEL

    def to_dict(self) -> Dict[str, Any]:
        """JSON shape consumed by the rider app; field names are part of the contract."""
        return {
            "vehicle": self.vehicle.to_dict(),
            "route": self.route.to_dict() if self.route is not None else None,
            "eta_to_pickup_min": self.eta_to_pickup_min,
            "eta_to_destination_min": self.eta_to_destination_min,
            "fare_estimate": self.fare_estimate,
            "occupancy_pct": self.occupancy_pct,
            "will_pass_near_destination": self.will_pass_near_destination,
            "is_over_capacity": self.is_over_capacity,
            "currency": self.currency,
        }
