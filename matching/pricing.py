#Purpose: Fare estimation policy (the "what will it cost" layer).
#Takes a trip distance and whether the vehicle runs a fixed route, returns a fare.
#Combi fares are a small base plus a bounded distance component,
#taxi fares a larger base plus a bounded distance component.
#Any object with an estimate(route, trip_distance_m) method can replace the default.

from __future__ import annotations

import math
from typing import Optional, Protocol

from transit.models import Route
from .policy import FareBand


def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for positive values (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


class FareEstimator(Protocol):
    def estimate(self, route: Optional[Route], trip_distance_m: float) -> float:
        ...


class DistanceBandFareEstimator:
    """
    Deterministic fare: band.base + min(band.max_variable, round(band.per_km * km)).
    Results are whole currency units.
    """

    def __init__(self, route_band: FareBand, taxi_band: FareBand):
        route_band.validate("route_band")
        taxi_band.validate("taxi_band")
        self.route_band = route_band
        self.taxi_band = taxi_band

    def estimate(self, route: Optional[Route], trip_distance_m: float) -> float:
        band = self.route_band if route is not None else self.taxi_band
        variable = min(band.max_variable, round_half_up(band.per_km * max(trip_distance_m, 0.0) / 1000.0))
        return float(band.base + variable)
