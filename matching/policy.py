"""
Purpose: Central configuration for ranking candidates (single source of truth).
What it does:

Stores all tunable constants used to annotate a candidate:

PICKUP_SPEED_M_PER_MIN = 200   (pickup ETA = distance / speed)
MIN_ROUTE_ETA_MIN = 5          (floor for combi trips)
MIN_TAXI_ETA_MIN = 8           (floor for taxi trips)
ROUTE FARE = 6 + up to 5       (Pula)
TAXI FARE = 25 + up to 15      (Pula)

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FareBand:
    """
    fare = base + min(max_variable, round(per_km * trip_km))
    """
    base: float
    per_km: float
    max_variable: float

    def validate(self, name: str) -> None:
        if self.base <= 0:
            raise ValueError(f"{name}.base must be > 0")
        if self.per_km < 0:
            raise ValueError(f"{name}.per_km must be >= 0")
        if self.max_variable < 0:
            raise ValueError(f"{name}.max_variable must be >= 0")


@dataclass(frozen=True)
class RankingPolicy:
    """
    Central configuration for the candidate ranker and its default estimators.
    """

    # --- Speeds (meters per minute) ---
    # Pickup ETA scaling: 200 m/min is ~12 km/h of stop-and-go city driving.
    pickup_speed_m_per_min: float = 200.0
    # A combi riding its corridor, stops included (~18 km/h).
    transit_speed_m_per_min: float = 300.0
    # A taxi driving straight to the destination (~30 km/h).
    taxi_speed_m_per_min: float = 500.0

    # --- ETA floors (minutes) ---
    min_pickup_eta_min: int = 1
    min_route_eta_min: int = 5
    min_taxi_eta_min: int = 8

    # --- Fares ---
    route_fare: FareBand = field(default_factory=lambda: FareBand(base=6.0, per_km=1.0, max_variable=5.0))
    taxi_fare: FareBand = field(default_factory=lambda: FareBand(base=25.0, per_km=3.0, max_variable=15.0))
    currency: str = "BWP"

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup.
        """
        if self.pickup_speed_m_per_min <= 0:
            raise ValueError("pickup_speed_m_per_min must be > 0")

        if self.transit_speed_m_per_min <= 0:
            raise ValueError("transit_speed_m_per_min must be > 0")

        if self.taxi_speed_m_per_min <= 0:
            raise ValueError("taxi_speed_m_per_min must be > 0")

        if self.min_pickup_eta_min < 1:
            raise ValueError("min_pickup_eta_min must be >= 1")

        if self.min_route_eta_min < 1 or self.min_taxi_eta_min < 1:
            raise ValueError("ETA floors must be >= 1 minute")

        self.route_fare.validate("route_fare")
        self.taxi_fare.validate("taxi_fare")

        if not self.currency:
            raise ValueError("currency must be set")


def default_ranking_policy() -> RankingPolicy:
    """
    Convenience factory for the default policy.
    """
    p = RankingPolicy()
    p.validate()
    return p


def peak_ranking_policy() -> RankingPolicy:
    """
    Example: morning/evening peaks. Slower traffic for everyone and a taxi
    surcharge. You can wire this up later to a time-of-day switch.
    """
    p = RankingPolicy(
        pickup_speed_m_per_min=150.0,
        transit_speed_m_per_min=220.0,
        taxi_speed_m_per_min=350.0,
        taxi_fare=FareBand(base=30.0, per_km=3.5, max_variable=15.0),
    )
    p.validate()
    return p
