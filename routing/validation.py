"""
Purpose: Input validation shared by every stage of the matching pipeline.
What it does:
Defines InvalidInputError and the small checks for coordinates and radii.
Callers name the field being checked so that a wrapping service can reject
the request with the exact field that was wrong.
"""

from __future__ import annotations

import math
from typing import Any, Tuple

LatLon = Tuple[float, float]


class InvalidInputError(ValueError):
    """Raised when a query, vehicle or route is malformed."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def validate_point(value: Any, field: str) -> LatLon:
    """
    Checks a (lat, lon) pair and returns it as a tuple of floats.
    Rejects NaN/inf, wrong arity and out-of-range degrees.
    """
    try:
        lat, lon = value
        lat = float(lat)
        lon = float(lon)
    except (TypeError, ValueError):
        raise InvalidInputError(field, "expected a (lat, lon) pair")

    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidInputError(field, "coordinates must be finite numbers")
    if not -90.0 <= lat <= 90.0:
        raise InvalidInputError(field, f"latitude {lat} out of range [-90, 90]")
    if not -180.0 <= lon <= 180.0:
        raise InvalidInputError(field, f"longitude {lon} out of range [-180, 180]")

    return (lat, lon)


def validate_radius(radius_m: Any, field: str = "radius_m") -> float:
    try:
        radius = float(radius_m)
    except (TypeError, ValueError):
        raise InvalidInputError(field, "expected a number of meters")

    if not math.isfinite(radius) or radius <= 0:
        raise InvalidInputError(field, "must be > 0")
    return radius
