"""
Purpose: Load a fleet snapshot exported by the fleet-state feed.
What it does:
Reads a CSV with one row per vehicle and builds Vehicle objects.

Columns: id, owner_id, plate, capacity, route_id, status, occupancy, lat, lon
An empty route_id marks a mobile taxi.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from routing.validation import InvalidInputError
from .models import Vehicle

REQUIRED_COLUMNS = ("id", "capacity", "status", "occupancy", "lat", "lon")


def _optional_text(value: Any) -> Optional[str]:
    if pd.isna(value):
        return None
    text = str(value).strip()
    return text or None


def _required_int(value: Any, field: str) -> int:
    if pd.isna(value):
        raise InvalidInputError(field, "is required")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(field, f"must be a whole number, got {value!r}") from None
    if not number.is_integer():
        raise InvalidInputError(field, f"must be a whole number, got {value!r}")
    return int(number)


def load_fleet_snapshot(path: Union[str, Path]) -> List[Vehicle]:
    df = pd.read_csv(
        path,
        dtype={"id": str, "owner_id": str, "plate": str, "route_id": str, "status": str},
        float_precision="round_trip",
    )

    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Fleet snapshot {path} is missing columns: {', '.join(missing)}")

    vehicles: List[Vehicle] = []
    for _, row in df.iterrows():
        vehicle_id = str(row["id"])
        vehicles.append(
            Vehicle.new(
                vehicle_id=vehicle_id,
                lat=float(row["lat"]),
                lon=float(row["lon"]),
                capacity=_required_int(row["capacity"], f"vehicles[{vehicle_id}].capacity"),
                occupancy=_required_int(row["occupancy"], f"vehicles[{vehicle_id}].occupancy"),
                status=str(row["status"]).strip(),
                route_id=_optional_text(row.get("route_id")),
                owner_id=_optional_text(row.get("owner_id")),
                plate=_optional_text(row.get("plate")),
            )
        )
    return vehicles
