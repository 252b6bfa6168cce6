"""
Purpose: Core data models for the fleet domain.
What it does:
Defines the structure of a Vehicle and its status as a point-in-time snapshot
produced by the fleet-state feed. The matching engine only reads these.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from routing.validation import InvalidInputError, validate_point

LatLon = Tuple[float, float]


class VehicleStatus(str, Enum):
    """
    The state a vehicle reports to the fleet feed.
    """
    OFFLINE = "offline"
    ONLINE = "online"
    ON_BREAK = "on_break"
    MAINTENANCE = "maintenance"
    FULL = "full"


@dataclass(frozen=True)
class Vehicle:
    """
    A stateless snapshot of a vehicle at a specific point in time.

    A vehicle without a route_id is an unscheduled (mobile) taxi.
    Occupancy may exceed capacity; capacity itself must be positive.
    """
    id: str
    capacity: int
    occupancy: int
    coords: LatLon
    status: VehicleStatus = VehicleStatus.ONLINE
    route_id: Optional[str] = None

    # display-only fields carried through to candidates
    owner_id: Optional[str] = None
    plate: Optional[str] = None

    def __post_init__(self):
        if self.capacity <= 0:
            raise InvalidInputError(f"vehicles[{self.id}].capacity", f"must be > 0, got {self.capacity}")
        if self.occupancy < 0:
            raise InvalidInputError(f"vehicles[{self.id}].occupancy", f"must be >= 0, got {self.occupancy}")

        object.__setattr__(self, "coords", validate_point(self.coords, f"vehicles[{self.id}].coords"))

    @property
    def is_taxi(self) -> bool:
        return self.route_id is None

    @classmethod
    def new(
        cls,
        vehicle_id: str,
        lat: float,
        lon: float,
        capacity: int,
        occupancy: int = 0,
        status: str | VehicleStatus = VehicleStatus.ONLINE,
        route_id: Optional[str] = None,
        owner_id: Optional[str] = None,
        plate: Optional[str] = None,
    ) -> Vehicle:
        if isinstance(status, str):
            try:
                status = VehicleStatus(status)
            except ValueError:
                raise InvalidInputError(f"vehicles[{vehicle_id}].status", f"unknown status {status!r}")

        return cls(
            id=vehicle_id,
            capacity=int(capacity),
            occupancy=int(occupancy),
            coords=(lat, lon),
            status=status,
            route_id=route_id or None, # empty string from a feed means "no route"
            owner_id=owner_id,
            plate=plate,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "plate": self.plate,
            "capacity": self.capacity,
            "route_id": self.route_id,
            "status": self.status.value,
            "occupancy": self.occupancy,
            "coords": list(self.coords),
        }
