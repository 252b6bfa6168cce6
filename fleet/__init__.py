"""
Fleet domain package.

Public API:
- Domain models: Vehicle, VehicleStatus
- Locator configuration: LocatorPolicy and its factories
- Vehicle locating: find_vehicles_near
- Snapshot loading: load_fleet_snapshot
"""
from .models import Vehicle, VehicleStatus
from .policy import (
    LocatorPolicy,
    default_locator_policy,
    in_service_locator_policy,
    locator_policy_for_statuses,
)
from .selection import find_vehicles_near
from .feed import load_fleet_snapshot

__all__ = [
    "Vehicle",
    "VehicleStatus",
    "LocatorPolicy",
    "default_locator_policy",
    "in_service_locator_policy",
    "locator_policy_for_statuses",
    "find_vehicles_near",
    "load_fleet_snapshot",
]
