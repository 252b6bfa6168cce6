"""
Purpose: Supply the matching engine with its inputs inside the service.
What it does:
Loads the route catalog and fleet snapshots from the paths configured in
settings, and hands out the locator policy parsed from the configured status
filter at startup. A fresh snapshot is read per request; consistency of the
files is the fleet feed's job.
"""

from typing import List, Tuple

from django.conf import settings

from fleet.feed import load_fleet_snapshot
from fleet.models import Vehicle
from fleet.policy import LocatorPolicy
from transit.catalog import load_route_catalog
from transit.models import Route


def load_snapshot() -> Tuple[List[Route], List[Vehicle]]:
    catalog = load_route_catalog(settings.SMARTRIDE_ROUTES_PATH)
    fleet = load_fleet_snapshot(settings.SMARTRIDE_FLEET_PATH)
    return catalog, fleet


def get_locator_policy() -> LocatorPolicy:
    return settings.SMARTRIDE_LOCATOR_POLICY
