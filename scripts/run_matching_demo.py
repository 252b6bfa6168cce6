import json
import logging
import os

from fleet.feed import load_fleet_snapshot
from fleet.policy import in_service_locator_policy
from matching.matcher import match_vehicles
from matching.models import DestinationQuery
from transit.catalog import load_route_catalog

# Tsholofelo -> ABSA Broadhurst, the pilot's demo trip
ORIGIN = (-24.616, 25.930)
DESTINATION = (-24.6295, 25.944)
RADII_M = [100, 200, 350]


def run_demo():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print("=== SMARTRIDE MATCHING DEMO ===")

    # Resolve the sample data next to the repo root regardless of where the script is run from.
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    catalog = load_route_catalog(os.path.join(base_dir, "sampledata", "routes.json"))
    fleet = load_fleet_snapshot(os.path.join(base_dir, "sampledata", "vehicles.csv"))
    print(f"Loaded {len(catalog)} Routes and {len(fleet)} Vehicles.\n")

    for include_taxis in (False, True):
        for radius_m in RADII_M:
            query = DestinationQuery(
                origin=ORIGIN,
                destination=DESTINATION,
                radius_m=radius_m,
                include_taxis=include_taxis,
            )
            candidates = match_vehicles(query, catalog, fleet)

            print(f"--- radius {radius_m}m, taxis {'on' if include_taxis else 'off'}: {len(candidates)} options ---")
            for candidate in candidates:
                flag = " [FULL]" if candidate.is_over_capacity else ""
                print(
                    f"  {candidate.vehicle.id} {candidate.label}: "
                    f"pickup {candidate.eta_to_pickup_min}m | destination {candidate.eta_to_destination_min}m | "
                    f"{candidate.fare_estimate:.0f} {candidate.currency} | occupancy {candidate.occupancy_pct}%{flag}"
                )

    print("\n--- In-service vehicles only (radius 200m, taxis on) ---")
    query = DestinationQuery(origin=ORIGIN, destination=DESTINATION, radius_m=200, include_taxis=True)
    candidates = match_vehicles(query, catalog, fleet, locator_policy=in_service_locator_policy())
    print(json.dumps([candidate.to_dict() for candidate in candidates], indent=2))

    print("\n=== DEMO COMPLETE ===")


if __name__ == "__main__":
    run_demo()
