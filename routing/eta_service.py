#Purpose: ETA estimation policy.
#Converts distances (or routing outputs) into minute estimates used by the ranker:
#pickup ETA: vehicle -> rider
#transit ETA: riding a fixed route to the destination
#direct ETA: taxi straight to the destination
#Keeps ETA logic separate from ranking so models can be swapped without touching it.
#Estimators return raw minutes; rounding and floors belong to the ranker.

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, Tuple

from .distance import along_polyline_m, distance_m, nearest_vertex_index
from .osrm_client import OSRMClient

LatLon = Tuple[float, float]


class EtaEstimator(Protocol):
    def pickup_minutes(self, vehicle_coords: LatLon, target: LatLon) -> float:
        ...

    def transit_minutes(self, polyline: Sequence[LatLon], vehicle_coords: LatLon, destination: LatLon) -> float:
        ...

    def direct_trip_minutes(self, vehicle_coords: LatLon, destination: LatLon) -> float:
        ...


class DistanceProportionalEtaEstimator:
    """
    Deterministic estimator: distance divided by a constant speed.

    - pickup uses the great-circle distance
    - transit uses the distance ALONG the route polyline
    - direct (taxi) uses the great-circle distance at taxi speed
    """

    def __init__(
        self,
        pickup_speed_m_per_min: float = 200.0,
        transit_speed_m_per_min: float = 300.0,
        taxi_speed_m_per_min: float = 500.0,
    ):
        for name, speed in (
            ("pickup_speed_m_per_min", pickup_speed_m_per_min),
            ("transit_speed_m_per_min", transit_speed_m_per_min),
            ("taxi_speed_m_per_min", taxi_speed_m_per_min),
        ):
            if speed <= 0:
                raise ValueError(f"{name} must be > 0")

        self.pickup_speed_m_per_min = pickup_speed_m_per_min
        self.transit_speed_m_per_min = transit_speed_m_per_min
        self.taxi_speed_m_per_min = taxi_speed_m_per_min

    def pickup_minutes(self, vehicle_coords: LatLon, target: LatLon) -> float:
        return distance_m(vehicle_coords, target) / self.pickup_speed_m_per_min

    def transit_minutes(self, polyline: Sequence[LatLon], vehicle_coords: LatLon, destination: LatLon) -> float:
        return along_polyline_m(polyline, vehicle_coords, destination) / self.transit_speed_m_per_min

    def direct_trip_minutes(self, vehicle_coords: LatLon, destination: LatLon) -> float:
        return distance_m(vehicle_coords, destination) / self.taxi_speed_m_per_min


class OsrmEtaEstimator:
    """
    Road-network estimator backed by an OSRM /route call per estimate.
    Transit follows the route polyline as OSRM waypoints so the minibus
    is not allowed to shortcut its corridor.

    Not used by default: every call is an HTTP round trip.
    """

    def __init__(self, osrm: Optional[OSRMClient] = None):
        self.osrm = osrm or OSRMClient()

    def _minutes(self, waypoints: List[LatLon]) -> float:
        return self.osrm.compute_route(waypoints)["duration"] / 60.0

    def pickup_minutes(self, vehicle_coords: LatLon, target: LatLon) -> float:
        return self._minutes([vehicle_coords, target])

    def transit_minutes(self, polyline: Sequence[LatLon], vehicle_coords: LatLon, destination: LatLon) -> float:
        first = nearest_vertex_index(vehicle_coords, polyline)
        last = nearest_vertex_index(destination, polyline)
        if first <= last:
            corridor = list(polyline[first:last + 1])
        else:
            corridor = list(reversed(polyline[last:first + 1]))

        return self._minutes([vehicle_coords] + corridor + [destination])

    def direct_trip_minutes(self, vehicle_coords: LatLon, destination: LatLon) -> float:
        return self._minutes([vehicle_coords, destination])
