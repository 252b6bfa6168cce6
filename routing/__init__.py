#Marks routing as a package.
#Re-exports the geospatial primitive, input validation and ETA estimators
#so other modules import from routing without knowing internal file names.
#No business logic.

from .distance import distance_m, min_distance_to_polyline, along_polyline_m
from .validation import InvalidInputError, validate_point, validate_radius
from .eta_service import EtaEstimator, DistanceProportionalEtaEstimator, OsrmEtaEstimator
from .osrm_client import OSRMClient, OSRMError

__all__ = [
    "distance_m",
    "min_distance_to_polyline",
    "along_polyline_m",
    "InvalidInputError",
    "validate_point",
    "validate_radius",
    "EtaEstimator",
    "DistanceProportionalEtaEstimator",
    "OsrmEtaEstimator",
    "OSRMClient",
    "OSRMError",
]
