"""
Fixed-route (minibus) domain package.

Public API:
- Domain models: Route, Stop
- Route finding: find_candidate_routes
- Snapshot loading: load_route_catalog, index_routes
"""
from .models import Route, Stop
from .route_finder import find_candidate_routes
from .catalog import load_route_catalog, index_routes

__all__ = [
    "Route",
    "Stop",
    "find_candidate_routes",
    "load_route_catalog",
    "index_routes",
]
