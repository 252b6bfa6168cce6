"""
Purpose: Load a route catalog snapshot from disk.
What it does:
Reads the JSON list published by the route-catalog service and builds
immutable Route objects. Format:

[
  {"id": "r1", "name": "...", "polyline": [[lat, lon], ...],
   "stops": [{"id": "s1", "name": "...", "coords": [lat, lon]}]}
]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Sequence, Union

from .models import Route


def load_route_catalog(path: Union[str, Path]) -> List[Route]:
    with open(path, "r", encoding="utf-8") as file:
        raw = json.load(file)

    if not isinstance(raw, list):
        raise ValueError(f"Route catalog {path} must contain a JSON list of routes")

    return [Route.from_dict(entry) for entry in raw]


def index_routes(catalog: Sequence[Route]) -> Dict[str, Route]:
    """
    Maps route id -> Route. If the catalog repeats an id, the first entry wins
    (same as a linear find over the catalog).
    """
    by_id: Dict[str, Route] = {}
    for route in catalog:
        by_id.setdefault(route.id, route)
    return by_id
