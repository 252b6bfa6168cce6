"""
Purpose: Domain models for the fixed-route (minibus) catalog.
What it does:
- Defines Stop and Route as immutable snapshots owned by the route catalog.
- Validates coordinates on construction so malformed catalog entries
  never reach the matching pipeline.

Rule: No distance math, no matching logic. Models only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from routing.validation import InvalidInputError, validate_point

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class Stop:
    """
    A published boarding point on a route.
    """
    id: str
    name: str
    coords: LatLon

    def __post_init__(self):
        object.__setattr__(self, "coords", validate_point(self.coords, f"stops[{self.id}].coords"))

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "coords": list(self.coords)}


@dataclass(frozen=True)
class Route:
    """
    A fixed minibus route: an ordered polyline plus its stop sequence.
    The polyline must contain at least one point.
    """
    id: str
    name: str
    polyline: Tuple[LatLon, ...]
    stops: Tuple[Stop, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.polyline:
            raise InvalidInputError(f"routes[{self.id}].polyline", "must contain at least one point")

        polyline = tuple(
            validate_point(point, f"routes[{self.id}].polyline[{index}]")
            for index, point in enumerate(self.polyline)
        )
        # frozen dataclass: normalise lists into tuples so the snapshot stays hashable and read-only
        object.__setattr__(self, "polyline", polyline)
        object.__setattr__(self, "stops", tuple(self.stops))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Route:
        route_id = str(data["id"])
        return cls(
            id=route_id,
            name=str(data.get("name", route_id)),
            polyline=tuple(tuple(point) for point in data.get("polyline", ())),
            stops=tuple(
                Stop(id=str(stop["id"]), name=str(stop.get("name", "")), coords=tuple(stop["coords"]))
                for stop in data.get("stops", ())
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "polyline": [list(point) for point in self.polyline],
            "stops": [stop.to_dict() for stop in self.stops],
        }
