import importlib

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings
from rest_framework import status
from rest_framework.test import APIRequestFactory

from fleet.feed import load_fleet_snapshot
from fleet.policy import in_service_locator_policy
from matching.matcher import match_vehicles
from matching.models import DestinationQuery
from matching_api.views import MatchVehiclesView
from transit.catalog import load_route_catalog

PILOT_QUERY = {
    "origin": [-24.616, 25.930],
    "destination": [-24.6295, 25.944],
    "radius_m": 200,
    "include_taxis": True,
}


@pytest.fixture
def post():
    factory = APIRequestFactory()
    view = MatchVehiclesView.as_view()

    def _post(payload):
        request = factory.post("/api/v1/match/", payload, format="json")
        return view(request)

    return _post


def test_returns_ranked_candidates(post, sampledata_dir):
    response = post(PILOT_QUERY)

    assert response.status_code == status.HTTP_200_OK
    assert response.data["count"] == 3

    candidates = response.data["candidates"]
    assert {item["vehicle"]["id"] for item in candidates} == {"v4", "v5", "v6"}
    etas = [item["eta_to_destination_min"] for item in candidates]
    assert etas == sorted(etas)

    # the wire shape is the same as CandidateVehicle.to_dict()
    expected = match_vehicles(
        DestinationQuery(
            origin=tuple(PILOT_QUERY["origin"]),
            destination=tuple(PILOT_QUERY["destination"]),
            radius_m=200,
            include_taxis=True,
        ),
        load_route_catalog(sampledata_dir / "routes.json"),
        load_fleet_snapshot(sampledata_dir / "vehicles.csv"),
    )
    assert [dict(item) for item in candidates] == [candidate.to_dict() for candidate in expected]


def test_taxi_defaults_to_excluded(post):
    payload = {key: value for key, value in PILOT_QUERY.items() if key != "include_taxis"}

    response = post(payload)

    assert response.status_code == status.HTTP_200_OK
    assert all(item["route"] is not None for item in response.data["candidates"])


def test_status_filter_from_settings(post):
    with override_settings(SMARTRIDE_LOCATOR_POLICY=in_service_locator_policy()):
        response = post(PILOT_QUERY)

    assert response.status_code == status.HTTP_200_OK
    assert {item["vehicle"]["id"] for item in response.data["candidates"]} == {"v4", "v5"}


def test_bad_status_filter_fails_at_startup(monkeypatch):
    from smartride_backend import settings as service_settings

    monkeypatch.setenv("SMARTRIDE_ELIGIBLE_STATUSES", "online,parked")
    with pytest.raises(ImproperlyConfigured, match="parked"):
        importlib.reload(service_settings)

    monkeypatch.setenv("SMARTRIDE_ELIGIBLE_STATUSES", " online , full ")
    importlib.reload(service_settings)
    assert service_settings.SMARTRIDE_LOCATOR_POLICY == in_service_locator_policy()

    monkeypatch.delenv("SMARTRIDE_ELIGIBLE_STATUSES")
    importlib.reload(service_settings)


@pytest.mark.parametrize(
    "override, field",
    [
        ({"radius_m": 0}, "radius_m"),
        ({"radius_m": -50}, "radius_m"),
        ({"radius_m": "far"}, "radius_m"),
        ({"origin": [-24.616]}, "origin"),
        ({"origin": [-124.616, 25.930]}, "origin"),
        ({"destination": [-24.6295, 250.0]}, "destination"),
        ({"include_taxis": "sometimes"}, "include_taxis"),
    ],
)
def test_rejects_invalid_field_with_400(post, override, field):
    response = post({**PILOT_QUERY, **override})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert field in response.data


def test_missing_fields_are_named(post):
    response = post({"include_taxis": True})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert {"origin", "destination", "radius_m"} <= set(response.data)
