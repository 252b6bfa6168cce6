import pytest
import requests

from routing import osrm_client
from routing.osrm_client import OSRMClient, OSRMError


class FakeResponse:
    def __init__(self, payload):
        self.payload = payload

    def json(self):
        return self.payload


@pytest.fixture
def captured(monkeypatch):
    """
    Replaces requests.get inside the client; the test sets captured["payload"].
    """
    state = {"payload": {"code": "Ok", "routes": [{"distance": 1234.5, "duration": 321.0}]}}

    def fake_get(url, params=None, timeout=None):
        state["url"] = url
        state["params"] = params
        state["timeout"] = timeout
        return FakeResponse(state["payload"])

    monkeypatch.setattr(osrm_client.requests, "get", fake_get)
    return state


def test_compute_route_formats_lon_lat_and_normalizes(captured):
    client = OSRMClient(base_url="http://osrm.local/", timeout=7)

    result = client.compute_route([(-24.616, 25.930), (-24.6295, 25.944)])

    assert result == {"distance": 1234.5, "duration": 321.0}
    assert captured["url"] == "http://osrm.local/route/v1/driving/25.93,-24.616;25.944,-24.6295"
    assert captured["params"] == {"overview": "false"}
    assert captured["timeout"] == 7


def test_non_ok_code_raises(captured):
    captured["payload"] = {"code": "NoRoute", "message": "Impossible route between points"}
    client = OSRMClient(base_url="http://osrm.local")

    with pytest.raises(OSRMError, match="Impossible route"):
        client.compute_route([(0.0, 0.0), (0.0, 1.0)])


def test_transport_failure_raises_osrm_error(monkeypatch):
    def broken_get(url, params=None, timeout=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(osrm_client.requests, "get", broken_get)
    client = OSRMClient(base_url="http://osrm.local")

    with pytest.raises(OSRMError, match="connection refused"):
        client.compute_route([(0.0, 0.0), (0.0, 1.0)])


def test_needs_two_coordinates():
    client = OSRMClient(base_url="http://osrm.local")
    with pytest.raises(ValueError):
        client.compute_route([(0.0, 0.0)])


def test_base_url_comes_from_environment(monkeypatch):
    monkeypatch.setattr(osrm_client, "BASE_URL", None)
    with pytest.raises(ValueError):
        OSRMClient()

    monkeypatch.setattr(osrm_client, "BASE_URL", "http://router.example")
    assert OSRMClient().base_url == "http://router.example"
