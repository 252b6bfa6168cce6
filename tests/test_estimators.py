import pytest

from matching.policy import FareBand
from matching.pricing import DistanceBandFareEstimator, round_half_up
from routing.distance import distance_m
from routing.eta_service import DistanceProportionalEtaEstimator, OsrmEtaEstimator


class StubOSRM:
    """Records the waypoints it was asked about, answers 10 minutes per call."""

    def __init__(self, duration_s=600.0):
        self.duration_s = duration_s
        self.calls = []

    def compute_route(self, coordinates):
        self.calls.append(list(coordinates))
        return {"distance": 1000.0, "duration": self.duration_s}


@pytest.fixture
def fares():
    return DistanceBandFareEstimator(
        route_band=FareBand(base=6.0, per_km=1.0, max_variable=5.0),
        taxi_band=FareBand(base=25.0, per_km=3.0, max_variable=15.0),
    )


def test_distance_proportional_estimates():
    estimator = DistanceProportionalEtaEstimator(pickup_speed_m_per_min=200, transit_speed_m_per_min=300, taxi_speed_m_per_min=500)
    start, end = (0.0, 0.0), (0.01, 0.0)
    meters = distance_m(start, end)

    assert estimator.pickup_minutes(start, end) == pytest.approx(meters / 200)
    assert estimator.direct_trip_minutes(start, end) == pytest.approx(meters / 500)
    assert estimator.transit_minutes([start, (0.005, 0.0), end], start, end) == pytest.approx(meters / 300)


def test_distance_proportional_rejects_bad_speeds():
    with pytest.raises(ValueError):
        DistanceProportionalEtaEstimator(pickup_speed_m_per_min=0)
    with pytest.raises(ValueError):
        DistanceProportionalEtaEstimator(taxi_speed_m_per_min=-1)


def test_osrm_estimator_follows_route_corridor():
    osrm = StubOSRM()
    estimator = OsrmEtaEstimator(osrm=osrm)
    polyline = [(0.0, 0.0), (0.01, 0.0), (0.02, 0.0), (0.03, 0.0)]

    # riding "backwards" along the polyline: vertices are visited in reverse
    minutes = estimator.transit_minutes(polyline, (0.0301, 0.0), (0.0099, 0.0))

    assert minutes == 10.0
    assert osrm.calls == [[(0.0301, 0.0), (0.03, 0.0), (0.02, 0.0), (0.01, 0.0), (0.0099, 0.0)]]


def test_osrm_estimator_direct_and_pickup():
    osrm = StubOSRM(duration_s=90.0)
    estimator = OsrmEtaEstimator(osrm=osrm)

    assert estimator.pickup_minutes((0.0, 0.0), (0.01, 0.0)) == 1.5
    assert estimator.direct_trip_minutes((0.0, 0.0), (0.02, 0.0)) == 1.5
    assert osrm.calls == [[(0.0, 0.0), (0.01, 0.0)], [(0.0, 0.0), (0.02, 0.0)]]


def test_fares_are_bounded_and_deterministic(fares, corridor_route):
    for meters in [0, 499, 500, 2_000, 4_400, 10_000, 250_000]:
        combi = fares.estimate(corridor_route, meters)
        cab = fares.estimate(None, meters)

        assert 6.0 <= combi <= 11.0
        assert 25.0 <= cab <= 40.0
        assert combi == fares.estimate(corridor_route, meters)

    assert fares.estimate(corridor_route, 0) == 6.0
    assert fares.estimate(corridor_route, 2_000) == 8.0
    assert fares.estimate(None, 2_000) == 31.0
    assert fares.estimate(None, 250_000) == 40.0


def test_fare_band_validation():
    with pytest.raises(ValueError):
        DistanceBandFareEstimator(FareBand(base=-1, per_km=1, max_variable=1), FareBand(base=25, per_km=3, max_variable=15))


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(0.5) == 1
    assert round_half_up(0.0) == 0
