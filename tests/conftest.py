import os
from pathlib import Path

import django
import pytest

from fleet.models import Vehicle, VehicleStatus
from transit.models import Route, Stop

# The API tests import DRF views; configure Django once for the whole session.
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "smartride_backend.settings")
django.setup()

SAMPLEDATA_DIR = Path(__file__).resolve().parent.parent / "sampledata"

# Test geometry sits on the prime meridian near the equator:
# 0.001 degrees of latitude is ~111.2 m.
ORIGIN = (0.0, 0.0)
DESTINATION = (0.05, 0.0)


@pytest.fixture
def sampledata_dir():
    return SAMPLEDATA_DIR


@pytest.fixture
def origin():
    return ORIGIN


@pytest.fixture
def destination():
    return DESTINATION


@pytest.fixture
def corridor_route():
    # last vertex is ~100 m east of the destination
    return Route(
        id="r1",
        name="Equator Corridor",
        polyline=((0.0, 0.0), (0.025, 0.0), (0.05, 0.0009)),
        stops=(
            Stop(id="s1", name="Origin Rank", coords=(0.0, 0.0)),
            Stop(id="s2", name="Terminus", coords=(0.05, 0.0009)),
        ),
    )


@pytest.fixture
def far_route():
    return Route(id="r2", name="Far Away Line", polyline=((1.0, 1.0), (1.01, 1.0)))


@pytest.fixture
def catalog(corridor_route, far_route):
    return [corridor_route, far_route]


@pytest.fixture
def minibus():
    # on r1, ~150 m from the origin
    return Vehicle.new("v1", 0.00135, 0.0, capacity=16, occupancy=8, route_id="r1", plate="B 123 ABC")


@pytest.fixture
def taxi():
    # no route, ~50 m from the origin
    return Vehicle.new("t1", 0.00045, 0.0, capacity=4, occupancy=1, plate="TX 45 HJK")


@pytest.fixture
def off_route_minibus():
    # near the origin but its route never gets close to the destination
    return Vehicle.new("v2", 0.0009, 0.0, capacity=16, occupancy=3, route_id="r2")


@pytest.fixture
def fleet(minibus, taxi, off_route_minibus):
    return [minibus, taxi, off_route_minibus]


@pytest.fixture
def maintenance_minibus():
    return Vehicle.new("v9", 0.0005, 0.0, capacity=16, occupancy=0, route_id="r1", status=VehicleStatus.MAINTENANCE)
