import math
import random

import pytest

from argo_drift.geo import EARTH_RADIUS_KM, compass_point, haversine_km, initial_bearing_deg


def test_one_degree_of_longitude_at_equator():
    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(111.19, abs=0.01)


def test_distance_to_self_is_zero():
    assert haversine_km(12.5, 88.125, 12.5, 88.125) == 0.0


def test_antipodal_distance_is_half_circumference():
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_KM, rel=1e-9)


@pytest.mark.parametrize(
    "a,b",
    [
        ((15.0, 90.0), (16.2, 91.7)),
        ((-25.0, 70.0), (-10.0, 80.0)),
        ((60.0, -179.5), (60.0, 179.5)),
        ((0.0, 0.0), (-89.9, 45.0)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a), rel=1e-9)


def test_distance_across_dateline_is_short():
    assert haversine_km(0.0, 179.5, 0.0, -179.5) == pytest.approx(111.19, abs=0.01)


@pytest.mark.parametrize(
    "dest,expected",
    [
        ((1.0, 0.0), 0.0),
        ((0.0, 1.0), 90.0),
        ((-1.0, 0.0), 180.0),
        ((0.0, -1.0), 270.0),
    ],
)
def test_cardinal_bearings_from_origin(dest, expected):
    assert initial_bearing_deg(0.0, 0.0, *dest) == pytest.approx(expected, abs=1e-9)


def test_bearing_to_self_is_zero():
    assert initial_bearing_deg(10.0, 80.0, 10.0, 80.0) == 0.0


def test_bearing_is_not_symmetric():
    forward = initial_bearing_deg(15.0, 60.0, 40.0, 100.0)
    back = initial_bearing_deg(40.0, 100.0, 15.0, 60.0)
    # great-circle curvature: the return bearing is not simply forward + 180
    assert abs(((forward + 180.0) % 360.0) - back) > 1.0


def test_bearing_always_in_range():
    rng = random.Random(3)
    for _ in range(500):
        b = initial_bearing_deg(
            rng.uniform(-90, 90), rng.uniform(-180, 180), rng.uniform(-90, 90), rng.uniform(-180, 180)
        )
        assert 0.0 <= b < 360.0


@pytest.mark.parametrize(
    "deg,label",
    [
        (0.0, "N"),
        (11.25, "NNE"),
        (45.0, "NE"),
        (90.0, "E"),
        (180.0, "S"),
        (247.5, "WSW"),
        (315.0, "NW"),
        (355.0, "N"),
    ],
)
def test_compass_point(deg, label):
    assert compass_point(deg) == label


@pytest.mark.parametrize("lat1", range(91, 180))
def test_out_of_range_latitudes_give_a_distance(lat1):
    d = haversine_km(float(lat1), 0.0, 180.0 - lat1, 180.0)
    assert isinstance(d, float)
    assert 0.0 <= d <= math.pi * EARTH_RADIUS_KM


@pytest.mark.parametrize(
    "coords",
    [
        (95.0, 200.0, -120.0, -250.0),
        (100.0, 0.0, 80.0, 180.0),
        (-91.0, 360.0, 91.0, -360.0),
    ],
)
def test_unvalidated_coordinates_do_not_raise(coords):
    d = haversine_km(*coords)
    b = initial_bearing_deg(*coords)
    assert isinstance(d, float) and d >= 0.0
    assert 0.0 <= b < 360.0
