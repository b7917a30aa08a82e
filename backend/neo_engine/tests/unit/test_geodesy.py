import math

import pytest

from neo_engine.domain.geodesy import EARTH_RADIUS_KM, haversine_km


def test_one_degree_along_equator():
    assert haversine_km(0, 0, 0, 1) == pytest.approx(111.195, abs=1e-3)


def test_equator_to_pole():
    assert haversine_km(0, 0, 90, 0) == pytest.approx(10007.54, abs=1e-2)


@pytest.mark.parametrize(
    "p, q",
    [
        ((41.0082, 28.9784), (39.9334, 32.8597)),
        ((-33.87, 151.21), (51.51, -0.13)),
        ((0.0, 179.9), (0.0, -179.9)),
    ],
)
def test_symmetric_and_bounded(p, q):
    forward = haversine_km(*p, *q)
    backward = haversine_km(*q, *p)
    assert forward == pytest.approx(backward)
    assert 0 <= forward <= math.pi * EARTH_RADIUS_KM


def test_same_point_is_zero():
    assert haversine_km(12.5, -7.25, 12.5, -7.25) == 0


def test_antipodes_do_not_exceed_half_circumference():
    distance = haversine_km(10, 20, -10, -160)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_KM)
    assert distance <= math.pi * EARTH_RADIUS_KM
