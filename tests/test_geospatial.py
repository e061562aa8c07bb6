import pytest

from tour_planner.models.domain import Coordinate
from tour_planner.services.geospatial import EARTH_RADIUS_KM, distance_km, haversine_km


def test_haversine_one_degree_latitude():
    assert haversine_km(0.0, 0.0, 1.0, 0.0) == pytest.approx(111.195, abs=0.01)
    assert distance_km(Coordinate(12.0, 76.0), Coordinate(13.0, 76.0)) == pytest.approx(111.2, abs=0.1)


def test_distance_is_symmetric_and_zero_for_same_point():
    a = Coordinate(12.3052, 76.6552)
    b = Coordinate(12.4218, 76.5720)

    assert distance_km(a, b) == pytest.approx(distance_km(b, a))
    assert distance_km(a, a) == 0.0


def test_triangle_inequality():
    a = Coordinate(12.9716, 77.5946)
    b = Coordinate(12.3052, 76.6552)
    c = Coordinate(13.2000, 74.9833)

    assert distance_km(a, c) <= distance_km(a, b) + distance_km(b, c) + 1e-9
    assert distance_km(a, b) <= distance_km(a, c) + distance_km(c, b) + 1e-9


def test_antipodal_points_are_half_circumference():
    assert haversine_km(0.0, 0.0, 0.0, 180.0) == pytest.approx(EARTH_RADIUS_KM * 3.141592653589793)
