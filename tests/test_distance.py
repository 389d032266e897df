"""Unit tests for the haversine distance function."""

import math

import pytest

from school_locator.domain.distance import EARTH_RADIUS_KM, haversine_km


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(19.0, 72.0, 19.0, 72.0) == 0.0

    def test_one_degree_of_longitude_at_equator(self):
        assert haversine_km(0, 0, 0, 1) == pytest.approx(111.19, abs=0.01)

    def test_known_distance(self):
        # Mumbai airport -> Andheri ~3.6 km (approx)
        d = haversine_km(19.0896, 72.8656, 19.1176, 72.8490)
        assert 3.0 < d < 5.0

    @pytest.mark.parametrize(
        "a, b",
        [
            ((19.0, 72.0), (20.0, 73.0)),
            ((-33.87, 151.21), (51.51, -0.13)),
            ((90.0, 0.0), (-90.0, 0.0)),
        ],
    )
    def test_symmetric(self, a, b):
        assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a))

    def test_antipodal_points_are_half_circumference(self):
        d = haversine_km(0, 0, 0, 180)
        assert d == pytest.approx(math.pi * EARTH_RADIUS_KM)

    def test_increases_with_separation(self):
        distances = [haversine_km(0, 0, 0, lon) for lon in (0, 1, 10, 90, 179)]
        assert distances == sorted(distances)
        assert len(set(distances)) == len(distances)

    def test_never_negative(self):
        assert haversine_km(-45.5, -170.2, 45.5, 170.2) >= 0
