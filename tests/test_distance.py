"""Unit tests for distance resolution."""

import pytest

from happyride.domain.distance import haversine_km, is_usable_distance, resolve_distance
from happyride.domain.entities import Location

CHENNAI = Location(13.0827, 80.2707)
BANGALORE = Location(12.9716, 77.5946)


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(13.0, 80.0, 13.0, 80.0) == 0.0

    def test_chennai_to_bangalore(self):
        km = haversine_km(
            CHENNAI.latitude, CHENNAI.longitude, BANGALORE.latitude, BANGALORE.longitude
        )
        assert 285 < km < 295

    def test_symmetric(self):
        a = haversine_km(13.0, 80.0, 12.0, 77.0)
        b = haversine_km(12.0, 77.0, 13.0, 80.0)
        assert a == pytest.approx(b)


class TestResolveDistance:
    def test_supplied_distance_is_used_verbatim(self):
        assert resolve_distance(212.5, CHENNAI, BANGALORE, 150.0) == 212.5

    def test_coordinates_used_when_distance_missing(self):
        assert resolve_distance(None, CHENNAI, BANGALORE, 150.0) == 290.0

    def test_fixed_fallback_without_coordinates(self):
        assert resolve_distance(None, CHENNAI, None, 150.0) == 150.0

    def test_identical_coordinates_fall_back(self):
        assert resolve_distance(None, CHENNAI, CHENNAI, 150.0) == 150.0

    @pytest.mark.parametrize(
        "value,usable",
        [(1, True), (0.1, True), (0, False), (-5, False), (None, False), (True, False)],
    )
    def test_usable_distance(self, value, usable):
        assert is_usable_distance(value) is usable
