"""
Unit tests for the projected-coordinate conversion
"""

import math

import pytest

from backend.sonarlog.projection import EARTH_RADIUS, projected_to_lonlat


class TestProjection:
    """Inverse spherical Mercator on the recorder's polar radius"""

    def test_origin_maps_to_null_island(self):
        lon, lat = projected_to_lonlat(0, 0)
        assert lon == 0.0
        assert lat == pytest.approx(0.0, abs=1e-12)

    def test_matches_closed_form(self):
        x, y = 1_000_000, 2_000_000
        lon, lat = projected_to_lonlat(x, y)
        assert lon == pytest.approx(math.degrees(x / 6356752.3142), abs=1e-9)
        expected_lat = math.degrees(2 * math.atan(math.exp(y / 6356752.3142)) - math.pi / 2)
        assert lat == pytest.approx(expected_lat, abs=1e-9)

    def test_radius_is_polar_radius(self):
        assert EARTH_RADIUS == 6356752.3142

    def test_southern_and_western_hemispheres(self):
        lon, lat = projected_to_lonlat(-1_000_000, -2_000_000)
        assert lon < 0
        assert lat < 0

    @pytest.mark.parametrize("start", [-200_000_000, -1_000_000, -1, 0, 1, 5_000_000, 150_000_000])
    def test_monotonic_in_both_axes(self, start):
        lon_a, lat_a = projected_to_lonlat(start, start)
        lon_b, lat_b = projected_to_lonlat(start + 1_000_000, start + 1_000_000)
        assert lon_b > lon_a
        assert lat_b > lat_a

    def test_extreme_int32_values_stay_in_range(self):
        for v in (-2**31, 2**31 - 1):
            lon, lat = projected_to_lonlat(v, v)
            assert math.isfinite(lon)
            assert -90.0 <= lat <= 90.0
