# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for instantaneous solar elevation and azimuth."""
from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from sunward.domain.coordinates import Coordinates
from sunward.domain.solar_elements import compute_solar_elements
from sunward.domain.sun_position import (
    SunPosition,
    elevation_azimuth_deg,
    get_sun_position,
    hour_angle_deg,
)
from sunward.domain.sun_times import calculate_sun_times
from sunward.domain.time_base import julian_century

# Mt. Tamalpais East Peak
MT_TAM = Coordinates(37.9235, -122.5965)
WINTER_DATE = datetime(2026, 1, 26, 12, 0, 0, tzinfo=timezone.utc)


# ── SunPosition dataclass ─────────────────────────────────────────

class TestSunPositionDataclass:

    def test_frozen(self):
        pos = SunPosition(elevation_deg=10.0, azimuth_deg=120.0)
        with pytest.raises(AttributeError):
            pos.elevation_deg = 0.0

    def test_returns_plain_floats(self):
        pos = get_sun_position(WINTER_DATE, MT_TAM)
        assert type(pos.elevation_deg) is float
        assert type(pos.azimuth_deg) is float


# ── Hour angle ────────────────────────────────────────────────────

class TestHourAngle:

    def test_zero_at_solar_noon(self):
        assert hour_angle_deg(720.0, 0.0, 0.0) == pytest.approx(0.0, abs=1e-12)

    def test_fifteen_degrees_per_hour(self):
        assert hour_angle_deg(780.0, 0.0, 0.0) == pytest.approx(15.0, abs=1e-12)

    def test_wraps_into_half_open_range(self):
        """Early UTC hours at far-western longitudes are afternoon, not -290°."""
        ha = hour_angle_deg(60.0, -122.4, 0.0)
        assert -180.0 <= ha < 180.0
        assert ha == pytest.approx((60.0 - (720.0 + 489.6)) / 4.0 + 360.0, abs=1e-9)


# ── Noon and sunrise geometry ─────────────────────────────────────

class TestNoonGeometry:

    def test_winter_noon_elevation_mid_latitude(self):
        """Solar noon in January at ~38N: elevation strictly between 20° and 60°."""
        times = calculate_sun_times(WINTER_DATE, MT_TAM)
        pos = get_sun_position(times.solar_noon, MT_TAM)
        assert 20.0 < pos.elevation_deg < 60.0

    def test_noon_elevation_is_ninety_minus_zenith_distance(self):
        times = calculate_sun_times(WINTER_DATE, MT_TAM)
        pos = get_sun_position(times.solar_noon, MT_TAM)
        dec = compute_solar_elements(julian_century(times.solar_noon)).declination_deg
        expected = 90.0 - abs(MT_TAM.latitude_deg - dec)
        assert pos.elevation_deg == pytest.approx(expected, abs=0.3)

    def test_noon_azimuth_due_south_in_north(self):
        times = calculate_sun_times(WINTER_DATE, MT_TAM)
        pos = get_sun_position(times.solar_noon, MT_TAM)
        assert pos.azimuth_deg == pytest.approx(180.0, abs=1.0)

    def test_noon_azimuth_due_north_in_south(self):
        sydney = Coordinates(-33.8688, 151.2093)
        times = calculate_sun_times(datetime(2025, 6, 21, tzinfo=timezone.utc), sydney)
        pos = get_sun_position(times.solar_noon, sydney)
        assert min(pos.azimuth_deg, 360.0 - pos.azimuth_deg) < 1.0

    def test_elevation_near_zero_at_sunrise(self):
        times = calculate_sun_times(WINTER_DATE, MT_TAM)
        pos = get_sun_position(times.sunrise, MT_TAM)
        assert -2.0 < pos.elevation_deg < 2.0

    def test_elevation_matches_sunrise_angle(self):
        times = calculate_sun_times(WINTER_DATE, MT_TAM)
        pos = get_sun_position(times.sunrise, MT_TAM)
        assert pos.elevation_deg == pytest.approx(-0.833, abs=0.3)

    def test_elevation_matches_civil_twilight_angle(self):
        times = calculate_sun_times(WINTER_DATE, MT_TAM)
        pos = get_sun_position(times.civil_twilight_end, MT_TAM)
        assert pos.elevation_deg == pytest.approx(-6.0, abs=0.3)

    def test_morning_east_afternoon_west(self):
        times = calculate_sun_times(WINTER_DATE, MT_TAM)
        morning = get_sun_position(times.sunrise + timedelta(hours=1), MT_TAM)
        afternoon = get_sun_position(times.sunset - timedelta(hours=1), MT_TAM)
        assert 90.0 < morning.azimuth_deg < 180.0
        assert 180.0 < afternoon.azimuth_deg < 270.0

    def test_midnight_sun_is_below_horizon(self):
        times = calculate_sun_times(WINTER_DATE, MT_TAM)
        pos = get_sun_position(times.solar_noon + timedelta(hours=12), MT_TAM)
        assert pos.elevation_deg < -30.0


# ── Bounds and degenerate geometry ────────────────────────────────

class TestBounds:

    @pytest.mark.parametrize("lat,lon", [
        (0.0, 0.0), (51.5, -0.13), (-33.87, 151.21), (64.14, -21.94),
        (-77.85, 166.67), (19.43, -99.13),
    ])
    def test_ranges_over_a_day(self, lat, lon):
        coords = Coordinates(lat, lon)
        start = datetime(2025, 3, 1, tzinfo=timezone.utc)
        for hour in range(0, 24, 3):
            pos = get_sun_position(start + timedelta(hours=hour), coords)
            assert -90.0 <= pos.elevation_deg <= 90.0
            assert 0.0 <= pos.azimuth_deg < 360.0

    @pytest.mark.parametrize("lat", [90.0, -90.0])
    def test_pole_has_finite_azimuth(self, lat):
        pos = get_sun_position(datetime(2025, 6, 21, 6, tzinfo=timezone.utc), Coordinates(lat, 0.0))
        assert np.isfinite(pos.elevation_deg)
        assert np.isfinite(pos.azimuth_deg)

    def test_north_pole_sun_due_south(self):
        pos = get_sun_position(datetime(2025, 6, 21, 6, tzinfo=timezone.utc), Coordinates(90.0, 0.0))
        assert pos.azimuth_deg == 180.0

    def test_south_pole_sun_due_north(self):
        pos = get_sun_position(datetime(2025, 12, 21, 6, tzinfo=timezone.utc), Coordinates(-90.0, 0.0))
        assert pos.azimuth_deg == 0.0

    def test_north_pole_elevation_equals_declination(self):
        instant = datetime(2025, 6, 21, 6, tzinfo=timezone.utc)
        pos = get_sun_position(instant, Coordinates(90.0, 0.0))
        dec = compute_solar_elements(julian_century(instant)).declination_deg
        assert pos.elevation_deg == pytest.approx(dec, abs=1e-6)


# ── Vectorised core ───────────────────────────────────────────────

class TestElevationAzimuthArrays:

    def test_array_matches_scalar(self):
        instants = [datetime(2025, 9, 1, h, tzinfo=timezone.utc) for h in (0, 6, 12, 18)]
        T = np.array([julian_century(t) for t in instants])
        minutes = np.array([t.hour * 60.0 for t in instants])
        elevs, azs = elevation_azimuth_deg(T, minutes, 48.85, 2.35)
        for i, t in enumerate(instants):
            pos = get_sun_position(t, Coordinates(48.85, 2.35))
            assert elevs[i] == pytest.approx(pos.elevation_deg, abs=1e-9)
            assert azs[i] == pytest.approx(pos.azimuth_deg, abs=1e-9)
