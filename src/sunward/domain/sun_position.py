# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Instantaneous solar elevation and azimuth for a ground observer.

The inverse of the event-time solver: given an instant, evaluate the
hour angle and solve the altitude/azimuth equations directly.

Uses numpy for the trigonometry (scalar or array inputs).
"""
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from sunward.domain.coordinates import Coordinates
from sunward.domain.event_solver import solar_noon_minutes
from sunward.domain.solar_angles import ClockConstants
from sunward.domain.solar_elements import (
    ArrayLike,
    declination_deg,
    equation_of_time_minutes,
)
from sunward.domain.time_base import julian_century, minutes_since_utc_midnight

_AZIMUTH_EPSILON = 1e-12


@dataclass(frozen=True)
class SunPosition:
    """Solar position seen from the observer."""
    elevation_deg: float  # above the horizon, [-90, 90]
    azimuth_deg: float    # clockwise from north, [0, 360)


def hour_angle_deg(
    minutes_utc: ArrayLike,
    longitude_deg: float,
    eq_time_minutes: ArrayLike,
) -> ArrayLike:
    """Hour angle wrapped into [-180, 180); positive after solar noon."""
    noon = solar_noon_minutes(longitude_deg, eq_time_minutes)
    raw = (minutes_utc - noon) / ClockConstants.MINUTES_PER_DEGREE
    return np.mod(raw + 180.0, 360.0) - 180.0


def elevation_azimuth_deg(
    T: ArrayLike,
    minutes_utc: ArrayLike,
    latitude_deg: float,
    longitude_deg: float,
) -> tuple[ArrayLike, ArrayLike]:
    """
    Solar elevation and azimuth from Julian Century and UTC minutes.

    Works on scalars or equally-shaped numpy arrays.

    Args:
        T: Julian Century of each sample.
        minutes_utc: Minutes since midnight UTC of each sample.
        latitude_deg: Observer latitude.
        longitude_deg: Observer longitude.

    Returns:
        (elevation_deg, azimuth_deg)
    """
    dec_deg = declination_deg(T)
    ha_deg = hour_angle_deg(minutes_utc, longitude_deg, equation_of_time_minutes(T))

    lat_rad = np.radians(latitude_deg)
    dec_rad = np.radians(dec_deg)
    ha_rad = np.radians(ha_deg)

    sin_elev = np.clip(
        np.sin(lat_rad) * np.sin(dec_rad)
        + np.cos(lat_rad) * np.cos(dec_rad) * np.cos(ha_rad),
        -1.0, 1.0,
    )
    elev_rad = np.arcsin(sin_elev)

    # cos(lat) * cos(elev) vanishes at the poles and with the Sun at zenith.
    denominator = np.cos(lat_rad) * np.cos(elev_rad)
    degenerate = np.abs(denominator) < _AZIMUTH_EPSILON
    safe_denominator = np.where(degenerate, 1.0, denominator)

    cos_az = np.clip(
        (np.sin(dec_rad) - np.sin(lat_rad) * sin_elev) / safe_denominator,
        -1.0, 1.0,
    )
    az_deg = np.degrees(np.arccos(cos_az))
    az_deg = np.where(ha_deg > 0.0, 360.0 - az_deg, az_deg)
    az_deg = np.where(
        degenerate,
        np.where(latitude_deg >= dec_deg, 180.0, 0.0),
        az_deg,
    )

    return np.degrees(elev_rad), np.mod(az_deg, 360.0)


def get_sun_position(instant: datetime, coordinates: Coordinates) -> SunPosition:
    """
    Sun elevation and azimuth at an exact instant.

    Args:
        instant: Datetime of the observation (naive values are UTC).
        coordinates: Observer location.

    Returns:
        SunPosition with elevation in [-90, 90] and azimuth in [0, 360).
    """
    elevation, azimuth = elevation_azimuth_deg(
        julian_century(instant),
        minutes_since_utc_midnight(instant),
        coordinates.latitude_deg,
        coordinates.longitude_deg,
    )
    return SunPosition(elevation_deg=float(elevation), azimuth_deg=float(azimuth))
