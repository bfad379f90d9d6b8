# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Event-time solver: elevation angle -> hour angle -> clock time.

The hour angle at which the Sun crosses a target elevation is found by
inverting the altitude equation

    cos H = (sin h - sin phi sin dec) / (cos phi cos dec)

If the right-hand side leaves [-1, 1] the elevation is never crossed on
that day (polar day or polar night for that angle). That outcome is a
first-class ElevationCrossing status, never a NaN.

No external dependencies — only stdlib math/dataclasses/datetime/enum.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from sunward.domain.coordinates import Coordinates
from sunward.domain.solar_angles import ClockConstants
from sunward.domain.solar_elements import SolarElements
from sunward.domain.time_base import utc_midnight

_POLE_EPSILON = 1e-12


class CrossingStatus(Enum):
    CROSSED = "crossed"
    ALWAYS_ABOVE = "always_above"
    ALWAYS_BELOW = "always_below"


@dataclass(frozen=True)
class ElevationCrossing:
    """Solver outcome for one target elevation on one day.

    hour_angle_deg is the positive half-width (degrees) of the arc above
    the target elevation, and is None unless status is CROSSED.
    """
    status: CrossingStatus
    hour_angle_deg: float | None = None

    @property
    def reached(self) -> bool:
        return self.status is CrossingStatus.CROSSED


def hour_angle_for_elevation(
    latitude_deg: float,
    declination_deg: float,
    elevation_deg: float,
) -> ElevationCrossing:
    """
    Hour angle at which the Sun's centre crosses a given elevation.

    Args:
        latitude_deg: Observer latitude.
        declination_deg: Solar declination for the day.
        elevation_deg: Target elevation (negative below the horizon).

    Returns:
        ElevationCrossing. CROSSED carries the hour angle in [0, 180];
        ALWAYS_BELOW means the Sun never climbs to the target,
        ALWAYS_ABOVE means it never sinks to it.
    """
    lat_rad = math.radians(latitude_deg)
    dec_rad = math.radians(declination_deg)
    elev_rad = math.radians(elevation_deg)

    numerator = math.sin(elev_rad) - math.sin(lat_rad) * math.sin(dec_rad)
    denominator = math.cos(lat_rad) * math.cos(dec_rad)

    # Observer at a pole: elevation is constant over the day.
    if abs(denominator) < _POLE_EPSILON:
        if numerator > 0.0:
            return ElevationCrossing(CrossingStatus.ALWAYS_BELOW)
        return ElevationCrossing(CrossingStatus.ALWAYS_ABOVE)

    cos_ha = numerator / denominator
    if cos_ha > 1.0:
        return ElevationCrossing(CrossingStatus.ALWAYS_BELOW)
    if cos_ha < -1.0:
        return ElevationCrossing(CrossingStatus.ALWAYS_ABOVE)

    return ElevationCrossing(
        CrossingStatus.CROSSED,
        math.degrees(math.acos(cos_ha)),
    )


def solar_noon_minutes(longitude_deg: float, eq_time_minutes: float) -> float:
    """Solar noon in minutes from midnight UTC."""
    return (ClockConstants.SOLAR_NOON_MINUTES
            - ClockConstants.MINUTES_PER_DEGREE * longitude_deg
            - eq_time_minutes)


def event_minutes(
    longitude_deg: float,
    eq_time_minutes: float,
    hour_angle_deg: float,
    is_morning: bool,
) -> float:
    """Minutes from midnight UTC of a rising (morning) or setting event."""
    noon = solar_noon_minutes(longitude_deg, eq_time_minutes)
    offset = ClockConstants.MINUTES_PER_DEGREE * hour_angle_deg
    return noon - offset if is_morning else noon + offset


def minutes_to_instant(base: datetime, minutes: float) -> datetime:
    """
    Anchor minutes-from-midnight to the UTC day of base.

    Minutes may be negative or exceed a full day; the result then falls
    on the previous or following calendar day.
    """
    return utc_midnight(base) + timedelta(minutes=minutes)


def solve_event_instant(
    base: datetime,
    coordinates: Coordinates,
    elements: SolarElements,
    elevation_deg: float,
    is_morning: bool,
) -> tuple[datetime, ElevationCrossing]:
    """
    Instant of a morning or evening elevation crossing.

    When the elevation is never crossed the instant falls back to solar
    noon minus (morning) or plus (evening) twelve hours, and the returned
    ElevationCrossing says so.

    Returns:
        (instant in UTC, ElevationCrossing)
    """
    crossing = hour_angle_for_elevation(
        coordinates.latitude_deg, elements.declination_deg, elevation_deg,
    )
    eq_time = elements.equation_of_time_minutes

    if crossing.hour_angle_deg is None:
        noon = solar_noon_minutes(coordinates.longitude_deg, eq_time)
        half_day = ClockConstants.MINUTES_PER_DAY / 2.0
        minutes = noon - half_day if is_morning else noon + half_day
    else:
        minutes = event_minutes(
            coordinates.longitude_deg, eq_time, crossing.hour_angle_deg, is_morning,
        )

    return minutes_to_instant(base, minutes), crossing
