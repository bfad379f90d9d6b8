# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunward

Solar ephemeris and twilight-event engine. Computes sunrise, sunset,
solar noon, civil/nautical/astronomical twilight, golden hour and blue
hour for any date and location with the NOAA solar calculator
algorithm, plus instantaneous sun position, twilight phase
classification, and vectorised daily sun paths.
"""

from sunward.domain.solar_angles import (
    SolarAngles,
    ClockConstants,
)
from sunward.domain.coordinates import Coordinates
from sunward.domain.time_base import (
    datetime_to_jd,
    jd_to_julian_century,
    julian_century,
)
from sunward.domain.solar_elements import (
    SolarElements,
    compute_solar_elements,
)
from sunward.domain.event_solver import (
    CrossingStatus,
    ElevationCrossing,
    hour_angle_for_elevation,
    solar_noon_minutes,
    event_minutes,
    minutes_to_instant,
)
from sunward.domain.sun_position import (
    SunPosition,
    get_sun_position,
)
from sunward.domain.twilight import (
    TwilightPhase,
    TWILIGHT_PHASE_ORDER,
    get_twilight_phase,
)
from sunward.domain.sun_times import (
    SunEvent,
    SunTimes,
    SunTimesOptions,
    TimeWindow,
    calculate_sun_times,
)
from sunward.domain.sun_path import (
    SunPath,
    compute_sun_path,
)

__all__ = [
    "SolarAngles",
    "ClockConstants",
    "Coordinates",
    "datetime_to_jd",
    "jd_to_julian_century",
    "julian_century",
    "SolarElements",
    "compute_solar_elements",
    "CrossingStatus",
    "ElevationCrossing",
    "hour_angle_for_elevation",
    "solar_noon_minutes",
    "event_minutes",
    "minutes_to_instant",
    "SunPosition",
    "get_sun_position",
    "TwilightPhase",
    "TWILIGHT_PHASE_ORDER",
    "get_twilight_phase",
    "SunEvent",
    "SunTimes",
    "SunTimesOptions",
    "TimeWindow",
    "calculate_sun_times",
    "SunPath",
    "compute_sun_path",
]
