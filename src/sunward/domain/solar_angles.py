# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Named solar elevation thresholds and clock constants.

Elevations are the position of the centre of the solar disk in degrees
above (positive) or below (negative) an ideal horizon.

No external dependencies — only stdlib dataclasses.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class _SolarAngles:
    """Elevation thresholds (degrees) for the solved solar events."""
    SUNRISE_SUNSET_DEG: float = -0.833        # refraction + solar radius
    CIVIL_TWILIGHT_DEG: float = -6.0
    NAUTICAL_TWILIGHT_DEG: float = -12.0
    ASTRONOMICAL_TWILIGHT_DEG: float = -18.0
    GOLDEN_HOUR_DEG: float = 6.0              # upper edge of golden hour
    BLUE_HOUR_DEG: float = -4.0               # upper edge of blue hour
    HORIZON_DEG: float = 0.0


SolarAngles: _SolarAngles = _SolarAngles()


@dataclass(frozen=True)
class _ClockConstants:
    """Minute arithmetic used to turn hour angles into clock times."""
    MINUTES_PER_DEGREE: float = 4.0           # 360° of hour angle per 1440 min
    MINUTES_PER_DAY: float = 1440.0
    SOLAR_NOON_MINUTES: float = 720.0         # noon at Greenwich, eqTime = 0


ClockConstants: _ClockConstants = _ClockConstants()
