# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Twilight phase classification by solar elevation.

No external dependencies — only stdlib math/enum.
"""
import math
from enum import Enum

from sunward.domain.solar_angles import SolarAngles


class TwilightPhase(Enum):
    NIGHT = "night"
    ASTRONOMICAL = "astronomical"
    NAUTICAL = "nautical"
    CIVIL = "civil"
    GOLDEN = "golden"
    DAY = "day"

    @property
    def rank(self) -> int:
        """Position in TWILIGHT_PHASE_ORDER; grows with elevation."""
        return TWILIGHT_PHASE_ORDER.index(self)


TWILIGHT_PHASE_ORDER: tuple[TwilightPhase, ...] = (
    TwilightPhase.NIGHT,
    TwilightPhase.ASTRONOMICAL,
    TwilightPhase.NAUTICAL,
    TwilightPhase.CIVIL,
    TwilightPhase.GOLDEN,
    TwilightPhase.DAY,
)

# (exclusive lower bound, phase), highest first
_THRESHOLDS: tuple[tuple[float, TwilightPhase], ...] = (
    (SolarAngles.GOLDEN_HOUR_DEG, TwilightPhase.DAY),
    (SolarAngles.HORIZON_DEG, TwilightPhase.GOLDEN),
    (SolarAngles.CIVIL_TWILIGHT_DEG, TwilightPhase.CIVIL),
    (SolarAngles.NAUTICAL_TWILIGHT_DEG, TwilightPhase.NAUTICAL),
    (SolarAngles.ASTRONOMICAL_TWILIGHT_DEG, TwilightPhase.ASTRONOMICAL),
)


def get_twilight_phase(elevation_deg: float) -> TwilightPhase:
    """
    Lighting regime for a solar elevation.

    Boundaries are exclusive on the lower side: exactly 6° is golden,
    exactly 0° is civil, and so on down to night at or below -18°.

    Raises:
        ValueError: If elevation_deg is NaN.
    """
    if math.isnan(elevation_deg):
        raise ValueError("elevation_deg must not be NaN")

    for lower_bound, phase in _THRESHOLDS:
        if elevation_deg > lower_bound:
            return phase
    return TwilightPhase.NIGHT
