# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sun path over one UTC day.

Samples solar elevation and azimuth at a fixed step, evaluating the
orbital elements per sample in a single vectorised pass.

Uses numpy for the sweep; samples are stored as float tuples.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta

import numpy as np

from sunward.domain.coordinates import Coordinates
from sunward.domain.solar_angles import ClockConstants
from sunward.domain.sun_position import elevation_azimuth_deg
from sunward.domain.time_base import datetime_to_jd, jd_to_julian_century, utc_midnight
from sunward.domain.twilight import TwilightPhase, get_twilight_phase


@dataclass(frozen=True)
class SunPath:
    """Sampled solar track for one day.

    minutes_utc, elevations_deg and azimuths_deg are equally long tuples;
    sample i is at start + minutes_utc[i] minutes.
    """
    start: datetime  # midnight UTC
    coordinates: Coordinates
    minutes_utc: tuple[float, ...]
    elevations_deg: tuple[float, ...]
    azimuths_deg: tuple[float, ...]

    def __len__(self) -> int:
        return len(self.minutes_utc)

    def instant_at(self, index: int) -> datetime:
        return self.start + timedelta(minutes=self.minutes_utc[index])

    def phase_at(self, index: int) -> TwilightPhase:
        return get_twilight_phase(self.elevations_deg[index])

    @property
    def phases(self) -> tuple[TwilightPhase, ...]:
        return tuple(get_twilight_phase(e) for e in self.elevations_deg)

    @property
    def max_elevation_deg(self) -> float:
        return max(self.elevations_deg)

    @property
    def min_elevation_deg(self) -> float:
        return min(self.elevations_deg)

    @property
    def peak_instant(self) -> datetime:
        """Sample with the highest elevation."""
        return self.instant_at(int(np.argmax(self.elevations_deg)))


def compute_sun_path(
    day: datetime | date,
    coordinates: Coordinates,
    step: timedelta = timedelta(minutes=10),
) -> SunPath:
    """
    Sample the Sun's elevation and azimuth across a UTC day.

    Args:
        day: Any instant (or date) on the wanted UTC calendar day.
        coordinates: Observer location.
        step: Sampling interval; the first sample is at midnight UTC and
            the last lies before the following midnight.

    Returns:
        SunPath with one sample per step.

    Raises:
        ValueError: If step is zero or negative.
    """
    step_minutes = step.total_seconds() / 60.0
    if step_minutes <= 0:
        raise ValueError(f"Step must be positive, got {step}")

    start = utc_midnight(day)
    minutes = np.arange(0.0, ClockConstants.MINUTES_PER_DAY, step_minutes)
    T = jd_to_julian_century(datetime_to_jd(start) + minutes / ClockConstants.MINUTES_PER_DAY)

    elevations, azimuths = elevation_azimuth_deg(
        T, minutes, coordinates.latitude_deg, coordinates.longitude_deg,
    )

    return SunPath(
        start=start,
        coordinates=coordinates,
        minutes_utc=tuple(float(m) for m in minutes),
        elevations_deg=tuple(float(e) for e in np.atleast_1d(elevations)),
        azimuths_deg=tuple(float(a) for a in np.atleast_1d(azimuths)),
    )
