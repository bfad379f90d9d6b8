# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Daily solar event schedule.

Solves sunrise/sunset, the three twilight tiers, and the golden-hour and
blue-hour boundaries for one UTC calendar day at one location.

Declination and equation of time are evaluated once, at 12:00 UTC of the
day, and held constant for every event (the standard NOAA simplification).

Elevations that are never crossed (polar day or night) do not raise.
The affected instants fall back to solar noon -/+ 12 hours and the event
is listed in SunTimes.unreached so callers can tell the two apart.
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sunward.domain.coordinates import Coordinates
from sunward.domain.event_solver import (
    CrossingStatus,
    minutes_to_instant,
    solar_noon_minutes,
    solve_event_instant,
)
from sunward.domain.solar_angles import SolarAngles
from sunward.domain.solar_elements import compute_solar_elements
from sunward.domain.time_base import (
    ACCURACY_FIRST_YEAR,
    ACCURACY_LAST_YEAR,
    is_within_accuracy_window,
    julian_century,
    utc_noon,
)

logger = logging.getLogger(__name__)


class SunEvent(Enum):
    """Independently solved events. Values are SunTimes field names."""
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    CIVIL_TWILIGHT_START = "civil_twilight_start"
    CIVIL_TWILIGHT_END = "civil_twilight_end"
    NAUTICAL_TWILIGHT_START = "nautical_twilight_start"
    NAUTICAL_TWILIGHT_END = "nautical_twilight_end"
    ASTRONOMICAL_TWILIGHT_START = "astronomical_twilight_start"
    ASTRONOMICAL_TWILIGHT_END = "astronomical_twilight_end"
    GOLDEN_HOUR_MORNING_END = "golden_hour_morning_end"
    GOLDEN_HOUR_EVENING_START = "golden_hour_evening_start"
    BLUE_HOUR_MORNING_END = "blue_hour_morning_end"
    BLUE_HOUR_EVENING_START = "blue_hour_evening_start"


# event -> (elevation_deg, is_morning)
_EVENT_ANGLES: dict[SunEvent, tuple[float, bool]] = {
    SunEvent.SUNRISE: (SolarAngles.SUNRISE_SUNSET_DEG, True),
    SunEvent.SUNSET: (SolarAngles.SUNRISE_SUNSET_DEG, False),
    SunEvent.CIVIL_TWILIGHT_START: (SolarAngles.CIVIL_TWILIGHT_DEG, True),
    SunEvent.CIVIL_TWILIGHT_END: (SolarAngles.CIVIL_TWILIGHT_DEG, False),
    SunEvent.NAUTICAL_TWILIGHT_START: (SolarAngles.NAUTICAL_TWILIGHT_DEG, True),
    SunEvent.NAUTICAL_TWILIGHT_END: (SolarAngles.NAUTICAL_TWILIGHT_DEG, False),
    SunEvent.ASTRONOMICAL_TWILIGHT_START: (SolarAngles.ASTRONOMICAL_TWILIGHT_DEG, True),
    SunEvent.ASTRONOMICAL_TWILIGHT_END: (SolarAngles.ASTRONOMICAL_TWILIGHT_DEG, False),
    SunEvent.GOLDEN_HOUR_MORNING_END: (SolarAngles.GOLDEN_HOUR_DEG, True),
    SunEvent.GOLDEN_HOUR_EVENING_START: (SolarAngles.GOLDEN_HOUR_DEG, False),
    SunEvent.BLUE_HOUR_MORNING_END: (SolarAngles.BLUE_HOUR_DEG, True),
    SunEvent.BLUE_HOUR_EVENING_START: (SolarAngles.BLUE_HOUR_DEG, False),
}

# Chronological order on an ordinary day.
_INSTANT_FIELDS: tuple[str, ...] = (
    "astronomical_twilight_start",
    "nautical_twilight_start",
    "civil_twilight_start",
    "blue_hour_morning_start",
    "blue_hour_morning_end",
    "sunrise",
    "golden_hour_morning_start",
    "golden_hour_morning_end",
    "solar_noon",
    "golden_hour_evening_start",
    "golden_hour_evening_end",
    "sunset",
    "blue_hour_evening_start",
    "blue_hour_evening_end",
    "civil_twilight_end",
    "nautical_twilight_end",
    "astronomical_twilight_end",
)


@dataclass(frozen=True)
class SunTimesOptions:
    """Per-call options.

    timezone: IANA zone used only by SunTimes.localized(). Computed
        instants are always UTC.
    """
    timezone: str = "UTC"

    def __post_init__(self) -> None:
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError, TypeError) as exc:
            raise ValueError(f"Unknown timezone: {self.timezone!r}") from exc

    @property
    def tzinfo(self) -> tzinfo:
        return ZoneInfo(self.timezone)


@dataclass(frozen=True)
class TimeWindow:
    """A closed interval between two instants."""
    start: datetime
    end: datetime

    @property
    def duration_minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60.0


@dataclass(frozen=True)
class SunTimes:
    """Solar event schedule for one date and location (UTC instants)."""
    date: datetime  # 12:00 UTC of the computed day
    coordinates: Coordinates
    sunrise: datetime
    sunset: datetime
    solar_noon: datetime
    civil_twilight_start: datetime
    civil_twilight_end: datetime
    nautical_twilight_start: datetime
    nautical_twilight_end: datetime
    astronomical_twilight_start: datetime
    astronomical_twilight_end: datetime
    golden_hour_morning_start: datetime
    golden_hour_morning_end: datetime
    golden_hour_evening_start: datetime
    golden_hour_evening_end: datetime
    blue_hour_morning_start: datetime
    blue_hour_morning_end: datetime
    blue_hour_evening_start: datetime
    blue_hour_evening_end: datetime
    day_length_minutes: float
    unreached: frozenset[SunEvent] = frozenset()
    sunrise_status: CrossingStatus = CrossingStatus.CROSSED
    options: SunTimesOptions = field(default_factory=SunTimesOptions)

    def is_reached(self, event: SunEvent) -> bool:
        """False if the event's elevation was never crossed that day."""
        return event not in self.unreached

    @property
    def is_degenerate(self) -> bool:
        """True when sunrise or sunset fell back to the +/-12 h sentinel."""
        return (SunEvent.SUNRISE in self.unreached
                or SunEvent.SUNSET in self.unreached)

    @property
    def is_polar_day(self) -> bool:
        """The Sun stays above the sunrise/sunset elevation all day."""
        return self.sunrise_status is CrossingStatus.ALWAYS_ABOVE

    @property
    def is_polar_night(self) -> bool:
        """The Sun stays below the sunrise/sunset elevation all day."""
        return self.sunrise_status is CrossingStatus.ALWAYS_BELOW

    @property
    def daylight(self) -> TimeWindow:
        return TimeWindow(self.sunrise, self.sunset)

    @property
    def golden_hour_morning(self) -> TimeWindow:
        return TimeWindow(self.golden_hour_morning_start, self.golden_hour_morning_end)

    @property
    def golden_hour_evening(self) -> TimeWindow:
        return TimeWindow(self.golden_hour_evening_start, self.golden_hour_evening_end)

    @property
    def blue_hour_morning(self) -> TimeWindow:
        return TimeWindow(self.blue_hour_morning_start, self.blue_hour_morning_end)

    @property
    def blue_hour_evening(self) -> TimeWindow:
        return TimeWindow(self.blue_hour_evening_start, self.blue_hour_evening_end)

    def events(self) -> dict[str, datetime]:
        """Every instant keyed by field name, in ordinary-day order."""
        return {name: getattr(self, name) for name in _INSTANT_FIELDS}

    def localized(self) -> dict[str, datetime]:
        """events() converted to the options timezone."""
        zone = self.options.tzinfo
        return {name: instant.astimezone(zone) for name, instant in self.events().items()}


def calculate_sun_times(
    when: datetime | date,
    coordinates: Coordinates,
    options: SunTimesOptions | None = None,
) -> SunTimes:
    """
    Compute the solar event schedule for a date and location.

    Args:
        when: Any instant (or date) on the wanted UTC calendar day.
            Naive datetimes are treated as UTC.
        coordinates: Observer location.
        options: Display options; defaults to UTC.

    Returns:
        SunTimes with UTC instants. Events whose elevation is never
        crossed are listed in SunTimes.unreached.

    Raises:
        TypeError: If coordinates is not a Coordinates instance.
    """
    if not isinstance(coordinates, Coordinates):
        raise TypeError(
            f"coordinates must be Coordinates, got {type(coordinates).__name__}"
        )
    if options is None:
        options = SunTimesOptions()

    base = utc_noon(when)
    if not is_within_accuracy_window(base):
        logger.warning(
            "Date %s is outside %d-%d; solar event accuracy is degraded",
            base.date().isoformat(), ACCURACY_FIRST_YEAR, ACCURACY_LAST_YEAR,
        )

    elements = compute_solar_elements(julian_century(base))

    instants: dict[SunEvent, datetime] = {}
    statuses: dict[SunEvent, CrossingStatus] = {}
    unreached: set[SunEvent] = set()
    for event, (elevation_deg, is_morning) in _EVENT_ANGLES.items():
        instant, crossing = solve_event_instant(
            base, coordinates, elements, elevation_deg, is_morning,
        )
        instants[event] = instant
        statuses[event] = crossing.status
        if not crossing.reached:
            unreached.add(event)
            logger.debug(
                "%s: %.3f deg is %s at lat %.4f on %s",
                event.value, elevation_deg, crossing.status.value,
                coordinates.latitude_deg, base.date().isoformat(),
            )

    solar_noon = minutes_to_instant(
        base,
        solar_noon_minutes(coordinates.longitude_deg, elements.equation_of_time_minutes),
    )
    sunrise = instants[SunEvent.SUNRISE]
    sunset = instants[SunEvent.SUNSET]
    civil_start = instants[SunEvent.CIVIL_TWILIGHT_START]
    civil_end = instants[SunEvent.CIVIL_TWILIGHT_END]

    return SunTimes(
        date=base,
        coordinates=coordinates,
        sunrise=sunrise,
        sunset=sunset,
        solar_noon=solar_noon,
        civil_twilight_start=civil_start,
        civil_twilight_end=civil_end,
        nautical_twilight_start=instants[SunEvent.NAUTICAL_TWILIGHT_START],
        nautical_twilight_end=instants[SunEvent.NAUTICAL_TWILIGHT_END],
        astronomical_twilight_start=instants[SunEvent.ASTRONOMICAL_TWILIGHT_START],
        astronomical_twilight_end=instants[SunEvent.ASTRONOMICAL_TWILIGHT_END],
        golden_hour_morning_start=sunrise,
        golden_hour_morning_end=instants[SunEvent.GOLDEN_HOUR_MORNING_END],
        golden_hour_evening_start=instants[SunEvent.GOLDEN_HOUR_EVENING_START],
        golden_hour_evening_end=sunset,
        blue_hour_morning_start=civil_start,
        blue_hour_morning_end=instants[SunEvent.BLUE_HOUR_MORNING_END],
        blue_hour_evening_start=instants[SunEvent.BLUE_HOUR_EVENING_START],
        blue_hour_evening_end=civil_end,
        day_length_minutes=(sunset - sunrise).total_seconds() / 60.0,
        unreached=frozenset(unreached),
        sunrise_status=statuses[SunEvent.SUNRISE],
        options=options,
    )
