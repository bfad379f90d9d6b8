# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Time base: calendar instants, Julian Day and Julian Century.

The Julian Day formula is the compact Gregorian form used by the NOAA
solar calculator. It is exact between 1901-03-01 and 2100-02-28, which
bounds the documented accuracy window of the whole engine.

No external dependencies — only stdlib math/datetime.
"""
import math
from datetime import date, datetime, timedelta, timezone

J2000_JD: float = 2451545.0
"""Julian Day of J2000.0 (2000-01-01 12:00 TT)."""

DAYS_PER_JULIAN_CENTURY: float = 36525.0

ACCURACY_FIRST_YEAR: int = 1901
ACCURACY_LAST_YEAR: int = 2099


def to_utc(value: datetime | date) -> datetime:
    """Return an aware UTC datetime.

    Naive datetimes are treated as UTC; a bare ``date`` maps to its
    midnight UTC.

    Raises:
        TypeError: If value is neither a datetime nor a date.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    raise TypeError(f"Expected datetime or date, got {type(value).__name__}")


def utc_midnight(value: datetime | date) -> datetime:
    """Midnight UTC of the UTC calendar day containing value."""
    dt = to_utc(value)
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def utc_noon(value: datetime | date) -> datetime:
    """12:00 UTC of the UTC calendar day containing value."""
    return utc_midnight(value) + timedelta(hours=12)


def minutes_since_utc_midnight(value: datetime) -> float:
    """Fractional minutes elapsed since midnight UTC of the same day."""
    dt = to_utc(value)
    return (dt.hour * 60.0
            + dt.minute
            + dt.second / 60.0
            + dt.microsecond / 60_000_000.0)


def datetime_to_jd(value: datetime | date) -> float:
    """Convert a UTC calendar instant to a (fractional) Julian Day.

    Uses 367y - floor(7(y + floor((m+9)/12))/4) + floor(275m/9) + d
    + 1721013.5 + h/24.
    """
    dt = to_utc(value)
    y = dt.year
    m = dt.month
    hours = minutes_since_utc_midnight(dt) / 60.0

    return (367 * y
            - math.floor(7 * (y + math.floor((m + 9) / 12)) / 4)
            + math.floor(275 * m / 9)
            + dt.day
            + 1721013.5
            + hours / 24.0)


def jd_to_julian_century(jd: float) -> float:
    """Julian centuries since J2000.0."""
    return (jd - J2000_JD) / DAYS_PER_JULIAN_CENTURY


def julian_century(value: datetime | date) -> float:
    """Julian Century of a calendar instant. Convenience wrapper."""
    return jd_to_julian_century(datetime_to_jd(value))


def is_within_accuracy_window(value: datetime | date) -> bool:
    """True when the instant falls in the 1901-2099 accuracy window."""
    return ACCURACY_FIRST_YEAR <= to_utc(value).year <= ACCURACY_LAST_YEAR
