# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Solar orbital elements as functions of Julian Century.

NOAA solar calculator formulas (after Meeus, "Astronomical Algorithms").
Every function accepts a scalar Julian Century or a numpy array of them,
so the same chain serves single-instant and swept evaluations.

Angles are degrees unless the name says otherwise. Trigonometric calls
always go through np.radians / np.degrees.
"""
from dataclasses import dataclass

import numpy as np

ArrayLike = float | np.ndarray


def _omega_deg(T: ArrayLike) -> ArrayLike:
    """Longitude of the Moon's ascending node, used for nutation terms."""
    return 125.04 - 1934.136 * T


def geometric_mean_longitude_deg(T: ArrayLike) -> ArrayLike:
    """Geometric mean longitude of the Sun, normalized to [0, 360)."""
    L0 = 280.46646 + T * (36000.76983 + 0.0003032 * T)
    return np.mod(L0, 360.0)


def geometric_mean_anomaly_deg(T: ArrayLike) -> ArrayLike:
    """Geometric mean anomaly of the Sun."""
    return 357.52911 + T * (35999.05029 - 0.0001537 * T)


def orbit_eccentricity(T: ArrayLike) -> ArrayLike:
    """Eccentricity of Earth's orbit (unitless)."""
    return 0.016708634 - T * (0.000042037 + 0.0000001267 * T)


def equation_of_center_deg(T: ArrayLike) -> ArrayLike:
    """Equation of center: first three harmonics of the mean anomaly."""
    m_rad = np.radians(geometric_mean_anomaly_deg(T))
    return (np.sin(m_rad) * (1.9146 - T * (0.004817 + 0.000014 * T))
            + np.sin(2.0 * m_rad) * (0.019993 - 0.000101 * T)
            + np.sin(3.0 * m_rad) * 0.00029)


def true_longitude_deg(T: ArrayLike) -> ArrayLike:
    return geometric_mean_longitude_deg(T) + equation_of_center_deg(T)


def apparent_longitude_deg(T: ArrayLike) -> ArrayLike:
    """True longitude corrected for nutation and aberration."""
    omega_rad = np.radians(_omega_deg(T))
    return true_longitude_deg(T) - 0.00569 - 0.00478 * np.sin(omega_rad)


def mean_obliquity_deg(T: ArrayLike) -> ArrayLike:
    """Mean obliquity of the ecliptic (23° 26' + seconds polynomial)."""
    seconds = 21.448 - T * (46.815 + T * (0.00059 - T * 0.001813))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def corrected_obliquity_deg(T: ArrayLike) -> ArrayLike:
    """Mean obliquity plus the nutation-in-obliquity term."""
    omega_rad = np.radians(_omega_deg(T))
    return mean_obliquity_deg(T) + 0.00256 * np.cos(omega_rad)


def declination_deg(T: ArrayLike) -> ArrayLike:
    """Solar declination."""
    eps_rad = np.radians(corrected_obliquity_deg(T))
    lambda_rad = np.radians(apparent_longitude_deg(T))
    sin_dec = np.clip(np.sin(eps_rad) * np.sin(lambda_rad), -1.0, 1.0)
    return np.degrees(np.arcsin(sin_dec))


def equation_of_time_minutes(T: ArrayLike) -> ArrayLike:
    """Equation of time (apparent minus mean solar time), in minutes."""
    eps_rad = np.radians(corrected_obliquity_deg(T))
    l0_rad = np.radians(geometric_mean_longitude_deg(T))
    m_rad = np.radians(geometric_mean_anomaly_deg(T))
    e = orbit_eccentricity(T)

    y = np.tan(eps_rad / 2.0) ** 2

    sin2l0 = np.sin(2.0 * l0_rad)
    cos2l0 = np.cos(2.0 * l0_rad)
    sin4l0 = np.sin(4.0 * l0_rad)
    sinm = np.sin(m_rad)
    sin2m = np.sin(2.0 * m_rad)

    etime = (y * sin2l0
             - 2.0 * e * sinm
             + 4.0 * e * y * sinm * cos2l0
             - 0.5 * y * y * sin4l0
             - 1.25 * e * e * sin2m)

    # radians of hour angle -> degrees -> minutes (4 min per degree)
    return np.degrees(etime) * 4.0


@dataclass(frozen=True)
class SolarElements:
    """Orbital quantities of the Sun for a single Julian Century."""
    julian_century: float
    mean_longitude_deg: float
    mean_anomaly_deg: float
    eccentricity: float
    equation_of_center_deg: float
    true_longitude_deg: float
    apparent_longitude_deg: float
    mean_obliquity_deg: float
    corrected_obliquity_deg: float
    declination_deg: float
    equation_of_time_minutes: float


def compute_solar_elements(T: float) -> SolarElements:
    """Evaluate the full element chain for one Julian Century.

    Args:
        T: Julian centuries since J2000.0.

    Returns:
        SolarElements with every intermediate quantity as a float.
    """
    return SolarElements(
        julian_century=float(T),
        mean_longitude_deg=float(geometric_mean_longitude_deg(T)),
        mean_anomaly_deg=float(geometric_mean_anomaly_deg(T)),
        eccentricity=float(orbit_eccentricity(T)),
        equation_of_center_deg=float(equation_of_center_deg(T)),
        true_longitude_deg=float(true_longitude_deg(T)),
        apparent_longitude_deg=float(apparent_longitude_deg(T)),
        mean_obliquity_deg=float(mean_obliquity_deg(T)),
        corrected_obliquity_deg=float(corrected_obliquity_deg(T)),
        declination_deg=float(declination_deg(T)),
        equation_of_time_minutes=float(equation_of_time_minutes(T)),
    )
