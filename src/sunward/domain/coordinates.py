# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Observer location value object.

No external dependencies — only stdlib math/numbers/dataclasses.
"""
import math
import numbers
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """Geographic observer location in degrees.

    latitude_deg: north positive, [-90, 90].
    longitude_deg: east positive, [-180, 180].
    """
    latitude_deg: float
    longitude_deg: float

    def __post_init__(self) -> None:
        for name, value, bound in (
            ("latitude_deg", self.latitude_deg, 90.0),
            ("longitude_deg", self.longitude_deg, 180.0),
        ):
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")
            if abs(value) > bound:
                raise ValueError(f"{name} must be within [-{bound:g}, {bound:g}], got {value}")
