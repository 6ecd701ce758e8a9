# -----------------------------------------------------------------------------
# Horizontal timing helpers
# Purpose: derive a time to peak from how far and how fast a jump travels
# horizontally, so the vertical parameters can be resolved from a run-up.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Tuple

from .formulas import DivisionByZero
from .numeric import halve, is_zero


def time_from_speed_and_range(speed, range_):
    """
    Time to reach the peak of a symmetric jump covering `range_` at constant
    horizontal `speed`: half of the total flight time.
    """
    if is_zero(speed):
        raise DivisionByZero("speed")
    return halve(range_) / speed


def time_from_speed_and_range_with_ratio(speed, range_, ratio) -> Tuple[object, object]:
    """
    Split the total flight time range_/speed into (rise, fall) durations.
    ratio=0.5 is a symmetric arc; ratio<0.5 rises faster than it falls.
    """
    if is_zero(speed):
        raise DivisionByZero("speed")
    flight = range_ / speed
    return flight * ratio, flight * (1 - ratio)
