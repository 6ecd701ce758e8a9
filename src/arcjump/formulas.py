# -----------------------------------------------------------------------------
# Formula Set: closed-form solvers for the four jump parameters
# Purpose:
#   Twelve pure functions, one per (target, known pair), derived from
#       displacement(t) = 1/2 * g * t^2 + v0 * t
#       velocity(t)     = g * t + v0
#       velocity(t_h)   = 0          (peak condition)
# Policy:
#   - A divisor that is exactly zero raises DivisionByZero naming the known
#     parameter that held it.
#   - Square roots are taken of the magnitude, so sign-inconsistent inputs give
#     a real magnitude instead of a complex result.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Union

from .numeric import double, halve, is_zero, pow2, sqrt_abs
from .types import ParameterKind

# Error messages per offending parameter
_MESSAGES = {
    ParameterKind.HEIGHT: "Height of the peak cannot be null",
    ParameterKind.TIME: "Time to reach the peak cannot be null",
    ParameterKind.IMPULSE: "Initial vertical impulse cannot be null",
    ParameterKind.GRAVITY: "Gravity cannot be null",
    "speed": "Horizontal speed cannot be null",
}


class ResolveError(Exception): pass


class DivisionByZero(ResolveError):
    """
    A solver's denominator vanished.
    `parameter` names the known input whose value was zero: a ParameterKind
    for the vertical solvers, "speed" for the horizontal timing helpers.
    """
    def __init__(self, parameter: Union[ParameterKind, str]):
        self.parameter = parameter
        super().__init__(_MESSAGES.get(parameter, f"{parameter} cannot be null"))


def _nonzero(value, parameter: ParameterKind):
    if is_zero(value):
        raise DivisionByZero(parameter)
    return value


# ---- Height -----------------------------------------------------------------

def height_from_time_and_impulse(time, impulse):
    """Peak height from the time to reach the peak and the vertical impulse."""
    return halve(impulse * time)


def height_from_time_and_gravity(time, gravity):
    """Peak height from the time to reach the peak and the gravity."""
    return -halve(gravity * pow2(time))


def height_from_impulse_and_gravity(impulse, gravity):
    """Peak height from the vertical impulse and the gravity."""
    _nonzero(gravity, ParameterKind.GRAVITY)
    return -halve(pow2(impulse)) / gravity


# ---- Time -------------------------------------------------------------------

def time_from_height_and_impulse(height, impulse):
    """Time to reach the peak from the peak height and the vertical impulse."""
    _nonzero(impulse, ParameterKind.IMPULSE)
    return double(height) / impulse


def time_from_height_and_gravity(height, gravity):
    """Time to reach the peak from the peak height and the gravity."""
    _nonzero(gravity, ParameterKind.GRAVITY)
    return sqrt_abs(double(height) / gravity)


def time_from_impulse_and_gravity(impulse, gravity):
    """Time to reach the peak from the vertical impulse and the gravity."""
    _nonzero(gravity, ParameterKind.GRAVITY)
    return -impulse / gravity


# ---- Impulse ----------------------------------------------------------------

def impulse_from_height_and_time(height, time):
    """Vertical impulse from the peak height and the time to reach the peak."""
    _nonzero(time, ParameterKind.TIME)
    return double(height) / time


def impulse_from_height_and_gravity(height, gravity):
    """Vertical impulse from the peak height and the gravity."""
    return sqrt_abs(double(height) * gravity)


def impulse_from_time_and_gravity(time, gravity):
    """Vertical impulse from the time to reach the peak and the gravity."""
    return -gravity * time


# ---- Gravity ----------------------------------------------------------------

def gravity_from_height_and_time(height, time):
    """Gravity from the peak height and the time to reach the peak."""
    _nonzero(time, ParameterKind.TIME)
    return -double(height) / pow2(time)


def gravity_from_height_and_impulse(height, impulse):
    """Gravity from the peak height and the vertical impulse."""
    _nonzero(height, ParameterKind.HEIGHT)
    return -halve(pow2(impulse)) / height


def gravity_from_time_and_impulse(time, impulse):
    """Gravity from the time to reach the peak and the vertical impulse."""
    _nonzero(time, ParameterKind.TIME)
    return -impulse / time
