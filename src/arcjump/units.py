# -----------------------------------------------------------------------------
# Units for jump parameters (pint)
# Purpose:
#   Give each parameter kind a canonical unit, check dimensionality of
#   user-supplied quantities, and convert loose inputs ("6 ft", 2.5, a pint
#   Quantity) to canonical magnitudes.
# Notes:
#   - Pint quantities may also be passed straight to the formula set; results
#     then carry derived units (e.g. m / s for an impulse).
#   - Raises UnitError on unknown units or the wrong dimension.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Any, Optional

from pint import UnitRegistry
from pint.errors import PintError

from .types import ParameterKind

_UR = UnitRegistry(autoconvert_offset_to_baseunit=True)
Q_ = _UR.Quantity

# Canonical unit per kind; plain numbers are read in these units.
CANONICAL_UNITS = {
    ParameterKind.HEIGHT: "m",
    ParameterKind.TIME: "s",
    ParameterKind.IMPULSE: "m/s",
    ParameterKind.GRAVITY: "m/s^2",
}

# Standard gravity, as a (negative) vertical acceleration
STANDARD_GRAVITY = -9.80665


class UnitError(Exception): pass


def quantity(kind: Any, value: Any, unit: Optional[str] = None):
    """
    Build a dimension-checked quantity for `kind`.
    - value may be a number (in `unit`, or the canonical unit if omitted),
      a string such as "6 ft", or an existing Quantity.
    """
    kind = ParameterKind.parse(kind)
    try:
        if isinstance(value, Q_):
            q = value
        elif isinstance(value, str):
            q = Q_(value)
            if q.unitless:
                # "20" reads as a plain number in the canonical unit
                q = Q_(q.magnitude, unit or CANONICAL_UNITS[kind])
        else:
            q = Q_(value, unit or CANONICAL_UNITS[kind])
    except (PintError, ValueError, AttributeError) as e:
        raise UnitError(f"Cannot read {kind} value {value!r}: {e}") from e
    expected = _UR.parse_units(CANONICAL_UNITS[kind]).dimensionality
    if q.dimensionality != expected:
        raise UnitError(f"{kind} expects {expected}, got {q.dimensionality} ({value!r}).")
    return q


def to_canonical(kind: Any, value: Any, unit: Optional[str] = None) -> float:
    """Magnitude of `value` expressed in the canonical unit of `kind`."""
    kind = ParameterKind.parse(kind)
    return float(quantity(kind, value, unit).to(CANONICAL_UNITS[kind]).magnitude)
