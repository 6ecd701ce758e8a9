# -----------------------------------------------------------------------------
# Numeric plumbing shared by the formula set
# Purpose:
#   Keep the solvers generic over the caller's number type. Floats, ints,
#   Decimal, Fraction, numpy scalars, sympy expressions and pint quantities all
#   work; a custom fixed-point type needs + - * /, == 0, abs() and either a
#   .sqrt() method or ** 0.5.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from functools import singledispatch
from typing import Any

import numpy
import pint
import sympy


def halve(n):
    return n / 2


def double(n):
    return n + n


def pow2(n):
    return n * n


def is_zero(n) -> bool:
    # Exact comparison: a tiny non-zero divisor is a valid (if extreme) input.
    return bool(n == 0)


@singledispatch
def sqrt(n: Any):
    """Square root preserving the caller's number type where possible."""
    method = getattr(n, "sqrt", None)
    if callable(method):
        return method()  # Decimal, user fixed-point types
    return n ** 0.5


@sqrt.register(int)
@sqrt.register(float)
def _(n):
    return math.sqrt(n)


@sqrt.register(numpy.floating)
def _(n):
    return numpy.sqrt(n)  # keeps float32 as float32


@sqrt.register(sympy.Basic)
def _(n):
    return sympy.sqrt(n)


@sqrt.register(pint.Quantity)
def _(n):
    return n ** 0.5


def sqrt_abs(n):
    """
    Root of the magnitude. Sign-inconsistent inputs give a real magnitude
    instead of a complex result.
    """
    return sqrt(abs(n))
