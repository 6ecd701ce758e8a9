# -----------------------------------------------------------------------------
# Resolution Dispatcher
# Purpose:
#   Given two tagged inputs (any order) and one or two requested output kinds,
#   pick the matching solvers from the formula set, run them in request order
#   and return tagged results in that same order.
# Failure:
#   The first DivisionByZero propagates unchanged; later outputs never run.
#   Malformed requests (duplicate or overlapping kinds) raise ValueError.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Any, Callable, Dict, FrozenSet, Optional, Tuple

from . import formulas as F
from .formulas import DivisionByZero
from .tracer import Tracer
from .types import ParameterKind, TaggedValue, kind_pair

H, T, I, G = ParameterKind.HEIGHT, ParameterKind.TIME, ParameterKind.IMPULSE, ParameterKind.GRAVITY

SolverKey = Tuple[FrozenSet[ParameterKind], ParameterKind]
# (solver, kinds of its positional arguments)
SolverEntry = Tuple[Callable[..., Any], Tuple[ParameterKind, ParameterKind]]


def _table() -> Dict[SolverKey, SolverEntry]:
    rows = [
        # target, solver, argument kinds
        (I, F.impulse_from_height_and_time, (H, T)),
        (G, F.gravity_from_height_and_time, (H, T)),
        (T, F.time_from_height_and_impulse, (H, I)),
        (G, F.gravity_from_height_and_impulse, (H, I)),
        (T, F.time_from_height_and_gravity, (H, G)),
        (I, F.impulse_from_height_and_gravity, (H, G)),
        (H, F.height_from_time_and_impulse, (T, I)),
        (G, F.gravity_from_time_and_impulse, (T, I)),
        (H, F.height_from_time_and_gravity, (T, G)),
        (I, F.impulse_from_time_and_gravity, (T, G)),
        (H, F.height_from_impulse_and_gravity, (I, G)),
        (T, F.time_from_impulse_and_gravity, (I, G)),
    ]
    return {(frozenset(args), target): (fn, args) for target, fn, args in rows}


SOLVERS: Dict[SolverKey, SolverEntry] = _table()


def solver_for(first: Any, second: Any, output: Any) -> SolverEntry:
    """Look up the solver producing `output` from the unordered pair (first, second)."""
    pair = kind_pair(ParameterKind.parse(first), ParameterKind.parse(second))
    out = ParameterKind.parse(output)
    if out in pair:
        raise ValueError(f"Requested output {out} is already an input.")
    return SOLVERS[(pair, out)]


def _check_outputs(pair: FrozenSet[ParameterKind], outputs: Tuple[Any, ...]) -> Tuple[ParameterKind, ...]:
    kinds = tuple(ParameterKind.parse(o) for o in outputs)
    if not 1 <= len(kinds) <= 2:
        raise ValueError(f"Request one or two outputs, got {len(kinds)}.")
    if len(set(kinds)) != len(kinds):
        raise ValueError("Requested outputs must be distinct.")
    overlap = [k for k in kinds if k in pair]
    if overlap:
        raise ValueError(f"Requested output {overlap[0]} is already an input.")
    return kinds


def resolve(first: TaggedValue, second: TaggedValue, *outputs: Any,
            tracer: Optional[Tracer] = None) -> Tuple[TaggedValue, ...]:
    """
    Resolve the requested output kinds from two tagged inputs.

    Parameters
    ----------
    first, second : TaggedValue
        Known parameters, distinct kinds, any order.
    *outputs : ParameterKind | str
        One or two requested kinds ('I', 'Gravity', ParameterKind.TIME, ...).
    tracer : Tracer, optional
        Receives 'input', 'solve' and 'error' steps.

    Returns
    -------
    tuple of TaggedValue
        One result per requested output, in the requested order.

    Raises
    ------
    DivisionByZero
        From the first solver whose divisor is exactly zero.
    ValueError
        On duplicate or overlapping kinds.
    """
    pair = kind_pair(first.kind, second.kind)
    kinds = _check_outputs(pair, outputs)
    known = {first.kind: first.value, second.kind: second.value}
    if tracer is not None:
        tracer.add("input", {str(k): v for k, v in known.items()})

    results = []
    for out in kinds:
        fn, args = SOLVERS[(pair, out)]
        try:
            value = fn(*(known[k] for k in args))
        except DivisionByZero as e:
            if tracer is not None:
                tracer.add("error", {"output": str(out), "solver": fn.__name__,
                                     "parameter": str(e.parameter), "message": str(e)})
            raise
        if tracer is not None:
            tracer.add("solve", {"output": str(out), "solver": fn.__name__, "value": value})
        results.append(TaggedValue(out, value))
    return tuple(results)


def resolve_values(first: TaggedValue, second: TaggedValue, *outputs: Any,
                   tracer: Optional[Tracer] = None):
    # Bare value for one output, a tuple for two.
    values = tuple(r.value for r in resolve(first, second, *outputs, tracer=tracer))
    return values[0] if len(values) == 1 else values
