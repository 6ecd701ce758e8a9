# Re-derive every table entry from the governing equations with sympy and
# check the closed-form solvers against the symbolic solution.
import pytest
from sympy import Eq, solve, symbols

from arcjump.dispatch import SOLVERS
from arcjump.types import ParameterKind

h, t, v = symbols("h t v", positive=True)
g = symbols("g", negative=True)
SYMBOLS = {
    ParameterKind.HEIGHT: h,
    ParameterKind.TIME: t,
    ParameterKind.IMPULSE: v,
    ParameterKind.GRAVITY: g,
}
# Peak reached at t: displacement and zero velocity
EQUATIONS = [Eq(h, g * t**2 / 2 + v * t), Eq(0, g * t + v)]
VALUES = {h: 20.0, t: 2.0, v: 20.0, g: -10.0}


def _physical(solution, known):
    # Keep the root with t, v > 0 and g < 0
    for sym, expr in solution.items():
        value = complex(expr.subs(known))
        if value.imag != 0 or (value.real < 0) != (sym is g):
            return False
    return True


@pytest.mark.parametrize("key", sorted(SOLVERS, key=lambda k: (sorted(k[0]), k[1])))
def test_solver_matches_symbolic_solution(key):
    pair, target = key
    fn, args = SOLVERS[key]
    known = {SYMBOLS[k]: VALUES[SYMBOLS[k]] for k in pair}
    unknowns = [SYMBOLS[k] for k in ParameterKind if k not in pair]
    solutions = [s for s in solve(EQUATIONS, unknowns, dict=True) if _physical(s, known)]
    assert len(solutions) == 1
    expected = solutions[0][SYMBOLS[target]]

    symbolic = fn(*(SYMBOLS[k] for k in args))
    assert float(symbolic.subs(known)) == pytest.approx(float(expected.subs(known)))

    numeric = fn(*(VALUES[SYMBOLS[k]] for k in args))
    assert numeric == pytest.approx(VALUES[SYMBOLS[target]])
