import pytest

from arcjump import dispatch
from arcjump.dispatch import SOLVERS, resolve, resolve_values, solver_for
from arcjump.formulas import DivisionByZero
from arcjump.tracer import Tracer
from arcjump.types import ParameterKind, TaggedValue

H, T, I, G = ParameterKind.HEIGHT, ParameterKind.TIME, ParameterKind.IMPULSE, ParameterKind.GRAVITY


def test_known_scenario():
    out = resolve(TaggedValue(H, 20.0), TaggedValue(T, 2.0), I, G)
    assert out == (TaggedValue(I, 20.0), TaggedValue(G, -10.0))

def test_output_order_follows_request():
    a = resolve(TaggedValue(H, 20.0), TaggedValue(T, 2.0), I, G)
    b = resolve(TaggedValue(H, 20.0), TaggedValue(T, 2.0), G, I)
    assert [r.kind for r in b] == [G, I]
    assert (b[1].value, b[0].value) == (a[0].value, a[1].value)

def test_input_order_does_not_matter():
    a = resolve(TaggedValue(H, 20.0), TaggedValue(T, 2.0), I, G)
    b = resolve(TaggedValue(T, 2.0), TaggedValue(H, 20.0), I, G)
    assert a == b

@pytest.mark.parametrize("h, t", [(20.0, 2.0), (1.5, 0.3), (123.4, 7.7), (0.01, 0.05)])
def test_round_trip_through_impulse_and_gravity(h, t):
    impulse, gravity = resolve_values(TaggedValue(H, h), TaggedValue(T, t), I, G)
    h2, t2 = resolve_values(TaggedValue(I, impulse), TaggedValue(G, gravity), H, T)
    assert h2 == pytest.approx(h)
    assert t2 == pytest.approx(t)

def test_table_covers_every_pair_and_target():
    assert len(SOLVERS) == 12
    for a in ParameterKind:
        for b in ParameterKind:
            if a == b:
                continue
            for out in ParameterKind:
                if out in (a, b):
                    continue
                fn, args = solver_for(a, b, out)
                assert set(args) == {a, b}

def test_mnemonic_outputs():
    assert resolve_values(TaggedValue.of("H", 20.0), TaggedValue.of("time", 2.0), "I") == 20.0
    assert resolve_values(TaggedValue(H, 20.0), TaggedValue(T, 2.0), "Gravity", "i") == (-10.0, 20.0)

def test_gravity_from_zero_time_names_time():
    with pytest.raises(DivisionByZero) as exc:
        resolve(TaggedValue(I, 5.0), TaggedValue(T, 0.0), G)
    assert exc.value.parameter is T

def test_time_from_zero_impulse_names_impulse():
    with pytest.raises(DivisionByZero) as exc:
        resolve(TaggedValue(H, 10.0), TaggedValue(I, 0.0), T)
    assert exc.value.parameter is I

def test_first_failure_stops_the_request(monkeypatch):
    calls = []

    def spy(height, impulse):
        calls.append((height, impulse))
        return 0.0

    monkeypatch.setitem(dispatch.SOLVERS, (frozenset((H, I)), G), (spy, (H, I)))
    with pytest.raises(DivisionByZero):
        resolve(TaggedValue(H, 10.0), TaggedValue(I, 0.0), T, G)
    assert calls == []

def test_second_output_runs_when_first_succeeds(monkeypatch):
    calls = []

    def spy(height, impulse):
        calls.append((height, impulse))
        return -1.0

    monkeypatch.setitem(dispatch.SOLVERS, (frozenset((H, I)), G), (spy, (H, I)))
    assert resolve_values(TaggedValue(I, 4.0), TaggedValue(H, 10.0), T, G) == (5.0, -1.0)
    assert calls == [(10.0, 4.0)]

@pytest.mark.parametrize("first, second, outputs", [
    (TaggedValue(H, 1.0), TaggedValue(H, 2.0), (T,)),
    (TaggedValue(H, 1.0), TaggedValue(T, 2.0), (H,)),
    (TaggedValue(H, 1.0), TaggedValue(T, 2.0), (I, I)),
    (TaggedValue(H, 1.0), TaggedValue(T, 2.0), ()),
    (TaggedValue(H, 1.0), TaggedValue(T, 2.0), (I, G, H)),
    (TaggedValue(H, 1.0), TaggedValue(T, 2.0), ("velocity",)),
])
def test_malformed_requests_are_rejected(first, second, outputs):
    with pytest.raises(ValueError):
        resolve(first, second, *outputs)

def test_tracer_records_steps():
    tracer = Tracer()
    resolve(TaggedValue(H, 20.0), TaggedValue(T, 2.0), I, G, tracer=tracer)
    assert tracer.kinds() == ["input", "solve", "solve"]
    steps = tracer.steps()
    assert steps[1]["detail"]["solver"] == "impulse_from_height_and_time"
    assert steps[2]["detail"]["value"] == -10.0

def test_tracer_records_error():
    tracer = Tracer()
    with pytest.raises(DivisionByZero):
        resolve(TaggedValue(I, 5.0), TaggedValue(T, 0.0), H, G, tracer=tracer)
    assert tracer.kinds() == ["input", "solve", "error"]
    assert tracer.steps()[-1]["detail"]["parameter"] == "Time"
