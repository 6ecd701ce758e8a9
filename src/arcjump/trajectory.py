# -----------------------------------------------------------------------------
# Trajectory aggregate
# Purpose: store the four resolved parameters of one jump for inspection and
# reuse (e.g. keep the impulse of a primary jump for a shorter secondary one).
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, Generic

from .dispatch import resolve
from .types import N, ParameterKind, TaggedValue


@dataclass(frozen=True)
class Trajectory(Generic[N]):
    """
    Parameters of a jump.
    - height: peak altitude above the launch point
    - time: time to reach the peak
    - impulse: initial vertical velocity
    - gravity: vertical acceleration
    """
    height: N
    time: N
    impulse: N
    gravity: N

    @classmethod
    def from_pair(cls, first: TaggedValue, second: TaggedValue) -> "Trajectory":
        """Resolve the two missing parameters; DivisionByZero propagates."""
        missing = [k for k in ParameterKind if k not in (first.kind, second.kind)]
        values = {first.kind: first.value, second.kind: second.value}
        for r in resolve(first, second, *missing):
            values[r.kind] = r.value
        return cls(**{k.value: v for k, v in values.items()})

    @classmethod
    def from_known(cls, **known: Any) -> "Trajectory":
        # Exactly two of: height, time, impulse, gravity (or H/T/I/G).
        if len(known) != 2:
            raise ValueError(f"Provide exactly two known parameters, got {sorted(known)}.")
        (ka, va), (kb, vb) = known.items()
        return cls.from_pair(TaggedValue.of(ka, va), TaggedValue.of(kb, vb))

    @classmethod
    def from_height_and_time(cls, height, time) -> "Trajectory":
        return cls.from_known(height=height, time=time)

    @classmethod
    def from_height_and_impulse(cls, height, impulse) -> "Trajectory":
        return cls.from_known(height=height, impulse=impulse)

    @classmethod
    def from_height_and_gravity(cls, height, gravity) -> "Trajectory":
        return cls.from_known(height=height, gravity=gravity)

    @classmethod
    def from_time_and_impulse(cls, time, impulse) -> "Trajectory":
        return cls.from_known(time=time, impulse=impulse)

    @classmethod
    def from_time_and_gravity(cls, time, gravity) -> "Trajectory":
        return cls.from_known(time=time, gravity=gravity)

    @classmethod
    def from_impulse_and_gravity(cls, impulse, gravity) -> "Trajectory":
        return cls.from_known(impulse=impulse, gravity=gravity)

    def get(self, kind: Any) -> N:
        return getattr(self, ParameterKind.parse(kind).value)

    def as_dict(self) -> Dict[str, N]:
        return asdict(self)
