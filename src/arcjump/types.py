# -----------------------------------------------------------------------------
# Types module: shared data model for the jump parameter engine
# Purpose:
#   Define the four trajectory parameter kinds, the tagged value handed to the
#   dispatcher, and the canonical unordered pair used to look up solvers.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Generic, TypeVar

N = TypeVar("N")


class ParameterKind(str, Enum):
    """
    The four interrelated trajectory parameters.
    - IMPULSE: initial vertical velocity (typically positive)
    - GRAVITY: constant vertical acceleration (typically negative)
    - HEIGHT: peak altitude above the launch point (non-negative)
    - TIME: time from launch to the peak (non-negative)
    """
    IMPULSE = "impulse"
    GRAVITY = "gravity"
    HEIGHT = "height"
    TIME = "time"

    @classmethod
    def parse(cls, name: Any) -> "ParameterKind":
        """Accept a kind, its value, its full name or its one-letter mnemonic."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        kind = MNEMONICS.get(key)
        if kind is None:
            raise ValueError(f"Unknown parameter kind: {name!r}")
        return kind

    @property
    def symbol(self) -> str:
        # One-letter mnemonic, e.g. 'H' for HEIGHT
        return self.name[0]

    def __str__(self) -> str:
        return self.name.capitalize()


# Mnemonic aliases accepted wherever a kind is named by text
MNEMONICS = {
    "i": ParameterKind.IMPULSE, "impulse": ParameterKind.IMPULSE,
    "g": ParameterKind.GRAVITY, "gravity": ParameterKind.GRAVITY,
    "h": ParameterKind.HEIGHT, "height": ParameterKind.HEIGHT,
    "t": ParameterKind.TIME, "time": ParameterKind.TIME,
}


@dataclass(frozen=True)
class TaggedValue(Generic[N]):
    # A numeric value together with the role it plays in the trajectory.
    kind: ParameterKind
    value: N

    @classmethod
    def of(cls, kind: Any, value: N) -> "TaggedValue[N]":
        return cls(ParameterKind.parse(kind), value)


def kind_pair(first: ParameterKind, second: ParameterKind) -> FrozenSet[ParameterKind]:
    """
    Canonical unordered identity of two input kinds (six possibilities).
    Supplying the same kind twice is a caller error.
    """
    if first == second:
        raise ValueError(f"Input kinds must be distinct, got {first} twice.")
    return frozenset((first, second))
