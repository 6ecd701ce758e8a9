# -----------------------------------------------------------------------------
# Tracing utility
# Purpose:
#   Append-only collector of structured resolution steps (inputs, solver
#   calls, errors). Exports a JSON-friendly list for API responses and tests.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class TraceStep:
    # One trace record with a short 'kind' label and free-form structured detail.
    kind: str
    detail: Dict[str, Any]


class Tracer:
    def __init__(self): self._steps: List[TraceStep] = []
    def __len__(self) -> int: return len(self._steps)
    def add(self, kind: str, detail: Dict[str, Any]): self._steps.append(TraceStep(kind, detail))

    def kinds(self) -> List[str]:
        return [s.kind for s in self._steps]

    def steps(self) -> List[Dict[str, Any]]:
        # Values are stringified so exotic number types stay serializable.
        return [{"kind": s.kind, "detail": {k: _plain(v) for k, v in s.detail.items()}}
                for s in self._steps]


def _plain(v: Any) -> Any:
    if isinstance(v, (str, int, float, bool)) or v is None:
        return v
    if isinstance(v, (list, tuple)):
        return [_plain(x) for x in v]
    return str(v)
