# --- arcjump: Jump Parameter API (FastAPI) -----------------------------------
# Purpose: HTTP access to the resolution engine for tools and level editors:
# (1) resolve two known jump parameters into one or two others, (2) evaluate a
# mnemonic compute line, (3) browse the configured jump profiles.
# ------------------------------------------------------------------------------

from __future__ import annotations
import os
from pathlib import Path
from typing import Any, Dict, List

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from arcjump.catalog import CatalogError, JumpCatalog
from arcjump.compute import ComputeSyntaxError, compute
from arcjump.dispatch import resolve
from arcjump.formulas import DivisionByZero
from arcjump.tracer import Tracer
from arcjump.types import ParameterKind, TaggedValue
from arcjump.units import UnitError, to_canonical

# Load .env for external configuration (profile catalog path, trace default)
load_dotenv()
_ROOT = Path(__file__).resolve().parents[1]
PROFILES_PATH = os.getenv("ARCJUMP_PROFILES", str(_ROOT / "examples" / "jumps.yaml"))
TRACE_DEFAULT = os.getenv("ARCJUMP_TRACE", "0") == "1"

app = FastAPI(title="arcjump Jump Parameter API")

_catalog = JumpCatalog.from_file(PROFILES_PATH)

# ----------------------------- Schemas ----------------------------------------
class ResolveRequest(BaseModel):
    # Two known parameters by kind name ('height', 'H', ...); numbers are read
    # in canonical units, strings may carry units ("6 ft").
    inputs: Dict[str, float | str]
    # One or two requested kinds, in the order results should come back.
    outputs: List[str] = Field(min_length=1, max_length=2)
    trace: bool | None = None

class ComputeRequest(BaseModel):
    expression: str
    variables: Dict[str, float] = Field(default_factory=dict)
    trace: bool | None = None

# ----------------------------- Helpers ----------------------------------------
def _failure(e: DivisionByZero, tracer: Tracer | None) -> Dict[str, Any]:
    return {
        "ok": False,
        "error": str(e),
        "error_kind": "division_by_zero",
        "parameter": str(e.parameter),
        "results": [],
        "trace": tracer.steps() if tracer is not None else [],
    }

def _tracer(flag: bool | None) -> Tracer | None:
    return Tracer() if (TRACE_DEFAULT if flag is None else flag) else None

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.get("/profiles")
def list_profiles():
    return {"count": len(_catalog.profiles), "items": _catalog.list_profiles()}

@app.get("/profiles/{name}")
def get_profile(name: str):
    """Resolved trajectory of one profile."""
    if name not in _catalog.profiles:
        raise HTTPException(status_code=404, detail=f"Unknown profile: {name}")
    try:
        traj = _catalog.trajectory(name)
    except DivisionByZero as e:
        return _failure(e, None)
    except CatalogError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"ok": True, "name": name, "trajectory": traj.as_dict()}

@app.post("/resolve")
def resolve_parameters(req: ResolveRequest):
    """
    Resolve the requested outputs from two known parameters.
    - 400 on malformed kinds or units (caller contract violations)
    - ok=False with error_kind='division_by_zero' when a divisor is zero
    """
    if len(req.inputs) != 2:
        raise HTTPException(status_code=400, detail="Provide exactly two inputs.")
    try:
        tagged = []
        for name, raw in req.inputs.items():
            kind = ParameterKind.parse(name)
            tagged.append(TaggedValue(kind, to_canonical(kind, raw)))
        tracer = _tracer(req.trace)
        results = resolve(tagged[0], tagged[1], *req.outputs, tracer=tracer)
    except (ValueError, UnitError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DivisionByZero as e:
        return _failure(e, tracer)
    return {
        "ok": True,
        "results": [{"kind": r.kind.value, "value": r.value} for r in results],
        "trace": tracer.steps() if tracer is not None else [],
    }

@app.post("/compute")
def compute_expression(req: ComputeRequest):
    """Evaluate a mnemonic line such as 'H(h), T(2) => I, G'."""
    tracer = _tracer(req.trace)
    try:
        out = compute(req.expression, req.variables, tracer=tracer)
    except DivisionByZero as e:
        return _failure(e, tracer)
    except ValueError as e:
        # ComputeSyntaxError and kind contract violations
        raise HTTPException(status_code=400, detail=str(e))
    values = list(out) if isinstance(out, tuple) else [out]
    return {
        "ok": True,
        "values": [float(v) for v in values],
        "trace": tracer.steps() if tracer is not None else [],
    }
