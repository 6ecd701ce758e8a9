# -----------------------------------------------------------------------------
# Mnemonic compute layer
# Purpose:
#   Let gameplay code name the two known parameters and the wanted outputs in
#   one short line, e.g.
#       compute("H(jump_height), T(0.4) => I, G as f32", jump_height=2.5)
#   and leave kind identification and solver choice to the dispatcher.
# Grammar:
#   <Kind>(<expr>), <Kind>(<expr>) => <Kind>[, <Kind>] [as <type>]
#   Kind: H | Height | T | Time | I | Impulse | G | Gravity
#   type: f32 | f64 | float | Decimal | Fraction
# Safety:
#   Input expressions are evaluated over a whitelisted AST (numbers, caller
#   variables, + - * / **, unary +/-, sqrt, abs, min, max). No builtins.
# -----------------------------------------------------------------------------

from __future__ import annotations
import ast
import re
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import numpy

from .dispatch import resolve_values
from .numeric import sqrt
from .tracer import Tracer
from .types import ParameterKind, TaggedValue


class ComputeSyntaxError(ValueError): pass


# Numeric type annotations accepted after 'as'
NUMERIC_TYPES: Dict[str, Callable[[Any], Any]] = {
    "f32": numpy.float32,
    "f64": float,
    "float": float,
    "Decimal": lambda v: v if isinstance(v, Decimal) else Decimal(str(v)),
    "Fraction": Fraction,
}

_ALLOWED_FUNCS = {"sqrt": sqrt, "abs": abs, "min": min, "max": max}

_BINOPS = {
    ast.Add: lambda a, b: a + b,
    ast.Sub: lambda a, b: a - b,
    ast.Mult: lambda a, b: a * b,
    ast.Div: lambda a, b: a / b,
    ast.Pow: lambda a, b: a ** b,
}

_REQUEST = re.compile(r"^(?P<inputs>.+?)=>(?P<outputs>.+?)(?:\s+as\s+(?P<type>\w+))?\s*$", re.S)


@dataclass
class ComputeRequest:
    # Parsed form of a mnemonic line, before evaluation.
    inputs: List[Tuple[ParameterKind, ast.expr]]
    outputs: List[ParameterKind]
    numeric_type: Optional[str] = None


def _eval_ast(node: ast.AST, variables: Dict[str, Any]) -> Any:
    """Evaluate one input expression; values keep their own number type."""
    if isinstance(node, ast.Constant):
        if isinstance(node.value, (int, float)) and not isinstance(node.value, bool):
            return node.value
        raise ComputeSyntaxError("Unsupported constant type.")
    if isinstance(node, ast.Name):
        if node.id in variables:
            return variables[node.id]
        raise ComputeSyntaxError(f"Unknown name: {node.id}")
    if isinstance(node, ast.BinOp):
        op = _BINOPS.get(type(node.op))
        if op is None:
            raise ComputeSyntaxError("Unsupported operator.")
        return op(_eval_ast(node.left, variables), _eval_ast(node.right, variables))
    if isinstance(node, ast.UnaryOp):
        val = _eval_ast(node.operand, variables)
        if isinstance(node.op, ast.USub): return -val
        if isinstance(node.op, ast.UAdd): return +val
        raise ComputeSyntaxError("Unsupported unary operator.")
    if isinstance(node, ast.Call):
        # Only bare function names allowed; no attribute access or keywords
        if not isinstance(node.func, ast.Name) or node.func.id not in _ALLOWED_FUNCS:
            raise ComputeSyntaxError("Unsupported call.")
        if node.keywords:
            raise ComputeSyntaxError("Keywords not allowed.")
        return _ALLOWED_FUNCS[node.func.id](*(_eval_ast(a, variables) for a in node.args))
    raise ComputeSyntaxError("Unsupported syntax.")


def _parse_input(node: ast.expr) -> Tuple[ParameterKind, ast.expr]:
    # Each input reads like a call: Height(expr)
    if not (isinstance(node, ast.Call) and isinstance(node.func, ast.Name)
            and len(node.args) == 1 and not node.keywords):
        raise ComputeSyntaxError("Inputs must look like Kind(expression).")
    try:
        return ParameterKind.parse(node.func.id), node.args[0]
    except ValueError as e:
        raise ComputeSyntaxError(str(e)) from e


def parse(text: str) -> ComputeRequest:
    """Split a mnemonic line into input kinds/expressions, output kinds and type."""
    m = _REQUEST.match(text or "")
    if not m:
        raise ComputeSyntaxError("Expected '<inputs> => <outputs> [as <type>]'.")
    try:
        tree = ast.parse(m.group("inputs").strip(), mode="eval").body
    except SyntaxError as e:
        raise ComputeSyntaxError(f"Invalid input expression: {e.msg}") from e
    nodes = tree.elts if isinstance(tree, ast.Tuple) else [tree]
    if len(nodes) != 2:
        raise ComputeSyntaxError(f"Expected two inputs, got {len(nodes)}.")
    inputs = [_parse_input(n) for n in nodes]

    outputs = []
    for name in m.group("outputs").split(","):
        try:
            outputs.append(ParameterKind.parse(name))
        except ValueError as e:
            raise ComputeSyntaxError(str(e)) from e

    numeric_type = m.group("type")
    if numeric_type is not None and numeric_type not in NUMERIC_TYPES:
        raise ComputeSyntaxError(f"Unknown numeric type: {numeric_type}")
    return ComputeRequest(inputs=inputs, outputs=outputs, numeric_type=numeric_type)


def compute(text: str, /, variables: Optional[Mapping[str, Any]] = None, *,
            tracer: Optional[Tracer] = None, **kw: Any):
    """
    Evaluate a mnemonic line.
    Variables come from the `variables` mapping and from keyword arguments;
    pass names such as "tracer" or "variables" through the mapping.
    Returns a bare value for one output and a tuple for two. DivisionByZero
    from the solvers is forwarded unchanged; kind errors (duplicates,
    overlap) surface as ValueError from the dispatcher.
    """
    req = parse(text)
    variables = {**(variables or {}), **kw}
    cast = NUMERIC_TYPES[req.numeric_type] if req.numeric_type else None
    tagged = []
    for kind, expr in req.inputs:
        value = _eval_ast(expr, variables)
        tagged.append(TaggedValue(kind, cast(value) if cast else value))
    return resolve_values(tagged[0], tagged[1], *req.outputs, tracer=tracer)
