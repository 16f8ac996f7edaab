"""
constpoly.expr.builder
----------------------
Concise construction of Terms and Polynomials.

    poly(
        (1.5, Sin, Identity, Pow(2)),
        (-2.0, [Cos, Pow(3), Identity]),
    )

Arity comes from the first row, the term count from the number of rows. Rows
of different length are rejected here, before anything can be evaluated.
"""

from __future__ import annotations

import re
from typing import Dict, Optional, Sequence, Tuple, Union

from ..core.errors import ArityMismatchError, UnknownFunctionError
from ..core.types import VarFunction
from .polynomial import Polynomial
from .term import Term

Row = Union[Tuple[float, Sequence[VarFunction]], Sequence[object]]

_NAMES: Dict[str, VarFunction] = {
    "x": VarFunction.Identity,
    "id": VarFunction.Identity,
    "identity": VarFunction.Identity,
    "sin": VarFunction.Sin,
    "cos": VarFunction.Cos,
    "tan": VarFunction.Tan,
    "exp": VarFunction.Exp,
    "ln": VarFunction.Ln,
    "log": VarFunction.Ln,
    "sqrt": VarFunction.Sqrt,
    "arctan": VarFunction.Arctan,
    "atan": VarFunction.Arctan,
    "sinh": VarFunction.Sinh,
    "cosh": VarFunction.Cosh,
}

_POW_RE = re.compile(r"^(?:pow\(\s*([+-]?\d+)\s*\)|x\^([+-]?\d+))$")


def term(coefficient: float, *functions: VarFunction) -> Term:
    return Term(coefficient, functions)


def _row_to_term(i: int, row: Row) -> Term:
    if len(row) == 0:
        raise ValueError(f"row {i} is empty; expected (coefficient, functions...)")
    coeff, rest = row[0], list(row[1:])
    # (c, [f0, f1, ...]) and (c, f0, f1, ...) are both accepted
    if len(rest) == 1 and not isinstance(rest[0], VarFunction):
        rest = list(rest[0])
    return Term(coeff, rest)


def poly(*rows: Row, arity: Optional[int] = None) -> Polynomial:
    terms = tuple(_row_to_term(i, r) for i, r in enumerate(rows))
    if not terms and arity is None:
        raise ArityMismatchError("poly() needs at least one row or an explicit arity", expected=None, actual=0)
    return Polynomial(terms, arity=arity)


def parse_function(text: str) -> VarFunction:
    """
    "sin" -> Sin, "pow(-2)" / "x^-2" -> Pow(-2), "x" -> Identity.
    """
    s = text.strip().lower()
    if s in _NAMES:
        return _NAMES[s]
    m = _POW_RE.match(s)
    if m:
        return VarFunction.Pow(int(m.group(1) if m.group(1) is not None else m.group(2)))
    known = sorted(set(_NAMES) | {"pow(n)", "x^n"})
    raise UnknownFunctionError(f"Unknown function '{text}'. Available: {known}")


def parse_term(text: str) -> Term:
    """
    "1.5:sin,x,pow(2)" -> Term(1.5, [Sin, Identity, Pow(2)]).
    """
    coeff_s, sep, funcs_s = text.partition(":")
    if not sep:
        raise ValueError(f"term '{text}' must look like 'coefficient:f0,f1,...'")
    try:
        coeff = float(coeff_s)
    except ValueError:
        raise ValueError(f"bad coefficient {coeff_s!r} in term '{text}'") from None
    names = [p for p in funcs_s.split(",") if p.strip()]
    return Term(coeff, [parse_function(p) for p in names])
