"""
constpoly.expr.dispatch
-----------------------
Maps each VarFunction variant to the approximation it applies.

The table must cover FunctionKind exactly; a variant added to FunctionKind
without an entry here fails at import rather than at evaluation.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..approx import (
    arctan_approx,
    cos_approx,
    cosh_approx,
    exp_approx,
    ln_approx,
    sin_approx,
    sinh_approx,
    sqrt_approx,
    static_powi,
    tan_approx,
)
from ..core.types import FunctionKind, VarFunction

Handler = Callable[[VarFunction, float], float]

_HANDLERS: Dict[FunctionKind, Handler] = {
    FunctionKind.IDENTITY: lambda f, x: x,
    FunctionKind.POW: lambda f, x: static_powi(x, f.exponent),
    FunctionKind.SIN: lambda f, x: sin_approx(x),
    FunctionKind.COS: lambda f, x: cos_approx(x),
    FunctionKind.TAN: lambda f, x: tan_approx(x),
    FunctionKind.EXP: lambda f, x: exp_approx(x),
    FunctionKind.LN: lambda f, x: ln_approx(x),
    FunctionKind.SQRT: lambda f, x: sqrt_approx(x),
    FunctionKind.ARCTAN: lambda f, x: arctan_approx(x),
    FunctionKind.SINH: lambda f, x: sinh_approx(x),
    FunctionKind.COSH: lambda f, x: cosh_approx(x),
}


def _check_exhaustive() -> None:
    missing = set(FunctionKind) - set(_HANDLERS)
    if missing:
        names = sorted(k.name for k in missing)
        raise TypeError(f"No dispatch entry for FunctionKind {names}")


_check_exhaustive()


def apply(fn: VarFunction, x: float) -> float:
    """Apply one selector to one operand."""
    return _HANDLERS[fn.kind](fn, x)
