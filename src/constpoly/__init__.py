"""constpoly public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .approx import (
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
from .approx.config import SeriesConfig, active_config
from .core.errors import ArityMismatchError, ConstPolyError, SeriesConfigError, UnknownFunctionError
from .core.types import (
    Arctan,
    Cos,
    Cosh,
    Exp,
    FunctionKind,
    Identity,
    Ln,
    Pow,
    Sin,
    Sinh,
    Sqrt,
    Tan,
    VarFunction,
)
from .expr import Polynomial, Term, parse_function, parse_term, poly, term
from .tables import SampleTable, tabulate

__all__ = [
    "sin_approx",
    "cos_approx",
    "tan_approx",
    "exp_approx",
    "ln_approx",
    "sqrt_approx",
    "arctan_approx",
    "sinh_approx",
    "cosh_approx",
    "static_powi",
    "SeriesConfig",
    "active_config",
    "ConstPolyError",
    "ArityMismatchError",
    "SeriesConfigError",
    "UnknownFunctionError",
    "VarFunction",
    "FunctionKind",
    "Identity",
    "Pow",
    "Sin",
    "Cos",
    "Tan",
    "Exp",
    "Ln",
    "Sqrt",
    "Arctan",
    "Sinh",
    "Cosh",
    "Term",
    "Polynomial",
    "term",
    "poly",
    "parse_function",
    "parse_term",
    "SampleTable",
    "tabulate",
]
