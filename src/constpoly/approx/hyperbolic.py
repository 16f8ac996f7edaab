from __future__ import annotations

from typing import Optional

from . import config as _config


def sinh_approx(x: float, *, terms: Optional[int] = None) -> float:
    """sinh(x) = x + x^3/3! + x^5/5! + ... (no range reduction)."""
    n = _config.resolve_terms(terms, _config.ACTIVE.sinh_terms)
    term = x
    s = x
    x2 = x * x
    for i in range(1, n):
        term *= x2 / ((2 * i) * (2 * i + 1))
        s += term
    return s


def cosh_approx(x: float, *, terms: Optional[int] = None) -> float:
    """cosh(x) = 1 + x^2/2! + x^4/4! + ... (no range reduction)."""
    n = _config.resolve_terms(terms, _config.ACTIVE.cosh_terms)
    term = 1.0
    s = 1.0
    x2 = x * x
    for i in range(1, n):
        term *= x2 / ((2 * i - 1) * (2 * i))
        s += term
    return s
