from __future__ import annotations

from typing import Optional

from . import config as _config
from .reduction import (
    HALF_PI,
    QUARTER_PI,
    abs_,
    reduce_angle,
    reflect_cos,
    reflect_sin,
)

TAN_POLE_EPS = 1e-12
TAN_SENTINEL = 1e12

# Above this |x| the argument is shifted by +-pi/4 before the arctan series.
ATAN_REDUCE_ABOVE = 0.66


def _sin_series(x: float, n: int) -> float:
    # x - x^3/3! + x^5/5! - ...
    term = x
    s = x
    x2 = x * x
    for i in range(1, n):
        term *= -x2 / ((2 * i) * (2 * i + 1))
        s += term
    return s


def _cos_series(x: float, n: int) -> float:
    # 1 - x^2/2! + x^4/4! - ...
    term = 1.0
    s = 1.0
    x2 = x * x
    for i in range(1, n):
        term *= -x2 / ((2 * i - 1) * (2 * i))
        s += term
    return s


def sin_approx(x: float, *, terms: Optional[int] = None) -> float:
    """
    sin(x) by Taylor series after reduction to [-pi/2, pi/2].

    With the default 10 terms (through x^19) the truncation error on the
    reduced interval is below 3e-16.
    """
    n = _config.resolve_terms(terms, _config.ACTIVE.sin_terms)
    return _sin_series(reflect_sin(reduce_angle(x)), n)


def cos_approx(x: float, *, terms: Optional[int] = None) -> float:
    """cos(x) by Taylor series; the reflection into [-pi/2, pi/2] flips the sign."""
    n = _config.resolve_terms(terms, _config.ACTIVE.cos_terms)
    sign, y = reflect_cos(reduce_angle(x))
    return sign * _cos_series(y, n)


def tan_approx(x: float, *, terms: Optional[int] = None) -> float:
    """
    sin(x) / cos(x).

    Where |cos(x)| < 1e-12 the pole is reported as the finite sentinel +-1e12,
    signed like sin(x). NaN input still gives NaN.
    """
    s = sin_approx(x, terms=terms)
    c = cos_approx(x, terms=terms)
    if abs_(c) < TAN_POLE_EPS:
        return TAN_SENTINEL if s > 0.0 else -TAN_SENTINEL
    return s / c


def _atan_series(x: float, n: int) -> float:
    # x * (1 - x^2/3 + x^4/5 - ...), summed from the smallest term up
    x2 = x * x
    acc = 1.0 / (2 * n - 1)
    for i in range(n - 2, -1, -1):
        acc = 1.0 / (2 * i + 1) - x2 * acc
    return x * acc


def arctan_approx(x: float, *, terms: Optional[int] = None) -> float:
    """
    arctan(x) in radians.

    |x| > 1:      atan(x) = +-pi/2 - atan(1/x)
    |x| > 0.66:   atan(x) = +-pi/4 + atan((|x| - 1) / (|x| + 1))
    otherwise:    odd-power Taylor series.
    """
    n = _config.resolve_terms(terms, _config.ACTIVE.atan_terms)
    if x > 1.0:
        return HALF_PI - arctan_approx(1.0 / x, terms=n)
    if x < -1.0:
        return -HALF_PI - arctan_approx(1.0 / x, terms=n)
    if x > ATAN_REDUCE_ABOVE:
        return QUARTER_PI + _atan_series((x - 1.0) / (x + 1.0), n)
    if x < -ATAN_REDUCE_ABOVE:
        return -QUARTER_PI - _atan_series((-x - 1.0) / (-x + 1.0), n)
    return _atan_series(x, n)
