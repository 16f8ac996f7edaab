from __future__ import annotations

from typing import Optional

from . import config as _config
from .reduction import INF, LN2, LN2_HI, LN2_LO, NAN, ieee_div, is_nan

# e^x overflows binary64 above this and underflows to 0 below the second bound
EXP_OVERFLOW = 709.782712893384
EXP_UNDERFLOW = -745.1332191019412

SQRT_NEWTON_STEPS = 12


def static_powi(base: float, exponent: int) -> float:
    """
    base ** exponent for an integer exponent, by repeated squaring.

    exponent == 0 gives 1.0 for every base (0.0 and NaN included). A negative
    exponent is the reciprocal of the positive power; a zero positive power
    then gives a signed infinity rather than raising.
    """
    if exponent == 0:
        return 1.0
    e = -exponent if exponent < 0 else exponent
    result = 1.0
    b = base
    while e > 0:
        if e & 1:
            result *= b
        e >>= 1
        if e:
            b *= b
    if exponent < 0:
        return ieee_div(1.0, result)
    return result


def _scale2(y: float, n: int) -> float:
    # y * 2**n in two halves so that 2**n itself never overflows or underflows
    half = n // 2
    return y * static_powi(2.0, half) * static_powi(2.0, n - half)


def exp_approx(x: float, *, terms: Optional[int] = None) -> float:
    """
    e^x.

    x is split as n*ln2 + r with n = round(x / ln2), so |r| <= ln2/2; e^r comes
    from a Taylor series and is scaled by 2**n.
    """
    if x == 0.0:
        return 1.0
    if is_nan(x):
        return x
    if x > EXP_OVERFLOW:
        return INF
    if x < EXP_UNDERFLOW:
        return 0.0
    n_terms = _config.resolve_terms(terms, _config.ACTIVE.exp_terms)

    n = round(x / LN2)
    r = (x - n * LN2_HI) - n * LN2_LO

    term = 1.0
    s = 1.0
    for i in range(1, n_terms):
        term *= r / i
        s += term
    return _scale2(s, n)


def ln_approx(x: float, *, terms: Optional[int] = None) -> float:
    """
    Natural logarithm; NaN for x <= 0.

    x is brought into [0.5, 1.5] by halving/doubling (x = y * 2**k) and
    ln(y) = 2 * sum z^(2i-1) / (2i-1) with z = (y - 1) / (y + 1).
    """
    if x <= 0.0:
        return NAN
    if is_nan(x) or x == INF:
        return x
    n_terms = _config.resolve_terms(terms, _config.ACTIVE.ln_terms)

    y = x
    k = 0
    while y > 1.5:
        y *= 0.5
        k += 1
    while y < 0.5:
        y *= 2.0
        k -= 1

    z = (y - 1.0) / (y + 1.0)
    z2 = z * z
    term = z
    s = 0.0
    for i in range(1, n_terms + 1):
        s += term / (2 * i - 1)
        term *= z2

    if k == 0:
        return 2.0 * s
    return k * LN2_HI + (2.0 * s + k * LN2_LO)


def sqrt_approx(x: float) -> float:
    """
    Square root by a fixed number of Newton-Raphson steps; NaN for x < 0.

    x is written as m * 4**k with m in [1, 4) so the starting guess
    (1 + m) / 2 is within a factor 1.25 of sqrt(m) and the step count does not
    depend on the magnitude of x.
    """
    if x < 0.0:
        return NAN
    if x == 0.0:
        return 0.0
    if is_nan(x) or x == INF:
        return x

    m = x
    k = 0
    while m >= 4.0:
        m *= 0.25
        k += 1
    while m < 1.0:
        m *= 4.0
        k -= 1

    guess = 0.5 * (1.0 + m)
    for _ in range(SQRT_NEWTON_STEPS):
        guess = 0.5 * (guess + m / guess)
    return _scale2(guess, k)


__all__ = ["static_powi", "exp_approx", "ln_approx", "sqrt_approx", "LN2"]
