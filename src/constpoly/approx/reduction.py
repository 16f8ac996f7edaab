from __future__ import annotations

from typing import Tuple

# Binary64 roundings of the constants; no math module involved.
PI = 3.141592653589793
TWO_PI = 2.0 * PI
HALF_PI = PI / 2.0
QUARTER_PI = PI / 4.0

LN2 = 0.6931471805599453
# ln 2 split so that k * LN2_HI is exact for |k| < 2**20 (Cody-Waite)
LN2_HI = 6.93147180369123816490e-01
LN2_LO = 1.90821492927058770002e-10

INF = float("inf")
NAN = float("nan")

# Beyond this magnitude consecutive doubles are more than a radian apart and an
# angle carries no usable phase.
MAX_REDUCIBLE_ANGLE = 2.0 ** 50


def abs_(x: float) -> float:
    """Branch-based absolute value (keeps -0.0 as -0.0, NaN as NaN)."""
    return -x if x < 0.0 else x


def is_nan(x: float) -> bool:
    return x != x


def is_finite(x: float) -> bool:
    return x == x and -INF < x < INF


def reduce_angle(x: float) -> float:
    """
    Reduce x into [-pi, pi].

    Equivalent to repeated subtraction/addition of 2*pi, done with a single
    quotient so the step count does not grow with |x|. Non-finite input and
    angles beyond MAX_REDUCIBLE_ANGLE map to NaN.
    """
    if not is_finite(x) or abs_(x) > MAX_REDUCIBLE_ANGLE:
        return NAN
    if x > PI or x < -PI:
        x -= TWO_PI * round(x / TWO_PI)
        # one guard step each way for the rounding of the quotient
        if x > PI:
            x -= TWO_PI
        elif x < -PI:
            x += TWO_PI
    return x


def reflect_sin(x: float) -> float:
    """Map x in [-pi, pi] to [-pi/2, pi/2] with sin unchanged: sin(pi - x) = sin(x)."""
    if x > HALF_PI:
        return PI - x
    if x < -HALF_PI:
        return -PI - x
    return x


def reflect_cos(x: float) -> Tuple[float, float]:
    """
    Map x in [-pi, pi] to [-pi/2, pi/2] for cosine.

    Returns (sign, y) with cos(x) = sign * cos(y).
    """
    if x > HALF_PI:
        return -1.0, PI - x
    if x < -HALF_PI:
        return -1.0, -PI - x
    return 1.0, x


def ieee_div(a: float, b: float) -> float:
    """a / b with IEEE-754 results for a zero divisor instead of ZeroDivisionError."""
    if b != 0.0:
        return a / b
    if a == 0.0 or is_nan(a):
        return NAN
    b_negative = b.hex().startswith("-")
    return -INF if (a < 0.0) != b_negative else INF
