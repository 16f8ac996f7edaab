"""Scalar approximations of the elementary transcendental functions.

Everything here is pure float arithmetic: no math module, bounded loops,
NaN for domain errors.
"""

from .explog import exp_approx, ln_approx, sqrt_approx, static_powi
from .hyperbolic import cosh_approx, sinh_approx
from .reduction import abs_
from .trig import arctan_approx, cos_approx, sin_approx, tan_approx

__all__ = [
    "abs_",
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
]
