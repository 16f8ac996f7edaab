"""
constpoly.tables
----------------
Constant lookup tables sampled from single-variable Polynomials.

A table is computed once per polynomial and grid and handed out as an
immutable SampleTable; later lookups never re-evaluate the series. The
TABLE_CACHE_SIZE most recently requested tables are kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

from .core.errors import ArityMismatchError
from .expr.polynomial import Polynomial

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SampleTable:
    """
    values[i] = f(start + i * step), i = 0..len(values)-1.

    lookup() interpolates linearly between samples and clamps outside the
    sampled range.
    """
    start: float
    step: float
    values: Tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.values) < 2:
            raise ValueError("a table needs at least two samples")
        if not self.step > 0.0:
            raise ValueError("step must be positive")

    @property
    def stop(self) -> float:
        return self.start + self.step * (len(self.values) - 1)

    def lookup(self, x: float) -> float:
        u = (x - self.start) / self.step
        if u != u:
            return u
        last = len(self.values) - 1
        if not u > 0.0:
            return self.values[0]
        if u >= last:
            return self.values[last]
        i = int(u)
        t = u - i
        v0 = self.values[i]
        v1 = self.values[i + 1]
        return v0 + t * (v1 - v0)


# keyed on (poly, start, stop, count)
TABLE_CACHE_SIZE = 128


@lru_cache(maxsize=TABLE_CACHE_SIZE)
def tabulate(poly: Polynomial, start: float, stop: float, count: int) -> SampleTable:
    """Sample a 1-variable polynomial at ``count`` evenly spaced points, ends included."""
    if poly.arity != 1:
        raise ArityMismatchError(
            f"tables are built from 1-variable polynomials, got arity {poly.arity}",
            expected=1,
            actual=poly.arity,
        )
    if count < 2:
        raise ValueError("count must be >= 2")
    if not stop > start:
        raise ValueError("stop must be greater than start")

    step = (stop - start) / (count - 1)
    values = tuple(poly.evaluate_scalar(start + i * step) for i in range(count))
    logger.debug("tabulated %d samples of %r on [%g, %g]", count, poly, start, stop)
    return SampleTable(start=float(start), step=step, values=values)
