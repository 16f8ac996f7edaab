"""
constpoly.approx.config
-----------------------
Series term counts for the approximation library.

Each series-based function reads its term count from the active SeriesConfig.
The active config is resolved once, at import, from environment variables and
is never mutated afterwards; a single call may still override its own count
with ``terms=``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Dict, Mapping, Optional

from ..core.errors import SeriesConfigError

logger = logging.getLogger(__name__)

# field name -> environment variable
ENV_KNOBS: Dict[str, str] = {
    "sin_terms": "SIN_TAYLOR_TERMS",
    "cos_terms": "COS_TAYLOR_TERMS",
    "exp_terms": "EXP_TAYLOR_TERMS",
    "atan_terms": "ATAN_TAYLOR_TERMS",
    "sinh_terms": "SINH_TAYLOR_TERMS",
    "cosh_terms": "COSH_TAYLOR_TERMS",
    "ln_terms": "LN_SERIES_TERMS",
}


@dataclass(frozen=True)
class SeriesConfig:
    """Number of series terms summed by each approximation."""
    sin_terms: int = 10
    cos_terms: int = 10
    exp_terms: int = 20
    atan_terms: int = 50
    sinh_terms: int = 30
    cosh_terms: int = 30
    ln_terms: int = 20

    def __post_init__(self) -> None:
        for f in fields(self):
            check_terms(getattr(self, f.name), f.name)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SeriesConfig":
        env = os.environ if environ is None else environ
        kwargs: Dict[str, int] = {}
        for name, var in ENV_KNOBS.items():
            raw = env.get(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                value = int(raw.strip())
            except ValueError:
                raise SeriesConfigError(f"{var} must be a positive integer, got {raw!r}") from None
            if value < 1:
                raise SeriesConfigError(f"{var} must be a positive integer, got {raw!r}")
            logger.debug("series knob %s=%d taken from environment", var, value)
            kwargs[name] = value
        return cls(**kwargs)

    def as_env(self) -> Dict[str, int]:
        """Map environment-variable name -> resolved count."""
        return {var: getattr(self, name) for name, var in ENV_KNOBS.items()}


def check_terms(n: object, what: str = "terms") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise SeriesConfigError(f"{what} must be an int, got {type(n).__name__}")
    if n < 1:
        raise SeriesConfigError(f"{what} must be >= 1, got {n}")
    return n


ACTIVE: SeriesConfig = SeriesConfig.from_env()


def active_config() -> SeriesConfig:
    return ACTIVE


def resolve_terms(override: Optional[int], configured: int) -> int:
    """Per-call term count: the override when given, else the configured value."""
    if override is None:
        return configured
    return check_terms(override)
