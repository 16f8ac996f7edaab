# diagnostics/accuracy.py

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from constpoly.approx import (
    arctan_approx,
    cos_approx,
    cosh_approx,
    exp_approx,
    ln_approx,
    sin_approx,
    sinh_approx,
    sqrt_approx,
    tan_approx,
)
from constpoly.approx.reduction import HALF_PI, TWO_PI


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "constpoly[diagnostics]"') from e


@dataclass(frozen=True)
class Contract:
    """Interval, grid spacing and error bound an approximation is held to."""
    func: Callable[..., float]
    reference: str           # numpy ufunc name
    interval: Tuple[float, float]
    bound: float
    grid: str = "linear"     # "linear" or "log"
    relative_above: float = float("inf")  # |ref| beyond which the bound is relative


CONTRACTS: Dict[str, Contract] = {
    "sin": Contract(sin_approx, "sin", (-TWO_PI, TWO_PI), 1e-9),
    "cos": Contract(cos_approx, "cos", (-TWO_PI, TWO_PI), 1e-9),
    "tan": Contract(tan_approx, "tan", (-TWO_PI, TWO_PI), 1e-7),
    "exp": Contract(exp_approx, "exp", (-10.0, 10.0), 1e-10),
    "ln": Contract(ln_approx, "log", (1e-6, 1e6), 1e-15, grid="log", relative_above=1.0),
    "sqrt": Contract(sqrt_approx, "sqrt", (1e-6, 1e9), 1e-10, grid="log"),
    "arctan": Contract(arctan_approx, "arctan", (-100.0, 100.0), 1e-15),
    "sinh": Contract(sinh_approx, "sinh", (-10.0, 10.0), 1e-10),
    "cosh": Contract(cosh_approx, "cosh", (-10.0, 10.0), 1e-10),
}

# tan is only held to its bound this far from an asymptote
TAN_POLE_MARGIN = 0.05


@dataclass(frozen=True)
class AccuracyReport:
    name: str
    samples: int
    max_error: float
    worst_x: float
    bound: float

    @property
    def passed(self) -> bool:
        return self.max_error < self.bound


def sample_points(contract: Contract, samples: int):
    np = _need_numpy()
    lo, hi = contract.interval
    if contract.grid == "log":
        xs = np.geomspace(lo, hi, samples)
    else:
        xs = np.linspace(lo, hi, samples)
    return xs


def _away_from_poles(np, xs):
    k = np.round(xs / HALF_PI)
    odd = (k.astype(np.int64) % 2) != 0
    near = np.abs(xs - k * HALF_PI) < TAN_POLE_MARGIN
    return xs[~(odd & near)]


def measure(name: str, samples: int = 2001, *, terms: Optional[int] = None) -> AccuracyReport:
    """Max error of one approximation against numpy over its contract interval."""
    np = _need_numpy()
    if name not in CONTRACTS:
        raise KeyError(f"Unknown function '{name}'. Available: {sorted(CONTRACTS)}")
    c = CONTRACTS[name]
    xs = sample_points(c, samples)
    if name == "tan":
        xs = _away_from_poles(np, xs)

    ref_fn = getattr(np, c.reference)
    kwargs = {} if terms is None else {"terms": terms}
    approx = np.array([c.func(float(x), **kwargs) for x in xs])
    ref = ref_fn(xs)

    err = np.abs(approx - ref)
    scale = np.where(np.abs(ref) > c.relative_above, np.abs(ref), 1.0)
    err = err / scale

    i = int(np.argmax(err))
    return AccuracyReport(name=name, samples=int(xs.size), max_error=float(err[i]), worst_x=float(xs[i]), bound=c.bound)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Measure approximation error against numpy references.")
    p.add_argument("--samples", type=int, default=2001, help="Grid points per function (default: 2001).")
    p.add_argument("--only", action="append", default=[], choices=sorted(CONTRACTS), help="Restrict to a function (repeatable).")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.samples < 2:
        print("Error: --samples must be at least 2.", file=sys.stderr)
        return 1

    names = args.only or list(CONTRACTS)
    reports = [measure(n, args.samples) for n in names]

    lines = []
    lines.append(f"{'Function':<8} | {'Samples':>7} | {'Max error':>12} | {'Bound':>8} | {'Worst x':>14} | Status")
    lines.append("-" * 72)
    for r in reports:
        status = "ok" if r.passed else "FAIL"
        lines.append(f"{r.name:<8} | {r.samples:>7} | {r.max_error:>12.3e} | {r.bound:>8.0e} | {r.worst_x:>14.6g} | {status}")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0 if all(r.passed for r in reports) else 1


if __name__ == "__main__":
    sys.exit(main())
