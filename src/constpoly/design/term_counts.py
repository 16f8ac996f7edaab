# design/term_counts.py

from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional, Tuple

from constpoly.approx.config import ENV_KNOBS
from constpoly.diagnostics.accuracy import CONTRACTS, measure

# function name -> SeriesConfig field it is governed by
SERIES_FIELDS: Dict[str, str] = {
    "sin": "sin_terms",
    "cos": "cos_terms",
    "exp": "exp_terms",
    "arctan": "atan_terms",
    "sinh": "sinh_terms",
    "cosh": "cosh_terms",
    "ln": "ln_terms",
}


def minimal_terms(
    name: str,
    tolerance: Optional[float] = None,
    *,
    samples: int = 501,
    max_terms: int = 80,
) -> Tuple[Optional[int], float]:
    """
    Smallest term count whose max error over the contract interval is below
    ``tolerance`` (default: the contract bound).

    Returns (None, best_error) when no count up to ``max_terms`` qualifies.
    """
    if name not in SERIES_FIELDS:
        raise KeyError(f"'{name}' has no series term count. Available: {sorted(SERIES_FIELDS)}")
    tol = CONTRACTS[name].bound if tolerance is None else tolerance
    best = float("inf")
    for n in range(1, max_terms + 1):
        err = measure(name, samples, terms=n).max_error
        best = min(best, err)
        if err < tol:
            return n, err
    return None, best


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Find minimal series term counts meeting an error target.")
    p.add_argument("--tol", type=float, default=None, help="Error target (default: each function's contract bound).")
    p.add_argument("--samples", type=int, default=501, help="Grid points per function (default: 501).")
    p.add_argument("--max-terms", type=int, default=80, help="Largest term count to try (default: 80).")
    p.add_argument("--only", action="append", default=[], choices=sorted(SERIES_FIELDS), help="Restrict to a function (repeatable).")
    args = p.parse_args(argv)

    if args.max_terms < 1:
        print("Error: --max-terms must be at least 1.", file=sys.stderr)
        return 1

    names = args.only or list(SERIES_FIELDS)
    rc = 0
    lines = []
    for name in names:
        n, err = minimal_terms(name, args.tol, samples=args.samples, max_terms=args.max_terms)
        var = ENV_KNOBS[SERIES_FIELDS[name]]
        if n is None:
            lines.append(f"# {var}: no count <= {args.max_terms} meets the target (best error {err:.3e})")
            rc = 1
        else:
            lines.append(f"export {var}={n:<4} # max error {err:.3e}")

    print("\n".join(lines))
    return rc


if __name__ == "__main__":
    sys.exit(main())
