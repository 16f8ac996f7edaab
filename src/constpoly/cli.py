from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from typing import Callable, Dict, List, Optional

from .core.errors import ConstPolyError


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _approx_functions() -> Dict[str, Callable[..., float]]:
    from . import approx

    return {
        "sin": approx.sin_approx,
        "cos": approx.cos_approx,
        "tan": approx.tan_approx,
        "exp": approx.exp_approx,
        "ln": approx.ln_approx,
        "sqrt": approx.sqrt_approx,
        "arctan": approx.arctan_approx,
        "sinh": approx.sinh_approx,
        "cosh": approx.cosh_approx,
    }


def cmd_approx(argv: List[str]) -> int:
    funcs = _approx_functions()

    p = argparse.ArgumentParser(prog="constpoly approx", description="Evaluate one approximation at one or more points.")
    p.add_argument("func", choices=sorted(funcs))
    p.add_argument("x", type=float, nargs="+")
    p.add_argument("--terms", type=int, default=None, help="Override the series term count for this run")
    args = p.parse_args(argv)

    fn = funcs[args.func]
    kwargs = {}
    if args.terms is not None:
        if args.func == "sqrt":
            p.error("sqrt is a Newton iteration and takes no --terms")
        kwargs["terms"] = args.terms
    for x in args.x:
        print(f"{args.func}({x!r}) = {fn(x, **kwargs)!r}")
    return 0


def _build_poly(term_texts: List[str]):
    from .expr.builder import parse_term
    from .expr.polynomial import Polynomial

    return Polynomial([parse_term(t) for t in term_texts])


def cmd_eval(argv: List[str]) -> int:
    p = argparse.ArgumentParser(
        prog="constpoly eval",
        description="Evaluate a polynomial given as terms like '1.5:sin,x,pow(2)'.",
    )
    p.add_argument("--term", action="append", required=True, help="coefficient:f0,f1,... (repeatable)")
    p.add_argument("vars", type=float, nargs="*", help="one value per variable")
    p.add_argument("--show", action="store_true", help="print the parsed polynomial first")
    args = p.parse_args(argv)

    poly = _build_poly(args.term)
    if args.show:
        print(f"p = {poly!r}")
    print(repr(poly.evaluate(args.vars)))
    return 0


def cmd_table(argv: List[str]) -> int:
    from .tables import tabulate

    p = argparse.ArgumentParser(prog="constpoly table", description="Sample a 1-variable polynomial on a uniform grid.")
    p.add_argument("--term", action="append", required=True, help="coefficient:f (repeatable)")
    p.add_argument("--start", type=float, required=True)
    p.add_argument("--stop", type=float, required=True)
    p.add_argument("--count", type=int, default=9)
    p.add_argument("--name", default="TABLE", help="constant name used in the printed tuple")
    args = p.parse_args(argv)

    if args.count < 2:
        print("Error: --count must be at least 2.", file=sys.stderr)
        return 1
    if not args.stop > args.start:
        print("Error: --stop must be greater than --start.", file=sys.stderr)
        return 1

    tab = tabulate(_build_poly(args.term), args.start, args.stop, args.count)

    print(f"# start={tab.start!r} step={tab.step!r}")
    print(f"{args.name} = (")
    for v in tab.values:
        print(f"    {v!r},")
    print(")")
    return 0


def cmd_config(argv: List[str]) -> int:
    from .approx.config import active_config

    p = argparse.ArgumentParser(prog="constpoly config", description="Print the resolved series term counts.")
    p.parse_args(argv)

    for var, n in active_config().as_env().items():
        print(f"{var}={n}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="constpoly")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("approx", help="Evaluate one approximation function.")
    sub.add_parser("eval", help="Evaluate a polynomial built from term strings.")
    sub.add_parser("table", help="Print a constant table sampled from a polynomial.")
    sub.add_parser("config", help="Print the resolved series term counts.")

    # diagnostics / design tools
    sub.add_parser("accuracy", help="Measure approximation error against numpy.")
    sub.add_parser("term-counts", help="Find minimal series term counts for an error target.")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands: Dict[str, Callable[[List[str]], int]] = {
        "approx": cmd_approx,
        "eval": cmd_eval,
        "table": cmd_table,
        "config": cmd_config,
    }
    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "accuracy":
            return _run_module_main("constpoly.diagnostics.accuracy", rest)

        if args.cmd == "term-counts":
            return _run_module_main("constpoly.design.term_counts", rest)
    except (ConstPolyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
