from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from ..core.errors import ArityMismatchError
from ..core.types import VarFunction
from .dispatch import apply


def _as_functions(functions: Iterable[VarFunction]) -> Tuple[VarFunction, ...]:
    out = tuple(functions)
    for i, f in enumerate(out):
        if not isinstance(f, VarFunction):
            raise TypeError(f"functions[{i}] must be a VarFunction, got {type(f).__name__}")
    return out


def check_vars(vars: Sequence[float], arity: int) -> None:
    if len(vars) != arity:
        raise ArityMismatchError(
            f"expected {arity} variable value(s), got {len(vars)}",
            expected=arity,
            actual=len(vars),
        )


@dataclass(frozen=True, init=False)
class Term:
    """
    coefficient * f_0(x_0) * f_1(x_1) * ... * f_{N-1}(x_{N-1})

    The arity N is the length of the function list and is fixed at
    construction.

        Term(3.0, [Sin, Pow(2)])   # 3 * sin(x0) * x1^2
    """
    coefficient: float
    functions: Tuple[VarFunction, ...]

    def __init__(self, coefficient: float, functions: Iterable[VarFunction]):
        if isinstance(coefficient, (str, bytes, bytearray, bool)):
            raise TypeError(f"coefficient must be a number, got {type(coefficient).__name__}")
        object.__setattr__(self, "coefficient", float(coefficient))
        object.__setattr__(self, "functions", _as_functions(functions))

    @property
    def arity(self) -> int:
        return len(self.functions)

    def evaluate(self, vars: Sequence[float]) -> float:
        """
        Multiply the coefficient by each slot's value in index order 0..N-1.

        The order is fixed so repeated evaluation is bit-for-bit reproducible.
        NaN in any slot propagates to the result.
        """
        check_vars(vars, len(self.functions))
        result = self.coefficient
        for f, x in zip(self.functions, vars):
            result *= apply(f, x)
        return result

    def evaluate_scalar(self, x: float) -> float:
        return self.evaluate((x,))

    def scaled(self, k: float) -> "Term":
        return Term(self.coefficient * k, self.functions)

    def __repr__(self) -> str:
        factors = [repr(self.coefficient)]
        factors += [f.render(f"x{i}") for i, f in enumerate(self.functions)]
        return "*".join(factors)
