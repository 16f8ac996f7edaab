from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from ..core.errors import ArityMismatchError
from ..core.types import VarFunction
from .term import Term, check_vars


@dataclass(frozen=True, init=False)
class Polynomial:
    """
    Sum of same-arity Terms.

    Every Term must operate on the same number of variables; a mismatch is a
    construction error, so an existing Polynomial always evaluates. An empty
    Polynomial needs an explicit ``arity`` and evaluates to 0.0.
    """
    terms: Tuple[Term, ...]
    arity: int

    def __init__(self, terms: Iterable[Term], *, arity: Optional[int] = None):
        ts = tuple(terms)
        for i, t in enumerate(ts):
            if not isinstance(t, Term):
                raise TypeError(f"terms[{i}] must be a Term, got {type(t).__name__}")
        if arity is None:
            if not ts:
                raise ArityMismatchError(
                    "cannot infer arity of an empty Polynomial; pass arity=",
                    expected=None,
                    actual=0,
                )
            arity = ts[0].arity
        elif isinstance(arity, bool) or not isinstance(arity, int):
            raise TypeError(f"arity must be an int, got {type(arity).__name__}")
        elif arity < 0:
            raise ArityMismatchError(f"arity must be >= 0, got {arity}", expected=None, actual=arity)
        for i, t in enumerate(ts):
            if t.arity != arity:
                raise ArityMismatchError(
                    f"term {i} has {t.arity} function(s), polynomial has {arity} variable(s)",
                    expected=arity,
                    actual=t.arity,
                )
        object.__setattr__(self, "terms", ts)
        object.__setattr__(self, "arity", arity)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[float, Sequence[VarFunction]]],
        *,
        arity: Optional[int] = None,
    ) -> "Polynomial":
        """Build from (coefficient, function-list) pairs; N from the first pair, M from the count."""
        return cls((Term(c, fs) for c, fs in pairs), arity=arity)

    def evaluate(self, vars: Sequence[float]) -> float:
        """Sum of the term values, left to right in term order."""
        check_vars(vars, self.arity)
        total = 0.0
        for t in self.terms:
            total += t.evaluate(vars)
        return total

    def evaluate_scalar(self, x: float) -> float:
        return self.evaluate((x,))

    def evaluate_many(self, points: Iterable[Sequence[float]]) -> Tuple[float, ...]:
        return tuple(self.evaluate(p) for p in points)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Term]:
        return iter(self.terms)

    def __repr__(self) -> str:
        if not self.terms:
            return "0"
        return " + ".join(repr(t) for t in self.terms)
