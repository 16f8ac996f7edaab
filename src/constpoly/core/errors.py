from __future__ import annotations

from typing import Optional


class ConstPolyError(Exception):
    """Base error."""


class ArityMismatchError(ConstPolyError, ValueError):
    """Raised when a function list or input vector does not match the declared arity."""

    def __init__(self, message: str, *, expected: Optional[int], actual: int):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class SeriesConfigError(ConstPolyError, ValueError):
    """Raised for an invalid series term count (environment knob or ``terms=`` override)."""


class UnknownFunctionError(ConstPolyError, KeyError):
    """Raised when a textual function name does not name any VarFunction variant."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""
