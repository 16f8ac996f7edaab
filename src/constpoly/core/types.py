from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class FunctionKind(Enum):
    """Closed set of per-variable functions a Term slot may apply."""
    IDENTITY = "identity"
    POW = "pow"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    EXP = "exp"
    LN = "ln"
    SQRT = "sqrt"
    ARCTAN = "arctan"
    SINH = "sinh"
    COSH = "cosh"


@dataclass(frozen=True)
class VarFunction:
    """
    Function selector for one variable slot of a Term.

    Only ``Pow`` carries data (a signed integer exponent); every other variant is
    a bare tag. Instances are immutable value objects, so the shared constants
    below may be reused freely:

        VarFunction.Sin, VarFunction.Pow(3), VarFunction.Identity
    """
    kind: FunctionKind
    exponent: int = 0

    Identity: ClassVar["VarFunction"]
    Sin: ClassVar["VarFunction"]
    Cos: ClassVar["VarFunction"]
    Tan: ClassVar["VarFunction"]
    Exp: ClassVar["VarFunction"]
    Ln: ClassVar["VarFunction"]
    Sqrt: ClassVar["VarFunction"]
    Arctan: ClassVar["VarFunction"]
    Sinh: ClassVar["VarFunction"]
    Cosh: ClassVar["VarFunction"]

    def __post_init__(self) -> None:
        if not isinstance(self.kind, FunctionKind):
            raise TypeError(f"kind must be a FunctionKind, got {type(self.kind).__name__}")
        # bool is an int subclass; reject it so Pow(True) is not silently x^1
        if isinstance(self.exponent, bool) or not isinstance(self.exponent, int):
            raise TypeError(f"exponent must be an int, got {type(self.exponent).__name__}")
        if self.kind is not FunctionKind.POW and self.exponent != 0:
            raise ValueError(f"{self.kind.value} does not take an exponent")

    @staticmethod
    def Pow(exponent: int) -> "VarFunction":
        return VarFunction(FunctionKind.POW, exponent)

    def render(self, var: str = "x") -> str:
        """Readable form applied to a variable name, e.g. ``sin(x0)`` or ``x0^-2``."""
        if self.kind is FunctionKind.IDENTITY:
            return var
        if self.kind is FunctionKind.POW:
            return f"{var}^{self.exponent}"
        return f"{self.kind.value}({var})"

    def __repr__(self) -> str:
        if self.kind is FunctionKind.POW:
            return f"Pow({self.exponent})"
        return self.kind.name.capitalize()


VarFunction.Identity = VarFunction(FunctionKind.IDENTITY)
VarFunction.Sin = VarFunction(FunctionKind.SIN)
VarFunction.Cos = VarFunction(FunctionKind.COS)
VarFunction.Tan = VarFunction(FunctionKind.TAN)
VarFunction.Exp = VarFunction(FunctionKind.EXP)
VarFunction.Ln = VarFunction(FunctionKind.LN)
VarFunction.Sqrt = VarFunction(FunctionKind.SQRT)
VarFunction.Arctan = VarFunction(FunctionKind.ARCTAN)
VarFunction.Sinh = VarFunction(FunctionKind.SINH)
VarFunction.Cosh = VarFunction(FunctionKind.COSH)

# Module-level aliases so callers can write `from constpoly.core.types import Sin, Pow`
Identity = VarFunction.Identity
Sin = VarFunction.Sin
Cos = VarFunction.Cos
Tan = VarFunction.Tan
Exp = VarFunction.Exp
Ln = VarFunction.Ln
Sqrt = VarFunction.Sqrt
Arctan = VarFunction.Arctan
Sinh = VarFunction.Sinh
Cosh = VarFunction.Cosh
Pow = VarFunction.Pow
