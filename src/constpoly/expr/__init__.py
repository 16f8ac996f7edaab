from .builder import parse_function, parse_term, poly, term
from .dispatch import apply
from .polynomial import Polynomial
from .term import Term

__all__ = ["Term", "Polynomial", "apply", "term", "poly", "parse_function", "parse_term"]
