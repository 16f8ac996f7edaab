# tests/test_polynomial.py

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from constpoly import (
    ArityMismatchError,
    Arctan,
    Cos,
    Cosh,
    Exp,
    Identity,
    Ln,
    Polynomial,
    Pow,
    Sin,
    Sinh,
    Sqrt,
    Tan,
    Term,
)

MIXED_POWERS = Polynomial(
    [
        Term(1.2, [Pow(2), Pow(-1), Pow(0)]),
        Term(-0.8, [Pow(3), Pow(1), Pow(-2)]),
        Term(2.5, [Pow(-3), Pow(4), Pow(1)]),
        Term(-1.1, [Pow(0), Pow(-2), Pow(3)]),
        Term(0.9, [Pow(1), Pow(2), Pow(-1)]),
    ]
)


def test_mixed_integer_powers():
    """
    (1.2 x^2 y^-1) + (-0.8 x^3 y z^-2) + (2.5 x^-3 y^4 z)
    + (-1.1 y^-2 z^3) + (0.9 x y^2 z^-1) at (2, 3, 0.5).
    """
    assert MIXED_POWERS.arity == 3
    assert len(MIXED_POWERS) == 5
    assert MIXED_POWERS.evaluate([2.0, 3.0, 0.5]) == pytest.approx(-30.159027778, abs=1e-9)


def test_sum_is_taken_in_term_order():
    v = [2.0, 3.0, 0.5]
    t = [term.evaluate(v) for term in MIXED_POWERS]
    assert MIXED_POWERS.evaluate(v) == 0.0 + t[0] + t[1] + t[2] + t[3] + t[4]


def test_three_variable_three_term():
    """1.5 sin(x0) x1 x2^2 - 2 cos(x0) x1^3 x2 + 0.5 exp(x0) ln(x1) sqrt(x2)."""
    p = Polynomial(
        [
            Term(1.5, [Sin, Identity, Pow(2)]),
            Term(-2.0, [Cos, Pow(3), Identity]),
            Term(0.5, [Exp, Ln, Sqrt]),
        ]
    )
    x0, x1, x2 = 0.5, 2.0, 1.5
    expected = (
        1.5 * math.sin(x0) * x1 * x2 ** 2
        - 2.0 * math.cos(x0) * x1 ** 3 * x2
        + 0.5 * math.exp(x0) * math.log(x1) * math.sqrt(x2)
    )
    assert p.evaluate([x0, x1, x2]) == pytest.approx(expected, abs=1e-9)


def test_four_variable_four_term():
    p = Polynomial(
        [
            Term(3.0, [Identity, Sin, Pow(2), Cos]),
            Term(-1.2, [Pow(3), Tan, Exp, Identity]),
            Term(0.7, [Ln, Sqrt, Arctan, Sinh]),
            Term(1.1, [Cosh, Identity, Pow(1), Sin]),
        ]
    )
    x = [1.2, 0.7, 0.3, 2.0]
    expected = (
        3.0 * x[0] * math.sin(x[1]) * x[2] ** 2 * math.cos(x[3])
        - 1.2 * x[0] ** 3 * math.tan(x[1]) * math.exp(x[2]) * x[3]
        + 0.7 * math.log(x[0]) * math.sqrt(x[1]) * math.atan(x[2]) * math.sinh(x[3])
        + 1.1 * math.cosh(x[0]) * x[1] * x[2] * math.sin(x[3])
    )
    assert p.evaluate(x) == pytest.approx(expected, abs=1e-9)


def test_mismatched_arity_fails_at_construction():
    with pytest.raises(ArityMismatchError) as ei:
        Polynomial([Term(1.0, [Sin]), Term(2.0, [Sin, Cos])])
    assert ei.value.expected == 1
    assert ei.value.actual == 2
    with pytest.raises(ArityMismatchError):
        Polynomial([Term(1.0, [Sin])], arity=2)
    with pytest.raises(ArityMismatchError):
        Polynomial.from_pairs([(1.0, [Sin, Cos]), (2.0, [Exp])])


def test_arity_mismatch_is_a_value_error():
    with pytest.raises(ValueError):
        Polynomial([Term(1.0, [Sin]), Term(2.0, [])])


def test_from_pairs():
    p = Polynomial.from_pairs([(1.0, [Identity, Identity]), (2.0, [Sin, Cos])])
    assert p.arity == 2
    assert len(p) == 2
    assert p.evaluate([0.0, 0.0]) == 0.0


def test_empty_polynomial_needs_arity():
    with pytest.raises(ArityMismatchError):
        Polynomial([])
    p = Polynomial([], arity=2)
    assert p.evaluate([1.0, 2.0]) == 0.0
    assert repr(p) == "0"


def test_input_length_must_match_arity():
    with pytest.raises(ArityMismatchError):
        MIXED_POWERS.evaluate([2.0, 3.0])


def test_evaluate_scalar():
    p = Polynomial([Term(2.0, [Sin])])
    assert p.evaluate_scalar(1.57079632679) == pytest.approx(2.0, abs=1e-6)
    with pytest.raises(ArityMismatchError):
        MIXED_POWERS.evaluate_scalar(1.0)


def test_evaluate_many():
    p = Polynomial([Term(1.0, [Identity]), Term(1.0, [Pow(2)])])
    assert p.evaluate_many([[1.0], [2.0], [3.0]]) == (2.0, 6.0, 12.0)


def test_nan_in_one_term_poisons_the_sum():
    p = Polynomial([Term(1.0, [Ln]), Term(5.0, [Identity])])
    assert math.isnan(p.evaluate([-1.0]))


def test_polynomial_is_a_hashable_value():
    a = Polynomial.from_pairs([(1.0, [Sin]), (2.0, [Cos])])
    b = Polynomial([Term(1.0, [Sin]), Term(2.0, [Cos])])
    assert a == b
    assert hash(a) == hash(b)
    assert list(a) == [Term(1.0, [Sin]), Term(2.0, [Cos])]
    assert repr(a) == "1.0*sin(x0) + 2.0*cos(x0)"


def test_shared_read_only_evaluation_across_threads():
    v = [2.0, 3.0, 0.5]
    expected = MIXED_POWERS.evaluate(v)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: MIXED_POWERS.evaluate(v), range(64)))
    assert all(r == expected for r in results)


@pytest.mark.parametrize("arity", [True, 2.0, "2"])
def test_arity_must_be_an_int(arity):
    with pytest.raises(TypeError):
        Polynomial([], arity=arity)


def test_negative_arity_fails_at_construction():
    with pytest.raises(ArityMismatchError):
        Polynomial([], arity=-1)
