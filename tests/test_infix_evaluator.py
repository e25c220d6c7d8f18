"""Tests for the precedence-aware fold."""
import numpy as np
import pytest

from core import (
    InfixEvaluator, Operators, TokenSequence, Token,
    InvalidBoundary, DivideByZero, MalformedExpression,
)


def evaluate(*texts, **kwargs):
    return InfixEvaluator.evaluate(TokenSequence(texts), **kwargs)


def test_standard_precedence():
    """Test that multiply binds tighter than add."""
    assert evaluate("2", "+", "3", "*", "4") == 14.0
    assert evaluate("2", "*", "3", "+", "4", "*", "5") == 26.0
    assert evaluate("10", "-", "4", "/", "2") == 8.0


def test_left_associativity():
    """Test that same-precedence operators fold left to right."""
    assert evaluate("8", "/", "4", "/", "2") == 1.0
    assert evaluate("10", "-", "4", "-", "3") == 3.0
    assert evaluate("2", "*", "3", "/", "4") == 1.5


def test_single_number_and_signed_operands():
    """Test degenerate and signed inputs."""
    assert evaluate("7") == 7.0
    assert evaluate("-2.5", "*", "-2") == 5.0
    assert evaluate("12.5", "+", ".5") == 13.0


def test_result_is_float64():
    """Test that results are 64-bit floats."""
    result = evaluate("1", "+", "1")
    assert isinstance(result, float)
    assert isinstance(result, np.float64)


def test_zero_dividend_is_allowed():
    """Test that a zero before the divide operator is not rejected."""
    assert evaluate("0", "/", "5") == 0.0


def test_literal_zero_divisor():
    """Test the syntactic divide-by-zero check."""
    with pytest.raises(DivideByZero):
        evaluate("5", "/", "0")
    with pytest.raises(DivideByZero):
        evaluate("1", "+", "2", "/", "0")


def test_runtime_zero_divisor():
    """Test that zero-valued divisors that are not the literal "0" are caught during the fold."""
    with pytest.raises(DivideByZero) as excinfo:
        evaluate("5", "/", "0.0")
    assert excinfo.value.index == 2
    with pytest.raises(DivideByZero):
        evaluate("5", "/", "-0")


def test_runtime_zero_check_disabled():
    """Test that without the runtime guard a zero divisor cannot produce a number."""
    with pytest.raises(MalformedExpression):
        evaluate("5", "/", "0.0", runtime_zero_check=False)
    assert evaluate("5", "/", "0.0", runtime_zero_check=False, strict=False) is None
    # the syntactic check still applies
    with pytest.raises(DivideByZero):
        evaluate("5", "/", "0", runtime_zero_check=False)


def test_invalid_boundary():
    """Test that non-numeric first or last tokens are rejected."""
    for texts in [("+", "3"), ("3", "+"), (), ("x", "+", "3"), ("3", "+", "inf")]:
        with pytest.raises(InvalidBoundary):
            evaluate(*texts)


def test_malformed_strict():
    """Test that folds that cannot produce a number raise under the strict policy."""
    for texts in [("3", "+", "*", "4"), ("3", "4"), ("3", "+", "x", "+", "4"), ("1e308", "*", "10")]:
        with pytest.raises(MalformedExpression):
            evaluate(*texts)


def test_malformed_lenient_returns_none():
    """Test the observed behaviour: an unfoldable expression yields no value and no error."""
    assert evaluate("3", "+", "*", "4", strict=False) is None
    assert evaluate("1e308", "*", "10", strict=False) is None


def test_operators_dispatch():
    """Test operator methods and dispatch by token."""
    assert Operators.add(1, 2) == 3.0
    assert Operators.sub(1, 2) == -1.0
    assert Operators.mul(3, 4) == 12.0
    assert Operators.div(1, 4) == 0.25
    assert Operators.apply(Token.from_text("*"), 2.0, 5.0) == 10.0
    assert np.isinf(Operators.div(1.0, 0.0))
    with pytest.raises(ValueError, match="Unknown binary operator"):
        Operators.apply(Token.from_text("3"), 1.0, 2.0)
