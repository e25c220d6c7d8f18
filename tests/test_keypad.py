"""Tests for keypad input formation and display mapping."""
import pytest

from calculator import Evaluator, EvaluatorState
from core import DivideByZero
from keypad import KeypadSession, to_display, from_display, format_number, render_expression


@pytest.fixture
def session():
    evaluator = Evaluator()
    yield KeypadSession(evaluator)
    evaluator.close()


def test_glyph_mapping_round_trips():
    """Test that display glyphs map back to canonical symbols."""
    assert to_display("*") == "×"
    assert to_display("/") == "÷"
    assert to_display("+") == "+"
    for symbol in ["+", "-", "*", "/"]:
        assert from_display(to_display(symbol)) == symbol


def test_render_and_format():
    """Test expression rendering and number formatting."""
    assert render_expression(["2.0", "*", "3.0", "/", "1.0"]) == "2.0×3.0÷1.0"
    assert format_number(5) == "5.0"
    assert format_number(-2.5) == "-2.5"


def test_digits_and_decimal_point(session):
    """Test digit accumulation with the decimal toggle."""
    session.replay("1.5")
    assert session.current_number == 1.5
    assert not session.decimal_pending

    session.press_decimal()
    session.press_decimal()
    assert not session.decimal_pending


def test_simple_calculation(session):
    """Test a full key sequence with precedence."""
    assert session.replay("12+3×4=") == 24.0
    assert session.expression_line == "12.0+3.0×4.0"
    assert session.pending_tokens == ()
    assert session.current_number == 0.0
    assert session.last_error is None


def test_operator_chains_from_result(session):
    """Test that an operator after = continues from the result."""
    session.replay("2+3=")
    assert session.result == 5.0

    session.press("×")
    assert session.pending_tokens == ("5.0", "*")
    assert session.result is None
    assert session.expression_line == "5.0×"

    session.replay("4=")
    assert session.result == 20.0
    assert session.expression_line == "5.0×4.0"


def test_chain_from_zero_result(session):
    """Test that a zero result can still be continued."""
    session.replay("=")
    assert session.result == 0.0
    assert session.replay("+1=") == 1.0


def test_divide_by_zero_is_reported(session):
    """Test that errors are recorded and pending tokens kept."""
    assert session.replay("5÷0=") is None
    assert isinstance(session.last_error, DivideByZero)
    assert session.pending_tokens == ("5.0", "/", "0.0")
    assert session.result is None


def test_all_clear_resets_everything(session):
    """Test that AC resets the session and the evaluator."""
    session.replay("2+3=")
    session.press("AC")
    assert session.result is None
    assert session.expression_line == ""
    assert session.pending_tokens == ()
    assert session.evaluator.last_result() is None
    assert session.evaluator.state == EvaluatorState.EMPTY


def test_unknown_key_raises(session):
    """Test that unsupported keys are rejected."""
    with pytest.raises(ValueError, match="Unknown operator key"):
        session.press("%")
    with pytest.raises(ValueError, match="Not a digit key"):
        session.press_digit("12")
