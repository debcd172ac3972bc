"""
Unit tests for parse_math_question.

Tests cover:
- percent-of questions ("2% of 50,000")
- ratio questions ("what percent is 4500 of 8000")
- bare arithmetic expressions
- declined outcomes for text without deterministic math
- errors for math that is found but invalid
"""

from decimal import Decimal

import pytest

from math_engine.errors import DivisionByZeroError, ParseError
from math_engine.parsing.percent_parser import parse_math_question
from math_engine.shared.fixed_point import FixedDecimal


class TestPercentOf:
    """Test the "<P>% of <T>" recognizer."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("what is 2% of 50,000?", "1000.00"),
            ("1.5 percent of 200", "3.00"),
            ("How much is 8 % of 100000", "8000.00"),
            ("12.5 PERCENT OF 80", "10.00"),
        ],
    )
    def test_answers(self, text, expected):
        outcome = parse_math_question(text)

        assert outcome.answered
        assert outcome.kind == "percent-of"
        assert outcome.value.to_fixed(2) == expected

    def test_exact_against_float_rounding(self):
        """33.3333% of 9 is exactly 2.999997 on the fixed-point grid."""
        outcome = parse_math_question("33.3333% of 9")

        assert outcome.value.to_decimal() == Decimal("2.999997")

    def test_operands_recorded(self):
        outcome = parse_math_question("2% of 50,000")

        assert outcome.operands == (FixedDecimal(2), FixedDecimal(50000))


class TestRatio:
    """Test the "what percent is <A> of <B>" recognizer."""

    def test_answer(self):
        outcome = parse_math_question("What percent is 4500 of 8000?")

        assert outcome.kind == "ratio"
        assert outcome.value.to_fixed(2) == "56.25"

    def test_out_of_phrasing(self):
        outcome = parse_math_question("what percentage is 30 out of 120")

        assert outcome.kind == "ratio"
        assert outcome.value.to_fixed(2) == "25.00"

    def test_zero_whole_raises(self):
        with pytest.raises(DivisionByZeroError):
            parse_math_question("what percent is 5 of 0")


class TestExpression:
    """Test the bare-expression recognizer."""

    def test_answer(self):
        outcome = parse_math_question("1250 * 3 / (2 + 4)")

        assert outcome.kind == "expression"
        assert str(outcome.value) == "625"

    def test_trailing_equals_and_question_mark(self):
        assert str(parse_math_question("12 * 3 =").value) == "36"
        assert str(parse_math_question("12 * 3?").value) == "36"

    def test_syntax_error_raises(self):
        with pytest.raises(ParseError):
            parse_math_question("(12 * 3")

    def test_hundred_digit_operand(self):
        outcome = parse_math_question("9" * 100 + " * 2")

        assert outcome.kind == "expression"
        assert str(outcome.value) == "1" + "9" * 99 + "8"

    def test_signed_operand_after_operator(self):
        assert str(parse_math_question("2 * -3").value) == "-6"


class TestDeclined:
    """Text without deterministic math is declined, not an error."""

    @pytest.mark.parametrize(
        "text",
        [
            "how was the London session today?",
            "I took 3 trades",
            "42",
            "-5",
            "+5",
            "2+alert(1)",
            "",
        ],
    )
    def test_declined(self, text):
        outcome = parse_math_question(text)

        assert outcome.status == "declined"
        assert not outcome.answered
        assert outcome.value is None
