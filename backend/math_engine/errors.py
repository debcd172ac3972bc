"""
Math Engine Error Taxonomy

Purpose:
--------
Typed failures raised by the deterministic trading-math engine. Every error
is local and synchronous: it is raised straight to the immediate caller and
never retried or swallowed inside the engine.

Categories:
-----------
- InvalidInputError: a required field is missing, non-positive, or out of
  its valid domain (carries the offending field name)
- DivisionByZeroError: a ratio or fixed-point division has a zero denominator
- ParseError: free text looked like an arithmetic expression but contains a
  syntax problem (unknown character, mismatched parentheses, malformed number)
- ScaleMismatchError: two FixedDecimal values with different scales were
  combined (programming error, not a data error)

"Declined to parse" is not an error; see math_engine.parsing.ParseOutcome.
"""

from __future__ import annotations


class MathEngineError(Exception):
    """Base class for every engine failure surfaced to callers."""

    code = "math_engine_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInputError(MathEngineError, ValueError):
    """A required input field is missing, non-positive, or out of range."""

    code = "invalid_input"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"{field} is invalid")


class DivisionByZeroError(MathEngineError, ZeroDivisionError):
    """A ratio or fixed-point division had a zero denominator."""

    code = "division_by_zero"

    def __init__(self, message: str = "Division by zero") -> None:
        super().__init__(message)


class ScaleMismatchError(TypeError):
    """Two FixedDecimal operands with different scales were combined."""

    def __init__(self, left_scale: int, right_scale: int) -> None:
        super().__init__(
            f"Cannot combine FixedDecimal values with scales {left_scale} and {right_scale}"
        )
        self.left_scale = left_scale
        self.right_scale = right_scale


class ParseError(MathEngineError):
    """Free text matched the expression shape but could not be evaluated."""

    code = "parse_error"

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class UnknownTokenError(ParseError):
    """Expression contains a character outside the allowed set."""

    code = "unknown_token"


class MismatchedParenthesesError(ParseError):
    """Expression has an unbalanced '(' or ')'."""

    code = "mismatched_parentheses"


class MalformedNumberError(ParseError):
    """A run of digits and decimal points is not a valid number."""

    code = "malformed_number"


class ExpressionTooLongError(ParseError):
    """Expression exceeds the configured maximum length."""

    code = "expression_too_long"
