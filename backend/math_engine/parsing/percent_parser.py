"""
Percent / Expression Question Parser

Recognizers are tried in order; each either answers or declines:

1. percent-of:  "<P>% of <T>" / "<P> percent of <T>"  -> P × T / 100
2. ratio:       "what percent is <A> of <B>"          -> A / B × 100
3. expression:  digits, '.', whitespace and + - * / ( ) only

If none match, the outcome is "declined" so the chat composer can tell
"no deterministic math here" apart from "math found but invalid" (which
raises ParseError or DivisionByZeroError).

Numbers may carry thousands separators ("100,000").
"""

import re

import structlog

from math_engine.config import settings
from math_engine.models.parsing import ParseOutcome
from math_engine.parsing.expression import evaluate_expression, looks_like_expression
from math_engine.shared.fixed_point import FixedDecimal, percent_of, what_percent_is

logger = structlog.get_logger(__name__)

_NUMBER = r"-?(?:\d{1,3}(?:,\d{3})+|\d+)?(?:\.\d+)?"

PERCENT_OF_PATTERN = re.compile(
    rf"(?P<percent>{_NUMBER})\s*(?:%|percent|per\s+cent)\s+of\s+(?P<total>{_NUMBER})",
    re.IGNORECASE,
)

RATIO_PATTERN = re.compile(
    rf"what\s+(?:percent(?:age)?|%)\s+(?:is|of)\s+(?P<part>{_NUMBER})\s+"
    rf"(?:of|out\s+of|from)\s+(?P<whole>{_NUMBER})",
    re.IGNORECASE,
)

# Trailing "=" or "?" after a bare expression ("12*3 =", "12*3?")
_TRAILING_PROMPT = re.compile(r"[=?\s]+$")


def _has_digit(text: str) -> bool:
    return any(char.isdigit() for char in text)


def _first_numeric_match(pattern: re.Pattern[str], text: str, *groups: str) -> re.Match[str] | None:
    """First match whose number groups all contain digits."""
    for match in pattern.finditer(text):
        if all(_has_digit(match[group]) for group in groups):
            return match
    return None


def match_percent_of(text: str, scale: int) -> ParseOutcome | None:
    """Answer "<P>% of <T>" questions, or None when the pattern is absent."""
    match = _first_numeric_match(PERCENT_OF_PATTERN, text, "percent", "total")
    if match is None:
        return None
    percent = FixedDecimal(match["percent"], scale)
    total = FixedDecimal(match["total"], scale)
    value = percent_of(percent, total, scale)
    return ParseOutcome(status="answered", kind="percent-of", value=value, operands=(percent, total))


def match_ratio(text: str, scale: int) -> ParseOutcome | None:
    """
    Answer "what percent is <A> of <B>" questions, or None when absent.

    Raises:
        DivisionByZeroError: If B is zero
    """
    match = _first_numeric_match(RATIO_PATTERN, text, "part", "whole")
    if match is None:
        return None
    part = FixedDecimal(match["part"], scale)
    whole = FixedDecimal(match["whole"], scale)
    value = what_percent_is(part, whole, scale)
    return ParseOutcome(status="answered", kind="ratio", value=value, operands=(part, whole))


def match_expression(text: str, scale: int) -> ParseOutcome | None:
    """
    Evaluate text that is purely an arithmetic expression, or None.

    Raises:
        ParseError: If the text has expression shape but bad syntax
        DivisionByZeroError: On division by zero
    """
    candidate = _TRAILING_PROMPT.sub("", text)
    if not looks_like_expression(candidate):
        return None
    value = evaluate_expression(candidate, scale)
    return ParseOutcome(status="answered", kind="expression", value=value)


def parse_math_question(text: str, scale: int | None = None) -> ParseOutcome:
    """
    Extract and answer a simple math question from chat text.

    Example:
        >>> parse_math_question("what is 2% of 50,000?").value.to_fixed(2)
        '1000.00'
        >>> parse_math_question("how was your day").status
        'declined'
    """
    scale = settings.fixed_point_scale if scale is None else scale

    for recognizer in (match_percent_of, match_ratio, match_expression):
        outcome = recognizer(text, scale)
        if outcome is not None:
            logger.debug(
                "math_question_parsed",
                kind=outcome.kind,
                value=str(outcome.value),
            )
            return outcome

    logger.debug("math_question_declined", text_length=len(text))
    return ParseOutcome.declined()
