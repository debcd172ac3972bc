"""
Natural-language answers for the chat composer.

- format_task_answer: one-line summary of any MathTaskResult
- is_percent_of_target_question / build_percent_of_target_answer:
  "I made 4500 and my target is 8000, what percent of target?" questions

Every percentage shown here is computed with FixedDecimal.
"""

import re
from typing import assert_never

from math_engine.config import settings
from math_engine.errors import DivisionByZeroError
from math_engine.models.math_task import (
    CompoundingPlanTaskResult,
    MathTaskResult,
    PositionSizeTaskResult,
    PropFirmPlanTaskResult,
)
from math_engine.shared.fixed_point import FixedDecimal, what_percent_is

NUMBER_PATTERN = re.compile(r"-?\d{1,3}(?:,\d{3})+(?:\.\d+)?|-?\d+(?:\.\d+)?")

_PERCENT_WORDS = ("percent", "%")
_TARGET_WORDS = ("target", "eval", "evaluation", "challenge")


def _fixed(value: float, digits: int = 2) -> str:
    return FixedDecimal(value, settings.fixed_point_scale).to_fixed(digits)


def _plain(value: float) -> str:
    return str(FixedDecimal(value, settings.fixed_point_scale))


def format_task_answer(task_result: MathTaskResult) -> str:
    """Summarize a math task result in one or more plain sentences."""
    match task_result:
        case PositionSizeTaskResult(result=r):
            return (
                f"Risking {_plain(r.risk_percent)}% = {_fixed(r.risk_amount)} "
                f"with a stop of {_plain(r.stop_loss_distance)} points at "
                f"{_plain(r.value_per_unit)} per point → position size ~ "
                f"{_fixed(r.position_size, 3)}."
            )
        case PropFirmPlanTaskResult(result=r):
            return " ".join(
                [
                    f"Target: {_plain(r.target_profit_pct)}% ({_fixed(r.target_profit_amount)}).",
                    f"Daily loss limit: {_plain(r.daily_loss_limit_pct)}% "
                    f"({_fixed(r.daily_loss_limit_amount)}).",
                    f"Total loss limit: {_plain(r.total_loss_limit_pct)}% "
                    f"({_fixed(r.total_loss_limit_amount)}).",
                    f"Safe risk per trade ≈ {_fixed(r.safe_risk_per_trade_pct)}%.",
                ]
            )
        case CompoundingPlanTaskResult(result=r):
            return (
                f"Starting from {_plain(r.starting_balance)}, after {r.number_of_trades} "
                f"trades, expected balance ≈ {_fixed(r.ending_balance)} "
                f"(growth factor per trade ~ {_fixed(r.growth_factor_per_trade, 4)})."
            )
        case _:
            assert_never(task_result)


def extract_numbers(text: str) -> list[str]:
    """Numeric substrings in order of appearance ("4,500" stays one number)."""
    return NUMBER_PATTERN.findall(text)


def is_percent_of_target_question(text: str) -> bool:
    """
    Detect "what percent of my target have I hit" questions.

    Requires a percent word, a target/eval/challenge word and at least two
    numbers in the text.
    """
    lower = text.lower()
    has_percent_word = any(word in lower for word in _PERCENT_WORDS)
    has_target_word = any(word in lower for word in _TARGET_WORDS)
    return has_percent_word and has_target_word and len(extract_numbers(text)) >= 2


def build_percent_of_target_answer(text: str) -> str | None:
    """
    Answer a percent-of-target question from the first two numbers in text.

    The first number is the current profit, the second the target.

    Returns:
        str | None: Three-sentence answer, or None with fewer than two
        numbers or a zero target.

    Example:
        >>> build_percent_of_target_answer("made 4500, target 8000")
        "You've completed ~56.25% of your target. Current: 4500, Target: 8000. ..."
    """
    numbers = extract_numbers(text)
    if len(numbers) < 2:
        return None

    scale = settings.fixed_point_scale
    current = FixedDecimal(numbers[0], scale)
    target = FixedDecimal(numbers[1], scale)

    try:
        percent = what_percent_is(current, target, scale)
    except DivisionByZeroError:
        return None

    remaining = target.sub(current)
    remaining_pct = FixedDecimal(100, scale).sub(percent)

    if remaining >= FixedDecimal(0, scale):
        closing = (
            f"You need {remaining.to_fixed(2)} more "
            f"({remaining_pct.to_fixed(2)}% of the target) to hit it."
        )
    else:
        closing = (
            f"You've exceeded the target by {abs(remaining).to_fixed(2)} "
            f"(that's {abs(remaining_pct).to_fixed(2)}% over the target)."
        )

    return " ".join(
        [
            f"You've completed ~{percent.to_fixed(2)}% of your target.",
            f"Current: {current}, Target: {target}.",
            closing,
        ]
    )
