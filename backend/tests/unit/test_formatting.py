"""
Unit tests for chat answer formatting.

Tests cover:
- One-line summaries for each task result type
- Percent-of-target question detection
- Percent-of-target answers (under target, over target, no answer)
"""

import pytest

from math_engine.dispatcher import run_math_task
from math_engine.formatting import (
    build_percent_of_target_answer,
    extract_numbers,
    format_task_answer,
    is_percent_of_target_question,
)
from math_engine.models.math_task import parse_math_task


class TestFormatTaskAnswer:
    """Test result summaries."""

    def test_position_size_summary(self):
        result = run_math_task(
            parse_math_task(
                {
                    "type": "position-size",
                    "input": {
                        "accountSize": 100000,
                        "riskPercent": 1,
                        "stopLossDistance": 50,
                        "valuePerUnit": 10,
                    },
                }
            )
        )

        assert format_task_answer(result) == (
            "Risking 1% = 1000.00 with a stop of 50 points at 10 per point "
            "→ position size ~ 2.000."
        )

    def test_tiny_inputs_in_plain_notation(self):
        result = run_math_task(
            parse_math_task(
                {
                    "type": "position-size",
                    "input": {
                        "accountSize": 100000,
                        "riskPercent": 0.00001,
                        "stopLossDistance": 0.5,
                        "valuePerUnit": 1,
                    },
                }
            )
        )

        answer = format_task_answer(result)

        assert answer.startswith("Risking 0.00001% = 0.01 with a stop of 0.5 points")
        assert "e-" not in answer

    def test_prop_firm_summary(self, prop_firm_payload):
        result = run_math_task(parse_math_task({"type": "prop-firm-plan", "input": prop_firm_payload}))

        assert format_task_answer(result) == (
            "Target: 8% (8000.00). Daily loss limit: 5% (5000.00). "
            "Total loss limit: 10% (10000.00). Safe risk per trade ≈ 1.67%."
        )

    def test_compounding_summary(self):
        result = run_math_task(
            parse_math_task(
                {
                    "type": "compounding-plan",
                    "input": {
                        "startingBalance": 10000,
                        "riskPerTradePct": 1,
                        "expectedRR": 2,
                        "expectedWinratePct": 50,
                        "numberOfTrades": 3,
                    },
                }
            )
        )

        assert format_task_answer(result) == (
            "Starting from 10000, after 3 trades, expected balance ≈ 10150.75 "
            "(growth factor per trade ~ 1.0050)."
        )


class TestPercentOfTargetQuestion:
    """Test question detection."""

    def test_detects_target_question(self):
        assert is_percent_of_target_question(
            "I made 4500 and my target is 8000, what percent of target is that?"
        )

    def test_requires_target_word(self):
        assert not is_percent_of_target_question("what percent is 4500 of 8000")

    def test_requires_two_numbers(self):
        assert not is_percent_of_target_question("what percent of my challenge target is done?")

    def test_thousands_separator_is_one_number(self):
        assert extract_numbers("made 4,500 of 8,000") == ["4,500", "8,000"]


class TestPercentOfTargetAnswer:
    """Test answer text."""

    def test_under_target(self):
        answer = build_percent_of_target_answer("I made 4500 and target is 8000, what percent?")

        assert answer == (
            "You've completed ~56.25% of your target. "
            "Current: 4500, Target: 8000. "
            "You need 3500.00 more (43.75% of the target) to hit it."
        )

    def test_over_target(self):
        answer = build_percent_of_target_answer("profit 10,000 vs eval target 8,000")

        assert answer == (
            "You've completed ~125.00% of your target. "
            "Current: 10000, Target: 8000. "
            "You've exceeded the target by 2000.00 (that's 25.00% over the target)."
        )

    @pytest.mark.parametrize("text", ["target is 8000", "made 100 of a 0 target"])
    def test_no_answer(self, text):
        assert build_percent_of_target_answer(text) is None
