"""
Unit tests for the compounding projector.

Tests cover:
- Zero-expectancy identity (growth factor exactly 1)
- Known growth path with cent rounding
- Negative expectancy is a valid projection
- Step structure invariants
- Input validation and the per-call trade cap
"""

import pytest
from pydantic import ValidationError

from math_engine.config import settings
from math_engine.errors import InvalidInputError
from math_engine.models.compounding import CompoundingPlanInput
from math_engine.risk_management.compounding import (
    build_compounding_plan,
    expected_r_multiple,
)


def _input(**overrides) -> CompoundingPlanInput:
    values = {
        "startingBalance": 10000,
        "riskPerTradePct": 1,
        "expectedRR": 2,
        "expectedWinratePct": 50,
        "numberOfTrades": 3,
    }
    values.update(overrides)
    return CompoundingPlanInput.model_validate(values)


class TestCompoundingProjection:
    """Test balance evolution."""

    def test_zero_expectancy_keeps_balance(self):
        """50% win rate at 1R: expected R = 0, growth factor = 1."""
        result = build_compounding_plan(
            _input(startingBalance=25000, expectedRR=1, expectedWinratePct=50, numberOfTrades=1)
        )

        assert result.growth_factor_per_trade == 1
        assert result.ending_balance == result.starting_balance == 25000
        assert len(result.steps) == 1

    def test_known_growth_path(self):
        """
        Expected R = 0.5 × 2 - 0.5 = 0.5; growth = 1 + 0.01 × 0.5 = 1.005
        10000 -> 10050.00 -> 10100.25 -> 10150.75125 (10150.75)
        """
        result = build_compounding_plan(_input())

        assert result.growth_factor_per_trade == pytest.approx(1.005)
        assert [step.balance for step in result.steps] == [10050.00, 10100.25, 10150.75]
        assert result.ending_balance == 10150.75

    def test_running_balance_not_rounded_between_steps(self):
        """Step 3 compounds the unrounded 10100.25 × 1.005, not a re-rounded value."""
        result = build_compounding_plan(_input(numberOfTrades=4))

        # 10150.75125 × 1.005 = 10201.50500625
        assert result.steps[3].balance == 10201.51

    def test_negative_expectancy_is_valid(self):
        """30% win rate at 1R: expected R = -0.4, growth = 0.996."""
        result = build_compounding_plan(
            _input(startingBalance=1000, expectedRR=1, expectedWinratePct=30, numberOfTrades=2)
        )

        assert result.growth_factor_per_trade == pytest.approx(0.996)
        assert [step.balance for step in result.steps] == [996.00, 992.02]
        assert result.ending_balance < result.starting_balance

    def test_step_invariants(self):
        result = build_compounding_plan(_input(numberOfTrades=25))

        assert result.number_of_trades == 25
        assert [step.trade_number for step in result.steps] == list(range(1, 26))
        assert result.ending_balance == result.steps[-1].balance

    def test_deterministic(self):
        assert build_compounding_plan(_input(numberOfTrades=50)) == build_compounding_plan(
            _input(numberOfTrades=50)
        )

    def test_expected_r_multiple(self):
        assert str(expected_r_multiple(45, 2)) == "0.35"


class TestLongProjections:
    """Balances far beyond account-size range."""

    def test_high_growth_run_at_trade_cap(self):
        """60% win rate at 3R risking 5%: growth 1.07 over 5000 trades."""
        result = build_compounding_plan(
            _input(riskPerTradePct=5, expectedRR=3, expectedWinratePct=60, numberOfTrades=5000)
        )

        assert result.growth_factor_per_trade == pytest.approx(1.07)
        assert len(result.steps) == 5000
        assert result.ending_balance == result.steps[-1].balance
        assert result.ending_balance > 1e150

    def test_aggressive_growth_two_hundred_trades(self):
        """90% win rate at 10R risking 50%: growth 5.45 per trade."""
        result = build_compounding_plan(
            _input(
                startingBalance=1_000_000,
                riskPerTradePct=50,
                expectedRR=10,
                expectedWinratePct=90,
                numberOfTrades=200,
            )
        )

        assert result.growth_factor_per_trade == pytest.approx(5.45)
        assert result.steps[0].balance == 5450000.0
        assert result.ending_balance > 1e150

    def test_balance_past_float_range_rejected(self):
        """Growth 9.9 per trade leaves the float range long before 5000 trades."""
        with pytest.raises(InvalidInputError) as exc_info:
            build_compounding_plan(
                _input(
                    riskPerTradePct=100,
                    expectedRR=10,
                    expectedWinratePct=90,
                    numberOfTrades=5000,
                )
            )

        assert exc_info.value.field == "numberOfTrades"
        assert "representable range" in exc_info.value.message


class TestCompoundingValidation:
    """Test input validation."""

    @pytest.mark.parametrize(
        "field",
        ["startingBalance", "riskPerTradePct", "expectedRR", "expectedWinratePct", "numberOfTrades"],
    )
    def test_non_positive_field_rejected(self, field):
        with pytest.raises(InvalidInputError) as exc_info:
            build_compounding_plan(_input(**{field: 0}))

        assert exc_info.value.field == field

    def test_trade_count_capped(self):
        with pytest.raises(InvalidInputError) as exc_info:
            build_compounding_plan(_input(numberOfTrades=settings.max_compounding_trades + 1))

        assert exc_info.value.field == "numberOfTrades"

    def test_trade_count_at_cap_allowed(self):
        result = build_compounding_plan(_input(numberOfTrades=settings.max_compounding_trades))

        assert len(result.steps) == settings.max_compounding_trades

    def test_fractional_trade_count_rejected_by_model(self):
        with pytest.raises(ValidationError):
            _input(numberOfTrades=2.5)
