"""Compounding projection data models."""

from pydantic import Field

from math_engine.models.base import EngineModel


class CompoundingPlanInput(EngineModel):
    """Win/loss model used to project balance growth over a run of trades."""

    starting_balance: float
    risk_per_trade_pct: float
    expected_rr: float = Field(..., alias="expectedRR")
    expected_winrate_pct: float
    number_of_trades: int


class CompoundingStep(EngineModel):
    """Balance after one trade, rounded to cents."""

    trade_number: int = Field(..., ge=1)
    balance: float


class CompoundingPlanResult(EngineModel):
    """
    Projected balance path.

    steps holds exactly number_of_trades entries ordered by trade_number, and
    ending_balance equals the last step's balance.
    """

    starting_balance: float
    ending_balance: float
    growth_factor_per_trade: float
    number_of_trades: int
    steps: list[CompoundingStep]
