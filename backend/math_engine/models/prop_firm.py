"""
Prop-Firm Plan Data Models

Purpose:
--------
Inputs and outputs of the prop-firm risk planner: the firm's account rules
(daily/total drawdown, profit target), the trader's assumptions (risk per
trade, reward:risk, win rate, trades per day), and the derived loss/profit
thresholds and recommended safe risk per trade.

Notes Ordering:
---------------
PropFirmPlanResult.notes is a human-readable trace in a fixed order:
account, target, daily limit, total limit, losing streak, daily-rule cap,
total-rule cap, chosen safe risk, R:R / win-rate echo.
"""

from typing import Literal

from pydantic import Field

from math_engine.models.base import EngineModel


class PropFirmConfig(EngineModel):
    """
    Account rules published by the prop firm.

    Example:
    --------
    >>> PropFirmConfig(
    ...     account_size=100000,
    ...     currency="USD",
    ...     target_return_pct=8,
    ...     max_daily_drawdown_pct=5,
    ...     max_total_drawdown_pct=10,
    ... )
    """

    account_size: float = Field(..., description="Funded/evaluation account size")
    currency: str = Field(..., max_length=10, description="Account currency code, e.g. USD")
    target_return_pct: float = Field(..., description="Profit target, % of account")
    max_daily_drawdown_pct: float = Field(..., description="Max loss in one day, % of account")
    max_total_drawdown_pct: float = Field(..., description="Max overall loss, % of account")
    min_trading_days: int | None = Field(None, ge=0, description="Minimum trading days rule")
    phase: Literal[1, 2, 3] | None = Field(None, description="Challenge phase")


class PropFirmPlanInput(EngineModel):
    """Firm rules plus the trader's own risk assumptions."""

    config: PropFirmConfig
    risk_per_trade_pct: float = Field(..., description="Intended risk per trade, %")
    expected_rr: float = Field(..., alias="expectedRR", description="Average reward:risk")
    expected_winrate_pct: float = Field(..., description="Expected win rate, %")
    max_trades_per_day: float = Field(..., description="Hard cap on trades per day")


class PropFirmPlanResult(EngineModel):
    """Loss/profit thresholds and the recommended safe risk per trade."""

    daily_loss_limit_pct: float
    daily_loss_limit_amount: float
    total_loss_limit_pct: float
    total_loss_limit_amount: float
    target_profit_pct: float
    target_profit_amount: float

    max_risk_per_trade_pct_by_daily_rule: float
    max_risk_per_trade_pct_by_total_rule: float
    safe_risk_per_trade_pct: float

    estimated_losing_streak: int = Field(..., ge=1)
    notes: list[str]
