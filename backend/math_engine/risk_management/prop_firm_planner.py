"""
Prop-Firm Risk Planner

Purpose:
--------
Turns a prop firm's account rules (max daily drawdown, max total drawdown,
profit target) and the trader's assumptions (risk per trade, reward:risk,
win rate, trades per day) into currency thresholds and a recommended
"safe" risk per trade.

Algorithm:
----------
1. daily/total loss limits and profit target in currency:
   account_size × pct / 100
2. Estimated losing streak (95% tail over ~100 trades):
   win rate clamped to [1%, 99%], q = 1 - win rate,
   L = round(max(1, ln(0.05) / ln(q)))
   from the geometric tail P(streak >= L) ≈ q^L <= 0.05
3. Daily-rule cap: max_daily_drawdown_pct / max_trades_per_day
   (every trade of the day loses)
4. Total-rule cap: max_total_drawdown_pct / L
   (one full losing streak)
5. safe = min(daily cap, total cap, requested risk)
   The planner only ever lowers the requested risk, never raises it.

Known Simplification:
---------------------
The daily-rule cap assumes every trade that day is a full loss of the same
size. Partial losses and mixed outcomes within a day are not modelled. This
is the conservative posture traders expect from the tool; keep the formula.
"""

import math

import structlog

from math_engine.config import settings
from math_engine.models.prop_firm import PropFirmPlanInput, PropFirmPlanResult
from math_engine.shared.fixed_point import FixedDecimal
from math_engine.shared.validation_helpers import require_finite, require_positive

logger = structlog.get_logger(__name__)

_CALCULATOR = "prop-firm-plan"

# Tail probability for the worst-case losing streak estimate
LOSING_STREAK_TAIL = 0.05
MIN_WINRATE = 0.01
MAX_WINRATE = 0.99


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _fmt(value: float) -> str:
    """Echo an input number the way the trader typed it (8, not 8.0; 0.00001, not 1e-05)."""
    return str(FixedDecimal(value, settings.fixed_point_scale))


def _money(value: float) -> str:
    return FixedDecimal(value).to_fixed(2)


def estimate_losing_streak(winrate_pct: float) -> int:
    """
    Estimate the 95th-percentile worst losing streak for a win rate.

    Args:
        winrate_pct: Expected win rate in percent (clamped to [1, 99])

    Returns:
        int: Consecutive losses the per-trade risk must survive (>= 1)

    Example:
        >>> estimate_losing_streak(45)
        5
        >>> estimate_losing_streak(60)
        3
    """
    winrate = _clamp(winrate_pct / 100, MIN_WINRATE, MAX_WINRATE)
    loss_probability = 1 - winrate
    streak = math.log(LOSING_STREAK_TAIL) / math.log(loss_probability)
    return max(1, _round_half_up(streak))


def _ratio(numerator: float, denominator: float) -> float:
    scale = settings.fixed_point_scale
    return FixedDecimal(numerator, scale).div(FixedDecimal(denominator, scale)).to_number()


def build_prop_firm_plan(input: PropFirmPlanInput) -> PropFirmPlanResult:
    """
    Build a prop-firm risk plan.

    Parameters:
    -----------
    input : PropFirmPlanInput
        Firm config plus risk_per_trade_pct, expected_rr,
        expected_winrate_pct and max_trades_per_day

    Returns:
    --------
    PropFirmPlanResult
        Loss/profit thresholds, rule caps, safe risk and an ordered notes trace

    Raises:
    -------
    InvalidInputError
        If account size or max trades per day is not strictly positive
    """
    config = input.config

    require_positive(config.account_size, "config.accountSize", _CALCULATOR)
    require_positive(input.max_trades_per_day, "maxTradesPerDay", _CALCULATOR)
    for value, field in (
        (config.target_return_pct, "config.targetReturnPct"),
        (config.max_daily_drawdown_pct, "config.maxDailyDrawdownPct"),
        (config.max_total_drawdown_pct, "config.maxTotalDrawdownPct"),
        (input.risk_per_trade_pct, "riskPerTradePct"),
        (input.expected_rr, "expectedRR"),
        (input.expected_winrate_pct, "expectedWinratePct"),
    ):
        require_finite(value, field, _CALCULATOR)

    account_size = config.account_size
    currency = config.currency

    daily_loss_limit_amount = account_size * config.max_daily_drawdown_pct / 100
    total_loss_limit_amount = account_size * config.max_total_drawdown_pct / 100
    target_profit_amount = account_size * config.target_return_pct / 100

    estimated_losing_streak = estimate_losing_streak(input.expected_winrate_pct)

    max_risk_by_daily_rule = _ratio(config.max_daily_drawdown_pct, input.max_trades_per_day)
    max_risk_by_total_rule = _ratio(config.max_total_drawdown_pct, estimated_losing_streak)

    safe_risk_per_trade_pct = min(
        max_risk_by_daily_rule,
        max_risk_by_total_rule,
        input.risk_per_trade_pct,
    )

    notes = [
        f"Account: {_money(account_size)} {currency}",
        f"Target profit: {_fmt(config.target_return_pct)}% → "
        f"{_money(target_profit_amount)} {currency}",
        f"Max daily drawdown: {_fmt(config.max_daily_drawdown_pct)}% → "
        f"{_money(daily_loss_limit_amount)} {currency}",
        f"Max total drawdown: {_fmt(config.max_total_drawdown_pct)}% → "
        f"{_money(total_loss_limit_amount)} {currency}",
        f"Estimated worst losing streak (95% confidence, 100 trades): "
        f"~{estimated_losing_streak} trades in a row",
        f"Max risk per trade by daily rule (all trades lose in a day): "
        f"~{_money(max_risk_by_daily_rule)}%",
        f"Max risk per trade by total rule (one full losing streak): "
        f"~{_money(max_risk_by_total_rule)}%",
        f"Chosen safe risk per trade: {_money(safe_risk_per_trade_pct)}% "
        f"(input: {_fmt(input.risk_per_trade_pct)}%)",
        f"Expected R:R = {_fmt(input.expected_rr)}, "
        f"expected winrate = {_fmt(input.expected_winrate_pct)}%",
    ]

    if safe_risk_per_trade_pct < input.risk_per_trade_pct:
        logger.info(
            "risk_per_trade_reduced",
            requested_pct=input.risk_per_trade_pct,
            safe_pct=safe_risk_per_trade_pct,
            daily_rule_pct=max_risk_by_daily_rule,
            total_rule_pct=max_risk_by_total_rule,
        )

    logger.debug(
        "prop_firm_plan_built",
        account_size=account_size,
        currency=currency,
        estimated_losing_streak=estimated_losing_streak,
        safe_risk_per_trade_pct=safe_risk_per_trade_pct,
    )

    return PropFirmPlanResult(
        daily_loss_limit_pct=config.max_daily_drawdown_pct,
        daily_loss_limit_amount=daily_loss_limit_amount,
        total_loss_limit_pct=config.max_total_drawdown_pct,
        total_loss_limit_amount=total_loss_limit_amount,
        target_profit_pct=config.target_return_pct,
        target_profit_amount=target_profit_amount,
        max_risk_per_trade_pct_by_daily_rule=max_risk_by_daily_rule,
        max_risk_per_trade_pct_by_total_rule=max_risk_by_total_rule,
        safe_risk_per_trade_pct=safe_risk_per_trade_pct,
        estimated_losing_streak=estimated_losing_streak,
        notes=notes,
    )
