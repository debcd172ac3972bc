"""
Compounding Projector

Projects account balance over a fixed number of trades under a simple
win/loss model:

    winrate   = expected_winrate_pct / 100
    expected_r = winrate × expected_rr - (1 - winrate) × 1
    growth    = 1 + (risk_per_trade_pct / 100) × expected_r
    balance_n = balance_(n-1) × growth

The running balance is carried at full fixed-point precision; each recorded
step is rounded to cents. A growth factor below 1 (negative expectancy) is a
valid projection, not an error.
"""

import math

import structlog

from math_engine.config import settings
from math_engine.errors import InvalidInputError
from math_engine.models.compounding import (
    CompoundingPlanInput,
    CompoundingPlanResult,
    CompoundingStep,
)
from math_engine.shared.fixed_point import FixedDecimal
from math_engine.shared.validation_helpers import require_positive

logger = structlog.get_logger(__name__)

_CALCULATOR = "compounding-plan"


def expected_r_multiple(expected_winrate_pct: float, expected_rr: float) -> FixedDecimal:
    """Expected value per trade in R-multiples."""
    scale = settings.fixed_point_scale
    winrate = FixedDecimal(expected_winrate_pct, scale).div(FixedDecimal(100, scale))
    loss_rate = FixedDecimal(1, scale).sub(winrate)
    return winrate.mul(FixedDecimal(expected_rr, scale)).sub(loss_rate)


def build_compounding_plan(input: CompoundingPlanInput) -> CompoundingPlanResult:
    """
    Build a compounding projection.

    Parameters:
    -----------
    input : CompoundingPlanInput
        Starting balance, risk per trade, expected R:R, expected win rate
        and number of trades (all strictly positive)

    Returns:
    --------
    CompoundingPlanResult
        Growth factor per trade and one rounded balance per trade

    Raises:
    -------
    InvalidInputError
        If a field is not strictly positive, or number_of_trades exceeds
        settings.max_compounding_trades, or the projected balance grows
        past the float range
    """
    require_positive(input.starting_balance, "startingBalance", _CALCULATOR)
    require_positive(input.risk_per_trade_pct, "riskPerTradePct", _CALCULATOR)
    require_positive(input.expected_rr, "expectedRR", _CALCULATOR)
    require_positive(input.expected_winrate_pct, "expectedWinratePct", _CALCULATOR)
    require_positive(input.number_of_trades, "numberOfTrades", _CALCULATOR)

    if input.number_of_trades > settings.max_compounding_trades:
        logger.warning(
            "compounding_trades_above_limit",
            number_of_trades=input.number_of_trades,
            max_trades=settings.max_compounding_trades,
        )
        raise InvalidInputError(
            "numberOfTrades",
            f"numberOfTrades must be at most {settings.max_compounding_trades}",
        )

    scale = settings.fixed_point_scale
    expected_r = expected_r_multiple(input.expected_winrate_pct, input.expected_rr)
    risk_fraction = FixedDecimal(input.risk_per_trade_pct, scale).div(FixedDecimal(100, scale))
    growth_factor = FixedDecimal(1, scale).add(risk_fraction.mul(expected_r))

    balance = FixedDecimal(input.starting_balance, scale)
    steps: list[CompoundingStep] = []

    for trade_number in range(1, input.number_of_trades + 1):
        balance = balance.mul(growth_factor)
        rounded = float(balance.to_fixed(2))
        if math.isinf(rounded):
            logger.warning(
                "compounding_balance_out_of_range",
                trade_number=trade_number,
                growth_factor=str(growth_factor),
            )
            raise InvalidInputError(
                "numberOfTrades",
                f"Projected balance exceeds the representable range after trade {trade_number}",
            )
        steps.append(CompoundingStep(trade_number=trade_number, balance=rounded))

    ending_balance = steps[-1].balance

    if growth_factor < FixedDecimal(1, scale):
        logger.info(
            "negative_expectancy_projection",
            expected_r=str(expected_r),
            growth_factor=str(growth_factor),
        )

    logger.debug(
        "compounding_plan_built",
        starting_balance=input.starting_balance,
        ending_balance=ending_balance,
        growth_factor=str(growth_factor),
        number_of_trades=input.number_of_trades,
    )

    return CompoundingPlanResult(
        starting_balance=input.starting_balance,
        ending_balance=ending_balance,
        growth_factor_per_trade=growth_factor.to_number(),
        number_of_trades=input.number_of_trades,
        steps=steps,
    )
