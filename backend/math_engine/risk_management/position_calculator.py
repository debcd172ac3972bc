"""
Position Size Calculator

Purpose:
--------
Converts an account size, a risk percentage, a stop distance and a
per-unit value into a trade size and the money at risk on the trade.

Core Formula:
-------------
1. risk_amount = account_size × risk_percent / 100
2. position_size = risk_amount / (stop_loss_distance × value_per_unit)

Both are single multiply/divide steps with no compounding rounding, so
they run on ordinary float arithmetic; percent/ratio work elsewhere in the
engine goes through FixedDecimal.

Usage:
------
>>> from math_engine.models.position_sizing import PositionSizeInput
>>> result = calculate_position_size(
...     PositionSizeInput(
...         account_size=100000, risk_percent=1, stop_loss_distance=50, value_per_unit=10
...     )
... )
>>> result.risk_amount, result.position_size
(1000.0, 2.0)
"""

import structlog

from math_engine.models.position_sizing import PositionSizeInput, PositionSizeResult
from math_engine.shared.validation_helpers import require_positive

logger = structlog.get_logger(__name__)

_CALCULATOR = "position-size"


def calculate_position_size(input: PositionSizeInput) -> PositionSizeResult:
    """
    Calculate trade size and risk amount.

    Parameters:
    -----------
    input : PositionSizeInput
        Account size, risk percent, stop distance and value per unit.
        All four must be strictly positive.

    Returns:
    --------
    PositionSizeResult
        risk_amount, position_size and the echoed input parameters

    Raises:
    -------
    InvalidInputError
        If any field is zero, negative or non-finite (names the field)
    """
    require_positive(input.account_size, "accountSize", _CALCULATOR)
    require_positive(input.risk_percent, "riskPercent", _CALCULATOR)
    require_positive(input.stop_loss_distance, "stopLossDistance", _CALCULATOR)
    require_positive(input.value_per_unit, "valuePerUnit", _CALCULATOR)

    risk_amount = input.account_size * input.risk_percent / 100
    position_size = risk_amount / (input.stop_loss_distance * input.value_per_unit)

    logger.debug(
        "position_size_calculated",
        account_size=input.account_size,
        risk_percent=input.risk_percent,
        stop_loss_distance=input.stop_loss_distance,
        value_per_unit=input.value_per_unit,
        risk_amount=risk_amount,
        position_size=position_size,
    )

    return PositionSizeResult(
        risk_amount=risk_amount,
        position_size=position_size,
        risk_percent=input.risk_percent,
        stop_loss_distance=input.stop_loss_distance,
        value_per_unit=input.value_per_unit,
    )
