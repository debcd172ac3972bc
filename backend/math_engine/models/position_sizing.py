"""
Position Sizing Data Models

Data Model Fields:
------------------
PositionSizeInput:
- account_size: Account balance the risk is taken from
- risk_percent: Percentage of the account risked on the trade (e.g. 1 for 1%)
- stop_loss_distance: Distance to the stop in points/pips
- value_per_unit: Money per point/pip for one lot or unit

PositionSizeResult:
- risk_amount: account_size × risk_percent / 100
- position_size: risk_amount / (stop_loss_distance × value_per_unit)
- risk_percent, stop_loss_distance, value_per_unit: echoed from the input

Positivity of the input fields is enforced by calculate_position_size so
that a violation surfaces as InvalidInputError naming the field.
"""

from pydantic import AliasChoices, Field

from math_engine.models.base import EngineModel


class PositionSizeInput(EngineModel):
    """
    Risk parameters for sizing one trade.

    The older wire names stopLossPoints / valuePerPoint are accepted too.

    Example:
    --------
    >>> PositionSizeInput(
    ...     account_size=100000, risk_percent=1, stop_loss_distance=50, value_per_unit=10
    ... )
    """

    account_size: float = Field(..., description="Account balance")
    risk_percent: float = Field(..., description="Percent of account risked per trade")
    stop_loss_distance: float = Field(
        ...,
        validation_alias=AliasChoices("stopLossDistance", "stopLossPoints", "stop_loss_distance"),
        description="Stop distance in points/pips",
    )
    value_per_unit: float = Field(
        ...,
        validation_alias=AliasChoices("valuePerUnit", "valuePerPoint", "value_per_unit"),
        description="Money per point/pip for one lot or unit",
    )


class PositionSizeResult(EngineModel):
    """Trade size and money at risk for a PositionSizeInput."""

    risk_amount: float = Field(..., description="Money at risk on the trade")
    position_size: float = Field(..., description="Lots/units to trade")
    risk_percent: float
    stop_loss_distance: float
    value_per_unit: float
