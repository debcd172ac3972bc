"""Risk management calculators: position sizing, prop-firm plans, compounding."""

from math_engine.risk_management.compounding import build_compounding_plan
from math_engine.risk_management.position_calculator import calculate_position_size
from math_engine.risk_management.prop_firm_planner import (
    build_prop_firm_plan,
    estimate_losing_streak,
)

__all__ = [
    "build_compounding_plan",
    "build_prop_firm_plan",
    "calculate_position_size",
    "estimate_losing_streak",
]
