"""
Unit tests for run_math_task.

Tests cover:
- Each task tag routes to its calculator and returns the same tag
- Calculator errors propagate unchanged
- Metrics are recorded per task type and status
"""

import pytest
from prometheus_client import REGISTRY

from math_engine.dispatcher import run_math_task
from math_engine.errors import InvalidInputError
from math_engine.models.math_task import (
    CompoundingPlanTaskResult,
    PositionSizeTaskResult,
    PropFirmPlanTaskResult,
    parse_math_task,
)


def _count(task_type: str, status: str) -> float:
    value = REGISTRY.get_sample_value(
        "math_task_requests_total", {"task_type": task_type, "status": status}
    )
    return value or 0.0


class TestRunMathTask:
    """Test dispatch by tag."""

    def test_position_size(self):
        task = parse_math_task(
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

        result = run_math_task(task)

        assert isinstance(result, PositionSizeTaskResult)
        assert result.type == "position-size"
        assert result.result.position_size == 2

    def test_prop_firm_plan(self, prop_firm_payload):
        result = run_math_task(parse_math_task({"type": "prop-firm-plan", "input": prop_firm_payload}))

        assert isinstance(result, PropFirmPlanTaskResult)
        assert result.type == "prop-firm-plan"
        assert result.result.target_profit_amount == 8000

    def test_compounding_plan(self):
        task = parse_math_task(
            {
                "type": "compounding-plan",
                "input": {
                    "startingBalance": 10000,
                    "riskPerTradePct": 1,
                    "expectedRR": 1,
                    "expectedWinratePct": 50,
                    "numberOfTrades": 1,
                },
            }
        )

        result = run_math_task(task)

        assert isinstance(result, CompoundingPlanTaskResult)
        assert result.type == "compounding-plan"
        assert result.result.ending_balance == 10000

    def test_calculator_error_propagates(self):
        task = parse_math_task(
            {
                "type": "position-size",
                "input": {
                    "accountSize": 0,
                    "riskPercent": 1,
                    "stopLossDistance": 50,
                    "valuePerUnit": 10,
                },
            }
        )

        with pytest.raises(InvalidInputError) as exc_info:
            run_math_task(task)

        assert exc_info.value.field == "accountSize"


class TestDispatcherMetrics:
    """Test Prometheus counters."""

    def test_success_and_error_counted(self, prop_firm_payload):
        ok_before = _count("prop-firm-plan", "ok")
        error_before = _count("prop-firm-plan", "error")

        run_math_task(parse_math_task({"type": "prop-firm-plan", "input": prop_firm_payload}))
        bad_payload = {**prop_firm_payload, "maxTradesPerDay": 0}
        with pytest.raises(InvalidInputError):
            run_math_task(parse_math_task({"type": "prop-firm-plan", "input": bad_payload}))

        assert _count("prop-firm-plan", "ok") == ok_before + 1
        assert _count("prop-firm-plan", "error") == error_before + 1
