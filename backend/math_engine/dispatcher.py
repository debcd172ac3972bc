"""
Math Task Dispatcher

Single entry point for the engine: takes a tagged MathTask, runs the
matching calculator, and returns the result wrapped with the same tag.

The match below is exhaustive over the closed MathTask union; the
assert_never arm makes a static type checker reject any new task type that
is not wired in here.
"""

import time
from typing import assert_never

import structlog

from math_engine.errors import MathEngineError
from math_engine.models.math_task import (
    CompoundingPlanTask,
    CompoundingPlanTaskResult,
    MathTask,
    MathTaskResult,
    PositionSizeTask,
    PositionSizeTaskResult,
    PropFirmPlanTask,
    PropFirmPlanTaskResult,
)
from math_engine.observability.metrics import (
    math_task_duration_seconds,
    math_task_requests_total,
)
from math_engine.risk_management.compounding import build_compounding_plan
from math_engine.risk_management.position_calculator import calculate_position_size
from math_engine.risk_management.prop_firm_planner import build_prop_firm_plan

logger = structlog.get_logger(__name__)


def _dispatch(task: MathTask) -> MathTaskResult:
    match task:
        case PositionSizeTask():
            return PositionSizeTaskResult(result=calculate_position_size(task.input))
        case PropFirmPlanTask():
            return PropFirmPlanTaskResult(result=build_prop_firm_plan(task.input))
        case CompoundingPlanTask():
            return CompoundingPlanTaskResult(result=build_compounding_plan(task.input))
        case _:
            assert_never(task)


def run_math_task(task: MathTask) -> MathTaskResult:
    """
    Run one math task.

    Parameters:
    -----------
    task : MathTask
        PositionSizeTask, PropFirmPlanTask or CompoundingPlanTask

    Returns:
    --------
    MathTaskResult
        Result model carrying the same `type` tag as the task

    Raises:
    -------
    MathEngineError
        InvalidInputError / DivisionByZeroError from the calculator
    """
    started = time.perf_counter()
    try:
        result = _dispatch(task)
    except MathEngineError as exc:
        math_task_requests_total.labels(task_type=task.type, status="error").inc()
        logger.warning(
            "math_task_failed",
            task_type=task.type,
            error_code=exc.code,
            error=exc.message,
        )
        raise
    finally:
        math_task_duration_seconds.labels(task_type=task.type).observe(
            time.perf_counter() - started
        )

    math_task_requests_total.labels(task_type=task.type, status="ok").inc()
    logger.info("math_task_completed", task_type=task.type)
    return result
