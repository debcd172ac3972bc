"""Pydantic data models for math engine inputs and results."""

from math_engine.models.compounding import (
    CompoundingPlanInput,
    CompoundingPlanResult,
    CompoundingStep,
)
from math_engine.models.math_task import (
    CompoundingPlanTask,
    CompoundingPlanTaskResult,
    MathTask,
    MathTaskResult,
    PositionSizeTask,
    PositionSizeTaskResult,
    PropFirmPlanTask,
    PropFirmPlanTaskResult,
    parse_math_task,
)
from math_engine.models.parsing import ParseOutcome
from math_engine.models.position_sizing import PositionSizeInput, PositionSizeResult
from math_engine.models.prop_firm import PropFirmConfig, PropFirmPlanInput, PropFirmPlanResult

__all__ = [
    "CompoundingPlanInput",
    "CompoundingPlanResult",
    "CompoundingPlanTask",
    "CompoundingPlanTaskResult",
    "CompoundingStep",
    "MathTask",
    "MathTaskResult",
    "ParseOutcome",
    "PositionSizeInput",
    "PositionSizeResult",
    "PositionSizeTask",
    "PositionSizeTaskResult",
    "PropFirmConfig",
    "PropFirmPlanInput",
    "PropFirmPlanResult",
    "PropFirmPlanTask",
    "PropFirmPlanTaskResult",
    "parse_math_task",
]
