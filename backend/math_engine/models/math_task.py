"""
Math Task Tagged Unions

Purpose:
--------
MathTask and MathTaskResult are closed unions discriminated on `type`:

- "position-size"    -> PositionSizeInput / PositionSizeResult
- "prop-firm-plan"   -> PropFirmPlanInput / PropFirmPlanResult
- "compounding-plan" -> CompoundingPlanInput / CompoundingPlanResult

An unrecognized tag is rejected when the task is built (parse_math_task),
so the dispatcher never sees one.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import Field, TypeAdapter, ValidationError

from math_engine.errors import InvalidInputError
from math_engine.models.base import EngineModel
from math_engine.models.compounding import CompoundingPlanInput, CompoundingPlanResult
from math_engine.models.position_sizing import PositionSizeInput, PositionSizeResult
from math_engine.models.prop_firm import PropFirmPlanInput, PropFirmPlanResult


class PositionSizeTask(EngineModel):
    type: Literal["position-size"] = "position-size"
    input: PositionSizeInput


class PropFirmPlanTask(EngineModel):
    type: Literal["prop-firm-plan"] = "prop-firm-plan"
    input: PropFirmPlanInput


class CompoundingPlanTask(EngineModel):
    type: Literal["compounding-plan"] = "compounding-plan"
    input: CompoundingPlanInput


class PositionSizeTaskResult(EngineModel):
    type: Literal["position-size"] = "position-size"
    result: PositionSizeResult


class PropFirmPlanTaskResult(EngineModel):
    type: Literal["prop-firm-plan"] = "prop-firm-plan"
    result: PropFirmPlanResult


class CompoundingPlanTaskResult(EngineModel):
    type: Literal["compounding-plan"] = "compounding-plan"
    result: CompoundingPlanResult


MathTask = Annotated[
    Union[PositionSizeTask, PropFirmPlanTask, CompoundingPlanTask],
    Field(discriminator="type"),
]

MathTaskResult = Annotated[
    Union[PositionSizeTaskResult, PropFirmPlanTaskResult, CompoundingPlanTaskResult],
    Field(discriminator="type"),
]

_math_task_adapter: TypeAdapter[MathTask] = TypeAdapter(MathTask)


def parse_math_task(payload: Any) -> MathTask:
    """
    Build a MathTask from a decoded JSON body.

    Raises:
        InvalidInputError: If the tag is unknown or a field is missing or
            not numeric. The field is the dotted location of the first
            problem (e.g. "input.accountSize"), or "type" for a bad tag.
    """
    try:
        return _math_task_adapter.validate_python(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = [str(part) for part in first["loc"]]
        if first["type"] in ("union_tag_invalid", "union_tag_not_found"):
            field = "type"
        else:
            # Drop the discriminator branch name pydantic puts first
            if location and location[0] in ("position-size", "prop-firm-plan", "compounding-plan"):
                location = location[1:]
            field = ".".join(location) or "task"
        raise InvalidInputError(field, f"{field}: {first['msg']}") from exc
