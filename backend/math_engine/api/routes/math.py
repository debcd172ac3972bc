"""
Math Engine API Route

Endpoints:
----------
POST /api/jarvis/math - Run one deterministic math task

Request body is a MathTask: {"type": "<tag>", "input": {...}} with tags
"position-size", "prop-firm-plan" or "compounding-plan".

Responses:
----------
200 {"ok": true, "result": {"type": "<tag>", "result": {...}}}
400 {"ok": false, "error": "<message>"}
"""

import json

import structlog
from fastapi import APIRouter, Request
from fastapi import status as http_status
from fastapi.responses import JSONResponse

from math_engine.dispatcher import run_math_task
from math_engine.errors import MathEngineError
from math_engine.models.math_task import parse_math_task

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/jarvis", tags=["math"])


def _error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=http_status.HTTP_400_BAD_REQUEST,
        content={"ok": False, "error": message},
    )


@router.post("/math")
async def run_math(request: Request) -> JSONResponse:
    """
    Run a math task and wrap the outcome in the ok/result envelope.

    Engine errors (invalid input, division by zero) and malformed bodies
    return 400 with the error message; anything else propagates as a 500.
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("math_request_invalid_json")
        return _error_response("Request body must be valid JSON")

    try:
        task = parse_math_task(payload)
        result = run_math_task(task)
    except MathEngineError as exc:
        logger.error("math_request_failed", error_code=exc.code, error=exc.message)
        return _error_response(exc.message)

    return JSONResponse(
        status_code=http_status.HTTP_200_OK,
        content={"ok": True, "result": result.model_dump(by_alias=True, mode="json")},
    )
