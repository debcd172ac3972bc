"""
Shared validation helpers for calculator inputs.

Every calculator checks its numeric fields the same way: the value must be
a finite number and, where required, strictly positive. Failures are logged
and raised as InvalidInputError naming the offending field, so callers can
point the user at the exact value to fix.
"""

from __future__ import annotations

import math

import structlog

from math_engine.errors import InvalidInputError

logger = structlog.get_logger(__name__)


def require_finite(value: float, field: str, calculator: str) -> None:
    """
    Validate that a numeric field is a finite number.

    Args:
        value: Value to check
        field: Wire name of the field (used in the error)
        calculator: Calculator name for log context

    Raises:
        InvalidInputError: If value is NaN or infinite
    """
    if not math.isfinite(value):
        logger.error(
            "non_finite_input",
            calculator=calculator,
            field=field,
            value=str(value),
        )
        raise InvalidInputError(field, f"{field} must be a finite number")


def require_positive(value: float, field: str, calculator: str) -> None:
    """
    Validate that a numeric field is finite and strictly greater than zero.

    Example:
        >>> require_positive(100000, "accountSize", "position-size")
        >>> require_positive(0, "riskPercent", "position-size")
        Traceback (most recent call last):
        ...
        math_engine.errors.InvalidInputError: riskPercent must be greater than 0
    """
    require_finite(value, field, calculator)
    if value <= 0:
        logger.error(
            "non_positive_input",
            calculator=calculator,
            field=field,
            value=value,
        )
        raise InvalidInputError(field, f"{field} must be greater than 0")
