"""
FixedDecimal - Scaled-Integer Fixed-Point Arithmetic

Purpose:
--------
Percent and ratio answers shown to a trader must not drift by a cent.
Binary floating point does drift on chained percent operations
(0.1 + 0.2 != 0.3), so every percent/ratio path in the engine goes through
this type instead of native float arithmetic.

Representation:
---------------
A value is stored as a Python int equal to round(value × 10^scale).
Python ints are unbounded, so no magnitude overflows. Decimal conversions
size their working precision to the operand, so a 100-digit balance
converts as exactly as a 2-digit one.

Operations:
-----------
- add / sub: raw + raw, raw - raw (scales must match)
- mul: a × b / 10^scale, truncated toward zero onto the grid
- div: a × 10^scale / b, truncated toward zero, DivisionByZeroError on b == 0
- to_number(): float for display
- to_fixed(n): string with n decimal places (ROUND_HALF_UP)

Combining two values with different scales raises ScaleMismatchError.

Usage:
------
>>> total = FixedDecimal("0.1") + FixedDecimal("0.2")
>>> total == FixedDecimal("0.3")
True
>>> percent_of(8, "100,000").to_fixed(2)
'8000.00'
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from functools import total_ordering
from typing import Union

from math_engine.errors import DivisionByZeroError, ScaleMismatchError

DEFAULT_SCALE = 8

# Minimum working precision for Decimal conversions
_CONVERSION_PRECISION = 80

NumericLike = Union["FixedDecimal", Decimal, int, float, str, None]


def _to_decimal(value: NumericLike) -> Decimal:
    """Coerce input to a finite Decimal; anything unusable becomes zero."""
    if value is None or isinstance(value, bool):
        return Decimal(0)
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal(0)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            return Decimal(0)
        # repr() gives the shortest round-tripping digits (33.3333, not 33.33329999...)
        return Decimal(repr(value))
    if isinstance(value, str):
        cleaned = value.replace(",", "").strip()
        try:
            parsed = Decimal(cleaned)
        except InvalidOperation:
            return Decimal(0)
        return parsed if parsed.is_finite() else Decimal(0)
    raise TypeError(f"Cannot build FixedDecimal from {type(value).__name__}")


def _precision_for(value: Decimal, extra: int = 0) -> int:
    """Context precision that holds every coefficient digit of value."""
    return max(_CONVERSION_PRECISION, len(value.as_tuple().digits) + extra)


def _div_toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@total_ordering
class FixedDecimal:
    """
    Immutable fixed-point decimal backed by a scaled integer.

    Args:
        value: int, float, Decimal, numeric string (commas allowed) or
            another FixedDecimal. Non-finite or unparsable input is zero.
        scale: Number of fractional digits (default 8)
    """

    __slots__ = ("_raw", "_scale")

    def __init__(self, value: NumericLike = 0, scale: int = DEFAULT_SCALE) -> None:
        if not isinstance(scale, int) or isinstance(scale, bool) or scale < 0:
            raise ValueError(f"scale must be a non-negative int, got {scale!r}")

        if isinstance(value, FixedDecimal):
            decimal_value = value.to_decimal()
        else:
            decimal_value = _to_decimal(value)

        with localcontext() as ctx:
            ctx.prec = _precision_for(decimal_value)
            # scaleb keeps the coefficient; to_integral_value is not bounded by prec
            scaled = decimal_value.scaleb(scale).to_integral_value(rounding=ROUND_HALF_UP)

        self._raw = int(scaled)
        self._scale = scale

    @classmethod
    def from_raw(cls, raw: int, scale: int = DEFAULT_SCALE) -> FixedDecimal:
        """Build directly from an already-scaled integer."""
        instance = cls(0, scale)
        instance._raw = int(raw)
        return instance

    @property
    def raw(self) -> int:
        return self._raw

    @property
    def scale(self) -> int:
        return self._scale

    def is_zero(self) -> bool:
        return self._raw == 0

    def _coerce(self, other: NumericLike) -> FixedDecimal:
        if isinstance(other, FixedDecimal):
            if other._scale != self._scale:
                raise ScaleMismatchError(self._scale, other._scale)
            return other
        return FixedDecimal(other, self._scale)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add(self, other: NumericLike) -> FixedDecimal:
        rhs = self._coerce(other)
        return FixedDecimal.from_raw(self._raw + rhs._raw, self._scale)

    def sub(self, other: NumericLike) -> FixedDecimal:
        rhs = self._coerce(other)
        return FixedDecimal.from_raw(self._raw - rhs._raw, self._scale)

    def mul(self, other: NumericLike) -> FixedDecimal:
        rhs = self._coerce(other)
        product = _div_toward_zero(self._raw * rhs._raw, 10**self._scale)
        return FixedDecimal.from_raw(product, self._scale)

    def div(self, other: NumericLike) -> FixedDecimal:
        rhs = self._coerce(other)
        if rhs._raw == 0:
            raise DivisionByZeroError(f"Cannot divide {self} by zero")
        quotient = _div_toward_zero(self._raw * 10**self._scale, rhs._raw)
        return FixedDecimal.from_raw(quotient, self._scale)

    __add__ = add
    __sub__ = sub
    __mul__ = mul
    __truediv__ = div

    def __neg__(self) -> FixedDecimal:
        return FixedDecimal.from_raw(-self._raw, self._scale)

    def __abs__(self) -> FixedDecimal:
        return FixedDecimal.from_raw(abs(self._raw), self._scale)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._scale == other._scale and self._raw == other._raw

    def __lt__(self, other: FixedDecimal) -> bool:
        if not isinstance(other, FixedDecimal):
            return NotImplemented
        return self._raw < self._coerce(other)._raw

    def __hash__(self) -> int:
        return hash((self._raw, self._scale))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def to_decimal(self) -> Decimal:
        """Exact Decimal value of this number."""
        # String construction is exact at any length
        return Decimal(f"{self._raw}E-{self._scale}")

    def to_number(self) -> float:
        """Nearest float, for display and JSON output."""
        return float(self.to_decimal())

    def to_fixed(self, digits: int = 2) -> str:
        """Format with exactly `digits` decimal places (half-up)."""
        quantum = Decimal(1).scaleb(-digits)
        value = self.to_decimal()
        with localcontext() as ctx:
            ctx.prec = _precision_for(value, digits + 2)
            rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)
        if rounded.is_zero():
            rounded = abs(rounded)
        return f"{rounded:f}"

    def __float__(self) -> float:
        return self.to_number()

    def __str__(self) -> str:
        value = self.to_decimal()
        with localcontext() as ctx:
            ctx.prec = _precision_for(value)
            return f"{value.normalize():f}"

    def __repr__(self) -> str:
        return f"FixedDecimal('{self}', scale={self._scale})"


def percent_of(percent: NumericLike, total: NumericLike, scale: int = DEFAULT_SCALE) -> FixedDecimal:
    """
    Compute `percent`% of `total`: multiply first, then divide by 100.

    Example:
        >>> percent_of("33.3333", 9).to_fixed(6)
        '2.999997'
    """
    return FixedDecimal(percent, scale).mul(FixedDecimal(total, scale)).div(FixedDecimal(100, scale))


def what_percent_is(part: NumericLike, whole: NumericLike, scale: int = DEFAULT_SCALE) -> FixedDecimal:
    """
    Compute (part / whole) × 100: divide first, then multiply.

    Raises:
        DivisionByZeroError: If whole is zero
    """
    return FixedDecimal(part, scale).div(FixedDecimal(whole, scale)).mul(FixedDecimal(100, scale))
