"""Result model for free-text math question parsing."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from math_engine.shared.fixed_point import FixedDecimal

ParseKind = Literal["percent-of", "ratio", "expression"]


class ParseOutcome(BaseModel):
    """
    Outcome of parse_math_question.

    status "declined" means no deterministic math was recognized in the text
    (a negative result, not an error); kind and value are then None. Invalid
    math is never reported here: it raises ParseError/DivisionByZeroError.
    """

    status: Literal["answered", "declined"]
    kind: ParseKind | None = None
    value: FixedDecimal | None = None
    operands: tuple[FixedDecimal, ...] = Field(default_factory=tuple)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @classmethod
    def declined(cls) -> "ParseOutcome":
        return cls(status="declined")

    @property
    def answered(self) -> bool:
        return self.status == "answered"
