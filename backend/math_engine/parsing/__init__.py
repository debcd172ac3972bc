"""Free-text math parsing: percent questions and bounded arithmetic."""

from math_engine.models.parsing import ParseOutcome
from math_engine.parsing.expression import evaluate_expression
from math_engine.parsing.percent_parser import parse_math_question

__all__ = ["ParseOutcome", "evaluate_expression", "parse_math_question"]
