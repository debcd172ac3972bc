"""
Bounded Arithmetic Expression Evaluator

Purpose:
--------
Evaluates short arithmetic expressions typed into chat ("1250 * 3 / (2 + 4)")
without any general code-execution facility. Input comes straight from
free-form chat messages, so the grammar is closed:

- numbers: digits with at most one decimal point ("12", "0.5", ".5")
- operators: + - * / and unary minus/plus
- parentheses: ( )
- whitespace

Pipeline:
---------
1. tokenize()       - characters -> Token list (UnknownTokenError, MalformedNumberError)
2. to_postfix()     - shunting-yard with operator precedence (MismatchedParenthesesError)
3. evaluate_postfix() - FixedDecimal stack machine (ParseError, DivisionByZeroError)

All arithmetic runs on FixedDecimal, so "0.1 + 0.2" evaluates to exactly 0.3.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import structlog

from math_engine.config import settings
from math_engine.errors import (
    ExpressionTooLongError,
    MalformedNumberError,
    MismatchedParenthesesError,
    ParseError,
    UnknownTokenError,
)
from math_engine.shared.fixed_point import FixedDecimal

logger = structlog.get_logger(__name__)

TokenKind = Literal["number", "operator", "lparen", "rparen"]

# Unary minus/plus are rewritten to these symbols during tokenization
UNARY_MINUS = "neg"
UNARY_PLUS = "pos"

PRECEDENCE = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    UNARY_MINUS: 3,
    UNARY_PLUS: 3,
}
RIGHT_ASSOCIATIVE = {UNARY_MINUS, UNARY_PLUS}
BINARY_OPERATORS = {"+", "-", "*", "/"}

EXPRESSION_CHARACTERS = frozenset("0123456789.+-*/() \t")
_OPERAND_END = frozenset("0123456789.)")


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    position: int


def _expects_operand(previous: Token | None) -> bool:
    """True when the next token must start an operand (so +/- is unary)."""
    return previous is None or previous.kind in ("operator", "lparen")


def tokenize(expression: str) -> list[Token]:
    """
    Split an expression into number, operator and parenthesis tokens.

    Raises:
        UnknownTokenError: On any character outside the closed grammar
        MalformedNumberError: On a number run like "1.2.3" or a lone "."
    """
    tokens: list[Token] = []
    index = 0
    length = len(expression)

    while index < length:
        char = expression[index]

        if char.isspace():
            index += 1
            continue

        if char.isdigit() or char == ".":
            start = index
            while index < length and (expression[index].isdigit() or expression[index] == "."):
                index += 1
            text = expression[start:index]
            if text.count(".") > 1 or text == ".":
                raise MalformedNumberError(f"Malformed number '{text}' at position {start}", start)
            tokens.append(Token("number", text, start))
            continue

        previous = tokens[-1] if tokens else None

        if char in "+-":
            if _expects_operand(previous):
                symbol = UNARY_MINUS if char == "-" else UNARY_PLUS
                tokens.append(Token("operator", symbol, index))
            else:
                tokens.append(Token("operator", char, index))
        elif char in "*/":
            tokens.append(Token("operator", char, index))
        elif char == "(":
            tokens.append(Token("lparen", char, index))
        elif char == ")":
            tokens.append(Token("rparen", char, index))
        else:
            raise UnknownTokenError(f"Unknown character '{char}' at position {index}", index)
        index += 1

    return tokens


def to_postfix(tokens: list[Token]) -> list[Token]:
    """
    Reorder infix tokens into postfix (shunting-yard).

    Raises:
        MismatchedParenthesesError: On an unmatched '(' or ')'
    """
    output: list[Token] = []
    stack: list[Token] = []

    for token in tokens:
        if token.kind == "number":
            output.append(token)
        elif token.kind == "operator":
            while stack and stack[-1].kind == "operator":
                top = stack[-1]
                if token.text in RIGHT_ASSOCIATIVE:
                    should_pop = PRECEDENCE[top.text] > PRECEDENCE[token.text]
                else:
                    should_pop = PRECEDENCE[top.text] >= PRECEDENCE[token.text]
                if not should_pop:
                    break
                output.append(stack.pop())
            stack.append(token)
        elif token.kind == "lparen":
            stack.append(token)
        else:
            while stack and stack[-1].kind != "lparen":
                output.append(stack.pop())
            if not stack:
                raise MismatchedParenthesesError(
                    f"Unmatched ')' at position {token.position}", token.position
                )
            stack.pop()

    while stack:
        top = stack.pop()
        if top.kind == "lparen":
            raise MismatchedParenthesesError(
                f"Unmatched '(' at position {top.position}", top.position
            )
        output.append(top)

    return output


def evaluate_postfix(postfix: list[Token], scale: int | None = None) -> FixedDecimal:
    """
    Evaluate postfix tokens on a FixedDecimal stack.

    Raises:
        ParseError: If an operator is missing an operand or operands are left over
        DivisionByZeroError: On division by a zero value
    """
    scale = settings.fixed_point_scale if scale is None else scale
    stack: list[FixedDecimal] = []

    for token in postfix:
        if token.kind == "number":
            stack.append(FixedDecimal(token.text, scale))
            continue

        if token.text in (UNARY_MINUS, UNARY_PLUS):
            if not stack:
                raise ParseError(
                    f"Missing operand for sign at position {token.position}", token.position
                )
            if token.text == UNARY_MINUS:
                stack.append(-stack.pop())
            continue

        if len(stack) < 2:
            raise ParseError(
                f"Missing operand for '{token.text}' at position {token.position}", token.position
            )
        right = stack.pop()
        left = stack.pop()
        if token.text == "+":
            stack.append(left.add(right))
        elif token.text == "-":
            stack.append(left.sub(right))
        elif token.text == "*":
            stack.append(left.mul(right))
        else:
            stack.append(left.div(right))

    if len(stack) != 1:
        raise ParseError("Expression is incomplete or has extra operands")
    return stack[0]


def looks_like_expression(text: str) -> bool:
    """
    True when text is built only from expression characters and has at
    least one digit and one binary operator.

    An operator is binary only when it follows an operand (a digit, "." or
    ")"), so a signed bare number like "-5" is not an expression.
    """
    stripped = text.strip()
    if not stripped or not set(stripped) <= EXPRESSION_CHARACTERS:
        return False
    has_digit = any(char.isdigit() for char in stripped)
    compact = "".join(stripped.split())
    has_binary_operator = any(
        char in BINARY_OPERATORS and index > 0 and compact[index - 1] in _OPERAND_END
        for index, char in enumerate(compact)
    )
    return has_digit and has_binary_operator


def evaluate_expression(expression: str, scale: int | None = None) -> FixedDecimal:
    """
    Evaluate a bounded arithmetic expression.

    Example:
        >>> evaluate_expression("(100000 * 1) / 100").to_fixed(2)
        '1000.00'

    Raises:
        ExpressionTooLongError: If longer than settings.max_expression_length
        UnknownTokenError, MalformedNumberError, MismatchedParenthesesError,
        ParseError: On syntax problems
        DivisionByZeroError: On division by zero
    """
    if len(expression) > settings.max_expression_length:
        raise ExpressionTooLongError(
            f"Expression longer than {settings.max_expression_length} characters"
        )

    tokens = tokenize(expression)
    if not tokens:
        raise ParseError("Expression is empty")

    result = evaluate_postfix(to_postfix(tokens), scale)
    logger.debug("expression_evaluated", expression=expression, result=str(result))
    return result
