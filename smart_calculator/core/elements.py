"""Classified expression elements: operands, operators and parentheses."""
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from smart_calculator.common.digits import format_decimal


class _Element(BaseModel):
    model_config = ConfigDict(frozen=True)


class Number(_Element):
    """Integer literal operand."""

    kind: Literal["number"] = "number"
    value: int


class Variable(_Element):
    """
    Variable operand.

    Only the name is stored; the value is looked up in the variable store
    when the evaluator consumes the element.
    """

    kind: Literal["variable"] = "variable"
    name: str = Field(..., min_length=1)


class BinaryOperator(_Element):
    kind: Literal["binary"] = "binary"
    symbol: Literal["+", "-", "*", "/", "^"]
    precedence: int


class UnaryOperator(_Element):
    kind: Literal["unary"] = "unary"
    symbol: Literal["+", "-"]
    precedence: int


class LeftParen(_Element):
    kind: Literal["("] = "("


class RightParen(_Element):
    kind: Literal[")"] = ")"


Element = Union[Number, Variable, BinaryOperator, UnaryOperator, LeftParen, RightParen]


def render(element: Element) -> str:
    """Return the textual form of an element, as it would appear in RPN output (unary operators as ``u-``/``u+``)."""
    if isinstance(element, Number):
        return format_decimal(element.value)
    if isinstance(element, Variable):
        return element.name
    if isinstance(element, BinaryOperator):
        return element.symbol
    if isinstance(element, UnaryOperator):
        # Prefixed so that unary and binary minus stay distinguishable
        return f"u{element.symbol}"
    return element.kind
