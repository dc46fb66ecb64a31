"""Classify tokens into expression elements."""
from typing import List, Optional

from smart_calculator.common.errors import InvalidExpression
from smart_calculator.core.elements import (
    BinaryOperator,
    Element,
    LeftParen,
    Number,
    RightParen,
    UnaryOperator,
    Variable,
)
from smart_calculator.core.operators import BINARY_OPERATORS, UNARY_OPERATORS
from smart_calculator.core.tokenizer import IdentifierToken, IntegerToken, SymbolToken, Token


def _follows_operand(previous: Optional[Token]) -> bool:
    """
    Tell whether an operator symbol after ``previous`` is in binary position.

    :param Token previous: Token preceding the operator, None at the start

    :return: True if ``previous`` is an integer, an identifier or ")"
    :rtype: bool
    """
    if isinstance(previous, (IntegerToken, IdentifierToken)):
        return True
    return isinstance(previous, SymbolToken) and previous.char == ")"


def _classify_symbol(char: str, previous: Optional[Token]) -> Element:
    if _follows_operand(previous):
        if char in BINARY_OPERATORS:
            return BinaryOperator(symbol=char, precedence=BINARY_OPERATORS[char][0])
    elif char in UNARY_OPERATORS:
        return UnaryOperator(symbol=char, precedence=UNARY_OPERATORS[char][0])
    elif char in BINARY_OPERATORS:
        # "*", "/" and "^" have no unary form
        raise InvalidExpression(f"operator {char!r} without left operand")

    if char == "(":
        return LeftParen()
    if char == ")":
        return RightParen()
    raise InvalidExpression(f"unsupported symbol {char!r}")


def parse(tokens: List[Token]) -> List[Element]:
    """
    Convert tokens into infix expression elements.

    An operator symbol is binary if and only if the preceding token is an
    integer, an identifier or a closing parenthesis; otherwise it is unary.
    Variables are not looked up here.

    :param List[Token] tokens: Tokens produced by ``tokenize``

    :return: Elements in infix order
    :rtype: List[Element]
    :raises InvalidExpression: On a misplaced operator, an unsupported symbol
        or unbalanced parentheses
    """
    elements: List[Element] = []
    depth = 0
    previous: Optional[Token] = None

    for token in tokens:
        if isinstance(token, IntegerToken):
            elements.append(Number(value=token.value))
        elif isinstance(token, IdentifierToken):
            elements.append(Variable(name=token.name))
        else:
            element = _classify_symbol(token.char, previous)
            if isinstance(element, LeftParen):
                depth += 1
            elif isinstance(element, RightParen):
                depth -= 1
            elements.append(element)
        previous = token

    if depth != 0:
        raise InvalidExpression("unbalanced parentheses")
    return elements
