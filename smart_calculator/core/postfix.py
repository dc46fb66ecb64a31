"""Convert infix elements to Reverse Polish Notation with the Shunting-yard algorithm."""
from typing import List, Union

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

StackEntry = Union[BinaryOperator, UnaryOperator, LeftParen]


def to_postfix(elements: List[Element]) -> List[Element]:
    """
    Convert infix elements into Reverse Polish Notation (RPN).

    Operators wait on a stack until an operator of lower or equal precedence,
    a closing parenthesis or the end of input releases them, so binary
    operators of equal precedence are applied left to right.

    Unary operators are prefixes: when one is pushed nothing can be waiting
    for its operand yet, so it never pops the stack. Consecutive unary
    operators therefore nest (``--5`` is ``-(-5)``).

    Examples:
        - Infix: 3 + 4 * 2  -> RPN: 3 4 2 * +
        - Infix: 8 - 3 - 2  -> RPN: 8 3 - 2 -
        - Infix: 2 * -3     -> RPN: 2 3 u- *

    :param List[Element] elements: Elements in infix order

    :return: Elements in RPN order, without parentheses
    :rtype: List[Element]
    :raises InvalidExpression: If parentheses do not match
    """
    output: List[Element] = []
    stack: List[StackEntry] = []

    for element in elements:
        if isinstance(element, (Number, Variable)):
            # Operands are added directly to the output
            output.append(element)
        elif isinstance(element, BinaryOperator):
            # Pop operators with higher or equal precedence, stopping at "("
            while (
                stack
                and not isinstance(stack[-1], LeftParen)
                and stack[-1].precedence >= element.precedence
            ):
                output.append(stack.pop())
            stack.append(element)
        elif isinstance(element, (UnaryOperator, LeftParen)):
            stack.append(element)
        elif isinstance(element, RightParen):
            while stack and not isinstance(stack[-1], LeftParen):
                output.append(stack.pop())
            if not stack:
                raise InvalidExpression("')' without matching '('")
            # Discard the "(" itself
            stack.pop()
        else:
            raise InvalidExpression(f"unexpected element {element!r}")

    # Append remaining operators in reverse order (stack top first)
    while stack:
        entry = stack.pop()
        if isinstance(entry, LeftParen):
            raise InvalidExpression("'(' without matching ')'")
        output.append(entry)
    return output
