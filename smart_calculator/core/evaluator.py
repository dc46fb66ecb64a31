"""Evaluate postfix elements and whole expressions."""
import logging
from typing import List

from smart_calculator.common.errors import InvalidExpression, UnknownVariable
from smart_calculator.common.logger import logger
from smart_calculator.common.settings import DEFAULT_SETTINGS, Settings
from smart_calculator.core.elements import BinaryOperator, Element, Number, UnaryOperator, Variable, render
from smart_calculator.core.operators import apply_binary, apply_unary
from smart_calculator.core.parser import parse
from smart_calculator.core.postfix import to_postfix
from smart_calculator.core.tokenizer import tokenize
from smart_calculator.core.variables import VariableStore


def _resolve(element: Variable, variables: VariableStore) -> int:
    value = variables.get(element.name)
    if value is None:
        raise UnknownVariable(element.name)
    return value


def evaluate(postfix: List[Element], variables: VariableStore, settings: Settings = DEFAULT_SETTINGS) -> int:
    """
    Evaluate elements in Reverse Polish Notation using an operand stack.

    Variables are resolved at the moment they are consumed. For binary
    operators the top of the stack is the right-hand operand.

    :param List[Element] postfix: Elements in RPN order
    :param VariableStore variables: Store used to resolve variables
    :param Settings settings: Settings bounding the power operator

    :return: Value of the expression
    :rtype: int
    :raises InvalidExpression: If an operator lacks operands, if not exactly
        one value remains, or on an invalid exponent
    :raises UnknownVariable: If a variable was never assigned
    :raises DivisionByZero: On division by zero
    """
    stack: List[int] = []
    for element in postfix:
        if isinstance(element, Number):
            stack.append(element.value)
        elif isinstance(element, Variable):
            stack.append(_resolve(element, variables))
        elif isinstance(element, BinaryOperator):
            # Binary operator requires two operands
            if len(stack) < 2:
                raise InvalidExpression(f"not enough operands for {render(element)!r}")
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_binary(element.symbol, left, right, settings))
        elif isinstance(element, UnaryOperator):
            if not stack:
                raise InvalidExpression(f"missing operand for {render(element)!r}")
            stack.append(apply_unary(element.symbol, stack.pop()))
        else:
            raise InvalidExpression(f"unexpected element {render(element)!r} in postfix input")

    if len(stack) != 1:
        raise InvalidExpression(f"{len(stack)} values left on the stack")
    return stack[0]


def evaluate_expression(text: str, variables: VariableStore, settings: Settings = DEFAULT_SETTINGS) -> int:
    """
    Run the whole pipeline on one line: tokenize, parse, convert to RPN, evaluate.

    :param str text: Arithmetic expression
    :param VariableStore variables: Store used to resolve variables
    :param Settings settings: Calculator settings

    :return: Value of the expression
    :rtype: int
    """
    postfix = to_postfix(parse(tokenize(text)))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"🧮 {text!r} -> RPN: {' '.join(render(e) for e in postfix)}")
    return evaluate(postfix, variables, settings)
