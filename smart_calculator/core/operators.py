"""Arithmetic operator table over arbitrary-precision integers."""
import operator
from typing import Callable, Dict, Tuple

from smart_calculator.common.errors import DivisionByZero, InvalidExpression
from smart_calculator.common.settings import DEFAULT_SETTINGS, Settings

# Type aliases for operator functions
BinaryFn = Callable[[int, int], int]
UnaryFn = Callable[[int], int]

UNARY_PRECEDENCE = 4


def truncating_div(left: int, right: int) -> int:
    """
    Integer division rounding toward zero.

    Python's ``//`` floors, so ``-7 // 2 == -4``; the calculator follows the
    truncating convention instead and ``-7 / 2 == -3``.

    :param int left: Dividend
    :param int right: Divisor

    :return: Quotient truncated toward zero
    :rtype: int
    :raises DivisionByZero: If ``right`` is zero
    """
    if right == 0:
        raise DivisionByZero("divisor is zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def bounded_pow(left: int, right: int, settings: Settings = DEFAULT_SETTINGS) -> int:
    """
    Raise ``left`` to a non-negative exponent, refusing oversized results.

    The exponent may not exceed ``settings.max_exponent``, and the upper bound
    ``left.bit_length() * right`` on the bits of the result may not exceed
    ``settings.max_result_bits``. The bound is checked before computing, so
    chained powers such as ``10 ^ 1000 ^ 1000`` fail fast.

    :param int left: Base
    :param int right: Exponent
    :param Settings settings: Settings providing the exponent and result limits

    :return: ``left ** right``
    :rtype: int
    :raises InvalidExpression: If the exponent is negative or too large, or the result too big
    """
    if right < 0:
        raise InvalidExpression("negative exponent")
    if right > settings.max_exponent:
        raise InvalidExpression(f"exponent exceeds {settings.max_exponent}")
    # 0, 1 and -1 keep their size whatever the exponent
    if abs(left) > 1 and left.bit_length() * right > settings.max_result_bits:
        raise InvalidExpression(f"result would exceed {settings.max_result_bits} bits")
    return left**right


# Mapping of binary operator symbols to (precedence, function)
BINARY_OPERATORS: Dict[str, Tuple[int, BinaryFn]] = {
    "+": (1, operator.add),
    "-": (1, operator.sub),
    "*": (2, operator.mul),
    "/": (2, truncating_div),
    "^": (3, bounded_pow),
}

# Prefix operators bind tighter than every binary operator
UNARY_OPERATORS: Dict[str, Tuple[int, UnaryFn]] = {
    "+": (UNARY_PRECEDENCE, operator.pos),
    "-": (UNARY_PRECEDENCE, operator.neg),
}


def apply_binary(symbol: str, left: int, right: int, settings: Settings = DEFAULT_SETTINGS) -> int:
    """Apply the binary operator ``symbol`` to ``left`` and ``right``."""
    if symbol == "^":
        return bounded_pow(left, right, settings)
    return BINARY_OPERATORS[symbol][1](left, right)


def apply_unary(symbol: str, operand: int) -> int:
    """Apply the prefix operator ``symbol`` to ``operand``."""
    return UNARY_OPERATORS[symbol][1](operand)
