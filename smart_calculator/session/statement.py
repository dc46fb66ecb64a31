"""Dispatch a statement as an assignment or an expression."""
from typing import List

from smart_calculator.common.errors import InvalidAssignment, InvalidExpression, InvalidIdentifier
from smart_calculator.common.logger import logger
from smart_calculator.common.operations import StatementResult
from smart_calculator.common.settings import DEFAULT_SETTINGS, Settings
from smart_calculator.core.evaluator import evaluate
from smart_calculator.core.parser import parse
from smart_calculator.core.postfix import to_postfix
from smart_calculator.core.tokenizer import IdentifierToken, SymbolToken, Token, tokenize
from smart_calculator.core.variables import VariableStore

ASSIGNMENT_SYMBOL = "="


def _is_assignment_symbol(token: Token) -> bool:
    return isinstance(token, SymbolToken) and token.char == ASSIGNMENT_SYMBOL


def _evaluate_right_side(tokens: List[Token], variables: VariableStore, settings: Settings) -> int:
    """
    Evaluate the tokens to the right of "=".

    :raises InvalidAssignment: If the tokens are empty, contain another "="
        or do not form a valid expression
    """
    if not tokens or any(_is_assignment_symbol(t) for t in tokens):
        raise InvalidAssignment("right-hand side must be a single expression")
    try:
        return evaluate(to_postfix(parse(tokens)), variables, settings)
    except InvalidExpression as exc:
        raise InvalidAssignment(exc.detail) from exc


def _bind(name: str, tokens: List[Token], variables: VariableStore, settings: Settings) -> int:
    value = _evaluate_right_side(tokens, variables, settings)
    variables.set(name, value)
    logger.info(f"📝 Variable {name!r} assigned")
    return value


def assign(name: str, text: str, variables: VariableStore, settings: Settings = DEFAULT_SETTINGS) -> int:
    """
    Bind ``name`` to the value of the expression ``text``.

    Nothing is stored unless the expression fully evaluates.

    :param str name: Variable name, letters only
    :param str text: Right-hand side expression
    :param VariableStore variables: Store receiving the binding
    :param Settings settings: Calculator settings

    :return: The stored value
    :rtype: int
    :raises InvalidIdentifier: If ``name`` is not a single identifier
    :raises InvalidAssignment: If ``text`` is not a valid expression
    """
    name_tokens = tokenize(name)
    if len(name_tokens) != 1 or not isinstance(name_tokens[0], IdentifierToken):
        raise InvalidIdentifier(name)
    return _bind(name_tokens[0].name, tokenize(text), variables, settings)


def execute_statement(text: str, variables: VariableStore, settings: Settings = DEFAULT_SETTINGS) -> StatementResult:
    """
    Execute one statement against the variable store.

    A statement containing "=" is an assignment ``identifier = expression``,
    any other statement is an expression whose value becomes the result.

    Examples:
        - "a = 2 + 3" -> stores a = 5, result None
        - "a * 2" -> result 10
        - "a1 = 3" -> InvalidIdentifier
        - "a = 7 = 8" -> InvalidAssignment

    :param str text: Statement text
    :param VariableStore variables: Store read by expressions and written by assignments
    :param Settings settings: Calculator settings

    :return: Outcome of the statement
    :rtype: StatementResult
    :raises CalculatorError: The error kind matching the failure
    """
    tokens = tokenize(text)
    split_at = next((i for i, t in enumerate(tokens) if _is_assignment_symbol(t)), None)

    if split_at is None:
        result = evaluate(to_postfix(parse(tokens)), variables, settings)
        return StatementResult(statement=text, result=result)

    target = tokens[:split_at]
    if len(target) != 1 or not isinstance(target[0], IdentifierToken):
        raise InvalidIdentifier(text[: text.index(ASSIGNMENT_SYMBOL)].strip())

    _bind(target[0].name, tokens[split_at + 1 :], variables, settings)
    return StatementResult(statement=text, assigned=target[0].name)
