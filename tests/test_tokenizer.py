"""Test function tokenize."""
import pytest

from smart_calculator.common.errors import InvalidExpression
from smart_calculator.core.parser import parse
from smart_calculator.core.tokenizer import IdentifierToken, IntegerToken, SymbolToken, tokenize


def test_tokenize_basic() -> None:
    """Tokenize splits a simple expression into correct tokens."""
    assert tokenize("3 + 4 * 2") == [
        IntegerToken(value=3),
        SymbolToken(char="+"),
        IntegerToken(value=4),
        SymbolToken(char="*"),
        IntegerToken(value=2),
    ]


def test_tokenize_without_spaces() -> None:
    """Whitespace is optional between tokens."""
    assert tokenize("x=(12)") == [
        IdentifierToken(name="x"),
        SymbolToken(char="="),
        SymbolToken(char="("),
        IntegerToken(value=12),
        SymbolToken(char=")"),
    ]


@pytest.mark.parametrize("text", ["", "   ", "\t \n"])
def test_tokenize_blank(text: str) -> None:
    """Blank input produces no tokens."""
    assert tokenize(text) == []


def test_digits_never_join_identifiers() -> None:
    """A letter run stops at the first digit."""
    assert tokenize("a1b") == [IdentifierToken(name="a"), IntegerToken(value=1), IdentifierToken(name="b")]


def test_identifiers_are_case_sensitive() -> None:
    assert tokenize("Ab aB") == [IdentifierToken(name="Ab"), IdentifierToken(name="aB")]


def test_minus_is_never_part_of_a_number() -> None:
    """Signs are symbols; integer tokens are unsigned."""
    assert tokenize("-5") == [SymbolToken(char="-"), IntegerToken(value=5)]


@pytest.mark.parametrize("char", ["%", "$", "!", ".", "="])
def test_unknown_characters_become_symbols(char: str) -> None:
    """Unsupported characters are passed through for the parser to reject."""
    assert tokenize(f"1{char}2") == [IntegerToken(value=1), SymbolToken(char=char), IntegerToken(value=2)]


def test_superscript_digit_is_a_symbol() -> None:
    """Only decimal digits form integers."""
    assert tokenize("2²") == [IntegerToken(value=2), SymbolToken(char="²")]


def test_arbitrary_precision_literal() -> None:
    """Integer literals are not limited to machine size."""
    assert tokenize("123456789012345678901234567890") == [IntegerToken(value=123456789012345678901234567890)]


def test_very_long_literal() -> None:
    """Literals longer than Python's default int conversion limit are accepted."""
    tokens = tokenize("1" + "0" * 5000)
    assert len(tokens) == 1
    assert tokens[0].value == 10**5000


@pytest.mark.parametrize("digit", ["٣", "३", "３"])
def test_non_ascii_digits_are_symbols(digit: str) -> None:
    """Digits of other scripts are not decimal digits and become symbols."""
    assert tokenize(f"1{digit}") == [IntegerToken(value=1), SymbolToken(char=digit)]


def test_non_ascii_digit_is_an_invalid_expression() -> None:
    """The parser rejects the symbol a non-ASCII digit becomes."""
    with pytest.raises(InvalidExpression):
        parse(tokenize("٣ + 1"))
