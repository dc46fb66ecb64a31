"""Split a line of text into integer, identifier and symbol tokens."""
import string
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

from smart_calculator.common.digits import parse_decimal


class IntegerToken(BaseModel):
    """Unsigned integer literal; the sign is handled later as a unary operator."""

    model_config = ConfigDict(frozen=True)

    value: int


class IdentifierToken(BaseModel):
    """Run of letters naming a variable."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)


class SymbolToken(BaseModel):
    """Any other single non-whitespace character."""

    model_config = ConfigDict(frozen=True)

    char: str = Field(..., min_length=1, max_length=1)


Token = Union[IntegerToken, IdentifierToken, SymbolToken]


def _is_digit(char: str) -> bool:
    # Only ASCII digits: str.isdigit() also accepts superscripts and other scripts' digits
    return char in string.digits


def tokenize(text: str) -> List[Token]:
    """
    Convert text into a list of tokens.

    No semantic checking is performed here: any character that is neither
    whitespace, a digit nor a letter becomes a symbol token and is rejected
    later by the parser if it is not a supported operator.

    Examples:
        - "12 + ab" -> [IntegerToken(12), SymbolToken("+"), IdentifierToken("ab")]
        - "a1" -> [IdentifierToken("a"), IntegerToken(1)]

    :param str text: Raw input line

    :return: Tokens in input order
    :rtype: List[Token]
    """
    tokens: List[Token] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char.isspace():
            i += 1
        elif _is_digit(char):
            end = i + 1
            while end < len(text) and _is_digit(text[end]):
                end += 1
            tokens.append(IntegerToken(value=parse_decimal(text[i:end])))
            i = end
        elif char.isalpha():
            end = i + 1
            while end < len(text) and text[end].isalpha():
                end += 1
            tokens.append(IdentifierToken(name=text[i:end]))
            i = end
        else:
            tokens.append(SymbolToken(char=char))
            i += 1
    return tokens
