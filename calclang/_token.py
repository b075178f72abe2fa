from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Union

from calclang.errors import InvalidTokenValue


class TokenType(str, Enum):
    INTEGER = "INTEGER"
    ADDITION = "ADDITION"
    SUBTRACTION = "SUBTRACTION"
    MULTIPLICATION = "MULTIPLICATION"
    DIVISION = "DIVISION"
    MODULUS = "MODULUS"
    EXPONENT = "EXPONENT"
    ASSIGNMENT = "ASSIGNMENT"
    TERMINATOR = "TERMINATOR"
    QUIT = "QUIT"
    VARIABLE = "VARIABLE"
    UNKNOWN = "UNKNOWN"
    LITERAL_TOO_LARGE = "LITERAL_TOO_LARGE"


SINGLE_CHARACTER_TOKENS: Dict[str, TokenType] = {
    "+": TokenType.ADDITION,
    "-": TokenType.SUBTRACTION,
    "*": TokenType.MULTIPLICATION,
    "/": TokenType.DIVISION,
    "%": TokenType.MODULUS,
    "^": TokenType.EXPONENT,
    "=": TokenType.ASSIGNMENT,
    ";": TokenType.TERMINATOR,
}

WHITESPACE: FrozenSet[str] = frozenset(" \t\r\n")

KEYWORDS: Dict[str, TokenType] = {
    "quit": TokenType.QUIT,
}

# token types that carry no value, the only ones a keyword can map to
VALUELESS_TOKEN_TYPES: FrozenSet[TokenType] = frozenset(SINGLE_CHARACTER_TOKENS.values()) | {TokenType.QUIT}

TokenValue = Optional[Union[int, str]]


@dataclass(frozen=True)
class Token:
    """
    A single lexical unit. Only INTEGER (int), VARIABLE and UNKNOWN (single character)
    and LITERAL_TOO_LARGE (the overflowing digits) carry a value. Keyword tokens remember the
    matched text in `spelling`, which does not take part in comparisons.
    """

    type: TokenType
    value: TokenValue = None
    spelling: Optional[str] = field(default=None, compare=False)

    @classmethod
    def keyword(cls, token_type: TokenType, spelling: str) -> "Token":
        if token_type not in VALUELESS_TOKEN_TYPES:
            raise InvalidTokenValue(token_type.value, spelling)
        return cls(token_type, spelling=spelling)

    @classmethod
    def integer(cls, value: int) -> "Token":
        return cls(TokenType.INTEGER, value)

    @classmethod
    def variable(cls, letter: str) -> "Token":
        if len(letter) != 1:
            raise InvalidTokenValue(TokenType.VARIABLE.value, letter)
        return cls(TokenType.VARIABLE, letter)

    @classmethod
    def unknown(cls, character: str) -> "Token":
        if len(character) != 1:
            raise InvalidTokenValue(TokenType.UNKNOWN.value, character)
        return cls(TokenType.UNKNOWN, character)

    @classmethod
    def literal_too_large(cls, digits: str) -> "Token":
        return cls(TokenType.LITERAL_TOO_LARGE, digits)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.value})"
        return f"Token({self.type.value}, {self.value!r})"
