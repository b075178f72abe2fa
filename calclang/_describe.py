from typing import Dict

from calclang._token import KEYWORDS, SINGLE_CHARACTER_TOKENS, Token, TokenType

_SPELLINGS: Dict[TokenType, str] = {
    **{token_type: character for character, token_type in SINGLE_CHARACTER_TOKENS.items()},
    **{token_type: keyword for keyword, token_type in KEYWORDS.items()},
}

_LABELS: Dict[TokenType, str] = {
    TokenType.INTEGER: "Integer constant",
    TokenType.ADDITION: "Addition operator",
    TokenType.SUBTRACTION: "Subtraction operator",
    TokenType.MULTIPLICATION: "Multiplication operator",
    TokenType.DIVISION: "Division operator",
    TokenType.MODULUS: "Modulus operator",
    TokenType.EXPONENT: "Exponent operator",
    TokenType.ASSIGNMENT: "Assignment operator",
    TokenType.TERMINATOR: "Statement terminator",
    TokenType.QUIT: "Quit keyword",
    TokenType.VARIABLE: "Variable name",
    TokenType.UNKNOWN: "Unrecognized token",
    TokenType.LITERAL_TOO_LARGE: "Integer constant too large",
}


def token_text(token: Token) -> str:
    """Source spelling of the token"""
    if token.spelling is not None:
        return token.spelling
    if token.value is not None:
        return str(token.value)
    return _SPELLINGS[token.type]


def describe(token: Token) -> str:
    return f"{_LABELS[token.type]}: {token_text(token)}"
