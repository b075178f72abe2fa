from typing import Any, Dict

import pytest

from calclang._settings import OverflowPolicy, ScannerSettings, get_validated_settings
from calclang._token import KEYWORDS, TokenType
from calclang.errors import InvalidScannerSettings


def test_settings_defaults() -> None:
    """It should default to 64 bit integers, overflow tokens and case sensitive scanning"""
    settings = get_validated_settings(None)

    assert settings.integer_bits == 64
    assert settings.max_integer == 9223372036854775807
    assert settings.overflow_policy == OverflowPolicy.TOKEN
    assert settings.case_sensitive
    assert settings.keywords == KEYWORDS
    assert settings.max_keyword_length == 4


def test_settings_keywords_are_copied() -> None:
    """It should not share the default keyword table between settings"""
    settings = ScannerSettings()
    settings.keywords["exit"] = TokenType.QUIT

    assert "exit" not in KEYWORDS
    assert "exit" not in ScannerSettings().keywords


def test_settings_without_keywords() -> None:
    """It should allow an empty keyword table"""
    assert ScannerSettings(keywords={}).max_keyword_length == 0


@pytest.mark.parametrize(
    "params",
    [
        {"integer_bits": 1},
        {"integer_bits": 0},
        {"integer_bits": True},
        {"integer_bits": 64.0},
        {"overflow_policy": "wrap"},
        {"keywords": {"q": TokenType.QUIT}},
        {"keywords": {"Quit": TokenType.QUIT}},
        {"keywords": {"qu1t": TokenType.QUIT}},
        {"keywords": {"quit": "QUITTING"}},
        {"keywords": {"xx": TokenType.INTEGER}},
        {"keywords": {"xx": TokenType.VARIABLE}},
        {"keywords": {"xx": TokenType.UNKNOWN}},
        {"keywords": {"xx": TokenType.LITERAL_TOO_LARGE}},
    ],
)
def test_settings_invalid(params: Dict[str, Any]) -> None:
    """It should reject invalid settings"""
    settings = ScannerSettings(**params)

    assert len(settings.validate()) == 1
    with pytest.raises(InvalidScannerSettings):
        get_validated_settings(settings)


def test_settings_invalid_message() -> None:
    """It should list every problem in the error message"""
    settings = ScannerSettings(integer_bits=1, keywords={"q": TokenType.QUIT})

    with pytest.raises(InvalidScannerSettings) as exc_info:
        get_validated_settings(settings)

    assert exc_info.value.message.startswith("Invalid scanner settings - integer_bits")
    assert "keyword 'q'" in exc_info.value.message


def test_settings_keywords_valueless_types() -> None:
    """It should accept keywords mapped to operators, punctuation and quit"""
    settings = ScannerSettings(
        keywords={
            "plus": TokenType.ADDITION,
            "is": TokenType.ASSIGNMENT,
            "end": TokenType.TERMINATOR,
            "quit": TokenType.QUIT,
        }
    )

    assert settings.validate() == []
