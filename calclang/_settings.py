from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from calclang._token import KEYWORDS, VALUELESS_TOKEN_TYPES, TokenType
from calclang.errors import InvalidScannerSettings


class OverflowPolicy(str, Enum):
    TOKEN = "token"
    CLAMP = "clamp"
    RAISE = "raise"


@dataclass
class ScannerSettings:
    integer_bits: int = 64
    overflow_policy: OverflowPolicy = OverflowPolicy.TOKEN
    case_sensitive: bool = True
    keywords: Dict[str, TokenType] = field(default_factory=lambda: dict(KEYWORDS))

    @property
    def max_integer(self) -> int:
        return 2 ** (self.integer_bits - 1) - 1

    @property
    def max_keyword_length(self) -> int:
        return max((len(keyword) for keyword in self.keywords), default=0)

    def validate(self) -> List[str]:
        errors: List[str] = []
        if isinstance(self.integer_bits, bool) or not isinstance(self.integer_bits, int) or self.integer_bits < 2:
            errors.append(f"integer_bits has to be an integer greater than 1, got {self.integer_bits!r}")
        if not isinstance(self.overflow_policy, OverflowPolicy):
            errors.append(f"unsupported overflow policy {self.overflow_policy!r}")
        for keyword, token_type in self.keywords.items():
            if len(keyword) < 2 or not keyword.isascii() or not keyword.isalpha() or not keyword.islower():
                errors.append(f"keyword {keyword!r} has to be a lowercase word of at least two letters")
            if token_type not in VALUELESS_TOKEN_TYPES:
                errors.append(f"keyword {keyword!r} maps to an invalid token type {token_type!r}")
        return errors


def get_validated_settings(settings: Optional[ScannerSettings]) -> ScannerSettings:
    if settings is None:
        return ScannerSettings()

    errors = settings.validate()
    if errors:
        raise InvalidScannerSettings(errors)
    return settings
