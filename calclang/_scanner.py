import logging
import string
from enum import Enum
from typing import List, Optional, Tuple

from calclang._settings import OverflowPolicy, ScannerSettings, get_validated_settings
from calclang._token import SINGLE_CHARACTER_TOKENS, WHITESPACE, Token
from calclang.errors import LiteralTooLargeError, ScannerStateError

logger = logging.getLogger(__name__)

END_OF_INPUT = ""

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_lowercase)
UPPERCASE_LETTERS = frozenset(string.ascii_uppercase)


class ScanState(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class Scanner:
    """
    Single pass scanner for CalcLang. Every character of the input is consumed exactly once,
    lookahead never consumes, so a failed keyword match leaves the peeked letters to be scanned
    on their own.

    The scanner is one-shot: `scan` fills the token list and a second call raises ScannerStateError.
    """

    input: str
    settings: ScannerSettings

    def __init__(self, input_string: str, settings: Optional[ScannerSettings] = None) -> None:
        self.input = input_string
        self.settings = get_validated_settings(settings)
        self.__state = ScanState.NOT_STARTED
        self.__index = 0
        self.__output: List[Token] = []

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return tuple(self.__output)

    @property
    def state(self) -> ScanState:
        return self.__state

    def scan(self) -> None:
        if self.__state != ScanState.NOT_STARTED:
            raise ScannerStateError()

        self.__state = ScanState.IN_PROGRESS
        logger.debug("Scanning %d characters", len(self.input))

        while self.__index < len(self.input):
            character = self.__next()

            if character in SINGLE_CHARACTER_TOKENS:
                self.__emit(Token(SINGLE_CHARACTER_TOKENS[character]))
            elif character in WHITESPACE:
                continue
            elif character in DIGITS:
                self.__scan_integer(character)
            elif character in LETTERS:
                self.__scan_word(character)
            else:
                self.__emit(Token.unknown(character))

        self.__state = ScanState.DONE
        logger.debug("Scan finished with %d tokens", len(self.__output))

    def __scan_integer(self, character: str) -> None:
        limit = self.settings.max_integer
        digits: List[str] = []
        value = 0
        overflow = False

        while True:
            digits.append(character)
            digit = ord(character) - ord("0")
            if not overflow and value > (limit - digit) // 10:
                overflow = True
            if not overflow:
                value = value * 10 + digit

            if self.__peek() not in DIGITS:
                break
            character = self.__next()

        if not overflow:
            self.__emit(Token.integer(value))
            return

        literal = "".join(digits)
        logger.warning("Integer literal %s exceeds %d", literal, limit)
        if self.settings.overflow_policy == OverflowPolicy.RAISE:
            raise LiteralTooLargeError(literal, limit)
        if self.settings.overflow_policy == OverflowPolicy.CLAMP:
            self.__emit(Token.integer(limit))
        else:
            self.__emit(Token.literal_too_large(literal))

    def __scan_word(self, character: str) -> None:
        word = character
        while len(word) < self.settings.max_keyword_length:
            look = self.__peek(len(word) - 1)
            if look not in LETTERS:
                break
            word += look

        # longest keyword first, a single letter is never a keyword
        for length in range(len(word), 1, -1):
            token_type = self.settings.keywords.get(word[:length])
            if token_type is not None:
                self.__index += length - 1
                self.__emit(Token.keyword(token_type, word[:length]))
                return

        self.__emit(Token.variable(character))

    def __emit(self, token: Token) -> None:
        self.__output.append(token)

    def __peek(self, offset: int = 0) -> str:
        position = self.__index + offset
        if position >= len(self.input):
            return END_OF_INPUT
        return self.__fold(self.input[position])

    def __next(self) -> str:
        character = self.__fold(self.input[self.__index])
        self.__index += 1
        return character

    def __fold(self, character: str) -> str:
        if not self.settings.case_sensitive and character in UPPERCASE_LETTERS:
            return character.lower()
        return character


def tokenize(input_string: str, settings: Optional[ScannerSettings] = None) -> List[Token]:
    scanner = Scanner(input_string, settings)
    scanner.scan()
    return list(scanner.tokens)
