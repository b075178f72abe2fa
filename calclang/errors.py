from typing import List


class CalcLangError(Exception):
    message: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CalcLangValueError(CalcLangError, ValueError):
    pass


class CalcLangRuntimeError(CalcLangError, RuntimeError):
    pass


class InvalidScannerSettings(CalcLangValueError):
    def __init__(self, errors: List[str]) -> None:
        super().__init__(f"Invalid scanner settings - {', '.join(errors)}")


class InvalidTokenValue(CalcLangValueError):
    def __init__(self, token_type: str, value: object) -> None:
        super().__init__(f"Invalid value for {token_type} token: {value!r}")


class LiteralTooLargeError(CalcLangValueError):
    literal: str
    limit: int

    def __init__(self, literal: str, limit: int) -> None:
        super().__init__(f"Integer literal '{literal}' is too large, maximum value is {limit}")
        self.literal = literal
        self.limit = limit


class ScannerStateError(CalcLangRuntimeError):
    def __init__(self) -> None:
        super().__init__("Scanner has already been used, create a new scanner to scan again")
