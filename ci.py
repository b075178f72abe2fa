import sys
from typing import Callable, List, Tuple

import black
from mypy import api as mypy_api
from pylint import run_pylint
import pytest

PACKAGE = "calclang"
SOURCES = [PACKAGE, "tests", "ci.py"]


def exit_code_of(command: Callable[[], None]) -> int:
    try:
        command()
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1
    return 0


def run_black_check() -> int:
    return exit_code_of(lambda: black.main(["--line-length", "120", "--check", *SOURCES]))


def run_mypy_check() -> int:
    report, error_report, exit_code = mypy_api.run(["--config-file", "mypy.ini", PACKAGE])
    if report:
        print("Type checking report:")
        print(report)

    if error_report:
        print("Type error report:")
        print(error_report)

    return exit_code


def run_pylint_check() -> int:
    return exit_code_of(lambda: run_pylint(["--rcfile=.pylintrc", PACKAGE]))


def test() -> None:
    sys.exit(pytest.main(["-x", "tests"]))


def lint() -> None:
    checks: List[Tuple[str, Callable[[], int]]] = [
        ("formatting check", run_black_check),
        ("type check", run_mypy_check),
        ("pylint", run_pylint_check),
    ]

    for name, check in checks:
        print(f"Running {name}")
        exit_code = check()
        if exit_code != 0:
            sys.exit(exit_code)
