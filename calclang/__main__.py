import argparse
import logging
import sys
from typing import List, Optional

from calclang._describe import describe
from calclang._scanner import Scanner
from calclang._settings import OverflowPolicy, ScannerSettings
from calclang.errors import CalcLangError

DEFAULT_PROGRAM = "+ - 34 ; quit a 3 3 - - 1 * ^ 7"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="calclang", description="Scan a CalcLang program and print its tokens")
    parser.add_argument("program", nargs="?", default=DEFAULT_PROGRAM, help="program text to scan")
    parser.add_argument("--ignore-case", action="store_true", help="treat upper-case letters as lower-case")
    parser.add_argument(
        "--overflow",
        choices=[policy.value for policy in OverflowPolicy],
        default=OverflowPolicy.TOKEN.value,
        help="what to do with integer literals that do not fit the configured integer width",
    )
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    settings = ScannerSettings(case_sensitive=not args.ignore_case, overflow_policy=OverflowPolicy(args.overflow))
    scanner = Scanner(args.program, settings)
    try:
        scanner.scan()
    except CalcLangError as exc:
        print(exc.message, file=sys.stderr)
        return 1

    for token in scanner.tokens:
        print(describe(token))
    return 0


if __name__ == "__main__":
    sys.exit(main())
