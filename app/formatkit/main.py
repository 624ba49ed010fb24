"""
Command-line entry point for the formatting helpers.

Each sub-command maps to one library function and prints its result
on a single line.
"""

import argparse
import logging
from formatkit.config.settings import Settings
from formatkit.core.logger import setup_logger
from formatkit.utils import (
    expand_date_format,
    format_currency,
    left_pad,
    ordinal_suffix,
    pluralize,
    right_pad,
)

logger = logging.getLogger(__name__)


def _instant_arg(value: str):
    # All-digit input is epoch milliseconds, anything else an ISO-8601 string
    return int(value) if value.lstrip("-").isdigit() else value


def _number_arg(value: str):
    try:
        return int(value)
    except ValueError:
        return value


def cmd_date(args) -> str:
    return expand_date_format(_instant_arg(args.instant), args.pattern)


def cmd_currency(args) -> str:
    return format_currency(args.raw)


def cmd_pad(args) -> str:
    pad = right_pad if args.right else left_pad
    return pad(args.value, args.fill, args.length)


def cmd_plural(args) -> str:
    return pluralize(args.word, args.possessive)


def cmd_ordinal(args) -> str:
    return ordinal_suffix(_number_arg(args.number))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="formatkit", description="String and date formatting helpers")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL for this run")
    subparsers = parser.add_subparsers(dest="command")

    # date
    date_parser = subparsers.add_parser("date", help="Format a datetime with a token pattern")
    date_parser.add_argument("instant", help="ISO-8601 datetime or epoch milliseconds")
    date_parser.add_argument("pattern", nargs="?", default=Settings.DEFAULT_DATE_FORMAT,
                             help=f"Token pattern (default: {Settings.DEFAULT_DATE_FORMAT!r})")

    # currency
    currency_parser = subparsers.add_parser("currency", help="Truncate an amount to 2 decimals")
    currency_parser.add_argument("raw", help="Raw amount text")

    # pad
    pad_parser = subparsers.add_parser("pad", help="Pad a value to a fixed length")
    pad_parser.add_argument("value")
    pad_parser.add_argument("--fill", default="0", help="Fill string (default: 0)")
    pad_parser.add_argument("--length", type=int, default=2, help="Target length (default: 2)")
    pad_parser.add_argument("--right", action="store_true", help="Pad on the right")

    # plural
    plural_parser = subparsers.add_parser("plural", help="Pluralize a word")
    plural_parser.add_argument("word")
    plural_parser.add_argument("--possessive", action="store_true", help="Make the word possessive")

    # ordinal
    ordinal_parser = subparsers.add_parser("ordinal", help="Add an ordinal suffix to a number")
    ordinal_parser.add_argument("number")

    return parser


COMMANDS = {
    "date": cmd_date,
    "currency": cmd_currency,
    "pad": cmd_pad,
    "plural": cmd_plural,
    "ordinal": cmd_ordinal,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logger(level=args.log_level)

    if args.command not in COMMANDS:
        parser.print_help()
        return 1

    logger.debug(f"Running command {args.command!r}")
    print(COMMANDS[args.command](args))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
