"""Command line entry point.

Usage:
    # Print a variable converted to a kind
    genv get HTTP_TIMEOUT --kind duration --default 30s

    # Exit 0 if the variable is set and valid, 1 if absent, 3 if invalid
    genv check WORKERS --kind uint8

    # List supported kinds
    genv kinds
"""

import argparse
import sys

from pydantic import ValidationError

from genv.config import LOG_LEVELS, GenvSettings
from genv.dispatch import convert, parse
from genv.env import read
from genv.errors import ConversionError, GenvError, VariableAbsentError
from genv.formatting import render
from genv.kinds import EnvKind, resolve_kind
from genv.lookup import get, get_with_default, require
from genv.utils.logging import get_logger, setup_logging

EXIT_OK = 0
EXIT_ABSENT = 1
EXIT_USAGE = 2
EXIT_INVALID = 3


def _kind_arg(value: str) -> EnvKind:
    try:
        return resolve_kind(value)
    except GenvError as e:
        raise argparse.ArgumentTypeError(e.message) from e


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="genv",
        description="Read typed values from environment variables",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override GENV_LOG_LEVEL",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Override GENV_LOG_JSON",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    kind_help = f"Value kind (default: string), one of: {', '.join(k.value for k in EnvKind)}"

    get_parser = subparsers.add_parser("get", help="Print a converted variable")
    get_parser.add_argument("key", help="Environment variable name")
    get_parser.add_argument(
        "--kind", "-k", type=_kind_arg, default=EnvKind.STRING, help=kind_help
    )
    get_parser.add_argument(
        "--default",
        "-d",
        help="Value printed when the variable is absent, written in the kind's text form",
    )

    check_parser = subparsers.add_parser(
        "check", help="Check that a variable is set and converts"
    )
    check_parser.add_argument("key", help="Environment variable name")
    check_parser.add_argument(
        "--kind", "-k", type=_kind_arg, default=EnvKind.STRING, help=kind_help
    )

    subparsers.add_parser("kinds", help="List supported kinds")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        settings = GenvSettings()
    except ValidationError as e:
        problems = "; ".join(
            f"GENV_{str(err['loc'][0]).upper()}: {err['msg']}" for err in e.errors()
        )
        parser.error(f"invalid settings: {problems}")
    setup_logging(settings, level=args.log_level, json_format=args.json_logs)
    logger = get_logger("genv.cli")

    if args.command == "kinds":
        for kind in EnvKind:
            print(kind.value)
        return EXIT_OK

    if args.command not in ("get", "check"):
        parser.print_help()
        return EXIT_USAGE

    kind: EnvKind = args.kind
    raw, present = read(args.key)
    converted = present and convert(raw, kind) is not None
    logger.debug(
        "env_lookup",
        key=args.key,
        kind=kind.value,
        present=present,
        converted=converted,
    )
    if present and not converted:
        logger.warning("env_conversion_failed", key=args.key, kind=kind.value)

    if args.command == "check":
        try:
            require(args.key, kind)
        except VariableAbsentError as e:
            print(e.message, file=sys.stderr)
            return EXIT_ABSENT
        except ConversionError as e:
            print(f"{args.key}: {e.message}", file=sys.stderr)
            return EXIT_INVALID
        return EXIT_OK

    if args.default is None:
        value = get(args.key, kind)
    else:
        try:
            default = parse(args.default, kind)
        except ConversionError as e:
            parser.error(f"--default: {e.message}")
        value = get_with_default(args.key, default, kind)

    print(render(value, kind))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
