"""cellwidth CLI - measure and lay out text, regenerate width tables."""

import argparse
import logging
import sys
from pathlib import Path

import httpx

from ..condition import Condition
from ..table import AMBIGUOUS_TABLE, DEFAULT_TABLE, UNICODE_VERSION, TableError, validate_table

TABLE_MODULE = Path(__file__).resolve().parent.parent / "_table.py"


def _condition(args) -> Condition:
    condition = Condition.from_env()
    if args.east_asian is not None:
        condition = condition.replace(east_asian_width=args.east_asian)
    if args.no_zwj:
        condition = condition.replace(zero_width_joiner=False)
    return condition


def cmd_width(args):
    """Print the display width of TEXT."""
    print(_condition(args).string_width(args.text))


def cmd_truncate(args):
    """Truncate TEXT to WIDTH cells."""
    print(_condition(args).truncate(args.text, args.width, args.tail))


def cmd_wrap(args):
    """Wrap TEXT at WIDTH cells."""
    print(_condition(args).wrap(args.text, args.width))


def cmd_fill(args):
    """Pad TEXT to WIDTH cells."""
    condition = _condition(args)
    if args.left:
        print(condition.fill_left(args.text, args.width))
    else:
        print(condition.fill_right(args.text, args.width))


def cmd_generate(args):
    """Regenerate the width tables from unicode.org."""
    from ..ucd import generate, write_module

    try:
        tables = generate(args.version)
    except httpx.HTTPError as e:
        print(f"Download failed: {e}", file=sys.stderr)
        sys.exit(1)

    output = Path(args.output) if args.output else TABLE_MODULE
    write_module(tables, output)
    print(
        f"Unicode {tables.version}: {len(tables.default)} default, "
        f"{len(tables.ambiguous)} ambiguous intervals -> {output}"
    )


def cmd_check(args):
    """Validate the bundled width tables."""
    try:
        for table in (DEFAULT_TABLE, AMBIGUOUS_TABLE):
            validate_table(table, table.name)
            print(f"{table.name}: {len(table)} intervals OK")
    except TableError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    print(f"Unicode {UNICODE_VERSION}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="cellwidth",
        description="cellwidth: terminal display width of Unicode text",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument(
        "--east-asian",
        dest="east_asian",
        action="store_true",
        default=None,
        help="Treat ambiguous characters as double width",
    )
    parser.add_argument(
        "--no-east-asian",
        dest="east_asian",
        action="store_false",
        default=None,
        help="Treat ambiguous characters as single width",
    )
    parser.add_argument(
        "--no-zwj", action="store_true", help="Measure codepoints instead of grapheme clusters"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # width
    p_width = subparsers.add_parser("width", help="Print display width")
    p_width.add_argument("text", help="Text to measure")
    p_width.set_defaults(func=cmd_width)

    # truncate
    p_truncate = subparsers.add_parser("truncate", help="Truncate to a width")
    p_truncate.add_argument("text", help="Text to truncate")
    p_truncate.add_argument("width", type=int, help="Maximum width")
    p_truncate.add_argument("--tail", "-t", default="...", help="Appended when cut")
    p_truncate.set_defaults(func=cmd_truncate)

    # wrap
    p_wrap = subparsers.add_parser("wrap", help="Wrap at a width")
    p_wrap.add_argument("text", help="Text to wrap")
    p_wrap.add_argument("width", type=int, help="Line width")
    p_wrap.set_defaults(func=cmd_wrap)

    # fill
    p_fill = subparsers.add_parser("fill", help="Pad with spaces to a width")
    p_fill.add_argument("text", help="Text to pad")
    p_fill.add_argument("width", type=int, help="Target width")
    p_fill.add_argument("--left", "-l", action="store_true", help="Pad on the left")
    p_fill.set_defaults(func=cmd_fill)

    # generate
    p_generate = subparsers.add_parser("generate", help="Regenerate width tables")
    p_generate.add_argument("--version", default="latest", help="Unicode version, e.g. 15.1.0")
    p_generate.add_argument("--output", "-o", help="Output path (default: bundled module)")
    p_generate.set_defaults(func=cmd_generate)

    # check
    p_check = subparsers.add_parser("check", help="Validate bundled tables")
    p_check.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    args.func(args)


if __name__ == "__main__":
    main()
