from __future__ import annotations

import argparse
import logging
import sys

from .codec.dates import from_excel_serial
from .codec.numfmt import FIRST_CUSTOM_FORMAT, render_rk
from .codec.patterns import format_timestamp
from .codec.rk import RK
from .errors import XlsCellError
from .model import BookContext, EpochMode, RenderOptions, XFRecord


def _int_literal(value: str) -> int:
    try:
        return int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="xlscell", description="Decode and render .xls cell values")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log rendering decisions")
    sub = parser.add_subparsers(dest="command", required=True)

    rk_cmd = sub.add_parser("rk", help="Decode a packed RK word (decimal or 0x hex)")
    rk_cmd.add_argument("word", type=_int_literal)
    rk_cmd.add_argument("--format-code", type=int, default=None, help="Format code of the cell style")
    rk_cmd.add_argument("--pattern", default=None, help="Custom format pattern for the format code")
    rk_cmd.add_argument("--1904", dest="date1904", action="store_true", help="Use the 1904 date system")
    rk_cmd.add_argument("--strict-styles", action="store_true", help="Fail on a missing style")

    date_cmd = sub.add_parser("date", help="Convert a serial day number to a date")
    date_cmd.add_argument("serial", type=float)
    date_cmd.add_argument("--pattern", default=None, help="Format pattern, e.g. yyyy-mm-dd")
    date_cmd.add_argument("--1904", dest="date1904", action="store_true", help="Use the 1904 date system")

    encode_cmd = sub.add_parser("encode", help="Encode an integer as an RK word")
    encode_cmd.add_argument("value", type=_int_literal)
    encode_cmd.add_argument("--multiplied", action="store_true", help="Set the divide-by-100 flag")
    return parser


def _book_for(args: argparse.Namespace) -> BookContext:
    format_no = args.format_code
    if format_no is None and args.pattern is not None:
        format_no = FIRST_CUSTOM_FORMAT
    styles = (XFRecord(format_no),) if format_no is not None else ()
    custom = {format_no: args.pattern} if args.pattern is not None else {}
    return BookContext(
        styles=styles,
        custom_formats=custom,
        epoch=EpochMode.EPOCH_1904 if args.date1904 else EpochMode.EPOCH_1900,
        options=RenderOptions(strict_styles=args.strict_styles),
    )


def run(args: argparse.Namespace) -> str:
    if args.command == "rk":
        return render_rk(_book_for(args), 0, RK(args.word))
    if args.command == "date":
        ts = from_excel_serial(args.serial, args.date1904)
        return ts.isoformat() if args.pattern is None else format_timestamp(ts, args.pattern)
    rk = RK.from_int(args.value, multiplied=args.multiplied)
    return f"0x{rk.word:08X}"


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        output = run(args)
    except (ValueError, XlsCellError) as exc:
        print(f"xlscell: error: {exc}", file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
