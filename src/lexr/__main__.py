"""Command-line entry point: dump the token stream of a source file.

    python -m lexr program.txt
    echo "let y = 2 * x" | python -m lexr --json
    python -m lexr            # scans the built-in demo on a terminal
"""

from __future__ import annotations

import argparse
import logging
import sys

from lexr import __version__, tokenize
from lexr.config import ScanConfig, scan_config_context
from lexr.errors import IllegalCharacterError
from lexr.serialization import to_json

DEMO_SOURCE = "let x = 42 + (15 - 3)"

lexr_cli = argparse.ArgumentParser(
    description="lexr: print the tokens of a source file",
    prog="lexr",
)

lexr_cli.add_argument(
    "input",
    nargs="?",
    help="source file to scan, or - for stdin [default: stdin, or the demo on a terminal]",
)

lexr_cli.add_argument(
    "--json",
    help="print the token stream as JSON (always includes EOF)",
    action="store_true",
)

lexr_cli.add_argument(
    "--strict",
    help="stop with an error at the first illegal character",
    action="store_true",
)

lexr_cli.add_argument(
    "--include-eof",
    help="also print the final EOF token",
    action="store_true",
)

lexr_cli.add_argument(
    "--encoding",
    help="encoding of the source bytes [default: latin-1, one character per byte]",
    default="latin-1",
)

lexr_cli.add_argument(
    "-v", "--verbose",
    help="log scanner diagnostics to stderr",
    action="store_true",
)

lexr_cli.add_argument("--version", action="version", version=f"%(prog)s {__version__}")


def read_source(path: str | None, encoding: str) -> str:
    if path is None or path == "-":
        if path is None and sys.stdin.isatty():
            return DEMO_SOURCE
        data = sys.stdin.buffer.read()
    else:
        with open(path, "rb") as f:
            data = f.read()
    return data.decode(encoding)


def main(argv: list[str] | None = None) -> int:
    args = lexr_cli.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        source = read_source(args.input, args.encoding)
    except (OSError, LookupError, UnicodeDecodeError) as err:
        lexr_cli.error(str(err))

    filename = args.input if args.input not in (None, "-") else "<stdin>"
    try:
        with scan_config_context(ScanConfig(strict=args.strict, log_illegal=args.verbose)):
            tokens = tokenize(source, source_file=filename)
    except IllegalCharacterError as err:
        print(err, file=sys.stderr)
        return 1

    if args.json:
        print(to_json(tokens, indent=2))
        return 0

    for token in tokens:
        if token.is_eof and not args.include_eof:
            break
        print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
