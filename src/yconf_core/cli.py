"""``yconf-dump`` — print the parsed contents of a configuration file.

Also runnable as ``python -m yconf_core.cli``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO

from .document import ConfigDocument
from .errors import SourceUnavailableError
from .loader import load_file
from .options import ParseOptions
from .render import render_config


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="yconf-dump",
        description="Parse an indentation-based configuration file and print its entries",
    )
    parser.add_argument("file", help="Configuration file to parse")
    parser.add_argument("--json", action="store_true", help="Print a JSON object instead of tagged lines")
    parser.add_argument("--sort", action="store_true", help="Order entries by path")
    parser.add_argument(
        "--relaxed-integers",
        action="store_true",
        help="Accept digit-only scalars (e.g. 'year: 1986') as integers",
    )
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser.parse_args(argv)


def _print_document(doc: ConfigDocument, as_json: bool, dest: IO[str]) -> None:
    if as_json:
        print(json.dumps(doc.to_plain(), indent=2, ensure_ascii=False), file=dest)
        return
    for line in render_config(doc.config):
        print(line, file=dest)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.debug)

    options = ParseOptions(relaxed_integers=args.relaxed_integers, sort_keys=args.sort)
    try:
        doc = load_file(args.file, options)
    except SourceUnavailableError as exc:
        print(f"Error: {exc.diagnostic}", file=sys.stderr)
        return 1

    _print_document(doc, args.json, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
