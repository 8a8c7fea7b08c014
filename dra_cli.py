#!/usr/bin/env python
"""
dra_cli.py - command-line interface for the Douay-Rheims American Bible

Usage:

  dra-cli -b
      List the available books

  dra-cli Gn 1:1-5
      Print the verses of a reference; query tokens are joined with spaces

  dra-cli --db path/to/dra.db Mt 5
      Use a different store (default: $DRA_DB, then dra.db at project root)

  dra-cli Gn 1:1 -v
      Options may come before, between or after the query tokens
"""

import argparse
import sys
from typing import List, Optional

from dra import config
from dra.util import info, error, set_verbose
from dra.errors import DraError
from dra.reference import parse_query
from dra.search import get_verses, print_verses
from dra.books import list_books, print_books


QUERY_HELP = (
    "Query string:\n"
    "\t<book code> <chapter>\n"
    "\t<book code> <chapter>:<verse>\n"
    "\t<book code> <chapter>:<start_verse>-<end_verse>\n"
    "\t<book code> <chapter>:<start_verse>-<end_chapter>:<end_verse>"
)


# ---------- Command handlers ----------


def cmd_books(args: argparse.Namespace) -> int:
    """
    Print every book code and its long name.
    """
    books = list_books(args.db)
    print_books(books)
    return 0


def cmd_query(args: argparse.Namespace) -> int:
    """
    Parse the joined query tokens and print the matching verses.
    """
    query = " ".join(args.query)
    info(f"=== QUERY === {query!r}")
    rng = parse_query(query)
    rows = get_verses(rng, args.db)
    print_verses(rows)
    return 0


# ---------- Parser setup ----------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=config.PROG_NAME,
        description=f"Command-line interface for {config.APP_NAME}",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-b",
        "--books",
        action="store_true",
        help="Lists the available books",
    )
    parser.add_argument(
        "query",
        metavar="QUERY",
        nargs="*",
        help=QUERY_HELP,
    )
    parser.add_argument(
        "--db",
        type=str,
        default=None,
        help=f"Path to SQLite store (default: ${config.DB_ENV_VAR}, then dra.db at project root)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print [info] diagnostics on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {config.__version__}",
    )
    return parser


# ---------- Main ----------


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    # Options may appear anywhere among the query tokens, e.g. "Gn -v 1:1".
    args = parser.parse_intermixed_args(argv)
    set_verbose(args.verbose)

    if args.books and args.query:
        parser.error("argument QUERY: not allowed with argument -b/--books")
    if not args.books and not args.query:
        parser.print_help(sys.stderr)
        return 2

    try:
        if args.books:
            return cmd_books(args)
        return cmd_query(args)
    except DraError as e:
        error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
