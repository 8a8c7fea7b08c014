"""
Range resolution for dra-cli.

Public API:

- validate_range(rng)
    Raise ResolveError if the range ends before it starts

- get_verses(rng, db_path=None) -> List[VerseRow]
    Fetch every verse in the inclusive range

- print_verses(rows)
    Print rows as '<chapter>:<verse> <text>'
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from .db import get_conn
from .errors import ResolveError
from .model import Range, VerseRow
from .util import info

# Width of the chapter:verse column in printed output.
LABEL_WIDTH = 7

# Rows are selected by rowid, which follows canonical book/chapter/verse
# order in the store. The first and last matching rowids bound the slice.
RANGE_SQL = """
    SELECT book,
           chapter,
           startVerse,
           verseText
    FROM engDRA_vpl
    WHERE rowid BETWEEN
        (SELECT MIN(rowid)
         FROM engDRA_vpl
         WHERE book = :book
           AND chapter >= :start_chapter
           AND startVerse >= :start_verse)
      AND
        (SELECT MAX(rowid)
         FROM engDRA_vpl
         WHERE book = :book
           AND chapter <= :end_chapter
           AND startVerse <= :end_verse)
    ORDER BY rowid;
"""


def validate_range(rng: Range) -> None:
    """
    Check that the range does not end before it starts.
    """
    if rng.end_chapter < rng.start_chapter:
        raise ResolveError("Query range invalid: end_chapter precedes start_chapter")
    if rng.end_chapter == rng.start_chapter and rng.end_verse < rng.start_verse:
        raise ResolveError("Query range invalid: end_verse precedes start_verse")


def get_verses(
    rng: Range,
    db_path: Optional[Union[str, Path]] = None,
) -> List[VerseRow]:
    """
    Fetch the verses covered by a range, in store order.

    Parameters
    ----------
    rng:
        Parsed range, e.g. from reference.parse_query("Gn 1:1-5").
    db_path:
        Optional store path override.

    Returns
    -------
    List[VerseRow]
        Empty if nothing in the store falls inside the range (for example
        an unknown book code).

    Raises
    ------
    ResolveError
        If the range is out of order. The store is not opened.
    StoreError
        If the store cannot be opened or queried.
    """
    validate_range(rng)

    if rng.is_single_verse:
        info(f"=== VERSE === book={rng.book!r}, {rng.start_chapter}:{rng.start_verse}")
    else:
        info(
            f"=== RANGE === book={rng.book!r}, "
            f"{rng.start_chapter}:{rng.start_verse}-{rng.end_chapter}:{rng.end_verse}"
        )

    with get_conn(db_path) as conn:
        cur = conn.execute(
            RANGE_SQL,
            {
                "book": rng.book,
                "start_chapter": rng.start_chapter,
                "end_chapter": rng.end_chapter,
                "start_verse": rng.start_verse,
                "end_verse": rng.end_verse,
            },
        )
        rows = cur.fetchall()

    info(f"Range query returned {len(rows)} row(s).")
    return [VerseRow.from_db_row(r) for r in rows]


def format_verse(row: VerseRow) -> str:
    return f"{row.label:<{LABEL_WIDTH}} {row.text}"


def print_verses(rows: List[VerseRow]) -> None:
    """
    Print verses one per line. Nothing is printed for an empty result.
    """
    for row in rows:
        print(format_verse(row))
