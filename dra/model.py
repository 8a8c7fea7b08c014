"""
Data model definitions for dra-cli.

- Range   : a parsed chapter/verse span within one book
- VerseRow: a verse row as it comes back from the store
- Book    : a row of the books table
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

# end_verse used when a query names a chapter but no verse. No chapter in
# the Douay-Rheims store has more verses than this.
WHOLE_CHAPTER_END = 200


@dataclass(frozen=True)
class Range:
    """
    An inclusive verse range inside one book.

    Ordering (end not before start) is checked by the resolver, not here.
    """
    book: str
    start_chapter: int
    end_chapter: int
    start_verse: int
    end_verse: int

    @property
    def is_single_verse(self) -> bool:
        return (
            self.start_chapter == self.end_chapter
            and self.start_verse == self.end_verse
        )


@dataclass(frozen=True)
class VerseRow:
    """
    Representation of a row of the `engDRA_vpl` table.
    """
    book: str
    chapter: int
    verse: int
    text: str

    @property
    def label(self) -> str:
        """Chapter:verse label, e.g. '1:1'."""
        return f"{self.chapter}:{self.verse}"

    @classmethod
    def from_db_row(cls, row: sqlite3.Row) -> "VerseRow":
        return cls(
            book=row["book"],
            chapter=row["chapter"],
            verse=row["startVerse"],
            text=row["verseText"],
        )


@dataclass(frozen=True)
class Book:
    code: str
    long_name: str

    @classmethod
    def from_db_row(cls, row: sqlite3.Row) -> "Book":
        return cls(code=row["code"], long_name=row["long"])
