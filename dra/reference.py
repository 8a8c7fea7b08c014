"""
Reference parsing for dra-cli.

Turns a query such as "Gn 1:1-5" into a Range:

    Gn 1            whole chapter
    Gn 1:1          single verse
    Gn 1:1-5        verse range in one chapter
    Gn 1:31-2:3     verse range across chapters
"""

from __future__ import annotations

import re

from .errors import ParseError, NOT_A_NUMBER
from .model import Range, WHOLE_CHAPTER_END

QUERY_RE = re.compile(
    r"^(?P<book>\w+)"
    r"( (?P<start_chapter>\d+)"
    r"(:(?P<start_verse>\d+)"
    r"(-((?P<end_chapter>\d+):)?(?P<end_verse>\d+))?)?)?$"
)

# Chapter and verse numbers are stored as 32-bit integers.
MAX_NUMBER = 2**31 - 1


def _to_int(value: str, field: str) -> int:
    # \d also matches non-ASCII digits (e.g. fullwidth or Arabic-Indic).
    if not value.isascii():
        raise ParseError(f"{field} is not a number: {value!r}", kind=NOT_A_NUMBER)
    try:
        number = int(value.strip())
    except ValueError as e:
        raise ParseError(f"{field} is not a number: {value!r}", kind=NOT_A_NUMBER) from e
    if number > MAX_NUMBER:
        raise ParseError(f"{field} out of range: {value}", kind=NOT_A_NUMBER)
    return number


def parse_query(query: str) -> Range:
    """
    Parse a reference string into a Range.

    Raises
    ------
    ParseError
        kind INVALID_FORMAT if the string does not follow the grammar or
        names no chapter, NOT_A_NUMBER if a chapter/verse can't be read as
        an integer.
    """
    match = QUERY_RE.fullmatch(query)
    if match is None:
        raise ParseError(f"Invalid query string: {query!r}")

    book = match.group("book")
    if match.group("start_chapter") is None:
        raise ParseError(f"Query string does not contain chapter: {query!r}")

    start_chapter = _to_int(match.group("start_chapter"), "start_chapter")

    end_chapter = start_chapter
    if match.group("end_chapter") is not None:
        end_chapter = _to_int(match.group("end_chapter"), "end_chapter")

    if match.group("start_verse") is None:
        start_verse = 1
        end_verse = WHOLE_CHAPTER_END
    else:
        start_verse = _to_int(match.group("start_verse"), "start_verse")
        end_verse = start_verse
        if match.group("end_verse") is not None:
            end_verse = _to_int(match.group("end_verse"), "end_verse")

    return Range(
        book=book,
        start_chapter=start_chapter,
        end_chapter=end_chapter,
        start_verse=start_verse,
        end_verse=end_verse,
    )
