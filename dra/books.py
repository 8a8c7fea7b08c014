"""
Book listing for dra-cli.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from .db import get_conn
from .model import Book
from .util import info


def list_books(db_path: Optional[Union[str, Path]] = None) -> List[Book]:
    """
    Return every row of the `books` table in the store's own order.

    Raises StoreError if the store is unavailable.
    """
    with get_conn(db_path) as conn:
        cur = conn.execute("SELECT code, long FROM books;")
        rows = cur.fetchall()

    info(f"Store lists {len(rows)} book(s).")
    return [Book.from_db_row(r) for r in rows]


def print_books(books: List[Book]) -> None:
    print("The following books are available:")
    for book in books:
        print(f"\t{book.code}\t{book.long_name}")
