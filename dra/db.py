"""
Database connection management for dra-cli.

The verse store is an external SQLite file; it is only ever read here.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional, Union

from .errors import StoreError
from .paths import resolve_db_path
from .util import info


@contextmanager
def get_conn(
    db_path: Optional[Union[str, Path]] = None,
) -> Generator[sqlite3.Connection, None, None]:
    """
    Context manager for read-only store connections.

    Args:
        db_path: Store file; see paths.resolve_db_path for the default

    Yields:
        sqlite3.Connection with row_factory set to Row

    Raises:
        StoreError if the store is missing, cannot be opened, or a query
        inside the block fails. The connection is closed on every exit path.
    """
    path = resolve_db_path(db_path)
    uri = f"{path.resolve().as_uri()}?mode=ro"
    info(f"Opening store: {path}")
    try:
        conn = sqlite3.connect(uri, uri=True)
    except sqlite3.Error as e:
        raise StoreError(f"Cannot open store {path}: {e}") from e
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    except sqlite3.Error as e:
        raise StoreError(f"Store query failed: {e}") from e
    finally:
        conn.close()
