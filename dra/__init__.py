"""
dra - Douay-Rheims American Bible lookup package

This package contains the core functionality of dra-cli:
- config: Application name, version and environment settings
- paths: Store path resolution
- util: Console diagnostics
- reference: Query string parsing
- search: Range validation and verse lookup
- books: Book listing
"""

from . import config
from .paths import PROJECT_ROOT, DB_PATH, resolve_db_path
from .util import info, error, set_verbose
from .errors import DraError, ParseError, ResolveError, StoreError
from .model import Range, VerseRow, Book, WHOLE_CHAPTER_END
from .reference import parse_query
from .search import validate_range, get_verses, print_verses
from .books import list_books, print_books

__version__ = config.__version__
__all__ = [
    "config",
    "PROJECT_ROOT",
    "DB_PATH",
    "resolve_db_path",
    "info",
    "error",
    "set_verbose",
    "DraError",
    "ParseError",
    "ResolveError",
    "StoreError",
    "Range",
    "VerseRow",
    "Book",
    "WHOLE_CHAPTER_END",
    "parse_query",
    "validate_range",
    "get_verses",
    "print_verses",
    "list_books",
    "print_books",
]
