"""
Utility functions for console diagnostics.

Everything here writes to stderr so that stdout only carries verses and
book listings.
"""

import sys

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Turn [info] output on or off."""
    global _verbose
    _verbose = enabled


def info(msg: str) -> None:
    """Print an info message (verbose mode only)."""
    if _verbose:
        print(f"[info] {msg}", file=sys.stderr)


def error(msg: str) -> None:
    """Print an error message."""
    print(f"[error] {msg}", file=sys.stderr)
