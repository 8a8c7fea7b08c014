"""
Path configuration for dra-cli.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from . import config

# Project root is one level up from dra/
PROJECT_ROOT = Path(__file__).parent.parent
DB_PATH = PROJECT_ROOT / "dra.db"


def resolve_db_path(db_path: Optional[Union[str, Path]] = None) -> Path:
    """
    Work out which store file to open.

    Precedence: explicit argument (the --db option), then the DRA_DB
    environment variable, then dra.db at the project root.
    """
    if db_path:
        return Path(db_path)
    env_path = os.environ.get(config.DB_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DB_PATH
