"""
Application metadata and configuration knobs for dra-cli.
"""

APP_NAME = "Douay-Rheims American Bible"
PROG_NAME = "dra-cli"
__version__ = "0.1.0"

# Environment variable that overrides the default store location.
DB_ENV_VAR = "DRA_DB"
