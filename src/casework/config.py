"""Runtime configuration.

casework reads one setting from the environment, ``CASEWORK_DB_URL``, the
SQLAlchemy URL of the database. Migrations ship inside the package, so the
Alembic configuration is assembled here rather than read from an ini file.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV_VAR = "CASEWORK_DB_URL"  # pragma: no mutate
MIGRATIONS_PACKAGE = "casework.adapters.db.alembic"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """``CASEWORK_DB_URL`` is unset or empty."""


def get_db_url() -> str:
    url = os.environ.get(DB_URL_ENV_VAR, "")
    if not url:
        raise DatabaseUrlNotSetError
    return url


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Return an Alembic `Config` for the packaged migrations.

    Args:
        db_url: Database to migrate. Leave it out for commands that only read
            the revision scripts (``heads``, ``history``).
        stdout: Where Alembic prints its status lines.
    """
    cfg = Config(stdout=stdout)
    cfg.set_main_option("script_location", str(files(MIGRATIONS_PACKAGE)))
    if db_url is not None:
        cfg.set_main_option("sqlalchemy.url", db_url)
    return cfg
