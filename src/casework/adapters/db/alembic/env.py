"""Alembic environment for casework.

casework builds its Alembic `Config` in code
(`casework.config.build_alembic_config`), so there is no ini file and logging
stays with the caller. The URL is taken from ``-x url=...``, then the config's
``sqlalchemy.url``, then ``CASEWORK_DB_URL``.

Autogenerate compares column types and server defaults. SQLite runs in batch
mode so that ALTERs are emulated by copying tables.
"""

from alembic import context
from sqlalchemy import create_engine, pool

# registers the tables on the metadata
import casework.adapters.db.schema  # noqa: F401 # pylint: disable=unused-import
from casework.adapters.db.metadata import metadata
from casework.config import get_db_url

# pylint: disable=no-member

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def _url() -> str:
    return (
        context.get_x_argument(as_dictionary=True).get("url")
        or context.config.get_main_option("sqlalchemy.url")
        or get_db_url()
    )


def run_offline() -> None:
    """Write the migration SQL to the script output instead of running it."""
    context.configure(
        url=_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    """Run the migrations over a live connection."""
    engine = create_engine(_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
