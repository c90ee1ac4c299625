"""``casework db``: schema migrations for the casework database.

Wraps the Alembic commands a deployment needs and none that go backwards
(there is no ``downgrade`` or ``stamp``). Alembic's own output goes to stdout;
prompts, warnings and status glyphs go to stderr.

``heads`` and a plain ``history`` only read the packaged revision scripts and
work without ``CASEWORK_DB_URL``. Every other command needs it, and the
database must answer a ``SELECT 1`` before Alembic is invoked.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import func, select, text
from sqlalchemy.exc import ArgumentError, OperationalError

from casework import config
from casework.adapters.db.engine import make_engine
from casework.adapters.db.schema import cases, tasks

from .helpers import error, sanitize_url, success, warn
from .helpers.app import CANNOT_CONNECT_MSG, INVALID_URL_FORMAT_MSG, MISSING_DB_URL_MSG

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Connection

UPGRADE_SCHEMA_WARNING = (
    "This will create or update the cases and tasks tables.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'casework db upgrade' to update the schema."

_verbose_option = click.option(
    "--verbose", is_flag=True, help="Show alembic's more verbose output."
)


class SchemaState(Enum):
    """Where the database schema stands against the packaged migrations."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"

    @classmethod
    def of(cls, current: str | None, head: str | None) -> SchemaState:
        """Classify the `current` revision against the `head` revision."""
        if current is None:
            return cls.UNINITIALIZED
        return cls.UP_TO_DATE if current == head else cls.OUT_OF_DATE


def _alembic(url: str | None = None) -> Config:
    return config.build_alembic_config(db_url=url, stdout=sys.stdout)


def _reachable_url() -> str:
    """Return ``CASEWORK_DB_URL`` once the database has answered on it."""
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        engine = make_engine(url)
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    finally:
        engine.dispose()
    return url


def _row_counts(conn: Connection) -> dict[str, int]:
    return {
        table.name: conn.execute(select(func.count()).select_from(table)).scalar_one()
        for table in (cases, tasks)
    }


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Create and migrate the cases and tasks schema."""


@db.command()
@_verbose_option
def current(verbose: bool) -> None:
    """Show the revision the database is at (nothing before the first upgrade)."""
    command.current(_alembic(_reachable_url()), verbose=verbose)


@db.command()
@_verbose_option
def heads(verbose: bool) -> None:
    """Show the newest packaged revision."""
    command.heads(_alembic(), verbose=verbose)


@db.command()
@_verbose_option
@click.option(
    "--indicate-current",
    "-i",
    "indicate_current",
    is_flag=True,
    help="Mark the revision the database is at (needs CASEWORK_DB_URL).",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """List the packaged revisions, newest first."""
    url = _reachable_url() if indicate_current else None
    command.history(_alembic(url), verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Print the migration SQL instead of running it.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Bring the database up to the newest revision.

    Asks for confirmation unless --force or --sql is given.
    """
    url = _reachable_url()
    if not (force or sql):
        warn(UPGRADE_SCHEMA_WARNING)
        click.secho(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    command.upgrade(_alembic(url), revision="head", sql=sql)
    success("Upgrade complete!")


@db.command()
def status() -> None:
    """Report connectivity, schema state and how much data is stored."""
    try:
        url = _reachable_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message(), err=True)
        raise click.exceptions.Exit(1) from e
    success("Database reachable")

    head = ScriptDirectory.from_config(_alembic(url)).get_current_head()
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            revision = MigrationContext.configure(conn).get_current_revision()
            state = SchemaState.of(revision, head)
            counts = _row_counts(conn) if state is SchemaState.UP_TO_DATE else {}
    finally:
        engine.dispose()

    click.echo(f"Backend : {engine.dialect.name}")
    click.echo(f"URL     : {sanitize_url(url)}")
    click.echo(
        f"Schema  : {revision} ({state.value})" if revision else f"Schema  : {state.value}"
    )
    for name, count in counts.items():
        click.echo(f"{name.capitalize():<8}: {count}")

    if state is not SchemaState.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
