"""Translation of application errors into CLI exits.

| Error                          | Exit | Shown as                     |
|--------------------------------|------|------------------------------|
| InvalidArgumentError           | 2    | usage error                  |
| NotFoundError                  | 3    | "Error: ..."                 |
| StoreUnavailableError          | 1    | "Error: ..." (connect hint)  |
| ExampleDataUnavailableError    | 1    | "Error: ..."                 |
| ArgumentError (bad DB URL)     | 1    | "Error: ..." (URL hint)      |
| OperationalError               | 1    | "Error: ..." (schema hint)   |

Anything else propagates unchanged (and is logged by the message bus).
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click
from sqlalchemy.exc import ArgumentError, OperationalError

from casework.domain.errors import InvalidArgumentError, NotFoundError
from casework.interfaces.example_data import ExampleDataUnavailableError
from casework.interfaces.repositories import StoreUnavailableError

from .app import CANNOT_CONNECT_MSG, INVALID_URL_FORMAT_MSG, SCHEMA_HINT_MSG

NOT_FOUND_EXIT_CODE = 3


class NotFoundException(click.ClickException):
    """ClickException for entities that do not exist (exit code 3)."""

    exit_code = NOT_FOUND_EXIT_CODE


@contextmanager
def translate_errors() -> Iterator[None]:
    """Turn application errors raised in the block into Click exceptions."""
    try:
        yield
    except InvalidArgumentError as e:
        raise click.UsageError(str(e)) from e
    except NotFoundError as e:
        raise NotFoundException(str(e)) from e
    except StoreUnavailableError as e:
        raise click.ClickException(f"{CANNOT_CONNECT_MSG}\n{e}") from e
    except ExampleDataUnavailableError as e:
        raise click.ClickException(str(e)) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    except OperationalError as e:
        raise click.ClickException(f"{CANNOT_CONNECT_MSG}\n{SCHEMA_HINT_MSG}") from e
