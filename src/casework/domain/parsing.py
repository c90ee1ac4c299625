"""Parsers and formatters for values crossing the boundary as strings.

Identifiers cross as canonical UUID strings and date-times as ISO-8601 local
date-times with second precision (``YYYY-MM-DDTHH:MM:SS``).
"""

from __future__ import annotations

import re
import uuid
from datetime import datetime

from .errors import UnparsableValueError

__all__ = [
    "format_local_datetime",
    "parse_identifier",
    "parse_local_datetime",
    "parse_text",
    "try_parse_identifier",
]

LOCAL_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"  # pragma: no mutate

# extended form only; seconds and their fraction are optional
_LOCAL_DATETIME = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2}(?:\.\d{1,9})?)?", re.ASCII
)


def parse_text(value: str) -> str:
    """Identity parser for free-text fields."""
    return value


def try_parse_identifier(value: str) -> str | None:
    """Parse `value` as an identifier, returning None when it is not one.

    Args:
        value: Candidate identifier in any form accepted by `uuid.UUID`
            (hyphenated or not, any letter case).

    Returns:
        The canonical (lowercase, hyphenated) identifier, or None.
    """
    try:
        return str(uuid.UUID(value.strip()))
    except (ValueError, AttributeError):
        return None


def parse_identifier(value: str) -> str:
    """Parse `value` as an identifier.

    Raises:
        UnparsableValueError: If `value` is not a valid identifier.
    """
    if (identifier := try_parse_identifier(value)) is None:
        raise UnparsableValueError(value, "identifier")
    return identifier


def parse_local_datetime(value: str) -> datetime:
    """Parse an ISO-8601 local date-time, truncated to whole seconds.

    Only the extended form ``YYYY-MM-DDTHH:MM[:SS[.fraction]]`` parses. Date-only
    values, offsets and ISO basic forms such as ``20240501T100000`` are
    rejected.

    Raises:
        UnparsableValueError: If `value` is not a local date-time.
    """
    text = value.strip().upper() if isinstance(value, str) else ""
    if not _LOCAL_DATETIME.fullmatch(text):
        raise UnparsableValueError(value, "date")
    whole_seconds = text.partition(".")[0]
    try:
        return datetime.fromisoformat(whole_seconds)
    except ValueError as e:  # out-of-range fields, e.g. month 13
        raise UnparsableValueError(value, "date") from e


def format_local_datetime(value: datetime | None) -> str | None:
    """Render a date-time as ``YYYY-MM-DDTHH:MM:SS`` (None passes through)."""
    if value is None:
        return None
    return value.strftime(LOCAL_DATETIME_FORMAT)
