"""JSON rendering of command results on stdout."""

import json
from typing import Any

import click


def emit_json(payload: Any) -> None:
    """Write `payload` to stdout as indented JSON."""
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
