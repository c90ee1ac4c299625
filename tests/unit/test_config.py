"""Unit tests for `casework.config`."""

import io
from importlib.resources import files

import pytest

from casework import config

# pylint: disable=magic-value-comparison


def test_get_db_url(monkeypatch):
    """The URL comes from CASEWORK_DB_URL."""
    monkeypatch.setenv("CASEWORK_DB_URL", "sqlite:///casework.db")
    assert config.get_db_url() == "sqlite:///casework.db"


@pytest.mark.parametrize("value", [None, ""])
def test_get_db_url_missing(monkeypatch, value):
    """Unset and empty both count as missing."""
    if value is None:
        monkeypatch.delenv("CASEWORK_DB_URL", raising=False)
    else:
        monkeypatch.setenv("CASEWORK_DB_URL", value)
    with pytest.raises(config.DatabaseUrlNotSetError):
        config.get_db_url()


def test_build_alembic_config_points_at_packaged_scripts():
    """Alembic finds the migrations shipped inside the package."""
    cfg = config.build_alembic_config("sqlite:///casework.db")
    location = cfg.get_main_option("script_location")
    assert location == str(files("casework.adapters.db.alembic"))
    assert cfg.get_main_option("sqlalchemy.url") == "sqlite:///casework.db"


def test_build_alembic_config_without_url():
    """A URL is optional for commands that only read the scripts."""
    stream = io.StringIO()
    cfg = config.build_alembic_config(stdout=stream)
    assert cfg.get_main_option("sqlalchemy.url") is None
    assert cfg.stdout is stream
