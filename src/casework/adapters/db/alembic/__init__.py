"""Alembic migration scripts for casework (``script_location`` for Alembic)."""
