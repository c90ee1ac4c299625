"""Packaged data files (example cases and tasks)."""
