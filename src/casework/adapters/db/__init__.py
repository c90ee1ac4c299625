"""Relational persistence for casework: metadata, types, engine and schema."""
