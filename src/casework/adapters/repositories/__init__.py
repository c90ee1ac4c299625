"""Case and task repository adapters (SQLAlchemy and in-memory)."""
