"""Helpers shared by the alembic revisions and the programmatic migration runner."""
