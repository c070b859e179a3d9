"""Document store layer for bankdash application."""

from bankdash.database.base import Database
from bankdash.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
