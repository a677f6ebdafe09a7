"""Database layer for homefin application."""

from homefin.database.base import Database
from homefin.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
