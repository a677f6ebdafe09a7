"""Database factory functions for creating database instances."""

import os
from typing import Optional

from homefin.config import Settings
from homefin.database.sqlalchemy_db import SQLAlchemyDatabase


def create_sqlite_database(database_path: Optional[str] = None) -> SQLAlchemyDatabase:
    """Create a SQLite database instance.

    Args:
        database_path: Path to SQLite database file. If None, checks HOMEFIN_DB_PATH
            environment variable, then defaults to ~/.homefin/homefin.db

    Returns:
        SQLAlchemyDatabase instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("HOMEFIN_DB_PATH")

    database_path = Settings(database_path=database_path).resolve_database_path()

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyDatabase(database_url)
