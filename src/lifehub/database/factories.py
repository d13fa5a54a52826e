"""Storage factory functions for creating storage instances."""

import os
from pathlib import Path
from typing import Optional

from lifehub.database.sqlalchemy_db import SQLAlchemyStorage


def create_sqlite_storage(database_path: Optional[str] = None) -> SQLAlchemyStorage:
    """Create a SQLite-backed snapshot storage.

    Args:
        database_path: Path to SQLite database file. If None, checks LIFEHUB_DB_PATH
            environment variable, then defaults to ~/.lifehub/lifehub.db

    Returns:
        SQLAlchemyStorage instance configured for SQLite
    """
    if database_path is None:
        # Check environment variable
        database_path = os.environ.get("LIFEHUB_DB_PATH")

    if database_path is None:
        # Default to ~/.lifehub/lifehub.db
        home = Path.home()
        db_dir = home / ".lifehub"
        db_dir.mkdir(exist_ok=True)
        database_path = str(db_dir / "lifehub.db")

    database_url = f"sqlite:///{database_path}"
    return SQLAlchemyStorage(database_url)
