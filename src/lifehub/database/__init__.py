"""Storage layer for lifehub application."""

from lifehub.database.base import SNAPSHOT_KEY, SnapshotStorage
from lifehub.database.factories import create_sqlite_storage

__all__ = ["SNAPSHOT_KEY", "SnapshotStorage", "create_sqlite_storage"]
