"""Generic SQLAlchemy snapshot storage implementation."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lifehub.database.base import SNAPSHOT_KEY, SnapshotStorage
from lifehub.database.models import SnapshotRecord, create_session_factory
from lifehub.domain.errors import PersistenceError, snapshot_write_failed

logger = logging.getLogger(__name__)


class SQLAlchemyStorage(SnapshotStorage):
    """SQLAlchemy-based implementation of SnapshotStorage."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def load_snapshot(self, key: str = SNAPSHOT_KEY) -> Optional[str]:
        """Return the stored payload for ``key``, or None if nothing is stored."""
        session = self._get_session()
        record = session.get(SnapshotRecord, key)
        if record is None:
            return None
        return record.payload

    def save_snapshot(self, payload: str, key: str = SNAPSHOT_KEY) -> None:
        """Insert or replace the payload for ``key`` in one transaction."""
        session = self._get_session()
        try:
            record = session.get(SnapshotRecord, key)
            if record is None:
                session.add(SnapshotRecord(key=key, payload=payload))
            else:
                record.payload = payload
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceError(snapshot_write_failed(str(e))) from e
        logger.debug("Saved snapshot %s (%d bytes)", key, len(payload))

    def delete_snapshot(self, key: str = SNAPSHOT_KEY) -> None:
        """Remove the payload stored under ``key``, if any."""
        session = self._get_session()
        record = session.get(SnapshotRecord, key)
        if record is not None:
            session.delete(record)
            session.commit()
