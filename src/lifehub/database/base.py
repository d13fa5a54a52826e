"""Abstract snapshot storage interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Fixed slot holding the organizer's snapshot
SNAPSHOT_KEY = "lifehub.v2"


class SnapshotStorage(ABC):
    """Durable key-value slot for serialized store snapshots."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the storage backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def load_snapshot(self, key: str = SNAPSHOT_KEY) -> Optional[str]:
        """Return the stored payload for ``key``, or None if nothing is stored."""
        pass

    @abstractmethod
    def save_snapshot(self, payload: str, key: str = SNAPSHOT_KEY) -> None:
        """Replace the payload stored under ``key`` as a single write.

        Raises:
            PersistenceError: If the write is rejected
        """
        pass

    @abstractmethod
    def delete_snapshot(self, key: str = SNAPSHOT_KEY) -> None:
        """Remove the payload stored under ``key``, if any."""
        pass
