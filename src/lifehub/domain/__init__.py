"""Domain layer for lifehub application.

Services (``StoreService``, ``BackupService``) are imported from their
modules directly; they depend on the storage layer, which itself imports
from here.
"""

from lifehub.domain.entities import Store
from lifehub.domain.errors import (
    DomainError,
    MalformedSnapshotError,
    PersistenceError,
    ValidationError,
)

__all__ = [
    "Store",
    "DomainError",
    "MalformedSnapshotError",
    "PersistenceError",
    "ValidationError",
]
