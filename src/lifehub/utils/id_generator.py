"""Identifier generators for new entities."""

import uuid
from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Source of fresh, never reused entity identifiers."""

    @abstractmethod
    def new_id(self) -> str:
        """Return a new identifier."""
        pass


class UUIDGenerator(IdGenerator):
    """Random UUID4 identifiers."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SequentialIdGenerator(IdGenerator):
    """Deterministic identifiers (``id-1``, ``id-2``, ...)."""

    def __init__(self, prefix: str = "id", start: int = 1):
        self.prefix = prefix
        self._next = start

    def new_id(self) -> str:
        value = f"{self.prefix}-{self._next}"
        self._next += 1
        return value
