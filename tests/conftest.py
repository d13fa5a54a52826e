"""Shared pytest fixtures for lifehub tests."""

import tempfile
import os
from datetime import datetime
from pathlib import Path
import pytest

from lifehub.database.base import SnapshotStorage
from lifehub.database.factories import create_sqlite_storage
from lifehub.domain.defaults import build_default_store
from lifehub.domain.errors import PersistenceError
from lifehub.domain.store import StoreService
from lifehub.utils.id_generator import SequentialIdGenerator

# Wednesday; the week starts on Monday 2024-01-15
NOW = datetime(2024, 1, 17, 9, 30)


class FixedClock:
    """Settable stand-in for datetime.now."""

    def __init__(self, now: datetime = NOW):
        self.current = now

    def __call__(self) -> datetime:
        return self.current


class FailingStorage(SnapshotStorage):
    """Storage whose writes are always rejected, like a full disk."""

    def __init__(self, payload=None):
        self.payload = payload
        self.save_attempts = 0

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def load_snapshot(self, key="lifehub.v2"):
        return self.payload

    def save_snapshot(self, payload, key="lifehub.v2") -> None:
        self.save_attempts += 1
        raise PersistenceError("Changes are kept for this session but could not be saved: disk full")

    def delete_snapshot(self, key="lifehub.v2") -> None:
        pass


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite snapshot storage for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def clock():
    """Fixed clock at Wednesday 2024-01-17 09:30."""
    return FixedClock()


@pytest.fixture
def id_generator():
    return SequentialIdGenerator()


@pytest.fixture
def store_service(temp_storage, id_generator, clock):
    """Create a loaded StoreService with deterministic ids and time."""
    service = StoreService(temp_storage, id_generator=id_generator, clock=clock)
    service.load()
    return service


@pytest.fixture
def default_store(clock):
    """A seeded default store with its own id sequence."""
    return build_default_store(SequentialIdGenerator(prefix="seed"), clock())


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def failing_storage():
    """Return the FailingStorage class; call it with an optional stored payload."""
    return FailingStorage


@pytest.fixture
def fixed_clock():
    """Return the FixedClock class for tests that need more than one clock."""
    return FixedClock
