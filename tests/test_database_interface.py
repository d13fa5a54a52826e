"""Tests for the snapshot storage interface."""

import os
import pytest
from unittest.mock import patch

from lifehub.database.base import SNAPSHOT_KEY, SnapshotStorage
from lifehub.database.factories import create_sqlite_storage
from lifehub.database.sqlalchemy_db import SQLAlchemyStorage


class TestSnapshotStorage:
    """Tests to verify the SQLAlchemy storage behaves as a key-value slot."""

    def test_storage_implements_interface(self, temp_storage):
        assert isinstance(temp_storage, SnapshotStorage)
        assert isinstance(temp_storage, SQLAlchemyStorage)

    def test_empty_slot_returns_none(self, temp_storage):
        """Test that loading before any save returns None."""
        assert temp_storage.load_snapshot() is None
        assert temp_storage.load_snapshot("other") is None

    def test_save_then_load(self, temp_storage):
        temp_storage.save_snapshot('{"txns": []}')
        assert temp_storage.load_snapshot(SNAPSHOT_KEY) == '{"txns": []}'

    def test_save_overwrites(self, temp_storage):
        """Test that a second save replaces the first."""
        temp_storage.save_snapshot("first")
        temp_storage.save_snapshot("second")
        assert temp_storage.load_snapshot() == "second"

    def test_keys_are_independent(self, temp_storage):
        temp_storage.save_snapshot("main")
        temp_storage.save_snapshot("scratch", key="scratch")
        assert temp_storage.load_snapshot() == "main"
        assert temp_storage.load_snapshot("scratch") == "scratch"

    def test_delete_snapshot(self, temp_storage):
        temp_storage.save_snapshot("payload")
        temp_storage.delete_snapshot()
        assert temp_storage.load_snapshot() is None
        # deleting an empty slot is harmless
        temp_storage.delete_snapshot()

    def test_payload_survives_reconnect(self, temp_storage):
        """Test that saved payloads are durable across sessions."""
        temp_storage.save_snapshot("durable £ 😀")
        temp_storage.disconnect()

        reopened = create_sqlite_storage(database_path=temp_storage.database_path)
        try:
            assert reopened.load_snapshot() == "durable £ 😀"
        finally:
            reopened.disconnect()


class TestFactory:
    """Tests for create_sqlite_storage path resolution."""

    def test_explicit_path(self, tmp_path):
        storage = create_sqlite_storage(database_path=str(tmp_path / "explicit.db"))
        assert storage.database_url == f"sqlite:///{tmp_path / 'explicit.db'}"

    def test_environment_variable(self, tmp_path):
        db_path = str(tmp_path / "from-env.db")
        with patch.dict(os.environ, {"LIFEHUB_DB_PATH": db_path}):
            storage = create_sqlite_storage()
        assert storage.database_url == f"sqlite:///{db_path}"

    def test_home_directory_default(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LIFEHUB_DB_PATH", raising=False)
        monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path)
        storage = create_sqlite_storage()
        assert storage.database_url == f"sqlite:///{tmp_path / '.lifehub' / 'lifehub.db'}"
        assert (tmp_path / ".lifehub").is_dir()
