"""Backup export/import domain service."""

import csv
import io
import logging
from datetime import date

from lifehub.database.mappers import parse_snapshot, store_to_json
from lifehub.domain.entities import Store
from lifehub.domain.errors import MalformedSnapshotError
from lifehub.domain.store import StoreService

logger = logging.getLogger(__name__)

CSV_HEADER = ["date", "type", "category", "amount", "note"]


def backup_filename(today: date) -> str:
    return f"lifehub-backup-{today.isoformat()}.json"


def transactions_csv_filename(today: date) -> str:
    return f"lifehub-transactions-{today.isoformat()}.csv"


def transactions_to_csv(store: Store) -> str:
    """Render the transaction list as CSV, in stored order.

    Text fields are always double-quoted with embedded quotes doubled; the
    amount is written as a bare number.
    """
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator="\n").writerow(CSV_HEADER)
    writer = csv.writer(buffer, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")
    for txn in store.transactions:
        writer.writerow(
            [txn.date.isoformat(), txn.kind.value, txn.category, txn.amount, txn.note or ""]
        )
    return buffer.getvalue()


class BackupService:
    """Service for exporting and importing the whole store."""

    def __init__(self, store_service: StoreService):
        """Initialize backup service.

        Args:
            store_service: Store service owning the live snapshot
        """
        self.store_service = store_service

    def export_backup(self) -> str:
        """Return the full snapshot as JSON, in the persisted layout."""
        return store_to_json(self.store_service.store)

    def export_transactions_csv(self) -> str:
        return transactions_to_csv(self.store_service.store)

    def import_backup(self, payload: str | bytes) -> Store:
        """Replace the store with a JSON backup.

        The payload is decoded, parsed and fully validated before the store
        changes. Raw bytes must be UTF-8.

        Raises:
            MalformedSnapshotError: If the payload is not a valid backup
        """
        if isinstance(payload, bytes):
            try:
                payload = payload.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedSnapshotError(f"Backup is not valid UTF-8 text: {e}") from e
        document = parse_snapshot(payload)
        store = self.store_service.replace_store(document)
        logger.info(
            "Imported backup: %d transactions, %d tasks, %d notes",
            len(store.transactions),
            len(store.tasks),
            len(store.notes),
        )
        return store
