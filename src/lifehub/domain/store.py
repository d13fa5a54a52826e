"""Store domain service.

Owns the live snapshot for one session: loads it, applies commands through
the pure functions in ``lifehub.domain.mutations`` and writes the full
snapshot after every change.
"""

import logging
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any, Callable, Optional

from lifehub.database.base import SNAPSHOT_KEY, SnapshotStorage
from lifehub.database.mappers import parse_snapshot, reconcile_document, store_to_json
from lifehub.domain import mutations
from lifehub.domain.defaults import build_default_store
from lifehub.domain.entities import (
    Area,
    HabitKind,
    MealSlot,
    Mood,
    ReadingStatus,
    Recurrence,
    Store,
    TransactionKind,
)
from lifehub.domain.errors import MalformedSnapshotError, PersistenceError
from lifehub.domain.week import roll_over_week
from lifehub.utils.id_generator import IdGenerator, UUIDGenerator

logger = logging.getLogger(__name__)


class StoreService:
    """Service holding the session's store snapshot."""

    def __init__(
        self,
        storage: SnapshotStorage,
        id_generator: Optional[IdGenerator] = None,
        clock: Optional[Callable[[], datetime]] = None,
        key: str = SNAPSHOT_KEY,
    ):
        """Initialize store service.

        Args:
            storage: Snapshot storage
            id_generator: Id source for new entities (random UUIDs by default)
            clock: Returns the current local time (``datetime.now`` by default)
            key: Storage slot holding the snapshot
        """
        self.storage = storage
        self.id_generator = id_generator or UUIDGenerator()
        self.clock = clock or datetime.now
        self.key = key
        self.warnings: list[str] = []
        self._store: Optional[Store] = None

    @property
    def store(self) -> Store:
        """Current snapshot, loading it on first access."""
        if self._store is None:
            self.load()
        return self._store

    @property
    def is_loaded(self) -> bool:
        return self._store is not None

    def now(self) -> datetime:
        return self.clock()

    def today(self) -> date:
        return self.clock().date()

    def default_store(self) -> Store:
        """Build a fresh seeded default store."""
        return build_default_store(self.id_generator, self.now())

    def load(self) -> Store:
        """Load the session's store and apply the week rollover once.

        Falls back to the seeded default when nothing is stored or the stored
        payload cannot be parsed. The result is written back immediately.
        """
        defaults = self.default_store()
        payload = self.storage.load_snapshot(self.key)
        if payload is None:
            logger.info("No stored snapshot; starting from defaults")
            store = defaults
        else:
            try:
                store = reconcile_document(parse_snapshot(payload), defaults)
            except MalformedSnapshotError as e:
                logger.warning("Ignoring stored snapshot: %s", e)
                store = defaults

        store, rolled = roll_over_week(store, self.today())
        if rolled:
            logger.info("New week; habit grid reset to %s", store.weekly_habits.week_anchor)
        return self._commit(store)

    def _commit(self, store: Store) -> Store:
        """Adopt ``store`` and persist it.

        A failed write is queued as a warning; the new snapshot stays live.
        A store that cannot be serialized is never adopted.
        """
        payload = store_to_json(store)
        self._store = store
        try:
            self.storage.save_snapshot(payload, self.key)
        except PersistenceError as e:
            logger.warning("Snapshot not saved: %s", e)
            self.warnings.append(str(e))
        return store

    def _apply(self, mutation: Callable[..., Store], *args: Any, **kwargs: Any) -> Store:
        return self._commit(mutation(self.store, *args, **kwargs))

    def drain_warnings(self) -> list[str]:
        """Return and clear queued persistence warnings."""
        pending, self.warnings = self.warnings, []
        return pending

    # Transactions

    def add_transaction(
        self,
        date: Optional[date],
        kind: Optional[TransactionKind | str],
        category: Optional[str],
        amount: Optional[Decimal],
        note: Optional[str] = None,
    ) -> Store:
        """Add a transaction.

        Raises:
            ValidationError: If amount, date, kind or category is missing
        """
        return self._apply(
            mutations.add_transaction,
            self.id_generator.new_id(),
            date=date,
            kind=kind,
            category=category,
            amount=amount,
            note=note,
        )

    def delete_transaction(self, entity_id: str) -> Store:
        return self._apply(mutations.delete_transaction, entity_id)

    # Health and diet

    def add_health_entry(
        self,
        date: Optional[date],
        weight_kg: Optional[float] = None,
        sleep_hours: Optional[float] = None,
        steps: Optional[int] = None,
        mood: Optional[Mood | str] = None,
    ) -> Store:
        return self._apply(
            mutations.add_health_entry,
            self.id_generator.new_id(),
            date=date,
            weight_kg=weight_kg,
            sleep_hours=sleep_hours,
            steps=steps,
            mood=mood,
        )

    def delete_health_entry(self, entity_id: str) -> Store:
        return self._apply(mutations.delete_health_entry, entity_id)

    def add_meal(
        self,
        date: Optional[date],
        name: Optional[str],
        slot: MealSlot | str = MealSlot.BREAKFAST,
        calories: Optional[int] = None,
    ) -> Store:
        return self._apply(
            mutations.add_meal,
            self.id_generator.new_id(),
            date=date,
            name=name,
            slot=slot,
            calories=calories,
        )

    def delete_meal(self, entity_id: str) -> Store:
        return self._apply(mutations.delete_meal, entity_id)

    # Tasks

    def add_task(
        self,
        title: Optional[str],
        area: Optional[Area | str] = Area.LIFE,
        due: Optional[date] = None,
        recurrence: Recurrence | str = Recurrence.NONE,
    ) -> Store:
        return self._apply(
            mutations.add_task,
            self.id_generator.new_id(),
            title=title,
            area=area,
            due=due,
            recurrence=recurrence,
        )

    def add_preset_task(self, preset: str) -> Store:
        return self._apply(mutations.add_preset_task, self.id_generator.new_id(), preset)

    def toggle_task(self, entity_id: str) -> Store:
        return self._apply(mutations.toggle_task, entity_id)

    def delete_task(self, entity_id: str) -> Store:
        return self._apply(mutations.delete_task, entity_id)

    # Notes

    def add_note(self, text: Optional[str]) -> Store:
        return self._apply(
            mutations.add_note,
            self.id_generator.new_id(),
            text=text,
            created=self.now().astimezone(UTC),
        )

    def toggle_pin(self, entity_id: str) -> Store:
        return self._apply(mutations.toggle_pin, entity_id)

    def delete_note(self, entity_id: str) -> Store:
        return self._apply(mutations.delete_note, entity_id)

    # Reading

    def add_reading_item(
        self, title: Optional[str], status: ReadingStatus | str = ReadingStatus.UPCOMING
    ) -> Store:
        return self._apply(
            mutations.add_reading_item, self.id_generator.new_id(), title=title, status=status
        )

    def cycle_reading_status(self, entity_id: str) -> Store:
        return self._apply(mutations.cycle_reading_status, entity_id)

    def delete_reading_item(self, entity_id: str) -> Store:
        return self._apply(mutations.delete_reading_item, entity_id)

    # Weekly habits

    def set_habit_slot(self, kind: HabitKind | str, day_index: int, value: bool) -> Store:
        return self._apply(mutations.set_habit_slot, kind, day_index, value)

    def toggle_habit_slot(self, kind: HabitKind | str, day_index: int) -> Store:
        return self._apply(mutations.toggle_habit_slot, kind, day_index)

    def adjust_water(self, day_index: int, delta: int) -> Store:
        return self._apply(mutations.adjust_water, day_index, delta)

    def set_water(self, day_index: int, value: int) -> Store:
        return self._apply(mutations.set_water, day_index, value)

    # Settings

    def update_settings(
        self,
        fund_target: Optional[Decimal] = None,
        fund_name: Optional[str] = None,
        night_shift_mode: Optional[bool] = None,
    ) -> Store:
        return self._apply(
            mutations.update_settings,
            fund_target=fund_target,
            fund_name=fund_name,
            night_shift_mode=night_shift_mode,
        )

    def toggle_night_shift(self) -> Store:
        return self._apply(mutations.toggle_night_shift)

    # Whole store

    def replace_store(self, document: Any) -> Store:
        """Adopt a snapshot document wholesale.

        The document is reconciled onto a fresh seeded default in strict mode
        before anything changes, so a malformed document leaves the current
        store untouched. The week rollover is not applied.

        Raises:
            MalformedSnapshotError: If the document is malformed
        """
        store = reconcile_document(document, self.default_store(), strict=True)
        logger.info("Replacing store from imported snapshot")
        return self._commit(store)
