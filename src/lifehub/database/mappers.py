"""Mapper functions to convert between domain models and the snapshot document.

The persisted snapshot is one JSON object whose keys match the layout the
organizer has always written (``txns``, ``weeklyHabits``, camelCase entity
fields), so older snapshots keep loading. This layer isolates that layout
from the domain entities.
"""

import json
import logging
import math
from dataclasses import replace
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any, Callable, Mapping

from lifehub.domain.entities import (
    WEEK_LENGTH,
    Area,
    HealthEntry,
    Meal,
    MealSlot,
    Mood,
    Note,
    ReadingItem,
    ReadingStatus,
    Recurrence,
    Settings,
    Store,
    Task,
    Transaction,
    TransactionKind,
    WeeklyHabits,
)
from lifehub.domain.errors import MalformedSnapshotError, malformed_field
from lifehub.domain.mutations import clamp_water

logger = logging.getLogger(__name__)


# Domain -> document


def _number(value: Decimal) -> int | float:
    return int(value) if value == value.to_integral_value() else float(value)


def _drop_none(document: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in document.items() if value is not None}


def transaction_to_document(txn: Transaction) -> dict[str, Any]:
    return _drop_none(
        {
            "id": txn.id,
            "date": txn.date.isoformat(),
            "type": txn.kind.value,
            "category": txn.category,
            "amount": _number(txn.amount),
            "note": txn.note,
        }
    )


def health_entry_to_document(entry: HealthEntry) -> dict[str, Any]:
    return _drop_none(
        {
            "id": entry.id,
            "date": entry.date.isoformat(),
            "weightKg": entry.weight_kg,
            "sleepHrs": entry.sleep_hours,
            "steps": entry.steps,
            "mood": entry.mood.value if entry.mood else None,
        }
    )


def meal_to_document(meal: Meal) -> dict[str, Any]:
    return _drop_none(
        {
            "id": meal.id,
            "date": meal.date.isoformat(),
            "mealType": meal.slot.value,
            "name": meal.name,
            "calories": meal.calories,
        }
    )


def task_to_document(task: Task) -> dict[str, Any]:
    return _drop_none(
        {
            "id": task.id,
            "title": task.title,
            "due": task.due.isoformat() if task.due else None,
            "done": task.done,
            "recur": task.recurrence.value,
            "area": task.area.value if task.area else None,
        }
    )


def note_to_document(note: Note) -> dict[str, Any]:
    return {
        "id": note.id,
        "text": note.text,
        "pinned": note.pinned,
        "created": note.created.isoformat(),
    }


def reading_item_to_document(item: ReadingItem) -> dict[str, Any]:
    return {"id": item.id, "title": item.title, "status": item.status.value}


def weekly_habits_to_document(habits: WeeklyHabits) -> dict[str, Any]:
    return {
        "weekStart": habits.week_anchor.isoformat(),
        "gym": list(habits.gym),
        "swim": list(habits.swim),
        "water": list(habits.water),
        "callFamily": list(habits.call_family),
    }


def store_to_document(store: Store) -> dict[str, Any]:
    """Convert a store into the complete snapshot document."""
    return {
        "txns": [transaction_to_document(t) for t in store.transactions],
        "health": [health_entry_to_document(h) for h in store.health],
        "meals": [meal_to_document(m) for m in store.meals],
        "tasks": [task_to_document(t) for t in store.tasks],
        "notes": [note_to_document(n) for n in store.notes],
        "emergencyFundTarget": _number(store.settings.fund_target),
        "emergencyFundName": store.settings.fund_name,
        "nightShiftMode": store.settings.night_shift_mode,
        "weeklyHabits": weekly_habits_to_document(store.weekly_habits),
        "reading": [reading_item_to_document(r) for r in store.reading],
    }


def store_to_json(store: Store) -> str:
    """Serialize a store as indented JSON."""
    return json.dumps(store_to_document(store), indent=2, ensure_ascii=False)


# Document -> domain
#
# Readers raise KeyError, TypeError, ValueError or ArithmeticError when the
# document does not have the expected shape; reconcile_document turns those
# into a per-field decision.


def _text(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected text, got {type(value).__name__}")
    return value


def _optional_text(value: Any) -> str | None:
    return None if value is None else _text(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def _finite(value: Any) -> Decimal:
    # json.loads accepts NaN, Infinity and overflowing literals like 1e400
    if not _is_number(value):
        raise TypeError(f"expected a number, got {type(value).__name__}")
    result = Decimal(str(value))
    if not result.is_finite():
        raise ValueError(f"expected a finite number, got {value}")
    return result


def _decimal(value: Any) -> Decimal:
    result = _finite(value)
    if result < 0:
        raise ValueError(f"expected a non-negative number, got {value}")
    return result


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    result = float(_finite(value))
    if not math.isfinite(result):
        raise ValueError(f"number out of range: {value}")
    return result


def _optional_int(value: Any) -> int | None:
    if value is None:
        return None
    return int(_finite(value))


def _bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected true/false, got {type(value).__name__}")
    return value


def _date(value: Any) -> date:
    return date.fromisoformat(_text(value)[:10])


def _timestamp(value: Any) -> datetime:
    created = datetime.fromisoformat(_text(value))
    if created.tzinfo is None:
        created = created.replace(tzinfo=UTC)
    return created


def _id(entry: Mapping[str, Any]) -> str:
    value = entry["id"]
    if not isinstance(value, (str, int)) or isinstance(value, bool):
        raise TypeError("entity id must be text")
    return str(value)


def transaction_from_document(entry: Mapping[str, Any]) -> Transaction:
    return Transaction(
        id=_id(entry),
        date=_date(entry["date"]),
        kind=TransactionKind(entry["type"]),
        category=_text(entry["category"]),
        amount=_decimal(entry["amount"]),
        note=_optional_text(entry.get("note")),
    )


def health_entry_from_document(entry: Mapping[str, Any]) -> HealthEntry:
    mood = entry.get("mood")
    return HealthEntry(
        id=_id(entry),
        date=_date(entry["date"]),
        weight_kg=_optional_float(entry.get("weightKg")),
        sleep_hours=_optional_float(entry.get("sleepHrs")),
        steps=_optional_int(entry.get("steps")),
        mood=Mood(mood) if mood else None,
    )


def meal_from_document(entry: Mapping[str, Any]) -> Meal:
    return Meal(
        id=_id(entry),
        date=_date(entry["date"]),
        slot=MealSlot(entry.get("mealType") or MealSlot.BREAKFAST.value),
        name=_text(entry["name"]),
        calories=_optional_int(entry.get("calories")),
    )


def task_from_document(entry: Mapping[str, Any]) -> Task:
    due = entry.get("due")
    area = entry.get("area")
    return Task(
        id=_id(entry),
        title=_text(entry["title"]),
        done=_bool(entry.get("done", False)),
        due=_date(due) if due else None,
        recurrence=Recurrence(entry.get("recur") or Recurrence.NONE.value),
        area=Area(area) if area else None,
    )


def note_from_document(entry: Mapping[str, Any]) -> Note:
    return Note(
        id=_id(entry),
        text=_text(entry["text"]),
        created=_timestamp(entry["created"]),
        pinned=_bool(entry.get("pinned", False)),
    )


def reading_item_from_document(entry: Mapping[str, Any]) -> ReadingItem:
    return ReadingItem(
        id=_id(entry),
        title=_text(entry["title"]),
        status=ReadingStatus(entry["status"]),
    )


def _week_slots(document: Mapping[str, Any], key: str, cast: Callable[[Any], Any]) -> tuple:
    slots = document[key]
    if not isinstance(slots, list) or len(slots) != WEEK_LENGTH:
        raise ValueError(f"'{key}' must have exactly {WEEK_LENGTH} slots")
    return tuple(cast(slot) for slot in slots)


def _water_slot(value: Any) -> int:
    count = _optional_int(value)
    if count is None:
        raise TypeError("water slot must be a number")
    return clamp_water(count)


def weekly_habits_from_document(document: Mapping[str, Any]) -> WeeklyHabits:
    if not isinstance(document, Mapping):
        raise TypeError("expected an object")
    return WeeklyHabits(
        week_anchor=_date(document["weekStart"]),
        swim=_week_slots(document, "swim", _bool),
        gym=_week_slots(document, "gym", _bool),
        water=_week_slots(document, "water", _water_slot),
        call_family=_week_slots(document, "callFamily", _bool),
    )


def _entities(reader: Callable[[Mapping[str, Any]], Any]) -> Callable[[Any], tuple]:
    def read(value: Any) -> tuple:
        if not isinstance(value, list):
            raise TypeError(f"expected a list, got {type(value).__name__}")
        for entry in value:
            if not isinstance(entry, Mapping):
                raise TypeError("list entries must be objects")
        return tuple(reader(entry) for entry in value)

    return read


# document key -> (reader, setter onto the store)
_FIELDS: dict[str, tuple[Callable[[Any], Any], Callable[[Store, Any], Store]]] = {
    "txns": (_entities(transaction_from_document), lambda s, v: replace(s, transactions=v)),
    "health": (_entities(health_entry_from_document), lambda s, v: replace(s, health=v)),
    "meals": (_entities(meal_from_document), lambda s, v: replace(s, meals=v)),
    "tasks": (_entities(task_from_document), lambda s, v: replace(s, tasks=v)),
    "notes": (_entities(note_from_document), lambda s, v: replace(s, notes=v)),
    "reading": (_entities(reading_item_from_document), lambda s, v: replace(s, reading=v)),
    "weeklyHabits": (weekly_habits_from_document, lambda s, v: replace(s, weekly_habits=v)),
    "emergencyFundTarget": (
        _decimal,
        lambda s, v: replace(s, settings=replace(s.settings, fund_target=v)),
    ),
    "emergencyFundName": (
        _text,
        lambda s, v: replace(s, settings=replace(s.settings, fund_name=v)),
    ),
    "nightShiftMode": (
        _bool,
        lambda s, v: replace(s, settings=replace(s.settings, night_shift_mode=v)),
    ),
}


def reconcile_document(document: Any, defaults: Store, strict: bool = False) -> Store:
    """Build a store from a snapshot document, field by field.

    A top-level field that is present and well formed wins; a missing field
    keeps the default. Unknown fields are ignored. A malformed field is
    logged and defaulted, or raises when ``strict`` is set.

    Args:
        document: Parsed snapshot document
        defaults: Store supplying values for missing or rejected fields
        strict: Raise instead of defaulting malformed fields

    Returns:
        Reconciled store

    Raises:
        MalformedSnapshotError: If the document is not an object, or a field
            is malformed and ``strict`` is set
    """
    if not isinstance(document, Mapping):
        raise MalformedSnapshotError("Snapshot must be a JSON object")

    store = defaults
    for key, (reader, setter) in _FIELDS.items():
        if key not in document:
            continue
        try:
            value = reader(document[key])
        except (KeyError, TypeError, ValueError, ArithmeticError) as e:
            message = malformed_field(key, str(e))
            if strict:
                raise MalformedSnapshotError(message) from e
            logger.warning("%s; using default", message)
            continue
        store = setter(store, value)
    return store


def parse_snapshot(payload: str) -> Any:
    """Parse snapshot text into a document.

    Raises:
        MalformedSnapshotError: If the text is not valid JSON
    """
    try:
        return json.loads(payload)
    except (json.JSONDecodeError, TypeError) as e:
        raise MalformedSnapshotError(f"Snapshot is not valid JSON: {e}") from e
