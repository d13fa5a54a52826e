"""Pure store mutations.

Every function takes a ``Store`` and returns a new ``Store``; nothing here
touches storage. Add-operations validate their mandatory fields and raise
``ValidationError`` before building anything. Id-addressed updates and
deletes are no-ops for unknown ids.
"""

import math
from dataclasses import replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from lifehub.domain.defaults import preset_tasks
from lifehub.domain.entities import (
    WATER_MAX,
    WATER_MIN,
    WEEK_LENGTH,
    Area,
    HabitKind,
    HealthEntry,
    Meal,
    MealSlot,
    Mood,
    Note,
    ReadingItem,
    ReadingStatus,
    Recurrence,
    Store,
    Task,
    Transaction,
    TransactionKind,
)
from lifehub.domain.errors import (
    ValidationError,
    day_index_out_of_range,
    invalid_choice,
    missing_fields,
)

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

NEXT_READING_STATUS = {
    ReadingStatus.FINISHED: ReadingStatus.CURRENT,
    ReadingStatus.CURRENT: ReadingStatus.UPCOMING,
    ReadingStatus.UPCOMING: ReadingStatus.FINISHED,
}

_HABIT_FIELDS = {
    HabitKind.SWIM: "swim",
    HabitKind.GYM: "gym",
    HabitKind.CALL_FAMILY: "call_family",
}


def clamp_water(value: int) -> int:
    """Saturate a glass count to the allowed range."""
    return max(WATER_MIN, min(WATER_MAX, value))


def _coerce_enum(enum_cls: type[E], value: Any, field: str) -> E:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(invalid_choice(field, value, [m.value for m in enum_cls]))


def _optional_enum(enum_cls: type[E], value: Any, field: str) -> Optional[E]:
    if value is None or value == "":
        return None
    return _coerce_enum(enum_cls, value, field)


def _optional_number(value: Any, cast: Callable[[Any], T]) -> Optional[T]:
    # Zero and blank count as "not entered"
    if not value:
        return None
    try:
        result = cast(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise ValidationError(f"Invalid number '{value}': {e}")
    if isinstance(result, float) and not math.isfinite(result):
        raise ValidationError(f"Invalid number '{value}': must be finite")
    return result


def _clean_text(value: Optional[str]) -> str:
    return value.strip() if value else ""


def _check_day(day_index: int) -> None:
    if isinstance(day_index, bool) or not isinstance(day_index, int):
        raise ValidationError(day_index_out_of_range(day_index))
    if not 0 <= day_index < WEEK_LENGTH:
        raise ValidationError(day_index_out_of_range(day_index))


def _update_by_id(items: tuple[T, ...], entity_id: str, change: Callable[[T], T]) -> tuple[T, ...]:
    return tuple(change(item) if item.id == entity_id else item for item in items)


def _without_id(items: tuple[T, ...], entity_id: str) -> tuple[T, ...]:
    return tuple(item for item in items if item.id != entity_id)


# Transactions


def add_transaction(
    store: Store,
    entity_id: str,
    date: Optional[date],
    kind: Optional[TransactionKind | str],
    category: Optional[str],
    amount: Optional[Decimal | int | float],
    note: Optional[str] = None,
) -> Store:
    """Prepend a transaction.

    Raises:
        ValidationError: If amount (missing or zero), date, kind or category
            is missing, or the amount is negative
    """
    missing = []
    if not amount:
        missing.append("amount")
    if date is None:
        missing.append("date")
    if not kind:
        missing.append("type")
    if not _clean_text(category):
        missing.append("category")
    if missing:
        raise ValidationError(missing_fields("transaction", missing))

    try:
        value = amount if isinstance(amount, Decimal) else Decimal(str(amount))
    except InvalidOperation:
        raise ValidationError(f"Invalid amount '{amount}'")
    if not value.is_finite():
        raise ValidationError(f"Invalid amount '{amount}': must be finite")
    if value < 0:
        raise ValidationError("Amount must not be negative; use the expense type instead")

    txn = Transaction(
        id=entity_id,
        date=date,
        kind=_coerce_enum(TransactionKind, kind, "type"),
        category=_clean_text(category),
        amount=value,
        note=note or None,
    )
    return replace(store, transactions=(txn,) + store.transactions)


def delete_transaction(store: Store, entity_id: str) -> Store:
    return replace(store, transactions=_without_id(store.transactions, entity_id))


# Health and diet


def add_health_entry(
    store: Store,
    entity_id: str,
    date: Optional[date],
    weight_kg: Optional[float] = None,
    sleep_hours: Optional[float] = None,
    steps: Optional[int] = None,
    mood: Optional[Mood | str] = None,
) -> Store:
    """Prepend a health entry. Only the date is mandatory."""
    if date is None:
        raise ValidationError(missing_fields("health entry", ["date"]))
    entry = HealthEntry(
        id=entity_id,
        date=date,
        weight_kg=_optional_number(weight_kg, float),
        sleep_hours=_optional_number(sleep_hours, float),
        steps=_optional_number(steps, int),
        mood=_optional_enum(Mood, mood, "mood"),
    )
    return replace(store, health=(entry,) + store.health)


def delete_health_entry(store: Store, entity_id: str) -> Store:
    return replace(store, health=_without_id(store.health, entity_id))


def add_meal(
    store: Store,
    entity_id: str,
    date: Optional[date],
    name: Optional[str],
    slot: MealSlot | str = MealSlot.BREAKFAST,
    calories: Optional[int] = None,
) -> Store:
    """Prepend a meal. Name and date are mandatory."""
    missing = []
    if not _clean_text(name):
        missing.append("meal name")
    if date is None:
        missing.append("date")
    if missing:
        raise ValidationError(missing_fields("meal", missing))
    meal = Meal(
        id=entity_id,
        date=date,
        slot=_coerce_enum(MealSlot, slot or MealSlot.BREAKFAST, "meal type"),
        name=_clean_text(name),
        calories=_optional_number(calories, int),
    )
    return replace(store, meals=(meal,) + store.meals)


def delete_meal(store: Store, entity_id: str) -> Store:
    return replace(store, meals=_without_id(store.meals, entity_id))


# Tasks


def add_task(
    store: Store,
    entity_id: str,
    title: Optional[str],
    area: Optional[Area | str] = Area.LIFE,
    due: Optional[date] = None,
    recurrence: Recurrence | str = Recurrence.NONE,
) -> Store:
    """Prepend an open task. The trimmed title is mandatory."""
    if not _clean_text(title):
        raise ValidationError(missing_fields("task", ["title"]))
    task = Task(
        id=entity_id,
        title=_clean_text(title),
        done=False,
        due=due,
        recurrence=_coerce_enum(Recurrence, recurrence or Recurrence.NONE, "recurrence"),
        area=_optional_enum(Area, area, "area"),
    )
    return replace(store, tasks=(task,) + store.tasks)


def add_preset_task(store: Store, entity_id: str, preset: str) -> Store:
    """Prepend one of the built-in focus or study tasks."""
    presets = preset_tasks()
    if preset not in presets:
        raise ValidationError(invalid_choice("preset", preset, list(presets)))
    title, area = presets[preset]
    return add_task(store, entity_id, title=title, area=area)


def toggle_task(store: Store, entity_id: str) -> Store:
    return replace(
        store,
        tasks=_update_by_id(store.tasks, entity_id, lambda t: replace(t, done=not t.done)),
    )


def delete_task(store: Store, entity_id: str) -> Store:
    return replace(store, tasks=_without_id(store.tasks, entity_id))


# Notes


def add_note(store: Store, entity_id: str, text: Optional[str], created: datetime) -> Store:
    """Prepend an unpinned note stamped with ``created``."""
    if not _clean_text(text):
        raise ValidationError(missing_fields("note", ["text"]))
    note = Note(id=entity_id, text=_clean_text(text), created=created, pinned=False)
    return replace(store, notes=(note,) + store.notes)


def toggle_pin(store: Store, entity_id: str) -> Store:
    return replace(
        store,
        notes=_update_by_id(store.notes, entity_id, lambda n: replace(n, pinned=not n.pinned)),
    )


def delete_note(store: Store, entity_id: str) -> Store:
    return replace(store, notes=_without_id(store.notes, entity_id))


# Reading


def add_reading_item(
    store: Store,
    entity_id: str,
    title: Optional[str],
    status: ReadingStatus | str = ReadingStatus.UPCOMING,
) -> Store:
    """Prepend a book, upcoming unless told otherwise."""
    if not _clean_text(title):
        raise ValidationError(missing_fields("book", ["title"]))
    item = ReadingItem(
        id=entity_id,
        title=_clean_text(title),
        status=_coerce_enum(ReadingStatus, status or ReadingStatus.UPCOMING, "status"),
    )
    return replace(store, reading=(item,) + store.reading)


def cycle_reading_status(store: Store, entity_id: str) -> Store:
    """Advance finished -> current -> upcoming -> finished."""
    return replace(
        store,
        reading=_update_by_id(
            store.reading, entity_id, lambda r: replace(r, status=NEXT_READING_STATUS[r.status])
        ),
    )


def delete_reading_item(store: Store, entity_id: str) -> Store:
    return replace(store, reading=_without_id(store.reading, entity_id))


# Weekly habits


def set_habit_slot(store: Store, kind: HabitKind | str, day_index: int, value: bool) -> Store:
    """Set one day of a boolean habit.

    Raises:
        ValidationError: If ``day_index`` is outside 0-6 or ``kind`` is unknown
    """
    habit = _coerce_enum(HabitKind, kind, "habit")
    _check_day(day_index)
    habits = store.weekly_habits
    slots = list(habits.slots(habit))
    slots[day_index] = bool(value)
    return replace(store, weekly_habits=replace(habits, **{_HABIT_FIELDS[habit]: tuple(slots)}))


def toggle_habit_slot(store: Store, kind: HabitKind | str, day_index: int) -> Store:
    """Flip one day of a boolean habit."""
    habit = _coerce_enum(HabitKind, kind, "habit")
    _check_day(day_index)
    current = store.weekly_habits.slots(habit)[day_index]
    return set_habit_slot(store, habit, day_index, not current)


def set_water(store: Store, day_index: int, value: int) -> Store:
    """Set the glass count for a day, saturating to 0-20."""
    _check_day(day_index)
    habits = store.weekly_habits
    water = list(habits.water)
    water[day_index] = clamp_water(int(value))
    return replace(store, weekly_habits=replace(habits, water=tuple(water)))


def adjust_water(store: Store, day_index: int, delta: int) -> Store:
    """Add ``delta`` glasses to a day, saturating to 0-20."""
    _check_day(day_index)
    return set_water(store, day_index, store.weekly_habits.water[day_index] + int(delta))


# Settings


def update_settings(
    store: Store,
    fund_target: Optional[Decimal | int | float] = None,
    fund_name: Optional[str] = None,
    night_shift_mode: Optional[bool] = None,
) -> Store:
    """Update only the settings that are provided.

    Raises:
        ValidationError: If the fund target is negative or not a number
    """
    changes: dict[str, Any] = {}
    if fund_target is not None:
        try:
            target = fund_target if isinstance(fund_target, Decimal) else Decimal(str(fund_target))
        except InvalidOperation:
            raise ValidationError(f"Invalid fund target '{fund_target}'")
        if not target.is_finite():
            raise ValidationError(f"Invalid fund target '{fund_target}': must be finite")
        if target < 0:
            raise ValidationError("Fund target must not be negative")
        changes["fund_target"] = target
    if fund_name is not None:
        changes["fund_name"] = fund_name
    if night_shift_mode is not None:
        changes["night_shift_mode"] = bool(night_shift_mode)
    return replace(store, settings=replace(store.settings, **changes))


def toggle_night_shift(store: Store) -> Store:
    return update_settings(store, night_shift_mode=not store.settings.night_shift_mode)
