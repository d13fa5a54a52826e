"""Tests for pure store mutations."""

import pytest
from datetime import UTC, date, datetime
from decimal import Decimal

from lifehub.domain import mutations
from lifehub.domain.entities import (
    Area,
    HabitKind,
    MealSlot,
    Mood,
    ReadingStatus,
    Recurrence,
    TransactionKind,
)
from lifehub.domain.errors import ValidationError


class TestAddTransaction:
    """Tests for adding transactions."""

    def test_prepends_transaction(self, default_store):
        store = mutations.add_transaction(
            default_store, "t1", date(2024, 1, 15), "expense", "Food", Decimal("12.50")
        )
        store = mutations.add_transaction(
            store, "t2", date(2024, 1, 16), "income", "Salary", Decimal("1800")
        )

        assert [t.id for t in store.transactions] == ["t2", "t1"]
        assert store.transactions[0].kind == TransactionKind.INCOME
        assert store.transactions[1].amount == Decimal("12.50")
        assert store.transactions[1].note is None

    def test_original_store_is_untouched(self, default_store):
        mutations.add_transaction(
            default_store, "t1", date(2024, 1, 15), "expense", "Food", Decimal("5")
        )
        assert default_store.transactions == ()

    def test_missing_amount_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="please fill amount"):
            mutations.add_transaction(
                default_store, "t1", date(2024, 1, 15), "expense", "Food", None
            )

    def test_zero_amount_counts_as_missing(self, default_store):
        with pytest.raises(ValidationError, match="amount"):
            mutations.add_transaction(
                default_store, "t1", date(2024, 1, 15), "expense", "Food", Decimal("0")
            )

    def test_lists_every_missing_field(self, default_store):
        with pytest.raises(ValidationError) as exc_info:
            mutations.add_transaction(default_store, "t1", None, None, "  ", None)
        assert str(exc_info.value) == (
            "Cannot add transaction: please fill amount, date, type, category"
        )

    def test_negative_amount_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="negative"):
            mutations.add_transaction(
                default_store, "t1", date(2024, 1, 15), "expense", "Food", Decimal("-3")
            )

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), Decimal("NaN")])
    def test_non_finite_amount_is_rejected(self, default_store, amount):
        with pytest.raises(ValidationError, match="finite"):
            mutations.add_transaction(
                default_store, "t1", date(2024, 1, 15), "expense", "Food", amount
            )

    def test_unknown_kind_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="Invalid type 'refund'"):
            mutations.add_transaction(
                default_store, "t1", date(2024, 1, 15), "refund", "Food", Decimal("3")
            )

    def test_category_is_trimmed_and_float_amount_accepted(self, default_store):
        store = mutations.add_transaction(
            default_store, "t1", date(2024, 1, 15), TransactionKind.EXPENSE, "  Food ", 9.99
        )
        assert store.transactions[0].category == "Food"
        assert store.transactions[0].amount == Decimal("9.99")

    def test_delete_transaction(self, default_store):
        store = mutations.add_transaction(
            default_store, "t1", date(2024, 1, 15), "expense", "Food", Decimal("5")
        )
        assert mutations.delete_transaction(store, "t1").transactions == ()

    def test_delete_unknown_id_is_noop(self, default_store):
        assert mutations.delete_transaction(default_store, "missing") == default_store


class TestHealthAndMeals:
    """Tests for health and diet logging."""

    def test_health_entry_with_optional_fields(self, default_store):
        store = mutations.add_health_entry(
            default_store, "h1", date(2024, 1, 15), weight_kg="72.4", steps="8000", mood="🙂"
        )
        entry = store.health[0]
        assert entry.weight_kg == 72.4
        assert entry.sleep_hours is None
        assert entry.steps == 8000
        assert entry.mood == Mood.GOOD

    def test_zero_health_values_are_not_entered(self, default_store):
        store = mutations.add_health_entry(
            default_store, "h1", date(2024, 1, 15), weight_kg=0, sleep_hours="", steps=0
        )
        entry = store.health[0]
        assert entry.weight_kg is None
        assert entry.sleep_hours is None
        assert entry.steps is None

    def test_health_entry_needs_date(self, default_store):
        with pytest.raises(ValidationError, match="please fill date"):
            mutations.add_health_entry(default_store, "h1", None, weight_kg=70)

    def test_invalid_number_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="Invalid number"):
            mutations.add_health_entry(default_store, "h1", date(2024, 1, 15), steps="lots")

    @pytest.mark.parametrize(
        "field", [{"weight_kg": float("inf")}, {"sleep_hours": float("nan")}, {"steps": float("inf")}]
    )
    def test_non_finite_health_values_are_rejected(self, default_store, field):
        with pytest.raises(ValidationError, match="Invalid number"):
            mutations.add_health_entry(default_store, "h1", date(2024, 1, 15), **field)

    def test_meal_defaults_to_breakfast(self, default_store):
        store = mutations.add_meal(default_store, "m1", date(2024, 1, 15), "Porridge")
        meal = store.meals[0]
        assert meal.slot == MealSlot.BREAKFAST
        assert meal.calories is None

    def test_meal_needs_name_and_date(self, default_store):
        with pytest.raises(ValidationError) as exc_info:
            mutations.add_meal(default_store, "m1", None, "   ")
        assert str(exc_info.value) == "Cannot add meal: please fill meal name, date"

    def test_delete_meal_and_health_entry(self, default_store):
        store = mutations.add_meal(default_store, "m1", date(2024, 1, 15), "Soup", "Lunch", 350)
        store = mutations.add_health_entry(store, "h1", date(2024, 1, 15), sleep_hours=7.5)
        store = mutations.delete_meal(store, "m1")
        store = mutations.delete_health_entry(store, "h1")
        assert store.meals == ()
        assert store.health == ()


class TestTasks:
    """Tests for task mutations."""

    def test_add_task_defaults(self, default_store):
        store = mutations.add_task(default_store, "k1", "  Renew passport ")
        task = store.tasks[0]
        assert task.title == "Renew passport"
        assert task.done is False
        assert task.area == Area.LIFE
        assert task.recurrence == Recurrence.NONE
        assert len(store.tasks) == len(default_store.tasks) + 1

    def test_blank_title_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="Cannot add task"):
            mutations.add_task(default_store, "k1", "   ")

    def test_toggle_twice_restores_state(self, default_store):
        once = mutations.toggle_task(default_store, "seed-1")
        assert once.tasks[0].done is True
        assert mutations.toggle_task(once, "seed-1") == default_store

    def test_toggle_unknown_id_is_noop(self, default_store):
        assert mutations.toggle_task(default_store, "nope") == default_store

    def test_delete_is_idempotent(self, default_store):
        once = mutations.delete_task(default_store, "seed-2")
        twice = mutations.delete_task(once, "seed-2")
        assert once == twice
        assert "seed-2" not in [t.id for t in once.tasks]

    def test_focus_preset(self, default_store):
        store = mutations.add_preset_task(default_store, "k1", "meal-prep")
        assert store.tasks[0].title == "Meal prep for night shifts"
        assert store.tasks[0].area == Area.DIET

    def test_study_preset(self, default_store):
        store = mutations.add_preset_task(default_store, "k1", "study-make-anki-cards")
        assert store.tasks[0].title == "A+: Make Anki cards"
        assert store.tasks[0].area == Area.CAREER

    def test_unknown_preset_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="Invalid preset"):
            mutations.add_preset_task(default_store, "k1", "nap")


class TestNotes:
    """Tests for note mutations."""

    def test_add_note_is_unpinned(self, default_store):
        created = datetime(2024, 1, 17, 9, 30, tzinfo=UTC)
        store = mutations.add_note(default_store, "n1", "Call the bank", created)
        note = store.notes[0]
        assert note.pinned is False
        assert note.created == created

    def test_blank_note_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="Cannot add note"):
            mutations.add_note(default_store, "n1", "", datetime(2024, 1, 17, tzinfo=UTC))

    def test_toggle_pin(self, default_store):
        store = mutations.toggle_pin(default_store, "seed-6")
        assert store.notes[0].pinned is False
        assert mutations.toggle_pin(store, "seed-6").notes[0].pinned is True

    def test_delete_note(self, default_store):
        assert mutations.delete_note(default_store, "seed-6").notes == ()


class TestReading:
    """Tests for reading list mutations."""

    def test_add_defaults_to_upcoming(self, default_store):
        store = mutations.add_reading_item(default_store, "r1", "Make Time")
        assert store.reading[0].status == ReadingStatus.UPCOMING

    def test_cycle_order(self, default_store):
        # seed-7 starts out finished
        store = mutations.cycle_reading_status(default_store, "seed-7")
        assert store.reading[0].status == ReadingStatus.CURRENT
        store = mutations.cycle_reading_status(store, "seed-7")
        assert store.reading[0].status == ReadingStatus.UPCOMING
        store = mutations.cycle_reading_status(store, "seed-7")
        assert store.reading[0].status == ReadingStatus.FINISHED

    def test_cycle_three_times_is_identity(self, default_store):
        store = default_store
        for _ in range(3):
            store = mutations.cycle_reading_status(store, "seed-10")
        assert store == default_store

    def test_blank_title_is_rejected(self, default_store):
        with pytest.raises(ValidationError):
            mutations.add_reading_item(default_store, "r1", " ")

    def test_delete_reading_item(self, default_store):
        store = mutations.delete_reading_item(default_store, "seed-8")
        assert [r.title for r in store.reading] == ["Clear Thinking", "Atomic Habits", "Deep Work"]


class TestWeeklyHabits:
    """Tests for habit grid mutations."""

    def test_set_and_clear_slot(self, default_store):
        store = mutations.set_habit_slot(default_store, HabitKind.SWIM, 2, True)
        assert store.weekly_habits.swim[2] is True
        store = mutations.set_habit_slot(store, "swim", 2, False)
        assert store.weekly_habits == default_store.weekly_habits

    def test_toggle_slot(self, default_store):
        store = mutations.toggle_habit_slot(default_store, "callFamily", 6)
        assert store.weekly_habits.call_family[6] is True
        assert store.weekly_habits.gym == (False,) * 7

    @pytest.mark.parametrize("day_index", [-1, 7])
    def test_out_of_range_day_is_rejected(self, default_store, day_index):
        with pytest.raises(ValidationError, match="out of range"):
            mutations.set_habit_slot(default_store, "gym", day_index, True)

    def test_unknown_habit_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="Invalid habit"):
            mutations.set_habit_slot(default_store, "yoga", 0, True)

    def test_water_saturates(self, default_store):
        store = default_store
        for delta in (5, 10, 10, -3):
            store = mutations.adjust_water(store, 0, delta)
        assert store.weekly_habits.water[0] == 17

        store = mutations.adjust_water(store, 0, -50)
        assert store.weekly_habits.water[0] == 0

    def test_set_water_clamps(self, default_store):
        store = mutations.set_water(default_store, 3, 99)
        assert store.weekly_habits.water[3] == 20

    def test_water_day_out_of_range(self, default_store):
        with pytest.raises(ValidationError):
            mutations.adjust_water(default_store, 7, 1)

    @pytest.mark.parametrize("value,expected", [(-1, 0), (0, 0), (12, 12), (20, 20), (21, 20)])
    def test_clamp_water(self, value, expected):
        assert mutations.clamp_water(value) == expected


class TestSettings:
    """Tests for settings mutations."""

    def test_partial_update(self, default_store):
        store = mutations.update_settings(default_store, fund_name="Rainy Day")
        assert store.settings.fund_name == "Rainy Day"
        assert store.settings.fund_target == default_store.settings.fund_target
        assert store.settings.night_shift_mode is True

    def test_update_target(self, default_store):
        store = mutations.update_settings(default_store, fund_target=1500)
        assert store.settings.fund_target == Decimal("1500")

    def test_negative_target_is_rejected(self, default_store):
        with pytest.raises(ValidationError, match="negative"):
            mutations.update_settings(default_store, fund_target=Decimal("-1"))

    @pytest.mark.parametrize("target", [float("nan"), float("inf"), Decimal("Infinity")])
    def test_non_finite_target_is_rejected(self, default_store, target):
        with pytest.raises(ValidationError, match="finite"):
            mutations.update_settings(default_store, fund_target=target)

    def test_toggle_night_shift(self, default_store):
        store = mutations.toggle_night_shift(default_store)
        assert store.settings.night_shift_mode is False
