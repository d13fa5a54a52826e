"""Tests for derived summaries."""

import pytest
from dataclasses import replace
from datetime import UTC, date, datetime
from decimal import Decimal

from lifehub.domain import mutations
from lifehub.domain.derivations import (
    COUNTDOWN_TARGET,
    book_suggestions,
    countdown_days,
    emergency_fund_progress,
    habit_summary,
    ordered_notes,
    reading_groups,
    totals,
)
from lifehub.domain.entities import Note


def _with_transactions(store, *entries):
    for index, (kind, amount) in enumerate(entries):
        store = mutations.add_transaction(
            store, f"t{index}", date(2024, 1, 15), kind, "Misc", Decimal(amount)
        )
    return store


class TestTotals:
    """Tests for income/expense totals."""

    def test_empty_store(self, default_store):
        result = totals(default_store)
        assert result.income == Decimal("0")
        assert result.expense == Decimal("0")
        assert result.net == Decimal("0")

    def test_sums_by_kind(self, default_store):
        store = _with_transactions(
            default_store, ("expense", "50"), ("income", "200"), ("expense", "30")
        )
        result = totals(store)
        assert result.income == Decimal("200")
        assert result.expense == Decimal("80")
        assert result.net == Decimal("120")

    def test_decimal_amounts_do_not_drift(self, default_store):
        store = _with_transactions(default_store, ("expense", "0.1"), ("expense", "0.2"))
        assert totals(store).expense == Decimal("0.3")


class TestEmergencyFund:
    """Tests for emergency fund progress."""

    def test_progress_below_target(self, default_store):
        store = _with_transactions(
            default_store, ("expense", "50"), ("income", "200"), ("expense", "30")
        )
        progress = emergency_fund_progress(store)
        assert progress.saved == Decimal("120")
        assert progress.displayed == Decimal("120")
        assert progress.percent == pytest.approx(6.0)
        assert progress.name == "Emergency Fund"

    def test_displayed_is_capped_at_target(self, default_store):
        store = mutations.update_settings(default_store, fund_target=100)
        store = _with_transactions(store, ("income", "120"))
        progress = emergency_fund_progress(store)
        assert progress.saved == Decimal("120")
        assert progress.displayed == Decimal("100")
        assert progress.percent == 100.0

    def test_negative_net_counts_as_nothing_saved(self, default_store):
        store = _with_transactions(default_store, ("expense", "75"))
        progress = emergency_fund_progress(store)
        assert progress.saved == Decimal("0")
        assert progress.percent == 0.0

    def test_zero_target(self, default_store):
        store = mutations.update_settings(default_store, fund_target=0)
        store = _with_transactions(store, ("income", "10"))
        assert emergency_fund_progress(store).percent == 0.0


class TestCountdown:
    """Tests for the countdown in days."""

    @pytest.mark.parametrize(
        "now,expected",
        [
            (datetime(2026, 10, 31, 12, 0), 1),
            (datetime(2026, 10, 31, 0, 0), 1),
            (datetime(2026, 10, 30, 23, 59), 2),
            (datetime(2026, 10, 18, 0, 0), 14),
            (datetime(2026, 11, 1, 0, 0), 0),
            (datetime(2026, 11, 5, 8, 0), 0),
        ],
    )
    def test_days_left(self, now, expected):
        assert countdown_days(now) == expected

    def test_custom_target(self):
        assert countdown_days(datetime(2024, 1, 1), target=datetime(2024, 1, 3)) == 2

    def test_default_target(self):
        assert COUNTDOWN_TARGET == datetime(2026, 11, 1)


class TestReading:
    """Tests for reading groups and suggestions."""

    def test_groups_keep_stored_order(self, default_store):
        store = mutations.add_reading_item(default_store, "r1", "Make Time", "finished")
        groups = reading_groups(store)
        assert [r.title for r in groups.finished] == [
            "Make Time",
            "Clear Thinking",
            "The Psychology of Money",
        ]
        assert [r.title for r in groups.current] == ["Atomic Habits"]
        assert [r.title for r in groups.upcoming] == ["Deep Work"]

    def test_suggestions_skip_titles_on_list(self, default_store):
        assert book_suggestions(default_store) == [
            "So Good They Can't Ignore You",
            "Make Time",
            "The Compound Effect",
            "UltraLearning",
        ]

    def test_suggestions_match_case_insensitively(self, default_store):
        store = mutations.add_reading_item(default_store, "r1", "make time")
        suggestions = book_suggestions(store)
        assert "Make Time" not in suggestions
        assert suggestions[-1] == "Digital Minimalism"

    def test_at_most_four_suggestions(self, default_store):
        store = replace(default_store, reading=())
        assert len(book_suggestions(store)) == 4

    def test_exhausted_pool(self, default_store):
        assert book_suggestions(default_store, pool=["Deep Work"]) == []


class TestHabitSummary:
    """Tests for the habit summary."""

    def test_counts_and_today_values(self, default_store):
        store = mutations.set_habit_slot(default_store, "swim", 0, True)
        store = mutations.set_habit_slot(store, "swim", 4, True)
        store = mutations.set_habit_slot(store, "gym", 1, True)
        store = mutations.set_habit_slot(store, "callFamily", 2, True)
        store = mutations.set_water(store, 2, 6)

        # 2024-01-17 is a Wednesday, index 2
        summary = habit_summary(store, date(2024, 1, 17))
        assert summary.swim_done == 2
        assert summary.gym_done == 1
        assert summary.weekly_goal == 2
        assert summary.water_today == 6
        assert summary.called_family_today is True

    def test_sunday_is_last_slot(self, default_store):
        store = mutations.set_water(default_store, 6, 3)
        assert habit_summary(store, date(2024, 1, 21)).water_today == 3


class TestOrderedNotes:
    """Tests for note ordering."""

    def test_pinned_first_then_newest(self, default_store):
        notes = (
            Note("a", "old", datetime(2024, 1, 1, tzinfo=UTC), pinned=False),
            Note("b", "pinned old", datetime(2023, 12, 1, tzinfo=UTC), pinned=True),
            Note("c", "new", datetime(2024, 1, 5, tzinfo=UTC), pinned=False),
            Note("d", "pinned new", datetime(2024, 1, 2, tzinfo=UTC), pinned=True),
        )
        store = replace(default_store, notes=notes)

        assert [n.id for n in ordered_notes(store)] == ["d", "b", "c", "a"]
        # stored order is untouched
        assert [n.id for n in store.notes] == ["a", "b", "c", "d"]
