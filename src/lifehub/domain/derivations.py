"""Read-only summaries computed from a store snapshot."""

import math
from datetime import date, datetime, timedelta
from decimal import Decimal

from lifehub.domain.entities import (
    FundProgress,
    HabitSummary,
    Note,
    ReadingGroups,
    ReadingStatus,
    Store,
    Totals,
    TransactionKind,
)
from lifehub.domain.week import today_index

# Countdown target: start of 1 November 2026, local time
COUNTDOWN_TARGET = datetime(2026, 11, 1, 0, 0, 0)
COUNTDOWN_LABEL = "ILR (Nov 2026)"

HABIT_WEEKLY_GOAL = 2
MAX_SUGGESTIONS = 4

SUGGESTION_POOL = [
    "So Good They Can't Ignore You",
    "Make Time",
    "The Compound Effect",
    "UltraLearning",
    "Deep Work",
    "Digital Minimalism",
    "The Pragmatic Programmer",
    "Clean Code",
]


def totals(store: Store) -> Totals:
    """Sum income and expenses over every transaction.

    There is no date window: the figures are all-time even where the
    display calls them "this month".
    """
    income = sum(
        (t.amount for t in store.transactions if t.kind == TransactionKind.INCOME), Decimal("0")
    )
    expense = sum(
        (t.amount for t in store.transactions if t.kind == TransactionKind.EXPENSE), Decimal("0")
    )
    return Totals(income=income, expense=expense, net=income - expense)


def emergency_fund_progress(store: Store) -> FundProgress:
    """Treat positive net cash as savings toward the emergency fund."""
    target = store.settings.fund_target
    saved = max(Decimal("0"), totals(store).net)
    displayed = min(saved, target)
    percent = float(displayed / target * 100) if target > 0 else 0.0
    return FundProgress(
        name=store.settings.fund_name,
        target=target,
        saved=saved,
        displayed=displayed,
        percent=min(100.0, max(0.0, percent)),
    )


def countdown_days(now: datetime, target: datetime = COUNTDOWN_TARGET) -> int:
    """Whole days left until ``target``, rounded up and never negative."""
    remaining = (target - now) / timedelta(days=1)
    return max(0, math.ceil(remaining))


def reading_groups(store: Store) -> ReadingGroups:
    return ReadingGroups(
        finished=tuple(r for r in store.reading if r.status == ReadingStatus.FINISHED),
        current=tuple(r for r in store.reading if r.status == ReadingStatus.CURRENT),
        upcoming=tuple(r for r in store.reading if r.status == ReadingStatus.UPCOMING),
    )


def book_suggestions(store: Store, pool: list[str] = SUGGESTION_POOL) -> list[str]:
    """Up to four pool titles not already on the reading list, in pool order.

    Titles are matched case-insensitively.
    """
    have = {item.title.lower() for item in store.reading}
    return [title for title in pool if title.lower() not in have][:MAX_SUGGESTIONS]


def habit_summary(store: Store, today: date) -> HabitSummary:
    """Summarize this week's habit grid for the given day."""
    habits = store.weekly_habits
    index = today_index(today)
    return HabitSummary(
        swim_done=sum(1 for done in habits.swim if done),
        gym_done=sum(1 for done in habits.gym if done),
        weekly_goal=HABIT_WEEKLY_GOAL,
        water_today=habits.water[index],
        called_family_today=habits.call_family[index],
    )


def ordered_notes(store: Store) -> list[Note]:
    """Pinned notes first, then newest first. The store is not reordered."""
    newest_first = sorted(store.notes, key=lambda n: n.created, reverse=True)
    return sorted(newest_first, key=lambda n: not n.pinned)
