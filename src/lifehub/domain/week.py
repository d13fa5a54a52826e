"""Weekly habit week-rollover policy."""

from dataclasses import replace
from datetime import date, timedelta
from enum import Enum

from lifehub.domain.entities import Store, WeeklyHabits


class WeekState(str, Enum):
    """Whether the stored habit grid belongs to the present week."""

    CURRENT = "current-week"
    STALE = "stale-week"


def start_of_week(day: date) -> date:
    """Return the Monday of the week containing ``day``."""
    return day - timedelta(days=day.weekday())


def today_index(today: date) -> int:
    """Return the weekday index of ``today``, Monday=0 .. Sunday=6."""
    return today.weekday()


def week_state(habits: WeeklyHabits, today: date) -> WeekState:
    """Classify a habit grid against the week containing ``today``."""
    if habits.week_anchor == start_of_week(today):
        return WeekState.CURRENT
    return WeekState.STALE


def roll_over_week(store: Store, today: date) -> tuple[Store, bool]:
    """Reset the habit grid if it belongs to another week.

    The previous week's habits are discarded, not archived. Returns the
    resulting store and whether a reset happened.
    """
    if week_state(store.weekly_habits, today) == WeekState.CURRENT:
        return store, False
    fresh = WeeklyHabits.empty(start_of_week(today))
    return replace(store, weekly_habits=fresh), True
