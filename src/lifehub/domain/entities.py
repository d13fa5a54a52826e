"""Domain model entities for lifehub.

These are pure data classes representing the organizer's records,
independent of the persisted document layout. Every entity is immutable:
changing one means building a new record with ``dataclasses.replace``.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

WEEK_LENGTH = 7
WATER_MIN = 0
WATER_MAX = 20


class TransactionKind(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class Mood(str, Enum):
    """Mood symbols offered when logging health."""

    GREAT = "😀"
    GOOD = "🙂"
    OKAY = "😐"
    LOW = "😕"
    BAD = "😞"


class MealSlot(str, Enum):
    """Time of day a meal belongs to."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


class Recurrence(str, Enum):
    """How often a task repeats."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"


class Area(str, Enum):
    """Life area a task belongs to."""

    FINANCE = "Finance"
    HEALTH = "Health"
    DIET = "Diet"
    LIFE = "Life"
    CAREER = "Career"


class ReadingStatus(str, Enum):
    """Progress of a reading item."""

    FINISHED = "finished"
    CURRENT = "current"
    UPCOMING = "upcoming"


class HabitKind(str, Enum):
    """Boolean weekly habits; water is tracked separately as a count."""

    SWIM = "swim"
    GYM = "gym"
    CALL_FAMILY = "callFamily"


@dataclass(frozen=True)
class Transaction:
    """Income or expense entry."""

    id: str
    date: date
    kind: TransactionKind
    category: str
    amount: Decimal
    note: Optional[str] = None


@dataclass(frozen=True)
class HealthEntry:
    """Daily health metrics. Every metric is optional."""

    id: str
    date: date
    weight_kg: Optional[float] = None
    sleep_hours: Optional[float] = None
    steps: Optional[int] = None
    mood: Optional[Mood] = None


@dataclass(frozen=True)
class Meal:
    """Logged meal."""

    id: str
    date: date
    slot: MealSlot
    name: str
    calories: Optional[int] = None


@dataclass(frozen=True)
class Task:
    """Task or goal."""

    id: str
    title: str
    done: bool = False
    due: Optional[date] = None
    recurrence: Recurrence = Recurrence.NONE
    area: Optional[Area] = None


@dataclass(frozen=True)
class Note:
    """Free-form note."""

    id: str
    text: str
    created: datetime
    pinned: bool = False


@dataclass(frozen=True)
class ReadingItem:
    """Book on the reading list."""

    id: str
    title: str
    status: ReadingStatus = ReadingStatus.UPCOMING


@dataclass(frozen=True)
class WeeklyHabits:
    """Habit grid for one Monday-to-Sunday week.

    Each tuple has exactly seven slots, index 0 being Monday.
    """

    week_anchor: date
    swim: tuple[bool, ...]
    gym: tuple[bool, ...]
    water: tuple[int, ...]
    call_family: tuple[bool, ...]

    @classmethod
    def empty(cls, week_anchor: date) -> "WeeklyHabits":
        """Return a cleared grid for the week starting at ``week_anchor``."""
        return cls(
            week_anchor=week_anchor,
            swim=(False,) * WEEK_LENGTH,
            gym=(False,) * WEEK_LENGTH,
            water=(WATER_MIN,) * WEEK_LENGTH,
            call_family=(False,) * WEEK_LENGTH,
        )

    def slots(self, kind: HabitKind) -> tuple[bool, ...]:
        """Return the boolean slots for a habit kind."""
        if kind == HabitKind.SWIM:
            return self.swim
        if kind == HabitKind.GYM:
            return self.gym
        return self.call_family


@dataclass(frozen=True)
class Settings:
    """User preferences."""

    fund_target: Decimal
    fund_name: str
    night_shift_mode: bool


@dataclass(frozen=True)
class Store:
    """Aggregate root holding every collection; the unit of persistence."""

    transactions: tuple[Transaction, ...]
    health: tuple[HealthEntry, ...]
    meals: tuple[Meal, ...]
    tasks: tuple[Task, ...]
    notes: tuple[Note, ...]
    reading: tuple[ReadingItem, ...]
    weekly_habits: WeeklyHabits
    settings: Settings


@dataclass(frozen=True)
class Totals:
    """All-time cash flow."""

    income: Decimal
    expense: Decimal
    net: Decimal


@dataclass(frozen=True)
class FundProgress:
    """Emergency fund progress.

    ``saved`` is uncapped; ``displayed`` is capped at the target for
    progress bars.
    """

    name: str
    target: Decimal
    saved: Decimal
    displayed: Decimal
    percent: float


@dataclass(frozen=True)
class ReadingGroups:
    """Reading items partitioned by status, original order preserved."""

    finished: tuple[ReadingItem, ...]
    current: tuple[ReadingItem, ...]
    upcoming: tuple[ReadingItem, ...]


@dataclass(frozen=True)
class HabitSummary:
    """This week's habit streaks as shown on the home dashboard."""

    swim_done: int
    gym_done: int
    weekly_goal: int
    water_today: int
    called_family_today: bool
