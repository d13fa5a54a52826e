"""Seeded default store and built-in presets."""

from datetime import UTC, datetime
from decimal import Decimal

from lifehub.domain.entities import (
    Area,
    Note,
    ReadingItem,
    ReadingStatus,
    Recurrence,
    Settings,
    Store,
    Task,
    WeeklyHabits,
)
from lifehub.domain.week import start_of_week
from lifehub.utils.id_generator import IdGenerator

# (title, recurrence, area)
STARTER_TASKS = [
    ("Daily WhatsApp call – Mum & Sis", Recurrence.DAILY, Area.LIFE),
    ("Swim (2x / week)", Recurrence.WEEKLY, Area.HEALTH),
    ("Gym (2x / week)", Recurrence.WEEKLY, Area.HEALTH),
    ("Update GitHub portfolio/screenshots", Recurrence.WEEKLY, Area.CAREER),
    ("CompTIA A+: 2 hrs study", Recurrence.DAILY, Area.CAREER),
]

STARTER_NOTE = "Dream: IT Engineer / SysAdmin. ILR by Nov 2026. Healthy • Wealthy • Happy."

STARTER_READING = [
    ("Clear Thinking", ReadingStatus.FINISHED),
    ("The Psychology of Money", ReadingStatus.FINISHED),
    ("Atomic Habits", ReadingStatus.CURRENT),
    ("Deep Work", ReadingStatus.UPCOMING),
]

DEFAULT_FUND_TARGET = Decimal("2000")
DEFAULT_FUND_NAME = "Emergency Fund"
DEFAULT_NIGHT_SHIFT_MODE = True

# One-click tasks: preset name -> (title, area)
FOCUS_PRESETS = {
    "job-hunt": ("Apply to 3 IT jobs today", Area.CAREER),
    "lab-github": ("Finish one lab & push to GitHub", Area.CAREER),
    "meal-prep": ("Meal prep for night shifts", Area.DIET),
}

STUDY_STEPS = [
    "Watch module & take notes",
    "Do hands-on lab",
    "Make Anki cards",
    "Score 80% on practice test",
    "Book exam",
]


def preset_tasks() -> dict[str, tuple[str, Area]]:
    """Return every named preset, focus presets first then study steps."""
    presets = dict(FOCUS_PRESETS)
    for step in STUDY_STEPS:
        slug = step.lower().replace("&", "and").replace("%", "").replace(" ", "-")
        presets[f"study-{slug}"] = (f"A+: {step}", Area.CAREER)
    return presets


def build_default_store(id_generator: IdGenerator, now: datetime) -> Store:
    """Build the starter store used when nothing usable is persisted.

    Args:
        id_generator: Source of ids for the starter entities
        now: Current moment; sets the note timestamp and the week anchor
    """
    # naive datetimes are taken as local time
    created = now.astimezone(UTC)

    tasks = tuple(
        Task(id=id_generator.new_id(), title=title, recurrence=recurrence, area=area)
        for title, recurrence, area in STARTER_TASKS
    )
    notes = (Note(id=id_generator.new_id(), text=STARTER_NOTE, created=created, pinned=True),)
    reading = tuple(
        ReadingItem(id=id_generator.new_id(), title=title, status=status)
        for title, status in STARTER_READING
    )

    return Store(
        transactions=(),
        health=(),
        meals=(),
        tasks=tasks,
        notes=notes,
        reading=reading,
        weekly_habits=WeeklyHabits.empty(start_of_week(now.date())),
        settings=Settings(
            fund_target=DEFAULT_FUND_TARGET,
            fund_name=DEFAULT_FUND_NAME,
            night_shift_mode=DEFAULT_NIGHT_SHIFT_MODE,
        ),
    )
