"""Weekly habit commands."""

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.cli.input_parsing import parse_day_or_exit
from lifehub.domain.entities import HabitKind
from lifehub.domain.errors import ValidationError
from lifehub.domain.week import today_index

DAY_LABELS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
HABIT_CHOICES = [kind.value for kind in HabitKind]


@click.group()
def habit_group():
    """Weekly habits (Mon–Sun): swim, gym, water, family call."""
    pass


@habit_group.command("show")
@click.pass_context
def show_habits(ctx):
    """Show this week's habit grid. Today is marked with *."""
    service = ctx.obj["store"]
    habits = service.store.weekly_habits
    today = today_index(service.today())

    header = "".join(f"{label + ('*' if i == today else ''):>6}" for i, label in enumerate(DAY_LABELS))
    click.echo(f"Week of {habits.week_anchor}")
    click.echo(f"{'Habit':<12}{header}")
    for label, slots in (("Swim", habits.swim), ("Gym", habits.gym), ("Call family", habits.call_family)):
        click.echo(f"{label:<12}" + "".join(f"{'✓' if done else '·':>6}" for done in slots))
    click.echo(f"{'Water':<12}" + "".join(f"{count:>6}" for count in habits.water))


@habit_group.command("set")
@click.argument("kind", type=click.Choice(HABIT_CHOICES))
@click.argument("day", default="today")
@click.option("--off", is_flag=True, help="Clear the slot instead of ticking it")
@click.pass_context
def set_habit(ctx, kind: str, day: str, off: bool):
    """Tick (or clear) a habit for a day.

    DAY is a weekday name (mon, tuesday), an index 0-6 (Monday=0) or 'today'.
    """
    service = ctx.obj["store"]
    day_index = parse_day_or_exit(ctx, day, service.today())
    try:
        service.set_habit_slot(kind, day_index, not off)
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"{kind} {DAY_LABELS[day_index]}: {'cleared' if off else 'done'}")


@habit_group.command("toggle")
@click.argument("kind", type=click.Choice(HABIT_CHOICES))
@click.argument("day", default="today")
@click.pass_context
def toggle_habit(ctx, kind: str, day: str):
    """Flip a habit for a day (today by default)."""
    service = ctx.obj["store"]
    day_index = parse_day_or_exit(ctx, day, service.today())
    try:
        store = service.toggle_habit_slot(kind, day_index)
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    done = store.weekly_habits.slots(HabitKind(kind))[day_index]
    click.echo(f"{kind} {DAY_LABELS[day_index]}: {'done' if done else 'cleared'}")


@habit_group.command("water")
@click.option("--day", default="today", show_default=True, help="Weekday name, index 0-6 or 'today'")
@click.option("--add", "add", type=int, default=0, help="Glasses to add")
@click.option("--remove", "remove", type=int, default=0, help="Glasses to remove")
@click.option("--set", "set_to", type=int, help="Set the count directly")
@click.pass_context
def water(ctx, day: str, add: int, remove: int, set_to: int | None):
    """Adjust the water glass count (kept between 0 and 20).

    Examples:
        lifehub habit water --add 1
        lifehub habit water --remove 1 --day mon
    """
    service = ctx.obj["store"]
    day_index = parse_day_or_exit(ctx, day, service.today())
    try:
        if set_to is not None:
            store = service.set_water(day_index, set_to)
        else:
            # No options means one more glass
            delta = add - remove if (add or remove) else 1
            store = service.adjust_water(day_index, delta)
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Water {DAY_LABELS[day_index]}: {store.weekly_habits.water[day_index]} glasses")


def register_commands(cli: click.Group) -> None:
    """Register habit commands with main CLI."""
    cli.add_command(habit_group, name="habit")
