"""Meal log commands."""

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.cli.id_resolution import resolve_id_or_exit
from lifehub.cli.input_parsing import parse_date_or_exit
from lifehub.domain.entities import MealSlot
from lifehub.domain.errors import ValidationError


@click.group()
def meal_group():
    """Quick diet log."""
    pass


@meal_group.command("add")
@click.argument("name", required=False)
@click.option("--date", default="today", show_default=True, help="Meal date")
@click.option(
    "--type",
    "slot",
    type=click.Choice([s.value for s in MealSlot], case_sensitive=False),
    default=MealSlot.BREAKFAST.value,
    show_default=True,
    help="Meal type",
)
@click.option("--calories", type=int, help="Calories (optional)")
@click.pass_context
def add_meal(ctx, name: str | None, date: str, slot: str, calories: int | None):
    """Log a meal.

    Examples:
        lifehub meal add "Porridge & berries" --calories 350
        lifehub meal add "Chicken wrap" --type Lunch
    """
    service = ctx.obj["store"]
    meal_date = parse_date_or_exit(ctx, date, service.today())

    try:
        store = service.add_meal(date=meal_date, name=name, slot=slot.title(), calories=calories)
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    meal = store.meals[0]
    click.echo(f"Logged {meal.slot.value.lower()}: {meal.name} ({meal.id})")


@meal_group.command("list")
@click.pass_context
def list_meals(ctx):
    """Show the meal log."""
    store = ctx.obj["store"].store

    if not store.meals:
        click.echo("No meals yet.")
        return

    click.echo(f"{'Date':<12} {'Meal':<10} {'Name':<30} {'Calories':>8}")
    click.echo("-" * 64)
    for meal in store.meals:
        calories = str(meal.calories) if meal.calories is not None else "—"
        click.echo(f"{str(meal.date):<12} {meal.slot.value:<10} {meal.name[:30]:<30} {calories:>8}")


@meal_group.command("delete")
@click.argument("meal_id")
@click.pass_context
def delete_meal(ctx, meal_id: str):
    """Delete a logged meal."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.meals, meal_id)
    service.delete_meal(entity_id)
    click.echo(f"Deleted meal {entity_id}")


def register_commands(cli: click.Group) -> None:
    """Register meal commands with main CLI."""
    cli.add_command(meal_group, name="meal")
