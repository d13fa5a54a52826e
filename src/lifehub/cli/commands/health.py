"""Health commands."""

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.cli.id_resolution import resolve_id_or_exit
from lifehub.cli.input_parsing import parse_date_or_exit
from lifehub.domain.entities import Mood
from lifehub.domain.errors import ValidationError

MOOD_NAMES = {mood.name.lower(): mood for mood in Mood}


@click.group()
def health_group():
    """Log weight, sleep, steps and mood."""
    pass


@health_group.command("add")
@click.option("--date", default="today", show_default=True, help="Entry date")
@click.option("--weight", type=float, help="Weight (kg)")
@click.option("--sleep", type=float, help="Sleep (hours)")
@click.option("--steps", type=int, help="Step count")
@click.option("--mood", type=click.Choice(list(MOOD_NAMES)), help="Mood")
@click.pass_context
def add_health_entry(
    ctx,
    date: str,
    weight: float | None,
    sleep: float | None,
    steps: int | None,
    mood: str | None,
):
    """Add a health entry. Every metric is optional."""
    service = ctx.obj["store"]
    entry_date = parse_date_or_exit(ctx, date, service.today())

    try:
        store = service.add_health_entry(
            date=entry_date,
            weight_kg=weight,
            sleep_hours=sleep,
            steps=steps,
            mood=MOOD_NAMES[mood] if mood else None,
        )
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added health entry {store.health[0].id} for {entry_date}")


@health_group.command("list")
@click.pass_context
def list_health(ctx):
    """Show health history."""
    store = ctx.obj["store"].store

    if not store.health:
        click.echo("No entries yet.")
        return

    click.echo(f"{'Date':<12} {'Weight':>8} {'Sleep':>6} {'Steps':>8}  Mood  ID")
    click.echo("-" * 80)
    for entry in store.health:
        weight = f"{entry.weight_kg:g}" if entry.weight_kg is not None else "—"
        sleep = f"{entry.sleep_hours:g}" if entry.sleep_hours is not None else "—"
        steps = str(entry.steps) if entry.steps is not None else "—"
        mood = entry.mood.value if entry.mood else "—"
        click.echo(f"{str(entry.date):<12} {weight:>8} {sleep:>6} {steps:>8}  {mood:<4}  {entry.id}")


@health_group.command("delete")
@click.argument("entry_id")
@click.pass_context
def delete_health_entry(ctx, entry_id: str):
    """Delete a health entry."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.health, entry_id)
    service.delete_health_entry(entity_id)
    click.echo(f"Deleted health entry {entity_id}")


def register_commands(cli: click.Group) -> None:
    """Register health commands with main CLI."""
    cli.add_command(health_group, name="health")
