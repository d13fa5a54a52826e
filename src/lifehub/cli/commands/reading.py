"""Reading list commands."""

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.cli.id_resolution import resolve_id_or_exit
from lifehub.domain.derivations import book_suggestions, reading_groups
from lifehub.domain.entities import ReadingStatus
from lifehub.domain.errors import ValidationError


@click.group()
def reading_group():
    """Track books: finished, current, upcoming."""
    pass


@reading_group.command("add")
@click.argument("title", required=False)
@click.option(
    "--status",
    type=click.Choice([s.value for s in ReadingStatus]),
    default=ReadingStatus.UPCOMING.value,
    show_default=True,
)
@click.pass_context
def add_book(ctx, title: str | None, status: str):
    """Add a book to the reading list."""
    service = ctx.obj["store"]
    try:
        store = service.add_reading_item(title=title, status=status)
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    item = store.reading[0]
    click.echo(f"Added '{item.title}' to {item.status.value} ({item.id})")


@reading_group.command("list")
@click.pass_context
def list_books(ctx):
    """Show the reading list grouped by status."""
    groups = reading_groups(ctx.obj["store"].store)
    for label, items in (
        ("Finished", groups.finished),
        ("Current", groups.current),
        ("Upcoming", groups.upcoming),
    ):
        click.echo(f"{label}:")
        if not items:
            click.echo("  —")
        for item in items:
            click.echo(f"  {item.title}  ({item.id})")


@reading_group.command("cycle")
@click.argument("item_id")
@click.pass_context
def cycle_status(ctx, item_id: str):
    """Move a book to its next status (finished → current → upcoming → finished)."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.reading, item_id)
    service.cycle_reading_status(entity_id)
    for item in service.store.reading:
        if item.id == entity_id:
            click.echo(f"'{item.title}' is now {item.status.value}")


@reading_group.command("delete")
@click.argument("item_id")
@click.pass_context
def delete_book(ctx, item_id: str):
    """Remove a book from the reading list."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.reading, item_id)
    service.delete_reading_item(entity_id)
    click.echo(f"Deleted book {entity_id}")


@reading_group.command("suggest")
@click.pass_context
def suggest(ctx):
    """Suggest books not yet on the list."""
    suggestions = book_suggestions(ctx.obj["store"].store)
    if not suggestions:
        click.echo("No suggestions left.")
        return
    for title in suggestions:
        click.echo(f"  {title}")


def register_commands(cli: click.Group) -> None:
    """Register reading commands with main CLI."""
    cli.add_command(reading_group, name="reading")
