"""Note commands."""

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.cli.id_resolution import resolve_id_or_exit
from lifehub.domain.derivations import ordered_notes
from lifehub.domain.errors import ValidationError


@click.group()
def note_group():
    """Quick notes: gratitude, ideas, plans."""
    pass


@note_group.command("add")
@click.argument("text", required=False)
@click.pass_context
def add_note(ctx, text: str | None):
    """Add a note."""
    service = ctx.obj["store"]
    try:
        store = service.add_note(text)
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Added note {store.notes[0].id}")


@note_group.command("list")
@click.pass_context
def list_notes(ctx):
    """Show notes, pinned first then newest first."""
    notes = ordered_notes(ctx.obj["store"].store)

    if not notes:
        click.echo("No notes yet.")
        return

    for note in notes:
        pin = "📌 " if note.pinned else ""
        click.echo(f"{pin}{note.created.astimezone():%Y-%m-%d %H:%M}  ({note.id})")
        click.echo(f"  {note.text}")


@note_group.command("pin")
@click.argument("note_id")
@click.pass_context
def toggle_pin(ctx, note_id: str):
    """Pin a note, or unpin it."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.notes, note_id)
    service.toggle_pin(entity_id)
    for note in service.store.notes:
        if note.id == entity_id:
            click.echo(f"{'Pinned' if note.pinned else 'Unpinned'} note {entity_id}")


@note_group.command("delete")
@click.argument("note_id")
@click.pass_context
def delete_note(ctx, note_id: str):
    """Delete a note."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.notes, note_id)
    service.delete_note(entity_id)
    click.echo(f"Deleted note {entity_id}")


def register_commands(cli: click.Group) -> None:
    """Register note commands with main CLI."""
    cli.add_command(note_group, name="note")
