"""Backup export and import commands."""

from pathlib import Path

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.domain.backup import BackupService, backup_filename
from lifehub.domain.errors import MalformedSnapshotError


@click.group()
def backup_group():
    """Back up or restore everything as JSON."""
    pass


@backup_group.command("export")
@click.option("--output", type=click.Path(dir_okay=False), help="Output file (default: lifehub-backup-<date>.json)")
@click.pass_context
def export_backup(ctx, output: str | None):
    """Write a full JSON backup."""
    service = ctx.obj["store"]
    path = Path(output or backup_filename(service.today()))
    path.write_text(BackupService(service).export_backup(), encoding="utf-8")
    click.echo(f"Backup written to {path}")


@backup_group.command("import")
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_backup(ctx, backup_file: str):
    """Replace everything with a JSON backup.

    The backup is checked in full first; a broken file changes nothing.
    """
    service = ctx.obj["store"]
    payload = Path(backup_file).read_bytes()
    try:
        store = BackupService(service).import_backup(payload)
    except MalformedSnapshotError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Imported backup from {backup_file}")
    click.echo(f"  Transactions: {len(store.transactions)}")
    click.echo(f"  Tasks: {len(store.tasks)}")
    click.echo(f"  Notes: {len(store.notes)}")


def register_commands(cli: click.Group) -> None:
    """Register backup commands with main CLI."""
    cli.add_command(backup_group, name="backup")
