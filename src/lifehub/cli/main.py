"""Main CLI entry point."""

import logging

import click
from lifehub.database.factories import create_sqlite_storage
from lifehub.domain.store import StoreService
from lifehub.cli.error_handling import report_warnings

# Import and register all commands at module level
from lifehub.cli.commands import (
    backup,
    finance,
    habit,
    health,
    home,
    meal,
    note,
    reading,
    settings,
    task,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LIFEHUB_DB_PATH environment variable)",
    envvar="LIFEHUB_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """LifeHub - personal life organizer.

    Track money, health, meals, tasks, reading and notes. Everything is kept
    in a single local snapshot that is saved after every change.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Load the store only when actually running a command (not when showing
    # help). A store service may already be supplied by the caller.
    if ctx.invoked_subcommand is not None and "store" not in ctx.obj:
        storage = create_sqlite_storage(database_path=db_path)
        storage.connect()
        storage.initialize_schema()
        ctx.call_on_close(storage.disconnect)
        ctx.obj["store"] = StoreService(storage)

    if "store" in ctx.obj:
        service = ctx.obj["store"]
        if not service.is_loaded:
            service.load()
        ctx.call_on_close(lambda: report_warnings(service))


# Register all commands
home.register_commands(cli)
finance.register_commands(cli)
health.register_commands(cli)
meal.register_commands(cli)
task.register_commands(cli)
note.register_commands(cli)
reading.register_commands(cli)
habit.register_commands(cli)
settings.register_commands(cli)
backup.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
