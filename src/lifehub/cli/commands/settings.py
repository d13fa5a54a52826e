"""Settings commands."""

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.cli.input_parsing import parse_amount_or_exit
from lifehub.domain.errors import ValidationError
from lifehub.utils.currency import format_gbp


@click.group()
def settings_group():
    """Emergency fund and display mode."""
    pass


def _show(settings) -> None:
    click.echo(f"Fund name:   {settings.fund_name}")
    click.echo(f"Fund target: {format_gbp(settings.fund_target)}")
    click.echo(f"Mode:        {'Night shift mode' if settings.night_shift_mode else 'Day mode'}")


@settings_group.command("show")
@click.pass_context
def show_settings(ctx):
    """Show current settings."""
    _show(ctx.obj["store"].store.settings)


@settings_group.command("update")
@click.option("--fund-target", help="Emergency fund target (e.g., 2000)")
@click.option("--fund-name", help="Emergency fund display name")
@click.option("--night-shift/--day-mode", "night_shift", default=None, help="Display mode")
@click.pass_context
def update_settings(ctx, fund_target: str | None, fund_name: str | None, night_shift: bool | None):
    """Update only the settings that are given."""
    service = ctx.obj["store"]
    target = parse_amount_or_exit(ctx, fund_target)
    try:
        store = service.update_settings(
            fund_target=target, fund_name=fund_name, night_shift_mode=night_shift
        )
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    _show(store.settings)


@settings_group.command("toggle-mode")
@click.pass_context
def toggle_mode(ctx):
    """Switch between night shift and day mode."""
    store = ctx.obj["store"].toggle_night_shift()
    click.echo("Night shift mode" if store.settings.night_shift_mode else "Day mode")


def register_commands(cli: click.Group) -> None:
    """Register settings commands with main CLI."""
    cli.add_command(settings_group, name="settings")
