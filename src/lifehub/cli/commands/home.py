"""Home dashboard command."""

import click
from lifehub.domain.derivations import (
    COUNTDOWN_LABEL,
    countdown_days,
    emergency_fund_progress,
    habit_summary,
    totals,
)
from lifehub.utils.currency import format_gbp


def _progress_bar(percent: float, width: int = 20) -> str:
    filled = round(percent / 100 * width)
    return "[" + "#" * filled + "-" * (width - filled) + "]"


@click.command("home")
@click.pass_context
def home(ctx):
    """Show the snapshot dashboard."""
    service = ctx.obj["store"]
    store = service.store
    fund = emergency_fund_progress(store)
    cash = totals(store)
    habits = habit_summary(store, service.today())

    click.echo(f"Snapshot ({'Night shift mode' if store.settings.night_shift_mode else 'Day mode'})")
    click.echo("=" * 50)
    click.echo(fund.name)
    click.echo(f"  {format_gbp(fund.displayed)} / {format_gbp(fund.target)} {_progress_bar(fund.percent)}")
    click.echo("Net cash this month")
    click.echo(f"  {format_gbp(cash.net)} (Income {format_gbp(cash.income)} • Spend {format_gbp(cash.expense)})")
    click.echo("Health streaks")
    click.echo(
        f"  Swim ✓ {habits.swim_done}/{habits.weekly_goal} • Gym ✓ {habits.gym_done}/{habits.weekly_goal}"
    )
    click.echo(f"  Water today: {habits.water_today} glasses")
    click.echo(f"  Family call today: {'done' if habits.called_family_today else 'not yet'}")
    click.echo("Countdown")
    click.echo(f"  {countdown_days(service.now())} days to {COUNTDOWN_LABEL}")


def register_commands(cli: click.Group) -> None:
    """Register home command with main CLI."""
    cli.add_command(home)
