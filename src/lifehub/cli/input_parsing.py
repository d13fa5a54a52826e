"""CLI helpers for parsing dates, amounts and weekdays."""

from datetime import date
from decimal import Decimal

import click

from lifehub.utils.amount_parser import parse_amount
from lifehub.utils.date_parser import parse_date, parse_week_day


def parse_date_or_exit(ctx: click.Context, value: str | None, today: date) -> date | None:
    """Parse an optional date option, or exit with a CLI error."""
    if value is None:
        return None
    try:
        return parse_date(value, today=today)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(ctx: click.Context, value: str | None) -> Decimal | None:
    """Parse an optional amount option, or exit with a CLI error."""
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)


def parse_day_or_exit(ctx: click.Context, value: str, today: date) -> int:
    """Parse a weekday argument into Monday=0 .. Sunday=6, or exit."""
    try:
        return parse_week_day(value, today=today)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
