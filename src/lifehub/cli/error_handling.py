"""CLI error handling helpers."""

import click

from lifehub.domain.errors import DomainError
from lifehub.domain.store import StoreService


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_warnings(service: StoreService) -> None:
    """Print queued persistence warnings without failing the command."""
    for warning in service.drain_warnings():
        click.echo(f"Warning: {warning}", err=True)
