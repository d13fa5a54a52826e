"""Finance commands."""

from pathlib import Path

import click
from lifehub.cli.error_handling import handle_domain_error
from lifehub.cli.id_resolution import resolve_id_or_exit
from lifehub.cli.input_parsing import parse_amount_or_exit, parse_date_or_exit
from lifehub.domain.backup import transactions_csv_filename, transactions_to_csv
from lifehub.domain.derivations import emergency_fund_progress, totals
from lifehub.domain.entities import TransactionKind
from lifehub.domain.errors import ValidationError
from lifehub.utils.currency import format_gbp


@click.group()
def finance_group():
    """Record income and spending."""
    pass


@finance_group.command("add")
@click.option("--date", default="today", show_default=True, help="Transaction date (YYYY-MM-DD, 'today', 'yesterday')")
@click.option(
    "--type",
    "kind",
    type=click.Choice([k.value for k in TransactionKind]),
    default=TransactionKind.EXPENSE.value,
    show_default=True,
    help="Income or expense",
)
@click.option("--category", help="Category (required)")
@click.option("--amount", help="Amount (e.g., 12.50 or £12.50)")
@click.option("--note", help="Optional note")
@click.pass_context
def add_transaction(ctx, date: str, kind: str, category: str, amount: str | None, note: str | None):
    """Add a transaction.

    Examples:
        lifehub finance add --amount 12.50 --category Food
        lifehub finance add --type income --category Salary --amount 1800
    """
    service = ctx.obj["store"]
    txn_date = parse_date_or_exit(ctx, date, service.today())
    txn_amount = parse_amount_or_exit(ctx, amount)

    try:
        store = service.add_transaction(
            date=txn_date, kind=kind, category=category, amount=txn_amount, note=note
        )
    except ValidationError as e:
        handle_domain_error(ctx, e)
        return

    txn = store.transactions[0]
    sign = "-" if txn.kind == TransactionKind.EXPENSE else "+"
    click.echo(f"Added transaction {txn.id}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  {txn.category}: {sign}{format_gbp(txn.amount)}")
    if txn.note:
        click.echo(f"  Note: {txn.note}")


@finance_group.command("list")
@click.pass_context
def list_transactions(ctx):
    """List transactions, most recent first."""
    store = ctx.obj["store"].store

    if not store.transactions:
        click.echo("No transactions yet.")
        return

    click.echo(f"\nFound {len(store.transactions)} transaction(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<38} {'Date':<12} {'Type':<8} {'Category':<16} {'Amount':>12}  {'Note':<20}")
    click.echo("-" * 100)
    for txn in store.transactions:
        sign = "-" if txn.kind == TransactionKind.EXPENSE else "+"
        amount_str = f"{sign}{format_gbp(txn.amount)}"
        click.echo(
            f"{txn.id:<38} {str(txn.date):<12} {txn.kind.value:<8} {txn.category[:16]:<16} "
            f"{amount_str:>12}  {(txn.note or '')[:20]:<20}"
        )


@finance_group.command("delete")
@click.argument("transaction_id")
@click.pass_context
def delete_transaction(ctx, transaction_id: str):
    """Delete a transaction by id (or unique id prefix)."""
    service = ctx.obj["store"]
    entity_id = resolve_id_or_exit(ctx, service.store.transactions, transaction_id)
    service.delete_transaction(entity_id)
    click.echo(f"Deleted transaction {entity_id}")


@finance_group.command("summary")
@click.pass_context
def summary(ctx):
    """Show income, spend, net and emergency fund progress.

    Totals cover every recorded transaction.
    """
    store = ctx.obj["store"].store
    result = totals(store)
    fund = emergency_fund_progress(store)

    click.echo(f"Income: {format_gbp(result.income)}")
    click.echo(f"Spend:  {format_gbp(result.expense)}")
    click.echo(f"Net:    {format_gbp(result.net)}")
    click.echo("-" * 40)
    click.echo(f"{fund.name}: {format_gbp(fund.displayed)} / {format_gbp(fund.target)} ({fund.percent:.0f}%)")
    if fund.saved > fund.target:
        click.echo(f"  Saved beyond target: {format_gbp(fund.saved)}")


@finance_group.command("export-csv")
@click.option("--output", type=click.Path(dir_okay=False), help="Output file (default: lifehub-transactions-<date>.csv)")
@click.pass_context
def export_csv(ctx, output: str | None):
    """Export transactions as CSV for spreadsheets."""
    service = ctx.obj["store"]
    path = Path(output or transactions_csv_filename(service.today()))
    path.write_text(transactions_to_csv(service.store), encoding="utf-8")
    click.echo(f"Exported {len(service.store.transactions)} transaction(s) to {path}")


def register_commands(cli: click.Group) -> None:
    """Register finance commands with main CLI."""
    cli.add_command(finance_group, name="finance")
