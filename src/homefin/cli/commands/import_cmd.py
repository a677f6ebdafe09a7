"""CSV import and validation commands."""

from pathlib import Path

import click
from homefin.cli.account_resolution import current_user_or_exit, resolve_group_or_exit
from homefin.cli.error_handling import handle_domain_error
from homefin.domain.csv_import import ACTIONS, CSVImportService
from homefin.domain.errors import DomainError
from homefin.domain.import_models import ImportPreview, ImportResult
from homefin.utils.amount_parser import format_money


def _read_csv(ctx, csv_file: str) -> str:
    try:
        return Path(csv_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: Could not read {csv_file}: {e}", err=True)
        ctx.exit(1)


def _echo_preview(preview: ImportPreview) -> None:
    summary = preview.summary
    click.echo("\nPreview:")
    click.echo(f"  Rows: {summary.total_rows}")
    click.echo(f"  Transactions: {summary.transactions_count}")
    click.echo(f"  Transfers: {summary.transfers_count}")
    click.echo(f"  Accounts: {summary.accounts_count}")
    click.echo(f"  Errors: {summary.errors_count}")

    if preview.accounts:
        click.echo("\nAccounts:")
        for acc in preview.accounts:
            click.echo(f"  {acc.name:25s} {acc.inferred_type.value:10s} {acc.dominant_currency_code}")

    if preview.sample_transactions:
        click.echo("\nSample transactions:")
        for txn in preview.sample_transactions:
            click.echo(
                f"  {txn.date:%Y-%m-%d} {txn.kind.value:7s} {format_money(txn.amount):>12s} "
                f"{txn.currency_code} {txn.account_name} | {txn.description}"
            )

    if preview.sample_transfers:
        click.echo("\nSample transfers:")
        for t in preview.sample_transfers:
            click.echo(
                f"  {t.date:%Y-%m-%d} {t.from_account_name} {format_money(t.from_amount)} "
                f"{t.from_currency_code} -> {t.to_account_name} {format_money(t.to_amount)} "
                f"{t.to_currency_code}"
            )

    for error in preview.errors:
        click.echo(f"  {error}", err=True)


def _echo_result(result: ImportResult) -> None:
    click.echo("\nImport complete:" if result.success else "\nImport finished with errors:")
    click.echo(f"  Accounts: {result.imported_accounts}")
    click.echo(f"  Transactions: {result.imported_transactions}")
    click.echo(f"  Transfers: {result.imported_transfers}")
    for warning in result.warnings:
        click.echo(f"  Warning: {warning}")
    if result.errors:
        click.echo(f"  Errors: {len(result.errors)}")
        for error in result.errors:
            click.echo(f"    {error}", err=True)


@click.command("import")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--action", type=click.Choice(ACTIONS), default="preview", show_default=True
)
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def import_csv(ctx, csv_file: str, action: str, group_id: str | None):
    """Preview or import a ZenMoney CSV export.

    Examples:
        homefin import zenmoney.csv
        homefin import zenmoney.csv --action import --group 1a2b3c4d
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    content = _read_csv(ctx, csv_file)

    try:
        outcome = CSVImportService(ctx.obj["db"]).run(content, action, user.id, group_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if isinstance(outcome, ImportPreview):
        _echo_preview(outcome)
        return

    _echo_result(outcome)
    if not outcome.success:
        ctx.exit(1)


@click.command("validate")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def validate_csv(ctx, csv_file: str):
    """Check that a CSV export can be imported."""
    content = _read_csv(ctx, csv_file)
    report = CSVImportService(ctx.obj["db"]).validate(content)

    for warning in report.warnings:
        click.echo(f"Warning: {warning}")
    if not report.is_valid:
        for error in report.errors:
            click.echo(f"Error: {error}", err=True)
        ctx.exit(1)
    click.echo("CSV file is valid")


def register_commands(cli):
    """Register import and validate commands with main CLI."""
    cli.add_command(import_csv)
    cli.add_command(validate_csv)
