"""Unified operations listing command."""

import click
from homefin.cli.account_resolution import (
    current_user_or_exit,
    resolve_account_or_exit,
    resolve_group_or_exit,
)
from homefin.cli.error_handling import handle_domain_error
from homefin.domain.account import AccountService
from homefin.domain.entities import OperationType, TransactionKind
from homefin.domain.errors import DomainError
from homefin.domain.operations import DEFAULT_PAGE_SIZE, OperationService
from homefin.utils.amount_parser import format_money


@click.command("operations")
@click.option("--page", type=int, default=1, show_default=True)
@click.option("--limit", type=int, default=DEFAULT_PAGE_SIZE, show_default=True)
@click.option("--account", "accounts", multiple=True, help="Account name or ID (repeatable)")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def list_operations(ctx, page: int, limit: int, accounts: tuple[str, ...], group_id: str | None):
    """List transactions and transfers together, newest first.

    Examples:
        homefin operations
        homefin operations --page 2 --account Wallet --account Savings
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    db = ctx.obj["db"]

    account_service = AccountService(db)
    account_ids = [resolve_account_or_exit(ctx, account_service, group_id, a) for a in accounts]

    try:
        result = OperationService(db).list_operations(
            group_id, page=page, limit=limit, account_ids=account_ids or None
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not result.operations:
        click.echo("No operations found.")
        return

    for op in result.operations:
        if op.operation_type == OperationType.TRANSFER:
            detail = (
                f"transfer  | #{op.primary_account_id} {format_money(op.amount)} -> "
                f"#{op.secondary_account_id} {format_money(op.secondary_amount)}"
            )
        else:
            sign = "+" if op.kind == TransactionKind.INCOME else "-"
            detail = f"{op.kind.value:9s} | #{op.primary_account_id} {sign}{format_money(op.amount)}"
        click.echo(f"{op.date:%Y-%m-%d} | {detail} | {op.description}")

    click.echo(f"\nPage {result.page} of {result.total_pages} ({result.total} operations)")
    if result.has_more:
        click.echo(f"More: homefin operations --page {result.page + 1}")


def register_commands(cli):
    """Register operations command with main CLI."""
    cli.add_command(list_operations)
