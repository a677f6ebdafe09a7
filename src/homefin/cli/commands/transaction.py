"""Transaction management commands."""

import click
from homefin.cli.account_resolution import (
    current_user_or_exit,
    resolve_account_or_exit,
    resolve_group_or_exit,
)
from homefin.cli.error_handling import handle_domain_error
from homefin.domain.account import AccountService
from homefin.domain.entities import TransactionKind
from homefin.domain.errors import DomainError
from homefin.domain.transaction import TransactionService
from homefin.utils.amount_parser import format_money, parse_amount
from homefin.utils.date_parser import parse_datetime

KINDS = [k.value for k in TransactionKind]


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("add")
@click.option("--account", required=True, help="Account name or ID")
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45 or 123,45)")
@click.option("--kind", type=click.Choice(KINDS), default="expense", show_default=True)
@click.option("--description", required=True, help="Transaction description")
@click.option("--category", default="Uncategorized", show_default=True)
@click.option("--date", default="today", show_default=True, help="Date (YYYY-MM-DD or 'today')")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def add_transaction(
    ctx,
    account: str,
    amount: str,
    kind: str,
    description: str,
    category: str,
    date: str,
    group_id: str | None,
):
    """Add a transaction.

    Examples:
        homefin transaction add --account Wallet --amount 398,00 --description "Groceries"
        homefin transaction add --account 2 --amount 5000 --kind income --description Salary
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    db = ctx.obj["db"]
    account_id = resolve_account_or_exit(ctx, AccountService(db), group_id, account)

    try:
        txn_amount = parse_amount(amount)
        txn_date = parse_datetime(date)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = TransactionService(db).create_transaction(
            user_id=user.id,
            group_id=group_id,
            account_id=account_id,
            amount=txn_amount,
            kind=TransactionKind(kind),
            description=description,
            category=category,
            date=txn_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--account", help="Account name or ID")
@click.option("--amount", help="Positive amount")
@click.option("--kind", type=click.Choice(KINDS))
@click.option("--description", help="Transaction description")
@click.option("--category", help="Category name")
@click.option("--date", help="Transaction date")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    account: str | None,
    amount: str | None,
    kind: str | None,
    description: str | None,
    category: str | None,
    date: str | None,
    group_id: str | None,
) -> None:
    """Update a transaction you created.

    Updates only the fields that are provided.
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    db = ctx.obj["db"]

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), group_id, account)

    try:
        txn_amount = parse_amount(amount) if amount is not None else None
        txn_date = parse_datetime(date) if date is not None else None
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        TransactionService(db).update_transaction(
            user_id=user.id,
            transaction_id=transaction_id,
            amount=txn_amount,
            kind=TransactionKind(kind) if kind else None,
            description=description,
            category=category,
            date=txn_date,
            account_id=account_id,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.pass_context
def delete_transaction(ctx, transaction_id: int) -> None:
    """Delete a transaction you created."""
    user = current_user_or_exit(ctx)

    try:
        TransactionService(ctx.obj["db"]).delete_transaction(user.id, transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transaction {transaction_id}")


@transaction_group.command("list")
@click.option("--account", help="Account name or ID")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def list_transactions(ctx, account: str | None, group_id: str | None) -> None:
    """List transactions, newest first."""
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    db = ctx.obj["db"]

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), group_id, account)

    transactions = TransactionService(db).list_transactions(group_id, account_id=account_id)
    if not transactions:
        click.echo("No transactions found.")
        return

    for txn in transactions:
        sign = "+" if txn.kind == TransactionKind.INCOME else "-"
        click.echo(
            f"{txn.id:5d} | {txn.date:%Y-%m-%d} | {sign}{format_money(txn.amount):>12s} | "
            f"{txn.category:20s} | {txn.description}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
