"""Transfer management commands."""

import click
from homefin.cli.account_resolution import (
    current_user_or_exit,
    resolve_account_or_exit,
    resolve_group_or_exit,
)
from homefin.cli.error_handling import handle_domain_error
from homefin.domain.account import AccountService
from homefin.domain.errors import DomainError
from homefin.domain.transfer import TransferService
from homefin.utils.amount_parser import format_money, parse_amount
from homefin.utils.date_parser import parse_datetime


@click.group()
def transfer_group():
    """Manage transfers between accounts."""
    pass


@transfer_group.command("add")
@click.option("--from", "from_account", required=True, help="Source account name or ID")
@click.option("--to", "to_account", required=True, help="Destination account name or ID")
@click.option("--amount", required=True, help="Amount leaving the source account")
@click.option(
    "--to-amount",
    help="Amount arriving in the destination account (defaults to --amount)",
)
@click.option("--description", default="", help="Transfer description")
@click.option("--date", default="today", show_default=True)
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def add_transfer(
    ctx,
    from_account: str,
    to_account: str,
    amount: str,
    to_amount: str | None,
    description: str,
    date: str,
    group_id: str | None,
):
    """Move money between two of your accounts.

    Use --to-amount when the accounts have different currencies.

    Examples:
        homefin transfer add --from Wallet --to Savings --amount 100
        homefin transfer add --from "RUB card" --to "USD card" --amount 9500 --to-amount 100
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    db = ctx.obj["db"]
    account_service = AccountService(db)
    from_id = resolve_account_or_exit(ctx, account_service, group_id, from_account)
    to_id = resolve_account_or_exit(ctx, account_service, group_id, to_account)

    try:
        out_amount = parse_amount(amount)
        in_amount = parse_amount(to_amount) if to_amount is not None else out_amount
        transfer_date = parse_datetime(date)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        transfer_id = TransferService(db).create_transfer(
            user_id=user.id,
            group_id=group_id,
            from_account_id=from_id,
            to_account_id=to_id,
            from_amount=out_amount,
            to_amount=in_amount,
            description=description,
            date=transfer_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transfer {transfer_id}")


@transfer_group.command("update")
@click.argument("transfer_id", type=int)
@click.option("--from", "from_account", help="Source account name or ID")
@click.option("--to", "to_account", help="Destination account name or ID")
@click.option("--amount", help="Amount leaving the source account")
@click.option("--to-amount", help="Amount arriving in the destination account")
@click.option("--description", help="Transfer description")
@click.option("--date", help="Transfer date")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def update_transfer(
    ctx,
    transfer_id: int,
    from_account: str | None,
    to_account: str | None,
    amount: str | None,
    to_amount: str | None,
    description: str | None,
    date: str | None,
    group_id: str | None,
) -> None:
    """Update a transfer you created."""
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    db = ctx.obj["db"]
    account_service = AccountService(db)

    from_id = None
    if from_account is not None:
        from_id = resolve_account_or_exit(ctx, account_service, group_id, from_account)
    to_id = None
    if to_account is not None:
        to_id = resolve_account_or_exit(ctx, account_service, group_id, to_account)

    try:
        out_amount = parse_amount(amount) if amount is not None else None
        in_amount = parse_amount(to_amount) if to_amount is not None else None
        transfer_date = parse_datetime(date) if date is not None else None
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        TransferService(db).update_transfer(
            user_id=user.id,
            transfer_id=transfer_id,
            from_account_id=from_id,
            to_account_id=to_id,
            from_amount=out_amount,
            to_amount=in_amount,
            description=description,
            date=transfer_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transfer {transfer_id}")


@transfer_group.command("delete")
@click.argument("transfer_id", type=int)
@click.pass_context
def delete_transfer(ctx, transfer_id: int) -> None:
    """Delete a transfer you created."""
    user = current_user_or_exit(ctx)

    try:
        TransferService(ctx.obj["db"]).delete_transfer(user.id, transfer_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transfer {transfer_id}")


@transfer_group.command("list")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def list_transfers(ctx, group_id: str | None) -> None:
    """List transfers, newest first."""
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)

    transfers = TransferService(ctx.obj["db"]).list_transfers(group_id)
    if not transfers:
        click.echo("No transfers found.")
        return

    for t in transfers:
        click.echo(
            f"{t.id:5d} | {t.date:%Y-%m-%d} | #{t.from_account_id} {format_money(t.from_amount)} -> "
            f"#{t.to_account_id} {format_money(t.to_amount)} | {t.description}"
        )


def register_commands(cli):
    """Register transfer commands with main CLI."""
    cli.add_command(transfer_group, name="transfer")
