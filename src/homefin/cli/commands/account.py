"""Account management commands."""

import click
from homefin.cli.account_resolution import (
    current_user_or_exit,
    resolve_account_or_exit,
    resolve_group_or_exit,
)
from homefin.cli.error_handling import handle_domain_error
from homefin.domain.account import AccountService
from homefin.domain.balance import BalanceService
from homefin.domain.entities import AccountType
from homefin.domain.errors import DomainError
from homefin.domain.exchange_rates import ExchangeRateService
from homefin.utils.amount_parser import format_money, parse_amount

ACCOUNT_TYPES = [t.value for t in AccountType]


@click.group()
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.option(
    "--type", "account_type", type=click.Choice(ACCOUNT_TYPES), default="other", show_default=True
)
@click.option("--currency", default="RUB", show_default=True, help="Currency code")
@click.option("--balance", default="0", show_default=True, help="Opening balance")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def create_account(
    ctx, name: str, account_type: str, currency: str, balance: str, group_id: str | None
):
    """Create a new account.

    Examples:
        homefin account create "Wallet" --type cash
        homefin account create "Tinkoff USD" --type bank --currency USD --balance 150
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    service = AccountService(ctx.obj["db"])

    try:
        opening = parse_amount(balance)
    except ValueError as e:
        click.echo(f"Error: Invalid balance: {e}", err=True)
        ctx.exit(1)

    try:
        account_id = service.create_account(
            user_id=user.id,
            group_id=group_id,
            name=name,
            account_type=AccountType(account_type),
            currency_code=currency,
            balance=opening,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created account '{name}' (ID: {account_id})")


@account_group.command("list")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def list_accounts(ctx, group_id: str | None):
    """List accounts with their current balances."""
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    db = ctx.obj["db"]
    rates = ExchangeRateService(db, settings=ctx.obj["settings"])

    balances = BalanceService(db, rates).list_account_balances(group_id)
    if not balances:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 80)
    for item in balances:
        acc = item.account
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:20s} | {acc.type.value:10s} | "
            f"{format_money(item.balance):>12s} {item.currency_code} | "
            f"{format_money(item.reference_balance):>12s} {rates.reference_currency}"
        )


@account_group.command("update")
@click.argument("account", metavar="ACCOUNT")
@click.option("--name", help="New account name")
@click.option("--type", "account_type", type=click.Choice(ACCOUNT_TYPES))
@click.option("--currency", help="New currency code")
@click.option("--balance", help="New opening balance")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def update_account(
    ctx,
    account: str,
    name: str | None,
    account_type: str | None,
    currency: str | None,
    balance: str | None,
    group_id: str | None,
) -> None:
    """Update an account you own.

    ACCOUNT can be an account name or ID.

    Examples:
        homefin account update "Wallet" --name "Cash"
        homefin account update 1 --balance 500
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    service = AccountService(ctx.obj["db"])
    account_id = resolve_account_or_exit(ctx, service, group_id, account)

    opening = None
    if balance is not None:
        try:
            opening = parse_amount(balance)
        except ValueError as e:
            click.echo(f"Error: Invalid balance: {e}", err=True)
            ctx.exit(1)

    try:
        service.update_account(
            user_id=user.id,
            account_id=account_id,
            name=name,
            account_type=AccountType(account_type) if account_type else None,
            balance=opening,
            currency_code=currency,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated account {account_id}")


@account_group.command("delete")
@click.argument("account", metavar="ACCOUNT")
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_account(ctx, account: str, group_id: str | None, yes: bool) -> None:
    """Delete an account.

    ACCOUNT can be an account name or ID.

    The account can only be deleted if no transactions or transfers use it.

    Examples:
        homefin account delete "Wallet"
        homefin account delete 1 --yes
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    service = AccountService(ctx.obj["db"])
    account_id = resolve_account_or_exit(ctx, service, group_id, account)
    account_obj = service.get_account(account_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete account '{account_obj.name}' (ID: {account_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_account(user.id, account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted account '{account_obj.name}'")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
