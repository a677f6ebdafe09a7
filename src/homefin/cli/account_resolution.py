"""CLI helpers for resolving the acting user, group and accounts."""

from __future__ import annotations

import click

from homefin.domain.account import AccountService
from homefin.domain.entities import User
from homefin.domain.errors import DomainError
from homefin.domain.group import GroupService
from homefin.domain.user import UserService
from homefin.cli.error_handling import handle_domain_error


def current_user_or_exit(ctx: click.Context) -> User:
    """Return the user selected with --user / HOMEFIN_USER, or exit."""
    email = ctx.obj.get("user_email")
    if not email:
        click.echo("Error: No user selected. Pass --user or set HOMEFIN_USER.", err=True)
        ctx.exit(1)

    try:
        return UserService(ctx.obj["db"]).require_user(email)
    except DomainError as e:
        handle_domain_error(ctx, e)


def resolve_group_or_exit(ctx: click.Context, user_id: str, group_id: str | None) -> str:
    """Resolve an explicit group or the user's default group, or exit."""
    try:
        return GroupService(ctx.obj["db"]).resolve_group(user_id, group_id)
    except DomainError as e:
        handle_domain_error(ctx, e)


def resolve_account_or_exit(
    ctx: click.Context, account_service: AccountService, group_id: str, account: str | int
) -> int:
    """Resolve account name or ID inside a group, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return account_service.find_account(group_id, account).id
    except DomainError as e:
        handle_domain_error(ctx, e)
