"""Group management commands."""

import click
from homefin.cli.account_resolution import current_user_or_exit
from homefin.cli.error_handling import handle_domain_error
from homefin.domain.errors import DomainError
from homefin.domain.group import GroupService


@click.group()
def group_group():
    """Manage groups."""
    pass


@group_group.command("create")
@click.argument("name")
@click.option("--default", "make_default", is_flag=True, help="Make it your default group")
@click.pass_context
def create_group(ctx, name: str, make_default: bool):
    """Create a group; you become its admin.

    Examples:
        homefin group create "Family"
        homefin group create "Family" --default
    """
    user = current_user_or_exit(ctx)
    service = GroupService(ctx.obj["db"])

    try:
        group_id = service.create_group(user.id, name, is_default=make_default)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created group '{name}' (ID: {group_id})")
    click.echo("Share the ID with others so they can join.")


@group_group.command("join")
@click.argument("group_id")
@click.pass_context
def join_group(ctx, group_id: str):
    """Join an existing group by its ID."""
    user = current_user_or_exit(ctx)
    service = GroupService(ctx.obj["db"])

    try:
        service.join_group(user.id, group_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Joined group {group_id}")


@group_group.command("list")
@click.pass_context
def list_groups(ctx):
    """List your groups."""
    user = current_user_or_exit(ctx)
    memberships = GroupService(ctx.obj["db"]).list_user_groups(user.id)

    if not memberships:
        click.echo("No groups found.")
        return

    click.echo("\nGroups:")
    click.echo("-" * 60)
    for grp, member in memberships:
        marker = " (default)" if grp.is_default and grp.created_by == user.id else ""
        click.echo(f"{grp.id} | {grp.name:20s} | {member.role.value}{marker}")


@group_group.command("default")
@click.argument("group_id")
@click.pass_context
def set_default_group(ctx, group_id: str):
    """Make a group you created your default group."""
    user = current_user_or_exit(ctx)

    try:
        GroupService(ctx.obj["db"]).set_default_group(user.id, group_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Default group set to {group_id}")


def register_commands(cli):
    """Register group commands with main CLI."""
    cli.add_command(group_group, name="group")
