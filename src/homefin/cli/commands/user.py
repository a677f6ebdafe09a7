"""User registration commands."""

import click
from homefin.cli.account_resolution import current_user_or_exit
from homefin.cli.error_handling import handle_domain_error
from homefin.domain.errors import DomainError
from homefin.domain.user import UserService


@click.group()
def user_group():
    """Manage users."""
    pass


@user_group.command("create")
@click.argument("email")
@click.argument("name")
@click.pass_context
def create_user(ctx, email: str, name: str):
    """Register a user.

    A personal default group is created for the new user.

    Examples:
        homefin user create anna@example.com "Anna"
    """
    service = UserService(ctx.obj["db"])

    try:
        user_id = service.create_user(email=email, name=name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    default_group = service.group_service.get_default_group(user_id)
    click.echo(f"Created user '{email.strip().lower()}' (ID: {user_id})")
    if default_group is not None:
        click.echo(f"Default group: {default_group.name} ({default_group.id})")


@user_group.command("show")
@click.pass_context
def show_user(ctx):
    """Show the acting user."""
    user = current_user_or_exit(ctx)
    click.echo(f"ID:    {user.id}")
    click.echo(f"Email: {user.email}")
    click.echo(f"Name:  {user.name}")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
