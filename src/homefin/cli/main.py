"""Main CLI entry point."""

import logging

import click
from homefin.config import Settings
from homefin.database.factories import create_sqlite_database

# Import and register all commands at module level
from homefin.cli.commands import (
    account,
    group,
    import_cmd,
    operations,
    rates,
    stats,
    transaction,
    transfer,
    user,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides HOMEFIN_DB_PATH environment variable)",
    envvar="HOMEFIN_DB_PATH",
)
@click.option(
    "--user",
    "user_email",
    help="Email of the acting user (overrides HOMEFIN_USER environment variable)",
    envvar="HOMEFIN_USER",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, user_email: str | None, verbose: bool):
    """Homefin - Household finance tracking.

    Track accounts, transactions and transfers in several currencies,
    shared between the members of a group, and import ZenMoney CSV exports.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env().with_overrides(database_path=db_path)
    except ValueError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        ctx.exit(1)

    ctx.obj["settings"] = settings
    ctx.obj["user_email"] = user_email

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=settings.database_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db


# Register all commands
user.register_commands(cli)
group.register_commands(cli)
account.register_commands(cli)
transaction.register_commands(cli)
transfer.register_commands(cli)
operations.register_commands(cli)
import_cmd.register_commands(cli)
rates.register_commands(cli)
stats.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
