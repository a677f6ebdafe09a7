"""CLI error handling helpers."""

import click

from homefin.domain.errors import DomainError, ValidationError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, ValidationError):
        for message in error.errors:
            click.echo(f"  - {message}", err=True)
        for message in error.warnings:
            click.echo(f"  Warning: {message}", err=True)
    ctx.exit(1)
