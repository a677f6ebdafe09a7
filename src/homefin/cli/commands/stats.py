"""Statistics report command."""

import click
from homefin.cli.account_resolution import current_user_or_exit, resolve_group_or_exit
from homefin.cli.error_handling import handle_domain_error
from homefin.domain.errors import DomainError
from homefin.domain.exchange_rates import ExchangeRateService
from homefin.domain.statistics import StatisticsService
from homefin.utils.amount_parser import format_money
from homefin.utils.date_parser import PERIODS


@click.command("stats")
@click.option("--period", type=click.Choice(PERIODS), default="month", show_default=True)
@click.option("--group", "group_id", help="Group ID (defaults to your default group)")
@click.pass_context
def show_stats(ctx, period: str, group_id: str | None):
    """Show income, expense and balances in the reference currency.

    Examples:
        homefin stats
        homefin stats --period year
    """
    user = current_user_or_exit(ctx)
    group_id = resolve_group_or_exit(ctx, user.id, group_id)
    db = ctx.obj["db"]
    rates = ExchangeRateService(db, settings=ctx.obj["settings"])

    try:
        report = StatisticsService(db, rates).build_report(group_id, period)
    except DomainError as e:
        handle_domain_error(ctx, e)

    cur = report.reference_currency
    click.echo(f"\nStatistics ({report.period}):")
    click.echo("=" * 60)
    click.echo(f"  Income:       {format_money(report.total_income):>14s} {cur}")
    click.echo(f"  Expense:      {format_money(report.total_expense):>14s} {cur}")
    click.echo(f"  Net:          {format_money(report.net):>14s} {cur}")
    click.echo(f"  Transactions: {report.transaction_count:>14d}")
    click.echo(f"  Portfolio:    {format_money(report.portfolio_total):>14s} {cur}")

    if report.top_categories:
        click.echo("\nTop expense categories:")
        for item in report.top_categories:
            click.echo(f"  {item.category:25s} {format_money(item.amount):>14s} {cur} ({item.count})")

    if report.currency_distribution:
        click.echo("\nBalances by currency:")
        for share in report.currency_distribution:
            click.echo(
                f"  {share.currency_code}: {format_money(share.total):>14s} "
                f"= {format_money(share.reference_total):>14s} {cur} "
                f"({share.account_count} accounts)"
            )


def register_commands(cli):
    """Register stats command with main CLI."""
    cli.add_command(show_stats)
