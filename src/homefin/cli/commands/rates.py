"""Exchange rate commands."""

import click
from homefin.domain.currency import CurrencyService
from homefin.domain.exchange_rates import ExchangeRateService
from homefin.utils.amount_parser import format_money, parse_amount


@click.group()
def rates_group():
    """Show exchange rates and convert amounts."""
    pass


@rates_group.command("show")
@click.pass_context
def show_rates(ctx):
    """Show the rate of each active currency in the reference currency."""
    service = ExchangeRateService(ctx.obj["db"], settings=ctx.obj["settings"])

    click.echo(f"\nRates in {service.reference_currency}:")
    for rate in sorted(service.get_exchange_rates(), key=lambda r: r.currency_code):
        click.echo(f"  {rate.currency_code}: {rate.rate:.4f}")


@rates_group.command("currencies")
@click.pass_context
def list_currencies(ctx):
    """List the currencies used by accounts."""
    currencies = CurrencyService(ctx.obj["db"]).list_active()
    if not currencies:
        click.echo("No currencies found.")
        return

    for currency in currencies:
        click.echo(f"  {currency.code} {currency.symbol:>3s}  {currency.name}")


@rates_group.command("convert")
@click.argument("amount")
@click.argument("currency")
@click.pass_context
def convert_amount(ctx, amount: str, currency: str):
    """Convert AMOUNT in CURRENCY into the reference currency.

    Examples:
        homefin rates convert 100 USD
    """
    try:
        value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    service = ExchangeRateService(ctx.obj["db"], settings=ctx.obj["settings"])
    converted = service.convert(value, currency)
    click.echo(
        f"{format_money(value)} {currency.upper()} = "
        f"{format_money(converted)} {service.reference_currency}"
    )


def register_commands(cli):
    """Register rates commands with main CLI."""
    cli.add_command(rates_group, name="rates")
