"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re

CENTS = Decimal("0.01")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a CSV amount string into a Decimal.

    Handles the export's formats:
    - "398,00" (comma decimal separator)
    - "398.00"
    - " 1 000,50" (whitespace is dropped)

    Amounts are already in major units, no cents division happens.
    Thousands separators are not supported.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if amount_str is None or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"\s", "", amount_str).replace(",", ".", 1)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Invalid amount format: {amount_str}")

    if not amount.is_finite():
        raise ValueError(f"Invalid amount format: {amount_str}")
    return amount


def to_money(amount: Decimal | int | float | str) -> Decimal:
    """Quantize an amount to two fraction digits for persistence."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal) -> str:
    """Render an amount as a fixed-point string with two fraction digits."""
    return f"{to_money(amount):.2f}"
