"""Row classification: expense, income, transfer or skip."""

from dataclasses import dataclass
from typing import Optional

from homefin.domain.entities import TransactionKind
from homefin.domain.import_models import ParsedRow, ParsedTransaction, ParsedTransfer
from homefin.utils.amount_parser import parse_amount
from homefin.utils.date_parser import parse_datetime

DEFAULT_CURRENCY = "RUB"
UNCATEGORIZED = "Uncategorized"
DEFAULT_DESCRIPTION = "Transaction"


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one row.

    At most one of the two fields is set; both empty means the row carries
    no amounts and is dropped.
    """

    transaction: Optional[ParsedTransaction] = None
    transfer: Optional[ParsedTransfer] = None

    @property
    def is_skipped(self) -> bool:
        return self.transaction is None and self.transfer is None


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def has_outcome(row: ParsedRow) -> bool:
    """True if the row carries an outcome amount and outcome account."""
    return _present(row.outcome) and _present(row.outcome_account_name)


def has_income(row: ParsedRow) -> bool:
    """True if the row carries an income amount and income account."""
    return _present(row.income) and _present(row.income_account_name)


def build_description(row: ParsedRow) -> str:
    """Join payee and comment with " - ", falling back to the category."""
    parts = [part.strip() for part in (row.payee, row.comment) if _present(part)]
    if not parts:
        return row.category_name or DEFAULT_DESCRIPTION
    return " - ".join(parts)


def _currency(value: Optional[str]) -> str:
    return value.strip().upper() if _present(value) else DEFAULT_CURRENCY


def classify_row(row: ParsedRow) -> Classification:
    """Classify a parsed row.

    Args:
        row: Parsed CSV row

    Returns:
        Classification holding a transaction, a transfer, or neither

    Raises:
        ValueError: If an amount or the date cannot be parsed
    """
    outcome_side = has_outcome(row)
    income_side = has_income(row)

    if not outcome_side and not income_side:
        return Classification()

    description = build_description(row)
    date = parse_datetime(row.created_date if _present(row.created_date) else row.date)

    if outcome_side and income_side:
        return Classification(
            transfer=ParsedTransfer(
                from_amount=parse_amount(row.outcome),
                to_amount=parse_amount(row.income),
                description=description,
                date=date,
                from_account_name=row.outcome_account_name.strip(),
                to_account_name=row.income_account_name.strip(),
                from_currency_code=_currency(row.outcome_currency),
                to_currency_code=_currency(row.income_currency),
                original_row=row,
            )
        )

    if outcome_side:
        kind = TransactionKind.EXPENSE
        amount, account_name, currency = row.outcome, row.outcome_account_name, row.outcome_currency
    else:
        kind = TransactionKind.INCOME
        amount, account_name, currency = row.income, row.income_account_name, row.income_currency

    return Classification(
        transaction=ParsedTransaction(
            amount=parse_amount(amount),
            description=description,
            category=row.category_name or UNCATEGORIZED,
            kind=kind,
            date=date,
            account_name=account_name.strip(),
            currency_code=_currency(currency),
            original_row=row,
        )
    )
