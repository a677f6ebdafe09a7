"""Data shapes produced and consumed by the CSV import pipeline.

Everything here is ephemeral: it lives for one parse or import run.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from homefin.domain.entities import AccountType, TransactionKind
from homefin.domain.errors import ValidationError

# CSV header name -> ParsedRow attribute, in export column order
CSV_COLUMNS: dict[str, str] = {
    "date": "date",
    "categoryName": "category_name",
    "payee": "payee",
    "comment": "comment",
    "outcomeAccountName": "outcome_account_name",
    "outcome": "outcome",
    "outcomeCurrencyShortTitle": "outcome_currency",
    "incomeAccountName": "income_account_name",
    "income": "income",
    "incomeCurrencyShortTitle": "income_currency",
    "createdDate": "created_date",
    "changedDate": "changed_date",
}

REQUIRED_COLUMNS = ("date", "createdDate", "changedDate")


@dataclass(frozen=True)
class ParsedRow:
    """One CSV data line with its fields keyed by column."""

    line_number: int
    raw_line: str
    date: str
    created_date: str
    changed_date: str
    category_name: Optional[str] = None
    payee: Optional[str] = None
    comment: Optional[str] = None
    outcome_account_name: Optional[str] = None
    outcome: Optional[str] = None
    outcome_currency: Optional[str] = None
    income_account_name: Optional[str] = None
    income: Optional[str] = None
    income_currency: Optional[str] = None

    @classmethod
    def from_fields(cls, fields: dict[str, str], line_number: int, raw_line: str) -> "ParsedRow":
        """Build a row from header-keyed field values.

        Args:
            fields: Mapping of CSV header name to field value
            line_number: 1-based line number in the source text
            raw_line: Original line

        Returns:
            ParsedRow

        Raises:
            ValidationError: If a required column is absent
        """
        missing = [column for column in REQUIRED_COLUMNS if fields.get(column) is None]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        values: dict[str, Optional[str]] = {}
        for column, attribute in CSV_COLUMNS.items():
            value = fields.get(column)
            if column in REQUIRED_COLUMNS:
                values[attribute] = value
            else:
                values[attribute] = value if value else None
        return cls(line_number=line_number, raw_line=raw_line, **values)


@dataclass(frozen=True)
class ParsedTransaction:
    """Single-sided row: an expense or an income on one account."""

    amount: Decimal
    description: str
    category: str
    kind: TransactionKind
    date: datetime
    account_name: str
    currency_code: str
    original_row: ParsedRow


@dataclass(frozen=True)
class ParsedTransfer:
    """Two-sided row: money moving between two accounts."""

    from_amount: Decimal
    to_amount: Decimal
    description: str
    date: datetime
    from_account_name: str
    to_account_name: str
    from_currency_code: str
    to_currency_code: str
    original_row: ParsedRow


@dataclass(frozen=True)
class ParsedAccount:
    """Account inferred from the names used across an import."""

    name: str
    inferred_type: AccountType
    dominant_currency_code: str


@dataclass(frozen=True)
class ParseError:
    """Row that could not be parsed."""

    row: int
    message: str
    raw_line: Optional[str] = None

    def __str__(self) -> str:
        return f"Row {self.row}: {self.message}"


@dataclass
class CsvParseResult:
    """Everything one parse run produced."""

    transactions: list[ParsedTransaction] = field(default_factory=list)
    transfers: list[ParsedTransfer] = field(default_factory=list)
    accounts: list[ParsedAccount] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)


@dataclass(frozen=True)
class RowOutcome:
    """Result of persisting one parsed row: either ok or an error message."""

    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "RowOutcome":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "RowOutcome":
        return cls(ok=False, error=error)


@dataclass
class ImportResult:
    """Best-effort outcome of an import run.

    ``success`` is False whenever any error was recorded; prior rows are
    still persisted.
    """

    success: bool = False
    imported_transactions: int = 0
    imported_transfers: int = 0
    imported_accounts: int = 0
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ImportSummary:
    """Counts shown by a preview."""

    total_rows: int
    transactions_count: int
    transfers_count: int
    accounts_count: int
    errors_count: int


@dataclass(frozen=True)
class ImportPreview:
    """Read-only view of what an import would do."""

    summary: ImportSummary
    accounts: tuple[ParsedAccount, ...]
    sample_transactions: tuple[ParsedTransaction, ...]
    sample_transfers: tuple[ParsedTransfer, ...]
    errors: tuple[str, ...]


@dataclass(frozen=True)
class ValidationReport:
    """Structural pre-import check result."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
