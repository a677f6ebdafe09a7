"""CSV import orchestration: validate, preview and persist an export."""

import logging
from typing import Mapping, Union

from homefin.database.base import Database
from homefin.domain.currency import CurrencyService
from homefin.domain.currency_catalog import CURRENCY_CATALOG, CurrencyInfo
from homefin.domain.csv_parser import parse_csv, split_fields, split_lines
from homefin.domain.errors import NotFoundError, ValidationError
from homefin.domain.import_models import (
    CSV_COLUMNS,
    CsvParseResult,
    ImportPreview,
    ImportResult,
    ImportSummary,
    ParsedAccount,
    ParsedTransaction,
    ParsedTransfer,
    RowOutcome,
    ValidationReport,
)
from homefin.utils.amount_parser import to_money

logger = logging.getLogger(__name__)

PREVIEW_SAMPLE_SIZE = 10
ACTIONS = ("preview", "import")


class CSVImportService:
    """Service importing ZenMoney CSV exports into a group.

    Imports are best effort: every row is committed on its own and a failing
    row is reported without stopping the run. Re-importing the same file
    reuses accounts by name but duplicates transactions and transfers.
    """

    def __init__(self, db: Database, catalog: Mapping[str, CurrencyInfo] = CURRENCY_CATALOG):
        """Initialize CSV import service.

        Args:
            db: Database instance
            catalog: Currency catalogue used for currencies created on import
        """
        self.db = db
        self.currency_service = CurrencyService(db, catalog=catalog)

    def import_csv(self, content: str, user_id: str, group_id: str) -> ImportResult:
        """Parse and persist an export.

        Args:
            content: CSV text
            user_id: User stamped on created records
            group_id: Group stamped on created records

        Returns:
            ImportResult with counts, errors and warnings
        """
        result = ImportResult()

        try:
            parsed = parse_csv(content)

            if parsed.errors:
                result.errors.append(f"Parse errors: {len(parsed.errors)} rows")
                result.errors.extend(str(error) for error in parsed.errors)

            account_ids: dict[str, int] = {}
            for account in parsed.accounts:
                outcome = self._import_account(account, user_id, group_id, account_ids, result)
                if not outcome.ok:
                    result.errors.append(outcome.error)

            for transaction in parsed.transactions:
                outcome = self._import_transaction(transaction, user_id, group_id, account_ids)
                if outcome.ok:
                    result.imported_transactions += 1
                else:
                    result.errors.append(outcome.error)

            for transfer in parsed.transfers:
                outcome = self._import_transfer(transfer, user_id, group_id, account_ids)
                if outcome.ok:
                    result.imported_transfers += 1
                else:
                    result.errors.append(outcome.error)

            result.success = not result.errors
            if result.warnings:
                result.warnings.insert(0, "Import finished with warnings")
        except Exception as e:
            logger.exception("CSV import failed")
            result.errors.append(f"Import failed: {e}")
            result.success = False

        logger.info(
            f"Imported {result.imported_accounts} accounts, "
            f"{result.imported_transactions} transactions, "
            f"{result.imported_transfers} transfers with {len(result.errors)} errors"
        )
        return result

    def _import_account(
        self,
        account: ParsedAccount,
        user_id: str,
        group_id: str,
        account_ids: dict[str, int],
        result: ImportResult,
    ) -> RowOutcome:
        try:
            existing = self.db.find_account_by_name(account.name, user_id=user_id, group_id=group_id)
            if existing is not None:
                account_ids[account.name] = existing.id
                result.warnings.append(f'Account "{account.name}" already exists')
                return RowOutcome.success()

            currency = self.currency_service.get_or_create(account.dominant_currency_code)
            account_ids[account.name] = self.db.create_account(
                name=account.name,
                account_type=account.inferred_type,
                balance=to_money(0),
                currency_id=currency.id,
                user_id=user_id,
                group_id=group_id,
            )
            result.imported_accounts += 1
            return RowOutcome.success()
        except Exception as e:
            return RowOutcome.failure(f'Failed to create account "{account.name}": {e}')

    def _import_transaction(
        self,
        transaction: ParsedTransaction,
        user_id: str,
        group_id: str,
        account_ids: dict[str, int],
    ) -> RowOutcome:
        try:
            account_id = account_ids.get(transaction.account_name)
            if account_id is None:
                raise NotFoundError(f"Account not found: {transaction.account_name}")

            self.db.create_transaction(
                amount=to_money(transaction.amount),
                description=transaction.description,
                category=transaction.category,
                kind=transaction.kind,
                date=transaction.date,
                account_id=account_id,
                user_id=user_id,
                group_id=group_id,
            )
            return RowOutcome.success()
        except Exception as e:
            return RowOutcome.failure(
                f'Failed to create transaction "{transaction.description}" '
                f"({transaction.kind.value}, {transaction.amount} {transaction.currency_code}): {e}"
            )

    def _import_transfer(
        self,
        transfer: ParsedTransfer,
        user_id: str,
        group_id: str,
        account_ids: dict[str, int],
    ) -> RowOutcome:
        try:
            from_account_id = account_ids.get(transfer.from_account_name)
            if from_account_id is None:
                raise NotFoundError(f"Source account not found: {transfer.from_account_name}")
            to_account_id = account_ids.get(transfer.to_account_name)
            if to_account_id is None:
                raise NotFoundError(f"Destination account not found: {transfer.to_account_name}")
            if from_account_id == to_account_id:
                raise ValidationError(
                    f"Source and destination account are the same: {transfer.from_account_name}"
                )

            self.db.create_transfer(
                from_amount=to_money(transfer.from_amount),
                to_amount=to_money(transfer.to_amount),
                description=transfer.description,
                date=transfer.date,
                from_account_id=from_account_id,
                to_account_id=to_account_id,
                user_id=user_id,
                group_id=group_id,
            )
            return RowOutcome.success()
        except Exception as e:
            return RowOutcome.failure(
                f'Failed to create transfer "{transfer.description}" '
                f"({transfer.from_amount} {transfer.from_currency_code} -> "
                f"{transfer.to_amount} {transfer.to_currency_code}): {e}"
            )

    def preview(self, content: str) -> ImportPreview:
        """Describe what an import would create, without persisting anything.

        Args:
            content: CSV text

        Returns:
            ImportPreview with counts, inferred accounts and sample rows
        """
        parsed = parse_csv(content)
        return self._build_preview(parsed)

    @staticmethod
    def _build_preview(parsed: CsvParseResult) -> ImportPreview:
        summary = ImportSummary(
            total_rows=len(parsed.transactions) + len(parsed.transfers) + len(parsed.errors),
            transactions_count=len(parsed.transactions),
            transfers_count=len(parsed.transfers),
            accounts_count=len(parsed.accounts),
            errors_count=len(parsed.errors),
        )
        return ImportPreview(
            summary=summary,
            accounts=tuple(parsed.accounts),
            sample_transactions=tuple(parsed.transactions[:PREVIEW_SAMPLE_SIZE]),
            sample_transfers=tuple(parsed.transfers[:PREVIEW_SAMPLE_SIZE]),
            errors=tuple(str(error) for error in parsed.errors),
        )

    def validate(self, content: str) -> ValidationReport:
        """Check an export's structure before importing it.

        Args:
            content: CSV text

        Returns:
            ValidationReport; the same content always yields the same report
        """
        errors: list[str] = []
        warnings: list[str] = []

        lines = split_lines(content)
        if len(lines) < 2:
            return ValidationReport(
                is_valid=False,
                errors=("File must contain a header and at least one data row",),
            )

        headers = split_fields(lines[0])
        missing = [header for header in CSV_COLUMNS if header not in headers]
        if missing:
            errors.append(f"Missing required headers: {', '.join(missing)}")

        parsed = parse_csv(content)
        if parsed.errors:
            warnings.append(f"Found {len(parsed.errors)} rows with errors")
        if not parsed.transactions and not parsed.transfers:
            errors.append("No valid transactions or transfers found")
        if not parsed.accounts:
            errors.append("No accounts found")

        return ValidationReport(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))

    def run(
        self, content: str, action: str, user_id: str, group_id: str
    ) -> Union[ImportPreview, ImportResult]:
        """Validate an export, then preview or import it.

        Args:
            content: CSV text
            action: "preview" or "import"
            user_id: Acting user ID
            group_id: Target group ID

        Returns:
            ImportPreview for "preview", ImportResult for "import"

        Raises:
            ValidationError: If the file is invalid or the action unknown
        """
        if action not in ACTIONS:
            raise ValidationError(f"Unknown action '{action}'. Use one of: {', '.join(ACTIONS)}")

        report = self.validate(content)
        if not report.is_valid:
            raise ValidationError(
                "Invalid CSV file", errors=list(report.errors), warnings=list(report.warnings)
            )

        if action == "preview":
            return self.preview(content)
        return self.import_csv(content, user_id, group_id)
