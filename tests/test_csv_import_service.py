"""Tests for CSVImportService."""

import pytest
from decimal import Decimal

from homefin.domain.entities import AccountType, TransactionKind
from homefin.domain.errors import ValidationError
from homefin.domain.import_models import CSV_COLUMNS, ImportPreview, ImportResult

HEADER = ",".join(CSV_COLUMNS)


def make_csv(*rows: str) -> str:
    return "\n".join([HEADER, *rows])


WALLET_EXPENSE = '2024-01-15,Food,,,Wallet,"398,00",RUB,,,,2024-01-15 10:30:00,2024-01-15 10:30:00'
CURRENCY_TRANSFER = "2024-01-17,,,,Tinkoff,9500,RUB,USD card,100,USD,2024-01-17,2024-01-17"


class TestImportCsv:
    """Tests for import_csv."""

    def test_wallet_expense_creates_account_and_transaction(
        self, csv_import_service, temp_db, sample_user, sample_group
    ):
        result = csv_import_service.import_csv(make_csv(WALLET_EXPENSE), sample_user.id, sample_group)

        assert result.success is True
        assert result.imported_accounts == 1
        assert result.imported_transactions == 1
        assert result.imported_transfers == 0
        assert result.errors == []

        account = temp_db.find_account_by_name("Wallet", user_id=sample_user.id, group_id=sample_group)
        assert account.type == AccountType.CASH
        assert account.currency_code == "RUB"
        assert account.balance == Decimal("0")

        transactions = temp_db.list_transactions(group_id=sample_group)
        assert len(transactions) == 1
        assert transactions[0].amount == Decimal("398.00")
        assert transactions[0].kind == TransactionKind.EXPENSE
        assert transactions[0].user_id == sample_user.id
        assert transactions[0].account_id == account.id

    def test_two_currency_transfer(self, csv_import_service, temp_db, sample_user, sample_group):
        result = csv_import_service.import_csv(
            make_csv(CURRENCY_TRANSFER), sample_user.id, sample_group
        )

        assert result.success is True
        assert result.imported_accounts == 2
        assert result.imported_transfers == 1

        source = temp_db.find_account_by_name("Tinkoff", group_id=sample_group)
        target = temp_db.find_account_by_name("USD card", group_id=sample_group)
        assert source.currency_code == "RUB"
        assert target.currency_code == "USD"

        transfer = temp_db.list_transfers(group_id=sample_group)[0]
        assert transfer.from_amount == Decimal("9500.00")
        assert transfer.to_amount == Decimal("100.00")
        assert transfer.from_account_id == source.id
        assert transfer.to_account_id == target.id

    def test_creates_missing_currency_from_catalog(
        self, csv_import_service, temp_db, sample_user, sample_group
    ):
        csv_import_service.import_csv(
            make_csv("2024-01-15,,,,Tbilisi card,10,GEL,,,,2024-01-15,2024-01-15"),
            sample_user.id,
            sample_group,
        )

        currency = temp_db.get_currency_by_code("GEL")
        assert currency is not None
        assert currency.name == "Georgian Lari"
        assert currency.is_active is True

    def test_unknown_currency_gets_generic_name(
        self, csv_import_service, temp_db, sample_user, sample_group
    ):
        csv_import_service.import_csv(
            make_csv("2024-01-15,,,,Odd,10,QQQ,,,,2024-01-15,2024-01-15"),
            sample_user.id,
            sample_group,
        )

        currency = temp_db.get_currency_by_code("QQQ")
        assert currency.name == "QQQ Currency"
        assert currency.symbol == "QQQ"

    def test_reimport_reuses_accounts_and_duplicates_rows(
        self, csv_import_service, temp_db, sample_user, sample_group
    ):
        content = make_csv(WALLET_EXPENSE, CURRENCY_TRANSFER)

        first = csv_import_service.import_csv(content, sample_user.id, sample_group)
        second = csv_import_service.import_csv(content, sample_user.id, sample_group)

        assert first.imported_accounts == 3
        assert second.imported_accounts == 0
        assert second.success is True
        assert second.warnings[0] == "Import finished with warnings"
        assert 'Account "Wallet" already exists' in second.warnings
        assert 'Account "Tinkoff" already exists' in second.warnings
        assert len(temp_db.list_accounts(group_id=sample_group)) == 3
        assert len(temp_db.list_transactions(group_id=sample_group)) == 2
        assert len(temp_db.list_transfers(group_id=sample_group)) == 2

    def test_account_of_other_group_is_not_reused(
        self, csv_import_service, group_service, temp_db, sample_user, sample_group
    ):
        csv_import_service.import_csv(make_csv(WALLET_EXPENSE), sample_user.id, sample_group)
        family = group_service.create_group(sample_user.id, "Family")

        result = csv_import_service.import_csv(make_csv(WALLET_EXPENSE), sample_user.id, family)

        assert result.imported_accounts == 1
        assert result.warnings == []

    def test_parse_errors_are_reported_and_other_rows_imported(
        self, csv_import_service, sample_user, sample_group
    ):
        content = make_csv(
            WALLET_EXPENSE,
            "2024-01-19,Cafe,,,Wallet,abc,RUB,,,,2024-01-19,2024-01-19",
        )

        result = csv_import_service.import_csv(content, sample_user.id, sample_group)

        assert result.success is False
        assert result.imported_transactions == 1
        assert result.errors[0] == "Parse errors: 1 rows"
        assert result.errors[1].startswith("Row 3: Invalid amount format")

    def test_persistence_failure_is_row_scoped(
        self, csv_import_service, temp_db, sample_user, sample_group
    ):
        # A zero amount violates the positive-amount constraint on insert.
        content = make_csv(
            "2024-01-15,Food,Shop,,Wallet,0,RUB,,,,2024-01-15,2024-01-15",
            WALLET_EXPENSE,
        )

        result = csv_import_service.import_csv(content, sample_user.id, sample_group)

        assert result.success is False
        assert result.imported_transactions == 1
        assert len(result.errors) == 1
        assert result.errors[0].startswith('Failed to create transaction "Shop" (expense, 0 RUB):')
        assert len(temp_db.list_transactions(group_id=sample_group)) == 1

    def test_transfer_within_one_account_is_row_error(
        self, csv_import_service, temp_db, sample_user, sample_group
    ):
        content = make_csv(
            "2024-01-18,,,,Wallet,100,RUB,Wallet,100,RUB,2024-01-18,2024-01-18",
            WALLET_EXPENSE,
        )

        result = csv_import_service.import_csv(content, sample_user.id, sample_group)

        assert result.success is False
        assert result.imported_transactions == 1
        assert result.imported_transfers == 0
        assert len(result.errors) == 1
        assert result.errors[0].startswith('Failed to create transfer "Transaction"')
        assert result.errors[0].endswith("Source and destination account are the same: Wallet")
        assert temp_db.list_transfers(group_id=sample_group) == []

    def test_empty_content(self, csv_import_service, sample_user, sample_group):
        result = csv_import_service.import_csv("", sample_user.id, sample_group)

        assert result.success is False
        assert result.errors == ["Parse errors: 1 rows", "Row 0: CSV file is empty"]

    def test_fixture_file(self, csv_import_service, fixtures_dir, sample_user, sample_group):
        content = (fixtures_dir / "zenmoney_export.csv").read_text(encoding="utf-8")

        result = csv_import_service.import_csv(content, sample_user.id, sample_group)

        assert isinstance(result, ImportResult)
        assert result.imported_accounts == 3
        assert result.imported_transactions == 2
        assert result.imported_transfers == 1
        assert result.success is False
        assert result.errors[0] == "Parse errors: 1 rows"


class TestPreview:
    def test_preview_counts_and_samples(self, csv_import_service, temp_db, fixtures_dir):
        content = (fixtures_dir / "zenmoney_export.csv").read_text(encoding="utf-8")

        preview = csv_import_service.preview(content)

        assert preview.summary.total_rows == 4
        assert preview.summary.transactions_count == 2
        assert preview.summary.transfers_count == 1
        assert preview.summary.accounts_count == 3
        assert preview.summary.errors_count == 1
        assert preview.errors[0].startswith("Row 6:")
        assert temp_db.list_accounts() == []

    def test_preview_samples_at_most_ten(self, csv_import_service):
        rows = [
            f"2024-01-{day:02d},Food,,,Wallet,{day},RUB,,,,2024-01-{day:02d},2024-01-{day:02d}"
            for day in range(1, 16)
        ]

        preview = csv_import_service.preview(make_csv(*rows))

        assert preview.summary.transactions_count == 15
        assert len(preview.sample_transactions) == 10


class TestValidate:
    def test_valid_file(self, csv_import_service):
        report = csv_import_service.validate(make_csv(WALLET_EXPENSE))

        assert report.is_valid is True
        assert report.errors == ()
        assert report.warnings == ()

    def test_header_only_is_invalid(self, csv_import_service):
        report = csv_import_service.validate(HEADER)

        assert report.is_valid is False
        assert report.errors == ("File must contain a header and at least one data row",)

    def test_missing_headers_listed(self, csv_import_service):
        content = "\n".join([
            "date,outcomeAccountName,outcome,createdDate,changedDate",
            "2024-01-15,Wallet,10,2024-01-15,2024-01-15",
        ])

        report = csv_import_service.validate(content)

        assert report.is_valid is False
        assert report.errors[0].startswith("Missing required headers: categoryName, payee")

    def test_row_errors_are_warnings(self, csv_import_service):
        report = csv_import_service.validate(make_csv(
            WALLET_EXPENSE,
            "2024-01-19,Cafe,,,Wallet,abc,RUB,,,,2024-01-19,2024-01-19",
        ))

        assert report.is_valid is True
        assert report.warnings == ("Found 1 rows with errors",)

    def test_no_rows_with_amounts_is_invalid(self, csv_import_service):
        report = csv_import_service.validate(make_csv(
            "2024-01-18,Misc,,,,,,,,,2024-01-18,2024-01-18"
        ))

        assert report.is_valid is False
        assert "No valid transactions or transfers found" in report.errors
        assert "No accounts found" in report.errors

    def test_validate_is_deterministic(self, csv_import_service, fixtures_dir):
        content = (fixtures_dir / "zenmoney_export.csv").read_text(encoding="utf-8")

        assert csv_import_service.validate(content) == csv_import_service.validate(content)


class TestRun:
    def test_preview_action(self, csv_import_service, temp_db, sample_user, sample_group):
        outcome = csv_import_service.run(make_csv(WALLET_EXPENSE), "preview", sample_user.id, sample_group)

        assert isinstance(outcome, ImportPreview)
        assert temp_db.list_transactions(group_id=sample_group) == []

    def test_import_action(self, csv_import_service, sample_user, sample_group):
        outcome = csv_import_service.run(make_csv(WALLET_EXPENSE), "import", sample_user.id, sample_group)

        assert isinstance(outcome, ImportResult)
        assert outcome.imported_transactions == 1

    def test_invalid_file_raises_with_report(self, csv_import_service, sample_user, sample_group):
        with pytest.raises(ValidationError) as exc_info:
            csv_import_service.run(HEADER, "import", sample_user.id, sample_group)

        assert exc_info.value.errors == ["File must contain a header and at least one data row"]

    def test_unknown_action(self, csv_import_service, sample_user, sample_group):
        with pytest.raises(ValidationError, match="Unknown action"):
            csv_import_service.run(make_csv(WALLET_EXPENSE), "delete", sample_user.id, sample_group)
