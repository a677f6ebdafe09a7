"""Parser for the ZenMoney CSV export.

The export is comma separated with double-quote quoting. Quotes only toggle
the quoted state; there is no escaped-quote handling, so the stdlib csv
module is not used here.
"""

import logging

from homefin.domain.account_inference import AccountCurrencyTally
from homefin.domain.classifier import classify_row
from homefin.domain.import_models import CsvParseResult, ParseError, ParsedRow

logger = logging.getLogger(__name__)

BOM = "\ufeff"


def split_fields(line: str) -> list[str]:
    """Split one CSV line into trimmed fields.

    A comma inside an open quote is kept as text; every ``"`` toggles the
    quote state and is dropped.

    Args:
        line: Raw CSV line

    Returns:
        List of field values
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def map_fields(line: str, headers: list[str]) -> dict[str, str]:
    """Map a line's fields to header names by position."""
    fields = split_fields(line)
    return {
        header: fields[index] if index < len(fields) else ""
        for index, header in enumerate(headers)
    }


def split_lines(content: str) -> list[str]:
    """Strip the BOM, trim the content and split it into lines."""
    if content.startswith(BOM):
        content = content[len(BOM):]
    content = content.strip()
    if not content:
        return []
    return [line.rstrip("\r") for line in content.split("\n")]


def parse_csv(content: str) -> CsvParseResult:
    """Parse export text into transactions, transfers and inferred accounts.

    Rows are processed independently: a row that fails validation or
    parsing becomes a ParseError and the next row is processed as usual.
    Blank lines are skipped without being counted as errors.

    Args:
        content: Full CSV text, header line first

    Returns:
        CsvParseResult with transactions, transfers, accounts and errors
    """
    result = CsvParseResult()
    lines = split_lines(content)

    if not lines:
        result.errors.append(ParseError(row=0, message="CSV file is empty"))
        return result

    headers = split_fields(lines[0])
    tally = AccountCurrencyTally()

    for index, raw_line in enumerate(lines[1:], start=1):
        line = raw_line.strip()
        if not line:
            continue

        try:
            row = ParsedRow.from_fields(map_fields(line, headers), index + 1, line)
            classification = classify_row(row)
        except Exception as e:
            result.errors.append(ParseError(row=index + 1, message=str(e), raw_line=line))
            continue

        if classification.transaction is not None:
            transaction = classification.transaction
            result.transactions.append(transaction)
            tally.record(transaction.account_name, transaction.currency_code)

        if classification.transfer is not None:
            transfer = classification.transfer
            result.transfers.append(transfer)
            tally.record(transfer.from_account_name, transfer.from_currency_code)
            tally.record(transfer.to_account_name, transfer.to_currency_code)

    result.accounts = tally.infer_accounts()

    logger.debug(
        f"Parsed {len(result.transactions)} transactions, {len(result.transfers)} transfers, "
        f"{len(result.accounts)} accounts, {len(result.errors)} errors"
    )
    return result
