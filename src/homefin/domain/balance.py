"""Derived account balances and portfolio totals.

Account balances are never stored: the opening balance is replayed against
every transaction and transfer leg that references the account.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Callable, Iterable

from homefin.database.base import Database
from homefin.domain.entities import (
    Account,
    AccountBalance,
    Transaction,
    TransactionKind,
    Transfer,
)
from homefin.domain.errors import NotFoundError, account_not_found
from homefin.domain.exchange_rates import ExchangeRateService
from homefin.utils.amount_parser import to_money

Converter = Callable[[Decimal, str], Decimal]


def account_balance(
    account: Account,
    transactions: Iterable[Transaction],
    transfers: Iterable[Transfer],
) -> Decimal:
    """Replay entries against an account's opening balance.

    Entries that do not reference the account are ignored.

    Args:
        account: Account entity
        transactions: Transactions to replay
        transfers: Transfers to replay

    Returns:
        Current balance in the account's own currency
    """
    balance = Decimal(account.balance)
    for txn in transactions:
        if txn.account_id != account.id:
            continue
        if txn.kind == TransactionKind.INCOME:
            balance += txn.amount
        else:
            balance -= txn.amount
    for transfer in transfers:
        if transfer.from_account_id == account.id:
            balance -= transfer.from_amount
        if transfer.to_account_id == account.id:
            balance += transfer.to_amount
    return balance


def portfolio_total(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
    converter: Converter,
) -> Decimal:
    """Sum income minus expense across accounts in the reference currency.

    Subtotals are built per currency of the owning account, converted once
    each and summed. Transfers and opening balances are not included.
    """
    currency_by_account = {account.id: account.currency_code for account in accounts}
    subtotals: dict[str, Decimal] = defaultdict(Decimal)
    for txn in transactions:
        code = currency_by_account.get(txn.account_id)
        if code is None:
            continue
        if txn.kind == TransactionKind.INCOME:
            subtotals[code] += txn.amount
        else:
            subtotals[code] -= txn.amount
    return sum(
        (converter(subtotal, code) for code, subtotal in subtotals.items()),
        Decimal("0"),
    )


class BalanceService:
    """Service computing balances for accounts and groups."""

    def __init__(self, db: Database, rates: ExchangeRateService):
        """Initialize balance service.

        Args:
            db: Database instance
            rates: Exchange rate service used for reference-currency figures
        """
        self.db = db
        self.rates = rates

    def _to_balance(
        self, account: Account, transactions: list[Transaction], transfers: list[Transfer]
    ) -> AccountBalance:
        balance = account_balance(account, transactions, transfers)
        code = account.currency_code or self.rates.reference_currency
        return AccountBalance(
            account=account,
            currency_code=code,
            balance=to_money(balance),
            reference_balance=to_money(self.rates.convert(balance, code)),
        )

    def get_account_balance(self, account_id: int) -> AccountBalance:
        """Compute the current balance of one account.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        transactions = self.db.list_transactions(account_id=account_id)
        transfers = self.db.list_transfers(account_id=account_id)
        return self._to_balance(account, transactions, transfers)

    def list_account_balances(self, group_id: str) -> list[AccountBalance]:
        """Compute balances for all accounts of a group."""
        accounts = self.db.list_accounts(group_id=group_id)
        transactions = self.db.list_transactions(group_id=group_id)
        transfers = self.db.list_transfers(group_id=group_id)
        return [self._to_balance(account, transactions, transfers) for account in accounts]

    def get_portfolio_total(self, group_id: str) -> Decimal:
        """Return the group's income minus expense in the reference currency."""
        accounts = self.db.list_accounts(group_id=group_id)
        transactions = self.db.list_transactions(group_id=group_id)
        return to_money(portfolio_total(accounts, transactions, self.rates.convert))
