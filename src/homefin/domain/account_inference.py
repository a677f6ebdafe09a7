"""Account inference from the account names used in an import."""

from typing import Sequence

from homefin.domain.entities import AccountType
from homefin.domain.import_models import ParsedAccount

DEFAULT_ACCOUNT_CURRENCY = "RUB"

# Ordered: the first rule with a matching keyword wins.
ACCOUNT_TYPE_RULES: Sequence[tuple[AccountType, tuple[str, ...]]] = (
    (AccountType.BANK, ("накопительный", "вклад", "savings", "deposit")),
    (AccountType.INVESTMENT, ("инвестиции", "инвестиционный", "investment", "broker")),
    (AccountType.CREDIT, ("кредит", "займ", "credit", "loan")),
    (AccountType.CASH, ("кошелек", "наличные", "cash", "wallet")),
    (AccountType.BANK, ("tinkoff", "сбербанк", "банк", "bank")),
)


def infer_account_type(name: str) -> AccountType:
    """Guess the account type from keywords in its name.

    Args:
        name: Account name as it appears in the CSV

    Returns:
        Inferred AccountType, OTHER when nothing matches
    """
    lower_name = name.lower()
    for account_type, keywords in ACCOUNT_TYPE_RULES:
        if any(keyword in lower_name for keyword in keywords):
            return account_type
    return AccountType.OTHER


class AccountCurrencyTally:
    """Counts how often each account name appears with each currency.

    Both levels keep insertion order, which decides dominant-currency ties.
    """

    def __init__(self):
        self._counts: dict[str, dict[str, int]] = {}

    def record(self, account_name: str, currency_code: str) -> None:
        """Count one row referencing ``account_name`` in ``currency_code``."""
        if not account_name:
            return
        currencies = self._counts.setdefault(account_name, {})
        currencies[currency_code] = currencies.get(currency_code, 0) + 1

    def counts(self, account_name: str) -> dict[str, int]:
        """Return a copy of the currency counts for one account."""
        return dict(self._counts.get(account_name, {}))

    def dominant_currency(self, account_name: str) -> str:
        """Most frequent currency for an account, first seen wins ties."""
        dominant = DEFAULT_ACCOUNT_CURRENCY
        max_count = 0
        for currency_code, count in self._counts.get(account_name, {}).items():
            if count > max_count:
                max_count = count
                dominant = currency_code
        return dominant

    def infer_accounts(self) -> list[ParsedAccount]:
        """Build one ParsedAccount per recorded name, in first-seen order."""
        return [
            ParsedAccount(
                name=name,
                inferred_type=infer_account_type(name),
                dominant_currency_code=self.dominant_currency(name),
            )
            for name in self._counts
        ]
