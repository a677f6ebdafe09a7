"""Period statistics for a group, expressed in the reference currency."""

import logging
from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Optional

from homefin.database.base import Database
from homefin.domain.balance import BalanceService, portfolio_total
from homefin.domain.entities import (
    CategoryTotal,
    CurrencyShare,
    StatisticsReport,
    TransactionKind,
)
from homefin.domain.errors import ValidationError
from homefin.domain.exchange_rates import ExchangeRateService
from homefin.utils.amount_parser import to_money
from homefin.utils.date_parser import PERIODS, get_period_start

logger = logging.getLogger(__name__)

TOP_CATEGORIES = 5


class StatisticsService:
    """Service building income/expense reports."""

    def __init__(self, db: Database, rates: ExchangeRateService):
        """Initialize statistics service.

        Args:
            db: Database instance
            rates: Exchange rate service
        """
        self.db = db
        self.rates = rates
        self.balance_service = BalanceService(db, rates)

    def build_report(
        self, group_id: str, period: str = "month", now: Optional[datetime] = None
    ) -> StatisticsReport:
        """Build a statistics report.

        Transfers move money between the group's own accounts and are
        excluded from income and expense.

        Args:
            group_id: Group ID
            period: One of week, month, quarter, year, all
            now: Reference time for the period window

        Returns:
            StatisticsReport

        Raises:
            ValidationError: If the period is unknown
        """
        if period not in PERIODS:
            raise ValidationError(f"Unknown period '{period}'. Use one of: {', '.join(PERIODS)}")

        start = get_period_start(period, now=now)
        accounts = self.db.list_accounts(group_id=group_id)
        currency_by_account = {a.id: a.currency_code for a in accounts}
        transactions = self.db.list_transactions(group_id=group_id, start_date=start)

        total_income = Decimal("0")
        total_expense = Decimal("0")
        category_amounts: dict[str, Decimal] = defaultdict(Decimal)
        category_counts: dict[str, int] = defaultdict(int)

        for txn in transactions:
            code = currency_by_account.get(txn.account_id) or self.rates.reference_currency
            converted = self.rates.convert(txn.amount, code)
            if txn.kind == TransactionKind.INCOME:
                total_income += converted
            else:
                total_expense += converted
                category_amounts[txn.category] += converted
                category_counts[txn.category] += 1

        top_categories = sorted(
            (
                CategoryTotal(category=name, amount=to_money(amount), count=category_counts[name])
                for name, amount in category_amounts.items()
            ),
            key=lambda c: (-c.amount, c.category),
        )[:TOP_CATEGORIES]

        balances = self.balance_service.list_account_balances(group_id)
        shares: dict[str, list] = defaultdict(lambda: [Decimal("0"), Decimal("0"), 0])
        for item in balances:
            share = shares[item.currency_code]
            share[0] += item.balance
            share[1] += item.reference_balance
            share[2] += 1
        currency_distribution = tuple(
            CurrencyShare(
                currency_code=code,
                total=to_money(total),
                reference_total=to_money(reference_total),
                account_count=count,
            )
            for code, (total, reference_total, count) in sorted(
                shares.items(), key=lambda item: -item[1][1]
            )
        )

        logger.debug(f"Built {period} report for group {group_id}: {len(transactions)} transactions")
        return StatisticsReport(
            group_id=group_id,
            period=period,
            reference_currency=self.rates.reference_currency,
            total_income=to_money(total_income),
            total_expense=to_money(total_expense),
            transaction_count=len(transactions),
            portfolio_total=to_money(portfolio_total(accounts, transactions, self.rates.convert)),
            top_categories=tuple(top_categories),
            currency_distribution=currency_distribution,
            account_balances=tuple(balances),
        )
