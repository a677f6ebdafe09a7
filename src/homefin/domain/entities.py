"""Domain model entities for homefin.

These are pure data classes representing business concepts, independent of
database schema. Services and the import pipeline exchange these objects;
the database layer maps its ORM rows onto them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class AccountType(str, Enum):
    """Kind of money holder an account represents."""

    CASH = "cash"
    BANK = "bank"
    CREDIT = "credit"
    INVESTMENT = "investment"
    OTHER = "other"


class TransactionKind(str, Enum):
    """Direction of a transaction relative to its account."""

    EXPENSE = "expense"
    INCOME = "income"


class GroupRole(str, Enum):
    """Role of a user inside a group."""

    ADMIN = "admin"
    MEMBER = "member"


class OperationType(str, Enum):
    """Discriminator for the unified operations view."""

    TRANSACTION = "transaction"
    TRANSFER = "transfer"


@dataclass(frozen=True)
class User:
    """User domain entity."""

    id: str
    email: str
    name: str
    created_at: datetime


@dataclass(frozen=True)
class Group:
    """Group domain entity."""

    id: str
    name: str
    created_by: str
    is_default: bool
    created_at: datetime


@dataclass(frozen=True)
class GroupMember:
    """Membership of a user in a group."""

    group_id: str
    user_id: str
    role: GroupRole
    joined_at: datetime


@dataclass(frozen=True)
class Currency:
    """Currency domain entity."""

    id: int
    code: str
    name: str
    symbol: str
    is_active: bool


@dataclass(frozen=True)
class Account:
    """Account domain entity.

    ``balance`` is the opening balance. The current balance is always
    derived by replaying transactions and transfers.
    """

    id: int
    name: str
    type: AccountType
    balance: Decimal
    currency_id: int
    user_id: str
    group_id: str
    created_at: datetime
    currency_code: Optional[str] = None


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    id: int
    amount: Decimal
    description: str
    category: str
    kind: TransactionKind
    date: datetime
    account_id: int
    user_id: str
    group_id: str
    created_at: datetime


@dataclass(frozen=True)
class Transfer:
    """Transfer domain entity.

    Both legs are face value in their own account's currency.
    """

    id: int
    from_amount: Decimal
    to_amount: Decimal
    description: str
    date: datetime
    from_account_id: int
    to_account_id: int
    user_id: str
    group_id: str
    created_at: datetime


@dataclass(frozen=True)
class Operation:
    """Unified listing view of a transaction or a transfer."""

    operation_type: OperationType
    operation_id: int
    amount: Decimal
    description: str
    date: datetime
    user_id: str
    primary_account_id: int
    created_at: datetime
    category: Optional[str] = None
    kind: Optional[TransactionKind] = None
    secondary_account_id: Optional[int] = None
    secondary_amount: Optional[Decimal] = None

    @classmethod
    def from_entry(cls, entry: Union[Transaction, Transfer]) -> "Operation":
        """Build an operation from a transaction or a transfer."""
        if isinstance(entry, Transfer):
            return cls(
                operation_type=OperationType.TRANSFER,
                operation_id=entry.id,
                amount=entry.from_amount,
                description=entry.description,
                date=entry.date,
                user_id=entry.user_id,
                primary_account_id=entry.from_account_id,
                created_at=entry.created_at,
                secondary_account_id=entry.to_account_id,
                secondary_amount=entry.to_amount,
            )
        return cls(
            operation_type=OperationType.TRANSACTION,
            operation_id=entry.id,
            amount=entry.amount,
            description=entry.description,
            date=entry.date,
            user_id=entry.user_id,
            primary_account_id=entry.account_id,
            created_at=entry.created_at,
            category=entry.category,
            kind=entry.kind,
        )


@dataclass(frozen=True)
class OperationPage:
    """One page of the operations listing."""

    operations: tuple[Operation, ...]
    page: int
    limit: int
    total: int

    @property
    def has_more(self) -> bool:
        return self.page * self.limit < self.total

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0


@dataclass(frozen=True)
class ExchangeRate:
    """Units of the reference currency per one unit of ``currency_code``."""

    currency_code: str
    rate: Decimal
    fetched_at: Optional[datetime] = None


@dataclass(frozen=True)
class AccountBalance:
    """Derived balance of one account."""

    account: Account
    currency_code: str
    balance: Decimal
    reference_balance: Decimal


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total for one category in the reference currency."""

    category: str
    amount: Decimal
    count: int


@dataclass(frozen=True)
class CurrencyShare:
    """Sum of account balances held in one currency."""

    currency_code: str
    total: Decimal
    reference_total: Decimal
    account_count: int


@dataclass(frozen=True)
class StatisticsReport:
    """Aggregated figures for one group over one period."""

    group_id: str
    period: str
    reference_currency: str
    total_income: Decimal
    total_expense: Decimal
    transaction_count: int
    portfolio_total: Decimal
    top_categories: tuple[CategoryTotal, ...] = field(default_factory=tuple)
    currency_distribution: tuple[CurrencyShare, ...] = field(default_factory=tuple)
    account_balances: tuple[AccountBalance, ...] = field(default_factory=tuple)

    @property
    def net(self) -> Decimal:
        return self.total_income - self.total_expense
