"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from homefin.domain.entities import (
    Account,
    AccountType,
    Currency,
    Group,
    GroupMember,
    GroupRole,
    Transaction,
    TransactionKind,
    Transfer,
    User,
)


class Database(ABC):
    """Abstract database interface for homefin.

    Every read is scoped by explicit owner/group filters; callers decide
    which user and group they act for.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # User operations
    @abstractmethod
    def create_user(self, user_id: str, email: str, name: str) -> str:
        """Create a user. Returns user ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email."""
        pass

    # Group operations
    @abstractmethod
    def create_group(
        self, group_id: str, name: str, created_by: str, is_default: bool = False
    ) -> str:
        """Create a group. Returns group ID."""
        pass

    @abstractmethod
    def get_group(self, group_id: str) -> Optional[Group]:
        """Get group by ID."""
        pass

    @abstractmethod
    def add_group_member(self, group_id: str, user_id: str, role: GroupRole) -> None:
        """Add a user to a group with a role."""
        pass

    @abstractmethod
    def get_group_member(self, group_id: str, user_id: str) -> Optional[GroupMember]:
        """Get a user's membership in a group."""
        pass

    @abstractmethod
    def list_user_memberships(self, user_id: str) -> list[tuple[Group, GroupMember]]:
        """List groups the user belongs to, with the membership rows."""
        pass

    @abstractmethod
    def set_default_group(self, user_id: str, group_id: str) -> None:
        """Clear the default flag on all groups created by the user, then set one.

        Both steps happen in a single database transaction.
        """
        pass

    # Currency operations
    @abstractmethod
    def create_currency(self, code: str, name: str, symbol: str, is_active: bool = True) -> int:
        """Create a currency. Returns currency ID."""
        pass

    @abstractmethod
    def get_currency(self, currency_id: int) -> Optional[Currency]:
        """Get currency by ID."""
        pass

    @abstractmethod
    def get_currency_by_code(self, code: str) -> Optional[Currency]:
        """Get currency by its unique code."""
        pass

    @abstractmethod
    def list_currencies(self, active_only: bool = True) -> list[Currency]:
        """List currencies ordered by code."""
        pass

    # Account operations
    @abstractmethod
    def create_account(
        self,
        name: str,
        account_type: AccountType,
        balance: Decimal,
        currency_id: int,
        user_id: str,
        group_id: str,
    ) -> int:
        """Create an account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def find_account_by_name(
        self, name: str, user_id: Optional[str] = None, group_id: Optional[str] = None
    ) -> Optional[Account]:
        """Find the first account with an exact name, optionally scoped."""
        pass

    @abstractmethod
    def list_accounts(
        self, group_id: Optional[str] = None, user_id: Optional[str] = None
    ) -> list[Account]:
        """List accounts, optionally filtered by group and owner."""
        pass

    @abstractmethod
    def update_account(
        self,
        account_id: int,
        name: Optional[str] = None,
        account_type: Optional[AccountType] = None,
        balance: Optional[Decimal] = None,
        currency_id: Optional[int] = None,
    ) -> None:
        """Update account fields that are not None."""
        pass

    @abstractmethod
    def delete_account(self, account_id: int) -> None:
        """Delete an account."""
        pass

    @abstractmethod
    def get_account_transaction_count(self, account_id: int) -> int:
        """Count transactions booked on an account."""
        pass

    @abstractmethod
    def get_account_transfer_count(self, account_id: int) -> int:
        """Count transfers with the account on either leg."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        amount: Decimal,
        description: str,
        category: str,
        kind: TransactionKind,
        date: datetime,
        account_id: int,
        user_id: str,
        group_id: str,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        kind: Optional[TransactionKind] = None,
        date: Optional[datetime] = None,
        account_id: Optional[int] = None,
    ) -> None:
        """Update transaction fields that are not None."""
        pass

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> None:
        """Delete a transaction."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        group_id: Optional[str] = None,
        account_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transaction]:
        """List transactions, newest first, with optional filters."""
        pass

    # Transfer operations
    @abstractmethod
    def create_transfer(
        self,
        from_amount: Decimal,
        to_amount: Decimal,
        description: str,
        date: datetime,
        from_account_id: int,
        to_account_id: int,
        user_id: str,
        group_id: str,
    ) -> int:
        """Create a transfer. Returns transfer ID."""
        pass

    @abstractmethod
    def get_transfer(self, transfer_id: int) -> Optional[Transfer]:
        """Get transfer by ID."""
        pass

    @abstractmethod
    def update_transfer(
        self,
        transfer_id: int,
        from_amount: Optional[Decimal] = None,
        to_amount: Optional[Decimal] = None,
        description: Optional[str] = None,
        date: Optional[datetime] = None,
        from_account_id: Optional[int] = None,
        to_account_id: Optional[int] = None,
    ) -> None:
        """Update transfer fields that are not None."""
        pass

    @abstractmethod
    def delete_transfer(self, transfer_id: int) -> None:
        """Delete a transfer."""
        pass

    @abstractmethod
    def list_transfers(
        self,
        group_id: Optional[str] = None,
        account_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[Transfer]:
        """List transfers, newest first; ``account_id`` matches either leg."""
        pass
