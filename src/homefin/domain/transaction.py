"""Transaction domain service."""

from typing import Optional
from datetime import datetime
from decimal import Decimal

from homefin.database.base import Database
from homefin.domain.account import AccountService
from homefin.domain.entities import Transaction as TransactionEntity, TransactionKind
from homefin.domain.errors import NotFoundError, ValidationError, transaction_not_found
from homefin.domain.group import GroupService
from homefin.utils.amount_parser import to_money


def _validate_amount(amount: Decimal) -> Decimal:
    amount = to_money(amount)
    if amount <= 0:
        raise ValidationError("Amount must be greater than zero")
    return amount


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db
        self.account_service = AccountService(db)
        self.group_service = GroupService(db)

    def create_transaction(
        self,
        user_id: str,
        group_id: str,
        account_id: int,
        amount: Decimal,
        kind: TransactionKind,
        description: str,
        category: str,
        date: datetime,
    ) -> int:
        """Create a transaction.

        Args:
            user_id: Acting user ID
            group_id: Group to book the transaction in
            account_id: Account ID, must belong to the user
            amount: Positive amount in the account's currency
            kind: Expense or income
            description: Description
            category: Category name
            date: Transaction date

        Returns:
            Transaction ID

        Raises:
            ValidationError: If amount is not positive or description is empty
            PermissionDeniedError: If the user is outside the group or does not own the account
        """
        amount = _validate_amount(amount)
        if not description or not description.strip():
            raise ValidationError("Description cannot be empty")

        self.group_service.require_membership(user_id, group_id)
        self.account_service.get_owned_account(user_id, account_id)

        return self.db.create_transaction(
            amount=amount,
            description=description.strip(),
            category=category.strip() if category else "Uncategorized",
            kind=kind,
            date=date,
            account_id=account_id,
            user_id=user_id,
            group_id=group_id,
        )

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def _get_owned(self, user_id: str, transaction_id: int) -> TransactionEntity:
        txn = self.db.get_transaction(transaction_id)
        if txn is None or txn.user_id != user_id:
            raise NotFoundError(transaction_not_found(transaction_id))
        return txn

    def update_transaction(
        self,
        user_id: str,
        transaction_id: int,
        amount: Optional[Decimal] = None,
        kind: Optional[TransactionKind] = None,
        description: Optional[str] = None,
        category: Optional[str] = None,
        date: Optional[datetime] = None,
        account_id: Optional[int] = None,
    ) -> None:
        """Update transaction fields.

        Raises:
            NotFoundError: If the transaction does not exist or belongs to another user
            PermissionDeniedError: If the new account is not owned by the user
            ValidationError: If the new amount is not positive
        """
        self._get_owned(user_id, transaction_id)

        if amount is not None:
            amount = _validate_amount(amount)
        if account_id is not None:
            self.account_service.get_owned_account(user_id, account_id)

        self.db.update_transaction(
            transaction_id=transaction_id,
            amount=amount,
            description=description,
            category=category,
            kind=kind,
            date=date,
            account_id=account_id,
        )

    def delete_transaction(self, user_id: str, transaction_id: int) -> None:
        """Delete a transaction the user created.

        Raises:
            NotFoundError: If the transaction does not exist or belongs to another user
        """
        self._get_owned(user_id, transaction_id)
        self.db.delete_transaction(transaction_id)

    def list_transactions(
        self,
        group_id: str,
        account_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[TransactionEntity]:
        """List a group's transactions, newest first."""
        return self.db.list_transactions(
            group_id=group_id, account_id=account_id, start_date=start_date, end_date=end_date
        )
