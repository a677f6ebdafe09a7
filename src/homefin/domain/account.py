"""Account domain service."""

from decimal import Decimal
from typing import Optional

from homefin.database.base import Database
from homefin.domain.currency import CurrencyService
from homefin.domain.entities import Account as AccountEntity, AccountType
from homefin.domain.errors import (
    DependencyError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    account_delete_blocked,
    account_not_found,
    account_not_owned,
)
from homefin.domain.group import GroupService
from homefin.utils.amount_parser import to_money


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db
        self.currency_service = CurrencyService(db)
        self.group_service = GroupService(db)

    def create_account(
        self,
        user_id: str,
        group_id: str,
        name: str,
        account_type: AccountType,
        currency_code: str,
        balance: Decimal = Decimal("0"),
    ) -> int:
        """Create a new account in a group.

        Args:
            user_id: Owning user ID
            group_id: Group the account belongs to
            name: Account name
            account_type: Account type
            currency_code: Currency code, created on demand if unknown
            balance: Opening balance

        Returns:
            Account ID

        Raises:
            ValidationError: If name is empty
            PermissionDeniedError: If the user is not a member of the group
        """
        if not name or not name.strip():
            raise ValidationError("Account name cannot be empty")

        self.group_service.require_membership(user_id, group_id)
        currency = self.currency_service.get_or_create(currency_code)

        return self.db.create_account(
            name=name.strip(),
            account_type=account_type,
            balance=to_money(balance),
            currency_id=currency.id,
            user_id=user_id,
            group_id=group_id,
        )

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def get_owned_account(self, user_id: str, account_id: int) -> AccountEntity:
        """Get an account the user owns.

        Raises:
            PermissionDeniedError: If the account is missing or owned by someone else
        """
        account = self.db.get_account(account_id)
        if account is None or account.user_id != user_id:
            raise PermissionDeniedError(account_not_owned(account_id))
        return account

    def list_accounts(self, group_id: str) -> list[AccountEntity]:
        """List all accounts of a group.

        Returns:
            List of account entities ordered by name
        """
        return self.db.list_accounts(group_id=group_id)

    def find_account(self, group_id: str, account: str | int) -> AccountEntity:
        """Resolve an account by ID or exact name inside a group.

        Args:
            group_id: Group to search
            account: Account ID (int or numeric string) or name

        Returns:
            Account entity

        Raises:
            NotFoundError: If no account matches
        """
        try:
            account_id = int(account)
        except (ValueError, TypeError):
            account_id = None

        if account_id is not None:
            found = self.db.get_account(account_id)
            if found is None or found.group_id != group_id:
                raise NotFoundError(account_not_found(account_id))
            return found

        found = self.db.find_account_by_name(str(account), group_id=group_id)
        if found is None:
            raise NotFoundError(f"Account '{account}' not found")
        return found

    def update_account(
        self,
        user_id: str,
        account_id: int,
        name: Optional[str] = None,
        account_type: Optional[AccountType] = None,
        balance: Optional[Decimal] = None,
        currency_code: Optional[str] = None,
    ) -> None:
        """Update an account the user owns.

        The group is never changed.

        Raises:
            PermissionDeniedError: If the user does not own the account
            ValidationError: If the new name is empty
        """
        self.get_owned_account(user_id, account_id)
        if name is not None and not name.strip():
            raise ValidationError("Account name cannot be empty")

        currency_id = None
        if currency_code is not None:
            currency_id = self.currency_service.get_or_create(currency_code).id

        self.db.update_account(
            account_id=account_id,
            name=name.strip() if name is not None else None,
            account_type=account_type,
            balance=to_money(balance) if balance is not None else None,
            currency_id=currency_id,
        )

    def delete_account(self, user_id: str, account_id: int) -> None:
        """Delete an account.

        Args:
            user_id: Acting user ID
            account_id: Account ID to delete

        Raises:
            PermissionDeniedError: If the user does not own the account
            DependencyError: If transactions or transfers reference the account
        """
        self.get_owned_account(user_id, account_id)

        transaction_count = self.db.get_account_transaction_count(account_id)
        transfer_count = self.db.get_account_transfer_count(account_id)
        if transaction_count > 0 or transfer_count > 0:
            raise DependencyError(
                account_delete_blocked(account_id, transaction_count, transfer_count)
            )

        self.db.delete_account(account_id)
