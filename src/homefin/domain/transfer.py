"""Transfer domain service."""

from typing import Optional
from datetime import datetime
from decimal import Decimal

from homefin.database.base import Database
from homefin.domain.account import AccountService
from homefin.domain.entities import Transfer as TransferEntity
from homefin.domain.errors import NotFoundError, ValidationError, transfer_not_found
from homefin.domain.group import GroupService
from homefin.utils.amount_parser import to_money


class TransferService:
    """Service for managing transfers between accounts."""

    def __init__(self, db: Database):
        """Initialize transfer service.

        Args:
            db: Database instance
        """
        self.db = db
        self.account_service = AccountService(db)
        self.group_service = GroupService(db)

    def _check_legs(
        self,
        user_id: str,
        from_account_id: int,
        to_account_id: int,
        from_amount: Decimal,
        to_amount: Decimal,
    ) -> tuple[Decimal, Decimal]:
        from_amount = to_money(from_amount)
        to_amount = to_money(to_amount)
        if from_amount <= 0 or to_amount <= 0:
            raise ValidationError("Transfer amounts must be greater than zero")

        self.account_service.get_owned_account(user_id, from_account_id)
        self.account_service.get_owned_account(user_id, to_account_id)

        if from_account_id == to_account_id:
            raise ValidationError("Cannot transfer to the same account")
        return from_amount, to_amount

    def create_transfer(
        self,
        user_id: str,
        group_id: str,
        from_account_id: int,
        to_account_id: int,
        from_amount: Decimal,
        to_amount: Decimal,
        description: str,
        date: datetime,
    ) -> int:
        """Create a transfer.

        ``from_amount`` and ``to_amount`` are each in their own account's
        currency; no conversion is stored.

        Args:
            user_id: Acting user ID
            group_id: Group to book the transfer in
            from_account_id: Source account, owned by the user
            to_account_id: Destination account, owned by the user
            from_amount: Amount leaving the source account
            to_amount: Amount arriving in the destination account
            description: Description
            date: Transfer date

        Returns:
            Transfer ID

        Raises:
            ValidationError: If amounts are not positive or both accounts are the same
            PermissionDeniedError: If the user does not own an account or is outside the group
        """
        self.group_service.require_membership(user_id, group_id)
        from_amount, to_amount = self._check_legs(
            user_id, from_account_id, to_account_id, from_amount, to_amount
        )

        return self.db.create_transfer(
            from_amount=from_amount,
            to_amount=to_amount,
            description=description.strip() if description else "",
            date=date,
            from_account_id=from_account_id,
            to_account_id=to_account_id,
            user_id=user_id,
            group_id=group_id,
        )

    def get_transfer(self, transfer_id: int) -> Optional[TransferEntity]:
        """Get transfer by ID."""
        return self.db.get_transfer(transfer_id)

    def _get_owned(self, user_id: str, transfer_id: int) -> TransferEntity:
        transfer = self.db.get_transfer(transfer_id)
        if transfer is None or transfer.user_id != user_id:
            raise NotFoundError(transfer_not_found(transfer_id))
        return transfer

    def update_transfer(
        self,
        user_id: str,
        transfer_id: int,
        from_account_id: Optional[int] = None,
        to_account_id: Optional[int] = None,
        from_amount: Optional[Decimal] = None,
        to_amount: Optional[Decimal] = None,
        description: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> None:
        """Update a transfer; unspecified fields keep their values.

        Raises:
            NotFoundError: If the transfer does not exist or belongs to another user
            ValidationError: If the resulting transfer would be invalid
            PermissionDeniedError: If the user does not own a referenced account
        """
        current = self._get_owned(user_id, transfer_id)
        from_account_id = from_account_id if from_account_id is not None else current.from_account_id
        to_account_id = to_account_id if to_account_id is not None else current.to_account_id
        new_from, new_to = self._check_legs(
            user_id,
            from_account_id,
            to_account_id,
            from_amount if from_amount is not None else current.from_amount,
            to_amount if to_amount is not None else current.to_amount,
        )

        self.db.update_transfer(
            transfer_id=transfer_id,
            from_amount=new_from,
            to_amount=new_to,
            description=description,
            date=date,
            from_account_id=from_account_id,
            to_account_id=to_account_id,
        )

    def delete_transfer(self, user_id: str, transfer_id: int) -> None:
        """Delete a transfer the user created.

        Raises:
            NotFoundError: If the transfer does not exist or belongs to another user
        """
        self._get_owned(user_id, transfer_id)
        self.db.delete_transfer(transfer_id)

    def list_transfers(
        self,
        group_id: str,
        account_id: Optional[int] = None,
        start_date: Optional[datetime] = None,
        end_date: Optional[datetime] = None,
    ) -> list[TransferEntity]:
        """List a group's transfers, newest first."""
        return self.db.list_transfers(
            group_id=group_id, account_id=account_id, start_date=start_date, end_date=end_date
        )
