"""Unified, paginated listing of transactions and transfers."""

from typing import Iterable, Optional

from homefin.database.base import Database
from homefin.domain.entities import Operation, OperationPage
from homefin.domain.errors import ValidationError

DEFAULT_PAGE_SIZE = 20


def _matches_accounts(operation: Operation, account_ids: set[int]) -> bool:
    return (
        operation.primary_account_id in account_ids
        or operation.secondary_account_id in account_ids
    )


class OperationService:
    """Service for browsing a group's operations."""

    def __init__(self, db: Database):
        """Initialize operation service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_operations(
        self,
        group_id: str,
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
        account_ids: Optional[Iterable[int]] = None,
    ) -> OperationPage:
        """List a page of operations, newest first.

        Transactions and transfers are merged and ordered by date, then by
        creation time, both descending.

        Args:
            group_id: Group ID
            page: 1-based page number
            limit: Page size
            account_ids: Restrict to operations touching any of these accounts

        Returns:
            OperationPage

        Raises:
            ValidationError: If page or limit is not positive
        """
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if limit < 1:
            raise ValidationError("Limit must be at least 1")

        operations = [Operation.from_entry(t) for t in self.db.list_transactions(group_id=group_id)]
        operations.extend(Operation.from_entry(t) for t in self.db.list_transfers(group_id=group_id))

        if account_ids:
            wanted = set(account_ids)
            operations = [op for op in operations if _matches_accounts(op, wanted)]

        operations.sort(key=lambda op: (op.date, op.created_at), reverse=True)

        start = (page - 1) * limit
        return OperationPage(
            operations=tuple(operations[start : start + limit]),
            page=page,
            limit=limit,
            total=len(operations),
        )
