"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic.

    ``errors`` and ``warnings`` carry a structured report when the failure
    came from a multi-check validation such as a CSV pre-import check.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[list[str]] = None,
        warnings: Optional[list[str]] = None,
    ):
        super().__init__(message)
        self.errors = list(errors or [])
        self.warnings = list(warnings or [])


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class PermissionDeniedError(DomainError):
    """Acting user does not own the entity or is not a group member."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def account_not_owned(account_id: int) -> str:
    """Return message for an account the user may not touch."""
    return f"Account {account_id} not found or you do not have permission to use it"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing or foreign transaction."""
    return (
        f"Transaction {transaction_id} not found or you do not have permission to edit it"
    )


def transfer_not_found(transfer_id: int) -> str:
    """Return message for missing or foreign transfer."""
    return f"Transfer {transfer_id} not found or you do not have permission to edit it"


def group_not_found(group_id: str) -> str:
    """Return message for missing group."""
    return f"Group '{group_id}' not found"


def not_a_member(group_id: str) -> str:
    """Return message when the user is outside the group."""
    return f"You are not a member of group '{group_id}'"


def account_delete_blocked(
    account_id: int, transaction_count: int, transfer_count: int
) -> str:
    """Return message when account has dependent transactions or transfers."""
    parts = []
    if transaction_count > 0:
        parts.append(
            f"{transaction_count} transaction{'s' if transaction_count != 1 else ''}"
        )
    if transfer_count > 0:
        parts.append(f"{transfer_count} transfer{'s' if transfer_count != 1 else ''}")
    return (
        f"Cannot delete account {account_id}: it has {', '.join(parts)}. "
        "Please delete them first."
    )
