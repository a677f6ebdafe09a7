"""Mappers from SQLAlchemy ORM rows to domain entities."""

from decimal import Decimal

from homefin.database import models
from homefin.domain import entities as domain


def user_to_domain(user: models.User) -> domain.User:
    """Convert ORM User to domain User."""
    return domain.User(
        id=user.id,
        email=user.email,
        name=user.name,
        created_at=user.created_at,
    )


def group_to_domain(group: models.Group) -> domain.Group:
    """Convert ORM Group to domain Group."""
    return domain.Group(
        id=group.id,
        name=group.name,
        created_by=group.created_by,
        is_default=bool(group.is_default),
        created_at=group.created_at,
    )


def group_member_to_domain(member: models.GroupMember) -> domain.GroupMember:
    """Convert ORM GroupMember to domain GroupMember."""
    return domain.GroupMember(
        group_id=member.group_id,
        user_id=member.user_id,
        role=domain.GroupRole(member.role),
        joined_at=member.joined_at,
    )


def currency_to_domain(currency: models.Currency) -> domain.Currency:
    """Convert ORM Currency to domain Currency."""
    return domain.Currency(
        id=currency.id,
        code=currency.code,
        name=currency.name,
        symbol=currency.symbol,
        is_active=bool(currency.is_active),
    )


def account_to_domain(account: models.Account) -> domain.Account:
    """Convert ORM Account to domain Account."""
    return domain.Account(
        id=account.id,
        name=account.name,
        type=domain.AccountType(account.type),
        balance=Decimal(account.balance),
        currency_id=account.currency_id,
        user_id=account.user_id,
        group_id=account.group_id,
        created_at=account.created_at,
        currency_code=account.currency.code if account.currency is not None else None,
    )


def transaction_to_domain(txn: models.Transaction) -> domain.Transaction:
    """Convert ORM Transaction to domain Transaction."""
    return domain.Transaction(
        id=txn.id,
        amount=Decimal(txn.amount),
        description=txn.description,
        category=txn.category,
        kind=domain.TransactionKind(txn.type),
        date=txn.date,
        account_id=txn.account_id,
        user_id=txn.user_id,
        group_id=txn.group_id,
        created_at=txn.created_at,
    )


def transfer_to_domain(transfer: models.Transfer) -> domain.Transfer:
    """Convert ORM Transfer to domain Transfer."""
    return domain.Transfer(
        id=transfer.id,
        from_amount=Decimal(transfer.from_amount),
        to_amount=Decimal(transfer.to_amount),
        description=transfer.description,
        date=transfer.date,
        from_account_id=transfer.from_account_id,
        to_account_id=transfer.to_account_id,
        user_id=transfer.user_id,
        group_id=transfer.group_id,
        created_at=transfer.created_at,
    )
