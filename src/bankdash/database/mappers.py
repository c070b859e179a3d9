"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, keeping storage details such as
SQLite's naive timestamps out of the domain.
"""

from datetime import datetime, UTC
from typing import Optional

from bankdash.domain import entities as domain
from bankdash.database.models import (
    User as ORMUser,
    Bank as ORMBank,
    Transfer as ORMTransfer,
)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to timestamps that come back naive from SQLite."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        email=orm_user.email,
        first_name=orm_user.first_name,
        last_name=orm_user.last_name,
        created_at=_as_utc(orm_user.created_at),
    )


def bank_to_domain(orm_bank: ORMBank) -> domain.Bank:
    """Convert SQLAlchemy Bank model to domain Bank entity."""
    return domain.Bank(
        id=orm_bank.id,
        user_id=orm_bank.user_id,
        account_id=orm_bank.account_id,
        item_id=orm_bank.item_id,
        access_token=orm_bank.access_token,
        shareable_id=orm_bank.shareable_id,
        created_at=_as_utc(orm_bank.created_at),
    )


def transfer_to_domain(orm_transfer: ORMTransfer) -> domain.Transfer:
    """Convert SQLAlchemy Transfer model to domain Transfer entity."""
    return domain.Transfer(
        id=orm_transfer.id,
        name=orm_transfer.name,
        amount=orm_transfer.amount,
        channel=orm_transfer.channel,
        category=orm_transfer.category,
        sender_id=orm_transfer.sender_id,
        sender_bank_id=orm_transfer.sender_bank_id,
        receiver_id=orm_transfer.receiver_id,
        receiver_bank_id=orm_transfer.receiver_bank_id,
        email=orm_transfer.email,
        created_at=_as_utc(orm_transfer.created_at),
    )
