"""Transfer domain service."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from bankdash.database.base import Database
from bankdash.domain.entities import Transfer as TransferEntity
from bankdash.domain.errors import NotFoundError, ValidationError, bank_not_found


class TransferService:
    """Service for recording transfers between linked banks."""

    def __init__(self, db: Database):
        """Initialize transfer service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_transfer(
        self,
        name: str,
        amount: Decimal,
        sender_bank_id: str,
        receiver_bank_id: str,
        channel: str = "online",
        category: str = "Transfer",
        email: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> str:
        """Record a transfer.

        Args:
            name: Description shown in the transaction list
            amount: Positive amount moved
            sender_bank_id: Bank document ID money leaves
            receiver_bank_id: Bank document ID money arrives at
            channel: Payment channel
            category: Category label
            email: Optional receiver email
            created_at: Optional timestamp (defaults to now)

        Returns:
            Transfer document ID

        Raises:
            ValidationError: If amount is not positive or both banks are the same
            NotFoundError: If either bank doesn't exist
        """
        if amount <= 0:
            raise ValidationError(f"Transfer amount must be positive, got {amount}")
        if sender_bank_id == receiver_bank_id:
            raise ValidationError("Sender and receiver banks must differ")

        for bank_id in (sender_bank_id, receiver_bank_id):
            if self.db.get_bank(bank_id) is None:
                raise NotFoundError(bank_not_found(bank_id))

        return self.db.create_transfer(
            name=name,
            amount=amount,
            sender_bank_id=sender_bank_id,
            receiver_bank_id=receiver_bank_id,
            channel=channel,
            category=category,
            email=email,
            created_at=created_at,
        )

    def list_transfers(self, bank_id: str) -> list[TransferEntity]:
        """List transfers sent or received by a bank."""
        return self.db.get_transfers_by_bank_id(bank_id)
