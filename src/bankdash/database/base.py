"""Abstract document store interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import Optional

from bankdash.domain.entities import Bank, Transfer, User


class Database(ABC):
    """Abstract document store interface for bankdash.

    Holds the local records Plaid does not know about: users and their
    sessions, bank links and transfers between linked banks.
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

    # User and session operations
    @abstractmethod
    def create_user(self, email: str, first_name: str, last_name: str) -> str:
        """Create a user. Returns the user document ID."""
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """Get user by document ID."""
        pass

    @abstractmethod
    def create_session(self, user_id: str, expires_at: Optional[datetime] = None) -> str:
        """Create a session for a user. Returns the session token."""
        pass

    @abstractmethod
    def get_logged_in_user(self, session_token: str) -> Optional[User]:
        """Get the user owning an unexpired session, or None."""
        pass

    # Bank operations
    @abstractmethod
    def create_bank(
        self,
        user_id: str,
        account_id: str,
        item_id: str,
        access_token: str,
        shareable_id: Optional[str] = None,
    ) -> str:
        """Link a bank to a user. Returns the bank document ID."""
        pass

    @abstractmethod
    def get_banks(self, user_id: str) -> list[Bank]:
        """List banks linked to a user, oldest first."""
        pass

    @abstractmethod
    def get_bank(self, document_id: str) -> Optional[Bank]:
        """Get bank by document ID."""
        pass

    # Transfer operations
    @abstractmethod
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
        """Record a transfer between two linked banks. Returns the transfer document ID."""
        pass

    @abstractmethod
    def get_transfers_by_bank_id(self, bank_id: str) -> list[Transfer]:
        """List transfers where the bank is either sender or receiver."""
        pass
