"""User domain service."""

from datetime import datetime, timedelta, UTC
from typing import Optional
from bankdash.database.base import Database
from bankdash.domain.entities import Bank as BankEntity, User as UserEntity
from bankdash.domain.errors import NotFoundError, ValidationError, user_not_found


class UserService:
    """Service for managing users, their sessions and bank links."""

    def __init__(self, db: Database):
        """Initialize user service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_user(self, email: str, first_name: str, last_name: str) -> str:
        """Create a new user.

        Args:
            email: Email address (unique)
            first_name: First name
            last_name: Last name

        Returns:
            User document ID

        Raises:
            ValidationError: If the email is blank or malformed
            ConflictError: If a user with that email exists
        """
        email = email.strip()
        if not email or "@" not in email:
            raise ValidationError(f"Invalid email address '{email}'")
        return self.db.create_user(email=email, first_name=first_name, last_name=last_name)

    def get_user(self, user_id: str) -> Optional[UserEntity]:
        """Get user by document ID."""
        return self.db.get_user(user_id)

    def start_session(self, user_id: str, ttl: Optional[timedelta] = None) -> str:
        """Start a session for a user.

        Args:
            user_id: User document ID
            ttl: Optional session lifetime (sessions without one never expire)

        Returns:
            Session token

        Raises:
            NotFoundError: If the user doesn't exist
        """
        if self.db.get_user(user_id) is None:
            raise NotFoundError(user_not_found(user_id))

        expires_at = datetime.now(UTC) + ttl if ttl is not None else None
        return self.db.create_session(user_id, expires_at=expires_at)

    def get_logged_in_user(self, session_token: Optional[str]) -> Optional[UserEntity]:
        """Get the user for a session token, or None if missing or expired."""
        if not session_token:
            return None
        return self.db.get_logged_in_user(session_token)

    def link_bank(
        self,
        user_id: str,
        account_id: str,
        item_id: str,
        access_token: str,
        shareable_id: Optional[str] = None,
    ) -> str:
        """Link a Plaid item to a user.

        Args:
            user_id: User document ID
            account_id: Plaid account ID
            item_id: Plaid item ID
            access_token: Plaid access token for the item
            shareable_id: Optional shareable ID (generated when omitted)

        Returns:
            Bank document ID

        Raises:
            NotFoundError: If the user doesn't exist
            ValidationError: If the access token is blank
        """
        if self.db.get_user(user_id) is None:
            raise NotFoundError(user_not_found(user_id))
        if not access_token.strip():
            raise ValidationError("Access token must not be empty")

        return self.db.create_bank(
            user_id=user_id,
            account_id=account_id,
            item_id=item_id,
            access_token=access_token.strip(),
            shareable_id=shareable_id,
        )

    def list_banks(self, user_id: str) -> list[BankEntity]:
        """List banks linked to a user."""
        return self.db.get_banks(user_id)
