"""Transaction history domain service."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from typing import Optional

from bankdash.database.base import Database
from bankdash.domain.bank import BankService
from bankdash.domain.entities import Account, AccountsSummary, Transaction, User
from bankdash.domain.errors import (
    NotAuthenticatedError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)
from bankdash.domain.pagination import Page, paginate

logger = logging.getLogger(__name__)

NOT_LOGGED_IN = "User not logged in or session expired."
NO_ACCOUNTS = "No accounts found."
NO_VALID_ACCOUNT_ID = "No valid account ID found."
ACCOUNT_FETCH_FAILED = "Failed to fetch account details."

PROCESSING_WINDOW = timedelta(days=2)


def transaction_status(txn_date: datetime, now: Optional[datetime] = None) -> str:
    """Return "Processing" for transactions from the last two days, else "Success"."""
    if now is None:
        now = datetime.now(UTC)
    return "Processing" if txn_date > now - PROCESSING_WINDOW else "Success"


@dataclass(frozen=True)
class TransactionHistory:
    """Everything the transaction history view shows."""

    user: User
    accounts: AccountsSummary
    account: Account
    page: Page[Transaction]


class TransactionHistoryService:
    """Service resolving the data behind the transaction history view."""

    def __init__(self, db: Database, bank_service: BankService):
        """Initialize transaction history service.

        Args:
            db: Document store used for the session lookup
            bank_service: Bank service for accounts and transactions
        """
        self.db = db
        self.bank_service = bank_service

    def load(
        self,
        session_token: Optional[str],
        bank_id: Optional[str] = None,
        page: int = 1,
    ) -> TransactionHistory:
        """Load one page of an account's transaction history.

        Args:
            session_token: Session token of the logged-in user
            bank_id: Bank document ID to show (defaults to the first account)
            page: 1-based page number

        Returns:
            TransactionHistory for the requested page

        Raises:
            NotAuthenticatedError: If there is no valid session
            NotFoundError: If the user has no linked accounts
            ValidationError: If no account ID is given and the first
                account could not be retrieved
            UpstreamError: If the account details cannot be fetched
        """
        user = self.db.get_logged_in_user(session_token) if session_token else None
        if user is None:
            raise NotAuthenticatedError(NOT_LOGGED_IN)

        accounts = self.bank_service.get_accounts(user.id)
        if not accounts.is_ok or not accounts.value.accounts:
            raise NotFoundError(NO_ACCOUNTS)

        # The first bank may have failed to load, leaving no default
        if not bank_id:
            first = accounts.value.accounts[0]
            bank_id = first.bank_id if first is not None else None
        if not bank_id:
            raise ValidationError(NO_VALID_ACCOUNT_ID)

        detail = self.bank_service.get_account(bank_id)
        if not detail.is_ok:
            logger.error("Account %s unavailable: %s", bank_id, detail.message)
            raise UpstreamError(ACCOUNT_FETCH_FAILED)

        return TransactionHistory(
            user=user,
            accounts=accounts.value,
            account=detail.value.account,
            page=paginate(detail.value.transactions, page),
        )
