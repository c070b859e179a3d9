"""Bank domain service.

Aggregates a user's linked banks with Plaid account, institution and
transaction data. Every operation returns a Result; Plaid failures are
logged and reported as UPSTREAM_FAILURE rather than raised.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal
from typing import Iterable, Optional

from bankdash.config import PlaidConfig
from bankdash.database.base import Database
from bankdash.domain.entities import (
    Account,
    AccountDetail,
    AccountsSummary,
    Bank,
    Institution,
    Transaction,
    Transfer,
)
from bankdash.domain.errors import (
    SyncLimitExceededError,
    UpstreamError,
    bank_not_found,
    no_account_data,
    no_banks_for_user,
    sync_limit_exceeded,
)
from bankdash.domain.result import Result
from bankdash.plaid.base import FinancialAPI
from bankdash.plaid.mappers import (
    account_to_domain,
    institution_to_domain,
    transaction_to_domain,
)

logger = logging.getLogger(__name__)

COUNTRY_CODES = ("US",)

# Malformed Plaid payloads surface as KeyError/TypeError/ValueError while mapping
_FETCH_ERRORS = (UpstreamError, KeyError, TypeError, ValueError)


def transfer_to_transaction(transfer: Transfer, bank_id: str) -> Transaction:
    """Convert a local transfer into a transaction as seen from one bank.

    The transfer is a debit for the sending bank and a credit otherwise.
    """
    return Transaction(
        id=transfer.id,
        name=transfer.name,
        amount=transfer.amount,
        date=transfer.created_at,
        category=transfer.category,
        payment_channel=transfer.channel,
        type="debit" if transfer.sender_bank_id == bank_id else "credit",
    )


def merge_transactions(*feeds: Iterable[Transaction]) -> list[Transaction]:
    """Merge transaction feeds into one list, newest first."""
    merged = [txn for feed in feeds for txn in feed]
    merged.sort(key=lambda txn: txn.date, reverse=True)
    return merged


class BankService:
    """Service for reading accounts and transactions of linked banks."""

    def __init__(self, db: Database, api: FinancialAPI, config: PlaidConfig):
        """Initialize bank service.

        Args:
            db: Document store holding bank links and transfers
            api: Financial data API
            config: Plaid settings (sync page cap, fan-out width)
        """
        self.db = db
        self.api = api
        self.config = config

    def get_accounts(self, user_id: str) -> Result[AccountsSummary]:
        """Get a summarized account for every bank linked to a user.

        Banks are looked up in parallel. A bank whose Plaid data cannot be
        retrieved is logged and kept as a ``None`` entry in the summary.

        Args:
            user_id: User document ID

        Returns:
            Result with an AccountsSummary, or NOT_FOUND if the user has no banks
        """
        logger.info("Fetching banks for user %s", user_id)
        banks = self.db.get_banks(user_id)
        if not banks:
            logger.error("No banks found for user %s", user_id)
            return Result.not_found(no_banks_for_user(user_id))

        workers = min(self.config.max_workers, len(banks))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            accounts = list(executor.map(self._summarize_bank, banks))

        total_current_balance = sum(
            (acc.current_balance or Decimal("0") for acc in accounts if acc is not None),
            Decimal("0"),
        )
        return Result.ok(
            AccountsSummary(
                accounts=accounts,
                total_banks=len(accounts),
                total_current_balance=total_current_balance,
            )
        )

    def _summarize_bank(self, bank: Bank) -> Optional[Account]:
        """Build the account summary for one bank, or None on any Plaid failure."""
        try:
            snapshot = self.api.get_accounts(bank.access_token)
            if not snapshot.accounts:
                logger.error(no_account_data(bank.id))
                return None

            institution = self.get_institution(snapshot.institution_id)
            if not institution.is_ok:
                return None

            return account_to_domain(
                snapshot.accounts[0],
                institution.value,
                bank,
                shareable_id=bank.shareable_id,
            )
        except _FETCH_ERRORS as e:
            logger.error("Error getting account for bank %s: %s", bank.id, e)
            return None

    def get_account(self, bank_id: str) -> Result[AccountDetail]:
        """Get one bank's account with its merged transaction feed.

        Synced Plaid transactions and local transfers touching the bank are
        merged and sorted newest first. A failed sync leaves only the
        transfers.

        Args:
            bank_id: Bank document ID

        Returns:
            Result with an AccountDetail, NOT_FOUND if the bank or its account
            data is missing, UPSTREAM_FAILURE if the accounts or institution
            lookup fails

        Raises:
            SyncLimitExceededError: If the transaction sync does not finish
        """
        logger.info("Fetching bank with document ID %s", bank_id)
        bank = self.db.get_bank(bank_id)
        if bank is None:
            logger.error(bank_not_found(bank_id))
            return Result.not_found(bank_not_found(bank_id))

        try:
            snapshot = self.api.get_accounts(bank.access_token)
        except _FETCH_ERRORS as e:
            logger.error("Error getting account for bank %s: %s", bank.id, e)
            return Result.upstream_failure(str(e))

        if not snapshot.accounts:
            logger.error(no_account_data(bank.id))
            return Result.not_found(no_account_data(bank.id))

        logger.info("Fetching transfers for bank %s", bank.id)
        transfers = [
            transfer_to_transaction(transfer, bank.id)
            for transfer in self.db.get_transfers_by_bank_id(bank.id)
        ]

        institution = self.get_institution(snapshot.institution_id)
        if not institution.is_ok:
            return Result(status=institution.status, message=institution.message)

        synced = self.get_transactions(bank.access_token)
        synced_transactions = synced.value if synced.is_ok else []
        if not synced.is_ok:
            logger.warning(
                "Showing bank %s without synced transactions: %s", bank.id, synced.message
            )

        try:
            account = account_to_domain(snapshot.accounts[0], institution.value, bank)
        except _FETCH_ERRORS as e:
            logger.error("Error getting account for bank %s: %s", bank.id, e)
            return Result.upstream_failure(str(e))

        logger.info("Fetched account %s with %d transactions", account.id,
                    len(synced_transactions) + len(transfers))
        return Result.ok(
            AccountDetail(
                account=account,
                transactions=merge_transactions(synced_transactions, transfers),
            )
        )

    def get_institution(self, institution_id: Optional[str]) -> Result[Institution]:
        """Get institution metadata from Plaid.

        Args:
            institution_id: Plaid institution ID

        Returns:
            Result with an Institution, or UPSTREAM_FAILURE
        """
        if not institution_id:
            logger.error("Plaid item has no institution ID")
            return Result.upstream_failure("Plaid item has no institution ID")

        logger.info("Fetching institution %s", institution_id)
        try:
            payload = self.api.get_institution(institution_id, COUNTRY_CODES)
            return Result.ok(institution_to_domain(payload))
        except _FETCH_ERRORS as e:
            logger.error("Error getting institution %s: %s", institution_id, e)
            return Result.upstream_failure(str(e))

    def get_transactions(self, access_token: str) -> Result[list[Transaction]]:
        """Collect all added transactions through Plaid's cursor-based sync.

        Starts from an empty cursor and stops at the first page that adds
        nothing or reports ``has_more`` as false.

        Args:
            access_token: Plaid access token of the item

        Returns:
            Result with the transactions in the order Plaid returned them, or
            UPSTREAM_FAILURE

        Raises:
            SyncLimitExceededError: If more than ``config.max_sync_pages``
                pages would be needed
        """
        transactions: list[Transaction] = []
        cursor = ""

        logger.info("Syncing transactions")
        try:
            for page_number in range(1, self.config.max_sync_pages + 1):
                page = self.api.sync_transactions(access_token, cursor)
                logger.debug(
                    "Sync page %d: %d added, has_more=%s",
                    page_number, len(page.added), page.has_more,
                )
                if not page.added:
                    break
                transactions.extend(transaction_to_domain(item) for item in page.added)
                cursor = page.next_cursor
                if not page.has_more:
                    break
            else:
                raise SyncLimitExceededError(sync_limit_exceeded(self.config.max_sync_pages))
        except SyncLimitExceededError:
            logger.error(sync_limit_exceeded(self.config.max_sync_pages))
            raise
        except _FETCH_ERRORS as e:
            logger.error("Error getting transactions: %s", e)
            return Result.upstream_failure(str(e))

        return Result.ok(transactions)
