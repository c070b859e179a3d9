"""Shared pytest fixtures for bankdash tests."""

import tempfile
import os
import pytest

from bankdash.config import PlaidConfig
from bankdash.database.factories import create_sqlite_database
from bankdash.domain.bank import BankService
from bankdash.domain.errors import UpstreamError
from bankdash.domain.history import TransactionHistoryService
from bankdash.domain.transfer import TransferService
from bankdash.domain.user import UserService
from bankdash.plaid.base import AccountsSnapshot, FinancialAPI, SyncPage


class FakeFinancialAPI(FinancialAPI):
    """Scripted stand-in for Plaid.

    - accounts: access token -> AccountsSnapshot or exception to raise
    - institutions: institution ID -> payload dict or exception to raise
    - sync_pages: access token -> list of SyncPage returned in order
      (restarting whenever the cursor is empty), a single
      SyncPage returned forever, or an exception to raise
    """

    def __init__(self):
        self.accounts = {}
        self.institutions = {}
        self.sync_pages = {}
        self.sync_calls = []
        self._positions = {}

    def get_accounts(self, access_token):
        value = self.accounts.get(access_token)
        if value is None:
            raise UpstreamError(f"Unknown access token {access_token}")
        if isinstance(value, Exception):
            raise value
        return value

    def get_institution(self, institution_id, country_codes):
        value = self.institutions.get(institution_id)
        if value is None:
            raise UpstreamError(f"Unknown institution {institution_id}")
        if isinstance(value, Exception):
            raise value
        return value

    def sync_transactions(self, access_token, cursor=""):
        self.sync_calls.append((access_token, cursor))
        pages = self.sync_pages.get(access_token, [])
        if isinstance(pages, Exception):
            raise pages
        if isinstance(pages, SyncPage):
            return pages
        # An empty cursor starts the feed over
        index = 0 if not cursor else self._positions.get(access_token, 0) + 1
        self._positions[access_token] = index
        if index >= len(pages):
            return SyncPage()
        return pages[index]


def _plaid_account(account_id="acc-1", current=100.0, available=90.0, mask="1234", name="Checking"):
    """Build a Plaid accounts/get account object."""
    return {
        "account_id": account_id,
        "balances": {"available": available, "current": current},
        "name": name,
        "official_name": f"Plaid Gold {name}",
        "mask": mask,
        "type": "depository",
        "subtype": "checking",
    }


def _plaid_transaction(transaction_id, date, amount=10.0, name=None, channel="online", category=("Travel", "Taxi")):
    """Build a Plaid transactions/sync ``added`` item."""
    return {
        "transaction_id": transaction_id,
        "account_id": "acc-1",
        "name": name or f"Purchase {transaction_id}",
        "amount": amount,
        "date": date,
        "category": list(category) if category else None,
        "payment_channel": channel,
        "pending": False,
        "logo_url": None,
    }


def _plaid_institution(institution_id, name="First Platypus Bank"):
    """Build a Plaid institution object."""
    return {
        "institution_id": institution_id,
        "name": name,
        "url": "https://www.platypus.example",
        "logo": None,
        "primary_color": "#1f1f1f",
        "country_codes": ["US"],
    }


@pytest.fixture
def plaid_account():
    """Factory for Plaid accounts/get account objects."""
    return _plaid_account


@pytest.fixture
def plaid_transaction():
    """Factory for Plaid transactions/sync ``added`` items."""
    return _plaid_transaction


@pytest.fixture
def plaid_institution():
    """Factory for Plaid institution objects."""
    return _plaid_institution


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_service(temp_db):
    """Create a UserService with a temporary database."""
    return UserService(temp_db)


@pytest.fixture
def transfer_service(temp_db):
    """Create a TransferService with a temporary database."""
    return TransferService(temp_db)


@pytest.fixture
def sample_user(user_service):
    """Create a sample user for testing."""
    user_id = user_service.create_user(
        email="jane@example.com", first_name="Jane", last_name="Doe"
    )
    return user_service.get_user(user_id)


@pytest.fixture
def session_token(user_service, sample_user):
    """Start a session for the sample user."""
    return user_service.start_session(sample_user.id)


@pytest.fixture
def sample_banks(user_service, sample_user):
    """Link two banks to the sample user; returns them oldest first."""
    user_service.link_bank(
        user_id=sample_user.id, account_id="acc-1", item_id="item-1", access_token="access-1"
    )
    user_service.link_bank(
        user_id=sample_user.id, account_id="acc-2", item_id="item-2", access_token="access-2"
    )
    return user_service.list_banks(sample_user.id)


@pytest.fixture
def fake_api():
    """Fake financial API knowing the sample banks' tokens, with empty transaction feeds."""
    api = FakeFinancialAPI()
    api.accounts["access-1"] = AccountsSnapshot(
        accounts=[_plaid_account("acc-1", current=100.25, mask="1111", name="Checking")],
        institution_id="ins_1",
    )
    api.accounts["access-2"] = AccountsSnapshot(
        accounts=[_plaid_account("acc-2", current=50.50, mask="2222", name="Savings")],
        institution_id="ins_2",
    )
    api.institutions["ins_1"] = _plaid_institution("ins_1")
    api.institutions["ins_2"] = _plaid_institution("ins_2", name="Tartan Bank")
    return api


@pytest.fixture
def plaid_config():
    """Plaid settings with a small sync page cap."""
    return PlaidConfig(client_id="client-id", secret="secret", max_sync_pages=5, max_workers=2)


@pytest.fixture
def bank_service(temp_db, fake_api, plaid_config):
    """Create a BankService backed by the fake financial API."""
    return BankService(temp_db, fake_api, plaid_config)


@pytest.fixture
def history_service(temp_db, bank_service):
    """Create a TransactionHistoryService."""
    return TransactionHistoryService(temp_db, bank_service)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
