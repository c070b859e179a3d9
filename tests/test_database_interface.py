"""Tests for Database interface returning domain models."""

import pytest
from datetime import datetime, timedelta, timezone, UTC
from decimal import Decimal

from bankdash.domain import entities
from bankdash.domain.errors import ConflictError, NotFoundError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_user_returns_domain_model(self, temp_db):
        """Test that get_user returns a domain User entity."""
        user_id = temp_db.create_user(email="a@example.com", first_name="A", last_name="B")

        user = temp_db.get_user(user_id)

        assert isinstance(user, entities.User)
        assert user.id == user_id
        assert user.email == "a@example.com"
        assert user.created_at.tzinfo is not None

    def test_get_missing_user(self, temp_db):
        assert temp_db.get_user("missing") is None

    def test_duplicate_email(self, temp_db):
        temp_db.create_user(email="a@example.com", first_name="A", last_name="B")
        with pytest.raises(ConflictError, match="already exists"):
            temp_db.create_user(email="a@example.com", first_name="C", last_name="D")

    def test_get_banks_returns_domain_models(self, temp_db, sample_user, sample_banks):
        """Test that get_banks returns domain Bank entities for that user only."""
        other_id = temp_db.create_user(email="b@example.com", first_name="B", last_name="B")
        temp_db.create_bank(
            user_id=other_id, account_id="x", item_id="x", access_token="access-x"
        )

        banks = temp_db.get_banks(sample_user.id)

        assert len(banks) == 2
        for bank in banks:
            assert isinstance(bank, entities.Bank)
            assert bank.user_id == sample_user.id
        assert {bank.access_token for bank in banks} == {"access-1", "access-2"}

    def test_get_bank_by_document_id(self, temp_db, sample_banks):
        bank = temp_db.get_bank(sample_banks[0].id)

        assert bank == sample_banks[0]
        assert bank.shareable_id

    def test_get_missing_bank(self, temp_db):
        assert temp_db.get_bank("missing") is None

    def test_create_bank_for_missing_user(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.create_bank(
                user_id="missing", account_id="a", item_id="i", access_token="t"
            )


class TestSessions:
    """Tests for session lookup."""

    def test_logged_in_user(self, temp_db, sample_user):
        token = temp_db.create_session(sample_user.id)

        assert temp_db.get_logged_in_user(token) == sample_user

    def test_unknown_token(self, temp_db, sample_user):
        assert temp_db.get_logged_in_user("nope") is None

    def test_expired_session(self, temp_db, sample_user):
        token = temp_db.create_session(
            sample_user.id, expires_at=datetime.now(UTC) - timedelta(seconds=1)
        )
        assert temp_db.get_logged_in_user(token) is None

    def test_unexpired_session_with_offset(self, temp_db, sample_user):
        """Test that expiry with a non-UTC offset is compared correctly."""
        eastern = timezone(timedelta(hours=-5))
        token = temp_db.create_session(
            sample_user.id, expires_at=datetime.now(eastern) + timedelta(hours=1)
        )
        assert temp_db.get_logged_in_user(token) == sample_user

    def test_session_for_missing_user(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.create_session("missing")


class TestTransfers:
    """Tests for transfer records."""

    def test_transfers_by_bank_id(self, temp_db, sample_banks):
        """Test that transfers are found from both the sender and receiver side."""
        first, second = sample_banks
        transfer_id = temp_db.create_transfer(
            name="Rent share",
            amount=Decimal("75.00"),
            sender_bank_id=first.id,
            receiver_bank_id=second.id,
        )

        sent = temp_db.get_transfers_by_bank_id(first.id)
        received = temp_db.get_transfers_by_bank_id(second.id)

        assert [t.id for t in sent] == [transfer_id]
        assert [t.id for t in received] == [transfer_id]
        transfer = sent[0]
        assert isinstance(transfer, entities.Transfer)
        assert transfer.amount == Decimal("75.00")
        assert transfer.sender_id == first.user_id
        assert transfer.receiver_bank_id == second.id
        assert transfer.channel == "online"
        assert transfer.category == "Transfer"

    def test_created_at_round_trip(self, temp_db, sample_banks):
        """Test that an explicit timestamp comes back as the same instant in UTC."""
        first, second = sample_banks
        created = datetime(2024, 2, 1, 9, 30, tzinfo=timezone(timedelta(hours=2)))
        temp_db.create_transfer(
            name="Lunch",
            amount=Decimal("12.00"),
            sender_bank_id=first.id,
            receiver_bank_id=second.id,
            created_at=created,
        )

        transfer = temp_db.get_transfers_by_bank_id(first.id)[0]

        assert transfer.created_at == created
        assert transfer.created_at.utcoffset() == timedelta(0)

    def test_unrelated_bank_has_no_transfers(self, temp_db, sample_banks):
        assert temp_db.get_transfers_by_bank_id(sample_banks[0].id) == []

    def test_unknown_bank(self, temp_db, sample_banks):
        with pytest.raises(NotFoundError, match="missing"):
            temp_db.create_transfer(
                name="x",
                amount=Decimal("1"),
                sender_bank_id=sample_banks[0].id,
                receiver_bank_id="missing",
            )
