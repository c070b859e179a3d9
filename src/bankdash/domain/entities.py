"""Domain model entities for bankdash.

These are pure data classes representing records fetched from Plaid or the
local document store, independent of either system's wire or storage format.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from bankdash.utils.serialize import to_json_safe


@dataclass(frozen=True)
class User:
    """Dashboard user."""

    id: str
    email: str
    first_name: str
    last_name: str
    created_at: datetime


@dataclass(frozen=True)
class Bank:
    """Local record linking a user to a Plaid item and its access token."""

    id: str
    user_id: str
    account_id: str
    item_id: str
    access_token: str
    shareable_id: str
    created_at: datetime


@dataclass(frozen=True)
class Transfer:
    """Locally recorded money movement between two linked banks."""

    id: str
    name: str
    amount: Decimal
    channel: str
    category: str
    sender_id: str
    sender_bank_id: str
    receiver_id: str
    receiver_bank_id: str
    email: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Institution:
    """Institution metadata from Plaid."""

    institution_id: str
    name: str
    url: Optional[str] = None
    logo: Optional[str] = None
    primary_color: Optional[str] = None
    country_codes: tuple[str, ...] = ()


@dataclass(frozen=True)
class Account:
    """Summarized bank account as shown on the dashboard."""

    id: str
    available_balance: Optional[Decimal]
    current_balance: Optional[Decimal]
    institution_id: str
    name: str
    official_name: Optional[str]
    mask: Optional[str]
    type: str
    subtype: Optional[str]
    bank_id: str
    shareable_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return to_json_safe(
            {
                "id": self.id,
                "availableBalance": self.available_balance,
                "currentBalance": self.current_balance,
                "institutionId": self.institution_id,
                "name": self.name,
                "officialName": self.official_name,
                "mask": self.mask,
                "type": self.type,
                "subtype": self.subtype,
                "appwriteItemId": self.bank_id,
                "shareableId": self.shareable_id,
            }
        )


@dataclass(frozen=True)
class Transaction:
    """Transaction from either the Plaid sync feed or a local transfer."""

    id: str
    name: str
    amount: Decimal
    date: datetime
    category: str
    payment_channel: str
    type: str
    pending: bool = False
    account_id: Optional[str] = None
    image: Optional[str] = None

    @property
    def is_debit(self) -> bool:
        return self.type == "debit"

    def to_dict(self) -> dict[str, Any]:
        return to_json_safe(
            {
                "id": self.id,
                "name": self.name,
                "amount": self.amount,
                "date": self.date,
                "category": self.category,
                "paymentChannel": self.payment_channel,
                "type": self.type,
                "pending": self.pending,
                "accountId": self.account_id,
                "image": self.image,
            }
        )


@dataclass(frozen=True)
class AccountsSummary:
    """All accounts for a user plus totals.

    ``accounts`` keeps a ``None`` entry for every bank whose account data
    could not be retrieved, so callers must skip them.
    """

    accounts: list[Optional[Account]] = field(default_factory=list)
    total_banks: int = 0
    total_current_balance: Decimal = Decimal("0")

    @property
    def available(self) -> list[Account]:
        return [acc for acc in self.accounts if acc is not None]

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": [acc.to_dict() if acc is not None else None for acc in self.accounts],
            "totalBanks": self.total_banks,
            "totalCurrentBalance": to_json_safe(self.total_current_balance),
        }


@dataclass(frozen=True)
class AccountDetail:
    """One account with its merged transaction feed, newest first."""

    account: Account
    transactions: list[Transaction] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.account.to_dict(),
            "transactions": [txn.to_dict() for txn in self.transactions],
        }
