"""Abstract financial data API interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence


@dataclass(frozen=True)
class AccountsSnapshot:
    """Response of an accounts lookup for one Plaid item."""

    accounts: list[dict[str, Any]] = field(default_factory=list)
    institution_id: Optional[str] = None


@dataclass(frozen=True)
class SyncPage:
    """One page of an incremental transaction sync."""

    added: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: str = ""
    has_more: bool = False


class FinancialAPI(ABC):
    """Capabilities bankdash needs from the external financial data API.

    Implementations raise UpstreamError for transport failures and non-2xx
    responses.
    """

    @abstractmethod
    def get_accounts(self, access_token: str) -> AccountsSnapshot:
        """Get the accounts and institution ID for an item."""
        pass

    @abstractmethod
    def get_institution(
        self, institution_id: str, country_codes: Sequence[str]
    ) -> dict[str, Any]:
        """Get institution metadata by ID."""
        pass

    @abstractmethod
    def sync_transactions(self, access_token: str, cursor: str = "") -> SyncPage:
        """Get the next page of transactions after cursor."""
        pass
