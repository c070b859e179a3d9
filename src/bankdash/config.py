"""Configuration for the Plaid API client and bank service."""

from dataclasses import dataclass
from typing import Optional

DEFAULT_PLAID_BASE_URL = "https://sandbox.plaid.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_SYNC_PAGES = 100
DEFAULT_MAX_WORKERS = 4


@dataclass(frozen=True)
class PlaidConfig:
    """Connection settings and limits for Plaid calls.

    Passed explicitly to the client and the bank service so tests can supply
    their own values instead of patching the environment.
    """

    base_url: str = DEFAULT_PLAID_BASE_URL
    client_id: Optional[str] = None
    secret: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    max_sync_pages: int = DEFAULT_MAX_SYNC_PAGES
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        if self.max_sync_pages < 1:
            raise ValueError("max_sync_pages must be at least 1")
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
