"""Plaid API access for bankdash."""

from bankdash.plaid.base import AccountsSnapshot, FinancialAPI, SyncPage
from bankdash.plaid.client import PlaidClient

__all__ = ["AccountsSnapshot", "FinancialAPI", "SyncPage", "PlaidClient"]
