"""CLI helpers wiring services to the command context."""

from __future__ import annotations

import click
from bankdash.domain.bank import BankService
from bankdash.domain.history import TransactionHistoryService
from bankdash.plaid.base import FinancialAPI
from bankdash.plaid.client import PlaidClient


def get_financial_api(ctx: click.Context) -> FinancialAPI:
    """Return the financial API for this invocation, creating a Plaid client once.

    A pre-set ``ctx.obj["api"]`` is used as-is, which lets tests pass a fake.
    """
    obj = ctx.find_root().obj
    if "api" not in obj:
        client = PlaidClient(obj["plaid_config"])
        ctx.find_root().call_on_close(client.close)
        obj["api"] = client
    return obj["api"]


def get_bank_service(ctx: click.Context) -> BankService:
    """Build a BankService from the command context."""
    obj = ctx.find_root().obj
    return BankService(obj["db"], get_financial_api(ctx), obj["plaid_config"])


def get_history_service(ctx: click.Context) -> TransactionHistoryService:
    """Build a TransactionHistoryService from the command context."""
    obj = ctx.find_root().obj
    return TransactionHistoryService(obj["db"], get_bank_service(ctx))
