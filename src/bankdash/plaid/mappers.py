"""Mapper functions to convert Plaid JSON payloads into domain entities."""

from typing import Any, Optional

from bankdash.domain import entities as domain
from bankdash.utils.amount_parser import to_decimal
from bankdash.utils.date_parser import parse_timestamp


def institution_to_domain(payload: dict[str, Any]) -> domain.Institution:
    """Convert a Plaid institution object to a domain Institution entity."""
    return domain.Institution(
        institution_id=payload["institution_id"],
        name=payload.get("name") or "",
        url=payload.get("url"),
        logo=payload.get("logo"),
        primary_color=payload.get("primary_color"),
        country_codes=tuple(payload.get("country_codes") or ()),
    )


def account_to_domain(
    payload: dict[str, Any],
    institution: domain.Institution,
    bank: domain.Bank,
    shareable_id: Optional[str] = None,
) -> domain.Account:
    """Convert a Plaid account object to a domain Account entity.

    Args:
        payload: One entry of the accounts/get ``accounts`` list
        institution: Institution the item belongs to
        bank: Local bank record the access token came from
        shareable_id: Shareable ID to expose, if any
    """
    balances = payload.get("balances") or {}
    return domain.Account(
        id=payload["account_id"],
        available_balance=to_decimal(balances.get("available")),
        current_balance=to_decimal(balances.get("current")),
        institution_id=institution.institution_id,
        name=payload.get("name") or "",
        official_name=payload.get("official_name"),
        mask=payload.get("mask"),
        type=payload.get("type") or "",
        subtype=payload.get("subtype"),
        bank_id=bank.id,
        shareable_id=shareable_id,
    )


def transaction_to_domain(payload: dict[str, Any]) -> domain.Transaction:
    """Convert a Plaid transactions/sync ``added`` item to a domain Transaction.

    Only the first (broadest) category is kept. Plaid transactions carry no
    debit/credit flag, so ``type`` mirrors the payment channel.
    """
    categories = payload.get("category") or []
    payment_channel = payload.get("payment_channel") or ""
    return domain.Transaction(
        id=payload["transaction_id"],
        name=payload.get("name") or "",
        amount=to_decimal(payload.get("amount") or 0),
        date=parse_timestamp(payload["date"]),
        category=categories[0] if categories else "",
        payment_channel=payment_channel,
        type=payment_channel,
        pending=bool(payload.get("pending")),
        account_id=payload.get("account_id"),
        image=payload.get("logo_url"),
    )
