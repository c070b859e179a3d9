"""Utility functions for bankdash."""

from bankdash.utils.date_parser import parse_timestamp, parse_page
from bankdash.utils.amount_parser import parse_amount, format_amount, to_decimal
from bankdash.utils.serialize import to_json_safe

__all__ = [
    "parse_timestamp",
    "parse_page",
    "parse_amount",
    "format_amount",
    "to_decimal",
    "to_json_safe",
]
