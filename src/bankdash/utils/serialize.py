"""Conversion of domain values into JSON-safe structures."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any


def to_json_safe(value: Any) -> Any:
    """Recursively convert a value into types ``json.dumps`` accepts.

    Decimals become floats, dates and datetimes become ISO 8601 strings,
    tuples become lists. Dicts and lists are converted element-wise.
    """
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(v) for v in value]
    return value
