"""Amount parsing and formatting utilities."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-$123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    # Handle parentheses notation (negative)
    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[$,\s]", "", amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    return -amount if is_negative else amount


def to_decimal(value: float | int | str | Decimal | None) -> Decimal | None:
    """Convert a JSON number into a Decimal without float artifacts."""
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_amount(amount: Decimal | float | int | None) -> str:
    """Format an amount as US dollars, e.g. ``-$1,234.50``."""
    value = to_decimal(amount) or Decimal("0")
    rounded = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"
