"""Date parsing utilities."""

from datetime import date, datetime, UTC
from dateutil import parser as date_parser


def parse_timestamp(value: str | date | datetime) -> datetime:
    """Parse a date or timestamp into a timezone-aware datetime.

    Handles the shapes both upstream sources produce:
    - Plaid calendar dates: "2024-01-15"
    - Document store timestamps: "2024-01-15T10:30:00.000+00:00"
    - date / datetime objects

    Naive values are taken to be UTC, and plain dates map to midnight UTC.

    Args:
        value: Date string, date or datetime

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        if not value or not value.strip():
            raise ValueError("Empty date string")
        try:
            parsed = date_parser.isoparse(value.strip())
        except ValueError:
            try:
                parsed = date_parser.parse(value.strip())
            except (ValueError, OverflowError) as e:
                raise ValueError(f"Could not parse date '{value}': {e}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def parse_page(page: str | int | None) -> int:
    """Parse a page number, falling back to 1.

    Missing, non-integer and non-positive values all map to the first page.
    """
    if page is None:
        return 1
    try:
        number = int(str(page).strip())
    except ValueError:
        return 1
    return number if number >= 1 else 1
