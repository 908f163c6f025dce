"""
Date helpers shared by the exercise use cases.

Incoming dates come from form fields and query strings, so parsing is
lenient: anything that cannot be read as a calendar date yields None and the
caller substitutes its own default instead of rejecting the request.

All instants are handled in UTC. Naive values are assumed to be UTC.
"""
import re
from datetime import datetime, timezone
from typing import Optional, Union

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Human-readable rendering used in every response, e.g. "Sun Jan 15 2023"
DATE_STRING_FORMAT = "%a %b %d %Y"

# Formats tried after ISO 8601 parsing fails
_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    DATE_STRING_FORMAT,
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# PostgREST trims trailing zeros from fractional seconds
_FRACTION = re.compile(r"\.(\d{1,6})(?=[+-]|$)")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _from_iso(text: str) -> datetime:
    text = text.replace("Z", "+00:00")
    text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0"), text, count=1)
    return datetime.fromisoformat(text)


def parse_date(raw: Optional[str]) -> Optional[datetime]:
    """
    Parse a user-supplied date string.

    Accepts ISO 8601 dates and datetimes (with or without offset, "Z"
    included) plus a handful of common written forms. Returns an aware UTC
    datetime, or None when the value is missing or unparsable.
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text:
        return None

    # Offsets near datetime.min/max overflow when shifted to UTC
    try:
        return _as_utc(_from_iso(text))
    except (ValueError, OverflowError):
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return _as_utc(datetime.strptime(text, fmt))
        except (ValueError, OverflowError):
            continue
    return None


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """
    Read a result limit the way a leading-integer parser would.

    "3", " 3" and "3abc" all give 3. Zero, negatives, non-numeric and
    missing values give None, which means no truncation.
    """
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    if not match:
        return None
    value = int(match.group(1))
    return value if value > 0 else None


def to_date_string(value: Union[datetime, str]) -> str:
    """Render an instant (or a stored ISO timestamp) as e.g. "Sun Jan 15 2023"."""
    if isinstance(value, str):
        value = _from_iso(value)
    return _as_utc(value).strftime(DATE_STRING_FORMAT)


def to_iso(value: datetime) -> str:
    """Serialize an instant for storage and range filters."""
    return _as_utc(value).isoformat()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
