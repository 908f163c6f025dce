"""
Domain layer for the Exercise Tracker API.

Pure helpers independent of infrastructure concerns (database, API):
- dates: lenient date parsing, limit parsing and date rendering
- identifiers: short random user ids
"""

from domain.dates import (
    EPOCH,
    DATE_STRING_FORMAT,
    parse_date,
    parse_limit,
    to_date_string,
    to_iso,
    utc_now,
)
from domain.identifiers import generate_short_id

__all__ = [
    "EPOCH",
    "DATE_STRING_FORMAT",
    "parse_date",
    "parse_limit",
    "to_date_string",
    "to_iso",
    "utc_now",
    "generate_short_id",
]
