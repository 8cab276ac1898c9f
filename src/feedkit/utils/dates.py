"""RFC 2822 date helpers for pubDate and lastBuildDate values."""

import re
from datetime import datetime
from email.utils import format_datetime, parsedate_to_datetime

from feedkit.exceptions import InvalidDateError

_DAY = r"(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)"
_MONTH = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
_ZONE = r"(?:[+-]\d{4}|UT|GMT|[ECMP][SD]T)"

# [day ","] d Mon yyyy hh:mm[:ss] zone
_RFC2822_RE = re.compile(
    rf"^\s*(?:{_DAY},\s*)?\d{{1,2}}\s+{_MONTH}\s+\d{{4}}\s+"
    rf"\d{{2}}:\d{{2}}(?::\d{{2}})?\s+{_ZONE}\s*$"
)


def parse_rfc2822(value: str, field: str | None = None) -> datetime:
    """Parse an RFC 2822 date, e.g. 'Sun, 13 Mar 2016 20:02:02 -0700'.

    The day-of-week prefix and the seconds are optional, as in the RFC
    grammar. The zone is required.

    Raises:
        InvalidDateError: When the value does not match the grammar.
    """
    if not value or not _RFC2822_RE.match(value):
        raise InvalidDateError(value, field)

    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(value, field) from e


def format_rfc2822(dt: datetime) -> str:
    """Format a datetime as an RFC 2822 string.

    Naive datetimes are rendered with the '-0000' zone.
    """
    return format_datetime(dt)
