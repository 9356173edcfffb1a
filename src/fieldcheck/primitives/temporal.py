"""Date and time checks.

Formats use ``datetime.strptime`` directives. A value only passes when it
parses and formats back to exactly the same string, which rules out inputs
that a lenient parser would quietly normalize.
"""

import re
from datetime import datetime, timedelta
from typing import Any

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
TIME_FORMAT = "%H:%M"


def _render(moment: datetime, format: str) -> str:
    # strftime drops the zero padding of %Y before year 1000 on some platforms
    padded = re.sub(r"%%|%Y", lambda m: m.group() if m.group() == "%%" else f"{moment.year:04d}", format)
    return moment.strftime(padded)


def date_format(value: Any, format: str) -> bool:
    """Validate a string is exactly how ``format`` renders the moment it parses to."""
    if not isinstance(value, str):
        return False
    try:
        parsed = datetime.strptime(value, format)
    except ValueError:
        return False
    return _render(parsed, format) == value


def is_date(value: Any, format: str = DATE_FORMAT) -> bool:
    return date_format(value, format)


def is_datetime(value: Any, format: str = DATETIME_FORMAT) -> bool:
    return date_format(value, format)


def is_time(value: Any, format: str = TIME_FORMAT) -> bool:
    return date_format(value, format)


def parse_moment(value: Any) -> datetime | None:
    """Parse an ISO-8601 string or a relative keyword into a naive local datetime.

    Keywords: now, today, tomorrow, yesterday. Returns None when the value
    cannot be understood.
    """
    if not isinstance(value, str):
        return None

    keyword = value.strip().lower()
    now = datetime.now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    relative = {
        "now": now,
        "today": midnight,
        "tomorrow": midnight + timedelta(days=1),
        "yesterday": midnight - timedelta(days=1),
    }
    if keyword in relative:
        return relative[keyword]

    try:
        moment = datetime.fromisoformat(value.strip())
    except ValueError:
        return None

    if moment.tzinfo is not None:
        moment = moment.astimezone().replace(tzinfo=None)
    return moment


def after(value: Any, after_date: str = "now") -> bool:
    """Validate a moment falls strictly after ``after_date``."""
    moment, reference = parse_moment(value), parse_moment(after_date)
    if moment is None or reference is None:
        return False
    return moment > reference


def before(value: Any, before_date: str = "now") -> bool:
    """Validate a moment falls strictly before ``before_date``."""
    moment, reference = parse_moment(value), parse_moment(before_date)
    if moment is None or reference is None:
        return False
    return moment < reference
