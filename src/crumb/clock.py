"""Wall clock and HTTP date handling.

The only two places crumb touches time: reading "now" and converting
between ``Expires`` text and an aware UTC ``datetime``.
"""

import re
from collections.abc import Callable
from datetime import UTC, datetime
from email.utils import format_datetime
from typing import TypeAlias

# Zero-argument callable returning the current time. Aware results are
# used as-is; naive results are read as UTC.
Clock: TypeAlias = Callable[[], datetime]

_MONTHS = {
    name: number
    for number, name in enumerate(
        ("jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"),
        start=1,
    )
}

_WDAY = r"(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)"
_WEEKDAY = r"(?:Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday)"
_MONTH = r"(?P<month>Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
_DAY = r"(?P<day>\d{1,2})"
_TIME = r"(?P<hour>\d{1,2}):(?P<minute>\d{1,2}):(?P<second>\d{1,2})"
_ZONE = r"(?:GMT|UTC)"

# Tried in order; the first format that parses wins. English names are
# matched directly so the process locale has no effect.
HTTP_DATE_FORMATS: tuple[re.Pattern[str], ...] = (
    # RFC 1123: Tue, 21 May 2019 21:12:11 GMT
    re.compile(rf"{_WDAY},\s+{_DAY}\s+{_MONTH}\s+(?P<year>\d{{4}})\s+{_TIME}\s+{_ZONE}", re.IGNORECASE),
    # RFC 850: Tuesday, 21-May-19 21:12:11 GMT
    re.compile(rf"{_WEEKDAY},\s+{_DAY}-{_MONTH}-(?P<year>\d{{2}})\s+{_TIME}\s+{_ZONE}", re.IGNORECASE),
    # asctime: Tue May 21 21:12:11 2019
    re.compile(rf"{_WDAY}\s+{_MONTH}\s+{_DAY}\s+{_TIME}\s+(?P<year>\d{{4}})", re.IGNORECASE),
)

LATEST = datetime.max.replace(tzinfo=UTC)


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def parse_http_date(text: str) -> datetime | None:
    """Parse an ``Expires`` value, or return ``None`` if no format matches."""
    for pattern in HTTP_DATE_FORMATS:
        match = pattern.fullmatch(text)
        if match is None:
            continue
        year = int(match["year"])
        if len(match["year"]) == 2:
            # POSIX %y pivot: 69-99 is 1969-1999, 00-68 is 2000-2068
            year += 1900 if year >= 69 else 2000
        try:
            return datetime(
                year,
                _MONTHS[match["month"].lower()],
                int(match["day"]),
                int(match["hour"]),
                int(match["minute"]),
                int(match["second"]),
                tzinfo=UTC,
            )
        except ValueError:
            continue
    return None


def format_http_date(moment: datetime) -> str:
    """Render *moment* in RFC 1123 form, e.g. ``Tue, 21 May 2019 21:12:11 GMT``."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return format_datetime(moment.astimezone(UTC), usegmt=True)
