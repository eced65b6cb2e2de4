"""Cookie date formatting and date-expression parsing.

Two directions:

- ``format_cookie_date`` renders the ``Expires`` attribute value
  (``Wed, 21-Oct-2026 07:28:00 GMT``). Day and month names are fixed
  English abbreviations, independent of the process locale.
- ``parse_date`` turns the string forms accepted for an expiry into a Unix
  timestamp: cookie dates (RFC 6265 section 5.1.1), ISO 8601, the keywords
  ``now``/``today``/``midnight``/``tomorrow``/``yesterday``, and relative
  offsets such as ``+1 hour`` or ``2 weeks ago``.

All calendar math is done in UTC.
"""

import calendar
import re
import time
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# 9999-12-31 23:59:59 GMT, the last date with a four-digit year
MAX_TIMESTAMP = 253402300799


def format_cookie_date(timestamp: int) -> str:
    """Render *timestamp* as ``D, dd-Mon-YYYY HH:MM:SS GMT``."""
    t = time.gmtime(timestamp)
    return (
        f"{_WEEKDAYS[t.tm_wday]}, {t.tm_mday:02d}-{_MONTHS[t.tm_mon - 1]}-{t.tm_year:04d} "
        f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d} GMT"
    )


def parse_date(text: str, now: int) -> int | None:
    """Parse a date expression relative to *now*.

    Returns ``None`` when *text* is not a recognized form, including offsets
    that leave the representable date range.
    """
    stripped = text.strip()
    if not stripped:
        return None
    for parse in (_parse_relative, _parse_iso, _parse_cookie_date):
        result = parse(stripped, now)
        if result is not None:
            return result
    return None


# -- Relative expressions --


def _midnight(moment: datetime) -> datetime:
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


_KEYWORDS: dict[str, Callable[[datetime], datetime]] = {
    "now": lambda moment: moment,
    "today": _midnight,
    "midnight": _midnight,
    "tomorrow": lambda moment: _midnight(moment) + timedelta(days=1),
    "yesterday": lambda moment: _midnight(moment) - timedelta(days=1),
}

# unit -> (months, seconds)
_UNITS: dict[str, tuple[int, int]] = {}
for _names, _step in (
    (("sec", "secs", "second", "seconds"), (0, 1)),
    (("min", "mins", "minute", "minutes"), (0, 60)),
    (("hour", "hours"), (0, 3600)),
    (("day", "days"), (0, 86400)),
    (("week", "weeks"), (0, 7 * 86400)),
    (("fortnight", "fortnights"), (0, 14 * 86400)),
    (("month", "months"), (1, 0)),
    (("year", "years"), (12, 0)),
):
    for _name in _names:
        _UNITS[_name] = _step
del _names, _step, _name

_OFFSET_RE = re.compile(r"\s*(?P<sign>[+-]?)\s*(?P<amount>\d+)\s*(?P<unit>[a-z]+)")


def _add_months(moment: datetime, months: int) -> datetime:
    """Step *months* calendar months; overflowing days roll into the next month."""
    years, month_index = divmod(moment.month - 1 + months, 12)
    year = moment.year + years
    month = month_index + 1
    overflow = max(moment.day - calendar.monthrange(year, month)[1], 0)
    shifted = moment.replace(year=year, month=month, day=moment.day - overflow)
    return shifted + timedelta(days=overflow)


def _parse_relative(text: str, now: int) -> int | None:
    words = text.lower()
    moment = datetime.fromtimestamp(now, UTC)

    head, _, tail = words.partition(" ")
    keyword = _KEYWORDS.get(head)
    if keyword is not None:
        moment = keyword(moment)
        words = tail.strip()

    negate = False
    if words == "ago" or words.endswith(" ago"):
        words = words[:-3].rstrip()
        negate = True

    months = seconds = 0
    matched = False
    pos = 0
    while pos < len(words):
        match = _OFFSET_RE.match(words, pos)
        if match is None:
            return None
        step = _UNITS.get(match["unit"])
        if step is None:
            return None
        amount = int(match["amount"])
        if match["sign"] == "-":
            amount = -amount
        months += step[0] * amount
        seconds += step[1] * amount
        matched = True
        pos = match.end()

    if not matched and (keyword is None or negate):
        return None
    if negate:
        months, seconds = -months, -seconds
    try:
        if months:
            moment = _add_months(moment, months)
        return int((moment + timedelta(seconds=seconds)).timestamp())
    except (OverflowError, ValueError):
        # offset leaves the datetime range
        return None


# -- ISO 8601 --


def _parse_iso(text: str, now: int) -> int | None:
    try:
        moment = datetime.fromisoformat(text)
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return int(moment.timestamp())


# -- Cookie dates (RFC 6265 section 5.1.1) --

_DATE_TOKENS_RE = re.compile(
    r"[\x09\x20-\x2F\x3B-\x40\x5B-\x60\x7B-\x7E]*"
    r"(?P<token>[\x00-\x08\x0A-\x1F\d:a-zA-Z\x7F-\xFF]+)"
)
_DATE_HMS_TIME_RE = re.compile(r"(\d{1,2}):(\d{1,2}):(\d{1,2})")
_DATE_DAY_OF_MONTH_RE = re.compile(r"(\d{1,2})")
_DATE_MONTH_RE = re.compile(r"(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec)", re.I)
_DATE_YEAR_RE = re.compile(r"(\d{2,4})")


def _parse_cookie_date(text: str, now: int) -> int | None:
    found_time = found_day = found_month = found_year = False
    hour = minute = second = 0
    day = month = year = 0

    for token_match in _DATE_TOKENS_RE.finditer(text):
        token = token_match.group("token")

        if not found_time:
            time_match = _DATE_HMS_TIME_RE.match(token)
            if time_match:
                found_time = True
                hour, minute, second = (int(part) for part in time_match.groups())
                continue

        if not found_day:
            day_match = _DATE_DAY_OF_MONTH_RE.match(token)
            if day_match:
                found_day = True
                day = int(day_match.group())
                continue

        if not found_month:
            month_match = _DATE_MONTH_RE.match(token)
            if month_match:
                found_month = True
                month = _MONTHS.index(month_match.group().title()) + 1
                continue

        if not found_year:
            year_match = _DATE_YEAR_RE.match(token)
            if year_match:
                found_year = True
                year = int(year_match.group())

    if not (found_time and found_day and found_month and found_year):
        return None

    if 70 <= year <= 99:
        year += 1900
    elif 0 <= year <= 69:
        year += 2000

    if not 1 <= day <= 31 or year < 1601 or hour > 23 or minute > 59 or second > 59:
        return None

    try:
        moment = datetime(year, month, day, hour, minute, second, tzinfo=UTC)
    except ValueError:
        return None
    return int(moment.timestamp())
