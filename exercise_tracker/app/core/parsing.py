"""
Locale‑independent parsing and rendering of dates and numbers.

Form fields and query parameters arrive as untyped strings.  This
module turns them into ``datetime.date`` and ``float`` values and back
into the textual forms used in API responses.  Month and weekday names
are taken from fixed English tables rather than ``strftime`` so that the
output does not depend on the process locale.

Accepted date inputs:

* ``2023-01-15``, ``2023-1-5`` and ``2023/01/15``;
* extended ISO datetimes such as ``2023-01-15T10:30:00Z`` (the date
  part is kept); basic forms like ``20230115`` are rejected;
* ``Sun Jan 15 2023`` (the rendered form), ``Jan 15 2023`` and
  ``January 15, 2023``.  A leading weekday name is not cross‑checked.

Dates are rendered as ``Sun Jan 15 2023``.
"""

import math
import re
from datetime import date, datetime
from typing import Union

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_FULL_MONTH_NAMES = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)
_FULL_WEEKDAY_NAMES = (
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday",
)

_NUMERIC_DATE_RE = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})$", re.ASCII)
_ISO_DATETIME_RE = re.compile(
    r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d{3}(?:\d{3})?)?)?"
    r"(?:Z|[+-]\d{2}:\d{2})?$",
    re.ASCII,
)
_TEXT_DATE_RE = re.compile(
    r"^(?:(?P<weekday>[A-Za-z]+),?\s+)?"
    r"(?P<month>[A-Za-z]+)\.?\s+(?P<day>\d{1,2}),?\s+(?P<year>\d{4})$",
    re.ASCII,
)
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_INFINITY_RE = re.compile(r"^[+-]?Infinity$")


def _month_number(name: str) -> int:
    lowered = name.lower()
    for index, full in enumerate(_FULL_MONTH_NAMES):
        if lowered == full or lowered == full[:3]:
            return index + 1
    raise ValueError(f"unknown month name: {name!r}")


def _is_weekday_name(name: str) -> bool:
    lowered = name.lower()
    return any(lowered == full or lowered == full[:3] for full in _FULL_WEEKDAY_NAMES)


def parse_date(value: str) -> date:
    """Parse ``value`` as a calendar date.

    Raises ``ValueError`` if the text does not resolve to a real date;
    ``2023-02-30`` is rejected rather than rolled over.
    """
    text = value.strip()
    if not text:
        raise ValueError("empty date")

    match = _NUMERIC_DATE_RE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return date(year, month, day)

    if _ISO_DATETIME_RE.match(text):
        iso_text = text[:-1] + "+00:00" if text.endswith("Z") else text
        return datetime.fromisoformat(iso_text).date()

    match = _TEXT_DATE_RE.match(text)
    if match:
        weekday = match.group("weekday")
        if weekday is not None and not _is_weekday_name(weekday):
            raise ValueError(f"unknown weekday name: {weekday!r}")
        return date(
            int(match.group("year")),
            _month_number(match.group("month")),
            int(match.group("day")),
        )

    raise ValueError(f"unrecognised date: {value!r}")


def format_date(value: date) -> str:
    """Render ``value`` as ``Www Mmm DD YYYY``."""
    return (
        f"{WEEKDAY_NAMES[value.weekday()]} {MONTH_NAMES[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def today() -> date:
    """Current server date; a function so tests can patch it."""
    return date.today()


def parse_number(value: str) -> float:
    """Parse a decimal number.

    Integers, decimals and exponents are accepted, as is ``Infinity``
    with an optional sign.  Only ASCII digits count.  Anything else
    (including ``NaN``, hex literals, digit separators and blank text)
    raises ``ValueError``.
    """
    text = value.strip()
    if _DECIMAL_RE.match(text):
        return float(text)
    if _INFINITY_RE.match(text):
        return -math.inf if text.startswith("-") else math.inf
    raise ValueError(f"not a number: {value!r}")


def render_number(value: float) -> Union[int, float]:
    """Return whole numbers as ``int`` so they serialise as ``30``, not ``30.0``."""
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return value
