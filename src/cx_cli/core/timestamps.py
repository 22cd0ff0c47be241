"""Best-effort repair of truncated ISO-8601 timestamps.

The API occasionally returns instants cut short at the hour or minute
(``"2025-04-01T02"``).  These helpers pad such values to a full instant
and rewrite every parseable value into one canonical UTC form.  Nothing
here raises: a value that cannot be repaired is returned untouched.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

from cx_cli.core.models import Document

TIMESTAMP_KEYS: frozenset[str] = frozenset({"timestamp", "time"})
"""Mapping keys whose string values are treated as instants."""

_TRUNCATIONS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}$"), ":00:00.000Z"),
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}$"), ":00.000Z"),
    (re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$"), ".000Z"),
)

_FRACTION = re.compile(r"(\.\d+)")


def _pad_truncated(value: str) -> str:
    for pattern, suffix in _TRUNCATIONS:
        if pattern.match(value):
            return value + suffix
    return value


def _fit_fraction(value: str) -> str:
    """Pad or cut a fractional-seconds part to six digits.

    ``datetime.fromisoformat`` only accepts 3 or 6 fractional digits
    before Python 3.11.
    """
    match = _FRACTION.search(value)
    if match is None:
        return value
    digits = match.group(1)[1:]
    fitted = (digits + "000000")[:6]
    return value[: match.start(1)] + "." + fitted + value[match.end(1):]


def _parse_iso(value: str) -> datetime | None:
    text = value.strip()
    if not text or "-" not in text:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(_fit_fraction(text))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_timestamp(value: object) -> datetime | None:
    """Interpret *value* as an aware UTC datetime, or return ``None``.

    Strings are padded when truncated and parsed as ISO-8601; naive and
    date-only values are taken as UTC.  Numbers are epoch milliseconds.
    """
    if isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        if isinstance(value, str):
            parsed = _parse_iso(_pad_truncated(value.strip()))
            if parsed is None:
                return None
            return parsed.astimezone(timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
    return None


def format_timestamp(moment: datetime) -> str:
    """Render *moment* as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""
    utc = moment.astimezone(timezone.utc)
    millis = utc.microsecond // 1000
    return f"{utc.strftime('%Y-%m-%dT%H:%M:%S')}.{millis:03d}Z"


def normalize_timestamp(value: str) -> str:
    """Return the canonical full form of *value*, or *value* unchanged.

    >>> normalize_timestamp("2025-04-01T02")
    '2025-04-01T02:00:00.000Z'
    >>> normalize_timestamp("not-a-date")
    'not-a-date'
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return value
    try:
        return format_timestamp(parsed)
    except (OverflowError, ValueError):
        return value


def normalize_document(document: Document) -> Document:
    """Return a copy of *document* with every timestamp field repaired.

    Applies to string values stored under a ``timestamp`` or ``time`` key
    at any depth, including entries of ``log`` and ``events`` arrays.
    The input is not mutated.
    """
    if isinstance(document, dict):
        result: dict[str, Document] = {}
        for key, value in document.items():
            if key in TIMESTAMP_KEYS and isinstance(value, str) and value:
                result[key] = normalize_timestamp(value)
            else:
                result[key] = normalize_document(value)
        return result
    if isinstance(document, list):
        return [normalize_document(item) for item in document]
    return document
