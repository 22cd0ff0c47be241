"""Pure key reordering and chronological sorting of API documents.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic.

Rules (enforced by :func:`reorganize`):

1. **Partition** — scalar fields first, then arrays and non-empty
   mappings, each group in its original relative order.
2. **Sort** — ``events`` by ``timestamp``; ``log`` by ``timestamp``
   falling back to ``time``.  Entries without a usable instant sort as
   the epoch.  Nothing deeper is reordered.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime, timezone

from cx_cli.core.models import Document
from cx_cli.core.timestamps import parse_timestamp

EPOCH: datetime = datetime(1970, 1, 1, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# 1. Partition
# ---------------------------------------------------------------------------

def is_complex(value: Document) -> bool:
    """Return ``True`` for arrays and for mappings with at least one key."""
    if isinstance(value, list):
        return True
    return isinstance(value, dict) and len(value) > 0


# ---------------------------------------------------------------------------
# 2. Sort
# ---------------------------------------------------------------------------

def _instant(entry: Document, *fields: str) -> datetime:
    if not isinstance(entry, Mapping):
        return EPOCH
    for name in fields:
        raw = entry.get(name)
        if raw:
            return parse_timestamp(raw) or EPOCH
    return EPOCH


def _events_key(entry: Document) -> datetime:
    return _instant(entry, "timestamp")


def _log_key(entry: Document) -> datetime:
    return _instant(entry, "timestamp", "time")


_CHRONOLOGICAL_FIELDS: dict[str, Callable[[Document], datetime]] = {
    "events": _events_key,
    "log": _log_key,
}


def sort_chronological(key: str, value: Document) -> Document:
    """Return *value* sorted by time when *key* names a chronological array."""
    sort_key = _CHRONOLOGICAL_FIELDS.get(key)
    if sort_key is None or not isinstance(value, list):
        return value
    return sorted(value, key=sort_key)


# ---------------------------------------------------------------------------
# Composite
# ---------------------------------------------------------------------------

def reorganize(document: Document) -> Document:
    """Reorder a mapping so summary facts precede nested structures.

    Non-mapping documents (e.g. a top-level list of resources) are
    returned unchanged.
    """
    if not isinstance(document, dict):
        return document

    simple: dict[str, Document] = {}
    complex_: dict[str, Document] = {}
    for key, value in document.items():
        if is_complex(value):
            complex_[key] = sort_chronological(key, value)
        else:
            simple[key] = value
    return {**simple, **complex_}


def log_only_view(session: Document) -> Document | None:
    """Restrict a call-session document to its ``log`` field.

    Returns ``None`` when *session* carries no log, letting the caller
    warn and fall back to the full document.
    """
    if not isinstance(session, dict) or session.get("log") is None:
        return None
    return {"log": session["log"]}
