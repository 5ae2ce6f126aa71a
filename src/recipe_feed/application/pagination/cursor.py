"""Opaque pagination cursors for ranked recipe lists.

Composite format: base64url("<score>::<iso-timestamp>")
Legacy format:    base64("<iso-timestamp>")

Both are emitted without ``=`` padding. Decoding accepts either base64
alphabet, with or without padding, and never raises.
"""
from __future__ import annotations

import base64
import binascii
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

SEPARATOR = "::"

_STD_TO_URLSAFE = str.maketrans("+/", "-_")


@dataclass(frozen=True, slots=True)
class CompositeCursor:
    score: float
    date: str


@dataclass(frozen=True, slots=True)
class CursorBoundary:
    """Exclusive lower bound for the next ranked page.

    ``after_score`` is ``None`` for legacy cursors, which only carry a date.
    """

    after_score: float | None
    after_date: datetime

    @property
    def is_composite(self) -> bool:
        return self.after_score is not None


def _timestamp_str(timestamp: datetime | str) -> str:
    if isinstance(timestamp, datetime):
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return timestamp.isoformat()
    return timestamp


def _b64encode(raw: str) -> str:
    return base64.urlsafe_b64encode(raw.encode()).decode().rstrip("=")


def _b64decode(cursor: str) -> str | None:
    token = cursor.strip().translate(_STD_TO_URLSAFE)
    if not token:
        return None
    token += "=" * (-len(token) % 4)
    try:
        return base64.b64decode(token, altchars=b"-_", validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError):
        return None


def encode_cursor(score: float, timestamp: datetime | str) -> str:
    return _b64encode(f"{float(score)!r}{SEPARATOR}{_timestamp_str(timestamp)}")


def decode_cursor(cursor: str) -> CompositeCursor | None:
    raw = _b64decode(cursor)
    if raw is None:
        return None
    parts = raw.split(SEPARATOR)
    if len(parts) != 2:
        return None
    score_str, date = parts
    try:
        score = float(score_str)
    except ValueError:
        return None
    if math.isnan(score):
        return None
    return CompositeCursor(score=score, date=date)


def encode_legacy_cursor(timestamp: datetime | str) -> str:
    return _b64encode(_timestamp_str(timestamp))


def decode_legacy_cursor(cursor: str) -> str | None:
    return _b64decode(cursor)


def _parse_timestamp(value: str) -> datetime | None:
    try:
        ts = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def parse_cursor(cursor: str | None) -> CursorBoundary | None:
    """Turn an inbound cursor into a boundary.

    Tries the composite format, then the legacy date-only one. Anything
    else means "start from the first page".
    """
    if not cursor:
        return None

    composite = decode_cursor(cursor)
    if composite is not None:
        after_date = _parse_timestamp(composite.date)
        if after_date is not None:
            return CursorBoundary(after_score=composite.score, after_date=after_date)

    legacy = decode_legacy_cursor(cursor)
    if legacy is not None:
        after_date = _parse_timestamp(legacy)
        if after_date is not None:
            logger.debug("Legacy date-only cursor, falling back to date boundary")
            return CursorBoundary(after_score=None, after_date=after_date)

    logger.debug("Ignoring malformed cursor %r", cursor)
    return None
