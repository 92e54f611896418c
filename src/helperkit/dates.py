"""Date and time formatting helpers.

`get_iso_datetime` is best-effort: an unknown timezone or an unparseable
value yields ``None`` instead of raising, so callers must check the result.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from helperkit import config

__all__ = ["get_iso_datetime", "resolve_timezone", "timestamp_to_date"]

logger = logging.getLogger(__name__)

EPOCH_PATTERN = re.compile(r"@(-?\d+)")
SLASHED_FORMATS = ("%Y/%m/%d %H:%M:%S", "%Y/%m/%d %H:%M", "%Y/%m/%d")
RELATIVE_DAYS = {"today": 0, "midnight": 0, "tomorrow": 1, "yesterday": -1}


def resolve_timezone(name: str | None = None) -> ZoneInfo | None:
    """Return the ZoneInfo for `name` (or the configured default), or None if unknown."""
    name = name if name is not None else config.get_default_timezone()
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.debug("Unknown timezone identifier %r", name)
        return None


def _parse(text: str, tz: ZoneInfo) -> datetime | None:
    """Parse `text` into an aware datetime, interpreting naive values in `tz`."""
    text = text.strip()
    keyword = text.lower()

    if keyword == "now":
        return datetime.now(tz)
    if keyword in RELATIVE_DAYS:
        day = datetime.now(tz).replace(hour=0, minute=0, second=0, microsecond=0)
        return day + timedelta(days=RELATIVE_DAYS[keyword])
    if match := EPOCH_PATTERN.fullmatch(text):
        try:
            return datetime.fromtimestamp(int(match.group(1)), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in SLASHED_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
        else:
            try:
                parsed = parsedate_to_datetime(text)
            except (TypeError, ValueError):
                return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def get_iso_datetime(value: int | str, timezone: str | None = None) -> str | None:  # pylint: disable=redefined-outer-name
    """Convert a POSIX timestamp or a date string to ISO 8601 with a UTC offset.

    Args:
        value: Seconds since the epoch, or a date/time string (ISO 8601,
            ``YYYY/MM/DD[ HH:MM[:SS]]``, RFC 2822, ``@<epoch>``, or one of
            ``now``, ``today``, ``midnight``, ``tomorrow``, ``yesterday``).
        timezone: IANA timezone identifier. Defaults to the configured timezone.

    Returns:
        A string like ``2024-10-27T12:00:00+00:00``, or None if the timezone
        is unknown or the value cannot be parsed.

    Note:
        Timestamps are shown in the resolved timezone. Strings that carry
        their own offset keep it; naive strings are read in the resolved
        timezone, with daylight-saving rules applied.
    """
    tz = resolve_timezone(timezone)
    if tz is None:
        return None

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            moment = datetime.fromtimestamp(value, tz=tz)
        except (OverflowError, OSError, ValueError):
            logger.debug("Timestamp out of range: %r", value)
            return None
    elif isinstance(value, str):
        moment = _parse(value, tz)
        if moment is None:
            logger.debug("Unparseable date value: %r", value)
            return None
    else:
        return None

    return moment.isoformat(timespec="seconds")


def timestamp_to_date(timestamp: int, fmt: str = "%Y/%m/%d/") -> str:
    """Format a POSIX timestamp (read as UTC) with a `strftime` pattern."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).strftime(fmt)
