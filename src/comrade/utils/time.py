"""Display helpers for record timestamps (epoch milliseconds)."""
from __future__ import annotations

from datetime import datetime

from comrade.utils.ids import now_ms

_MINUTE_MS = 60_000
_HOUR_MS = 3_600_000
_DAY_MS = 86_400_000


def time_ago(timestamp_ms: int, now: int | None = None) -> str:
    """Return a short relative label such as ``"5m ago"``.

    Anything a week old or older falls back to the calendar date.
    """
    current = now_ms() if now is None else now
    diff = current - timestamp_ms
    minutes = diff // _MINUTE_MS
    hours = diff // _HOUR_MS
    days = diff // _DAY_MS

    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes}m ago"
    if hours < 24:
        return f"{hours}h ago"
    if days < 7:
        return f"{days}d ago"
    return datetime.fromtimestamp(timestamp_ms / 1000).date().isoformat()


def format_clock(timestamp_ms: int) -> str:
    """Return the local ``HH:MM`` time of a message."""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%H:%M")
