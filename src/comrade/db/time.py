"""Clock helpers shared by the backend tables and the local records."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time; the default for backend ``created_at`` columns."""
    return datetime.now(UTC)


def to_epoch_ms(moment: datetime) -> int:
    """Convert a datetime to the epoch milliseconds used by local records.

    Naive datetimes (as SQLite hands them back) are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return int(moment.timestamp() * 1000)
