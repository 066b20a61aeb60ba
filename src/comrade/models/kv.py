"""SQLAlchemy model backing the durable key-value store."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from comrade.db.session import Base


class KeyValueEntry(Base):
    """One storage key and its JSON-encoded value.

    Each entity collection lives under a single key, so a row holds a whole
    serialized list rather than one record.
    """

    __tablename__ = "kv_entry"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
