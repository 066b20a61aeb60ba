"""Conversation and message record schemas."""

from typing import Literal

from pydantic import Field

from .common import StoredModel

ConversationType = Literal["direct", "group"]


class Conversation(StoredModel):
    """Direct or group conversation between participants.

    ``is_encrypted`` is a display label; no cryptographic operation backs it.
    """

    id: str
    type: ConversationType = "direct"
    participant_ids: list[str]
    participant_names: list[str] = Field(default_factory=list)
    last_message: str | None = None
    last_message_at: int | None = None
    unread_count: int = Field(0, ge=0)
    is_encrypted: bool = True


class Message(StoredModel):
    """Message belonging to one conversation."""

    id: str
    conversation_id: str
    sender_id: str
    sender_name: str
    content: str
    encrypted_content: str | None = None
    created_at: int
    is_read: bool = False
