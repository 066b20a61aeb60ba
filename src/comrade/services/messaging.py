"""Conversations, messages and conversation previews."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from comrade.core.errors import NotFoundError
from comrade.repositories.entities import ConversationRepository, MessageRepository
from comrade.schemas.messaging import Conversation, ConversationType, Message
from comrade.services.auth import AuthService
from comrade.utils.ids import generate_id, now_ms

logger = logging.getLogger(__name__)


class MessagingService:
    """Direct and group messaging for the session user.

    Conversations are labelled ``is_encrypted`` for display only; message
    content is stored as given.
    """

    def __init__(
        self,
        auth: AuthService,
        conversations: ConversationRepository,
        messages: MessageRepository,
    ) -> None:
        self.auth = auth
        self.conversations = conversations
        self.messages = messages

    async def list_conversations(self) -> list[Conversation]:
        return await self.conversations.list()

    async def get_conversation(self, conversation_id: str) -> Conversation | None:
        return await self.conversations.find(conversation_id)

    async def sorted_conversations(self) -> list[Conversation]:
        """Return conversations with the most recent activity first."""
        conversations = await self.conversations.list()
        return sorted(conversations, key=lambda c: c.last_message_at or 0, reverse=True)

    async def create_conversation(
        self,
        participant_ids: Sequence[str],
        participant_names: Sequence[str],
        conversation_type: ConversationType = "direct",
    ) -> Conversation:
        conversation = Conversation(
            id=generate_id(),
            type=conversation_type,
            participant_ids=list(participant_ids),
            participant_names=list(participant_names),
            unread_count=0,
            is_encrypted=True,
        )
        await self.conversations.add(conversation, prepend=True)
        logger.info("Created %s conversation %s", conversation_type, conversation.id)
        return conversation

    async def start_conversation(self, others: Sequence[tuple[str, str]]) -> Conversation:
        """Open a conversation between the session user and ``(id, name)`` pairs.

        More than one other participant makes it a group conversation.
        """
        if not others:
            raise ValueError("A conversation needs at least one other participant")
        user = await self.auth.require_user()
        participant_ids = [user.id, *(user_id for user_id, _ in others)]
        participant_names = [name for _, name in others]
        kind: ConversationType = "group" if len(others) > 1 else "direct"
        return await self.create_conversation(participant_ids, participant_names, kind)

    async def send_message(self, conversation_id: str, content: str) -> Message:
        """Store a message and overwrite its conversation's preview."""
        user = await self.auth.require_user()
        message = Message(
            id=generate_id(),
            conversation_id=conversation_id,
            sender_id=user.id,
            sender_name=user.display_name,
            content=content,
            created_at=now_ms(),
            is_read=False,
        )
        await self.messages.add(message)

        conversations = await self.conversations.list()
        for conversation in conversations:
            if conversation.id == conversation_id:
                conversation.last_message = content
                conversation.last_message_at = now_ms()
                await self.conversations.save(conversations)
                break
        return message

    async def list_messages(
        self,
        conversation_id: str,
        *,
        newest_first: bool = True,
    ) -> list[Message]:
        messages = await self.messages.for_conversation(conversation_id)
        return sorted(messages, key=lambda m: m.created_at, reverse=newest_first)

    async def mark_read(self, conversation_id: str) -> int:
        """Mark messages from other senders as read and reset the unread count.

        Returns the number of messages that changed.
        """
        user = await self.auth.require_user()
        conversations = await self.conversations.list()
        conversation = next((c for c in conversations if c.id == conversation_id), None)
        if conversation is None:
            raise NotFoundError(f"Conversation {conversation_id} not found")

        messages = await self.messages.list()
        changed = 0
        for message in messages:
            if (
                message.conversation_id == conversation_id
                and message.sender_id != user.id
                and not message.is_read
            ):
                message.is_read = True
                changed += 1
        if changed:
            await self.messages.save(messages)
        if conversation.unread_count:
            conversation.unread_count = 0
            await self.conversations.save(conversations)
        return changed
