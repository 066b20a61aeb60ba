"""Tests for conversations and messages."""

from unittest.mock import patch

import pytest

from comrade.core.errors import NotFoundError, NotLoggedInError


@pytest.mark.asyncio
async def test_create_conversation_defaults(store) -> None:
    conversation = await store.messaging.create_conversation(["u1", "u2"], ["Bo"])

    assert conversation.type == "direct"
    assert conversation.participant_ids == ["u1", "u2"]
    assert conversation.unread_count == 0
    assert conversation.is_encrypted is True
    assert conversation.last_message is None
    assert await store.messaging.get_conversation(conversation.id) == conversation


@pytest.mark.asyncio
async def test_start_conversation_includes_session_user(store, test_user) -> None:
    direct = await store.messaging.start_conversation([("u2", "Bo")])
    assert direct.type == "direct"
    assert direct.participant_ids == [test_user.id, "u2"]
    assert direct.participant_names == ["Bo"]

    group = await store.messaging.start_conversation([("u2", "Bo"), ("u3", "Cy")])
    assert group.type == "group"
    assert [c.id for c in await store.messaging.list_conversations()] == [group.id, direct.id]

    with pytest.raises(ValueError):
        await store.messaging.start_conversation([])


@pytest.mark.asyncio
async def test_send_message_updates_preview(store, test_user) -> None:
    conversation = await store.messaging.start_conversation([("u2", "Bo")])

    with patch("comrade.services.messaging.now_ms", side_effect=[1_000, 1_001, 2_000, 2_001]):
        first = await store.messaging.send_message(conversation.id, "hello")
        second = await store.messaging.send_message(conversation.id, "again")

    assert first.sender_id == test_user.id
    assert first.sender_name == test_user.display_name
    assert first.is_read is False

    stored = await store.messaging.get_conversation(conversation.id)
    assert stored.last_message == "again"
    assert stored.last_message_at == 2_001

    newest_first = await store.messaging.list_messages(conversation.id)
    assert [m.id for m in newest_first] == [second.id, first.id]
    oldest_first = await store.messaging.list_messages(conversation.id, newest_first=False)
    assert [m.id for m in oldest_first] == [first.id, second.id]


@pytest.mark.asyncio
async def test_send_message_requires_session(store) -> None:
    conversation = await store.messaging.create_conversation(["u1", "u2"], ["Bo"])
    with pytest.raises(NotLoggedInError):
        await store.messaging.send_message(conversation.id, "hello")
    assert await store.messaging.list_messages(conversation.id) == []


@pytest.mark.asyncio
async def test_sorted_conversations_by_activity(store, test_user) -> None:
    quiet = await store.messaging.start_conversation([("u2", "Bo")])
    busy = await store.messaging.start_conversation([("u3", "Cy")])
    older = await store.messaging.start_conversation([("u4", "Di")])

    with patch("comrade.services.messaging.now_ms", side_effect=[10, 10, 50, 50]):
        await store.messaging.send_message(older.id, "old")
        await store.messaging.send_message(busy.id, "new")

    ordered = await store.messaging.sorted_conversations()
    assert [c.id for c in ordered] == [busy.id, older.id, quiet.id]


@pytest.mark.asyncio
async def test_mark_read_only_touches_incoming_messages(store, test_user) -> None:
    conversation = await store.messaging.start_conversation([("u2", "Bo")])
    await store.messaging.send_message(conversation.id, "mine")

    messages = await store.messaging.messages.list()
    incoming = messages[0].model_copy(update={"id": "incoming", "sender_id": "u2"})
    await store.messaging.messages.add(incoming)
    conversations = await store.messaging.conversations.list()
    conversations[0].unread_count = 1
    await store.messaging.conversations.save(conversations)

    assert await store.messaging.mark_read(conversation.id) == 1

    by_id = {m.id: m for m in await store.messaging.list_messages(conversation.id)}
    assert by_id["incoming"].is_read is True
    assert [m.is_read for m in by_id.values() if m.sender_id == test_user.id] == [False]
    assert (await store.messaging.get_conversation(conversation.id)).unread_count == 0

    with pytest.raises(NotFoundError):
        await store.messaging.mark_read("missing")
