"""Repositories for each entity collection in the local store."""
from __future__ import annotations

from comrade.schemas.messaging import Conversation, Message
from comrade.schemas.organization import Organization, OrgMembership
from comrade.schemas.post import Comment, Post
from comrade.schemas.user import Comrade
from comrade.storage.keys import StorageKey

from .base import JsonCollectionRepository

__all__ = [
    "CommentRepository",
    "ComradeRepository",
    "ConversationRepository",
    "MembershipRepository",
    "MessageRepository",
    "OrganizationRepository",
    "PostRepository",
]


class ComradeRepository(JsonCollectionRepository[Comrade]):
    key = StorageKey.COMRADES
    model = Comrade


class PostRepository(JsonCollectionRepository[Post]):
    """Posts, newest first."""

    key = StorageKey.POSTS
    model = Post


class CommentRepository(JsonCollectionRepository[Comment]):
    """Comments of every post, stored flat and filtered per post on read."""

    key = StorageKey.COMMENTS
    model = Comment

    async def for_post(self, post_id: str) -> list[Comment]:
        return await self.filter_by(post_id=post_id)


class ConversationRepository(JsonCollectionRepository[Conversation]):
    key = StorageKey.CONVERSATIONS
    model = Conversation


class MessageRepository(JsonCollectionRepository[Message]):
    """Messages of every conversation, filtered per conversation on read."""

    key = StorageKey.MESSAGES
    model = Message

    async def for_conversation(self, conversation_id: str) -> list[Message]:
        return await self.filter_by(conversation_id=conversation_id)


class OrganizationRepository(JsonCollectionRepository[Organization]):
    key = StorageKey.ORGANIZATIONS
    model = Organization


class MembershipRepository(JsonCollectionRepository[OrgMembership]):
    key = StorageKey.MEMBERSHIPS
    model = OrgMembership

    async def for_user(self, user_id: str) -> list[OrgMembership]:
        return await self.filter_by(user_id=user_id)

    async def for_organization(self, organization_id: str) -> list[OrgMembership]:
        return await self.filter_by(organization_id=organization_id)
