"""Repositories over the JSON collections of the local store."""

from .base import JsonCollectionRepository
from .entities import (
    CommentRepository,
    ComradeRepository,
    ConversationRepository,
    MembershipRepository,
    MessageRepository,
    OrganizationRepository,
    PostRepository,
)
from .session import PreferenceRepository, UserRepository

__all__ = [
    "CommentRepository",
    "ComradeRepository",
    "ConversationRepository",
    "JsonCollectionRepository",
    "MembershipRepository",
    "MessageRepository",
    "OrganizationRepository",
    "PostRepository",
    "PreferenceRepository",
    "UserRepository",
]
