# src/comrade/schemas/__init__.py
"""
Pydantic schemas for stored records and API request/response models.

Stored records serialize with camelCase keys, matching what the mobile
client writes to its key-value storage.
"""

from .city import CITIES, City
from .messaging import Conversation, Message
from .organization import Organization, OrgMembership
from .post import (
    Comment,
    CommentCreate,
    CommentResponse,
    CommentThread,
    LikeToggle,
    Post,
    PostCreate,
    PostResponse,
)
from .user import AVATAR_COLORS, Comrade, User

__all__ = [
    "AVATAR_COLORS", "CITIES", "City",
    "Comment", "CommentCreate", "CommentResponse", "CommentThread",
    "Comrade",
    "Conversation", "Message",
    "LikeToggle",
    "Organization", "OrgMembership",
    "Post", "PostCreate", "PostResponse",
    "User",
]
