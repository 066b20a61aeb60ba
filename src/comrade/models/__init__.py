# src/comrade/models/__init__.py
"""SQLAlchemy models for the Comrade backend and durable key-value storage."""

from .comment import Comment
from .kv import KeyValueEntry
from .post import Post, PostLike

__all__ = [
    "Comment",
    "KeyValueEntry",
    "Post", "PostLike",
]
