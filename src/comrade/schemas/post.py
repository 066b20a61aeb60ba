# src/comrade/schemas/post.py
"""Post and comment schemas, for the local store and for the backend API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .common import StoredModel


class Post(StoredModel):
    """Post in a city feed, optionally attached to an organization."""

    id: str
    author_id: str
    author_name: str
    author_avatar_color: str
    content: str
    city: str
    organization_id: str | None = None
    organization_name: str | None = None
    is_org_post: bool = False
    created_at: int
    likes: int = Field(0, ge=0)
    comment_count: int = Field(0, ge=0)
    is_liked: bool = False


class Comment(StoredModel):
    """Comment on a post; replies carry the id of their parent comment."""

    id: str
    post_id: str
    author_id: str
    author_name: str
    author_avatar_color: str
    content: str
    parent_id: str | None = None
    created_at: int
    likes: int = Field(0, ge=0)
    is_liked: bool = False


class CommentThread(BaseModel):
    """A top-level comment together with its direct replies."""

    comment: Comment
    replies: list[Comment] = Field(default_factory=list)


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PostCreate(_ApiModel):
    """Schema for creating a post through the backend."""

    author_id: str = Field(..., min_length=1)
    author_name: str = Field(..., min_length=1)
    author_avatar_color: str | None = None
    content: str = Field(..., min_length=1, max_length=5000, description="Post text")
    city: str = Field(..., min_length=1)
    organization_id: str | None = None
    organization_name: str | None = None
    is_org_post: bool = False


class PostResponse(_ApiModel):
    """Schema for post information returned by the backend."""

    id: int
    author_id: str
    author_name: str
    author_avatar_color: str | None
    content: str
    city: str
    organization_id: str | None
    organization_name: str | None
    is_org_post: bool
    likes: int
    comment_count: int
    created_at: datetime


class LikeToggle(_ApiModel):
    """Body of a like toggle request."""

    user_id: str = Field(..., min_length=1)


class CommentCreate(_ApiModel):
    """Schema for creating a comment through the backend."""

    author_id: str = Field(..., min_length=1)
    author_name: str = Field(..., min_length=1)
    author_avatar_color: str | None = None
    content: str = Field(..., min_length=1, max_length=2000)
    parent_id: int | None = None


class CommentResponse(_ApiModel):
    """Schema for comment information returned by the backend."""

    id: int
    post_id: int
    author_id: str
    author_name: str
    author_avatar_color: str | None
    content: str
    parent_id: int | None
    likes: int
    created_at: datetime
