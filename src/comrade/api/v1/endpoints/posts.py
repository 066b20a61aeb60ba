# src/comrade/api/v1/endpoints/posts.py
"""Post, like and comment endpoints for the Comrade backend."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import desc
from sqlalchemy.orm import Session

from comrade.db.session import get_db
from comrade.models import Comment, Post, PostLike
from comrade.schemas.post import (
    CommentCreate,
    CommentResponse,
    LikeToggle,
    PostCreate,
    PostResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])
SessionDep = Annotated[Session, Depends(get_db)]


def _get_post_or_404(db: Session, post_id: int) -> Post:
    post = db.query(Post).filter(Post.id == post_id).first()
    if post is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found",
        )
    return post


@router.get("", response_model=list[PostResponse])
async def list_posts(db: SessionDep, city: str | None = None) -> list[Post]:
    """List posts newest first, optionally limited to one city."""
    query = db.query(Post)
    if city:
        query = query.filter(Post.city == city)
    return query.order_by(desc(Post.created_at), desc(Post.id)).all()


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(post_data: PostCreate, db: SessionDep) -> Post:
    """Create a new post."""
    post = Post(
        author_id=post_data.author_id,
        author_name=post_data.author_name,
        author_avatar_color=post_data.author_avatar_color,
        content=post_data.content,
        city=post_data.city,
        organization_id=post_data.organization_id,
        organization_name=post_data.organization_name,
        is_org_post=post_data.is_org_post or post_data.organization_id is not None,
        likes=0,
        comment_count=0,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("Created post %s in %s", post.id, post.city)
    return post


@router.put("/{post_id}/like", response_model=PostResponse)
async def toggle_like(post_id: int, like: LikeToggle, db: SessionDep) -> Post:
    """Like the post for ``userId``, or remove the like if it already exists."""
    post = _get_post_or_404(db, post_id)

    existing = db.query(PostLike).filter(
        PostLike.post_id == post_id,
        PostLike.user_id == like.user_id,
    ).first()

    if existing:
        db.delete(existing)
        post.likes = max(0, post.likes - 1)
    else:
        db.add(PostLike(post_id=post_id, user_id=like.user_id))
        post.likes += 1

    db.commit()
    db.refresh(post)
    return post


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: int, db: SessionDep) -> list[Comment]:
    """List a post's comments, oldest first."""
    return (
        db.query(Comment)
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at, Comment.id)
        .all()
    )


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: int,
    comment_data: CommentCreate,
    db: SessionDep,
) -> Comment:
    """Add a comment and increment the post's comment count."""
    post = _get_post_or_404(db, post_id)

    if comment_data.parent_id is not None:
        parent = db.query(Comment).filter(
            Comment.id == comment_data.parent_id,
            Comment.post_id == post_id,
        ).first()
        if parent is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Parent comment not found on this post",
            )

    comment = Comment(
        post_id=post_id,
        author_id=comment_data.author_id,
        author_name=comment_data.author_name,
        author_avatar_color=comment_data.author_avatar_color,
        content=comment_data.content,
        parent_id=comment_data.parent_id,
        likes=0,
    )
    db.add(comment)
    post.comment_count += 1
    db.commit()
    db.refresh(comment)
    return comment
