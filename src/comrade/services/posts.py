"""Posts, comments and the counters derived from them."""
from __future__ import annotations

import logging

from comrade.core.errors import InvalidReferenceError
from comrade.repositories.entities import CommentRepository, PostRepository
from comrade.schemas.post import Comment, CommentThread, Post
from comrade.services.auth import AuthService
from comrade.utils.ids import generate_id, now_ms

logger = logging.getLogger(__name__)


def _toggled_likes(likes: int, is_liked: bool) -> tuple[int, bool]:
    """Flip a like flag and move its counter by one, never below zero."""
    liked = not is_liked
    return max(0, likes + (1 if liked else -1)), liked


class PostService:
    """Post feed operations for the session user.

    ``comment_count`` on a post is kept in step with its comments by
    incrementing it after each comment is stored. The comment write and the
    post write are separate.
    """

    def __init__(
        self,
        auth: AuthService,
        posts: PostRepository,
        comments: CommentRepository,
    ) -> None:
        self.auth = auth
        self.posts = posts
        self.comments = comments

    async def list_posts(self) -> list[Post]:
        return await self.posts.list()

    async def get_post(self, post_id: str) -> Post | None:
        return await self.posts.find(post_id)

    async def create_post(
        self,
        content: str,
        city: str,
        organization_id: str | None = None,
        organization_name: str | None = None,
    ) -> Post:
        """Publish a post as the session user, newest first."""
        user = await self.auth.require_user()
        post = Post(
            id=generate_id(),
            author_id=user.id,
            author_name=user.display_name,
            author_avatar_color=user.avatar_color,
            content=content,
            city=city,
            organization_id=organization_id,
            organization_name=organization_name,
            is_org_post=organization_id is not None,
            created_at=now_ms(),
            likes=0,
            comment_count=0,
            is_liked=False,
        )
        await self.posts.add(post, prepend=True)
        logger.info("Created post %s in %s", post.id, city)
        return post

    async def toggle_like(self, post_id: str) -> Post | None:
        """Like or unlike a post on this device. Unknown ids are ignored."""
        posts = await self.posts.list()
        for post in posts:
            if post.id == post_id:
                post.likes, post.is_liked = _toggled_likes(post.likes, post.is_liked)
                await self.posts.save(posts)
                return post
        return None

    async def toggle_comment_like(self, comment_id: str) -> Comment | None:
        comments = await self.comments.list()
        for comment in comments:
            if comment.id == comment_id:
                comment.likes, comment.is_liked = _toggled_likes(comment.likes, comment.is_liked)
                await self.comments.save(comments)
                return comment
        return None

    async def create_comment(
        self,
        post_id: str,
        content: str,
        parent_id: str | None = None,
    ) -> Comment:
        """Add a comment and bump the post's comment count by one.

        Raises:
            NotLoggedInError: If there is no session user.
            InvalidReferenceError: If ``parent_id`` is not a comment of the same post.
        """
        user = await self.auth.require_user()
        all_comments = await self.comments.list()
        if parent_id is not None and not any(
            c.id == parent_id and c.post_id == post_id for c in all_comments
        ):
            raise InvalidReferenceError(
                f"Comment {parent_id} is not a comment on post {post_id}"
            )

        comment = Comment(
            id=generate_id(),
            post_id=post_id,
            author_id=user.id,
            author_name=user.display_name,
            author_avatar_color=user.avatar_color,
            content=content,
            parent_id=parent_id,
            created_at=now_ms(),
            likes=0,
            is_liked=False,
        )
        all_comments.append(comment)
        await self.comments.save(all_comments)

        posts = await self.posts.list()
        for post in posts:
            if post.id == post_id:
                post.comment_count += 1
                await self.posts.save(posts)
                break
        else:
            logger.warning("Comment %s stored for unknown post %s", comment.id, post_id)
        return comment

    async def list_comments(self, post_id: str) -> list[Comment]:
        """Return a post's comments, oldest first."""
        comments = await self.comments.for_post(post_id)
        return sorted(comments, key=lambda c: c.created_at)

    async def comment_threads(self, post_id: str) -> list[CommentThread]:
        """Group a post's comments into top-level comments with their replies."""
        comments = await self.list_comments(post_id)
        return [
            CommentThread(
                comment=root,
                replies=[c for c in comments if c.parent_id == root.id],
            )
            for root in comments
            if root.parent_id is None
        ]

    async def city_feed(self, city: str) -> list[Post]:
        return [post for post in await self.posts.list() if post.city == city]

    async def organization_feed(self, organization_id: str) -> list[Post]:
        return await self.posts.filter_by(organization_id=organization_id)

    async def posts_by_author(self, user_id: str) -> list[Post]:
        return await self.posts.filter_by(author_id=user_id)
