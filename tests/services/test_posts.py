"""Tests for posts, comments and their derived counters."""

import pytest

from comrade.core.errors import InvalidReferenceError, NotLoggedInError
from comrade.services import LocalStore
from comrade.storage import StorageKey
from comrade.storage.kv import MemoryKeyValueStore


@pytest.mark.asyncio
async def test_create_post_roundtrip(store, test_user) -> None:
    post = await store.posts.create_post("Community garden meetup", "sf")

    posts = await store.posts.list_posts()
    assert [p.id for p in posts] == [post.id]
    stored = posts[0]
    assert stored.content == "Community garden meetup"
    assert stored.city == "sf"
    assert stored.author_id == test_user.id
    assert stored.author_name == test_user.display_name
    assert stored.author_avatar_color == test_user.avatar_color
    assert stored.comment_count == 0
    assert stored.likes == 0
    assert stored.is_liked is False
    assert stored.is_org_post is False


@pytest.mark.asyncio
async def test_new_posts_are_listed_first(store, test_user) -> None:
    first = await store.posts.create_post("first", "sf")
    second = await store.posts.create_post("second", "sf")
    assert [p.id for p in await store.posts.list_posts()] == [second.id, first.id]


@pytest.mark.asyncio
async def test_create_post_requires_session(store, kv) -> None:
    with pytest.raises(NotLoggedInError):
        await store.posts.create_post("hello", "sf")
    assert await kv.get(StorageKey.POSTS) is None


@pytest.mark.asyncio
async def test_double_like_toggle_restores_state(store, test_user) -> None:
    post = await store.posts.create_post("like me", "sf")

    liked = await store.posts.toggle_like(post.id)
    assert liked.is_liked is True
    assert liked.likes == 1

    unliked = await store.posts.toggle_like(post.id)
    assert unliked.is_liked is False
    assert unliked.likes == 0

    stored = await store.posts.get_post(post.id)
    assert (stored.likes, stored.is_liked) == (post.likes, post.is_liked)


@pytest.mark.asyncio
async def test_toggle_like_on_unknown_post_is_noop(store, test_user, kv) -> None:
    await store.posts.create_post("hello", "sf")
    before = await kv.get(StorageKey.POSTS)
    assert await store.posts.toggle_like("missing") is None
    assert await kv.get(StorageKey.POSTS) == before


@pytest.mark.asyncio
async def test_like_counter_never_goes_negative(store, test_user) -> None:
    post = await store.posts.create_post("hello", "sf")
    posts = await store.posts.posts.list()
    # Simulate a corrupted record that claims a like with no count behind it.
    posts[0].is_liked = True
    await store.posts.posts.save(posts)

    toggled = await store.posts.toggle_like(post.id)
    assert toggled.is_liked is False
    assert toggled.likes == 0


@pytest.mark.parametrize("count", [1, 3, 7])
@pytest.mark.asyncio
async def test_comment_count_tracks_comments(store, test_user, count) -> None:
    post = await store.posts.create_post("discuss", "sf")
    for i in range(count):
        await store.posts.create_comment(post.id, f"comment {i}")

    stored = await store.posts.get_post(post.id)
    assert stored.comment_count == count
    assert len(await store.posts.list_comments(post.id)) == count


@pytest.mark.asyncio
async def test_comments_stay_with_their_post(store, test_user) -> None:
    first = await store.posts.create_post("one", "sf")
    second = await store.posts.create_post("two", "sf")
    await store.posts.create_comment(first.id, "a")
    await store.posts.create_comment(second.id, "b")
    await store.posts.create_comment(first.id, "c")

    assert [c.content for c in await store.posts.list_comments(first.id)] == ["a", "c"]
    assert (await store.posts.get_post(first.id)).comment_count == 2
    assert (await store.posts.get_post(second.id)).comment_count == 1


@pytest.mark.asyncio
async def test_reply_must_reference_comment_on_same_post(store, test_user) -> None:
    first = await store.posts.create_post("one", "sf")
    second = await store.posts.create_post("two", "sf")
    root = await store.posts.create_comment(first.id, "root")

    reply = await store.posts.create_comment(first.id, "reply", parent_id=root.id)
    assert reply.parent_id == root.id

    with pytest.raises(InvalidReferenceError):
        await store.posts.create_comment(second.id, "wrong post", parent_id=root.id)
    with pytest.raises(InvalidReferenceError):
        await store.posts.create_comment(first.id, "dangling", parent_id="missing")
    assert (await store.posts.get_post(second.id)).comment_count == 0


@pytest.mark.asyncio
async def test_comment_threads_group_replies(store, test_user) -> None:
    post = await store.posts.create_post("thread", "sf")
    root_a = await store.posts.create_comment(post.id, "a")
    root_b = await store.posts.create_comment(post.id, "b")
    reply = await store.posts.create_comment(post.id, "a.1", parent_id=root_a.id)

    threads = await store.posts.comment_threads(post.id)
    assert [t.comment.id for t in threads] == [root_a.id, root_b.id]
    assert [r.id for r in threads[0].replies] == [reply.id]
    assert threads[1].replies == []


@pytest.mark.asyncio
async def test_create_comment_requires_session(store) -> None:
    with pytest.raises(NotLoggedInError):
        await store.posts.create_comment("p1", "hello")


@pytest.mark.asyncio
async def test_comment_like_toggle(store, test_user) -> None:
    post = await store.posts.create_post("hello", "sf")
    comment = await store.posts.create_comment(post.id, "nice")

    liked = await store.posts.toggle_comment_like(comment.id)
    assert (liked.likes, liked.is_liked) == (1, True)
    unliked = await store.posts.toggle_comment_like(comment.id)
    assert (unliked.likes, unliked.is_liked) == (0, False)
    assert await store.posts.toggle_comment_like("missing") is None


@pytest.mark.asyncio
async def test_feed_views(store, test_user) -> None:
    sf_post = await store.posts.create_post("sf", "sf")
    await store.posts.create_post("nyc", "nyc")
    org_post = await store.posts.create_post("org", "sf", "org-1", "Tenants Union")

    assert [p.id for p in await store.posts.city_feed("sf")] == [org_post.id, sf_post.id]
    assert [p.id for p in await store.posts.organization_feed("org-1")] == [org_post.id]
    assert len(await store.posts.posts_by_author(test_user.id)) == 3
    assert await store.posts.posts_by_author("someone-else") == []


@pytest.mark.asyncio
async def test_feed_survives_unreadable_storage() -> None:
    class UnreadableStore(MemoryKeyValueStore):
        async def get(self, key: str) -> str | None:
            raise OSError("storage unavailable")

    store = LocalStore(UnreadableStore())
    assert await store.posts.list_posts() == []
    assert await store.auth.get_user() is None
    assert await store.auth.preferences.biometric_enabled() is False
