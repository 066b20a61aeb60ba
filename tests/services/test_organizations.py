"""Tests for organizations and memberships."""

import pytest

from comrade.core.errors import NotFoundError, NotLoggedInError
from comrade.schemas.user import AVATAR_COLORS
from comrade.services.store import LocalStore


async def _switch_user(kv, name: str) -> LocalStore:
    """Replace the device's session user while keeping its collections."""
    other = LocalStore(kv)
    await other.auth.users.clear()
    await other.auth.login(name, "sf")
    return other


@pytest.mark.asyncio
async def test_create_organization_adds_single_owner(store, test_user) -> None:
    org = await store.organizations.create_organization("Tenants Union", "Housing", "sf")

    assert org.owner_id == test_user.id
    assert org.member_count == 1
    assert org.is_public is True
    assert org.avatar_color in AVATAR_COLORS

    members = await store.organizations.members(org.id)
    owners = [m for m in members if m.role == "owner"]
    assert len(members) == 1
    assert len(owners) == 1
    assert owners[0].user_id == test_user.id


@pytest.mark.asyncio
async def test_create_organization_requires_session(store) -> None:
    with pytest.raises(NotLoggedInError):
        await store.organizations.create_organization("Org", "", "sf")
    assert await store.organizations.list_organizations() == []
    assert await store.organizations.memberships.list() == []


@pytest.mark.asyncio
async def test_org_post_scenario(store, test_user) -> None:
    org = await store.organizations.create_organization("Test Org", "", "sf", is_public=True)
    assert org.member_count == 1
    assert len(await store.organizations.members(org.id)) == 1

    post = await store.posts.create_post("Org news", "sf", org.id, org.name)
    listed = await store.posts.get_post(post.id)
    assert listed.is_org_post is True
    assert listed.organization_name == "Test Org"
    assert listed.comment_count == 0

    await store.posts.create_comment(post.id, "hello")
    assert (await store.posts.get_post(post.id)).comment_count == 1


@pytest.mark.asyncio
async def test_join_organization_adds_member_and_counts(store, test_user, kv) -> None:
    org = await store.organizations.create_organization("Org", "", "sf")

    other = await _switch_user(kv, "Bo")
    membership = await other.organizations.join_organization(org.id)
    assert membership.role == "member"

    again = await other.organizations.join_organization(org.id)
    assert again.id == membership.id

    members = await other.organizations.members(org.id)
    assert sorted(m.role for m in members) == ["member", "owner"]
    assert (await other.organizations.get_organization(org.id)).member_count == 2


@pytest.mark.asyncio
async def test_owner_joining_again_is_noop(store, test_user) -> None:
    org = await store.organizations.create_organization("Org", "", "sf")
    membership = await store.organizations.join_organization(org.id)
    assert membership.role == "owner"
    assert (await store.organizations.get_organization(org.id)).member_count == 1


@pytest.mark.asyncio
async def test_join_unknown_organization(store, test_user) -> None:
    with pytest.raises(NotFoundError):
        await store.organizations.join_organization("missing")


@pytest.mark.asyncio
async def test_my_and_discover_organizations(store, test_user, kv) -> None:
    mine = await store.organizations.create_organization("Mine", "", "sf")

    other = await _switch_user(kv, "Bo")
    public_sf = await other.organizations.create_organization("Public", "", "sf")
    await other.organizations.create_organization("Private", "", "sf", is_public=False)
    await other.organizations.create_organization("Elsewhere", "", "nyc")

    assert [o.id for o in await other.organizations.discover_organizations("sf")] == [mine.id]
    assert {o.id for o in await other.organizations.my_organizations()} >= {public_sf.id}

    await other.organizations.join_organization(mine.id)
    assert await other.organizations.discover_organizations("sf") == []
    user = await other.auth.require_user()
    assert await other.organizations.is_member(mine.id, user.id) is True
    assert await other.organizations.is_owner(mine.id, user.id) is False
    assert await other.organizations.is_owner(public_sf.id, user.id) is True
    assert len(await other.organizations.user_memberships(user.id)) == 4
