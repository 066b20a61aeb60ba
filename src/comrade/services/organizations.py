"""Organizations and their memberships."""
from __future__ import annotations

import logging

from comrade.core.errors import NotFoundError
from comrade.repositories.entities import MembershipRepository, OrganizationRepository
from comrade.schemas.organization import MembershipRole, Organization, OrgMembership
from comrade.services.auth import AuthService
from comrade.utils.ids import generate_id, now_ms, random_avatar_color

logger = logging.getLogger(__name__)


class OrganizationService:
    """Create, join and browse organizations.

    Every organization has exactly one ``owner`` membership, written right
    after the organization itself. ``member_count`` starts at 1 and grows by
    one for each new member who joins.
    """

    def __init__(
        self,
        auth: AuthService,
        organizations: OrganizationRepository,
        memberships: MembershipRepository,
    ) -> None:
        self.auth = auth
        self.organizations = organizations
        self.memberships = memberships

    async def list_organizations(self) -> list[Organization]:
        return await self.organizations.list()

    async def get_organization(self, organization_id: str) -> Organization | None:
        return await self.organizations.find(organization_id)

    async def create_organization(
        self,
        name: str,
        description: str,
        city: str,
        is_public: bool = True,
    ) -> Organization:
        user = await self.auth.require_user()
        organization = Organization(
            id=generate_id(),
            name=name,
            description=description,
            avatar_color=random_avatar_color(),
            owner_id=user.id,
            city=city,
            member_count=1,
            is_public=is_public,
            created_at=now_ms(),
        )
        await self.organizations.add(organization)
        await self.add_membership(organization.id, user.id, "owner")
        logger.info("Created organization %s (%s)", organization.name, organization.id)
        return organization

    async def add_membership(
        self,
        organization_id: str,
        user_id: str,
        role: MembershipRole = "member",
    ) -> OrgMembership:
        membership = OrgMembership(
            id=generate_id(),
            organization_id=organization_id,
            user_id=user_id,
            role=role,
            joined_at=now_ms(),
        )
        return await self.memberships.add(membership)

    async def join_organization(self, organization_id: str) -> OrgMembership:
        """Join as a ``member``; joining twice returns the existing membership."""
        user = await self.auth.require_user()
        organizations = await self.organizations.list()
        organization = next((o for o in organizations if o.id == organization_id), None)
        if organization is None:
            raise NotFoundError(f"Organization {organization_id} not found")

        for membership in await self.memberships.for_organization(organization_id):
            if membership.user_id == user.id:
                return membership

        membership = await self.add_membership(organization_id, user.id, "member")
        organization.member_count += 1
        await self.organizations.save(organizations)
        logger.info("User %s joined organization %s", user.id, organization_id)
        return membership

    async def members(self, organization_id: str) -> list[OrgMembership]:
        return await self.memberships.for_organization(organization_id)

    async def user_memberships(self, user_id: str) -> list[OrgMembership]:
        return await self.memberships.for_user(user_id)

    async def my_organizations(self) -> list[Organization]:
        """Organizations the session user belongs to."""
        user = await self.auth.require_user()
        joined = {m.organization_id for m in await self.memberships.for_user(user.id)}
        return [o for o in await self.organizations.list() if o.id in joined]

    async def discover_organizations(self, city: str) -> list[Organization]:
        """Public organizations in ``city`` the session user has not joined."""
        user = await self.auth.require_user()
        joined = {m.organization_id for m in await self.memberships.for_user(user.id)}
        return [
            o
            for o in await self.organizations.list()
            if o.id not in joined and o.city == city and o.is_public
        ]

    async def is_member(self, organization_id: str, user_id: str) -> bool:
        return any(
            m.organization_id == organization_id
            for m in await self.memberships.for_user(user_id)
        )

    async def is_owner(self, organization_id: str, user_id: str) -> bool:
        organization = await self.organizations.find(organization_id)
        return organization is not None and organization.owner_id == user_id
