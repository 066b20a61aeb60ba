"""Organization and membership record schemas."""

from typing import Literal

from pydantic import Field

from .common import StoredModel

MembershipRole = Literal["owner", "admin", "member"]


class Organization(StoredModel):
    """Organization with its own feed inside a city."""

    id: str
    name: str = Field(..., min_length=1)
    description: str = ""
    avatar_color: str
    owner_id: str
    city: str
    member_count: int = Field(1, ge=0)
    is_public: bool = True
    created_at: int


class OrgMembership(StoredModel):
    """Join record between a user and an organization."""

    id: str
    organization_id: str
    user_id: str
    role: MembershipRole = "member"
    joined_at: int
