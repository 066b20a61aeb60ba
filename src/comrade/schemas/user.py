"""User and comrade record schemas."""

from pydantic import Field

from .common import StoredModel

AVATAR_COLORS: tuple[str, ...] = (
    "#8B7355",
    "#D4A373",
    "#6B8E23",
    "#A67B5B",
    "#9CAF88",
    "#B5838D",
)


class User(StoredModel):
    """The single local user profile."""

    id: str
    display_name: str = Field(..., description="Public-facing display name")
    bio: str = ""
    avatar_color: str
    city: str = Field(..., description="Home city of the user")
    created_at: int = Field(..., description="Creation time in epoch milliseconds")
    public_key: str


class Comrade(StoredModel):
    """Directed connection from ``user_id`` to ``comrade_id``."""

    id: str
    user_id: str
    comrade_id: str
    added_at: int
