"""Storage keys for every collection and flag kept on the device."""

from enum import StrEnum


class StorageKey(StrEnum):
    """One key per entity kind, plus two scalar flags."""

    USER = "comrade_user"
    COMRADES = "comrade_comrades"
    POSTS = "comrade_posts"
    COMMENTS = "comrade_comments"
    CONVERSATIONS = "comrade_conversations"
    MESSAGES = "comrade_messages"
    ORGANIZATIONS = "comrade_organizations"
    MEMBERSHIPS = "comrade_memberships"
    BIOMETRIC_ENABLED = "comrade_biometric_enabled"
    SELECTED_CITY = "comrade_selected_city"


ALL_KEYS: tuple[str, ...] = tuple(key.value for key in StorageKey)
