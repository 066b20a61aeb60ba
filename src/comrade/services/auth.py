"""Session and authentication state for the single local user."""
from __future__ import annotations

import logging
from typing import Any

from comrade.core.errors import BiometricAuthError, NotLoggedInError
from comrade.core.settings import settings
from comrade.repositories.session import PreferenceRepository, UserRepository
from comrade.schemas.user import User
from comrade.services.biometric import BiometricAuthenticator, NoBiometricAuthenticator
from comrade.storage.keys import ALL_KEYS
from comrade.storage.kv import KeyValueStore
from comrade.utils.ids import generate_id, now_ms, random_avatar_color

logger = logging.getLogger(__name__)

# Profile fields a user may edit; identity fields stay fixed.
EDITABLE_PROFILE_FIELDS = frozenset({"display_name", "bio", "avatar_color", "city"})


class AuthService:
    """Explicit session object for one key-value store.

    The session moves between two states: logged out (no user record) and
    logged in (user record present). Only one session is active per store.
    """

    def __init__(
        self,
        store: KeyValueStore,
        biometric: BiometricAuthenticator | None = None,
    ) -> None:
        self.store = store
        self.users = UserRepository(store)
        self.preferences = PreferenceRepository(store)
        self.biometric = biometric or NoBiometricAuthenticator()
        self.user: User | None = None
        self.biometric_enabled = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    async def load(self) -> User | None:
        """Restore the user and biometric flag persisted by a previous run."""
        self.user = await self.users.get()
        self.biometric_enabled = await self.preferences.biometric_enabled()
        return self.user

    async def get_user(self) -> User | None:
        """Return the persisted session user, if any."""
        return await self.users.get()

    async def require_user(self) -> User:
        """Return the session user or raise when nobody is logged in."""
        user = await self.users.get()
        if user is None:
            raise NotLoggedInError()
        return user

    async def login(self, display_name: str, city: str) -> User:
        """Create the local user and persist it as the session user.

        When the biometric lock is enabled the platform prompt must succeed
        first; otherwise nothing is written.
        """
        if await self.preferences.biometric_enabled():
            if not await self.authenticate_with_biometric():
                raise BiometricAuthError("Biometric authentication failed")

        user = User(
            id=generate_id(),
            display_name=display_name,
            bio="",
            avatar_color=random_avatar_color(),
            city=city,
            created_at=now_ms(),
            public_key=generate_id(),
        )
        await self.users.save(user)
        self.user = user
        logger.info("Logged in as %s (%s)", user.display_name, user.id)
        return user

    async def logout(self) -> None:
        """End the session by wiping every local collection and flag."""
        await self.store.remove_many(ALL_KEYS)
        self.user = None
        self.biometric_enabled = False
        logger.info("Logged out and cleared local data")

    async def update_profile(self, **updates: Any) -> User | None:
        """Merge editable profile fields into the session user."""
        user = await self.users.get()
        if user is None:
            return None
        unknown = set(updates) - EDITABLE_PROFILE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update profile fields: {', '.join(sorted(unknown))}")
        updated = user.model_copy(update=updates)
        # Re-validate so bad values never reach storage.
        updated = User.model_validate(updated.model_dump())
        await self.users.save(updated)
        self.user = updated
        return updated

    async def biometric_available(self) -> bool:
        try:
            return await self.biometric.is_available()
        except Exception as exc:
            logger.warning("Biometric availability check failed: %s", exc)
            return False

    async def authenticate_with_biometric(self) -> bool:
        """Run the platform prompt; a failing prompt counts as a refusal."""
        try:
            return await self.biometric.authenticate(settings.biometric_prompt)
        except Exception as exc:
            logger.warning("Biometric prompt failed: %s", exc)
            return False

    async def enable_biometric(self) -> bool:
        """Turn the lock on, but only after a successful prompt."""
        success = await self.authenticate_with_biometric()
        if success:
            await self.preferences.set_biometric_enabled(True)
            self.biometric_enabled = True
        return success

    async def disable_biometric(self) -> None:
        await self.preferences.set_biometric_enabled(False)
        self.biometric_enabled = False

    async def selected_city(self) -> str:
        return await self.preferences.selected_city()

    async def set_selected_city(self, city_id: str) -> None:
        await self.preferences.set_selected_city(city_id)
