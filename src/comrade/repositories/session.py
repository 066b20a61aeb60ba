"""Repositories for the session user and the device preference flags."""
from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from comrade.core.settings import settings
from comrade.repositories.base import read_value
from comrade.schemas.user import User
from comrade.storage.keys import StorageKey
from comrade.storage.kv import KeyValueStore

__all__ = ["PreferenceRepository", "UserRepository"]

logger = logging.getLogger(__name__)


class UserRepository:
    """The single user record; its absence means nobody is logged in."""

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    async def get(self) -> User | None:
        """Return the stored user, treating unreadable data as absent."""
        raw = await read_value(self.store, StorageKey.USER)
        if not raw:
            return None
        try:
            return User.model_validate(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Discarding unreadable user record: %s", exc)
            return None

    async def save(self, user: User) -> User:
        await self.store.set(StorageKey.USER, json.dumps(user.to_storage()))
        return user

    async def clear(self) -> None:
        await self.store.remove(StorageKey.USER)


class PreferenceRepository:
    """Scalar flags: biometric lock and the selected feed city."""

    def __init__(self, store: KeyValueStore, default_city: str | None = None) -> None:
        self.store = store
        self.default_city = default_city or settings.default_city

    async def biometric_enabled(self) -> bool:
        return await read_value(self.store, StorageKey.BIOMETRIC_ENABLED) == "true"

    async def set_biometric_enabled(self, enabled: bool) -> None:
        await self.store.set(StorageKey.BIOMETRIC_ENABLED, "true" if enabled else "false")

    async def selected_city(self) -> str:
        return await read_value(self.store, StorageKey.SELECTED_CITY) or self.default_city

    async def set_selected_city(self, city_id: str) -> None:
        await self.store.set(StorageKey.SELECTED_CITY, city_id)
