"""Async key-value storage media for the local data layer.

Values are opaque strings (JSON text in practice). All operations are
awaited by the caller; none of the implementations coordinate concurrent
writers, so a store instance expects a single caller at a time.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from redis import asyncio as redis_asyncio
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from comrade.core.settings import Settings, settings as default_settings
from comrade.models.kv import KeyValueEntry

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable string-keyed storage consumed by the repositories."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...

    async def remove_many(self, keys: Iterable[str]) -> None: ...


class MemoryKeyValueStore:
    """Process-local store backed by a dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def remove_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._data.pop(key, None)

    def keys(self) -> list[str]:
        """Return the keys currently held."""
        return list(self._data)


class SqlKeyValueStore:
    """Store persisting each key as a row of the ``kv_entry`` table.

    Session work is synchronous, so each call runs in a worker thread to keep
    the event loop free.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @classmethod
    def from_url(cls, url: str) -> SqlKeyValueStore:
        """Build a store over ``url``, creating the ``kv_entry`` table if needed."""
        kwargs: dict[str, Any] = {"pool_pre_ping": True}
        if url.startswith("sqlite"):
            # Sessions are opened from worker threads.
            kwargs["connect_args"] = {"check_same_thread": False}
            if url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        KeyValueEntry.__table__.create(bind=engine, checkfirst=True)
        return cls(sessionmaker(bind=engine, autoflush=False))

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._get, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set, key, value)

    async def remove(self, key: str) -> None:
        await self.remove_many([key])

    async def remove_many(self, keys: Iterable[str]) -> None:
        key_list = list(keys)
        if key_list:
            await asyncio.to_thread(self._delete, key_list)

    def _get(self, key: str) -> str | None:
        with self._session_factory() as db:
            entry = db.get(KeyValueEntry, key)
            return entry.value if entry is not None else None

    def _set(self, key: str, value: str) -> None:
        with self._session_factory() as db:
            db.merge(KeyValueEntry(key=key, value=value))
            db.commit()

    def _delete(self, keys: list[str]) -> None:
        with self._session_factory() as db:
            db.query(KeyValueEntry).filter(KeyValueEntry.key.in_(keys)).delete(
                synchronize_session=False
            )
            db.commit()


class RedisKeyValueStore:
    """Store delegating to a Redis server through ``redis.asyncio``."""

    def __init__(self, client: redis_asyncio.Redis) -> None:
        self._redis = client

    @classmethod
    def from_url(cls, url: str) -> RedisKeyValueStore:
        """Build a store from a Redis connection URL."""
        return cls(redis_asyncio.from_url(url, decode_responses=True))

    async def get(self, key: str) -> str | None:
        value = await self._redis.get(key)
        if isinstance(value, bytes):
            return value.decode("utf-8")
        return value

    async def set(self, key: str, value: str) -> None:
        await self._redis.set(key, value)

    async def remove(self, key: str) -> None:
        await self._redis.delete(key)

    async def remove_many(self, keys: Iterable[str]) -> None:
        key_list = list(keys)
        if key_list:
            await self._redis.delete(*key_list)

    async def close(self) -> None:
        """Release the underlying connection pool."""
        await self._redis.aclose()


def build_key_value_store(config: Settings | None = None) -> KeyValueStore:
    """Return the storage medium selected by ``STORAGE_BACKEND``."""
    config = config or default_settings
    backend = config.storage_backend
    logger.info("Using %s key-value storage", backend)
    if backend == "redis":
        return RedisKeyValueStore.from_url(config.redis_url)
    if backend == "sql":
        return SqlKeyValueStore.from_url(config.effective_storage_url)
    return MemoryKeyValueStore()
