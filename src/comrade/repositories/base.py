"""Generic repository over one JSON-encoded list in the key-value store."""
from __future__ import annotations

import json
import logging
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from comrade.schemas.common import StoredModel
from comrade.storage.kv import KeyValueStore

__all__ = ["JsonCollectionRepository", "read_value"]

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=StoredModel)


async def read_value(store: KeyValueStore, key: str) -> str | None:
    """Fetch ``key`` from ``store``, reading any storage failure as a missing value."""
    try:
        return await store.get(key)
    except Exception as exc:  # backend-specific error types
        logger.warning("Could not read %s from storage: %s", key, exc)
        return None


class JsonCollectionRepository(Generic[ModelT]):
    """CRUD over a whole collection stored as one JSON array.

    Every mutation reads the full list, changes it in memory and writes the
    full list back under the same key. Writes to different repositories are
    independent; nothing makes them atomic together.
    """

    key: str
    model: type[ModelT]

    def __init__(self, store: KeyValueStore) -> None:
        """Initialize the repository with the key-value store it persists to."""
        self.store = store
        self._adapter: TypeAdapter[list[ModelT]] = TypeAdapter(list[self.model])

    async def list(self) -> list[ModelT]:
        """Return every stored record, or an empty list if none can be read.

        Missing keys, storage read errors, malformed JSON and records that
        fail validation are treated as "no data" and logged rather than raised.
        """
        raw = await read_value(self.store, self.key)
        if not raw:
            return []
        try:
            return self._adapter.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Discarding unreadable data under %s: %s", self.key, exc)
            return []

    async def save(self, items: list[ModelT]) -> None:
        """Replace the stored collection with ``items``."""
        payload = json.dumps([item.to_storage() for item in items])
        await self.store.set(self.key, payload)

    async def add(self, item: ModelT, *, prepend: bool = False) -> ModelT:
        """Insert a record at the front or back of the collection."""
        items = await self.list()
        if prepend:
            items.insert(0, item)
        else:
            items.append(item)
        await self.save(items)
        logger.debug("Stored %s %s under %s", type(item).__name__, getattr(item, "id", "?"), self.key)
        return item

    async def find(self, item_id: str) -> ModelT | None:
        """Return the record with ``item_id``, if present."""
        for item in await self.list():
            if getattr(item, "id", None) == item_id:
                return item
        return None

    async def filter_by(self, **fields: Any) -> list[ModelT]:
        """Return records whose attributes equal every given value."""
        return [
            item
            for item in await self.list()
            if all(getattr(item, name) == value for name, value in fields.items())
        ]

    async def clear(self) -> None:
        """Remove the collection key entirely."""
        await self.store.remove(self.key)
