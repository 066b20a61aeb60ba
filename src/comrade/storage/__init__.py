"""Key-value storage media and the key layout of the local store."""

from .keys import ALL_KEYS, StorageKey
from .kv import (
    KeyValueStore,
    MemoryKeyValueStore,
    RedisKeyValueStore,
    SqlKeyValueStore,
    build_key_value_store,
)

__all__ = [
    "ALL_KEYS",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "RedisKeyValueStore",
    "SqlKeyValueStore",
    "StorageKey",
    "build_key_value_store",
]
