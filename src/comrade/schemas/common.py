"""Shared Pydantic configuration for records kept in the local store."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StoredModel(BaseModel):
    """Base for records persisted as camelCase JSON.

    Attributes use snake_case in Python; the JSON wire form matches the keys
    the mobile client writes (``authorId``, ``commentCount``...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_storage(self) -> dict[str, Any]:
        """Return the JSON-ready dict written to the key-value store."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
