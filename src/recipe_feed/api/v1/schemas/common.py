from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo

from pydantic import (
    AliasChoices,
    AliasGenerator,
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
)
from pydantic.alias_generators import to_camel

from recipe_feed.config import settings

camel_config = ConfigDict(
    alias_generator=AliasGenerator(
        validation_alias=lambda name: AliasChoices(name, to_camel(name)),
        serialization_alias=to_camel,
    ),
    from_attributes=True,
)


def to_display_time(value: datetime) -> str:
    """Render a stored timestamp in the display timezone, millisecond precision."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    local = value.astimezone(ZoneInfo(settings.DISPLAY_TIMEZONE))
    return local.strftime("%Y-%m-%dT%H:%M:%S.") + f"{local.microsecond // 1000:03d}"


class CursorPageMeta(BaseModel):
    total: int
    total_pages: int
    page_size: int
    end_cursor: str | None = None
    has_next_page: bool | None = None

    model_config = camel_config

    @model_serializer(mode="wrap")
    def _omit_uncomputed(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        # Absent keys mean "not computed"; clients rely on key presence.
        data = handler(self)
        for key in ("end_cursor", "endCursor", "has_next_page", "hasNextPage"):
            if key in data and data[key] is None:
                del data[key]
        return data


class OffsetPageMeta(BaseModel):
    total: int
    total_pages: int
    page_size: int
    current_page: int

    model_config = camel_config
