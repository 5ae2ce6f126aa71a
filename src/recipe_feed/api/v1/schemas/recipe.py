from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, field_serializer

from recipe_feed.api.v1.schemas.common import (
    CursorPageMeta,
    OffsetPageMeta,
    camel_config,
    to_display_time,
)
from recipe_feed.application.dto.page import OffsetPage, Page
from recipe_feed.domain.entities.recipe import Recipe


class RecipeResponse(BaseModel):
    id: int
    user_id: int
    title: str
    description: str | None
    servings: str | None
    cooking_time: str | None
    likes_count: int
    hot_score: float | None
    created_at: datetime
    updated_at: datetime

    model_config = camel_config

    @field_serializer("created_at", "updated_at", when_used="json")
    def _display_time(self, value: datetime) -> str:
        return to_display_time(value)


class RecipeListResponse(BaseModel):
    recipes: list[RecipeResponse]
    meta: CursorPageMeta

    model_config = camel_config

    @classmethod
    def from_page(cls, page: Page[Recipe]) -> RecipeListResponse:
        return cls(
            recipes=[RecipeResponse.model_validate(r) for r in page.items],
            meta=CursorPageMeta(
                total=page.total,
                total_pages=page.total_pages,
                page_size=page.page_size,
                end_cursor=page.end_cursor,
                has_next_page=page.has_next_page,
            ),
        )


class RecipeOffsetListResponse(BaseModel):
    recipes: list[RecipeResponse]
    meta: OffsetPageMeta

    model_config = camel_config

    @classmethod
    def from_page(cls, page: OffsetPage[Recipe]) -> RecipeOffsetListResponse:
        return cls(
            recipes=[RecipeResponse.model_validate(r) for r in page.items],
            meta=OffsetPageMeta(
                total=page.total,
                total_pages=page.total_pages,
                page_size=page.page_size,
                current_page=page.current_page,
            ),
        )
