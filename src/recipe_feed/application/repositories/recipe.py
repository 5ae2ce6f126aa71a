from __future__ import annotations

from typing import Protocol

from recipe_feed.application.dto.recipe import RankedRows, RecipeFilterDTO
from recipe_feed.application.pagination.cursor import CursorBoundary
from recipe_feed.domain.entities.recipe import Recipe


class RecipeReader(Protocol):
    async def get_by_id(self, recipe_id: int) -> Recipe | None: ...

    async def fetch_ranked(
        self,
        filters: RecipeFilterDTO,
        boundary: CursorBoundary | None,
        limit: int,
    ) -> RankedRows:
        """Return up to ``limit + 1`` rows after ``boundary`` ordered by
        (score DESC, created_at DESC), plus the boundary-free total."""
        ...

    async def fetch_offset(
        self,
        filters: RecipeFilterDTO,
        offset: int,
        limit: int,
    ) -> RankedRows:
        """Return one offset page ordered by created_at DESC, plus the total."""
        ...
