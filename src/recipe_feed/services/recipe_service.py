from __future__ import annotations

import logging

from recipe_feed.application.dto.page import OffsetPage, Page
from recipe_feed.application.dto.recipe import RecipeFilterDTO
from recipe_feed.application.exceptions import FetchFailedError, NotFoundError, ValidationError
from recipe_feed.application.pagination.assembler import assemble_offset_page, assemble_page
from recipe_feed.application.pagination.cursor import parse_cursor
from recipe_feed.application.repositories.recipe import RecipeReader
from recipe_feed.config import settings
from recipe_feed.domain.entities.recipe import Recipe
from recipe_feed.domain.value_objects.enums import FetchErrorPolicy

logger = logging.getLogger(__name__)


def _clamp_limit(limit: int) -> int:
    if limit < 1:
        raise ValidationError("limit must be a positive integer")
    return min(limit, settings.PAGE_SIZE_MAX)


def validate_page_size(page_size: int) -> int:
    if page_size > settings.PAGE_SIZE_MAX_OFFSET:
        raise ValidationError(
            f"max page size can't be more than {settings.PAGE_SIZE_MAX_OFFSET}"
        )
    if page_size < settings.PAGE_SIZE_MIN:
        raise ValidationError(f"page size can't be less than {settings.PAGE_SIZE_MIN}")
    return page_size


async def list_ranked_recipes(
    after: str | None,
    limit: int,
    filters: RecipeFilterDTO,
    reader: RecipeReader,
    *,
    on_error: FetchErrorPolicy | None = None,
) -> Page[Recipe]:
    """List recipes by hot score, newest first among equal scores.

    ``after`` is the ``end_cursor`` of the previous page. Unreadable cursors
    restart from the first page.
    """
    limit = _clamp_limit(limit)
    policy = FetchErrorPolicy(on_error or settings.RECIPE_FETCH_ERROR_POLICY)
    boundary = parse_cursor(after)

    try:
        fetched = await reader.fetch_ranked(filters, boundary, limit)
    except FetchFailedError:
        if policy is FetchErrorPolicy.PROPAGATE:
            raise
        logger.warning("Ranked recipe fetch failed, serving an empty page", exc_info=True)
        return Page(items=[], total=0, total_pages=0, page_size=limit)

    return assemble_page(
        fetched.rows,
        fetched.total,
        limit,
        score_of=lambda r: r.hot_score,
        created_at_of=lambda r: r.created_at,
    )


async def list_user_recipes(
    user_id: int,
    page: int,
    page_size: int,
    reader: RecipeReader,
) -> OffsetPage[Recipe]:
    if page < 1:
        raise ValidationError("page must be at least 1")
    page_size = validate_page_size(page_size)

    fetched = await reader.fetch_offset(
        RecipeFilterDTO(user_id=user_id),
        (page - 1) * page_size,
        page_size,
    )
    return assemble_offset_page(fetched.rows, fetched.total, page, page_size)


async def get_recipe(recipe_id: int, reader: RecipeReader) -> Recipe:
    recipe = await reader.get_by_id(recipe_id)
    if recipe is None:
        raise NotFoundError("Recipe not found")
    return recipe
