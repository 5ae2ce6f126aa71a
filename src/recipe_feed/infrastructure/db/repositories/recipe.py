from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any

from sqlalchemy import ColumnElement, Select, and_, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from recipe_feed.application.dto.recipe import RankedRows, RecipeFilterDTO
from recipe_feed.application.exceptions import FetchFailedError
from recipe_feed.application.pagination.cursor import CursorBoundary
from recipe_feed.domain.entities.recipe import Recipe
from recipe_feed.infrastructure.db.mappers import recipe as mapper
from recipe_feed.infrastructure.db.models.recipe import RecipeModel

logger = logging.getLogger(__name__)

# NULL and NaN hot scores rank as 0 in both the ordering and the boundary predicate.
score_column = func.coalesce(func.nullif(RecipeModel.hot_score, float("nan")), 0.0)


def filter_conditions(filters: RecipeFilterDTO) -> list[ColumnElement[bool]]:
    conditions: list[ColumnElement[bool]] = [RecipeModel.deleted_at.is_(None)]
    if filters.user_id is not None:
        conditions.append(RecipeModel.user_id == filters.user_id)
    term = filters.search_term
    if term:
        conditions.append(
            or_(
                RecipeModel.title.icontains(term, autoescape=True),
                RecipeModel.description.icontains(term, autoescape=True),
            )
        )
    return conditions


def boundary_condition(boundary: CursorBoundary | None) -> ColumnElement[bool] | None:
    if boundary is None:
        return None
    if boundary.after_score is None:
        # Legacy cursor: no score to resume from, paginate on date alone.
        return RecipeModel.created_at < boundary.after_date
    return or_(
        score_column < boundary.after_score,
        and_(
            score_column == boundary.after_score,
            RecipeModel.created_at < boundary.after_date,
        ),
    )


def ranked_page_stmt(
    filters: RecipeFilterDTO,
    boundary: CursorBoundary | None,
    limit: int,
) -> Select[Any]:
    stmt = select(RecipeModel).where(*filter_conditions(filters))
    after = boundary_condition(boundary)
    if after is not None:
        stmt = stmt.where(after)
    return stmt.order_by(score_column.desc(), RecipeModel.created_at.desc()).limit(limit + 1)


def offset_page_stmt(filters: RecipeFilterDTO, offset: int, limit: int) -> Select[Any]:
    return (
        select(RecipeModel)
        .where(*filter_conditions(filters))
        .order_by(RecipeModel.created_at.desc(), RecipeModel.id.desc())
        .offset(offset)
        .limit(limit)
    )


def count_stmt(filters: RecipeFilterDTO) -> Select[Any]:
    return select(func.count()).select_from(RecipeModel).where(*filter_conditions(filters))


class RecipeReaderRepo:
    """Read-side recipe queries.

    Takes a session factory rather than a session: list queries run their
    count and page statements concurrently, one session each.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_by_id(self, recipe_id: int) -> Recipe | None:
        stmt = select(RecipeModel).where(
            RecipeModel.id == recipe_id,
            RecipeModel.deleted_at.is_(None),
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Recipe lookup failed: id=%s", recipe_id)
            raise FetchFailedError("Failed to fetch recipe") from exc
        return mapper.model_to_entity(model) if model else None

    async def fetch_ranked(
        self,
        filters: RecipeFilterDTO,
        boundary: CursorBoundary | None,
        limit: int,
    ) -> RankedRows:
        return await self._fetch(ranked_page_stmt(filters, boundary, limit), count_stmt(filters))

    async def fetch_offset(
        self,
        filters: RecipeFilterDTO,
        offset: int,
        limit: int,
    ) -> RankedRows:
        return await self._fetch(offset_page_stmt(filters, offset, limit), count_stmt(filters))

    async def _fetch(self, page: Select[Any], count: Select[Any]) -> RankedRows:
        try:
            rows, total = await _gather_or_cancel(self._rows(page), self._scalar(count))
        except (SQLAlchemyError, OSError) as exc:
            logger.exception("Recipe list query failed")
            raise FetchFailedError("Failed to fetch recipes") from exc
        return RankedRows(rows=rows, total=total)

    async def _rows(self, stmt: Select[Any]) -> list[Recipe]:
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [mapper.model_to_entity(m) for m in result.scalars().all()]

    async def _scalar(self, stmt: Select[Any]) -> int:
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return int(result.scalar_one())


async def _gather_or_cancel(*aws: Awaitable[Any]) -> list[Any]:
    """Like ``asyncio.gather`` but a failure also cancels the siblings."""
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
