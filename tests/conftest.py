"""Shared test fixtures."""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest

from recipe_feed.application.dto.recipe import RankedRows, RecipeFilterDTO
from recipe_feed.application.exceptions import FetchFailedError
from recipe_feed.application.pagination.cursor import CursorBoundary
from recipe_feed.domain.entities.recipe import Recipe

_ids = itertools.count(1)


def utc(value: str) -> datetime:
    ts = datetime.fromisoformat(value)
    return ts if ts.tzinfo else ts.replace(tzinfo=timezone.utc)


def make_recipe(
    *,
    hot_score: float | None = 0.0,
    created_at: str | datetime = "2024-01-01T00:00:00+00:00",
    user_id: int = 42,
    title: str = "Nasi goreng",
    description: str | None = "Fried rice",
    deleted: bool = False,
) -> Recipe:
    ts = utc(created_at) if isinstance(created_at, str) else created_at
    return Recipe(
        id=next(_ids),
        user_id=user_id,
        title=title,
        description=description,
        servings="2",
        cooking_time="20m",
        likes_count=0,
        hot_score=hot_score,
        created_at=ts,
        updated_at=ts,
        deleted_at=ts if deleted else None,
    )


def _matches(recipe: Recipe, filters: RecipeFilterDTO) -> bool:
    if recipe.deleted_at is not None:
        return False
    if filters.user_id is not None and recipe.user_id != filters.user_id:
        return False
    term = filters.search_term
    if term:
        haystack = f"{recipe.title} {recipe.description or ''}".lower()
        return term.lower() in haystack
    return True


def _after(recipe: Recipe, boundary: CursorBoundary) -> bool:
    if boundary.after_score is None:
        return recipe.created_at < boundary.after_date
    return recipe.score < boundary.after_score or (
        recipe.score == boundary.after_score and recipe.created_at < boundary.after_date
    )


@dataclass
class FakeRecipeReader:
    """In-memory reader with the same ordering and boundary rules as the SQL one."""

    recipes: list[Recipe] = field(default_factory=list)
    fail: bool = False
    boundaries: list[CursorBoundary | None] = field(default_factory=list)
    limits: list[int] = field(default_factory=list)

    async def get_by_id(self, recipe_id: int) -> Recipe | None:
        for r in self.recipes:
            if r.id == recipe_id and r.deleted_at is None:
                return r
        return None

    async def fetch_ranked(
        self,
        filters: RecipeFilterDTO,
        boundary: CursorBoundary | None,
        limit: int,
    ) -> RankedRows:
        self.boundaries.append(boundary)
        self.limits.append(limit)
        if self.fail:
            raise FetchFailedError("Failed to fetch recipes")
        matching = [r for r in self.recipes if _matches(r, filters)]
        ranked = sorted(matching, key=lambda r: (r.score, r.created_at), reverse=True)
        if boundary is not None:
            ranked = [r for r in ranked if _after(r, boundary)]
        return RankedRows(rows=ranked[: limit + 1], total=len(matching))

    async def fetch_offset(
        self,
        filters: RecipeFilterDTO,
        offset: int,
        limit: int,
    ) -> RankedRows:
        if self.fail:
            raise FetchFailedError("Failed to fetch recipes")
        matching = [r for r in self.recipes if _matches(r, filters)]
        ordered = sorted(matching, key=lambda r: (r.created_at, r.id), reverse=True)
        return RankedRows(rows=ordered[offset : offset + limit], total=len(matching))


@pytest.fixture
def example_recipes() -> list[Recipe]:
    return [
        make_recipe(hot_score=10, created_at="2024-01-03"),
        make_recipe(hot_score=10, created_at="2024-01-02"),
        make_recipe(hot_score=5, created_at="2024-01-01"),
    ]


@pytest.fixture
def reader(example_recipes: list[Recipe]) -> FakeRecipeReader:
    return FakeRecipeReader(recipes=list(example_recipes))
