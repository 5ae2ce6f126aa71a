from __future__ import annotations

from fastapi import APIRouter, Query

from recipe_feed.api.deps import RecipeReaderDep
from recipe_feed.api.v1.schemas.recipe import (
    RecipeListResponse,
    RecipeOffsetListResponse,
    RecipeResponse,
)
from recipe_feed.application.dto.recipe import RecipeFilterDTO
from recipe_feed.config import settings
from recipe_feed.services import recipe_service

router = APIRouter(prefix="/api/v1", tags=["recipes"])


@router.get("/recipes", response_model=RecipeListResponse)
async def list_recipes(
    reader: RecipeReaderDep,
    after: str | None = Query(None, description="endCursor of the previous page"),
    limit: int = Query(settings.PAGE_SIZE_DEFAULT, ge=1, le=settings.PAGE_SIZE_MAX),
    search: str | None = Query(None, max_length=200),
    user_id: int | None = Query(None, alias="userId"),
) -> RecipeListResponse:
    filters = RecipeFilterDTO(search=search, user_id=user_id)
    page = await recipe_service.list_ranked_recipes(after, limit, filters, reader)
    return RecipeListResponse.from_page(page)


@router.get("/recipes/{recipe_id}", response_model=RecipeResponse)
async def get_recipe(recipe_id: int, reader: RecipeReaderDep) -> RecipeResponse:
    recipe = await recipe_service.get_recipe(recipe_id, reader)
    return RecipeResponse.model_validate(recipe)


@router.get("/users/{user_id}/recipes", response_model=RecipeOffsetListResponse)
async def list_user_recipes(
    user_id: int,
    reader: RecipeReaderDep,
    page: int = Query(1),
    page_size: int = Query(settings.PAGE_SIZE_MIN, alias="pageSize"),
) -> RecipeOffsetListResponse:
    result = await recipe_service.list_user_recipes(user_id, page, page_size, reader)
    return RecipeOffsetListResponse.from_page(result)
