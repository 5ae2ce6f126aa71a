"""FastAPI dependency injection helpers."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from recipe_feed.application.repositories.recipe import RecipeReader
from recipe_feed.infrastructure.db.repositories.recipe import RecipeReaderRepo
from recipe_feed.infrastructure.db.session import AsyncSessionLocal


def get_recipe_reader() -> RecipeReader:
    return RecipeReaderRepo(AsyncSessionLocal)


RecipeReaderDep = Annotated[RecipeReader, Depends(get_recipe_reader)]
