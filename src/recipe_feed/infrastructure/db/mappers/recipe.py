from __future__ import annotations

from recipe_feed.domain.entities.recipe import Recipe
from recipe_feed.infrastructure.db.models.recipe import RecipeModel


def model_to_entity(model: RecipeModel) -> Recipe:
    return Recipe(
        id=model.id,
        user_id=model.user_id,
        title=model.title,
        description=model.description,
        servings=model.servings,
        cooking_time=model.cooking_time,
        likes_count=model.likes_count,
        hot_score=model.hot_score,
        created_at=model.created_at,
        updated_at=model.updated_at,
        deleted_at=model.deleted_at,
    )
