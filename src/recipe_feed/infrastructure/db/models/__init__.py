"""Import all models so Alembic can discover them via Base.metadata."""
from recipe_feed.infrastructure.db.models.recipe import RecipeModel

__all__ = [
    "RecipeModel",
]
