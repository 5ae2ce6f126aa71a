from __future__ import annotations

from dataclasses import dataclass, field

from recipe_feed.domain.entities.recipe import Recipe


@dataclass(frozen=True, slots=True)
class RecipeFilterDTO:
    """Caller-supplied filters shared by the page and the count query."""

    search: str | None = None
    user_id: int | None = None

    @property
    def search_term(self) -> str | None:
        if self.search is None:
            return None
        term = self.search.strip()
        return term or None


@dataclass(frozen=True, slots=True)
class RankedRows:
    """Raw fetcher output: up to ``limit + 1`` rows plus the full match count."""

    rows: list[Recipe] = field(default_factory=list)
    total: int = 0
