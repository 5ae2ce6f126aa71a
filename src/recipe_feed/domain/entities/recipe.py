from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class Recipe:
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
    deleted_at: datetime | None = None

    @property
    def score(self) -> float:
        """Ranking score; a missing or NaN hot score ranks as 0."""
        if self.hot_score is None or math.isnan(self.hot_score):
            return 0.0
        return self.hot_score
