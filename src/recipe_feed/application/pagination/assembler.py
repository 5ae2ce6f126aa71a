from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from datetime import datetime
from typing import TypeVar

from recipe_feed.application.dto.page import OffsetPage, Page
from recipe_feed.application.pagination.cursor import encode_cursor

T = TypeVar("T")


def score_or_zero(score: float | None) -> float:
    """Missing and NaN scores rank as 0; NaN would make the cursor undecodable."""
    if score is None or math.isnan(score):
        return 0.0
    return float(score)


def total_pages(total: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(total / page_size)


def assemble_page(
    rows: Sequence[T],
    total: int,
    limit: int,
    *,
    score_of: Callable[[T], float | None],
    created_at_of: Callable[[T], datetime | str],
) -> Page[T]:
    """Build a cursor page from ``limit + 1`` fetched rows.

    The extra row only signals that another page exists; the cursor is
    taken from the last row actually returned.
    """
    pages = total_pages(total, limit)
    items = list(rows[:limit])
    if not items:
        return Page(items=[], total=total, total_pages=pages, page_size=limit)

    last = items[-1]
    score = score_of(last)
    return Page(
        items=items,
        total=total,
        total_pages=pages,
        page_size=limit,
        end_cursor=encode_cursor(score_or_zero(score), created_at_of(last)),
        has_next_page=len(rows) > limit,
    )


def assemble_offset_page(
    rows: Sequence[T],
    total: int,
    page: int,
    page_size: int,
) -> OffsetPage[T]:
    return OffsetPage(
        items=list(rows),
        total=total,
        total_pages=total_pages(total, page_size),
        page_size=page_size,
        current_page=page,
    )
