from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One cursor page.

    ``end_cursor`` and ``has_next_page`` stay ``None`` when no cursor could
    be computed (empty page); serializers drop the keys in that case.
    """

    items: list[T] = field(default_factory=list)
    total: int = 0
    total_pages: int = 0
    page_size: int = 0
    end_cursor: str | None = None
    has_next_page: bool | None = None


@dataclass(frozen=True, slots=True)
class OffsetPage(Generic[T]):
    items: list[T] = field(default_factory=list)
    total: int = 0
    total_pages: int = 0
    page_size: int = 0
    current_page: int = 1
