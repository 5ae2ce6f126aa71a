from __future__ import annotations

from enum import StrEnum


class FetchErrorPolicy(StrEnum):
    PROPAGATE = "propagate"
    EMPTY_PAGE = "empty_page"
