from __future__ import annotations

import pytest

from recipe_feed.application.pagination.assembler import (
    assemble_offset_page,
    assemble_page,
    total_pages,
)
from recipe_feed.application.pagination.cursor import decode_cursor, encode_cursor, parse_cursor
from tests.conftest import make_recipe


def _assemble(rows, total, limit):
    return assemble_page(
        rows,
        total,
        limit,
        score_of=lambda r: r.hot_score,
        created_at_of=lambda r: r.created_at,
    )


def test_extra_row_is_dropped_and_signals_next_page(example_recipes):
    page = _assemble(example_recipes, 3, 2)

    assert page.items == example_recipes[:2]
    assert page.has_next_page is True
    assert page.end_cursor == encode_cursor(10, example_recipes[1].created_at)
    assert page.total == 3
    assert page.total_pages == 2
    assert page.page_size == 2


def test_exactly_limit_rows_is_last_page_with_cursor(example_recipes):
    page = _assemble(example_recipes, 3, 3)

    assert page.items == example_recipes
    assert page.has_next_page is False
    assert page.end_cursor is not None
    assert page.total_pages == 1


def test_empty_page_has_no_cursor_fields():
    page = _assemble([], 0, 10)

    assert page.items == []
    assert page.end_cursor is None
    assert page.has_next_page is None
    assert page.total_pages == 0


def test_missing_score_encodes_as_zero():
    recipe = make_recipe(hot_score=None, created_at="2024-05-01T00:00:00+00:00")

    page = _assemble([recipe], 1, 10)

    decoded = decode_cursor(page.end_cursor)
    assert decoded is not None
    assert decoded.score == 0.0
    assert decoded.date == "2024-05-01T00:00:00+00:00"


def test_nan_score_encodes_as_zero():
    recipe = make_recipe(hot_score=float("nan"), created_at="2024-05-01T00:00:00+00:00")

    page = _assemble([recipe, make_recipe()], 2, 1)

    assert page.has_next_page is True
    boundary = parse_cursor(page.end_cursor)
    assert boundary is not None
    assert boundary.after_score == 0.0
    assert boundary.after_date == recipe.created_at


@pytest.mark.parametrize(
    ("total", "size", "expected"),
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 25, 1), (26, 25, 2)],
)
def test_total_pages(total, size, expected):
    assert total_pages(total, size) == expected


@pytest.mark.parametrize("limit", [0, -1])
def test_non_positive_limit_rejected(limit):
    with pytest.raises(ValueError):
        _assemble([], 0, limit)


def test_offset_page():
    rows = [make_recipe(), make_recipe()]

    page = assemble_offset_page(rows, 12, 2, 10)

    assert page.items == rows
    assert page.total_pages == 2
    assert page.current_page == 2
    assert page.page_size == 10
