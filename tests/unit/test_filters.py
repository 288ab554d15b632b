"""Tests for board filters and sort orders."""

from __future__ import annotations

import pytest

from lanesync.core.filters import ALL, BoardFilters, apply_filters, filter_cards, sort_cards
from lanesync.core.models.entities import Category
from lanesync.core.models.enums import CardPriority, SortOrder

pytestmark = pytest.mark.unit


@pytest.fixture
def cards(card_factory):
    return [
        card_factory(
            title="beta", price=300, start_date="2024-02-01", priority=CardPriority.HIGH
        ),
        card_factory(
            title="Alpha",
            price=100,
            start_date="2024-03-01",
            category=Category(name="Design", color="orange"),
        ),
        card_factory(title="gamma", price=200, start_date=None),
    ]


def titles(cards) -> list[str]:
    return [card.title for card in cards]


class TestSortCards:
    @pytest.mark.parametrize(
        ("order", "expected"),
        [
            (SortOrder.NEWEST, ["Alpha", "beta", "gamma"]),
            (SortOrder.OLDEST, ["gamma", "beta", "Alpha"]),
            (SortOrder.NAME_ASC, ["Alpha", "beta", "gamma"]),
            (SortOrder.NAME_DESC, ["gamma", "beta", "Alpha"]),
            (SortOrder.PRICE_ASC, ["Alpha", "gamma", "beta"]),
            (SortOrder.PRICE_DESC, ["beta", "gamma", "Alpha"]),
        ],
    )
    def test_orders(self, cards, order: SortOrder, expected: list[str]) -> None:
        assert titles(sort_cards(cards, order)) == expected

    def test_does_not_mutate_input(self, cards) -> None:
        before = titles(cards)
        sort_cards(cards, SortOrder.NAME_DESC)
        assert titles(cards) == before

    def test_invalid_dates_sort_as_epoch(self, card_factory) -> None:
        broken = card_factory(title="broken", start_date="not a date")
        dated = card_factory(title="dated", start_date="2020-01-01")
        assert titles(sort_cards([broken, dated], SortOrder.OLDEST)) == ["broken", "dated"]


class TestFilterCards:
    def test_default_keeps_everything(self, cards) -> None:
        assert BoardFilters().is_default
        assert filter_cards(cards, BoardFilters()) == cards

    def test_priority(self, cards) -> None:
        result = filter_cards(cards, BoardFilters(priority="high"))
        assert titles(result) == ["beta"]

    def test_category(self, cards) -> None:
        filters = BoardFilters(category="Design")
        assert not filters.is_default
        assert titles(filter_cards(cards, filters)) == ["Alpha"]

    def test_apply_filters_sorts_filtered(self, cards) -> None:
        filters = BoardFilters(priority=ALL, category="Development", sort_by=SortOrder.PRICE_ASC)
        assert titles(apply_filters(cards, filters)) == ["gamma", "beta"]
