"""Board filtering and sorting.

Sorting establishes the board's flat order when data is (re)loaded or the
sort order changes. Priority/category filters only hide cards from view and
keep board order, so live drag reordering stays visible.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from lanesync.core.models.enums import SortOrder

if TYPE_CHECKING:
    from collections.abc import Iterable

    from lanesync.core.models.entities import Card

ALL = "all"


@dataclass(frozen=True)
class BoardFilters:
    priority: str = ALL
    category: str = ALL
    sort_by: SortOrder = SortOrder.NEWEST

    @property
    def is_default(self) -> bool:
        return self.priority == ALL and self.category == ALL


def _start_timestamp(card: Card) -> float:
    """Seconds since epoch for ``start_date``; missing or invalid dates sort as 0."""
    if not card.start_date:
        return 0.0
    try:
        return datetime.fromisoformat(card.start_date).timestamp()
    except ValueError:
        return 0.0


def filter_cards(cards: Iterable[Card], filters: BoardFilters) -> list[Card]:
    """Hide cards not matching the priority/category filters (order kept)."""
    result = list(cards)
    if filters.priority != ALL:
        result = [card for card in result if card.priority.value == filters.priority]
    if filters.category != ALL:
        result = [card for card in result if card.category.name == filters.category]
    return result


def sort_cards(cards: Iterable[Card], order: SortOrder) -> list[Card]:
    """Return cards in ``order``; ties keep their incoming order."""
    result = list(cards)
    match order:
        case SortOrder.OLDEST:
            result.sort(key=_start_timestamp)
        case SortOrder.NAME_ASC:
            result.sort(key=lambda card: card.title.casefold())
        case SortOrder.NAME_DESC:
            result.sort(key=lambda card: card.title.casefold(), reverse=True)
        case SortOrder.PRICE_ASC:
            result.sort(key=lambda card: card.price)
        case SortOrder.PRICE_DESC:
            result.sort(key=lambda card: card.price, reverse=True)
        case _:
            result.sort(key=_start_timestamp, reverse=True)
    return result


def apply_filters(cards: Iterable[Card], filters: BoardFilters) -> list[Card]:
    return sort_cards(filter_cards(cards, filters), filters.sort_by)
