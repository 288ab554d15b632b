"""Authoritative in-memory board: one flat ordered sequence of cards.

Lanes are never stored separately. ``lane_view`` filters the flat sequence, so
a card's position within its lane is its position relative to the other cards
of that lane in the flat sequence.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lanesync.constants import LANE_ORDER

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from lanesync.core.models.entities import Card
    from lanesync.core.models.enums import Lane

logger = logging.getLogger(__name__)


class BoardState:
    """Ordered collection of cards with the two drag mutators.

    Mutators never raise on bad input; they report whether anything changed.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = []
        self.replace_all(cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __contains__(self, card_id: object) -> bool:
        return any(card.id == card_id for card in self._cards)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Snapshot of the flat sequence."""
        return tuple(self._cards)

    @property
    def ids(self) -> list[str]:
        return [card.id for card in self._cards]

    def get(self, card_id: str) -> Card | None:
        for card in self._cards:
            if card.id == card_id:
                return card
        return None

    def index_of(self, card_id: str) -> int | None:
        """Flat-sequence index of ``card_id``."""
        for index, card in enumerate(self._cards):
            if card.id == card_id:
                return index
        return None

    def lane_view(self, lane: Lane) -> list[Card]:
        return [card for card in self._cards if card.lane == lane]

    def lanes(self) -> dict[Lane, list[Card]]:
        grouped: dict[Lane, list[Card]] = {lane: [] for lane in LANE_ORDER}
        for card in self._cards:
            grouped[card.lane].append(card)
        return grouped

    def flat_index(self, lane: Lane, lane_index: int) -> int | None:
        """Translate a position inside ``lane`` to a flat-sequence index."""
        if lane_index < 0:
            return None
        seen = 0
        for index, card in enumerate(self._cards):
            if card.lane != lane:
                continue
            if seen == lane_index:
                return index
            seen += 1
        return None

    def replace_all(self, cards: Iterable[Card]) -> None:
        """Load a fresh sequence, dropping repeated ids (first one wins)."""
        seen: set[str] = set()
        fresh: list[Card] = []
        for card in cards:
            if card.id in seen:
                logger.warning("Dropping duplicate card id %s", card.id)
                continue
            seen.add(card.id)
            fresh.append(card)
        self._cards = fresh

    def move_card(self, from_index: int, to_index: int, lane: Lane) -> bool:
        """Move the card at ``from_index`` to ``to_index`` (flat coordinates).

        The card at ``from_index`` must belong to ``lane``. Out-of-range
        indices or a lane mismatch leave the board untouched.
        """
        if from_index == to_index:
            return False
        size = len(self._cards)
        if not (0 <= from_index < size and 0 <= to_index < size):
            logger.debug("Ignoring move %s -> %s outside board of %s", from_index, to_index, size)
            return False
        if self._cards[from_index].lane != lane:
            logger.debug("Ignoring move of card outside lane %s", lane)
            return False
        card = self._cards.pop(from_index)
        self._cards.insert(to_index, card)
        return True

    def set_card_lane(self, card_id: str, lane: Lane) -> Lane | None:
        """Overwrite a card's lane in place and return the previous lane.

        Flat position is unchanged. Unknown ids return None.
        """
        card = self.get(card_id)
        if card is None:
            return None
        previous = card.lane
        card.lane = lane
        return previous

    def place_in_lane(self, card_id: str, lane: Lane, target_index: int = -1) -> Lane | None:
        """Move a card into ``lane`` at a lane-relative position.

        ``-1`` or an index past the end of the lane appends the card to the
        end of the flat sequence. Returns the previous lane, or None for an
        unknown id.
        """
        index = self.index_of(card_id)
        if index is None:
            return None
        card = self._cards.pop(index)
        previous = card.lane
        card.lane = lane

        target_lane = [c for c in self._cards if c.lane == lane]
        if target_index < 0 or target_index > len(target_lane):
            self._cards.append(card)
            return previous
        if target_index == len(target_lane):
            anchor = self._position(target_lane[-1]) + 1 if target_lane else len(self._cards)
        else:
            anchor = self._position(target_lane[target_index])
        self._cards.insert(anchor, card)
        return previous

    def _position(self, card: Card) -> int:
        for index, candidate in enumerate(self._cards):
            if candidate is card:
                return index
        raise LookupError(card.id)

    def remove_card(self, card_id: str) -> Card | None:
        index = self.index_of(card_id)
        if index is None:
            return None
        return self._cards.pop(index)
