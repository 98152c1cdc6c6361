"""
draft_engine/advisor/pool.py
Cards drafted so far, with running aggregates for the trackers.
"""

import copy
from typing import Dict, List, Tuple
import numpy
from draft_engine import constants
from draft_engine.models import Card


class DraftPool:
    """
    Append-only list of picked cards.
    Aggregates are updated as each card is added and never rebuilt from the card list.
    """

    def __init__(self):
        self._cards: List[Card] = []
        self.color_counts: Dict[str, int] = {c: 0 for c in constants.CARD_COLORS}
        self.mana_value_histogram = numpy.zeros(constants.CURVE_BUCKETS, dtype=int)
        self.subtype_counts: Dict[str, int] = {}
        self.ability_counts: Dict[str, int] = {}
        self.non_land_count = 0

    def add_card(self, card: Card) -> None:
        self._cards.append(card)

        for color in card.colors:
            self.color_counts[color] += 1
        for subtype in card.subtypes:
            self.subtype_counts[subtype] = self.subtype_counts.get(subtype, 0) + 1
        for tag in card.abilities:
            self.ability_counts[tag] = self.ability_counts.get(tag, 0) + 1

        if not card.is_land:
            self.mana_value_histogram[min(card.mana_value, constants.CURVE_BUCKETS - 1)] += 1
            self.non_land_count += 1

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(self._cards)

    def subtype_count(self, subtype: str) -> int:
        return self.subtype_counts.get(subtype, 0)

    def ability_count(self, tag: str) -> int:
        return self.ability_counts.get(tag, 0)

    def copy(self) -> "DraftPool":
        # Cards are immutable, so only the containers need copying
        duplicate = copy.copy(self)
        duplicate._cards = list(self._cards)
        duplicate.color_counts = dict(self.color_counts)
        duplicate.mana_value_histogram = self.mana_value_histogram.copy()
        duplicate.subtype_counts = dict(self.subtype_counts)
        duplicate.ability_counts = dict(self.ability_counts)
        return duplicate

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)
