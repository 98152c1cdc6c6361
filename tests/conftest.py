"""
tests/conftest.py
Card factories shared by the test modules.
"""

import itertools
import pytest
from draft_engine import constants
from draft_engine.models import Card


@pytest.fixture
def make_card():
    """
    Returns a factory for Cards with unique ids.
    Defaults to a common colorless 2/2 creature costing 2.
    """
    counter = itertools.count(1)

    def _make_card(name=None, types=(constants.CARD_TYPE_CREATURE,), colors=(), mana_value=2, **kwargs):
        card_id = next(counter)
        if constants.CARD_TYPE_CREATURE in types:
            kwargs.setdefault("power", 2)
            kwargs.setdefault("toughness", 2)
        return Card(
            id=card_id,
            name=name or f"Card {card_id}",
            types=frozenset(types),
            colors=frozenset(colors),
            mana_value=mana_value,
            **kwargs,
        )

    return _make_card


@pytest.fixture
def make_basic(make_card):
    def _make_basic(color):
        return make_card(
            name=constants.BASIC_LAND_NAMES[color],
            types=(constants.CARD_TYPE_LAND, constants.CARD_TYPE_BASIC_LAND),
            mana_value=0,
            produces=frozenset([color]),
        )

    return _make_basic


@pytest.fixture
def make_creature(make_card):
    def _make_creature(color, mana_value=2, power=2, toughness=2, **kwargs):
        kwargs.setdefault("mana_cost", "{%d}{%s}" % (mana_value - 1, color) if mana_value > 1 else "{%s}" % color)
        return make_card(
            colors=(color,),
            mana_value=mana_value,
            power=power,
            toughness=toughness,
            **kwargs,
        )

    return _make_creature
