"""
tests/test_evaluator.py
Validates the context-free card quality model and its rarity and clamp rules.
"""

import pytest
from draft_engine import constants
from draft_engine.advisor.evaluator import replaceability, score_quality, sideboard_value

INSTANT = (constants.CARD_TYPE_INSTANT,)
SORCERY = (constants.CARD_TYPE_SORCERY,)


def test_rare_flyer_quality(make_card):
    # 2.0 base + 0.5 vanilla + 0.25 * (1.0 + 1.0 + 0.5 + 0.5) quadrants + 0.8 flying, x1.15 rare
    card = make_card(
        mana_value=3,
        power=3,
        toughness=3,
        abilities=frozenset([constants.TAG_FLYING]),
        rarity=constants.RARITY_RARE,
    )
    assert score_quality(card) == pytest.approx(4.05 * 1.15)


def test_vanilla_bear_quality(make_card):
    card = make_card(mana_value=2, power=2, toughness=2)
    assert score_quality(card) == pytest.approx(2.75)


def test_variable_stats_score_keywords_only(make_card):
    card = make_card(
        mana_value=4,
        power="*",
        toughness="*",
        abilities=frozenset([constants.TAG_FLYING]),
    )
    assert card.power is None
    assert score_quality(card) == pytest.approx(2.8)


@pytest.mark.parametrize(
    "types, abilities, expected",
    [
        (INSTANT, [constants.TAG_DESTROY_REMOVAL], 3.0),
        (INSTANT, [constants.TAG_REMOVAL], 3.0),
        (INSTANT, [constants.TAG_REMOVAL, constants.TAG_EXILE_REMOVAL], 3.3),
        (SORCERY, [constants.TAG_REMOVAL, constants.TAG_DAMAGE_CREATURE], 2.7),
        (INSTANT, [constants.TAG_EXILE_REMOVAL], 3.3),
        (SORCERY, [constants.TAG_DAMAGE_ANY_TARGET, constants.TAG_DAMAGE_CREATURE], 3.1),
        (SORCERY, [constants.TAG_DAMAGE_CREATURE], 2.7),
        (SORCERY, [constants.TAG_DRAW_THREE, constants.TAG_DRAW_TWO], 3.0),
        (INSTANT, [constants.TAG_PUMP_TRICK], 2.0),
        (SORCERY, [constants.TAG_PUMP_TRICK], 1.5),
        (SORCERY, [constants.TAG_BOARD_WIPE], 3.5),
    ],
)
def test_spell_quality(make_card, types, abilities, expected):
    card = make_card(types=types, abilities=frozenset(abilities))
    assert score_quality(card) == pytest.approx(expected)


def test_generic_removal_agrees_with_replaceability(make_card):
    generic = make_card(types=INSTANT, abilities=frozenset([constants.TAG_REMOVAL]))
    destroy = make_card(types=INSTANT, abilities=frozenset([constants.TAG_DESTROY_REMOVAL]))

    assert score_quality(generic) == pytest.approx(score_quality(destroy))
    assert replaceability(generic) == replaceability(destroy) == 0.7


def test_enchantment_and_artifact_quality(make_card):
    aura = make_card(
        types=(constants.CARD_TYPE_ENCHANTMENT,),
        abilities=frozenset([constants.TAG_DETRIMENTAL_AURA]),
    )
    equipment = make_card(
        types=(constants.CARD_TYPE_ARTIFACT,),
        subtypes=frozenset([constants.SUBTYPE_EQUIPMENT]),
        abilities=frozenset([constants.TAG_STAT_BOOST, constants.TAG_KEYWORD_GRANT]),
    )
    # Stat boost only counts on Equipment
    trinket = make_card(
        types=(constants.CARD_TYPE_ARTIFACT,),
        abilities=frozenset([constants.TAG_STAT_BOOST]),
    )

    assert score_quality(aura) == pytest.approx(2.2)
    assert score_quality(equipment) == pytest.approx(2.2)
    assert score_quality(trinket) == pytest.approx(1.0)


def test_land_quality(make_card, make_basic):
    dual = make_card(types=(constants.CARD_TYPE_LAND,), mana_value=0, produces=frozenset(["W", "U"]))
    utility = make_card(types=(constants.CARD_TYPE_LAND,), mana_value=0)

    assert score_quality(make_basic("W")) == pytest.approx(0.1)
    assert score_quality(dual) == pytest.approx(3.0)
    assert score_quality(utility) == pytest.approx(1.0)


def test_creature_takes_precedence_over_artifact(make_card):
    card = make_card(types=(constants.CARD_TYPE_ARTIFACT, constants.CARD_TYPE_CREATURE))
    assert score_quality(card) == pytest.approx(2.75)


def test_quality_is_clamped(make_card):
    walker = make_card(types=(constants.CARD_TYPE_PLANESWALKER,), rarity="mythic")
    dragon = make_card(
        mana_value=5,
        power=6,
        toughness=6,
        rarity=constants.RARITY_MYTHIC,
        abilities=frozenset(constants.CREATURE_KEYWORD_VALUES),
    )

    assert score_quality(walker) == constants.QUALITY_SCORE_MAX
    assert score_quality(dragon) == constants.QUALITY_SCORE_MAX


def test_quality_bounds_and_purity(make_card):
    cards = [
        make_card(mana_value=mv, power=p, toughness=t, rarity=rarity)
        for mv in (0, 1, 4, 9)
        for p, t in ((0, 1), (5, 5), ("*", "*"))
        for rarity in constants.RARITIES
    ]
    for card in cards:
        first = score_quality(card)
        assert 0.0 <= first <= constants.QUALITY_SCORE_MAX
        assert score_quality(card) == first


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({"rarity": constants.RARITY_MYTHIC}, 1.0),
        ({"rarity": constants.RARITY_RARE}, 0.8),
        ({"types": INSTANT, "abilities": frozenset([constants.TAG_EXILE_REMOVAL])}, 0.7),
        ({}, 0.3),
        ({"types": (constants.CARD_TYPE_ENCHANTMENT,)}, 0.5),
    ],
)
def test_replaceability(make_card, kwargs, expected):
    assert replaceability(make_card(**kwargs)) == expected


def test_sideboard_value(make_card):
    hate = make_card(
        types=INSTANT,
        abilities=frozenset(
            [constants.TAG_ARTIFACT_ENCHANTMENT_REMOVAL, constants.TAG_GRAVEYARD_HATE]
        ),
    )
    assert sideboard_value(hate) == pytest.approx(1.4)
    assert sideboard_value(make_card()) == 0.0
