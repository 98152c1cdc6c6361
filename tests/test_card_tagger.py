"""
tests/test_card_tagger.py
Oracle text to ability tag mapping.
"""

import pytest
from draft_engine import constants
from draft_engine.card_tagger import (
    find_tribal_references,
    produced_colors,
    split_type_line,
    tag_oracle_text,
)

CREATURE = [constants.CARD_TYPE_CREATURE]
INSTANT = [constants.CARD_TYPE_INSTANT]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Flying, vigilance", {constants.TAG_FLYING, constants.TAG_VIGILANCE}),
        ("First strike", {constants.TAG_FIRST_STRIKE}),
        ("This creature can't be blocked.", {constants.TAG_UNBLOCKABLE}),
        ("Deathtouch, lifelink", {constants.TAG_DEATHTOUCH, constants.TAG_LIFELINK}),
        (
            "When this creature enters, draw a card.",
            {constants.TAG_ETB_VALUE, constants.TAG_CARD_DRAW},
        ),
    ],
)
def test_creature_keywords(text, expected):
    assert tag_oracle_text(text, CREATURE) == frozenset(expected)


def test_removal_tags():
    murder = tag_oracle_text("Destroy target creature.", INSTANT)
    bolt = tag_oracle_text("Lightning Bolt deals 3 damage to any target.", INSTANT)
    swipe = tag_oracle_text("Deals 2 damage to target creature.", INSTANT)

    assert {constants.TAG_DESTROY_REMOVAL, constants.TAG_REMOVAL} <= murder
    assert {constants.TAG_DAMAGE_ANY_TARGET, constants.TAG_REMOVAL} <= bolt
    assert constants.TAG_DAMAGE_CREATURE in swipe


def test_sweepers_and_card_advantage():
    wrath = tag_oracle_text("Destroy all creatures. They can't be regenerated.")
    pyroclasm = tag_oracle_text("Pyroclasm deals 2 damage to each creature.")
    divination = tag_oracle_text("Draw two cards.")
    opt = tag_oracle_text("Draw three cards, then discard a card.")

    assert constants.TAG_BOARD_WIPE in wrath
    assert constants.TAG_DAMAGE_SWEEPER in pyroclasm
    assert {constants.TAG_DRAW_TWO, constants.TAG_CARD_DRAW} <= divination
    assert constants.TAG_DRAW_THREE in opt


def test_pump_trick():
    tags = tag_oracle_text("Target creature gets +3/+3 until end of turn.", INSTANT)
    assert constants.TAG_PUMP_TRICK in tags


def test_detrimental_aura_drops_granted_keywords():
    text = "Enchant creature\nEnchanted creature can't attack or block and loses flying."
    tags = tag_oracle_text(text, [constants.CARD_TYPE_ENCHANTMENT], [constants.SUBTYPE_AURA])

    assert constants.TAG_DETRIMENTAL_AURA in tags
    assert constants.TAG_FLYING not in tags


def test_beneficial_aura():
    text = "Enchant creature\nEnchanted creature gets +2/+2 and has flying."
    tags = tag_oracle_text(text, [constants.CARD_TYPE_ENCHANTMENT], [constants.SUBTYPE_AURA])

    assert constants.TAG_BENEFICIAL_AURA in tags
    assert constants.TAG_FLYING not in tags


def test_anthem_and_card_engine():
    anthem = tag_oracle_text("Creatures you control get +1/+1.", [constants.CARD_TYPE_ENCHANTMENT])
    engine = tag_oracle_text(
        "Whenever you cast a noncreature spell, draw a card.", [constants.CARD_TYPE_ARTIFACT]
    )
    creature = tag_oracle_text("Whenever this creature attacks, draw a card.", CREATURE)

    assert constants.TAG_ANTHEM in anthem
    assert constants.TAG_CARD_ENGINE in engine
    assert constants.TAG_CARD_ENGINE not in creature


def test_equipment():
    text = "Equipped creature gets +2/+0 and has first strike.\nEquip {2}"
    tags = tag_oracle_text(text, [constants.CARD_TYPE_ARTIFACT], [constants.SUBTYPE_EQUIPMENT])

    assert {constants.TAG_STAT_BOOST, constants.TAG_KEYWORD_GRANT} <= tags


def test_hate_cards():
    shatter = tag_oracle_text("Destroy target artifact.", INSTANT)
    relic = tag_oracle_text("Exile target player's graveyard.", [constants.CARD_TYPE_ARTIFACT])

    assert constants.TAG_ARTIFACT_ENCHANTMENT_REMOVAL in shatter
    assert constants.TAG_GRAVEYARD_HATE in relic
    assert constants.TAG_PROTECTION_FROM in tag_oracle_text("Protection from red", CREATURE)


def test_dual_land_is_fixing():
    tags = tag_oracle_text("{T}: Add {W} or {U}.", [constants.CARD_TYPE_LAND])

    assert constants.TAG_MANA_FIXING in tags
    assert constants.TAG_MANA_PRODUCER in tags


def test_empty_text():
    assert tag_oracle_text("") == frozenset()
    assert tag_oracle_text(None) == frozenset()


def test_find_tribal_references():
    assert find_tribal_references("Other Elves you control get +1/+1.") == frozenset(["Elf"])
    assert find_tribal_references("Create a 1/1 black Rat creature token.") == frozenset(["Rat"])
    assert find_tribal_references("Draw a card.") == frozenset()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("{T}: Add {G}.", {"G"}),
        ("{T}: Add {R} or {G}.", {"R", "G"}),
        ("{T}: Add one mana of any color.", set(constants.CARD_COLORS)),
        ("Flying", set()),
    ],
)
def test_produced_colors(text, expected):
    assert produced_colors(text) == frozenset(expected)


def test_split_type_line():
    types, subtypes = split_type_line(["Legendary", "Creature", "Elf", "Druid"])
    assert types == frozenset([constants.CARD_TYPE_CREATURE])
    assert subtypes == frozenset(["Elf", "Druid"])

    types, subtypes = split_type_line(["Basic", "Land", "Forest"])
    assert types == frozenset([constants.CARD_TYPE_LAND, constants.CARD_TYPE_BASIC_LAND])
    assert subtypes == frozenset(["Forest"])
