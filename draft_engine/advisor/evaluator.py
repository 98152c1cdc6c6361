"""
draft_engine/advisor/evaluator.py
Card Evaluator.
Context-free card quality (0.0 to 5.0) plus the replaceability and sideboard
heuristics used by the pick engine. Nothing in this module reads session state.
"""

from draft_engine import constants
from draft_engine.models import Card


def score_quality(card: Card) -> float:
    if card.is_creature:
        score = _creature_quality(card)
    elif constants.CARD_TYPE_INSTANT in card.types or constants.CARD_TYPE_SORCERY in card.types:
        score = _spell_quality(card)
    elif constants.CARD_TYPE_ENCHANTMENT in card.types:
        score = _enchantment_quality(card)
    elif constants.CARD_TYPE_ARTIFACT in card.types:
        score = _artifact_quality(card)
    elif constants.CARD_TYPE_PLANESWALKER in card.types:
        score = constants.PLANESWALKER_SCORE
    elif card.is_land:
        score = _land_quality(card)
    else:
        score = 0.0

    score *= constants.RARITY_MULTIPLIER_DICT.get(card.rarity, 1.0)

    return max(0.0, min(constants.QUALITY_SCORE_MAX, score))


def _creature_quality(card: Card) -> float:
    """
    Base 2.0, vanilla test, quadrant theory, and keyword values.
    Variable P/T skips the size-based terms and is scored on keywords alone.
    """
    score = 2.0

    if card.has_fixed_stats:
        vanilla_ratio = (card.power + card.toughness) / max(1, card.mana_value)
        if vanilla_ratio >= 2.0:
            score += 0.5
        if vanilla_ratio >= 2.5:
            score += 0.5

        quadrants = (
            _developing_quadrant(card)
            + _parity_quadrant(card)
            + _winning_quadrant(card)
            + _losing_quadrant(card)
        )
        score += quadrants * 0.25

    score += sum(
        value
        for tag, value in constants.CREATURE_KEYWORD_VALUES.items()
        if card.has(tag)
    )

    return score


def _developing_quadrant(card: Card) -> float:
    # Early game: cheap bodies that pressure
    score = 0.0
    if card.mana_value <= 3 and card.power >= 2:
        score += 1.0
    if card.has(constants.TAG_HASTE):
        score += 0.5
    return score


def _parity_quadrant(card: Card) -> float:
    # Board stall: evasion and combat deterrence
    score = 0.0
    if card.has(constants.TAG_FLYING) or card.has(constants.TAG_MENACE):
        score += 1.0
    if card.has(constants.TAG_DEATHTOUCH):
        score += 0.8
    if card.power >= 4:
        score += 0.5
    return score


def _winning_quadrant(card: Card) -> float:
    # Ahead: protection and pressure
    score = 0.0
    if card.has(constants.TAG_HEXPROOF) or card.has(constants.TAG_INDESTRUCTIBLE):
        score += 0.5
    if card.power >= 3:
        score += 0.5
    if card.has(constants.TAG_TRAMPLE):
        score += 0.5
    return score


def _losing_quadrant(card: Card) -> float:
    # Behind: stabilization
    score = 0.0
    if card.toughness >= 4:
        score += 0.5
    if card.has(constants.TAG_LIFELINK):
        score += 1.0
    if card.has(constants.TAG_REACH) or card.has(constants.TAG_FLYING):
        score += 0.5
    return score


def _spell_quality(card: Card) -> float:
    score = 1.5

    # Removal
    if card.has(constants.TAG_DESTROY_REMOVAL):
        score += 1.5
    if card.has(constants.TAG_EXILE_REMOVAL):
        score += 1.8
    if card.has(constants.TAG_DAMAGE_ANY_TARGET):
        score += 1.6
    elif card.has(constants.TAG_DAMAGE_CREATURE):
        score += 1.2
    if card.has(constants.TAG_REMOVAL) and not any(
        card.has(tag) for tag in constants.REMOVAL_KIND_TAGS
    ):
        score += 1.5

    # Card advantage
    if card.has(constants.TAG_DRAW_THREE):
        score += 1.5
    elif card.has(constants.TAG_DRAW_TWO):
        score += 1.0

    # Combat tricks only matter at instant speed
    if constants.CARD_TYPE_INSTANT in card.types:
        if card.has(constants.TAG_PUMP_TRICK):
            score += 0.5
        if card.has(constants.TAG_INDESTRUCTIBLE):
            score += 0.8
        if card.has(constants.TAG_HEXPROOF):
            score += 0.6

    if card.has(constants.TAG_BOARD_WIPE):
        score += 2.0
    if card.has(constants.TAG_DAMAGE_SWEEPER):
        score += 1.5

    return score


def _enchantment_quality(card: Card) -> float:
    score = 1.0
    if card.has(constants.TAG_DETRIMENTAL_AURA):
        score += 1.2
    if card.has(constants.TAG_BENEFICIAL_AURA):
        score += 0.8
    if card.has(constants.TAG_ANTHEM):
        score += 1.0
    if card.has(constants.TAG_CARD_ENGINE):
        score += 1.2
    return score


def _artifact_quality(card: Card) -> float:
    score = 1.0
    if constants.SUBTYPE_EQUIPMENT in card.subtypes and card.has(constants.TAG_STAT_BOOST):
        score += 0.8
        if card.has(constants.TAG_KEYWORD_GRANT):
            score += 0.4
    if card.has(constants.TAG_MANA_PRODUCER) or card.has(constants.TAG_MANA_FIXING):
        score += 1.5
    if card.has(constants.TAG_CARD_DRAW):
        score += 1.0
    return score


def _land_quality(card: Card) -> float:
    if card.is_basic_land:
        return 0.1
    if card.is_fixing_land:
        return 3.0
    return 1.0


def replaceability(card: Card) -> float:
    """Higher means the card is harder to replace later in the draft"""
    if card.rarity == constants.RARITY_MYTHIC:
        return 1.0
    if card.rarity == constants.RARITY_RARE:
        return 0.8
    if any(card.has(tag) for tag in constants.REMOVAL_TAGS):
        return 0.7
    if card.is_creature:
        return 0.3
    return 0.5


def sideboard_value(card: Card) -> float:
    """Rewards narrow hate cards"""
    score = 0.0
    if card.has(constants.TAG_ARTIFACT_ENCHANTMENT_REMOVAL):
        score += 0.8
    if card.has(constants.TAG_PROTECTION_FROM):
        score += 0.5
    if card.has(constants.TAG_GRAVEYARD_HATE):
        score += 0.6
    return score
