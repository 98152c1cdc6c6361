"""
draft_engine/deck_builder.py
Builds a maindeck and sideboard from a finished pool.
Spells are chosen by quality within the drafted colors; the mana base is split
between colors in proportion to the colored pips of the chosen spells.
"""

import logging
from typing import Dict, List, Sequence, Tuple
from draft_engine import constants
from draft_engine.advisor.evaluator import score_quality
from draft_engine.advisor.schema import Deck, DeckShortfall, InvariantViolation
from draft_engine.configuration import DeckBuildConfig
from draft_engine.models import Card

logger = logging.getLogger(__name__)

IndexedCard = Tuple[int, Card]


def build_deck(pool: Sequence[Card], color_state, config: DeckBuildConfig) -> Deck:
    """
    color_state is anything with resolved_colors(): the live tracker or a snapshot.
    An unresolved color state leaves every color eligible.
    """
    eligible = color_state.resolved_colors() or frozenset(constants.CARD_COLORS)
    indexed = list(enumerate(pool))

    spells = [(i, c) for i, c in indexed if not c.is_land and c.colors <= eligible]
    creatures = _rank([x for x in spells if x[1].is_creature])
    non_creatures = _rank([x for x in spells if not x[1].is_creature])

    chosen_creatures = creatures[: config.target_creatures]
    chosen_non_creatures = non_creatures[: config.target_non_creatures]
    leftovers = _rank(
        creatures[config.target_creatures :] + non_creatures[config.target_non_creatures :]
    )
    chosen_flex = leftovers[: config.flex_slots]
    chosen_spells = chosen_creatures + chosen_non_creatures + chosen_flex

    land_slots = max(0, min(config.target_lands, config.maindeck_size - len(chosen_spells)))
    chosen_lands, basic_shortfall = select_lands(
        [x for x in indexed if x[1].is_land],
        [c for _, c in chosen_spells],
        eligible,
        land_slots,
    )

    maindeck_entries = chosen_spells + chosen_lands
    maindeck_indexes = {i for i, _ in maindeck_entries}
    maindeck = tuple(c for _, c in maindeck_entries)
    sideboard = tuple(c for i, c in indexed if i not in maindeck_indexes)

    shortfall = DeckShortfall(
        creatures=config.target_creatures - len(chosen_creatures),
        non_creatures=config.target_non_creatures - len(chosen_non_creatures),
        lands=config.target_lands - len(chosen_lands),
        flex=config.flex_slots - len(chosen_flex),
        basics=basic_shortfall,
    )

    if shortfall.is_empty and len(maindeck) != config.maindeck_size:
        logger.error(f"Deck has {len(maindeck)} cards with no shortfall recorded")
        raise InvariantViolation(
            f"Maindeck has {len(maindeck)} cards, expected {config.maindeck_size}"
        )

    if not shortfall.is_empty:
        logger.warning(
            f"Deck short by {shortfall.creatures} creatures, "
            f"{shortfall.non_creatures} non-creatures, {shortfall.lands} lands, {shortfall.flex} flex slots"
        )
    if shortfall.basics:
        logger.info(f"Missing basics substituted: {shortfall.basics}")

    return Deck(
        maindeck=maindeck,
        sideboard=sideboard,
        colors=eligible,
        shortfall=shortfall,
    )


def _rank(cards: List[IndexedCard]) -> List[IndexedCard]:
    # Stable, so equal quality keeps pool order
    return sorted(cards, key=lambda x: score_quality(x[1]), reverse=True)


def count_pips(spells: Sequence[Card], colors) -> Dict[str, int]:
    """Colored pips of the spells, limited to the given colors, in WUBRG order"""
    pips = {c: 0 for c in constants.CARD_COLORS if c in colors}
    for card in spells:
        for color, count in card.pips().items():
            if color in pips:
                pips[color] += count
    return pips


def basic_land_color(card: Card):
    """Returns the color a basic land produces, or None"""
    if not card.is_basic_land:
        return None
    if len(card.produces) == 1:
        return next(iter(card.produces))
    for color, name in constants.BASIC_LAND_NAMES.items():
        if card.name == name:
            return color
    return None


def allocate_basics(pips: Dict[str, int], slots: int) -> Dict[str, int]:
    """
    Splits the basic land slots proportionally to pips.
    Rounding remainder goes to the color with the most pips, overshoot is
    taken from the colors with the fewest.
    """
    active_pips = {c: p for c, p in pips.items() if p > 0}
    total_pips = sum(active_pips.values())
    if slots <= 0 or total_pips == 0:
        return {}

    allocations = {c: int(round(slots * (p / total_pips))) for c, p in active_pips.items()}

    diff = slots - sum(allocations.values())
    if diff > 0:
        top_color = max(active_pips, key=active_pips.get)
        allocations[top_color] += diff
    while diff < 0:
        bottom_color = min(
            (c for c in active_pips if allocations[c] > 0), key=active_pips.get
        )
        allocations[bottom_color] -= 1
        diff += 1

    return allocations


def select_lands(
    lands: List[IndexedCard], spells: Sequence[Card], eligible, slots: int
) -> Tuple[List[IndexedCard], Dict[str, int]]:
    """
    Fills the land slots: fixing lands first, then basics split by pips.
    Returns the chosen lands and the per-color count of basics that were wanted
    but not in the pool.
    """
    if slots <= 0:
        return [], {}

    fixing = _rank([x for x in lands if x[1].is_fixing_land])
    chosen = fixing[:slots]
    remaining = slots - len(chosen)

    basics_by_color: Dict[str, List[IndexedCard]] = {c: [] for c in constants.CARD_COLORS}
    for entry in lands:
        color = basic_land_color(entry[1])
        if color is not None:
            basics_by_color[color].append(entry)

    pips = count_pips(spells, eligible)
    if sum(pips.values()) == 0:
        # Colorless spells: lean on whatever basics the pool has
        pips = {c: len(basics_by_color[c]) for c in pips}

    basic_shortfall = {}
    for color, count in allocate_basics(pips, remaining).items():
        available = basics_by_color[color]
        taken, basics_by_color[color] = available[:count], available[count:]
        chosen.extend(taken)
        if len(taken) < count:
            basic_shortfall[color] = count - len(taken)

    unfilled = slots - len(chosen)
    if unfilled > 0:
        substitutes = []
        for color in sorted(pips, key=pips.get, reverse=True):
            substitutes.extend(basics_by_color[color])
        substitutes.extend(
            _rank([x for x in lands if not x[1].is_basic_land and not x[1].is_fixing_land])
        )
        chosen.extend(substitutes[:unfilled])

    return chosen, basic_shortfall
