"""
draft_engine/card_tagger.py
Derives ability tags from oracle text once, when a card record is ingested.
Scoring code only ever reads the resulting tags.
"""

import re
from typing import FrozenSet, Iterable, List
from draft_engine import constants

# Every pattern for a tag is tried; one match is enough
TAG_PATTERNS = {
    constants.TAG_FLYING: [r"\bflying\b"],
    constants.TAG_MENACE: [r"\bmenace\b"],
    constants.TAG_TRAMPLE: [r"\btrample\b"],
    constants.TAG_UNBLOCKABLE: [r"\bunblockable\b", r"can't be blocked"],
    constants.TAG_FIRST_STRIKE: [r"\bfirst strike\b"],
    constants.TAG_DOUBLE_STRIKE: [r"\bdouble strike\b"],
    constants.TAG_DEATHTOUCH: [r"\bdeathtouch\b"],
    constants.TAG_LIFELINK: [r"\blifelink\b"],
    constants.TAG_HEXPROOF: [r"\bhexproof\b"],
    constants.TAG_INDESTRUCTIBLE: [r"\bindestructible\b"],
    constants.TAG_VIGILANCE: [r"\bvigilance\b"],
    constants.TAG_HASTE: [r"\bhaste\b"],
    constants.TAG_REACH: [r"\breach\b"],
    constants.TAG_FLASH: [r"\bflash\b"],
    constants.TAG_CARD_DRAW: [r"\bdraws? [^.]*\bcards?\b"],
    constants.TAG_DRAW_TWO: [r"\bdraws? two cards\b"],
    constants.TAG_DRAW_THREE: [r"\bdraws? (three|four|five) cards\b"],
    constants.TAG_ETB_VALUE: [r"\bwhen [^.]*\benters( the battlefield)?\b", r"\betb\b"],
    constants.TAG_DESTROY_REMOVAL: [r"destroy target (nonland )?(creature|permanent)"],
    constants.TAG_EXILE_REMOVAL: [r"exile target (nonland )?(creature|permanent)"],
    constants.TAG_DAMAGE_ANY_TARGET: [r"deals? [^.]*damage to any target"],
    constants.TAG_DAMAGE_CREATURE: [
        r"deals? [^.]*damage to target (attacking |blocking )?creature"
    ],
    constants.TAG_BOARD_WIPE: [r"destroy (all|each) creatures?"],
    constants.TAG_DAMAGE_SWEEPER: [r"damage to (all|each) creatures?"],
    constants.TAG_PUMP_TRICK: [r"target creature [^.]*gets \+\d+/\+\d+"],
    constants.TAG_ANTHEM: [r"creatures you control get \+"],
    constants.TAG_STAT_BOOST: [r"equipped creature gets \+\d+/\+\d+"],
    constants.TAG_KEYWORD_GRANT: [
        r"equipped creature [^.]*(has|gains) [^.]*(first strike|flying)"
    ],
    constants.TAG_MANA_PRODUCER: [r"\badd \{", r"\badd (one|two|three) mana\b"],
    constants.TAG_MANA_FIXING: [
        r"mana of any color",
        r"search your library for a basic land",
        r"\btreasure\b",
    ],
    constants.TAG_ARTIFACT_ENCHANTMENT_REMOVAL: [
        r"destroy target (artifact|enchantment)",
        r"destroy target [^.]*artifact or enchantment",
    ],
    constants.TAG_PROTECTION_FROM: [r"protection from"],
    constants.TAG_GRAVEYARD_HATE: [r"exile [^.]*graveyard"],
    constants.TAG_PLUS_ONE_COUNTER_SYNERGY: [r"\+1/\+1 counter"],
}

COMPILED_TAG_PATTERNS = {
    tag: [re.compile(pattern) for pattern in patterns]
    for tag, patterns in TAG_PATTERNS.items()
}

TRIBE_PLURALS = {"Elf": "elves", "Dwarf": "dwarves", "Wolf": "wolves"}

SUPERTYPES = {"Legendary", "Snow", "World", "Tribal", "Kindred", "Token"}

MANA_ADD_PATTERN = re.compile(r"\badd\b([^.]*)")
COLOR_SYMBOL_PATTERN = re.compile(r"\{([wubrg])\}")


def _matches(tag: str, text: str) -> bool:
    return any(pattern.search(text) for pattern in COMPILED_TAG_PATTERNS[tag])


def tag_oracle_text(text: str, types: Iterable[str] = (), subtypes: Iterable[str] = ()) -> FrozenSet[str]:
    """
    Maps oracle text onto the closed ability-tag vocabulary.

    Input Example:
        text: "Flying. When this creature enters, draw a card."
    Output Example:
        frozenset({"Flying", "ETBValue", "CardDraw"})
    """
    text = (text or "").lower()
    types = set(types)
    tags = {tag for tag in COMPILED_TAG_PATTERNS if _matches(tag, text)}

    if tags & {
        constants.TAG_DESTROY_REMOVAL,
        constants.TAG_EXILE_REMOVAL,
        constants.TAG_DAMAGE_ANY_TARGET,
        constants.TAG_DAMAGE_CREATURE,
    }:
        tags.add(constants.TAG_REMOVAL)

    is_aura = "enchant creature" in text or constants.SUBTYPE_AURA in set(subtypes)
    if is_aura:
        if "can't attack" in text or "can't block" in text:
            tags.add(constants.TAG_DETRIMENTAL_AURA)
        elif re.search(r"enchanted creature [^.]*(gets \+|has|gains)", text):
            tags.add(constants.TAG_BENEFICIAL_AURA)
        # Keywords granted by an aura belong to the enchanted creature
        tags -= set(constants.CREATURE_KEYWORD_VALUES) - {constants.TAG_CARD_DRAW}
        tags.discard(constants.TAG_ANTHEM)
    elif "whenever" in text and constants.TAG_CARD_DRAW in tags:
        if constants.CARD_TYPE_ENCHANTMENT in types or constants.CARD_TYPE_ARTIFACT in types:
            tags.add(constants.TAG_CARD_ENGINE)

    if constants.CARD_TYPE_LAND in types and len(produced_colors(text)) >= 2:
        tags.add(constants.TAG_MANA_FIXING)

    return frozenset(tags)


def find_tribal_references(text: str) -> FrozenSet[str]:
    """Returns the tracked tribes named in the oracle text"""
    text = (text or "").lower()
    found = set()
    for tribe in constants.TRACKED_TRIBES:
        plural = TRIBE_PLURALS.get(tribe, tribe.lower() + "s")
        if re.search(rf"\b({tribe.lower()}|{plural})\b", text):
            found.add(tribe)
    return frozenset(found)


def produced_colors(text: str) -> FrozenSet[str]:
    """Returns the colors of mana an ability can add"""
    text = (text or "").lower()
    if "mana of any color" in text:
        return frozenset(constants.CARD_COLORS)

    colors = set()
    for clause in MANA_ADD_PATTERN.findall(text):
        colors.update(symbol.upper() for symbol in COLOR_SYMBOL_PATTERN.findall(clause))
    return frozenset(colors)


def split_type_line(type_tags: Iterable[str]) -> List[FrozenSet[str]]:
    """
    Separates a flat type list (as found in card data exports) into card types and subtypes.
    "Basic" maps onto the BasicLand tag; supertypes such as Legendary are dropped.
    """
    types = set()
    subtypes = set()
    for tag in type_tags:
        if tag in constants.CARD_TYPES:
            types.add(tag)
        elif tag == "Basic":
            types.add(constants.CARD_TYPE_BASIC_LAND)
        elif tag in SUPERTYPES:
            continue
        else:
            subtypes.add(tag)
    return [frozenset(types), frozenset(subtypes)]
