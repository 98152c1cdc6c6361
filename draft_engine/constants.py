"""
draft_engine/constants.py
Color, type, tag and scoring constants.
"""

CARD_COLOR_SYMBOL_WHITE = "W"
CARD_COLOR_SYMBOL_BLUE = "U"
CARD_COLOR_SYMBOL_BLACK = "B"
CARD_COLOR_SYMBOL_RED = "R"
CARD_COLOR_SYMBOL_GREEN = "G"

CARD_COLORS = [
    CARD_COLOR_SYMBOL_WHITE,
    CARD_COLOR_SYMBOL_BLUE,
    CARD_COLOR_SYMBOL_BLACK,
    CARD_COLOR_SYMBOL_RED,
    CARD_COLOR_SYMBOL_GREEN,
]

COLOR_STATE_OPEN = "Open"

BASIC_LAND_NAMES = {
    CARD_COLOR_SYMBOL_WHITE: "Plains",
    CARD_COLOR_SYMBOL_BLUE: "Island",
    CARD_COLOR_SYMBOL_BLACK: "Swamp",
    CARD_COLOR_SYMBOL_RED: "Mountain",
    CARD_COLOR_SYMBOL_GREEN: "Forest",
}

CARD_TYPE_CREATURE = "Creature"
CARD_TYPE_INSTANT = "Instant"
CARD_TYPE_SORCERY = "Sorcery"
CARD_TYPE_ENCHANTMENT = "Enchantment"
CARD_TYPE_ARTIFACT = "Artifact"
CARD_TYPE_PLANESWALKER = "Planeswalker"
CARD_TYPE_LAND = "Land"
CARD_TYPE_BASIC_LAND = "BasicLand"

CARD_TYPES = [
    CARD_TYPE_CREATURE,
    CARD_TYPE_INSTANT,
    CARD_TYPE_SORCERY,
    CARD_TYPE_ENCHANTMENT,
    CARD_TYPE_ARTIFACT,
    CARD_TYPE_PLANESWALKER,
    CARD_TYPE_LAND,
    CARD_TYPE_BASIC_LAND,
]

SUBTYPE_EQUIPMENT = "Equipment"
SUBTYPE_AURA = "Aura"

RARITY_COMMON = "Common"
RARITY_UNCOMMON = "Uncommon"
RARITY_RARE = "Rare"
RARITY_MYTHIC = "Mythic"

RARITIES = [RARITY_COMMON, RARITY_UNCOMMON, RARITY_RARE, RARITY_MYTHIC]

RARITY_MULTIPLIER_DICT = {
    RARITY_MYTHIC: 1.3,
    RARITY_RARE: 1.15,
    RARITY_UNCOMMON: 1.05,
    RARITY_COMMON: 1.0,
}

# --- Ability tags ---

TAG_FLYING = "Flying"
TAG_MENACE = "Menace"
TAG_TRAMPLE = "Trample"
TAG_UNBLOCKABLE = "Unblockable"
TAG_FIRST_STRIKE = "FirstStrike"
TAG_DOUBLE_STRIKE = "DoubleStrike"
TAG_DEATHTOUCH = "Deathtouch"
TAG_LIFELINK = "Lifelink"
TAG_HEXPROOF = "Hexproof"
TAG_INDESTRUCTIBLE = "Indestructible"
TAG_VIGILANCE = "Vigilance"
TAG_HASTE = "Haste"
TAG_REACH = "Reach"
TAG_FLASH = "Flash"
TAG_CARD_DRAW = "CardDraw"
TAG_DRAW_TWO = "DrawTwo"
TAG_DRAW_THREE = "DrawThree"
TAG_ETB_VALUE = "ETBValue"
TAG_REMOVAL = "Removal"
TAG_DESTROY_REMOVAL = "DestroyRemoval"
TAG_EXILE_REMOVAL = "ExileRemoval"
TAG_DAMAGE_ANY_TARGET = "DamageAnyTarget"
TAG_DAMAGE_CREATURE = "DamageCreature"
TAG_BOARD_WIPE = "BoardWipe"
TAG_DAMAGE_SWEEPER = "DamageSweeper"
TAG_PUMP_TRICK = "PumpTrick"
TAG_DETRIMENTAL_AURA = "DetrimentalAura"
TAG_BENEFICIAL_AURA = "BeneficialAura"
TAG_ANTHEM = "Anthem"
TAG_CARD_ENGINE = "CardEngine"
TAG_STAT_BOOST = "StatBoost"
TAG_KEYWORD_GRANT = "KeywordGrant"
TAG_MANA_PRODUCER = "ManaProducer"
TAG_MANA_FIXING = "ManaFixing"
TAG_ARTIFACT_ENCHANTMENT_REMOVAL = "ArtifactEnchantmentRemoval"
TAG_PROTECTION_FROM = "ProtectionFrom"
TAG_GRAVEYARD_HATE = "GraveyardHate"
TAG_PLUS_ONE_COUNTER_SYNERGY = "PlusOneCounterSynergy"

ABILITY_TAGS = [
    TAG_FLYING,
    TAG_MENACE,
    TAG_TRAMPLE,
    TAG_UNBLOCKABLE,
    TAG_FIRST_STRIKE,
    TAG_DOUBLE_STRIKE,
    TAG_DEATHTOUCH,
    TAG_LIFELINK,
    TAG_HEXPROOF,
    TAG_INDESTRUCTIBLE,
    TAG_VIGILANCE,
    TAG_HASTE,
    TAG_REACH,
    TAG_FLASH,
    TAG_CARD_DRAW,
    TAG_DRAW_TWO,
    TAG_DRAW_THREE,
    TAG_ETB_VALUE,
    TAG_REMOVAL,
    TAG_DESTROY_REMOVAL,
    TAG_EXILE_REMOVAL,
    TAG_DAMAGE_ANY_TARGET,
    TAG_DAMAGE_CREATURE,
    TAG_BOARD_WIPE,
    TAG_DAMAGE_SWEEPER,
    TAG_PUMP_TRICK,
    TAG_DETRIMENTAL_AURA,
    TAG_BENEFICIAL_AURA,
    TAG_ANTHEM,
    TAG_CARD_ENGINE,
    TAG_STAT_BOOST,
    TAG_KEYWORD_GRANT,
    TAG_MANA_PRODUCER,
    TAG_MANA_FIXING,
    TAG_ARTIFACT_ENCHANTMENT_REMOVAL,
    TAG_PROTECTION_FROM,
    TAG_GRAVEYARD_HATE,
    TAG_PLUS_ONE_COUNTER_SYNERGY,
]

REMOVAL_TAGS = [TAG_REMOVAL, TAG_DESTROY_REMOVAL, TAG_EXILE_REMOVAL]

# Removal tags that say how the card removes; a bare Removal tag scores as destroy
REMOVAL_KIND_TAGS = [
    TAG_DESTROY_REMOVAL,
    TAG_EXILE_REMOVAL,
    TAG_DAMAGE_ANY_TARGET,
    TAG_DAMAGE_CREATURE,
]

# Keyword values added on top of a creature's base score
CREATURE_KEYWORD_VALUES = {
    TAG_FLYING: 0.8,
    TAG_MENACE: 0.4,
    TAG_TRAMPLE: 0.3,
    TAG_UNBLOCKABLE: 1.0,
    TAG_FIRST_STRIKE: 0.5,
    TAG_DOUBLE_STRIKE: 1.0,
    TAG_DEATHTOUCH: 0.6,
    TAG_LIFELINK: 0.5,
    TAG_HEXPROOF: 0.7,
    TAG_INDESTRUCTIBLE: 0.8,
    TAG_VIGILANCE: 0.3,
    TAG_HASTE: 0.4,
    TAG_REACH: 0.2,
    TAG_FLASH: 0.3,
    TAG_CARD_DRAW: 0.6,
    TAG_ETB_VALUE: 0.3,
}

TRACKED_TRIBES = [
    "Vampire",
    "Cat",
    "Human",
    "Elf",
    "Goblin",
    "Zombie",
    "Merfolk",
    "Knight",
    "Wizard",
    "Dragon",
    "Spirit",
    "Faerie",
    "Dinosaur",
    "Pirate",
    "Rat",
    "Squirrel",
]

# --- Scoring tables ---

QUALITY_SCORE_MAX = 5.0
PLANESWALKER_SCORE = 4.5

TOTAL_PICKS = 45
MIN_PICK_WEIGHT = 0.5
COLOR_RESOLVE_PICK = 5
COLOR_LOCK_PICK = 10
SECONDARY_COLOR_THRESHOLD = 3.0
PRIMARY_COLOR_BONUS = 1.0
SECONDARY_COLOR_BONUS = 0.6
OFF_COLOR_PENALTY = -2.0

CURVE_BUCKETS = 8
CURVE_IDEAL_COUNTS = [0, 1, 5, 4, 3, 2, 1, 0.5]
CURVE_SHORT_BONUS = 0.5
CURVE_GLUT_PENALTY = -0.5
CURVE_GLUT_RATIO = 1.5

SYNERGY_TRIBE_VALUE = 0.2
SYNERGY_FLYING_VALUE = 0.1
SYNERGY_COUNTERS_VALUE = 0.15
SYNERGY_MAX = 1.0

EARLY_PICK_LIMIT = 3

# --- Export ---

EXPORT_CSV_HEADER = [
    "Pack",
    "Pick",
    "Picked",
    "Name",
    "Colors",
    "MV",
    "Type",
    "Score",
    "Quality",
    "Color",
    "Curve",
    "Synergy",
    "ColorState",
]

LOG_NAME = "draft_engine"
LOG_FORMAT = "%(asctime)s,%(levelname)s,%(name)s,%(message)s"
