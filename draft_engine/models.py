"""
draft_engine/models.py
Neutral, immutable card record consumed by the draft engine.
"""

import re
from typing import Dict, FrozenSet, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from draft_engine import constants

MANA_SYMBOL_PATTERN = re.compile(r"\{([^}]*)\}")


class Card(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    types: FrozenSet[str] = frozenset()
    subtypes: FrozenSet[str] = frozenset()
    colors: FrozenSet[str] = frozenset()
    mana_value: int = Field(default=0, ge=0)
    mana_cost: str = ""
    rarity: str = constants.RARITY_COMMON
    abilities: FrozenSet[str] = frozenset()
    tribal_references: FrozenSet[str] = frozenset()
    produces: FrozenSet[str] = frozenset()
    power: Optional[int] = None
    toughness: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value):
        return str(value)

    @field_validator("types")
    @classmethod
    def check_types(cls, value):
        unknown = value - set(constants.CARD_TYPES)
        if unknown:
            raise ValueError(f"Unknown card types: {sorted(unknown)}")
        if constants.CARD_TYPE_BASIC_LAND in value:
            value = value | {constants.CARD_TYPE_LAND}
        return value

    @field_validator("colors", "produces")
    @classmethod
    def check_colors(cls, value):
        unknown = value - set(constants.CARD_COLORS)
        if unknown:
            raise ValueError(f"Unknown colors: {sorted(unknown)}")
        return value

    @field_validator("abilities")
    @classmethod
    def check_abilities(cls, value):
        unknown = value - set(constants.ABILITY_TAGS)
        if unknown:
            raise ValueError(f"Unknown ability tags: {sorted(unknown)}")
        return value

    @field_validator("rarity", mode="before")
    @classmethod
    def normalize_rarity(cls, value):
        for rarity in constants.RARITIES:
            if str(value).lower() == rarity.lower():
                return rarity
        raise ValueError(f"Unknown rarity: {value}")

    @field_validator("power", "toughness", mode="before")
    @classmethod
    def parse_stat(cls, value):
        # Variable P/T such as "*" or "1+*" is stored as None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None

    @property
    def is_land(self) -> bool:
        return constants.CARD_TYPE_LAND in self.types

    @property
    def is_basic_land(self) -> bool:
        return constants.CARD_TYPE_BASIC_LAND in self.types

    @property
    def is_creature(self) -> bool:
        return constants.CARD_TYPE_CREATURE in self.types

    @property
    def is_colorless(self) -> bool:
        return not self.colors

    @property
    def has_fixed_stats(self) -> bool:
        return self.power is not None and self.toughness is not None

    @property
    def is_fixing_land(self) -> bool:
        """A non-basic land that produces more than one color of mana"""
        if not self.is_land or self.is_basic_land:
            return False
        return len(self.produces) >= 2 or constants.TAG_MANA_FIXING in self.abilities

    @property
    def color_string(self) -> str:
        return "".join(c for c in constants.CARD_COLORS if c in self.colors)

    def has(self, tag: str) -> bool:
        return tag in self.abilities

    def pips(self) -> Dict[str, int]:
        """
        Counts the colored mana symbols in the card's cost.
        Hybrid symbols such as {W/U} count toward both colors.
        Cards without a cost string contribute one pip per identity color.
        """
        pips = {}
        if self.mana_cost:
            for symbol in MANA_SYMBOL_PATTERN.findall(self.mana_cost):
                for color in constants.CARD_COLORS:
                    if color in symbol.upper():
                        pips[color] = pips.get(color, 0) + 1
        elif not self.is_land:
            for color in self.colors:
                pips[color] = 1
        return pips
