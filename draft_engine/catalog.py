"""
draft_engine/catalog.py
Read-only card catalog. Converts raw card records into immutable Card instances,
running the oracle-text tagging pass exactly once per record.
"""

import json
from enum import Enum
from typing import Dict, List, Tuple
from pydantic import ValidationError
from draft_engine import constants
from draft_engine.card_tagger import (
    find_tribal_references,
    produced_colors,
    split_type_line,
    tag_oracle_text,
)
from draft_engine.logger import create_logger
from draft_engine.models import Card

logger = create_logger()


class Result(Enum):
    """Enumeration class for catalog load results"""

    VALID = 0
    ERROR_MISSING_FILE = 1
    ERROR_UNREADABLE_FILE = 2


def card_from_record(card_id, record: Dict) -> Card:
    """
    Builds a Card from a raw record.

    Input Example:
        record: {
            "name": "Serra Angel",
            "types": ["Creature", "Angel"],
            "colors": ["W"],
            "cmc": 5,
            "mana_cost": "{3}{W}{W}",
            "rarity": "uncommon",
            "text": "Flying, vigilance",
            "power": "4",
            "toughness": "4"
        }

    Records that already carry an "abilities" list are trusted and not re-tagged.
    """
    types, subtypes = split_type_line(record.get("types", []))
    subtypes = subtypes | frozenset(record.get("subtypes", []))
    name = record.get("name", str(card_id))
    text = record.get("text", "")

    if name in constants.BASIC_LAND_NAMES.values():
        types = types | {constants.CARD_TYPE_LAND, constants.CARD_TYPE_BASIC_LAND}

    if "abilities" in record:
        abilities = frozenset(record["abilities"])
    else:
        abilities = tag_oracle_text(text, types, subtypes)

    produces = frozenset(record.get("produces", [])) or produced_colors(text)
    if not produces and constants.CARD_TYPE_BASIC_LAND in types:
        produces = frozenset(
            color for color, land in constants.BASIC_LAND_NAMES.items() if land == name
        )

    return Card(
        id=card_id,
        name=name,
        types=types,
        subtypes=subtypes,
        colors=record.get("colors", []),
        mana_value=int(record.get("mana_value", record.get("cmc", 0))),
        mana_cost=record.get("mana_cost") or "",
        rarity=record.get("rarity", constants.RARITY_COMMON),
        abilities=abilities,
        tribal_references=frozenset(record.get("tribal_references", []))
        or find_tribal_references(text),
        produces=produces,
        power=record.get("power"),
        toughness=record.get("toughness"),
    )


class CardCatalog:
    def __init__(self):
        self._cards: Dict[str, Card] = {}

    def clear(self) -> None:
        self._cards = {}

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id) -> bool:
        return str(card_id) in self._cards

    def load_records(self, records) -> Tuple[int, List[str]]:
        """
        Adds raw records to the catalog. Accepts a dict keyed by card id or a list of
        records that carry an "id" field. Malformed records are skipped and reported.
        """
        if isinstance(records, dict):
            items = list(records.items())
        else:
            items = [(record.get("id", index), record) for index, record in enumerate(records)]

        loaded = 0
        errors = []
        for card_id, record in items:
            try:
                card = card_from_record(card_id, record)
            except (ValidationError, ValueError, TypeError) as error:
                logger.warning(f"Skipping card record {card_id}: {error}")
                errors.append(str(card_id))
                continue
            self._cards[card.id] = card
            loaded += 1

        return loaded, errors

    def open_file(self, file_location: str) -> Result:
        """
        Loads a catalog file of the form {"meta": {...}, "cards": {...}}
        """
        if not file_location:
            return Result.ERROR_MISSING_FILE

        try:
            with open(file_location, "r", encoding="utf-8", errors="replace") as json_file:
                json_data = json.load(json_file)
        except FileNotFoundError:
            return Result.ERROR_MISSING_FILE
        except json.JSONDecodeError:
            return Result.ERROR_UNREADABLE_FILE

        if not isinstance(json_data, dict) or "cards" not in json_data:
            return Result.ERROR_UNREADABLE_FILE

        loaded, errors = self.load_records(json_data["cards"])
        logger.info(f"Loaded {loaded} cards from {file_location} ({len(errors)} skipped)")

        return Result.VALID

    def get_card(self, card_id) -> Card:
        return self._cards[str(card_id)]

    def get_cards_by_id(self, id_list: List) -> List[Card]:
        """
        Returns the cards for each recognized id, preserving the order of the input list.
        """
        if not isinstance(id_list, list):
            raise ValueError("Input argument must be a list")

        return [self._cards[str(card_id)] for card_id in id_list if str(card_id) in self._cards]

    def get_cards_by_name(self, name_list: List[str]) -> List[Card]:
        names = set(name_list)
        return [card for card in self._cards.values() if card.name in names]

    def build_pack(self, id_list: List) -> List[Card]:
        """Resolves a pack of card ids into Cards; unknown ids are logged and dropped"""
        pack = self.get_cards_by_id(id_list)
        if len(pack) != len(id_list):
            logger.warning(f"Pack contained {len(id_list) - len(pack)} unknown card ids")
        return pack
