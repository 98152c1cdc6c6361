import json
import pytest
from draft_engine import constants
from draft_engine.catalog import CardCatalog, Result, card_from_record

CARD_RECORDS = {
    "101": {
        "name": "Serra Angel",
        "types": ["Creature", "Angel"],
        "colors": ["W"],
        "cmc": 5,
        "mana_cost": "{3}{W}{W}",
        "rarity": "uncommon",
        "text": "Flying, vigilance",
        "power": "4",
        "toughness": "4",
    },
    "102": {
        "name": "Plains",
        "types": ["Basic", "Land", "Plains"],
        "colors": [],
        "cmc": 0,
    },
    "103": {
        "name": "Tarmogoyf",
        "types": ["Creature", "Lhurgoyf"],
        "colors": ["G"],
        "cmc": 2,
        "rarity": "mythic",
        "power": "*",
        "toughness": "1+*",
    },
    "104": {
        "name": "Pre-tagged Bolt",
        "types": ["Instant"],
        "colors": ["R"],
        "cmc": 1,
        "abilities": ["DamageAnyTarget", "Removal"],
        "text": "Flying",
    },
}


@pytest.fixture
def catalog():
    catalog = CardCatalog()
    catalog.load_records(CARD_RECORDS)
    return catalog


def test_card_from_record():
    card = card_from_record(101, CARD_RECORDS["101"])

    assert card.id == "101"
    assert card.types == frozenset([constants.CARD_TYPE_CREATURE])
    assert card.subtypes == frozenset(["Angel"])
    assert card.rarity == constants.RARITY_UNCOMMON
    assert card.abilities == frozenset([constants.TAG_FLYING, constants.TAG_VIGILANCE])
    assert (card.power, card.toughness) == (4, 4)
    assert card.pips() == {"W": 2}


def test_basic_land_record():
    card = card_from_record("102", CARD_RECORDS["102"])

    assert card.is_basic_land
    assert card.is_land
    assert card.produces == frozenset(["W"])
    assert not card.is_fixing_land


def test_variable_stats_record():
    card = card_from_record("103", CARD_RECORDS["103"])

    assert card.power is None
    assert card.toughness is None
    assert not card.has_fixed_stats


def test_explicit_abilities_are_trusted():
    card = card_from_record("104", CARD_RECORDS["104"])
    assert card.abilities == frozenset([constants.TAG_DAMAGE_ANY_TARGET, constants.TAG_REMOVAL])


def test_load_records_skips_bad_records():
    catalog = CardCatalog()
    records = dict(CARD_RECORDS)
    records["900"] = {"name": "Broken", "types": ["Creature"], "rarity": "legendary"}
    records["901"] = {"name": "Also Broken", "types": ["Creature"], "colors": ["P"]}

    loaded, errors = catalog.load_records(records)

    assert loaded == 4
    assert errors == ["900", "901"]
    assert "900" not in catalog


def test_load_records_from_list():
    catalog = CardCatalog()
    loaded, errors = catalog.load_records([dict(CARD_RECORDS["101"], id=7)])

    assert (loaded, errors) == (1, [])
    assert catalog.get_card(7).name == "Serra Angel"


def test_get_cards_by_id(catalog):
    cards = catalog.get_cards_by_id(["103", 101, "999"])
    assert [c.name for c in cards] == ["Tarmogoyf", "Serra Angel"]

    with pytest.raises(ValueError):
        catalog.get_cards_by_id("101")


def test_get_cards_by_name(catalog):
    assert [c.id for c in catalog.get_cards_by_name(["Plains"])] == ["102"]


def test_build_pack(catalog):
    pack = catalog.build_pack(["101", "102", "555"])
    assert [c.id for c in pack] == ["101", "102"]


def test_open_file(tmp_path):
    file_location = tmp_path / "cards.json"
    file_location.write_text(json.dumps({"meta": {"version": 1}, "cards": CARD_RECORDS}))

    catalog = CardCatalog()
    assert catalog.open_file(str(file_location)) == Result.VALID
    assert len(catalog) == 4


@pytest.mark.parametrize(
    "contents, expected",
    [
        (None, Result.ERROR_MISSING_FILE),
        ("{broken", Result.ERROR_UNREADABLE_FILE),
        (json.dumps({"meta": {}}), Result.ERROR_UNREADABLE_FILE),
    ],
)
def test_open_file_errors(tmp_path, contents, expected):
    file_location = tmp_path / "cards.json"
    if contents is not None:
        file_location.write_text(contents)

    assert CardCatalog().open_file(str(file_location)) == expected


def test_clear(catalog):
    catalog.clear()
    assert len(catalog) == 0
