"""
draft_engine/configuration.py
Pick weights and deck-construction targets.
Invalid values are rejected when the models are constructed, before any picks occur.
"""

import json
import os
import sys
from typing import Tuple
from pydantic import BaseModel, Field, ValidationError, model_validator
from draft_engine.logger import create_logger

logger = create_logger()

CONFIG_FOLDER_NAME = "DraftEngine"
CONFIG_FILE_NAME = "config.json"


class DraftConfig(BaseModel):
    quality_weight: float = Field(default=1.0, ge=0.0)
    color_weight: float = Field(default=0.8, ge=0.0)
    curve_weight: float = Field(default=0.6, ge=0.0)
    synergy_weight: float = Field(default=0.4, ge=0.0)
    replaceability_weight: float = Field(default=0.3, ge=0.0)
    sideboard_weight: float = Field(default=0.2, ge=0.0)
    early_pick_multiplier: float = Field(default=1.2, ge=0.0)
    pack_size: int = Field(default=15, ge=1)
    rounds: int = Field(default=3, ge=1)

    @classmethod
    def aggressive(cls) -> "DraftConfig":
        return cls(curve_weight=0.9)

    @classmethod
    def control(cls) -> "DraftConfig":
        return cls(quality_weight=1.2, synergy_weight=0.6)


class DeckBuildConfig(BaseModel):
    target_creatures: int = Field(default=16, ge=0)
    target_lands: int = Field(default=17, ge=0)
    target_non_creatures: int = Field(default=7, ge=0)
    maindeck_size: int = Field(default=40, gt=0)

    @model_validator(mode="after")
    def check_targets(self):
        # Targets below the deck size leave flex slots; targets above it cannot be met
        if self.target_total > self.maindeck_size:
            raise ValueError(
                f"Deck targets add up to {self.target_total} cards but maindeck_size is {self.maindeck_size}"
            )
        return self

    @property
    def target_spells(self) -> int:
        return self.target_creatures + self.target_non_creatures

    @property
    def target_total(self) -> int:
        return self.target_spells + self.target_lands

    @property
    def flex_slots(self) -> int:
        """Maindeck slots no category target covers, filled with the best remaining spells"""
        return self.maindeck_size - self.target_total

    @classmethod
    def aggressive(cls) -> "DeckBuildConfig":
        return cls(target_creatures=18, target_non_creatures=5)

    @classmethod
    def control(cls) -> "DeckBuildConfig":
        return cls(target_creatures=14, target_non_creatures=9)


class Configuration(BaseModel):
    draft: DraftConfig = Field(default_factory=DraftConfig)
    deck: DeckBuildConfig = Field(default_factory=DeckBuildConfig)


def get_config_path() -> str:
    """Returns the OS-specific location of the configuration file"""
    if sys.platform == "win32":
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
    elif sys.platform == "darwin":
        base = os.path.expanduser("~/Library/Application Support")
    else:
        base = os.path.expanduser("~/.config")

    return os.path.join(base, CONFIG_FOLDER_NAME, CONFIG_FILE_NAME)


def read_configuration(file_location=None) -> Tuple[Configuration, bool]:
    """Reads the configuration file. Falls back to the defaults if the file is missing or invalid"""
    file_location = file_location or get_config_path()
    try:
        with open(file_location, "r", encoding="utf-8") as json_file:
            json_data = json.load(json_file)
        return Configuration.model_validate(json_data), True
    except FileNotFoundError:
        logger.info(f"No configuration found at {file_location}, using defaults")
    except (json.JSONDecodeError, ValidationError) as error:
        logger.error(f"Invalid configuration at {file_location}: {error}")

    return Configuration(), False


def write_configuration(configuration: Configuration, file_location=None) -> bool:
    """Writes the configuration to a JSON file"""
    file_location = file_location or get_config_path()
    try:
        folder = os.path.dirname(str(file_location))
        if folder and not os.path.exists(folder):
            os.makedirs(folder)
        with open(file_location, "w", encoding="utf-8", errors="replace") as json_file:
            json.dump(configuration.model_dump(), json_file, indent=4)
    except OSError as error:
        logger.error(f"Unable to write configuration to {file_location}: {error}")
        return False

    return True


def reset_configuration(file_location=None) -> bool:
    """Overwrites the configuration file with the defaults"""
    return write_configuration(Configuration(), file_location)
