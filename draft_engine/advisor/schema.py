"""
draft_engine/advisor/schema.py
Data models for picks, the pick log, and finished decks.
"""

from enum import Enum
from typing import Dict, FrozenSet, Tuple
from pydantic import BaseModel, ConfigDict, Field
from draft_engine.advisor.color_commitment import ColorCommitmentState
from draft_engine.models import Card


class InvariantViolation(RuntimeError):
    """Raised when engine state is found inconsistent. Never recovered from."""


class DraftState(Enum):
    AWAITING_PACK = "AwaitingPack"
    EVALUATING = "Evaluating"
    PICKED = "Picked"
    PACK_EXHAUSTED = "PackExhausted"
    COMPLETE = "Complete"


class CardEvaluation(BaseModel):
    model_config = ConfigDict(frozen=True)

    card: Card
    pack_position: int
    score: float
    quality: float
    color_bonus: float
    curve_bonus: float
    synergy: float
    replaceability: float
    sideboard_value: float
    early_pick: bool = False


class PickResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    chosen_card: Card
    ranked_evaluations: Tuple[CardEvaluation, ...]
    pack_index: int
    pick_index: int


class NoPick(BaseModel):
    """Soft failure: the session was left exactly as it was"""

    model_config = ConfigDict(frozen=True)

    reason: str
    pack_index: int
    pick_index: int


NO_PICK_EMPTY_PACK = "empty_pack"
NO_PICK_SKIPPED = "skipped"
NO_PICK_DRAFT_COMPLETE = "draft_complete"


class PickRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    pack_index: int
    pick_index: int
    ranked_evaluations: Tuple[CardEvaluation, ...]
    chosen_card: Card
    color_state: ColorCommitmentState

    @property
    def color_state_label(self) -> str:
        return str(self.color_state)


class DeckShortfall(BaseModel):
    model_config = ConfigDict(frozen=True)

    creatures: int = 0
    non_creatures: int = 0
    lands: int = 0
    flex: int = 0
    basics: Dict[str, int] = Field(default_factory=dict)

    @property
    def total(self) -> int:
        return self.creatures + self.non_creatures + self.lands + self.flex

    @property
    def is_empty(self) -> bool:
        return self.total == 0


class Deck(BaseModel):
    model_config = ConfigDict(frozen=True)

    maindeck: Tuple[Card, ...]
    sideboard: Tuple[Card, ...]
    colors: FrozenSet[str] = frozenset()
    shortfall: DeckShortfall = Field(default_factory=DeckShortfall)

    @property
    def creatures(self) -> Tuple[Card, ...]:
        return tuple(c for c in self.maindeck if c.is_creature and not c.is_land)

    @property
    def non_creatures(self) -> Tuple[Card, ...]:
        return tuple(c for c in self.maindeck if not c.is_creature and not c.is_land)

    @property
    def lands(self) -> Tuple[Card, ...]:
        return tuple(c for c in self.maindeck if c.is_land)
