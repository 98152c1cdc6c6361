"""
draft_engine/advisor/color_commitment.py
Color Commitment Tracker.
Turns pick history into a weighted color preference and a per-card bonus or penalty.
"""

from typing import Dict, FrozenSet, Optional
from pydantic import BaseModel, ConfigDict
from draft_engine import constants
from draft_engine.models import Card


class ColorCommitmentState(BaseModel):
    """Immutable snapshot of the tracker"""

    model_config = ConfigDict(frozen=True)

    scores: Dict[str, float]
    primary: Optional[str] = None
    secondary: Optional[str] = None
    locked: bool = False

    def resolved_colors(self) -> FrozenSet[str]:
        return frozenset(c for c in (self.primary, self.secondary) if c is not None)

    def __str__(self) -> str:
        if self.primary is None:
            return constants.COLOR_STATE_OPEN
        if self.secondary is None:
            return self.primary
        return f"{self.primary}/{self.secondary}"


def pick_weight(pick_index: int) -> float:
    """Earlier picks say more about a drafter's intent than later ones"""
    return max(constants.MIN_PICK_WEIGHT, 1.0 - (pick_index / constants.TOTAL_PICKS))


class ColorCommitmentTracker:
    def __init__(self):
        self.scores: Dict[str, float] = {c: 0.0 for c in constants.CARD_COLORS}
        self.primary: Optional[str] = None
        self.secondary: Optional[str] = None
        self.locked = False

    def update(self, card: Card, pick_index: int) -> None:
        if card.is_land:
            return

        weight = pick_weight(pick_index)
        for color in card.colors:
            self.scores[color] += weight

        if pick_index >= constants.COLOR_RESOLVE_PICK:
            self._resolve_colors()
        if pick_index > constants.COLOR_LOCK_PICK:
            self.locked = True

    def _resolve_colors(self) -> None:
        # sorted() is stable, so equal scores keep WUBRG order
        ranked = sorted(
            ((color, score) for color, score in self.scores.items() if score > 0),
            key=lambda x: x[1],
            reverse=True,
        )
        if not ranked:
            return

        self.primary = ranked[0][0]
        if len(ranked) > 1 and ranked[1][1] > constants.SECONDARY_COLOR_THRESHOLD:
            self.secondary = ranked[1][0]
        else:
            self.secondary = None

    def color_bonus(self, card: Card, pick_index: int) -> float:
        if self.primary is None:
            return 0.0

        bonus = 0.0
        if self.primary in card.colors:
            bonus += constants.PRIMARY_COLOR_BONUS
        if self.secondary is not None and self.secondary in card.colors:
            bonus += constants.SECONDARY_COLOR_BONUS

        # Hard off-color penalty once the drafter should be settled
        if pick_index > constants.COLOR_LOCK_PICK and card.colors:
            if not card.colors & self.resolved_colors():
                bonus += constants.OFF_COLOR_PENALTY

        return bonus

    def resolved_colors(self) -> FrozenSet[str]:
        """Primary and secondary color. Empty until a primary color is established."""
        return frozenset(c for c in (self.primary, self.secondary) if c is not None)

    def snapshot(self) -> ColorCommitmentState:
        return ColorCommitmentState(
            scores=dict(self.scores),
            primary=self.primary,
            secondary=self.secondary,
            locked=self.locked,
        )

    def restore(self, state: ColorCommitmentState) -> None:
        self.scores = dict(state.scores)
        self.primary = state.primary
        self.secondary = state.secondary
        self.locked = state.locked

    def reset(self) -> None:
        self.__init__()

    def __str__(self) -> str:
        return str(self.snapshot())
