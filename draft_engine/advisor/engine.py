"""
draft_engine/advisor/engine.py
Pick Engine.
Scores every card in a pack against the session (quality, color commitment, curve,
synergy, replaceability, sideboard value), takes the best one, and commits the pick
to the session as a single unit.
"""

import logging
from typing import List, Optional, Union
from draft_engine import constants
from draft_engine.advisor.color_commitment import ColorCommitmentTracker
from draft_engine.advisor.curve import CurveTracker
from draft_engine.advisor.evaluator import replaceability, score_quality, sideboard_value
from draft_engine.advisor.pool import DraftPool
from draft_engine.advisor.schema import (
    NO_PICK_DRAFT_COMPLETE,
    NO_PICK_EMPTY_PACK,
    NO_PICK_SKIPPED,
    CardEvaluation,
    Deck,
    DraftState,
    InvariantViolation,
    NoPick,
    PickRecord,
    PickResult,
)
from draft_engine.advisor.synergy import SynergyTracker
from draft_engine.configuration import DeckBuildConfig, DraftConfig
from draft_engine.deck_builder import build_deck
from draft_engine.models import Card

logger = logging.getLogger(__name__)


class DraftSession:
    """
    Everything one drafting agent owns: pool, trackers, pick log and counters.
    Sessions share nothing, so any number of them can run side by side.
    """

    def __init__(self):
        self.pool = DraftPool()
        self.color = ColorCommitmentTracker()
        self.curve = CurveTracker()
        self.synergy = SynergyTracker()
        self.pick_log: List[PickRecord] = []
        self.pack_index = 1
        self.pick_index = 1
        self.state = DraftState.AWAITING_PACK

    @property
    def is_complete(self) -> bool:
        return self.state == DraftState.COMPLETE

    def checkpoint(self) -> dict:
        return {
            "pool": self.pool.copy(),
            "color": self.color.snapshot(),
            "curve": self.curve.histogram.copy(),
            "pick_log": list(self.pick_log),
            "pack_index": self.pack_index,
            "pick_index": self.pick_index,
            "state": self.state,
        }

    def rollback(self, checkpoint: dict) -> None:
        self.pool = checkpoint["pool"]
        self.color.restore(checkpoint["color"])
        self.curve.restore(checkpoint["curve"])
        self.pick_log = checkpoint["pick_log"]
        self.pack_index = checkpoint["pack_index"]
        self.pick_index = checkpoint["pick_index"]
        self.state = checkpoint["state"]

    def reset(self) -> None:
        self.__init__()


class PickEngine:
    def __init__(self, config: Optional[DraftConfig] = None):
        self.config = config or DraftConfig()

    def new_session(self) -> DraftSession:
        return DraftSession()

    def evaluate_card(self, card: Card, pack_position: int, session: DraftSession) -> CardEvaluation:
        pick_index = session.pick_index

        quality = score_quality(card)
        color_bonus = session.color.color_bonus(card, pick_index)
        curve_bonus = session.curve.curve_bonus(card)
        synergy = session.synergy.evaluate_synergy(card, session.pool)
        replace = replaceability(card)
        sideboard = sideboard_value(card)

        score = (
            quality * self.config.quality_weight
            + color_bonus * self.config.color_weight
            + curve_bonus * self.config.curve_weight
            + synergy * self.config.synergy_weight
            + replace * self.config.replaceability_weight
            + sideboard * self.config.sideboard_weight
        )

        early_pick = pick_index <= constants.EARLY_PICK_LIMIT
        if early_pick:
            score *= self.config.early_pick_multiplier

        return CardEvaluation(
            card=card,
            pack_position=pack_position,
            score=score,
            quality=quality,
            color_bonus=color_bonus,
            curve_bonus=curve_bonus,
            synergy=synergy,
            replaceability=replace,
            sideboard_value=sideboard,
            early_pick=early_pick,
        )

    def evaluate_pack(self, pack: List[Card], session: DraftSession) -> List[CardEvaluation]:
        """
        Returns the pack ranked best-first. Read-only with respect to the session.
        Equal scores keep their pack order, so the earliest card wins a tie.
        """
        evaluations = [
            self.evaluate_card(card, position, session)
            for position, card in enumerate(pack)
        ]
        return sorted(evaluations, key=lambda x: x.score, reverse=True)

    def pick(self, pack: List[Card], session: DraftSession) -> Union[PickResult, NoPick]:
        if session.is_complete:
            logger.info("Pick requested after the draft completed")
            return self._no_pick(NO_PICK_DRAFT_COMPLETE, session)

        if not pack:
            logger.info(f"Empty pack at P{session.pack_index}p{session.pick_index}")
            return self._no_pick(NO_PICK_EMPTY_PACK, session)

        checkpoint = session.checkpoint()
        session.state = DraftState.EVALUATING
        try:
            ranked = self.evaluate_pack(pack, session)
        except Exception:
            session.rollback(checkpoint)
            raise

        chosen = ranked[0]
        pack_index, pick_index = session.pack_index, session.pick_index
        self._commit(session, chosen.card, ranked, checkpoint)

        logger.debug(
            f"P{pack_index}p{pick_index}: picked {chosen.card.name} "
            f"({chosen.score:.2f}) colors={session.color}"
        )

        return PickResult(
            chosen_card=chosen.card,
            ranked_evaluations=tuple(ranked),
            pack_index=pack_index,
            pick_index=pick_index,
        )

    def skip(self, session: DraftSession) -> NoPick:
        """No-op pick for a harness that timed out or cancelled this pack"""
        logger.info(f"Skipped P{session.pack_index}p{session.pick_index}")
        return self._no_pick(NO_PICK_SKIPPED, session)

    def build_deck(self, session: DraftSession, deck_config: Optional[DeckBuildConfig] = None) -> Deck:
        return build_deck(session.pool.cards, session.color, deck_config or DeckBuildConfig())

    def _no_pick(self, reason: str, session: DraftSession) -> NoPick:
        return NoPick(reason=reason, pack_index=session.pack_index, pick_index=session.pick_index)

    def _commit(self, session: DraftSession, card: Card, ranked: List[CardEvaluation], checkpoint: dict) -> None:
        """Applies the pick to pool, trackers, pick log and counters, or to none of them"""
        pick_index = session.pick_index
        try:
            record = PickRecord(
                pack_index=session.pack_index,
                pick_index=pick_index,
                ranked_evaluations=tuple(ranked),
                chosen_card=card,
                color_state=session.color.snapshot(),
            )
            session.pool.add_card(card)
            session.color.update(card, pick_index)
            session.curve.add_card(card)
            session.pick_log.append(record)
            session.state = DraftState.PICKED
            self._advance(session)
            self._verify(session)
        except InvariantViolation as error:
            session.rollback(checkpoint)
            logger.error(f"Inconsistent session after picking {card.name}: {error}")
            raise
        except Exception as error:
            session.rollback(checkpoint)
            logger.error(f"Pick commit failed for {card.name}: {error}")
            raise InvariantViolation(f"Pick commit failed for {card.name}") from error

    def _advance(self, session: DraftSession) -> None:
        session.pick_index += 1
        if session.pick_index <= self.config.pack_size:
            session.state = DraftState.AWAITING_PACK
            return

        session.state = DraftState.PACK_EXHAUSTED
        session.pick_index = 1
        session.pack_index += 1

        if session.pack_index > self.config.rounds:
            session.state = DraftState.COMPLETE
            logger.info(f"Draft complete: {len(session.pool)} picks, colors {session.color}")
        else:
            session.state = DraftState.AWAITING_PACK

    def _verify(self, session: DraftSession) -> None:
        pool = session.pool
        if len(pool) != len(session.pick_log):
            raise InvariantViolation(
                f"Pool holds {len(pool)} cards but {len(session.pick_log)} picks were logged"
            )
        if session.curve.total != pool.non_land_count or int(pool.mana_value_histogram.sum()) != session.curve.total:
            raise InvariantViolation(
                f"Curve tracker holds {session.curve.total} cards but pool has {pool.non_land_count} non-lands"
            )
