"""
draft_engine/advisor/synergy.py
Synergy Tracker.
"""

from draft_engine import constants
from draft_engine.advisor.pool import DraftPool
from draft_engine.models import Card


class SynergyTracker:
    """
    Scores thematic overlap between a candidate and the pool (tribal, flyers, +1/+1 counters).
    Reads the pool's running counters and never modifies the pool or the card.
    """

    def evaluate_synergy(self, card: Card, pool: DraftPool) -> float:
        synergy = 0.0

        tribes = (card.subtypes | card.tribal_references) & set(constants.TRACKED_TRIBES)
        for tribe in sorted(tribes):
            synergy += constants.SYNERGY_TRIBE_VALUE * pool.subtype_count(tribe)

        if card.has(constants.TAG_FLYING):
            synergy += constants.SYNERGY_FLYING_VALUE * pool.ability_count(constants.TAG_FLYING)

        if card.has(constants.TAG_PLUS_ONE_COUNTER_SYNERGY):
            synergy += constants.SYNERGY_COUNTERS_VALUE * pool.ability_count(
                constants.TAG_PLUS_ONE_COUNTER_SYNERGY
            )

        return max(0.0, min(constants.SYNERGY_MAX, synergy))
