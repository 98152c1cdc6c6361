"""
draft_engine/advisor/curve.py
Curve Tracker.
"""

import numpy
from draft_engine import constants
from draft_engine.models import Card


def curve_bucket(mana_value: int) -> int:
    return min(mana_value, constants.CURVE_BUCKETS - 1)


class CurveTracker:
    """Mana value histogram of the non-land picks. Bucket 7 holds everything 7+."""

    def __init__(self):
        self.histogram = numpy.zeros(constants.CURVE_BUCKETS, dtype=int)

    def add_card(self, card: Card) -> None:
        if card.is_land:
            return
        self.histogram[curve_bucket(card.mana_value)] += 1

    def curve_bonus(self, card: Card) -> float:
        if card.is_land:
            return 0.0

        bucket = curve_bucket(card.mana_value)
        ideal = constants.CURVE_IDEAL_COUNTS[bucket]
        current = self.histogram[bucket]

        if current < ideal:
            return constants.CURVE_SHORT_BONUS
        if current > ideal * constants.CURVE_GLUT_RATIO:
            return constants.CURVE_GLUT_PENALTY
        return 0.0

    @property
    def total(self) -> int:
        return int(self.histogram.sum())

    def restore(self, histogram) -> None:
        self.histogram = numpy.array(histogram, dtype=int)

    def reset(self) -> None:
        self.histogram = numpy.zeros(constants.CURVE_BUCKETS, dtype=int)
