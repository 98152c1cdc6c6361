"""
draft_engine/analytics.py
Post-draft reporting: pick log exports and a summary of the finished draft.
"""

import csv
import io
import json
from typing import Dict, List, Sequence
from pydantic import BaseModel, Field
from draft_engine import constants
from draft_engine.advisor.schema import PickRecord


class FirstPick(BaseModel):
    pack: int
    name: str
    score: float


class DraftSummary(BaseModel):
    total_picks: int = 0
    final_colors: str = constants.COLOR_STATE_OPEN
    first_picks: List[FirstPick] = Field(default_factory=list)
    color_distribution: Dict[str, int] = Field(default_factory=dict)

    def __str__(self) -> str:
        lines = [
            f"Total picks: {self.total_picks}",
            f"Final colors: {self.final_colors}",
        ]
        for pick in self.first_picks:
            lines.append(f"Pack {pick.pack}: {pick.name} (Score: {pick.score:.2f})")
        for color, count in self.color_distribution.items():
            lines.append(f"  {color}: {count} cards")
        return "\n".join(lines)


def export_picks_to_csv(pick_log: Sequence[PickRecord]) -> str:
    """One row for every card seen, with the score breakdown at the time of the pick"""
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(constants.EXPORT_CSV_HEADER)

    for record in pick_log:
        for evaluation in record.ranked_evaluations:
            card = evaluation.card
            writer.writerow(
                [
                    record.pack_index,
                    record.pick_index,
                    "1" if card.id == record.chosen_card.id else "0",
                    card.name,
                    card.color_string,
                    card.mana_value,
                    " ".join(sorted(card.types)),
                    f"{evaluation.score:.3f}",
                    f"{evaluation.quality:.3f}",
                    f"{evaluation.color_bonus:.3f}",
                    f"{evaluation.curve_bonus:.3f}",
                    f"{evaluation.synergy:.3f}",
                    record.color_state_label,
                ]
            )
    return output.getvalue()


def export_picks_to_json(pick_log: Sequence[PickRecord]) -> str:
    output = []
    for record in pick_log:
        pick_data = {
            "Pack": record.pack_index,
            "Pick": record.pick_index,
            "ColorState": record.color_state_label,
            "Cards": [],
        }
        for evaluation in record.ranked_evaluations:
            card = evaluation.card
            pick_data["Cards"].append(
                {
                    "Name": card.name,
                    "Picked": card.id == record.chosen_card.id,
                    "Colors": card.color_string,
                    "MV": card.mana_value,
                    "Type": sorted(card.types),
                    "Score": evaluation.score,
                    "Quality": evaluation.quality,
                    "Color": evaluation.color_bonus,
                    "Curve": evaluation.curve_bonus,
                    "Synergy": evaluation.synergy,
                }
            )
        output.append(pick_data)
    return json.dumps(output, indent=4)


def summarize_draft(session) -> DraftSummary:
    first_picks = [
        FirstPick(
            pack=record.pack_index,
            name=record.chosen_card.name,
            score=record.ranked_evaluations[0].score,
        )
        for record in session.pick_log
        if record.pick_index == 1
    ]

    # Colorless cards are left out
    distribution = {
        color: count for color, count in session.pool.color_counts.items() if count > 0
    }

    return DraftSummary(
        total_picks=len(session.pick_log),
        final_colors=str(session.color),
        first_picks=first_picks,
        color_distribution=distribution,
    )
