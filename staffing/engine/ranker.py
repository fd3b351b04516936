"""Weighted ranking of scored candidates"""
from typing import List, Sequence, Tuple

from .scorer import round_half_up
from ..models import Candidate, NormalizedWeights, RankedCandidate, ScoreCard
from ..utils import logger


def final_score(card: ScoreCard, weights: NormalizedWeights) -> int:
    """Weighted sum of the sub-scores, rounded half-up"""
    weighted = (
        card.speed_score * weights.speed
        + card.cost_score * weights.cost
        + card.compliance_score * weights.compliance
    )
    return round_half_up(weighted)


def rank_scored(
    scored: Sequence[Tuple[Candidate, ScoreCard]],
    weights: NormalizedWeights,
    headcount: int
) -> List[RankedCandidate]:
    """
    Order scored candidates by final score and keep the top ``headcount``.

    The sort is stable, so candidates with equal scores stay in roster
    order. No alternates are returned beyond ``headcount``.
    """
    totals = [(candidate, card, final_score(card, weights)) for candidate, card in scored]
    totals.sort(key=lambda item: -item[2])

    ranked = [
        RankedCandidate(
            rank=position,
            candidate_id=candidate.id,
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            nationality=candidate.nationality,
            current_location=candidate.current_location,
            visa_type=card.visa_type,
            wait_days=card.wait_days,
            estimated_cost=card.total_cost,
            final_score=total,
            risks=list(card.risks),
            scores=card,
        )
        for position, (candidate, card, total) in enumerate(totals[:headcount], 1)
    ]

    logger.debug(f"Ranked {len(totals)} candidates, kept {len(ranked)}")
    return ranked
