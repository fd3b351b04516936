"""
Staffing matcher.

Runs one demand against a roster snapshot:
1. Filter the roster by role
2. Score each remaining candidate (speed, cost, compliance)
3. Rank by weighted score and keep the requested headcount
"""
from typing import Any, Iterable, Optional

from .filters import filter_by_role
from .policy import ScoringPolicy, DEFAULT_POLICY
from .ranker import rank_scored
from .scorer import score_candidate
from .validation import validate_demand
from .weights import normalize_weights, resolve_preset
from ..models import Candidate, MatchOutput
from ..reference.snapshot import ReferenceData
from ..utils import logger, monitor


def rank_candidates(
    roster: Iterable[Candidate],
    demand: Any,
    weights: Any,
    reference: ReferenceData,
    policy: ScoringPolicy = DEFAULT_POLICY
) -> MatchOutput:
    """
    Rank a roster against a single demand.

    Input is validated before any scoring starts, so a malformed demand or
    weight set never yields a partial result.

    Args:
        roster: Candidates in roster order
        demand: Demand or mapping (destination_country, role, headcount, duration_months)
        weights: WeightInput or mapping (speed, cost, compliance)
        reference: Reference snapshot with visa, flight and carbon tables
        policy: Scoring policy (fallbacks, anchors, compliance rules)

    Returns:
        MatchOutput with at most ``demand.headcount`` ranked results

    Raises:
        InvalidInputError: If demand or weights are malformed
    """
    demand = validate_demand(demand)
    normalized = normalize_weights(weights)

    qualified = filter_by_role(roster, demand.role)
    scored = [
        (candidate, score_candidate(candidate, demand, reference, policy))
        for candidate in qualified
    ]
    results = rank_scored(scored, normalized, demand.headcount)

    return MatchOutput(
        demand=demand,
        weights=normalized,
        considered=len(qualified),
        results=results,
    )


class StaffingMatcher:
    """Staffing matching API bound to one reference snapshot"""

    def __init__(self, reference: ReferenceData, policy: Optional[ScoringPolicy] = None):
        self.reference = reference
        self.policy = policy or ScoringPolicy.from_config()

    @monitor.measure
    def match(self, demand: Any, weights: Any, roster: Optional[Iterable[Candidate]] = None) -> MatchOutput:
        """
        Match a demand against the roster

        Args:
            demand: Demand or mapping
            weights: WeightInput or mapping
            roster: Candidates to consider; defaults to the snapshot roster

        Returns:
            MatchOutput with ranked results
        """
        roster = list(self.reference.roster if roster is None else roster)
        logger.info(f"Starting match over {len(roster)} candidates")

        output = rank_candidates(roster, demand, weights, self.reference, self.policy)

        top = output.results[0].final_score if output.results else 0
        logger.info(
            f"Matched '{output.demand.role}' for {output.demand.destination_country}: "
            f"{output.considered} qualified, {len(output.results)} selected. Top score: {top}"
        )
        for result in output.results:
            for risk in result.risks:
                logger.warning(f"{result.first_name} {result.last_name}: {risk}")

        return output

    def match_preset(self, demand: Any, preset: str, roster: Optional[Iterable[Candidate]] = None) -> MatchOutput:
        """Match using a named weight preset from the config"""
        return self.match(demand, resolve_preset(preset), roster)
