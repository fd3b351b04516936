"""
Deterministic candidate scoring.

Each candidate is scored on its own: no score depends on any other
candidate in the pool. Every reference lookup has a fallback, so
incomplete reference data never makes scoring fail.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import List, NamedTuple, Tuple

from .policy import ScoringPolicy, DEFAULT_POLICY
from ..models import Candidate, Demand, ScoreCard
from ..reference.lookup import lookup_with_default
from ..reference.snapshot import ReferenceData
from ..utils import logger

_NOISE = Decimal("0.000001")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    The value is quantized to 6 decimals first so float noise such as
    3.9999999999999996 or 62.49999999999999 rounds as its intended value.
    """
    quantized = Decimal(repr(float(value))).quantize(_NOISE, rounding=ROUND_HALF_UP)
    return int(quantized.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


class VisaAssessment(NamedTuple):
    visa_type: str
    wait_days: int
    defaulted: bool


class CostAssessment(NamedTuple):
    total_cost: float
    flight_cost: float
    flight_defaulted: bool


def assess_visa(
    candidate: Candidate,
    destination: str,
    reference: ReferenceData,
    policy: ScoringPolicy = DEFAULT_POLICY
) -> VisaAssessment:
    """Resolve the visa route for a candidate travelling to ``destination``"""
    if candidate.current_location == destination:
        return VisaAssessment(policy.in_country_label, 0, False)

    rule, defaulted = lookup_with_default(reference.visa_rules, (candidate.nationality, destination), None)
    if defaulted:
        return VisaAssessment(policy.visa_fallback_label, policy.visa_fallback_days, True)
    return VisaAssessment(rule.visa_type, rule.wait_days, False)


def speed_score(wait_days: float, policy: ScoringPolicy = DEFAULT_POLICY) -> int:
    """
    Linear decay: 100 points at 0 days, 0 points at 62.5 days (default 1.6/day).

    Examples:
        25 days -> 60, 60 days -> 4, 90 days -> 0
    """
    return round_half_up(clamp(100 - wait_days * policy.speed_decay_per_day))


def assess_cost(
    candidate: Candidate,
    demand: Demand,
    reference: ReferenceData,
    policy: ScoringPolicy = DEFAULT_POLICY
) -> CostAssessment:
    """Annual compensation pro-rated to the assignment, plus the flight"""
    flight_cost, defaulted = lookup_with_default(
        reference.flight_costs,
        (candidate.current_location, demand.destination_country),
        policy.flight_fallback_cost,
    )
    salary_cost = candidate.base_compensation * demand.duration_months / 12
    return CostAssessment(salary_cost + flight_cost, float(flight_cost), defaulted)


def cost_score(total_cost: float, policy: ScoringPolicy = DEFAULT_POLICY) -> int:
    """
    Map a total assignment cost onto 0-100 between fixed anchors.

    Formula:
        (worst - total) / (worst - best) * 100, clamped to [0, 100]

    With the default anchors 30,000 scores 100 and 100,000 scores 0,
    whatever the assignment duration.
    """
    span = policy.cost_worst_anchor - policy.cost_best_anchor
    raw = (policy.cost_worst_anchor - total_cost) / span * 100
    return round_half_up(clamp(raw))


def compliance_score(
    visa_type: str,
    demand: Demand,
    policy: ScoringPolicy = DEFAULT_POLICY
) -> Tuple[int, List[str]]:
    """Start at 100; every rule that fires caps the score and adds a risk note"""
    score = 100
    risks: List[str] = []
    for rule in policy.compliance_rules:
        if rule.applies(demand.destination_country, visa_type, demand.duration_months):
            score = min(score, rule.score)
            risks.append(rule.describe(demand.destination_country, visa_type, demand.duration_months))
    return score, risks


def score_candidate(
    candidate: Candidate,
    demand: Demand,
    reference: ReferenceData,
    policy: ScoringPolicy = DEFAULT_POLICY
) -> ScoreCard:
    """Compute speed, cost and compliance sub-scores for one candidate"""
    visa = assess_visa(candidate, demand.destination_country, reference, policy)
    cost = assess_cost(candidate, demand, reference, policy)
    compliance, risks = compliance_score(visa.visa_type, demand, policy)
    carbon_kg, _ = lookup_with_default(
        reference.carbon_footprint,
        (candidate.current_location, demand.destination_country),
        policy.carbon_fallback_kg,
    )

    card = ScoreCard(
        speed_score=speed_score(visa.wait_days, policy),
        cost_score=cost_score(cost.total_cost, policy),
        compliance_score=compliance,
        visa_type=visa.visa_type,
        wait_days=visa.wait_days,
        visa_defaulted=visa.defaulted,
        flight_cost=cost.flight_cost,
        flight_defaulted=cost.flight_defaulted,
        total_cost=round(cost.total_cost, 2),
        risks=risks,
        carbon_kg=float(carbon_kg),
        matched_skills=[skill for skill in demand.required_skills if skill in candidate.skills],
    )

    logger.debug(
        f"{candidate.full_name}: speed={card.speed_score} ({card.visa_type}, {card.wait_days}d), "
        f"cost={card.cost_score} ({card.total_cost:.2f}), compliance={card.compliance_score}"
    )
    return card
