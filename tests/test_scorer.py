"""Tests for the speed, cost and compliance sub-scores"""
import pytest

from staffing.engine.policy import ScoringPolicy, ComplianceRule, DEFAULT_POLICY
from staffing.engine.scorer import (
    round_half_up, speed_score, cost_score, compliance_score,
    assess_visa, assess_cost, score_candidate,
)
from staffing.exceptions import InvalidInputError
from staffing.models import Demand
from staffing.reference import ReferenceData

from tests.factories import make_candidate


def demand(destination="Brazil", months=3, role="Lead Engineer", **kwargs):
    return Demand(destination_country=destination, role=role, headcount=1, duration_months=months, **kwargs)


class TestRounding:

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (2.5, 3),
        (3.5, 4),
        (60.5, 61),
        (83.333333, 83),
        (3.9999999999999996, 4),
        (92.49999999999999, 93),
        (0.0, 0),
        (100.0, 100),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestSpeedScore:

    @pytest.mark.parametrize("days,expected", [
        (0, 100),
        (3, 95),
        (14, 78),
        (25, 60),
        (30, 52),
        (60, 4),
        (62.5, 0),
        (90, 0),
    ])
    def test_linear_decay(self, days, expected):
        assert speed_score(days) == expected

    def test_monotonically_non_increasing(self):
        scores = [speed_score(days) for days in range(0, 120)]
        assert all(a >= b for a, b in zip(scores, scores[1:]))
        assert all(0 <= s <= 100 for s in scores)

    def test_in_country_skips_visa_lookup(self, reference):
        matti = make_candidate("Matti", "Finland", "Brazil")
        visa = assess_visa(matti, "Brazil", reference)
        assert visa.visa_type == "Already in Country"
        assert visa.wait_days == 0
        assert not visa.defaulted

    def test_visa_rule_lookup(self, reference):
        rahul = make_candidate("Rahul", "India", "India")
        visa = assess_visa(rahul, "USA", reference)
        assert visa.visa_type == "B1/B2 Interview Required"
        assert visa.wait_days == 60
        assert not visa.defaulted

    def test_visa_keyed_by_nationality_not_location(self, reference):
        # Finnish national based in India travelling to Brazil uses Finland_Brazil
        expat = make_candidate("Ella", "Finland", "India")
        assert assess_visa(expat, "Brazil", reference).visa_type == "Visa Waiver (90 days)"

    def test_unmapped_visa_pair_falls_back(self, reference):
        carla = make_candidate("Carla", "Chile", "Chile")
        visa = assess_visa(carla, "Brazil", reference)
        assert visa.visa_type == "Standard Application"
        assert visa.wait_days == 30
        assert visa.defaulted
        assert speed_score(visa.wait_days) == 52


class TestCostScore:

    @pytest.mark.parametrize("total,expected", [
        (0, 100),
        (29000, 100),
        (30000, 100),
        (47500, 75),
        (65000, 50),
        (82500, 25),
        (100000, 0),
        (150000, 0),
    ])
    def test_fixed_anchors(self, total, expected):
        assert cost_score(total) == expected

    def test_anchors_ignore_duration(self, reference):
        juho = make_candidate("Juho", "Finland", "Finland", compensation=120000)
        short = assess_cost(juho, demand(months=3), reference)
        long = assess_cost(juho, demand(months=12), reference)
        assert short.total_cost == pytest.approx(30000 + 1200)
        assert long.total_cost == pytest.approx(120000 + 1200)
        assert cost_score(short.total_cost) == 98
        assert cost_score(long.total_cost) == 0

    def test_unmapped_flight_falls_back(self, reference):
        carla = make_candidate("Carla", "Chile", "Chile", compensation=120000)
        cost = assess_cost(carla, demand(months=6), reference)
        assert cost.flight_cost == 1000
        assert cost.flight_defaulted
        assert cost.total_cost == pytest.approx(61000)

    def test_zero_flight_cost_is_real_data(self, reference):
        matti = make_candidate("Matti", "Finland", "Brazil", compensation=60000)
        cost = assess_cost(matti, demand(months=1), reference)
        assert cost.flight_cost == 0
        assert not cost.flight_defaulted
        assert cost.total_cost == pytest.approx(5000)

    def test_custom_anchors(self):
        policy = ScoringPolicy(cost_best_anchor=10000, cost_worst_anchor=20000)
        assert cost_score(15000, policy) == 50
        assert cost_score(9000, policy) == 100

    def test_invalid_anchors_rejected(self):
        with pytest.raises(InvalidInputError):
            ScoringPolicy(cost_best_anchor=100000, cost_worst_anchor=30000)


class TestComplianceScore:

    @pytest.mark.parametrize("visa_type", ["Visa Waiver", "Visa Waiver (90 days)", "Tourist Visa"])
    def test_brazil_waiver_over_one_month(self, visa_type):
        score, risks = compliance_score(visa_type, demand("Brazil", months=2))
        assert score == 50
        assert len(risks) == 1
        assert visa_type in risks[0]
        assert "VITEM V" in risks[0]

    def test_one_month_is_allowed(self):
        assert compliance_score("Visa Waiver", demand("Brazil", months=1)) == (100, [])

    @pytest.mark.parametrize("visa_type", ["Consular Visa Required", "Already in Country", "Standard Application"])
    def test_other_visa_types_in_brazil(self, visa_type):
        assert compliance_score(visa_type, demand("Brazil", months=6)) == (100, [])

    @pytest.mark.parametrize("destination", ["USA", "Singapore", "brazil"])
    def test_no_rules_outside_brazil(self, destination):
        assert compliance_score("ESTA Waiver", demand(destination, months=6)) == (100, [])

    def test_lowest_cap_wins_and_all_messages_kept(self):
        policy = ScoringPolicy(compliance_rules=(
            ComplianceRule("Brazil", ("Waiver",), 1, 50, "first"),
            ComplianceRule("Brazil", ("Visa",), 0, 20, "second {duration_months}"),
        ))
        score, risks = compliance_score("Visa Waiver", demand("Brazil", months=3), policy)
        assert score == 20
        assert risks == ["first", "second 3"]

    def test_rules_can_be_disabled(self):
        policy = ScoringPolicy(compliance_rules=())
        assert compliance_score("Visa Waiver", demand("Brazil", months=6), policy) == (100, [])


class TestScoreCandidate:

    def test_finland_to_brazil_example(self, reference):
        juho = make_candidate("Juho", "Finland", "Finland", compensation=240000)
        card = score_candidate(juho, demand("Brazil", months=3), reference)

        assert card.visa_type == "Visa Waiver (90 days)"
        assert card.wait_days == 0
        assert card.speed_score == 100
        assert card.compliance_score == 50
        assert len(card.risks) == 1
        assert card.flight_cost == 1200
        assert card.total_cost == pytest.approx(240000 * 0.25 + 1200)
        assert card.cost_score == 55
        assert card.carbon_kg == 1850

    def test_india_to_usa_example(self, reference):
        rahul = make_candidate("Rahul", "India", "India", role="Senior Technician", compensation=54000)
        card = score_candidate(rahul, demand("USA", months=6, role="Senior Technician"), reference)

        assert card.visa_type == "B1/B2 Interview Required"
        assert card.wait_days == 60
        assert card.speed_score == 4
        assert card.compliance_score == 100
        assert card.total_cost == pytest.approx(27000 + 1100)
        assert card.cost_score == 100

    def test_fallbacks_are_flagged(self, reference):
        carla = make_candidate("Carla", "Chile", "Chile")
        card = score_candidate(carla, demand("Brazil"), reference)
        assert card.visa_defaulted and card.flight_defaulted
        assert card.carbon_kg == 0
        assert card.risks == []

    def test_empty_reference_never_fails(self):
        carla = make_candidate("Carla", "Chile", "Chile")
        card = score_candidate(carla, demand("Brazil"), ReferenceData())
        assert card.visa_type == "Standard Application"
        assert card.flight_cost == DEFAULT_POLICY.flight_fallback_cost

    def test_required_skills_are_reported_not_scored(self, reference):
        juho = make_candidate("Juho", "Finland", "Finland", skills=["Wartsila 31", "Safety Lead"])
        plain = score_candidate(juho, demand(), reference)
        with_skills = score_candidate(juho, demand(required_skills=["Safety Lead", "PMP"]), reference)

        assert with_skills.matched_skills == ["Safety Lead"]
        assert plain.matched_skills == []
        assert (plain.speed_score, plain.cost_score, plain.compliance_score) == (
            with_skills.speed_score, with_skills.cost_score, with_skills.compliance_score
        )

    def test_candidate_not_mutated(self, reference):
        juho = make_candidate("Juho", "Finland", "Finland")
        before = juho.model_dump()
        score_candidate(juho, demand(), reference)
        assert juho.model_dump() == before
