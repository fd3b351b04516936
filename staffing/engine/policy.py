"""Scoring policy: fallbacks, anchors and compliance rules"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from ..exceptions import InvalidInputError


@dataclass(frozen=True)
class ComplianceRule:
    """Caps the compliance score when a visa label is unsuitable for the stay.

    The rule fires when the destination matches exactly, the assignment is
    longer than ``min_duration_months`` and the visa label contains any of
    ``visa_keywords``.
    """
    destination: str
    visa_keywords: Tuple[str, ...]
    min_duration_months: int
    score: int
    message: str

    def applies(self, destination: str, visa_type: str, duration_months: int) -> bool:
        return (
            destination == self.destination
            and duration_months > self.min_duration_months
            and any(keyword in visa_type for keyword in self.visa_keywords)
        )

    def describe(self, destination: str, visa_type: str, duration_months: int) -> str:
        return self.message.format(
            destination=destination,
            visa_type=visa_type,
            duration_months=duration_months,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ComplianceRule":
        try:
            return cls(
                destination=data["destination"],
                visa_keywords=tuple(data["visa_keywords"]),
                min_duration_months=int(data.get("min_duration_months", 0)),
                score=int(data["score"]),
                message=data["message"],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidInputError(f"Invalid compliance rule {data!r}: {e}") from e


BRAZIL_WORK_VISA_RULE = ComplianceRule(
    destination="Brazil",
    visa_keywords=("Tourist", "Waiver"),
    min_duration_months=1,
    score=50,
    message=(
        "Risk: {visa_type} does not cover a {duration_months}-month work "
        "assignment in {destination}; VITEM V work visa required"
    ),
)


@dataclass(frozen=True)
class ScoringPolicy:
    visa_fallback_days: int = 30
    visa_fallback_label: str = "Standard Application"
    in_country_label: str = "Already in Country"
    speed_decay_per_day: float = 1.6
    flight_fallback_cost: float = 1000.0
    carbon_fallback_kg: float = 0.0
    # Absolute anchors, independent of duration and of the candidate pool
    cost_best_anchor: float = 30000.0
    cost_worst_anchor: float = 100000.0
    compliance_rules: Tuple[ComplianceRule, ...] = field(default=(BRAZIL_WORK_VISA_RULE,))

    def __post_init__(self):
        if self.cost_worst_anchor <= self.cost_best_anchor:
            raise InvalidInputError(
                f"cost_worst_anchor ({self.cost_worst_anchor}) must exceed "
                f"cost_best_anchor ({self.cost_best_anchor})"
            )
        if self.speed_decay_per_day < 0:
            raise InvalidInputError("speed_decay_per_day must be non-negative")
        if self.visa_fallback_days < 0:
            raise InvalidInputError("visa_fallback_days must be non-negative")
        if self.flight_fallback_cost < 0:
            raise InvalidInputError("flight_fallback_cost must be non-negative")
        for rule in self.compliance_rules:
            if not 0 <= rule.score <= 100:
                raise InvalidInputError(f"Compliance rule score out of range: {rule.score}")

    @classmethod
    def from_config(cls, cfg: Optional[Any] = None) -> "ScoringPolicy":
        """Build a policy from the ``scoring`` section of the app config"""
        if cfg is None:
            from ..utils import config as cfg
        section = dict(cfg.scoring or {})
        rules = section.pop("compliance_rules", None)
        known = {name for name in cls.__dataclass_fields__ if name != "compliance_rules"}
        unknown = set(section) - known
        if unknown:
            raise InvalidInputError(f"Unknown scoring settings: {sorted(unknown)}")
        if rules is not None:
            section["compliance_rules"] = tuple(ComplianceRule.from_dict(rule) for rule in rules)
        return cls(**section)


DEFAULT_POLICY = ScoringPolicy()
