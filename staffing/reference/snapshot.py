"""Immutable reference data snapshot"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from ..models import Candidate, VisaRule

Route = Tuple[str, str]


def parse_route(key: str) -> Route:
    """Split an ``Origin_Destination`` key into a route tuple"""
    parts = key.split("_")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"Invalid route key {key!r}, expected 'Origin_Destination'")
    return parts[0], parts[1]


@dataclass(frozen=True)
class ReferenceData:
    """Roster and lookup tables for one matching run.

    Tables are copied into read-only mappings on construction, so a
    snapshot never changes after it has been handed to the engine.
    Refreshing data means building a new snapshot.
    """
    roster: Tuple[Candidate, ...] = ()
    visa_rules: Mapping[Route, VisaRule] = field(default_factory=dict)
    flight_costs: Mapping[Route, float] = field(default_factory=dict)
    carbon_footprint: Mapping[Route, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "roster", tuple(self.roster))
        object.__setattr__(self, "visa_rules", MappingProxyType(dict(self.visa_rules)))
        object.__setattr__(self, "flight_costs", MappingProxyType(dict(self.flight_costs)))
        object.__setattr__(self, "carbon_footprint", MappingProxyType(dict(self.carbon_footprint)))

    def summary(self) -> dict:
        return {
            "candidates": len(self.roster),
            "visa_rules": len(self.visa_rules),
            "flight_costs": len(self.flight_costs),
            "carbon_footprint": len(self.carbon_footprint),
        }
