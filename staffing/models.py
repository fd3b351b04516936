"""Domain models for deployment matching"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Candidate(BaseModel):
    """A person on the roster snapshot"""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = Field(None, description="Roster identifier")
    first_name: str
    last_name: str
    nationality: str = Field(..., description="Country of citizenship")
    current_location: str = Field(..., description="Country the candidate is currently in")
    role: str
    base_compensation: float = Field(..., ge=0, description="Annual base compensation in currency units")
    skills: List[str] = Field(default_factory=list, description="Skill tags, not used for scoring")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Demand(BaseModel):
    """A single staffing request"""
    model_config = ConfigDict(frozen=True)

    destination_country: str
    role: str
    headcount: int = Field(..., gt=0)
    duration_months: int = Field(..., gt=0)
    required_skills: List[str] = Field(default_factory=list, description="Reported only, never scored")


class WeightInput(BaseModel):
    """Raw priority sliders, nominally 0-100 each"""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False, extra="forbid")

    speed: float
    cost: float
    compliance: float


class NormalizedWeights(BaseModel):
    """Weights that sum to 1"""
    model_config = ConfigDict(frozen=True)

    speed: float = Field(..., ge=0.0, le=1.0)
    cost: float = Field(..., ge=0.0, le=1.0)
    compliance: float = Field(..., ge=0.0, le=1.0)


class VisaRule(BaseModel):
    """Visa processing rule for an (origin, destination) pair"""
    model_config = ConfigDict(frozen=True)

    visa_type: str
    wait_days: int = Field(..., ge=0)
    notes: Optional[str] = None


class ScoreCard(BaseModel):
    """Sub-scores and details for one candidate"""
    speed_score: int = Field(..., ge=0, le=100)
    cost_score: int = Field(..., ge=0, le=100)
    compliance_score: int = Field(..., ge=0, le=100)
    visa_type: str
    wait_days: int
    visa_defaulted: bool = False
    flight_cost: float
    flight_defaulted: bool = False
    total_cost: float
    risks: List[str] = Field(default_factory=list)
    carbon_kg: float = 0.0
    matched_skills: List[str] = Field(default_factory=list)


class RankedCandidate(BaseModel):
    """Single ranked result"""
    rank: int = Field(..., ge=1)
    candidate_id: Optional[str] = None
    first_name: str
    last_name: str
    nationality: str
    current_location: str
    visa_type: str
    wait_days: int
    estimated_cost: float
    final_score: int = Field(..., ge=0, le=100)
    risks: List[str] = Field(default_factory=list)
    scores: ScoreCard


class MatchOutput(BaseModel):
    """Complete matching output"""
    demand: Demand
    weights: NormalizedWeights
    considered: int = Field(..., description="Candidates that passed the role filter")
    results: List[RankedCandidate]
