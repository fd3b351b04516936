"""Deployment staffing matcher"""
from .engine import StaffingMatcher, BatchMatcher, ScoringPolicy, rank_candidates, normalize_weights
from .exceptions import StaffingError, InvalidInputError, DataUnavailableError
from .models import Candidate, Demand, WeightInput, MatchOutput
from .reference import ReferenceData, load_reference_file, SQLReferenceProvider

__all__ = [
    "StaffingMatcher", "BatchMatcher", "ScoringPolicy", "rank_candidates", "normalize_weights",
    "StaffingError", "InvalidInputError", "DataUnavailableError",
    "Candidate", "Demand", "WeightInput", "MatchOutput",
    "ReferenceData", "load_reference_file", "SQLReferenceProvider",
]
__version__ = "1.0.0"
