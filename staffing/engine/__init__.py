"""Matching engine package"""
from .matcher import StaffingMatcher, rank_candidates
from .batch import BatchMatcher, BatchItemResult
from .policy import ScoringPolicy, ComplianceRule, DEFAULT_POLICY
from .weights import normalize_weights, resolve_preset

__all__ = [
    "StaffingMatcher", "rank_candidates",
    "BatchMatcher", "BatchItemResult",
    "ScoringPolicy", "ComplianceRule", "DEFAULT_POLICY",
    "normalize_weights", "resolve_preset",
]
