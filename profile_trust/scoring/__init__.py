"""
Scoring package: profile completeness, credibility score, behavior index.

Pure functions over an Account / BehaviorMetrics snapshot, composed by
ScoringOrchestrator.
"""

from profile_trust.scoring.behavior import compute_behavior_index
from profile_trust.scoring.completeness import (
    compute_account_age_days,
    compute_completeness,
    count_populated_fields,
)
from profile_trust.scoring.credibility import compute_credibility, normalize_account_age
from profile_trust.scoring.models import Account, BehaviorMetrics, Prompt
from profile_trust.scoring.orchestrator import (
    ScoringOrchestrator,
    on_account_mutated,
    recompute_scores,
)

__all__ = [
    "Account",
    "BehaviorMetrics",
    "Prompt",
    "ScoringOrchestrator",
    "compute_account_age_days",
    "compute_behavior_index",
    "compute_completeness",
    "compute_credibility",
    "count_populated_fields",
    "normalize_account_age",
    "on_account_mutated",
    "recompute_scores",
]
