"""
Profile trust core: credibility score, behavior index, profile completeness
and failed-login lockout for user profile records.

Scorers are pure functions over an Account snapshot; the lockout state
machine is pure too, with LockoutManager persisting transitions through an
AccountStore using compare-and-swap.
"""

from profile_trust.auth import LoginResult, LoginService
from profile_trust.config import LockoutConfig, ScoringConfig, get_settings
from profile_trust.credentials import CredentialHasher
from profile_trust.lockout import (
    LockoutManager,
    LockoutState,
    LockoutStatus,
    apply_login_result,
    is_locked,
)
from profile_trust.scoring import (
    Account,
    BehaviorMetrics,
    Prompt,
    ScoringOrchestrator,
    compute_behavior_index,
    compute_completeness,
    compute_credibility,
)

__all__ = [
    "Account",
    "BehaviorMetrics",
    "CredentialHasher",
    "LockoutConfig",
    "LockoutManager",
    "LockoutState",
    "LockoutStatus",
    "LoginResult",
    "LoginService",
    "Prompt",
    "ScoringConfig",
    "ScoringOrchestrator",
    "apply_login_result",
    "compute_behavior_index",
    "compute_completeness",
    "compute_credibility",
    "get_settings",
    "is_locked",
]
