"""
Configuration for the profile trust core.

Scoring weights, lockout thresholds and the account store URL. Defaults
live in dataclasses; env.py overlays values from environment variables.
"""

from profile_trust.config.settings import (
    DEFAULT_BEHAVIOR_INDEX,
    DEFAULT_CREDIBILITY_SCORE,
    SECONDS_PER_DAY,
    BehaviorWeights,
    CompletenessWeights,
    CredibilityWeights,
    LockoutConfig,
    ScoringConfig,
    Settings,
    get_settings,
)

__all__ = [
    "DEFAULT_BEHAVIOR_INDEX",
    "DEFAULT_CREDIBILITY_SCORE",
    "SECONDS_PER_DAY",
    "BehaviorWeights",
    "CompletenessWeights",
    "CredibilityWeights",
    "LockoutConfig",
    "ScoringConfig",
    "Settings",
    "get_settings",
]
