"""
Scoring and lockout settings.

Every default the scorers and the lockout state machine rely on lives here
(completeness points, credibility weights, behavior penalties/rewards,
lockout threshold and duration) so they can be tuned or tested without
touching the algorithms. get_settings() builds a Settings object from the
environment (see config.env).
"""

from __future__ import annotations

from dataclasses import dataclass, field

SECONDS_PER_DAY = 86400

# Scores a new account starts with, before any recompute.
DEFAULT_CREDIBILITY_SCORE = 70
DEFAULT_BEHAVIOR_INDEX = 85


@dataclass(frozen=True)
class CompletenessWeights:
    """Points awarded per profile section; the percentage is points / total."""

    name: int = 1
    age: int = 1
    job: int = 1
    school: int = 1
    images: int = 2
    prompts: int = 2
    questionnaire: int = 2
    min_images: int = 3
    min_prompts: int = 3
    # Questionnaire counts only when it has MORE than this many populated fields.
    min_questionnaire_fields: int = 5

    @property
    def total(self) -> int:
        return (
            self.name
            + self.age
            + self.job
            + self.school
            + self.images
            + self.prompts
            + self.questionnaire
        )


@dataclass(frozen=True)
class CredibilityWeights:
    average_rating: float = 0.4
    response_rate: float = 0.3
    profile_completeness: float = 0.2
    account_age: float = 0.1
    # averageRating is on a 0-5 scale; x20 maps it to a percentage.
    rating_scale: float = 20.0
    # Account age saturates at one year.
    full_age_days: int = 365


@dataclass(frozen=True)
class BehaviorWeights:
    base_score: float = 85.0
    report_penalty: float = 5.0
    ghosting_penalty: float = 3.0
    inappropriate_penalty: float = 10.0
    positive_reward: float = 2.0
    mutual_match_reward: float = 3.0
    conversation_divisor: float = 10.0
    conversation_cap: float = 5.0


@dataclass(frozen=True)
class ScoringConfig:
    completeness: CompletenessWeights = field(default_factory=CompletenessWeights)
    credibility: CredibilityWeights = field(default_factory=CredibilityWeights)
    behavior: BehaviorWeights = field(default_factory=BehaviorWeights)
    score_min: int = 0
    score_max: int = 100


@dataclass(frozen=True)
class LockoutConfig:
    """
    Failed-login lockout thresholds.

    threshold: failures (counting the current one) that trigger a lock.
    lock_duration_sec: how long a lock lasts once set.
    max_cas_retries: compare-and-swap rounds before LockoutConflictError.
    """

    threshold: int = 5
    lock_duration_sec: int = 2 * 60 * 60
    max_cas_retries: int = 5


@dataclass(frozen=True)
class Settings:
    scoring: ScoringConfig
    lockout: LockoutConfig
    database_url: str


def get_settings() -> Settings:
    """
    Return the current application settings, read from env / .env.

    Raises:
        ConfigError: when a numeric variable is malformed or out of range.
    """
    from profile_trust.config import env

    return Settings(
        scoring=ScoringConfig(),
        lockout=LockoutConfig(
            threshold=env.get_lockout_threshold(),
            lock_duration_sec=env.get_lock_duration_sec(),
            max_cas_retries=env.get_lockout_max_retries(),
        ),
        database_url=env.get_database_url(),
    )
