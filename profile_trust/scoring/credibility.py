"""
Credibility score: weighted blend of rating, responsiveness, completeness and tenure.

raw = rating*20*0.4 + response_rate*0.3 + completeness*0.2 + normalized_age*0.1
with normalized_age = min(age_days / 365 * 100, 100). Rounded half-up and
clamped to [0, 100] whatever the inputs.

Callers decide when to run it (e.g. after rating events); completeness and
account age on the account must already be current.
"""

from __future__ import annotations

from profile_trust.config.settings import ScoringConfig
from profile_trust.scoring.common import clamp, round_half_up
from profile_trust.scoring.models import Account
from profile_trust.trust_logging import get_logger

logger = get_logger(__name__)

DEFAULT_SCORING_CONFIG = ScoringConfig()


def normalize_account_age(account_age_days: int, full_age_days: int = 365) -> float:
    """Map tenure to [0, 100]; saturates at full_age_days."""
    return min(account_age_days / full_age_days * 100, 100.0)


def compute_credibility(account: Account, config: ScoringConfig | None = None) -> int:
    cfg = config or DEFAULT_SCORING_CONFIG
    w = cfg.credibility
    metrics = account.behavior_metrics
    normalized_age = normalize_account_age(account.account_age_days, w.full_age_days)

    raw = (
        metrics.average_rating * w.rating_scale * w.average_rating
        + metrics.response_rate * w.response_rate
        + account.profile_completeness * w.profile_completeness
        + normalized_age * w.account_age
    )
    score = clamp(round_half_up(raw), cfg.score_min, cfg.score_max)

    logger.debug(
        "credibility_computed",
        account_id=account.account_id,
        raw=round(raw, 4),
        credibility_score=score,
    )
    return score
