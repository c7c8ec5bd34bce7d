"""
Profile completeness: share of expected profile sections that are filled in.

Points (default total 10): name, age, job, school 1 each; at least 3
images 2; at least 3 prompts 2; more than 5 populated questionnaire
fields 2. Missing sections contribute zero, never an error.

Also derives account age in whole days from created_at, falling back to
now when the account has not been persisted yet.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from profile_trust.config.settings import SECONDS_PER_DAY, ScoringConfig
from profile_trust.scoring.common import clamp, round_half_up
from profile_trust.scoring.models import Account
from profile_trust.trust_logging import get_logger

logger = get_logger(__name__)

DEFAULT_SCORING_CONFIG = ScoringConfig()


def is_populated(value: Any) -> bool:
    """None, empty strings and empty collections count as unanswered."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) > 0
    return True


def count_populated_fields(questionnaire: Mapping[str, Any] | None) -> int:
    if not questionnaire:
        return 0
    return sum(1 for v in questionnaire.values() if is_populated(v))


def completeness_points(account: Account, config: ScoringConfig | None = None) -> int:
    w = (config or DEFAULT_SCORING_CONFIG).completeness
    points = 0
    if account.name:
        points += w.name
    if account.age:
        points += w.age
    if account.job:
        points += w.job
    if account.school:
        points += w.school
    if account.images and len(account.images) >= w.min_images:
        points += w.images
    if account.prompts and len(account.prompts) >= w.min_prompts:
        points += w.prompts
    if count_populated_fields(account.questionnaire) > w.min_questionnaire_fields:
        points += w.questionnaire
    return points


def compute_account_age_days(created_at: int | None, now_ts: int) -> int:
    """Whole days since created_at; 0 for unsaved accounts or clock skew."""
    created = created_at if created_at is not None else now_ts
    return max(0, (now_ts - created) // SECONDS_PER_DAY)


def compute_completeness(
    account: Account,
    now_ts: int,
    config: ScoringConfig | None = None,
) -> tuple[int, int]:
    """
    Compute (profile_completeness, account_age_days) for an account snapshot.

    Args:
        account: Snapshot to score; not modified.
        now_ts: Current unix time (seconds), used for account age.
        config: Point weights; defaults to ScoringConfig().

    Returns:
        Completeness percentage in [0, 100] and non-negative age in days.
    """
    cfg = config or DEFAULT_SCORING_CONFIG
    total = cfg.completeness.total
    points = completeness_points(account, cfg)
    completeness = round_half_up(points / total * 100) if total > 0 else 0
    completeness = clamp(completeness, cfg.score_min, cfg.score_max)
    age_days = compute_account_age_days(account.created_at, now_ts)

    logger.debug(
        "completeness_computed",
        account_id=account.account_id,
        points=points,
        total=total,
        profile_completeness=completeness,
        account_age_days=age_days,
    )
    return completeness, age_days
