"""
Scoring orchestrator: the explicit replacement for a save hook.

The host calls on_account_mutated after any profile change; it re-derives
completeness and account age only. Credibility and the behavior index are
recomputed on request (recompute_scores), because they depend on rating
and behavior events whose cadence the host controls. Completeness always
runs before credibility, which consumes it.

Lockout fields pass through untouched.
"""

from __future__ import annotations

import time
from dataclasses import replace

from profile_trust.config.settings import ScoringConfig
from profile_trust.scoring.behavior import compute_behavior_index
from profile_trust.scoring.completeness import compute_completeness
from profile_trust.scoring.credibility import compute_credibility
from profile_trust.scoring.models import Account
from profile_trust.trust_logging import get_logger

logger = get_logger(__name__)


class ScoringOrchestrator:
    def __init__(self, config: ScoringConfig | None = None) -> None:
        self._config = config or ScoringConfig()

    @property
    def config(self) -> ScoringConfig:
        return self._config

    def on_account_mutated(self, account: Account, now_ts: int | None = None) -> Account:
        """Return a copy with profile_completeness and account_age_days re-derived."""
        now_ts = now_ts if now_ts is not None else int(time.time())
        completeness, age_days = compute_completeness(account, now_ts, self._config)
        return replace(account, profile_completeness=completeness, account_age_days=age_days)

    def recompute_scores(self, account: Account) -> Account:
        """Return a copy with credibility_score and behavior_index recomputed."""
        credibility = compute_credibility(account, self._config)
        behavior = compute_behavior_index(account.behavior_metrics, self._config)
        logger.info(
            "scores_recomputed",
            account_id=account.account_id,
            credibility_score=credibility,
            behavior_index=behavior,
        )
        return replace(account, credibility_score=credibility, behavior_index=behavior)

    def on_behavior_metrics_changed(self, account: Account) -> Account:
        return replace(
            account,
            behavior_index=compute_behavior_index(account.behavior_metrics, self._config),
        )

    def refresh(self, account: Account, now_ts: int | None = None) -> Account:
        """Mutation path followed by recompute_scores, for callers that want everything current."""
        return self.recompute_scores(self.on_account_mutated(account, now_ts))


_default_orchestrator = ScoringOrchestrator()


def on_account_mutated(account: Account, now_ts: int | None = None) -> Account:
    return _default_orchestrator.on_account_mutated(account, now_ts)


def recompute_scores(account: Account) -> Account:
    return _default_orchestrator.recompute_scores(account)
