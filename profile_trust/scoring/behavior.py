"""
Behavior index: penalties and rewards over interaction-quality counters.

Starts at 85; subtracts 5 per report, 3 per ghosting incident, 10 per
inappropriate message; adds 2 per positive interaction, up to 5 for
conversation length (length / 10), 3 per mutual match. Rounded half-up
and clamped to [0, 100].
"""

from __future__ import annotations

from profile_trust.config.settings import ScoringConfig
from profile_trust.scoring.common import clamp, round_half_up
from profile_trust.scoring.models import BehaviorMetrics
from profile_trust.trust_logging import get_logger

logger = get_logger(__name__)

DEFAULT_SCORING_CONFIG = ScoringConfig()


def compute_behavior_index(metrics: BehaviorMetrics, config: ScoringConfig | None = None) -> int:
    cfg = config or DEFAULT_SCORING_CONFIG
    w = cfg.behavior

    score = w.base_score
    # Negative behaviors
    score -= metrics.report_count * w.report_penalty
    score -= metrics.ghosting_incidents * w.ghosting_penalty
    score -= metrics.inappropriate_messages * w.inappropriate_penalty
    # Positive behaviors
    score += metrics.positive_interactions * w.positive_reward
    score += min(metrics.conversation_length / w.conversation_divisor, w.conversation_cap)
    score += metrics.mutual_matches * w.mutual_match_reward

    index = clamp(round_half_up(score), cfg.score_min, cfg.score_max)
    logger.debug("behavior_index_computed", raw=score, behavior_index=index)
    return index
