"""
Tests for the behavior index: penalties, rewards, conversation cap, clamping.
"""

from __future__ import annotations

import pytest

from profile_trust.config.settings import BehaviorWeights, ScoringConfig
from profile_trust.scoring.behavior import compute_behavior_index
from profile_trust.scoring.models import BehaviorMetrics


def test_defaults_give_base_score():
    assert compute_behavior_index(BehaviorMetrics()) == 85


def test_mixed_metrics():
    """85 - 2*5 - 1*3 - 0 + 3*2 + min(20/10, 5) + 1*3 = 83."""
    metrics = BehaviorMetrics(
        report_count=2,
        ghosting_incidents=1,
        inappropriate_messages=0,
        positive_interactions=3,
        conversation_length=20,
        mutual_matches=1,
    )
    assert compute_behavior_index(metrics) == 83


def test_conversation_bonus_is_capped():
    assert compute_behavior_index(BehaviorMetrics(conversation_length=50)) == 90
    assert compute_behavior_index(BehaviorMetrics(conversation_length=10_000)) == 90


def test_half_points_round_up():
    # 85 + 15/10 = 86.5
    assert compute_behavior_index(BehaviorMetrics(conversation_length=15)) == 87


def test_inappropriate_messages_weigh_most():
    assert compute_behavior_index(BehaviorMetrics(inappropriate_messages=1)) == 75
    assert compute_behavior_index(BehaviorMetrics(report_count=1)) == 80
    assert compute_behavior_index(BehaviorMetrics(ghosting_incidents=1)) == 82


@pytest.mark.parametrize(
    "metrics,expected",
    [
        (BehaviorMetrics(report_count=100), 0),
        (BehaviorMetrics(inappropriate_messages=10**6), 0),
        (BehaviorMetrics(positive_interactions=100), 100),
        (BehaviorMetrics(mutual_matches=10**6), 100),
    ],
)
def test_clamped_to_bounds(metrics, expected):
    assert compute_behavior_index(metrics) == expected


def test_custom_base_score():
    cfg = ScoringConfig(behavior=BehaviorWeights(base_score=50.0))
    assert compute_behavior_index(BehaviorMetrics(), cfg) == 50
