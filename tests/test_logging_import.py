"""
Tests for trust_logging: import without circular import, JSON shape, secret masking.
"""

from __future__ import annotations

import io
import json

import pytest

from profile_trust.trust_logging import configure_logging, get_logger, mask_secrets


@pytest.fixture
def log_buffer():
    buf = io.StringIO()
    configure_logging(level="DEBUG", fmt="json", stream=buf)
    yield buf
    configure_logging()


def test_logging_import():
    logger = get_logger("test")
    for level in ("info", "debug", "warning", "error"):
        assert hasattr(logger, level)
    # Smoke test: call info (should not raise)
    logger.info("test_message", key="value")


def test_json_record_shape(log_buffer):
    get_logger("profile_trust.test").info("account_locked", account_id="acc-1", lock_until=123)
    record = json.loads(log_buffer.getvalue().strip().splitlines()[-1])
    assert record["event_type"] == "account_locked"
    assert record["account_id"] == "acc-1"
    assert record["logger"] == "profile_trust.test"
    assert record["level"] == "info"
    assert "timestamp" in record
    assert "event" not in record


def test_secrets_are_masked(log_buffer):
    get_logger("t").warning("login_failed", account_id="acc-1", password="hunter2", password_hash="h")
    out = log_buffer.getvalue()
    assert "hunter2" not in out
    record = json.loads(out.strip().splitlines()[-1])
    assert record["password"] == "***"
    assert record["password_hash"] == "***"


def test_level_filtering(log_buffer):
    configure_logging(level="WARNING", fmt="json", stream=log_buffer)
    get_logger("t").info("dropped")
    get_logger("t").warning("kept")
    out = log_buffer.getvalue()
    assert "dropped" not in out
    assert "kept" in out


def test_mask_secrets_leaves_other_keys():
    event = {"event": "x", "account_id": "a", "token": "t"}
    assert mask_secrets(None, "info", event) == {"event": "x", "account_id": "a", "token": "***"}


def test_package_import_exposes_public_api():
    import profile_trust

    for name in (
        "compute_completeness",
        "compute_credibility",
        "compute_behavior_index",
        "apply_login_result",
        "is_locked",
        "ScoringOrchestrator",
        "LockoutManager",
        "LoginService",
    ):
        assert hasattr(profile_trust, name), name
