"""
Tests for the pure lockout state machine.
"""

from __future__ import annotations

from profile_trust.config.settings import LockoutConfig
from profile_trust.lockout.engine import (
    apply_login_result,
    is_locked,
    lockout_status,
    remaining_lock_seconds,
)
from profile_trust.lockout.models import LockoutState, LockoutStatus

from conftest import NOW_TS

TWO_HOURS = 2 * 60 * 60


def _fail(state: LockoutState, times: int, now_ts: int = NOW_TS) -> LockoutState:
    for _ in range(times):
        state = apply_login_result(state, False, now_ts)
    return state


def test_four_failures_stay_unlocked():
    state = _fail(LockoutState(), 4)
    assert state.login_attempts == 4
    assert state.lock_until is None
    assert not is_locked(state, NOW_TS)
    assert lockout_status(state, NOW_TS) is LockoutStatus.UNLOCKED


def test_fifth_failure_locks_for_two_hours():
    state = _fail(LockoutState(), 5)
    assert state.login_attempts == 5
    assert state.lock_until == NOW_TS + TWO_HOURS
    assert is_locked(state, NOW_TS)
    assert lockout_status(state, NOW_TS) is LockoutStatus.LOCKED
    assert remaining_lock_seconds(state, NOW_TS) == TWO_HOURS


def test_failures_while_locked_do_not_extend_lock():
    locked = _fail(LockoutState(), 5)
    later = NOW_TS + 600
    state = apply_login_result(locked, False, later)
    assert state.login_attempts == 6
    assert state.lock_until == locked.lock_until


def test_success_resets_everything():
    for state in (_fail(LockoutState(), 3), _fail(LockoutState(), 7)):
        reset = apply_login_result(state, True, NOW_TS)
        assert reset.login_attempts == 0
        assert reset.lock_until is None
        assert not is_locked(reset, NOW_TS)


def test_failure_after_lock_expiry_restarts_at_one():
    locked = _fail(LockoutState(), 5)
    after = locked.lock_until + 1
    assert not is_locked(locked, after)

    state = apply_login_result(locked, False, after)
    assert state.login_attempts == 1
    assert state.lock_until is None


def test_lock_expiring_exactly_now_counts_as_elapsed():
    locked = _fail(LockoutState(), 5)
    assert not is_locked(locked, locked.lock_until)
    state = apply_login_result(locked, False, locked.lock_until)
    assert state.login_attempts == 1
    assert state.lock_until is None


def test_is_locked_uses_given_clock_only():
    state = LockoutState(login_attempts=5, lock_until=NOW_TS + 10)
    assert is_locked(state, NOW_TS)
    assert not is_locked(state, NOW_TS + 10)
    assert not is_locked(LockoutState(), NOW_TS)
    assert remaining_lock_seconds(state, NOW_TS + 20) == 0


def test_every_transition_bumps_version():
    state = LockoutState()
    state = apply_login_result(state, False, NOW_TS)
    state = apply_login_result(state, True, NOW_TS)
    assert state.version == 2


def test_configurable_threshold_and_duration():
    cfg = LockoutConfig(threshold=3, lock_duration_sec=60)
    state = LockoutState()
    for _ in range(3):
        state = apply_login_result(state, False, NOW_TS, cfg)
    assert state.lock_until == NOW_TS + 60
    assert is_locked(state, NOW_TS + 59)
    assert not is_locked(state, NOW_TS + 60)


def test_input_state_is_not_mutated():
    before = LockoutState(login_attempts=2)
    apply_login_result(before, False, NOW_TS)
    assert before == LockoutState(login_attempts=2)
