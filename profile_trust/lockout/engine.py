"""
Failed-login lockout state machine.

States:
- unlocked: lock_until absent or already elapsed; login_attempts counts failures.
- locked: lock_until set and in the future.

Single event, a login result:
- success: counter and lock cleared unconditionally.
- failure after an elapsed lock: lock cleared, counter restarts at 1.
- any other failure: counter + 1; when it reaches the threshold and the
  account is not already locked, lock_until = now + lock duration.

Pure functions; the clock is always passed in (now_ts). Persisting the
returned state atomically is the caller's job (see lockout.manager).
"""

from __future__ import annotations

from dataclasses import replace

from profile_trust.config.settings import LockoutConfig
from profile_trust.lockout.models import LockoutState, LockoutStatus

DEFAULT_LOCKOUT_CONFIG = LockoutConfig()


def is_locked(state: LockoutState, now_ts: int) -> bool:
    """True when a lock is set and has not yet expired at now_ts."""
    return state.lock_until is not None and state.lock_until > now_ts


def lockout_status(state: LockoutState, now_ts: int) -> LockoutStatus:
    return LockoutStatus.LOCKED if is_locked(state, now_ts) else LockoutStatus.UNLOCKED


def remaining_lock_seconds(state: LockoutState, now_ts: int) -> int:
    """Seconds until the lock expires; 0 when unlocked."""
    if not is_locked(state, now_ts):
        return 0
    return int(state.lock_until - now_ts)


def _lock_elapsed(state: LockoutState, now_ts: int) -> bool:
    return state.lock_until is not None and state.lock_until <= now_ts


def apply_login_result(
    state: LockoutState,
    success: bool,
    now_ts: int,
    config: LockoutConfig | None = None,
) -> LockoutState:
    """
    Return the lockout state that follows one login attempt.

    Args:
        state: Current persisted state.
        success: Whether the credentials were accepted.
        now_ts: Current unix time (seconds).
        config: Threshold and lock duration; defaults to LockoutConfig().

    Returns:
        Next state with version = state.version + 1.
    """
    cfg = config or DEFAULT_LOCKOUT_CONFIG
    version = state.version + 1

    if success:
        return LockoutState(login_attempts=0, lock_until=None, version=version)

    if _lock_elapsed(state, now_ts):
        return LockoutState(login_attempts=1, lock_until=None, version=version)

    attempts = state.login_attempts + 1
    lock_until = state.lock_until
    if attempts >= cfg.threshold and not is_locked(state, now_ts):
        lock_until = now_ts + cfg.lock_duration_sec
    return replace(state, login_attempts=attempts, lock_until=lock_until, version=version)
