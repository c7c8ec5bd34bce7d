"""
LockoutManager: atomic read-modify-write of an account's lockout pair.

Two layers keep concurrent failed logins from undercounting:
- a per-account threading.Lock serializes callers inside one process;
- the store write is an optimistic compare-and-swap on the state version,
  retried up to LockoutConfig.max_cas_retries times, so writers in other
  processes cannot be silently overwritten.

Running out of retries raises LockoutConflictError (retryable).
"""

from __future__ import annotations

import threading
import time
from typing import TYPE_CHECKING

from profile_trust.config.settings import LockoutConfig, get_settings
from profile_trust.core.exceptions import LockoutConflictError
from profile_trust.lockout.engine import apply_login_result, is_locked
from profile_trust.lockout.models import LockoutState
from profile_trust.trust_logging import get_logger

if TYPE_CHECKING:
    from profile_trust.database.base import AccountStore

logger = get_logger(__name__)


class _AccountLocks:
    """Lazily created per-account locks."""

    def __init__(self) -> None:
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def get(self, account_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(account_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[account_id] = lock
            return lock


class LockoutManager:
    """Apply login results to stored lockout state without lost updates."""

    def __init__(self, store: AccountStore, config: LockoutConfig | None = None) -> None:
        """Without an explicit config, thresholds come from env (TRUST_LOCKOUT_*)."""
        self._store = store
        self._config = config or get_settings().lockout
        self._locks = _AccountLocks()

    @property
    def config(self) -> LockoutConfig:
        return self._config

    def current_state(self, account_id: str) -> LockoutState:
        return self._store.get_lockout_state(account_id)

    def is_locked(self, account_id: str, now_ts: int | None = None) -> bool:
        now_ts = now_ts if now_ts is not None else int(time.time())
        return is_locked(self._store.get_lockout_state(account_id), now_ts)

    def record_login_result(
        self,
        account_id: str,
        success: bool,
        now_ts: int | None = None,
    ) -> LockoutState:
        """
        Read the stored state, apply the login result and write it back atomically.

        Returns the state that is now persisted. Raises AccountNotFoundError
        from the store, or LockoutConflictError when every CAS round lost.
        """
        now_ts = now_ts if now_ts is not None else int(time.time())
        with self._locks.get(account_id):
            for attempt in range(1, self._config.max_cas_retries + 1):
                current = self._store.get_lockout_state(account_id)
                nxt = apply_login_result(current, success, now_ts, self._config)
                if nxt.same_values(current):
                    return current
                if self._store.compare_and_set_lockout_state(account_id, current, nxt):
                    self._log_transition(account_id, current, nxt, success, now_ts)
                    return nxt
                logger.warning(
                    "lockout_cas_conflict",
                    account_id=account_id,
                    attempt=attempt,
                    expected_version=current.version,
                )
        raise LockoutConflictError(account_id, self._config.max_cas_retries)

    def record_failure(self, account_id: str, now_ts: int | None = None) -> LockoutState:
        return self.record_login_result(account_id, False, now_ts)

    def reset(self, account_id: str, now_ts: int | None = None) -> LockoutState:
        return self.record_login_result(account_id, True, now_ts)

    def _log_transition(
        self,
        account_id: str,
        before: LockoutState,
        after: LockoutState,
        success: bool,
        now_ts: int,
    ) -> None:
        logger.debug(
            "lockout_transition",
            account_id=account_id,
            success=success,
            login_attempts=after.login_attempts,
            lock_until=after.lock_until,
            version=after.version,
        )
        if is_locked(after, now_ts) and not is_locked(before, now_ts):
            logger.info(
                "account_locked",
                account_id=account_id,
                login_attempts=after.login_attempts,
                lock_until=after.lock_until,
            )
