"""
Login flow on top of the lockout manager.

Locked accounts are rejected before the password is checked, and the
attempt still counts as a failure (the counter keeps growing while the
lock holds, the expiry does not move). Otherwise the password is verified
through the host's CredentialHasher and the result recorded.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, replace
from typing import Any

from profile_trust.config.settings import LockoutConfig
from profile_trust.credentials import CredentialHasher
from profile_trust.database.base import AccountStore
from profile_trust.lockout.engine import is_locked
from profile_trust.lockout.manager import LockoutManager
from profile_trust.scoring.models import Account
from profile_trust.trust_logging import get_logger

logger = get_logger(__name__)

REASON_OK = "OK"
REASON_INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
REASON_ACCOUNT_LOCKED = "ACCOUNT_LOCKED"


@dataclass
class LoginResult:
    account_id: str
    success: bool
    locked: bool
    login_attempts: int
    lock_until: int | None
    reason_code: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "success": self.success,
            "locked": self.locked,
            "login_attempts": self.login_attempts,
            "lock_until": self.lock_until,
            "reason_code": self.reason_code,
        }


class LoginService:
    def __init__(
        self,
        store: AccountStore,
        hasher: CredentialHasher,
        manager: LockoutManager | None = None,
        config: LockoutConfig | None = None,
    ) -> None:
        self._store = store
        self._hasher = hasher
        self._manager = manager or LockoutManager(store, config)

    @property
    def manager(self) -> LockoutManager:
        return self._manager

    def set_password(self, account: Account, plaintext: str) -> Account:
        """Return a copy of account carrying the hash of plaintext (caller persists it)."""
        if not plaintext:
            raise ValueError("password must be non-empty")
        return replace(account, password_hash=self._hasher.hash(plaintext))

    def login(self, account_id: str, plaintext: str, now_ts: int | None = None) -> LoginResult:
        """
        Check credentials for account_id and update its lockout state.

        Raises AccountNotFoundError for unknown accounts and
        LockoutConflictError when the lockout write keeps losing races.
        """
        now_ts = now_ts if now_ts is not None else int(time.time())
        account = self._store.get_account(account_id)

        if is_locked(account.lockout_state, now_ts):
            state = self._manager.record_login_result(account_id, False, now_ts)
            logger.info(
                "login_rejected_locked",
                account_id=account_id,
                login_attempts=state.login_attempts,
                lock_until=state.lock_until,
            )
            return LoginResult(
                account_id=account_id,
                success=False,
                locked=True,
                login_attempts=state.login_attempts,
                lock_until=state.lock_until,
                reason_code=REASON_ACCOUNT_LOCKED,
            )

        ok = bool(account.password_hash) and self._hasher.verify(plaintext, account.password_hash)
        state = self._manager.record_login_result(account_id, ok, now_ts)
        locked = is_locked(state, now_ts)
        if ok:
            logger.info("login_succeeded", account_id=account_id)
        else:
            logger.info(
                "login_failed",
                account_id=account_id,
                login_attempts=state.login_attempts,
                locked=locked,
            )
        return LoginResult(
            account_id=account_id,
            success=ok,
            locked=locked,
            login_attempts=state.login_attempts,
            lock_until=state.lock_until,
            reason_code=REASON_OK if ok else (REASON_ACCOUNT_LOCKED if locked else REASON_INVALID_CREDENTIALS),
        )
