"""
Thread-safe in-memory account store.

Suitable for tests and for hosts that embed the core without a database.
Records are copied in and out so callers never share mutable state with
the store.
"""

from __future__ import annotations

import copy
import threading
import time
from dataclasses import replace

from profile_trust.core.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    DuplicateEmailError,
)
from profile_trust.database.base import AccountStore, normalize_email
from profile_trust.lockout.models import LockoutState
from profile_trust.scoring.models import Account


class InMemoryAccountStore(AccountStore):
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._lock = threading.Lock()

    def ensure_schema(self) -> None:
        return None

    def insert_account(self, account: Account) -> Account:
        with self._lock:
            if account.account_id in self._accounts:
                raise DuplicateAccountError(account.account_id)
            email = normalize_email(account.email)
            self._check_email_free(email, account.account_id)
            created_at = account.created_at if account.created_at is not None else int(time.time())
            stored = replace(copy.deepcopy(account), email=email or "", created_at=created_at)
            self._accounts[account.account_id] = stored
            return copy.deepcopy(stored)

    def get_account(self, account_id: str) -> Account:
        with self._lock:
            return copy.deepcopy(self._get(account_id))

    def save_profile(self, account: Account) -> None:
        with self._lock:
            stored = self._get(account.account_id)
            email = normalize_email(account.email)
            self._check_email_free(email, account.account_id)
            self._accounts[account.account_id] = replace(
                copy.deepcopy(account),
                email=email or "",
                created_at=stored.created_at,
                login_attempts=stored.login_attempts,
                lock_until=stored.lock_until,
                lockout_version=stored.lockout_version,
            )

    def get_lockout_state(self, account_id: str) -> LockoutState:
        with self._lock:
            return self._get(account_id).lockout_state

    def compare_and_set_lockout_state(
        self,
        account_id: str,
        expected: LockoutState,
        new: LockoutState,
    ) -> bool:
        with self._lock:
            stored = self._get(account_id)
            if stored.lockout_version != expected.version:
                return False
            self._accounts[account_id] = replace(
                stored,
                login_attempts=new.login_attempts,
                lock_until=new.lock_until,
                lockout_version=new.version,
            )
            return True

    def _get(self, account_id: str) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def _check_email_free(self, email: str | None, account_id: str) -> None:
        if not email:
            return
        for other in self._accounts.values():
            if other.account_id != account_id and normalize_email(other.email) == email:
                raise DuplicateEmailError(email)
