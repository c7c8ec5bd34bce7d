"""
Account store interface.

Stores load and save Account records, enforce email uniqueness, and offer a
compare-and-swap on the lockout columns. Profile saves never write the
lockout columns; only compare_and_set_lockout_state does.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from profile_trust.lockout.models import LockoutState
from profile_trust.scoring.models import Account


def normalize_email(email: str | None) -> str | None:
    """Lower-cased, stripped email; None when empty (empty emails are never unique-checked)."""
    email = (email or "").strip().lower()
    return email or None


class AccountStore(ABC):
    """Abstract persistence for scored accounts; implement per backend."""

    @abstractmethod
    def ensure_schema(self) -> None:
        """Create tables and indexes if they do not exist."""
        ...

    @abstractmethod
    def insert_account(self, account: Account) -> Account:
        """
        Insert a new account. Sets created_at when unset.
        Raises DuplicateAccountError if account_id is taken and
        DuplicateEmailError if the email is already registered.
        """
        ...

    @abstractmethod
    def get_account(self, account_id: str) -> Account:
        """Return the stored account or raise AccountNotFoundError."""
        ...

    @abstractmethod
    def save_profile(self, account: Account) -> None:
        """
        Persist profile fields and derived scores of an existing account.
        created_at and the lockout columns are left as stored.
        """
        ...

    @abstractmethod
    def get_lockout_state(self, account_id: str) -> LockoutState:
        """Return the stored lockout state or raise AccountNotFoundError."""
        ...

    @abstractmethod
    def compare_and_set_lockout_state(
        self,
        account_id: str,
        expected: LockoutState,
        new: LockoutState,
    ) -> bool:
        """
        Write new only if the stored version still equals expected.version.
        Returns False (nothing written) when another writer got there first.
        """
        ...
