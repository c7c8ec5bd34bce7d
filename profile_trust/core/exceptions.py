"""
Application-level exceptions.

Every error carries a stable ``code`` so host applications can map it to
their own responses. ``retryable`` marks conflicts the caller may simply
try again (e.g. a lost compare-and-swap on the lockout columns).
"""

from __future__ import annotations


class TrustCoreError(Exception):
    """Base class for profile trust errors."""

    code = "TRUST_CORE_ERROR"
    retryable = False

    def __init__(self, message: str, **details: object) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, object]:
        return {
            "code": self.code,
            "message": self.message,
            "retryable": self.retryable,
            "details": dict(self.details),
        }


class AccountNotFoundError(TrustCoreError):
    code = "ACCOUNT_NOT_FOUND"

    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account not found: {account_id}", account_id=account_id)
        self.account_id = account_id


class DuplicateEmailError(TrustCoreError):
    """Raised by stores when the unique-email constraint is violated."""

    code = "DUPLICATE_EMAIL"

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already registered: {email}", email=email)
        self.email = email


class DuplicateAccountError(TrustCoreError):
    """Raised by stores when an account_id is inserted twice."""

    code = "DUPLICATE_ACCOUNT"

    def __init__(self, account_id: str) -> None:
        super().__init__(f"Account already exists: {account_id}", account_id=account_id)
        self.account_id = account_id


class LockoutConflictError(TrustCoreError):
    """
    Concurrent lockout updates kept colliding and the retry budget ran out.

    The stored (login_attempts, lock_until) pair was NOT overwritten; the
    caller may retry the whole login result.
    """

    code = "LOCKOUT_CONFLICT"
    retryable = True

    def __init__(self, account_id: str, attempts: int) -> None:
        super().__init__(
            f"Lockout update for {account_id} lost {attempts} compare-and-swap rounds",
            account_id=account_id,
            attempts=attempts,
        )
        self.account_id = account_id
        self.attempts = attempts


class ConfigError(TrustCoreError):
    code = "CONFIG_INVALID"
