# Core building blocks shared by scoring, lockout and persistence.

from profile_trust.core.exceptions import (
    AccountNotFoundError,
    ConfigError,
    DuplicateAccountError,
    DuplicateEmailError,
    LockoutConflictError,
    TrustCoreError,
)

__all__ = [
    "AccountNotFoundError",
    "ConfigError",
    "DuplicateAccountError",
    "DuplicateEmailError",
    "LockoutConflictError",
    "TrustCoreError",
]
