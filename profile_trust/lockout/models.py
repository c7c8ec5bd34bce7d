"""
Lockout state for one account.

A small immutable value: the failed-attempt counter, the optional lock
expiry (unix seconds) and a version used as the compare-and-swap token by
stores. Lock status is never stored; it is derived from lock_until and the
caller's clock (see lockout.engine.is_locked).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class LockoutStatus(str, Enum):
    UNLOCKED = "unlocked"
    LOCKED = "locked"


@dataclass(frozen=True)
class LockoutState:
    login_attempts: int = 0
    lock_until: int | None = None
    """Unix timestamp (seconds) the lock expires; None when never locked or cleared."""
    version: int = 0
    """Bumped on every transition; stores compare it before writing."""

    def same_values(self, other: LockoutState) -> bool:
        """True when both states hold the same counter and lock, ignoring version."""
        return (
            self.login_attempts == other.login_attempts
            and self.lock_until == other.lock_until
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "login_attempts": self.login_attempts,
            "lock_until": self.lock_until,
            "version": self.version,
        }
