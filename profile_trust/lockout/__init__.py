"""
Failed-login lockout: pure state machine plus a store-backed manager.

engine.apply_login_result / engine.is_locked are pure; LockoutManager
persists transitions with compare-and-swap.
"""

from profile_trust.lockout.engine import (
    apply_login_result,
    is_locked,
    lockout_status,
    remaining_lock_seconds,
)
from profile_trust.lockout.manager import LockoutManager
from profile_trust.lockout.models import LockoutState, LockoutStatus

__all__ = [
    "LockoutManager",
    "LockoutState",
    "LockoutStatus",
    "apply_login_result",
    "is_locked",
    "lockout_status",
    "remaining_lock_seconds",
]
