"""
Environment variable loading and validation for the profile trust core.

- TRUST_LOCKOUT_THRESHOLD: failed logins before lock (default: 5)
- TRUST_LOCK_DURATION_SEC: lock length in seconds (default: 7200)
- TRUST_LOCKOUT_MAX_RETRIES: CAS rounds before a conflict is raised (default: 5)
- TRUST_DB_URL / DATABASE_URL: SQLAlchemy URL; else sqlite at TRUST_DB_PATH
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from profile_trust.core.exceptions import ConfigError

# Project root: config is profile_trust/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_LOCKOUT_THRESHOLD = 5
DEFAULT_LOCK_DURATION_SEC = 2 * 60 * 60
DEFAULT_LOCKOUT_MAX_RETRIES = 5
DEFAULT_SQLITE_PATH = "profile_trust.db"


def load_trust_env() -> None:
    """Load .env from project root. Safe to call multiple times; never overrides real env."""
    load_dotenv(_ENV_PATH, override=False)


def _positive_int(name: str, default: int) -> int:
    load_trust_env()
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {raw!r}", variable=name) from e
    if value < 1:
        raise ConfigError(f"{name} must be >= 1, got {value}", variable=name)
    return value


def get_lockout_threshold() -> int:
    return _positive_int("TRUST_LOCKOUT_THRESHOLD", DEFAULT_LOCKOUT_THRESHOLD)


def get_lock_duration_sec() -> int:
    return _positive_int("TRUST_LOCK_DURATION_SEC", DEFAULT_LOCK_DURATION_SEC)


def get_lockout_max_retries() -> int:
    return _positive_int("TRUST_LOCKOUT_MAX_RETRIES", DEFAULT_LOCKOUT_MAX_RETRIES)


def get_database_url() -> str:
    """
    Resolve the account store URL from env.
    Order: TRUST_DB_URL > DATABASE_URL > sqlite:///<TRUST_DB_PATH or profile_trust.db>.
    """
    load_trust_env()
    url = (os.getenv("TRUST_DB_URL") or os.getenv("DATABASE_URL") or "").strip()
    if url:
        return url
    path = (os.getenv("TRUST_DB_PATH") or "").strip() or DEFAULT_SQLITE_PATH
    return f"sqlite:///{path}"
