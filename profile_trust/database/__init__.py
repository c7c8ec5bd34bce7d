"""
Persistence for scored accounts.

AccountStore is the interface; InMemoryAccountStore and SqlAccountStore
(SQLAlchemy, SQLite by default) implement it.
"""

from profile_trust.database.base import AccountStore
from profile_trust.database.memory import InMemoryAccountStore
from profile_trust.database.sql import (
    AccountRow,
    SqlAccountStore,
    get_account_store,
    reset_store_for_test,
)

__all__ = [
    "AccountRow",
    "AccountStore",
    "InMemoryAccountStore",
    "SqlAccountStore",
    "get_account_store",
    "reset_store_for_test",
]
