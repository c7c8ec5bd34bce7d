"""
Pytest fixtures for profile trust tests. Uses a temporary SQLite DB for the SQL store.
"""

from __future__ import annotations

import pytest

from profile_trust.scoring.models import Account, BehaviorMetrics, Prompt

NOW_TS = 1_760_000_000
DAY = 86400


class FakeHasher:
    """Reversible stand-in for the host's password hasher."""

    def hash(self, plaintext: str) -> str:
        return "hashed:" + plaintext[::-1]

    def verify(self, plaintext: str, hashed: str) -> bool:
        return hashed == self.hash(plaintext)


@pytest.fixture(autouse=True)
def clean_lockout_env(monkeypatch):
    """Lockout managers read TRUST_LOCKOUT_* from env; start every test from defaults."""
    for name in ("TRUST_LOCKOUT_THRESHOLD", "TRUST_LOCK_DURATION_SEC", "TRUST_LOCKOUT_MAX_RETRIES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def now_ts() -> int:
    return NOW_TS


@pytest.fixture
def hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def make_account():
    """Factory for accounts with sensible test defaults."""

    def _make(account_id: str = "acc-1", **overrides) -> Account:
        fields = {
            "account_id": account_id,
            "email": f"{account_id}@example.com",
            "name": "Ana",
            "age": 28,
            "created_at": NOW_TS - 10 * DAY,
        }
        fields.update(overrides)
        return Account(**fields)

    return _make


@pytest.fixture
def full_account(make_account) -> Account:
    return make_account(
        job="Engineer",
        school="MIT",
        images=["a.jpg", "b.jpg", "c.jpg"],
        prompts=[Prompt(prompt=f"q{i}", answer=f"a{i}") for i in range(3)],
        questionnaire={
            "height": 170,
            "education": "masters",
            "occupation": "engineer",
            "relationshipGoals": "serious",
            "hasChildren": False,
            "interests": ["hiking"],
        },
        behavior_metrics=BehaviorMetrics(),
    )


@pytest.fixture
def memory_store():
    from profile_trust.database.memory import InMemoryAccountStore

    return InMemoryAccountStore()


@pytest.fixture
def sql_store(tmp_path, monkeypatch):
    """
    SQL store on a temporary SQLite file. Unset TRUST_DB_URL / DATABASE_URL so
    the store falls back to TRUST_DB_PATH.
    """
    monkeypatch.delenv("TRUST_DB_URL", raising=False)
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("TRUST_DB_PATH", str(tmp_path / "profile_trust.db"))

    from profile_trust.database.sql import SqlAccountStore

    store = SqlAccountStore()
    store.ensure_schema()
    yield store
    store.engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def any_store(request):
    """Run a test against both store implementations."""
    return request.getfixturevalue(f"{request.param}_store")
