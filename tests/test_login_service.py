"""
Tests for the login flow: password check through the hasher collaborator plus lockout.
"""

from __future__ import annotations

import pytest

from profile_trust.auth import (
    REASON_ACCOUNT_LOCKED,
    REASON_INVALID_CREDENTIALS,
    REASON_OK,
    LoginService,
)
from profile_trust.core.exceptions import AccountNotFoundError
from profile_trust.credentials import CredentialHasher

from conftest import NOW_TS

TWO_HOURS = 2 * 60 * 60


@pytest.fixture
def service(any_store, hasher, make_account):
    svc = LoginService(any_store, hasher)
    any_store.insert_account(svc.set_password(make_account(), "s3cret"))
    return svc


def test_fake_hasher_satisfies_protocol(hasher):
    assert isinstance(hasher, CredentialHasher)


def test_set_password_stores_hash_not_plaintext(hasher, make_account, memory_store):
    svc = LoginService(memory_store, hasher)
    account = svc.set_password(make_account(), "s3cret")
    assert account.password_hash and account.password_hash != "s3cret"
    assert hasher.verify("s3cret", account.password_hash)
    with pytest.raises(ValueError):
        svc.set_password(make_account(), "")


def test_successful_login(service):
    result = service.login("acc-1", "s3cret", NOW_TS)
    assert result.success is True
    assert result.locked is False
    assert result.reason_code == REASON_OK
    assert result.login_attempts == 0


def test_wrong_password_counts_and_locks(service):
    for expected in range(1, 5):
        result = service.login("acc-1", "wrong", NOW_TS)
        assert result.success is False
        assert result.reason_code == REASON_INVALID_CREDENTIALS
        assert result.login_attempts == expected

    fifth = service.login("acc-1", "wrong", NOW_TS)
    assert fifth.locked is True
    assert fifth.reason_code == REASON_ACCOUNT_LOCKED
    assert fifth.lock_until == NOW_TS + TWO_HOURS


def test_locked_account_rejects_correct_password(service):
    for _ in range(5):
        service.login("acc-1", "wrong", NOW_TS)

    result = service.login("acc-1", "s3cret", NOW_TS + 60)
    assert result.success is False
    assert result.locked is True
    assert result.reason_code == REASON_ACCOUNT_LOCKED
    assert result.login_attempts == 6
    assert result.lock_until == NOW_TS + TWO_HOURS


def test_login_after_lock_expiry(service):
    for _ in range(5):
        service.login("acc-1", "wrong", NOW_TS)
    after = NOW_TS + TWO_HOURS + 1

    ok = service.login("acc-1", "s3cret", after)
    assert ok.success is True
    assert ok.login_attempts == 0
    assert ok.lock_until is None


def test_wrong_password_after_lock_expiry_restarts_count(service):
    for _ in range(5):
        service.login("acc-1", "wrong", NOW_TS)
    result = service.login("acc-1", "wrong", NOW_TS + TWO_HOURS + 1)
    assert result.login_attempts == 1
    assert result.locked is False
    assert result.reason_code == REASON_INVALID_CREDENTIALS


def test_account_without_password_never_logs_in(any_store, hasher, make_account):
    any_store.insert_account(make_account("nopw"))
    result = LoginService(any_store, hasher).login("nopw", "", NOW_TS)
    assert result.success is False
    assert result.login_attempts == 1


def test_unknown_account(service):
    with pytest.raises(AccountNotFoundError):
        service.login("ghost", "s3cret", NOW_TS)


def test_login_service_honors_env_threshold(monkeypatch, memory_store, hasher, make_account):
    monkeypatch.setenv("TRUST_LOCKOUT_THRESHOLD", "3")
    svc = LoginService(memory_store, hasher)
    memory_store.insert_account(svc.set_password(make_account(), "s3cret"))

    results = [svc.login("acc-1", "wrong", NOW_TS) for _ in range(3)]
    assert [r.locked for r in results] == [False, False, True]
    assert results[-1].lock_until == NOW_TS + TWO_HOURS
