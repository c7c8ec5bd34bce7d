"""
SQLAlchemy-backed account store.

Uses TRUST_DB_URL / DATABASE_URL when set; otherwise SQLite at TRUST_DB_PATH
(default profile_trust.db). Email uniqueness is a UNIQUE column; the lockout
compare-and-swap is a single UPDATE ... WHERE id = ? AND lockout_version = ?,
so concurrent writers in different processes cannot overwrite each other.
"""

from __future__ import annotations

import json
import time
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import Column, Integer, String, Text, create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from profile_trust.config.env import get_database_url
from profile_trust.config.settings import DEFAULT_BEHAVIOR_INDEX, DEFAULT_CREDIBILITY_SCORE
from profile_trust.core.exceptions import (
    AccountNotFoundError,
    DuplicateAccountError,
    DuplicateEmailError,
)
from profile_trust.database.base import AccountStore, normalize_email
from profile_trust.lockout.models import LockoutState
from profile_trust.scoring.models import Account, BehaviorMetrics, Prompt
from profile_trust.trust_logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


class AccountRow(Base):
    """One row per account: profile content, derived scores and lockout columns."""

    __tablename__ = "accounts"

    id = Column(String(64), primary_key=True)
    email = Column(String(320), unique=True, nullable=True, index=True)
    name = Column(String(256), nullable=False, default="")
    age = Column(Integer, nullable=True)
    job = Column(String(256), nullable=False, default="")
    school = Column(String(256), nullable=False, default="")
    images_json = Column(Text, nullable=False, default="[]")
    prompts_json = Column(Text, nullable=False, default="[]")
    questionnaire_json = Column(Text, nullable=False, default="{}")
    behavior_metrics_json = Column(Text, nullable=False, default="{}")
    password_hash = Column(String(256), nullable=True)
    created_at = Column(Integer, nullable=False)  # Unix
    profile_completeness = Column(Integer, nullable=False, default=0)
    credibility_score = Column(Integer, nullable=False, default=DEFAULT_CREDIBILITY_SCORE)
    behavior_index = Column(Integer, nullable=False, default=DEFAULT_BEHAVIOR_INDEX)
    account_age_days = Column(Integer, nullable=False, default=0)
    login_attempts = Column(Integer, nullable=False, default=0)
    lock_until = Column(Integer, nullable=True)  # Unix
    lockout_version = Column(Integer, nullable=False, default=0)

    def to_account(self) -> Account:
        return Account(
            account_id=self.id,
            email=self.email or "",
            name=self.name or "",
            age=self.age,
            job=self.job or "",
            school=self.school or "",
            images=json.loads(self.images_json or "[]"),
            prompts=[Prompt(**p) for p in json.loads(self.prompts_json or "[]")],
            questionnaire=json.loads(self.questionnaire_json or "{}"),
            behavior_metrics=BehaviorMetrics.from_dict(json.loads(self.behavior_metrics_json or "{}")),
            created_at=self.created_at,
            profile_completeness=self.profile_completeness,
            credibility_score=self.credibility_score,
            behavior_index=self.behavior_index,
            account_age_days=self.account_age_days,
            login_attempts=self.login_attempts,
            lock_until=self.lock_until,
            lockout_version=self.lockout_version,
            password_hash=self.password_hash,
        )


def _profile_columns(account: Account) -> dict[str, Any]:
    """Columns written by profile saves; lockout columns and created_at excluded."""
    return {
        "email": normalize_email(account.email),
        "name": account.name or "",
        "age": account.age,
        "job": account.job or "",
        "school": account.school or "",
        "images_json": json.dumps(list(account.images)),
        "prompts_json": json.dumps([p.to_dict() for p in account.prompts]),
        "questionnaire_json": json.dumps(account.questionnaire, default=str),
        "behavior_metrics_json": json.dumps(account.behavior_metrics.to_dict()),
        "password_hash": account.password_hash,
        "profile_completeness": account.profile_completeness,
        "credibility_score": account.credibility_score,
        "behavior_index": account.behavior_index,
        "account_age_days": account.account_age_days,
    }


class SqlAccountStore(AccountStore):
    def __init__(self, url: str | None = None, engine: Any = None) -> None:
        self._url = url or get_database_url()
        if engine is None:
            connect_args: dict[str, Any] = {}
            if self._url.startswith("sqlite"):
                connect_args["check_same_thread"] = False
            engine = create_engine(self._url, connect_args=connect_args, pool_pre_ping=True)
        self._engine = engine
        self._session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        logger.info("account_store_engine", url=self._url.split("?")[0].split("//")[-1])

    @property
    def engine(self) -> Any:
        return self._engine

    @contextmanager
    def _session_scope(self) -> Iterator[Session]:
        """Context manager for a single session. Commits on success, rolls back on error."""
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def ensure_schema(self) -> None:
        Base.metadata.create_all(bind=self._engine)

    def insert_account(self, account: Account) -> Account:
        created_at = account.created_at if account.created_at is not None else int(time.time())
        try:
            with self._session_scope() as session:
                row = AccountRow(
                    id=account.account_id,
                    created_at=created_at,
                    login_attempts=account.login_attempts,
                    lock_until=account.lock_until,
                    lockout_version=account.lockout_version,
                    **_profile_columns(account),
                )
                session.add(row)
                session.flush()
                stored = row.to_account()
        except IntegrityError as e:
            if self._account_exists(account.account_id):
                raise DuplicateAccountError(account.account_id) from e
            email = normalize_email(account.email)
            if email and self._email_taken(email):
                raise DuplicateEmailError(account.email) from e
            raise
        logger.info("account_inserted", account_id=account.account_id)
        return stored

    def get_account(self, account_id: str) -> Account:
        with self._session_scope() as session:
            return self._get_row(session, account_id).to_account()

    def save_profile(self, account: Account) -> None:
        try:
            with self._session_scope() as session:
                updated = (
                    session.query(AccountRow)
                    .filter(AccountRow.id == account.account_id)
                    .update(_profile_columns(account), synchronize_session=False)
                )
                if updated == 0:
                    raise AccountNotFoundError(account.account_id)
        except IntegrityError as e:
            raise DuplicateEmailError(account.email) from e
        logger.debug("account_profile_saved", account_id=account.account_id)

    def get_lockout_state(self, account_id: str) -> LockoutState:
        with self._session_scope() as session:
            row = self._get_row(session, account_id)
            return LockoutState(
                login_attempts=row.login_attempts,
                lock_until=row.lock_until,
                version=row.lockout_version,
            )

    def compare_and_set_lockout_state(
        self,
        account_id: str,
        expected: LockoutState,
        new: LockoutState,
    ) -> bool:
        with self._session_scope() as session:
            updated = (
                session.query(AccountRow)
                .filter(
                    AccountRow.id == account_id,
                    AccountRow.lockout_version == expected.version,
                )
                .update(
                    {
                        "login_attempts": new.login_attempts,
                        "lock_until": new.lock_until,
                        "lockout_version": new.version,
                    },
                    synchronize_session=False,
                )
            )
        if updated == 0:
            # Raises AccountNotFoundError when the row is gone.
            self.get_lockout_state(account_id)
            return False
        return True

    def _get_row(self, session: Session, account_id: str) -> AccountRow:
        row = session.get(AccountRow, account_id)
        if row is None:
            raise AccountNotFoundError(account_id)
        return row

    def _account_exists(self, account_id: str) -> bool:
        with self._session_scope() as session:
            return session.get(AccountRow, account_id) is not None

    def _email_taken(self, email: str) -> bool:
        with self._session_scope() as session:
            return session.query(AccountRow.id).filter(AccountRow.email == email).first() is not None


_default_store: SqlAccountStore | None = None


def get_account_store() -> SqlAccountStore:
    """Create or return the process-wide SQL store (schema ensured)."""
    global _default_store
    if _default_store is None:
        _default_store = SqlAccountStore()
        _default_store.ensure_schema()
    return _default_store


def reset_store_for_test() -> None:
    """Drop the cached store. For tests only; use with a new TRUST_DB_PATH."""
    global _default_store
    if _default_store is not None:
        _default_store.engine.dispose()
    _default_store = None
