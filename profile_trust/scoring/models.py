"""
Domain models for scored accounts.

Account is the entity under scoring; BehaviorMetrics is embedded in it.
Plain dataclasses with to_dict/from_dict so stores stay swappable (no ORM
coupling). Timestamps are unix seconds.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from profile_trust.config.settings import DEFAULT_BEHAVIOR_INDEX, DEFAULT_CREDIBILITY_SCORE
from profile_trust.lockout.models import LockoutState


def _int_or(value: Any, default: int) -> int:
    return default if value is None else int(value)


def _opt_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _require_mapping(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


@dataclass
class BehaviorMetrics:
    """
    Interaction-quality counters for one account.

    Counters only grow except through an administrative reset (not modeled
    here). response_rate is a percentage in [0, 100]; average_rating is on
    a 0-5 scale. Ranges are validated by whoever builds the account.
    """

    ghosting_incidents: int = 0
    report_count: int = 0
    inappropriate_messages: int = 0
    positive_interactions: int = 0
    conversation_length: int = 0
    mutual_matches: int = 0
    response_rate: float = 100
    average_rating: float = 5
    # Carried for the host, not scored.
    total_ratings: int = 0
    profile_views: int = 0
    likes_given: int = 0
    likes_received: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> BehaviorMetrics:
        data = _require_mapping(data or {}, "behavior_metrics")
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})


@dataclass
class Prompt:
    prompt: str
    answer: str

    def to_dict(self) -> dict[str, str]:
        return {"prompt": self.prompt, "answer": self.answer}


@dataclass
class Account:
    """
    Profile record under scoring.

    profile_completeness and account_age_days are re-derived on every
    mutation (ScoringOrchestrator.on_account_mutated). credibility_score and
    behavior_index are only recomputed on explicit request.
    login_attempts / lock_until / lockout_version belong to the lockout
    manager and are never written by profile edits.
    """

    account_id: str
    email: str = ""
    name: str = ""
    age: int | None = None
    job: str = ""
    school: str = ""
    images: list[str] = field(default_factory=list)
    prompts: list[Prompt] = field(default_factory=list)
    questionnaire: dict[str, Any] = field(default_factory=dict)
    behavior_metrics: BehaviorMetrics = field(default_factory=BehaviorMetrics)
    created_at: int | None = None
    """Unix timestamp (seconds); immutable once set. None before first save."""
    profile_completeness: int = 0
    credibility_score: int = DEFAULT_CREDIBILITY_SCORE
    behavior_index: int = DEFAULT_BEHAVIOR_INDEX
    account_age_days: int = 0
    login_attempts: int = 0
    lock_until: int | None = None
    lockout_version: int = 0
    password_hash: str | None = None

    @property
    def lockout_state(self) -> LockoutState:
        return LockoutState(
            login_attempts=self.login_attempts,
            lock_until=self.lock_until,
            version=self.lockout_version,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "email": self.email,
            "name": self.name,
            "age": self.age,
            "job": self.job,
            "school": self.school,
            "images": list(self.images),
            "prompts": [p.to_dict() for p in self.prompts],
            "questionnaire": dict(self.questionnaire),
            "behavior_metrics": self.behavior_metrics.to_dict(),
            "created_at": self.created_at,
            "profile_completeness": self.profile_completeness,
            "credibility_score": self.credibility_score,
            "behavior_index": self.behavior_index,
            "account_age_days": self.account_age_days,
            "login_attempts": self.login_attempts,
            "lock_until": self.lock_until,
            "lockout_version": self.lockout_version,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Account:
        """
        Build an Account from its to_dict() layout.

        Raises KeyError without account_id, ValueError for wrongly shaped
        or non-numeric values.
        """
        data = _require_mapping(data, "account")
        prompts = [
            p if isinstance(p, Prompt) else Prompt(
                prompt=_require_mapping(p, "prompt").get("prompt", ""),
                answer=p.get("answer", ""),
            )
            for p in data.get("prompts") or []
        ]
        return cls(
            account_id=str(data["account_id"]),
            email=data.get("email") or "",
            name=data.get("name") or "",
            age=_opt_int(data.get("age")),
            job=data.get("job") or "",
            school=data.get("school") or "",
            images=[str(i) for i in data.get("images") or []],
            prompts=prompts,
            questionnaire=dict(_require_mapping(data.get("questionnaire") or {}, "questionnaire")),
            behavior_metrics=BehaviorMetrics.from_dict(data.get("behavior_metrics")),
            created_at=_opt_int(data.get("created_at")),
            profile_completeness=int(data.get("profile_completeness") or 0),
            credibility_score=_int_or(data.get("credibility_score"), DEFAULT_CREDIBILITY_SCORE),
            behavior_index=_int_or(data.get("behavior_index"), DEFAULT_BEHAVIOR_INDEX),
            account_age_days=int(data.get("account_age_days") or 0),
            login_attempts=int(data.get("login_attempts") or 0),
            lock_until=_opt_int(data.get("lock_until")),
            lockout_version=int(data.get("lockout_version") or 0),
            password_hash=data.get("password_hash"),
        )
