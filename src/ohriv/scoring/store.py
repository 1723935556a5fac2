"""Persisted store of manually entered KSA scores."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Literal

import structlog
from pydantic import TypeAdapter, ValidationError

from ..schemas import SimpleKSAScore
from ..schemas.config import DEFAULT_STORAGE_KEY
from .storage import KeyValueStorage

ChangeKind = Literal["upsert", "delete"]

_SCORES_ADAPTER = TypeAdapter(dict[str, SimpleKSAScore])


@dataclass(slots=True, frozen=True)
class ScoreChange:
    """Notification emitted after a successful write."""

    kind: ChangeKind
    score_id: str
    score: SimpleKSAScore | None


Subscriber = Callable[[ScoreChange], None]


class ScoreStoreError(RuntimeError):
    """Raised when the persisted score document cannot be decoded."""


class KSAScoreStore:
    """Mapping of score id to :class:`SimpleKSAScore` kept in key-value storage.

    Every call re-reads storage, so separate store instances over the same
    storage observe each other's writes. Writes are last-write-wins on the
    whole document with no locking.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key
        self._subscribers: list[Subscriber] = []
        self._logger = structlog.get_logger(__name__)

    @property
    def key(self) -> str:
        return self._key

    def get(self, score_id: str) -> SimpleKSAScore | None:
        return self._load().get(score_id)

    def all(self) -> list[SimpleKSAScore]:
        return list(self._load().values())

    def upsert(self, score: SimpleKSAScore) -> SimpleKSAScore:
        scores = self._load()
        replaced = score.id in scores
        scores[score.id] = score
        self._save(scores)
        self._logger.info(
            "ksa_store.upsert",
            score_id=score.id,
            candidate_id=score.candidate_id,
            replaced=replaced,
        )
        self._notify(ScoreChange(kind="upsert", score_id=score.id, score=score))
        return score

    def delete(self, score_id: str) -> bool:
        """Remove ``score_id``; return False without writing when it is absent."""
        scores = self._load()
        removed = scores.pop(score_id, None)
        if removed is None:
            self._logger.debug("ksa_store.delete_missing", score_id=score_id)
            return False
        self._save(scores)
        self._logger.info("ksa_store.delete", score_id=score_id)
        self._notify(ScoreChange(kind="delete", score_id=score_id, score=removed))
        return True

    def by_candidate(self, candidate_id: str) -> list[SimpleKSAScore]:
        return [score for score in self._load().values() if score.candidate_id == candidate_id]

    def by_job_title(self, job_title: str) -> list[SimpleKSAScore]:
        return [score for score in self._load().values() if score.job_title == job_title]

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register ``callback`` for change notifications; returns an unsubscriber."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, change: ScoreChange) -> None:
        for callback in list(self._subscribers):
            callback(change)

    def _load(self) -> dict[str, SimpleKSAScore]:
        raw = self._storage.get_item(self._key)
        if raw is None:
            return {}
        if not isinstance(raw, str):
            raise ScoreStoreError(
                f"Stored scores under {self._key!r} are unreadable: expected a JSON string, got {type(raw).__name__}"
            )
        try:
            return _SCORES_ADAPTER.validate_python(json.loads(raw))
        except (json.JSONDecodeError, ValidationError) as exc:
            raise ScoreStoreError(f"Stored scores under {self._key!r} are unreadable: {exc}") from exc

    def _save(self, scores: dict[str, SimpleKSAScore]) -> None:
        payload = {score_id: score.to_wire() for score_id, score in scores.items()}
        self._storage.set_item(self._key, json.dumps(payload, ensure_ascii=False))
