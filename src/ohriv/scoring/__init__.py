"""Manual KSA scoring: rubric helpers and the persisted score store."""

from __future__ import annotations

from .rubric import build_score, compute_overall, recommend
from .storage import FileStorage, KeyValueStorage, MemoryStorage
from .store import KSAScoreStore, ScoreChange, ScoreStoreError

__all__ = [
    "FileStorage",
    "KSAScoreStore",
    "KeyValueStorage",
    "MemoryStorage",
    "ScoreChange",
    "ScoreStoreError",
    "build_score",
    "compute_overall",
    "recommend",
]
