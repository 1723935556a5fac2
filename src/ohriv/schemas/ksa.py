from __future__ import annotations

from pydantic import Field, StrictInt

from .base import RecordModel
from .enums import KSARecommendation

SCORE_MIN = 1
SCORE_MAX = 10


class SimpleKSAScore(RecordModel):
    """Manually entered Knowledge/Skills/Abilities score for one candidate.

    ``job_title`` is a grouping key, not a reference to a job record.
    ``overall`` is usually the rubric mean and may carry one decimal place.
    """

    id: str
    candidate_id: str
    job_title: str
    evaluation_date: str
    knowledge: StrictInt = Field(ge=SCORE_MIN, le=SCORE_MAX)
    skills: StrictInt = Field(ge=SCORE_MIN, le=SCORE_MAX)
    abilities: StrictInt = Field(ge=SCORE_MIN, le=SCORE_MAX)
    overall: float = Field(ge=SCORE_MIN, le=SCORE_MAX, strict=True)
    recommendation: KSARecommendation
