"""KSA rubric: overall score, recommendation band, new score records."""

from __future__ import annotations

import pendulum

from ..schemas import KSARecommendation, SimpleKSAScore

# Lower bound of each recommendation band, checked from the top.
RECOMMENDATION_BANDS: tuple[tuple[float, KSARecommendation], ...] = (
    (8.0, KSARecommendation.STRONG_RECOMMEND),
    (6.0, KSARecommendation.RECOMMEND),
    (4.0, KSARecommendation.CONSIDER),
)


def compute_overall(knowledge: int, skills: int, abilities: int) -> float:
    """Mean of the three axes, rounded to one decimal place."""
    return round((knowledge + skills + abilities) / 3, 1)


def recommend(overall: float) -> KSARecommendation:
    for threshold, recommendation in RECOMMENDATION_BANDS:
        if overall >= threshold:
            return recommendation
    return KSARecommendation.REJECT


def build_score(
    candidate_id: str,
    job_title: str,
    knowledge: int,
    skills: int,
    abilities: int,
    *,
    now: pendulum.DateTime | None = None,
) -> SimpleKSAScore:
    """Create a new score record stamped with the evaluation time.

    Raises pydantic ``ValidationError`` when an axis falls outside 1-10.
    """
    moment = (now or pendulum.now("UTC")).in_timezone("UTC")
    overall = compute_overall(knowledge, skills, abilities)
    millis = int(moment.timestamp() * 1000)
    return SimpleKSAScore(
        id=f"{candidate_id}-{job_title}-{millis}",
        candidate_id=candidate_id,
        job_title=job_title,
        evaluation_date=moment.to_iso8601_string(),
        knowledge=knowledge,
        skills=skills,
        abilities=abilities,
        overall=overall,
        recommendation=recommend(overall),
    )
