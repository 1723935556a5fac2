"""Application, stage evaluation and stage plan records."""

from __future__ import annotations

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from .base import Number, RecordModel
from .enums import (
    ApplicationStatus,
    DecisionStatus,
    EvaluationRecommendation,
    EvaluationSection,
    EvaluatorRole,
    StageStatus,
)


class QuestionRef(RecordModel):
    """Reference to a guideline question used within a stage."""

    section: EvaluationSection
    category: str
    question_id: StrictInt | StrictFloat | str
    weight: float | None = Field(default=None, ge=0, le=100, strict=True)
    tags: list[str] | None = None


class StagePlan(RecordModel):
    """Evaluation plan attached to one pipeline stage."""

    stage_id: str
    evaluator_role: EvaluatorRole | None = None
    allowed_evaluator_ids: list[str] | None = None
    weighting_preset_level: str | None = None
    question_refs: list[QuestionRef]
    pass_score: float | None = Field(default=None, ge=0, le=100, strict=True)
    auto_advance_on_pass: StrictBool | None = None
    expected_duration_minutes: Number | None = None
    notes: str | None = None


class ScoreBand(RecordModel):
    dimension: str
    score: float = Field(ge=0, le=10, strict=True)
    weight: float | None = Field(default=None, ge=0, le=100, strict=True)
    confidence: float | None = Field(default=None, ge=0, le=1, strict=True)
    notes: str | None = None


class QuestionResponse(RecordModel):
    question_id: StrictInt | StrictFloat | str
    section: EvaluationSection
    category: str
    answer: str | None = None
    score: float | None = Field(default=None, ge=0, le=10, strict=True)
    confidence: float | None = Field(default=None, ge=0, le=1, strict=True)
    notes: str | None = None


class EvaluationSummary(RecordModel):
    overall_score: float | None = Field(default=None, ge=0, le=100, strict=True)
    recommendation: EvaluationRecommendation | None = None
    notes: str | None = None


class StageEvaluation(RecordModel):
    """One evaluator's work on one stage of an application."""

    stage_id: str
    evaluator_id: str | None = None
    evaluator_role: EvaluatorRole | None = None
    status: StageStatus = StageStatus.NOT_STARTED
    started_at: str | None = None
    completed_at: str | None = None
    question_responses: list[QuestionResponse] = Field(default_factory=list)
    rubric_scores: list[ScoreBand] | None = None
    summary: EvaluationSummary | None = None


class ApplicationDecision(RecordModel):
    status: DecisionStatus = DecisionStatus.PENDING
    decided_by: str | None = None
    decided_at: str | None = None
    notes: str | None = None


class CandidateApplication(RecordModel):
    """A candidate's application to one job, with its stage evaluations."""

    id: str
    tenant_id: str
    company_id: str
    job_id: str
    guideline_id: str | None = None
    pipeline_id: str | None = None
    status: ApplicationStatus = ApplicationStatus.APPLIED
    source: str | None = None
    current_stage_id: str | None = None
    stage_evaluations: list[StageEvaluation] = Field(default_factory=list)
    aggregated_scores: list[ScoreBand] | None = None
    decision: ApplicationDecision | None = None
    created_at: str
    updated_at: str | None = None
