"""Pydantic schema definitions for tenant-scoped recruitment records."""

from __future__ import annotations

from .base import RecordModel
from .candidate import Candidate, CandidateAttachment, CandidateSource
from .enums import (
    ApplicationStatus,
    AttachmentType,
    DecisionStatus,
    EvaluationRecommendation,
    EvaluationSection,
    EvaluatorRole,
    KSARecommendation,
    PartnerStatus,
    StageStatus,
    TenantMembershipRole,
    TenantPlan,
    TenantStatus,
    UserStatus,
)
from .evaluation import (
    ApplicationDecision,
    CandidateApplication,
    EvaluationSummary,
    QuestionRef,
    QuestionResponse,
    ScoreBand,
    StageEvaluation,
    StagePlan,
)
from .ksa import SimpleKSAScore
from .stage import Stage
from .user import Partner, Tenant, TenantMembership, User

__all__ = [
    "ApplicationDecision",
    "ApplicationStatus",
    "AttachmentType",
    "Candidate",
    "CandidateApplication",
    "CandidateAttachment",
    "CandidateSource",
    "DecisionStatus",
    "EvaluationRecommendation",
    "EvaluationSection",
    "EvaluationSummary",
    "EvaluatorRole",
    "KSARecommendation",
    "Partner",
    "PartnerStatus",
    "QuestionRef",
    "QuestionResponse",
    "RecordModel",
    "ScoreBand",
    "SimpleKSAScore",
    "Stage",
    "StageEvaluation",
    "StagePlan",
    "StageStatus",
    "Tenant",
    "TenantMembership",
    "TenantMembershipRole",
    "TenantPlan",
    "TenantStatus",
    "User",
    "UserStatus",
]
