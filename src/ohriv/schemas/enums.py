"""Closed enumerations shared by the domain schemas."""

from __future__ import annotations

from enum import Enum


class EvaluatorRole(str, Enum):
    """Capacity a person acts in when evaluating a candidate."""

    SOURCER = "sourcer"
    RECRUITER = "recruiter"
    HIRING_MANAGER = "hiring_manager"
    TECHNICAL_INTERVIEWER = "technical_interviewer"
    VALUES_INTERVIEWER = "values_interviewer"
    PEER = "peer"
    PARTNER = "partner"


class TenantMembershipRole(str, Enum):
    """Access-control role a user holds within a tenant."""

    OWNER = "owner"
    ADMIN = "admin"
    RECRUITER = "recruiter"
    INTERVIEWER = "interviewer"
    VIEWER = "viewer"
    PARTNER_MANAGER = "partner_manager"


class ApplicationStatus(str, Enum):
    APPLIED = "applied"
    IN_PROCESS = "in_process"
    OFFER = "offer"
    HIRED = "hired"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class AttachmentType(str, Enum):
    RESUME = "resume"
    PORTFOLIO = "portfolio"
    COVER_LETTER = "cover_letter"
    OTHER = "other"


class KSARecommendation(str, Enum):
    STRONG_RECOMMEND = "strong-recommend"
    RECOMMEND = "recommend"
    CONSIDER = "consider"
    REJECT = "reject"


class EvaluationSection(str, Enum):
    JOB_FIT = "jobFit"
    VALUES_FIT = "valuesFit"
    CUSTOM = "custom"


class StageStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"


class EvaluationRecommendation(str, Enum):
    ADVANCE = "advance"
    HOLD = "hold"
    REJECT = "reject"


class DecisionStatus(str, Enum):
    PENDING = "pending"
    OFFER = "offer"
    HIRED = "hired"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class TenantPlan(str, Enum):
    FREE = "free"
    STANDARD = "standard"
    ENTERPRISE = "enterprise"


class TenantStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class PartnerStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INVITED = "invited"
    DISABLED = "disabled"
