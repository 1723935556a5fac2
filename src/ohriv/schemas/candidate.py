from __future__ import annotations

from pydantic import EmailStr, Field, ValidationInfo, field_validator

from .base import RecordModel, UrlStr
from .enums import ApplicationStatus, AttachmentType
from .evaluation import CandidateApplication


class CandidateSource(RecordModel):
    """Channel a candidate arrived through."""

    channel: str
    details: str | None = None
    referrer_user_id: str | None = None


class CandidateAttachment(RecordModel):
    """Document attached to a candidate profile."""

    type: AttachmentType = AttachmentType.OTHER
    url: str
    title: str | None = None
    uploaded_at: str | None = None


class Candidate(RecordModel):
    """Tenant-owned candidate document."""

    id: str
    tenant_id: str
    company_id: str | None = None
    partner_id: str | None = None
    name_first: str | None = None
    name_last: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    location: str | None = None
    timezone: str | None = None
    linkedin_url: UrlStr | None = None
    github_url: UrlStr | None = None
    portfolio_url: UrlStr | None = None
    tags: list[str] = Field(default_factory=list)
    source: CandidateSource | None = None
    attachments: list[CandidateAttachment] = Field(default_factory=list)
    applications: list[CandidateApplication] = Field(default_factory=list)
    primary_application_id: str | None = None
    status: ApplicationStatus = ApplicationStatus.APPLIED
    notes: str | None = None
    created_at: str
    updated_at: str | None = None

    @field_validator("primary_application_id")
    @classmethod
    def _primary_application_is_embedded(
        cls, value: str | None, info: ValidationInfo
    ) -> str | None:
        # An empty list means applications are stored elsewhere.
        applications = info.data.get("applications") or []
        if value is not None and applications:
            if value not in {application.id for application in applications}:
                raise ValueError(
                    f"primaryApplicationId {value!r} does not match any application"
                )
        return value

    @property
    def display_name(self) -> str:
        parts = [part for part in (self.name_first, self.name_last) if part]
        return " ".join(parts) or self.id

    def primary_application(self) -> CandidateApplication | None:
        for application in self.applications:
            if application.id == self.primary_application_id:
                return application
        return None
