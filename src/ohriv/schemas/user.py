from __future__ import annotations

from pydantic import EmailStr, Field, StrictBool

from .base import RecordModel, UrlStr
from .enums import (
    PartnerStatus,
    TenantMembershipRole,
    TenantPlan,
    TenantStatus,
    UserStatus,
)


class Branding(RecordModel):
    logo_url: UrlStr | None = None


class SSOSettings(RecordModel):
    enabled: StrictBool


class TenantSettings(RecordModel):
    branding: Branding | None = None
    sso: SSOSettings | None = None


class Tenant(RecordModel):
    """Isolated customer organisation."""

    id: str
    name: str
    plan: TenantPlan
    status: TenantStatus
    owner_user_id: str
    settings: TenantSettings | None = None
    created_at: str
    updated_at: str | None = None


class Partner(RecordModel):
    """Reseller operating its own tenant on behalf of customer tenants."""

    id: str
    name: str
    tenant_id: str
    customer_tenant_ids: list[str] = Field(default_factory=list)
    status: PartnerStatus
    rev_share_percent: float | None = Field(default=None, ge=0, le=100, strict=True)
    branding: Branding | None = None


class User(RecordModel):
    id: str
    email: EmailStr
    name: str | None = None
    primary_tenant_id: str | None = None
    partner_id: str | None = None
    status: UserStatus = UserStatus.INVITED


class TenantMembership(RecordModel):
    """A user's role within one tenant."""

    user_id: str
    tenant_id: str
    role: TenantMembershipRole
    scopes: list[str] | None = None
    invited_by: str | None = None
    invited_at: str | None = None
