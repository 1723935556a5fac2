"""Mapping between evaluator roles and tenant membership roles."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from .schemas import EvaluatorRole, TenantMembershipRole

_Membership = TenantMembershipRole
_Evaluator = EvaluatorRole

E = TypeVar("E", bound=Enum)

SUPER_ROLES: frozenset[TenantMembershipRole] = frozenset({_Membership.OWNER, _Membership.ADMIN})

# Membership roles allowed to act in each evaluator capacity.
EVALUATOR_ROLE_PERMISSIONS: dict[EvaluatorRole, tuple[TenantMembershipRole, ...]] = {
    _Evaluator.SOURCER: (_Membership.OWNER, _Membership.ADMIN, _Membership.RECRUITER),
    _Evaluator.RECRUITER: (_Membership.OWNER, _Membership.ADMIN, _Membership.RECRUITER),
    _Evaluator.HIRING_MANAGER: (_Membership.OWNER, _Membership.ADMIN, _Membership.INTERVIEWER),
    _Evaluator.TECHNICAL_INTERVIEWER: (
        _Membership.OWNER,
        _Membership.ADMIN,
        _Membership.INTERVIEWER,
    ),
    _Evaluator.VALUES_INTERVIEWER: (
        _Membership.OWNER,
        _Membership.ADMIN,
        _Membership.RECRUITER,
        _Membership.INTERVIEWER,
    ),
    _Evaluator.PEER: (_Membership.OWNER, _Membership.ADMIN, _Membership.INTERVIEWER),
    _Evaluator.PARTNER: (_Membership.OWNER, _Membership.ADMIN, _Membership.PARTNER_MANAGER),
}


def _coerce(enum_type: type[E], value: object) -> E | None:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        return None


def allowed_membership_roles(
    evaluator_role: EvaluatorRole | str,
) -> tuple[TenantMembershipRole, ...]:
    """Return the membership roles allowed to act as ``evaluator_role``.

    Unknown evaluator roles map to an empty tuple.
    """
    role = _coerce(EvaluatorRole, evaluator_role)
    if role is None:
        return ()
    return EVALUATOR_ROLE_PERMISSIONS.get(role, ())


def can_perform(
    membership_role: TenantMembershipRole | str,
    evaluator_role: EvaluatorRole | str,
) -> bool:
    """Return True when ``membership_role`` may evaluate as ``evaluator_role``.

    Owners and admins bypass the table. Any unrecognised value is denied.
    """
    membership = _coerce(TenantMembershipRole, membership_role)
    if membership is None:
        return False
    if membership in SUPER_ROLES:
        return True
    return membership in allowed_membership_roles(evaluator_role)


def evaluator_roles_for(
    membership_role: TenantMembershipRole | str,
) -> list[EvaluatorRole]:
    """List every evaluator role the membership role may act as."""
    return [role for role in EvaluatorRole if can_perform(membership_role, role)]
