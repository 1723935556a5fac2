"""Parse untrusted payloads into validated records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from .schemas import (
    Candidate,
    CandidateApplication,
    Partner,
    SimpleKSAScore,
    Stage,
    Tenant,
    TenantMembership,
    User,
)

RecordT = TypeVar("RecordT", bound=BaseModel)

IssuePath = tuple[str | int, ...]


@dataclass(slots=True, frozen=True)
class FieldIssue:
    """One rejected field, addressed by its wire path."""

    path: IssuePath
    message: str
    code: str

    @property
    def location(self) -> str:
        if not self.path:
            return "<root>"
        return ".".join(str(part) for part in self.path)

    def __str__(self) -> str:
        return f"{self.location}: {self.message}"


class RecordValidationError(ValueError):
    """Raised by :meth:`ParseResult.unwrap` when parsing failed."""

    def __init__(self, model: str, issues: list[FieldIssue]):
        super().__init__(f"{model} validation failed")
        self.model = model
        self.issues = issues

    def __str__(self) -> str:
        return f"{self.model} validation failed: " + "; ".join(str(i) for i in self.issues)


@dataclass(slots=True)
class ParseResult(Generic[RecordT]):
    """Either a validated record or the issues that prevented it."""

    model: str
    record: RecordT | None = None
    issues: list[FieldIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.record is not None and not self.issues

    def issues_at(self, *path: str | int) -> list[FieldIssue]:
        """Return issues whose path starts with ``path``."""
        return [issue for issue in self.issues if issue.path[: len(path)] == path]

    def unwrap(self) -> RecordT:
        if self.record is None:
            raise RecordValidationError(self.model, self.issues)
        return self.record


def parse(model: type[RecordT], raw: Any) -> ParseResult[RecordT]:
    """Validate ``raw`` against ``model``, collecting every field issue.

    Validation never raises for bad input; all failing fields are reported
    with their nested camelCase paths.
    """
    try:
        record = model.model_validate(raw)
    except ValidationError as exc:
        return ParseResult(model=model.__name__, issues=_issues_from(exc))
    return ParseResult(model=model.__name__, record=record)


def _issues_from(exc: ValidationError) -> list[FieldIssue]:
    return [
        FieldIssue(
            path=tuple(error["loc"]),
            message=error["msg"],
            code=error["type"],
        )
        for error in exc.errors(include_url=False)
    ]


def parse_candidate(raw: Any) -> ParseResult[Candidate]:
    return parse(Candidate, raw)


def parse_application(raw: Any) -> ParseResult[CandidateApplication]:
    return parse(CandidateApplication, raw)


def parse_stage(raw: Any) -> ParseResult[Stage]:
    return parse(Stage, raw)


def parse_ksa_score(raw: Any) -> ParseResult[SimpleKSAScore]:
    return parse(SimpleKSAScore, raw)


def parse_tenant(raw: Any) -> ParseResult[Tenant]:
    return parse(Tenant, raw)


def parse_partner(raw: Any) -> ParseResult[Partner]:
    return parse(Partner, raw)


def parse_user(raw: Any) -> ParseResult[User]:
    return parse(User, raw)


def parse_membership(raw: Any) -> ParseResult[TenantMembership]:
    return parse(TenantMembership, raw)


RECORD_KINDS: dict[str, type[BaseModel]] = {
    "candidate": Candidate,
    "application": CandidateApplication,
    "stage": Stage,
    "ksa-score": SimpleKSAScore,
    "tenant": Tenant,
    "partner": Partner,
    "user": User,
    "membership": TenantMembership,
}
