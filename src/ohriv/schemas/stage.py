from __future__ import annotations

from pydantic import StrictBool

from .base import Number, RecordModel


class Stage(RecordModel):
    """Pipeline stage definition.

    Optional flags stay ``None`` when omitted so that "not set" and
    ``False`` remain distinguishable after a round trip.
    """

    id: str | None = None
    name: str
    description: str | None = None
    color: str
    icon: str
    order: Number
    is_system: StrictBool | None = None
    can_reorder: StrictBool | None = None
    questions_enabled: StrictBool | None = None

    @property
    def key(self) -> str:
        return self.id or self.name

    @property
    def reorderable(self) -> bool:
        return self.can_reorder is not False
