"""Shared model configuration for wire-format records."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    StrictFloat,
    StrictInt,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise ValueError(f"Invalid URL: {exc.errors()[0]['msg']}") from None
    return value


# JSON number: ints stay ints; strings and booleans are rejected.
Number = StrictInt | StrictFloat

# Absolute URL, kept as the caller's original string.
UrlStr = Annotated[str, AfterValidator(_check_url)]


class RecordModel(BaseModel):
    """Immutable record accepting camelCase wire keys or snake_case names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Serialise back to the camelCase JSON shape, omitting absent fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
