"""Shared Schema Bases — camelCase wire format for every record kind.

Invariants:
    - Input models ignore unknown and read-only fields (ids, timestamps, reference sets)
    - Strings are stripped; blank optional strings become None
    - Output models serialize identity as "_id" and timestamps as ISO-8601
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RecordInput(BaseModel):
    """Base for create/update payloads."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    @field_validator("phone_number", "address", check_fields=False)
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            return None
        return v


class RecordOut(BaseModel):
    """Base for stored records returned by the API."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(alias="_id")
    created_at: datetime
    updated_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: object) -> str:
        return str(v)

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")
