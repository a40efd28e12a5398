"""Response Payloads — JSON bodies for the /query route.

Invariants:
    - JSON field names are fixed literals: nested-object, name, unique-identifier,
      number, nested-list, data-bag, Reason, Timestamp
    - Empty nested-object, nested-list and data-bag are omitted from output
    - unique-identifier is always emitted (nil UUID when unset)
    - QueryError.timestamp is set at construction, in UTC

Design Decisions:
    - Aliases carry wire names; populate_by_name keeps Python-side construction
      readable (ADR: wire names are not valid identifiers)
    - Omission via wrap serializer, not exclude_defaults: number=0 and name=""
      must still be emitted
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class Nested(BaseModel):
    """Free-form list and string map embedded in a Nestable."""
    model_config = ConfigDict(populate_by_name=True)

    entries: list[str] = Field(default_factory=list, alias="nested-list")
    data_bag: dict[str, str] = Field(default_factory=dict, alias="data-bag")

    def is_empty(self) -> bool:
        return not self.entries and not self.data_bag

    @model_serializer(mode="wrap")
    def _omit_empty(self, handler):
        return {key: value for key, value in handler(self).items() if value}


class Nestable(BaseModel):
    """Named, numbered record with an identifier."""
    model_config = ConfigDict(populate_by_name=True)

    nested_object: Nested = Field(default_factory=Nested, alias="nested-object")
    name: str
    identifier: UUID = Field(default=UUID(int=0), alias="unique-identifier")
    number: int = 0

    @model_serializer(mode="wrap")
    def _omit_empty_nested(self, handler):
        data = handler(self)
        if self.nested_object.is_empty():
            data.pop("nested-object", None)
            data.pop("nested_object", None)
        return data

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class QueryError(BaseModel):
    """Client error body: the raw reason and when it happened."""
    model_config = ConfigDict(populate_by_name=True)

    reason: str = Field(alias="Reason")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="Timestamp",
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
