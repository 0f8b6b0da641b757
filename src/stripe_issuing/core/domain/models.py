"""Base shapes for API values (Pydantic v2).

Why Pydantic here:
- Each resource's field list is a declarative schema consumed by one generic
  caster instead of a hand-written decoder per resource.
- Values are frozen once built; unknown keys are ignored so new API fields do
  not break older clients.

Note:
- These models describe *what* a value looks like, not *how* it is fetched.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Literal, TypeVar, Union

from pydantic import BaseModel, Field, ValidationInfo, model_validator
from pydantic.config import ConfigDict

# Set in the validation context by the response caster.
FROM_WIRE = "from_wire"

Metadata = dict[str, str]

T = TypeVar("T")


class StripeRecord(BaseModel):
    """Nested sub-record without identity (e.g. `verification_data`)."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class StripeObject(StripeRecord):
    """A resource with an identity.

    `id` is optional so that callers can build values locally, but anything
    decoded from an API response must carry one.
    """

    object_name: ClassVar[str] = ""
    updatable_fields: ClassVar[frozenset[str]] = frozenset()

    id: str | None = Field(default=None, description="Unique identifier.")
    object: str | None = Field(default=None, description="String naming the object type.")

    @model_validator(mode="after")
    def _require_id_from_wire(self, info: ValidationInfo) -> StripeObject:
        if info.context and info.context.get(FROM_WIRE) and not self.id:
            raise ValueError(f"{type(self).__name__} is missing its 'id'")
        return self

    def to_update_params(self) -> dict[str, Any]:
        """Dump the declared mutable fields as request parameters."""

        return self.model_dump(include=set(self.updatable_fields), exclude_none=True)


class ListObject(BaseModel, Generic[T]):
    """One page of a cursor-paginated collection."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    object: Literal["list"] = "list"
    data: list[T]
    has_more: bool
    url: str | None = None
    total_count: int | None = None


# Polymorphic id-or-resource field: a bare id, or the expanded resource.
Expandable = Union[str, T]
