"""Identifier resolution for id-or-resource values."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from stripe_issuing.core.domain.models import StripeObject
from stripe_issuing.core.errors import InvalidReferenceError


def resolve_id(value: str | StripeObject) -> str:
    """Return the id of a bare identifier or of a resource value.

    Raises `InvalidReferenceError` for a resource that was never persisted
    (no `id`) and for values that are neither.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, StripeObject):
        if not value.id:
            raise InvalidReferenceError(
                f"{type(value).__name__} has no id; it cannot be referenced"
            )
        return value.id
    raise InvalidReferenceError(f"Expected an id or a resource, got {type(value).__name__}")


def coerce_ids(params: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """Replace resource values under `fields` with their ids.

    Returns a new dict; other values, and names absent from `params`, are left
    as they are.
    """

    out = dict(params)
    for name in fields:
        value = out.get(name)
        if isinstance(value, StripeObject):
            out[name] = resolve_id(value)
    return out
