"""Maps raw responses onto declared shapes or structured errors.

Why one generic caster:
- Each resource declares its shape once (a pydantic model); the caster
  validates any response against any shape, including `ListObject[Model]`.
- Decoding failures (`DecodingError`) stay distinct from API failures
  (`StructuredError`): the former means client and server disagree on the
  schema, the latter is a business answer.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from stripe_issuing.core.domain.models import FROM_WIRE
from stripe_issuing.core.errors import (
    APIError,
    DecodingError,
    StructuredError,
    error_class_for_type,
)
from stripe_issuing.core.interfaces.http import RawResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def _decode_json(raw: RawResponse) -> Any:
    return json.loads(raw.body.decode("utf-8"))


def structured_error(raw: RawResponse) -> StructuredError:
    """Build the error for a non-2xx response.

    A recognised envelope `{"error": {"type", "message", ...}}` maps onto the
    subclass tagged with `type`; anything else becomes a generic `APIError`
    that keeps the status and the raw body.
    """

    text = raw.text()
    try:
        payload = _decode_json(raw)
    except ValueError:
        payload = None

    envelope = payload.get("error") if isinstance(payload, dict) else None
    error_cls = None
    if isinstance(envelope, dict):
        error_cls = error_class_for_type(envelope.get("type"))

    if error_cls is None or not isinstance(envelope, dict):
        return APIError(
            f"Unrecognised error response from the API (HTTP {raw.status_code})",
            http_status=raw.status_code,
            http_body=text,
            json_body=payload if isinstance(payload, dict) else None,
            request_id=raw.request_id,
        )

    return error_cls(
        envelope.get("message"),
        code=envelope.get("code"),
        param=envelope.get("param"),
        decline_code=envelope.get("decline_code"),
        http_status=raw.status_code,
        http_body=text,
        json_body=payload,
        request_id=raw.request_id,
    )


def decode(raw: RawResponse, shape: type[T]) -> T:
    """Validate a 2xx body against `shape`; raise `DecodingError` otherwise."""

    try:
        payload = _decode_json(raw)
    except ValueError as exc:
        logger.warning("Malformed JSON body (request_id=%s)", raw.request_id)
        raise DecodingError(
            f"Response body is not valid JSON: {exc}",
            http_status=raw.status_code,
            http_body=raw.text(),
            request_id=raw.request_id,
        ) from exc

    try:
        return _adapter(shape).validate_python(payload, context={FROM_WIRE: True})
    except ValidationError as exc:
        logger.warning(
            "Response does not match %s (request_id=%s): %d error(s)",
            getattr(shape, "__name__", shape),
            raw.request_id,
            exc.error_count(),
        )
        raise DecodingError(
            f"Response does not match {getattr(shape, '__name__', shape)}",
            http_status=raw.status_code,
            http_body=raw.text(),
            request_id=raw.request_id,
            errors=exc.errors(include_url=False, include_input=False),
        ) from exc


def cast(raw: RawResponse, shape: type[T]) -> T:
    """Return the typed value for `raw`, or raise the matching error."""

    if raw.is_success:
        return decode(raw, shape)

    error = structured_error(raw)
    logger.info(
        "API error %s (HTTP %s, request_id=%s): %s",
        error.type,
        raw.status_code,
        raw.request_id,
        error.message,
    )
    raise error
