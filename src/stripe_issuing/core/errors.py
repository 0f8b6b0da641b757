"""Error hierarchy of the client.

Every public operation either returns a typed value or raises exactly one of
these. The classes split along where the failure happened:

- `TransportError`: no HTTP response was obtained (connect, timeout, TLS).
- `DecodingError`: a response arrived but does not match the declared shape.
- `StructuredError`: the API answered with a well-formed error envelope; the
  subclass (and its `type` tag) mirrors the envelope's `error.type`.
- `InvalidReferenceError`: an id was required and none could be derived.
"""

from __future__ import annotations

from typing import Any, ClassVar

__all__ = (
    "StripeIssuingError",
    "ConfigurationError",
    "RequestConfigurationError",
    "InvalidReferenceError",
    "TransportError",
    "DecodingError",
    "StructuredError",
    "APIConnectionError",
    "APIError",
    "AuthenticationError",
    "CardError",
    "IdempotencyError",
    "InvalidRequestError",
    "RateLimitError",
    "error_class_for_type",
)


class StripeIssuingError(Exception):
    """Base for all errors raised by this package."""

    default_message: ClassVar[str] = "Stripe client error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self) -> dict[str, Any]:
        """Serialise for logging/monitoring."""

        return {"error": self.__class__.__name__, "message": self.message}


class ConfigurationError(StripeIssuingError):
    default_message = "Client is not configured"


class RequestConfigurationError(StripeIssuingError):
    """A request is incomplete or carries options the client does not know."""

    default_message = "Request is incomplete"


class InvalidReferenceError(StripeIssuingError, ValueError):
    default_message = "Could not derive an id from the given value"


class TransportError(StripeIssuingError):
    """Network-level failure: no response was obtained."""

    default_message = "Network error while contacting the API"

    def __init__(
        self,
        message: str | None = None,
        *,
        method: str | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(method=self.method, url=self.url)
        return data


class DecodingError(StripeIssuingError):
    """Response body does not match the expected shape (schema drift)."""

    default_message = "Could not decode the API response"

    def __init__(
        self,
        message: str | None = None,
        *,
        http_status: int | None = None,
        http_body: str | None = None,
        request_id: str | None = None,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.http_body = http_body
        self.request_id = request_id
        self.errors = errors or []

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            http_status=self.http_status,
            request_id=self.request_id,
            errors=self.errors,
        )
        return data


class StructuredError(StripeIssuingError):
    """Business-level failure reported through the API's error envelope."""

    type: ClassVar[str] = "api_error"
    default_message = "The API returned an error"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        param: str | None = None,
        decline_code: str | None = None,
        http_status: int | None = None,
        http_body: str | None = None,
        json_body: dict[str, Any] | None = None,
        request_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.param = param
        self.decline_code = decline_code
        self.http_status = http_status
        self.http_body = http_body
        self.json_body = json_body
        self.request_id = request_id

    def __str__(self) -> str:
        if self.request_id:
            return f"Request {self.request_id}: {self.message}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            type=self.type,
            code=self.code,
            param=self.param,
            decline_code=self.decline_code,
            http_status=self.http_status,
            request_id=self.request_id,
        )
        return data


class APIConnectionError(StructuredError):
    type = "api_connection_error"


class APIError(StructuredError):
    type = "api_error"


class AuthenticationError(StructuredError):
    type = "authentication_error"


class CardError(StructuredError):
    type = "card_error"


class IdempotencyError(StructuredError):
    type = "idempotency_error"


class InvalidRequestError(StructuredError):
    type = "invalid_request_error"


class RateLimitError(StructuredError):
    type = "rate_limit_error"


_BY_TYPE: dict[str, type[StructuredError]] = {
    cls.type: cls
    for cls in (
        APIConnectionError,
        APIError,
        AuthenticationError,
        CardError,
        IdempotencyError,
        InvalidRequestError,
        RateLimitError,
    )
}


def error_class_for_type(error_type: str | None) -> type[StructuredError] | None:
    """Return the subclass tagged with `error_type`, or None if unknown."""

    if not error_type:
        return None
    return _BY_TYPE.get(error_type)
