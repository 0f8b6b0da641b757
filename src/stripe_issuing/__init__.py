"""Typed async client for the Stripe Issuing API."""

__version__ = "0.1.0"

from stripe_issuing.client import StripeClient  # noqa: E402
from stripe_issuing.core.config import ClientSettings, RequestOptions  # noqa: E402
from stripe_issuing.core.domain import Authorization, ListObject  # noqa: E402
from stripe_issuing.core.errors import (  # noqa: E402
    APIConnectionError,
    APIError,
    AuthenticationError,
    CardError,
    ConfigurationError,
    DecodingError,
    IdempotencyError,
    InvalidReferenceError,
    InvalidRequestError,
    RateLimitError,
    StripeIssuingError,
    StructuredError,
    TransportError,
)
from stripe_issuing.core.ids import coerce_ids, resolve_id  # noqa: E402

__all__ = [
    "APIConnectionError",
    "APIError",
    "AuthenticationError",
    "Authorization",
    "CardError",
    "ClientSettings",
    "ConfigurationError",
    "DecodingError",
    "IdempotencyError",
    "InvalidReferenceError",
    "InvalidRequestError",
    "ListObject",
    "RateLimitError",
    "RequestOptions",
    "StripeClient",
    "StripeIssuingError",
    "StructuredError",
    "TransportError",
    "coerce_ids",
    "resolve_id",
]
