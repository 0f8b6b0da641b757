"""Client configuration.

Why here:
- Centralises environment variables (pydantic-settings) in one contract that
  the dispatcher and the HTTP adapter read the same way.
- Process-wide defaults live in `ClientSettings`; every public operation can
  override them with a `RequestOptions` value. Nothing here is mutated at
  call time.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from stripe_issuing import __version__
from stripe_issuing.core.errors import RequestConfigurationError

DEFAULT_API_VERSION = "2019-12-03"
DEFAULT_BASE_URL = "https://api.stripe.com/v1/"


class ClientSettings(BaseSettings):
    """Process-wide defaults for the client.

    Why pydantic-settings:
    - Typed and validated at the edge (env vars, `.env`) without leaking
      parsing logic into the pipeline.
    - A single snapshot that is read, never written, by each request.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRIPE_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        frozen=True,
    )

    api_key: str | None = Field(
        default=None,
        description="Secret API key sent as a bearer token.",
    )
    api_version: str = Field(
        default=DEFAULT_API_VERSION,
        min_length=1,
        description="Value of the Stripe-Version header.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="API root; endpoints are joined onto it.",
    )
    http_timeout_seconds: float = Field(
        default=80.0,
        gt=0,
        description="Timeout per request (seconds), enforced by the HTTP client.",
    )
    max_network_retries: int = Field(
        default=0,
        ge=0,
        le=10,
        description="Connection-level retries performed by the HTTP transport.",
    )
    user_agent: str = Field(
        default=f"stripe-issuing-python/{__version__}",
        min_length=1,
        description="User-Agent sent with every request.",
    )

    def resolve(self, options: RequestOptions | None = None) -> ResolvedOptions:
        """Merge per-call overrides over the defaults."""

        options = options or RequestOptions()
        return ResolvedOptions(
            api_key=options.api_key or self.api_key,
            api_version=options.api_version or self.api_version,
            base_url=options.base_url or self.base_url,
            idempotency_key=options.idempotency_key,
            connect_account=options.connect_account,
        )


class RequestOptions(BaseModel):
    """Per-call overrides accepted by every public operation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str | None = None
    api_version: str | None = None
    base_url: str | None = None
    idempotency_key: str | None = None
    connect_account: str | None = Field(
        default=None,
        description="Connected account id, sent as the Stripe-Account header.",
    )
    expand: tuple[str, ...] = Field(
        default=(),
        description="Extra expansions requested for this call only.",
    )

    @classmethod
    def coerce(cls, value: RequestOptions | Mapping[str, Any] | None) -> RequestOptions:
        if value is None:
            return cls()
        if isinstance(value, RequestOptions):
            return value
        try:
            return cls.model_validate(dict(value))
        except ValidationError as exc:
            fields = ", ".join(".".join(map(str, err["loc"])) for err in exc.errors())
            raise RequestConfigurationError(f"Invalid request options: {fields}") from exc


@dataclass(frozen=True)
class ResolvedOptions:
    """Effective options for one dispatch (defaults + overrides)."""

    api_key: str | None
    api_version: str
    base_url: str
    idempotency_key: str | None = None
    connect_account: str | None = None
