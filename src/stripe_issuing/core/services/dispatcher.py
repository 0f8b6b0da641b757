"""Turns a complete `Request` into exactly one HTTP exchange."""

from __future__ import annotations

import logging
import time
import uuid

from stripe_issuing.adapters.form_encoding import encode_params
from stripe_issuing.adapters.http_client import HttpxSender
from stripe_issuing.core.config import ClientSettings, ResolvedOptions
from stripe_issuing.core.errors import ConfigurationError, TransportError
from stripe_issuing.core.interfaces.http import HTTPSender, RawResponse
from stripe_issuing.core.services.request import Request

logger = logging.getLogger(__name__)


class Dispatcher:
    """Sends requests through an `HTTPSender` using the client's defaults.

    One call to `dispatch` is one network attempt. Retries and timeouts are
    the sender's business and reach the caller as `TransportError`.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        sender: HTTPSender | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self.sender = sender or HttpxSender(settings=self.settings)

    async def aclose(self) -> None:
        """Close the sender if it holds an httpx client."""

        if isinstance(self.sender, HttpxSender):
            await self.sender.aclose()

    def build_url(self, request: Request, options: ResolvedOptions) -> str:
        return f"{options.base_url.rstrip('/')}/{request.endpoint}"

    def build_headers(self, request: Request, options: ResolvedOptions) -> dict[str, str]:
        if not options.api_key:
            raise ConfigurationError(
                "No API key provided. Set STRIPE_API_KEY or pass api_key in the request options."
            )
        headers = {
            "Authorization": f"Bearer {options.api_key}",
            "Stripe-Version": options.api_version,
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }
        if options.connect_account:
            headers["Stripe-Account"] = options.connect_account
        if request.method is not None and request.method.sends_body:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            headers["Idempotency-Key"] = options.idempotency_key or str(uuid.uuid4())
        return headers

    async def dispatch(self, request: Request) -> RawResponse:
        method = request.validate()

        options = self.settings.resolve(request.options)
        headers = self.build_headers(request, options)
        url = self.build_url(request, options)
        encoded = encode_params(request.wire_params())

        body: bytes | None = None
        if method.sends_body:
            body = encoded.encode("ascii")
        elif encoded:
            url = f"{url}?{encoded}"

        started = time.perf_counter()
        try:
            raw = await self.sender.send(method.value, url, headers, body)
        except TransportError as exc:
            logger.warning("%s %s failed: %s", method.value, url, exc.message)
            raise
        logger.debug(
            "%s %s -> %s (request_id=%s, %.0f ms)",
            method.value,
            url,
            raw.status_code,
            raw.request_id,
            (time.perf_counter() - started) * 1000,
        )
        return raw
