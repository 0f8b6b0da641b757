"""Shared fixtures: settings, a recording mock transport and a client on top."""

from __future__ import annotations

from collections.abc import Callable
from urllib.parse import parse_qsl

import httpx
import pytest

from stripe_issuing import StripeClient
from stripe_issuing.adapters.http_client import HttpxSender, build_async_client
from stripe_issuing.core.config import ClientSettings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def anyio_backend():
    """Run async tests on asyncio only."""
    return "asyncio"


class RecordingAPI:
    """Mock API: records every request and answers through `handler`."""

    def __init__(self, handler: Handler | None = None) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Handler = handler or (lambda request: httpx.Response(200, json={}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> dict[str, str]:
        return dict(parse_qsl(self.last.content.decode("ascii")))

    def last_query(self) -> dict[str, str]:
        return dict(self.last.url.params)


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(
        _env_file=None,
        api_key="sk_test_default",
        api_version="2019-12-03",
        base_url="https://api.stripe.test/v1/",
    )


@pytest.fixture
def api() -> RecordingAPI:
    return RecordingAPI()


@pytest.fixture
def sender(settings: ClientSettings, api: RecordingAPI) -> HttpxSender:
    return HttpxSender(build_async_client(settings, transport=httpx.MockTransport(api)))


@pytest.fixture
def client(settings: ClientSettings, sender: HttpxSender) -> StripeClient:
    return StripeClient(settings, sender=sender)
