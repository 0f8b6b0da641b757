import httpx
import pytest

from stripe_issuing import StripeClient
from stripe_issuing.adapters.http_client import HttpxSender, build_async_client
from stripe_issuing.adapters.resources import IssuingAuthorizations
from stripe_issuing.core.interfaces.http import HTTPSender, RawResponse


def test_build_async_client_applies_settings(settings):
    client = build_async_client(settings, extra_headers={"X-Trace": "1"})

    assert client.timeout.read == settings.http_timeout_seconds
    assert client.headers["User-Agent"] == settings.user_agent
    assert client.headers["X-Trace"] == "1"


def test_sender_satisfies_the_protocol(sender):
    assert isinstance(sender, HTTPSender)


@pytest.mark.anyio
async def test_send_returns_the_raw_exchange(sender, api):
    api.handler = lambda request: httpx.Response(
        201, content=b'{"ok": true}', headers={"Request-Id": "req_42"}
    )

    raw = await sender.send("POST", "https://api.stripe.test/v1/x", {"A": "b"}, b"k=v")

    assert isinstance(raw, RawResponse)
    assert raw.status_code == 201
    assert raw.body == b'{"ok": true}'
    assert raw.request_id == "req_42"
    assert api.last.headers["A"] == "b"
    assert api.last.content == b"k=v"


@pytest.mark.anyio
async def test_client_closes_its_sender(settings):
    http = build_async_client(settings, transport=httpx.MockTransport(lambda r: httpx.Response(200)))

    async with StripeClient(settings, sender=HttpxSender(http)):
        assert not http.is_closed

    assert http.is_closed


@pytest.mark.anyio
async def test_binding_closes_the_client_it_was_given(settings):
    http = build_async_client(settings, transport=httpx.MockTransport(lambda r: httpx.Response(200)))

    async with IssuingAuthorizations(settings=settings, sender=HttpxSender(http)) as authorizations:
        assert isinstance(authorizations, IssuingAuthorizations)
        assert not http.is_closed

    assert http.is_closed
