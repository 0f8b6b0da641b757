"""httpx wrapper: the default HTTP collaborator.

Why a wrapper:
- Standardises timeouts, connection retries and base headers in one place.
- Translates httpx failures into `TransportError` (no usable response) or
  `DecodingError` (undecodable body), so the pipeline never sees httpx
  exceptions.
- Easy to test: pass an `httpx.MockTransport` instead of the network.
"""

from __future__ import annotations

import httpx

from stripe_issuing.core.config import ClientSettings
from stripe_issuing.core.errors import DecodingError, TransportError
from stripe_issuing.core.interfaces.http import RawResponse


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with the client's defaults.

    Connection-level retries are configured on the transport; the pipeline
    itself never retries.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    if transport is None:
        transport = httpx.AsyncHTTPTransport(retries=settings.max_network_retries)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


class HttpxSender:
    """`HTTPSender` backed by an `httpx.AsyncClient`."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: ClientSettings | None = None,
    ) -> None:
        self._client = client or build_async_client(settings)

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> RawResponse:
        try:
            response = await self._client.request(method, url, headers=headers, content=body)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request timed out: {exc}", method=method, url=url) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"Network error: {exc}", method=method, url=url) from exc
        except httpx.DecodingError as exc:
            # Body arrived but its Content-Encoding could not be undone.
            raise DecodingError(f"Could not decode response body: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Request failed: {exc}", method=method, url=url) from exc

        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpxSender:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
