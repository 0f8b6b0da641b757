"""Contract for the HTTP collaborator.

Why Protocol:
- The pipeline depends on a structural contract, not on httpx itself.
- Tests and callers can plug any sender (mocked transport, another client)
  without touching the dispatcher.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class RawResponse:
    """What came back from the wire, before any decoding."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def request_id(self) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == "request-id":
                return value
        return None

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


@runtime_checkable
class HTTPSender(Protocol):
    """Minimal contract for performing one HTTP exchange.

    Design rules:
    - `send` is asynchronous because it does network I/O.
    - Network-level failures are raised as `TransportError`; every obtained
      response, whatever its status, is returned. A body that cannot be
      read back (e.g. a broken Content-Encoding) is raised as `DecodingError`.
    - TLS, pooling, timeouts and connection retries are the sender's concern.
    """

    async def send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        body: bytes | None = None,
    ) -> RawResponse:
        ...
