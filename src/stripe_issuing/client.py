"""Client facade: one dispatcher shared by every binding."""

from __future__ import annotations

from stripe_issuing.adapters.resources import IssuingAuthorizations
from stripe_issuing.core.config import ClientSettings
from stripe_issuing.core.interfaces.http import HTTPSender
from stripe_issuing.core.services.dispatcher import Dispatcher


class StripeClient:
    """Entry point for callers.

    Holds the process-wide defaults (`ClientSettings`) and the HTTP sender;
    the bindings are stateless views over the same dispatcher.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        sender: HTTPSender | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self.dispatcher = Dispatcher(self.settings, sender)
        self.issuing_authorizations = IssuingAuthorizations(self.dispatcher)

    async def aclose(self) -> None:
        await self.dispatcher.aclose()

    async def __aenter__(self) -> StripeClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
