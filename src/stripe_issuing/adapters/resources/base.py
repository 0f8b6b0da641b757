"""Base class for resource bindings.

A binding only declares its endpoint root, its shape and which operations it
offers; request assembly, dispatch and casting are shared here.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Any, ClassVar, Generic, TypeVar, Union
from urllib.parse import quote

from stripe_issuing.core.config import ClientSettings, RequestOptions
from stripe_issuing.core.domain.models import ListObject, StripeObject
from stripe_issuing.core.ids import resolve_id
from stripe_issuing.core.interfaces.http import HTTPSender
from stripe_issuing.core.services.dispatcher import Dispatcher
from stripe_issuing.core.services.pagination import auto_paging_iter
from stripe_issuing.core.services.pipeline import make_request
from stripe_issuing.core.services.request import Method, Request

R = TypeVar("R", bound=StripeObject)
B = TypeVar("B", bound="ResourceBinding[Any]")

Options = Union[RequestOptions, Mapping[str, Any], None]


class ResourceBinding(Generic[R]):
    """Operations on one API resource kind."""

    plural_endpoint: ClassVar[str]
    shape: ClassVar[type[StripeObject]]
    default_expansions: ClassVar[tuple[str, ...]] = ()
    # List parameters that accept a resource value and are sent as its id.
    list_cast_to_id: ClassVar[frozenset[str]] = frozenset({"ending_before", "starting_after"})

    def __init__(
        self,
        dispatcher: Dispatcher | None = None,
        *,
        settings: ClientSettings | None = None,
        sender: HTTPSender | None = None,
    ) -> None:
        self._dispatcher = dispatcher or Dispatcher(settings, sender)

    async def aclose(self) -> None:
        """Close the HTTP client behind this binding's dispatcher."""

        await self._dispatcher.aclose()

    async def __aenter__(self: B) -> B:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def instance_endpoint(self, id_or_resource: str | R, *actions: str) -> str:
        """`{root}/{id}[/{action}...]`, with the id resolved first."""

        parts = [self.plural_endpoint, quote(resolve_id(id_or_resource), safe="")]
        parts.extend(actions)
        return "/".join(parts)

    def new_request(self, options: Options = None) -> Request:
        return Request.new(options).add_expansions(self.default_expansions)

    async def _retrieve(self, id_or_resource: str | R, options: Options = None) -> R:
        request = (
            self.new_request(options)
            .set_endpoint(self.instance_endpoint(id_or_resource))
            .set_method(Method.GET)
        )
        return await make_request(request, self.shape, self._dispatcher)

    async def _update(
        self,
        id_or_resource: str | R,
        params: Mapping[str, Any] | None,
        options: Options = None,
    ) -> R:
        request = (
            self.new_request(options)
            .set_endpoint(self.instance_endpoint(id_or_resource))
            .set_method(Method.POST)
            .set_params(params)
        )
        return await make_request(request, self.shape, self._dispatcher)

    async def _action(
        self,
        id_or_resource: str | R,
        action: str,
        params: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> R:
        request = (
            self.new_request(options)
            .set_endpoint(self.instance_endpoint(id_or_resource, action))
            .set_method(Method.POST)
            .set_params(params)
        )
        return await make_request(request, self.shape, self._dispatcher)

    async def _list(
        self,
        params: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> ListObject[R]:
        request = (
            self.new_request(options)
            .prefix_expansions()
            .set_endpoint(self.plural_endpoint)
            .set_method(Method.GET)
            .set_params(params)
            .with_cast_to_id(self.list_cast_to_id)
        )
        return await make_request(request, ListObject[self.shape], self._dispatcher)  # type: ignore[name-defined]

    def _auto_paging_iter(
        self,
        params: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> AsyncIterator[R]:
        async def fetch_page(page_params: dict[str, Any]) -> ListObject[R]:
            return await self._list(page_params, options)

        return auto_paging_iter(fetch_page, params)
