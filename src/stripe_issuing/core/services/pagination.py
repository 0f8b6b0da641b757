"""Cursor pagination over list endpoints."""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Mapping
from typing import Any, TypeVar

from stripe_issuing.core.domain.models import ListObject, StripeObject
from stripe_issuing.core.ids import resolve_id

T = TypeVar("T", bound=StripeObject)

FetchPage = Callable[[dict[str, Any]], Awaitable[ListObject[T]]]


async def auto_paging_iter(
    fetch_page: FetchPage[T],
    params: Mapping[str, Any] | None = None,
) -> AsyncIterator[T]:
    """Yield every element of a collection, one page at a time.

    Pages forward with `starting_after` set to the last element's id. When the
    caller started with `ending_before`, pages backward instead, using the
    first element's id. Stops once `has_more` is false, a page is empty, or
    the server hands back the cursor it was just given.
    """

    params = dict(params or {})
    backwards = params.get("ending_before") is not None and params.get("starting_after") is None

    while True:
        page = await fetch_page(params)
        items = page.data
        if backwards:
            for item in reversed(items):
                yield item
        else:
            for item in items:
                yield item

        if not page.has_more or not items:
            return
        key = "ending_before" if backwards else "starting_after"
        cursor = resolve_id(items[0] if backwards else items[-1])
        if cursor == params.get(key):
            return
        params[key] = cursor
