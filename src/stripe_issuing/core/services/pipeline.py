"""Drives a built `Request` through dispatch and casting."""

from __future__ import annotations

from typing import TypeVar

from stripe_issuing.core.services.caster import cast
from stripe_issuing.core.services.dispatcher import Dispatcher
from stripe_issuing.core.services.request import Request

T = TypeVar("T")


async def make_request(request: Request, shape: type[T], dispatcher: Dispatcher) -> T:
    """Dispatch `request` once and cast the response onto `shape`."""

    raw = await dispatcher.dispatch(request)
    return cast(raw, shape)
