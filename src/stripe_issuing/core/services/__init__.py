"""Request pipeline: build -> dispatch -> cast."""

from stripe_issuing.core.services.caster import cast
from stripe_issuing.core.services.dispatcher import Dispatcher
from stripe_issuing.core.services.pagination import auto_paging_iter
from stripe_issuing.core.services.pipeline import make_request
from stripe_issuing.core.services.request import Method, Request

__all__ = [
    "Dispatcher",
    "Method",
    "Request",
    "auto_paging_iter",
    "cast",
    "make_request",
]
