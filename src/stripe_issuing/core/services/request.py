"""Request descriptor and its builder.

A `Request` is a frozen value: every builder step returns a new one, so a
partially built request can be shared or reused without surprises. Bindings
chain the steps and hand the result to `make_request`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from stripe_issuing.core.config import RequestOptions
from stripe_issuing.core.errors import RequestConfigurationError
from stripe_issuing.core.ids import coerce_ids


class Method(str, Enum):
    """HTTP methods used by the API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        return self is Method.POST


def _merge_unique(*groups: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for group in groups:
        for item in group:
            if item not in seen:
                seen.add(item)
                out.append(item)
    return out


@dataclass(frozen=True)
class Request:
    """Everything needed to perform one API call."""

    options: RequestOptions = field(default_factory=RequestOptions)
    endpoint: str | None = None
    method: Method | None = None
    params: Mapping[str, Any] = field(default_factory=dict)
    expansions: tuple[str, ...] = ()
    cast_to_id: frozenset[str] = frozenset()

    @classmethod
    def new(cls, options: RequestOptions | Mapping[str, Any] | None = None) -> Request:
        return cls(options=RequestOptions.coerce(options))

    def set_endpoint(self, path: str) -> Request:
        return dataclasses.replace(self, endpoint=path.lstrip("/"))

    def set_method(self, method: Method | str) -> Request:
        try:
            resolved = Method(method.upper() if isinstance(method, str) else method)
        except ValueError:
            raise RequestConfigurationError(f"Unsupported HTTP method: {method!r}") from None
        return dataclasses.replace(self, method=resolved)

    def set_params(self, params: Mapping[str, Any] | None) -> Request:
        """Merge `params` over the parameters already set."""

        if not params:
            return self
        return dataclasses.replace(self, params={**self.params, **params})

    def add_expansions(self, defaults: Iterable[str]) -> Request:
        """Register expansions a resource kind always requests."""

        return dataclasses.replace(
            self, expansions=tuple(_merge_unique(self.expansions, defaults))
        )

    def prefix_expansions(self) -> Request:
        """Point per-call and default expansions at each element of a list response."""

        def prefixed(paths: Iterable[str]) -> tuple[str, ...]:
            return tuple(path if path.startswith("data.") else f"data.{path}" for path in paths)

        return dataclasses.replace(
            self,
            options=self.options.model_copy(update={"expand": prefixed(self.options.expand)}),
            expansions=prefixed(self.expansions),
        )

    def with_cast_to_id(self, fields: Iterable[str]) -> Request:
        """Declare parameters whose resource values are sent as bare ids."""

        return dataclasses.replace(self, cast_to_id=self.cast_to_id | frozenset(fields))

    def validate(self) -> Method:
        """Check the request can be dispatched and return its method."""

        if not self.endpoint:
            raise RequestConfigurationError("Request has no endpoint")
        if self.method is None:
            raise RequestConfigurationError("Request has no method")
        return self.method

    def wire_params(self) -> dict[str, Any]:
        """Parameters as they go on the wire.

        Resource values under `cast_to_id` become ids, and the caller's
        `expand` entries are merged with per-call and default expansions
        without duplicates (caller order first).
        """

        params = coerce_ids(self.params, self.cast_to_id)
        requested = params.get("expand") or ()
        if isinstance(requested, str):
            requested = (requested,)
        expand = _merge_unique(requested, self.options.expand, self.expansions)
        if expand:
            params["expand"] = expand
        return params
