"""Binding: Issuing authorizations.

Retrieve, update, approve, decline and list authorizations.
API reference: https://stripe.com/docs/api/issuing/authorizations
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Any, ClassVar

from stripe_issuing.adapters.resources.base import Options, ResourceBinding
from stripe_issuing.core.domain.issuing import Authorization
from stripe_issuing.core.domain.models import ListObject


class IssuingAuthorizations(ResourceBinding[Authorization]):
    """Operations on `issuing/authorizations`.

    Parameters are passed through as given: limits, statuses and the
    whitelist of updatable fields are enforced by the API, not here.
    """

    plural_endpoint: ClassVar[str] = "issuing/authorizations"
    shape: ClassVar[type[Authorization]] = Authorization
    list_cast_to_id: ClassVar[frozenset[str]] = frozenset(
        {"card", "cardholder", "ending_before", "starting_after"}
    )

    async def retrieve(self, id: str | Authorization, options: Options = None) -> Authorization:
        """Retrieve an authorization."""

        return await self._retrieve(id, options)

    async def update(
        self,
        id: str | Authorization,
        params: Mapping[str, Any],
        options: Options = None,
    ) -> Authorization:
        """Update an authorization. Only `metadata` is updatable."""

        return await self._update(id, params, options)

    async def approve(
        self,
        id: str | Authorization,
        params: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> Authorization:
        """Approve a pending authorization, optionally with a `held_amount`."""

        return await self._action(id, "approve", params, options)

    async def decline(
        self,
        id: str | Authorization,
        params: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> Authorization:
        """Decline a pending authorization."""

        return await self._action(id, "decline", params, options)

    async def list(
        self,
        params: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> ListObject[Authorization]:
        """List authorizations, newest first.

        Filters: `status`, `created` (timestamp or `{gt, gte, lt, lte}`),
        `card`, `cardholder`. Pagination: `limit`, `starting_after`,
        `ending_before`. Card, cardholder and cursor values may be ids or
        resources.
        """

        return await self._list(params, options)

    def auto_paging_iter(
        self,
        params: Mapping[str, Any] | None = None,
        options: Options = None,
    ) -> AsyncIterator[Authorization]:
        """Iterate over every authorization matching `params`, across pages."""

        return self._auto_paging_iter(params, options)
