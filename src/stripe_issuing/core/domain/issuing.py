"""Issuing shapes: authorizations and the resources they reference.

`Authorization` is the complete shape. `Card`, `Cardholder`, `Transaction`
and `BalanceTransaction` only carry the fields an authorization consumer
reads; unknown keys are ignored, so they decode full payloads just as well.
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import Field

from stripe_issuing.core.domain.models import (
    Expandable,
    ListObject,
    Metadata,
    StripeObject,
    StripeRecord,
)


class MerchantData(StripeRecord):
    category: str | None = None
    city: str | None = None
    country: str | None = None
    name: str | None = None
    network_id: str | None = None
    postal_code: str | None = None
    state: str | None = None
    url: str | None = None


class PendingRequest(StripeRecord):
    amount: int | None = None
    currency: str | None = None
    is_amount_controllable: bool | None = None
    merchant_amount: int | None = None
    merchant_currency: str | None = None


class RequestHistory(StripeRecord):
    approved: bool | None = None
    authorized_amount: int | None = None
    authorized_currency: str | None = None
    created: int | None = None
    held_amount: int | None = None
    held_currency: str | None = None
    reason: str | None = None


class VerificationData(StripeRecord):
    address_line1_check: str | None = None
    address_zip_check: str | None = None
    cvc_check: str | None = None
    expiry_check: str | None = None


class Address(StripeRecord):
    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class Billing(StripeRecord):
    address: Address | None = None
    name: str | None = None


class Cardholder(StripeObject):
    object_name: ClassVar[str] = "issuing.cardholder"

    billing: Billing | None = None
    created: int | None = None
    email: str | None = None
    livemode: bool | None = None
    metadata: Metadata | None = None
    name: str | None = None
    phone_number: str | None = None
    status: str | None = None
    type: str | None = None


class Card(StripeObject):
    object_name: ClassVar[str] = "issuing.card"

    brand: str | None = None
    cardholder: Expandable[Cardholder] | None = None
    created: int | None = None
    currency: str | None = None
    exp_month: int | None = None
    exp_year: int | None = None
    last4: str | None = None
    livemode: bool | None = None
    metadata: Metadata | None = None
    name: str | None = None
    status: str | None = None
    type: str | None = None


class BalanceTransaction(StripeObject):
    object_name: ClassVar[str] = "balance_transaction"

    amount: int | None = None
    available_on: int | None = None
    created: int | None = None
    currency: str | None = None
    description: str | None = None
    fee: int | None = None
    net: int | None = None
    reporting_category: str | None = None
    source: str | None = None
    status: str | None = None
    type: str | None = None


class Transaction(StripeObject):
    object_name: ClassVar[str] = "issuing.transaction"

    amount: int | None = None
    authorization: Expandable[Authorization] | None = None
    balance_transaction: Expandable[BalanceTransaction] | None = None
    card: Expandable[Card] | None = None
    cardholder: Expandable[Cardholder] | None = None
    created: int | None = None
    currency: str | None = None
    livemode: bool | None = None
    merchant_amount: int | None = None
    merchant_currency: str | None = None
    merchant_data: MerchantData | None = None
    metadata: Metadata | None = None
    type: str | None = None


class Authorization(StripeObject):
    """An Issuing authorization: a card purchase awaiting approval.

    Status goes pending -> closed/reversed on the server; this client only
    observes it and asks for transitions through `approve`/`decline`.
    """

    object_name: ClassVar[str] = "issuing.authorization"
    updatable_fields: ClassVar[frozenset[str]] = frozenset({"metadata"})

    amount: int | None = None
    approved: bool | None = None
    authorization_method: str | None = None
    # The API returns these as bare arrays; older versions used list envelopes.
    balance_transactions: ListObject[BalanceTransaction] | list[BalanceTransaction] | None = None
    card: Expandable[Card] | None = None
    cardholder: Expandable[Cardholder] | None = None
    created: int | None = None
    currency: str | None = None
    livemode: bool | None = None
    merchant_amount: int | None = None
    merchant_currency: str | None = None
    merchant_data: MerchantData | None = None
    metadata: Metadata | None = Field(default=None, description="Caller-owned key/value pairs.")
    pending_request: PendingRequest | None = None
    request_history: ListObject[RequestHistory] | list[RequestHistory] | None = None
    status: str | None = None
    transactions: ListObject[Transaction] | list[Transaction] | None = None
    verification_data: VerificationData | None = None
    wallet: str | None = None


Transaction.model_rebuild()
Authorization.model_rebuild()
