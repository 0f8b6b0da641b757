"""Server-shaped JSON payloads used across the tests."""

from __future__ import annotations

import copy
from typing import Any

_AUTHORIZATION: dict[str, Any] = {
    "id": "iauth_1",
    "object": "issuing.authorization",
    "amount": 1250,
    "approved": False,
    "authorization_method": "online",
    "balance_transactions": [],
    "card": "ic_1",
    "cardholder": "ich_1",
    "created": 1577836800,
    "currency": "usd",
    "livemode": False,
    "merchant_amount": 1250,
    "merchant_currency": "usd",
    "merchant_data": {
        "category": "taxicabs_limousines",
        "city": "San Francisco",
        "country": "US",
        "name": "Rocket Rides",
        "network_id": "1234567890",
        "postal_code": "94107",
        "state": "CA",
        "url": None,
    },
    "metadata": {"order_id": "6735"},
    "pending_request": {
        "amount": 1250,
        "currency": "usd",
        "is_amount_controllable": False,
        "merchant_amount": 1250,
        "merchant_currency": "usd",
    },
    "request_history": [],
    "status": "pending",
    "transactions": [],
    "verification_data": {
        "address_line1_check": "not_provided",
        "address_zip_check": "match",
        "cvc_check": "match",
        "expiry_check": "match",
    },
    "wallet": None,
}

CARD: dict[str, Any] = {
    "id": "ic_1",
    "object": "issuing.card",
    "brand": "Visa",
    "cardholder": {
        "id": "ich_1",
        "object": "issuing.cardholder",
        "name": "Jenny Rosen",
        "email": "jenny@example.com",
        "type": "individual",
        "status": "active",
    },
    "currency": "usd",
    "exp_month": 8,
    "exp_year": 2030,
    "last4": "4242",
    "status": "active",
    "type": "virtual",
}


def authorization(**overrides: Any) -> dict[str, Any]:
    payload = copy.deepcopy(_AUTHORIZATION)
    payload.update(overrides)
    return payload


def list_page(data: list[dict[str, Any]], *, has_more: bool = False) -> dict[str, Any]:
    return {
        "object": "list",
        "data": data,
        "has_more": has_more,
        "url": "/v1/issuing/authorizations",
    }


def error(error_type: str, message: str, **extra: Any) -> dict[str, Any]:
    return {"error": {"type": error_type, "message": message, **extra}}
