"""Domain values returned by the API.

Why:
- Pure, frozen data structures (Pydantic v2).
- The domain knows nothing about HTTP or encoding: only the resources' shapes.
"""

from stripe_issuing.core.domain.issuing import (
    Authorization,
    BalanceTransaction,
    Card,
    Cardholder,
    MerchantData,
    PendingRequest,
    RequestHistory,
    Transaction,
    VerificationData,
)
from stripe_issuing.core.domain.models import (
    Expandable,
    ListObject,
    Metadata,
    StripeObject,
    StripeRecord,
)

__all__ = [
    "Authorization",
    "BalanceTransaction",
    "Card",
    "Cardholder",
    "Expandable",
    "ListObject",
    "MerchantData",
    "Metadata",
    "PendingRequest",
    "RequestHistory",
    "StripeObject",
    "StripeRecord",
    "Transaction",
    "VerificationData",
]
