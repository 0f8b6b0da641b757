"""Resource bindings (one module per resource kind).

Why a package:
- Each module declares one resource's endpoint root, shape and operations.
- Every binding subclasses `ResourceBinding` and shares its pipeline.
"""

from stripe_issuing.adapters.resources.base import ResourceBinding
from stripe_issuing.adapters.resources.issuing_authorizations import IssuingAuthorizations

__all__ = [
    "IssuingAuthorizations",
    "ResourceBinding",
]
