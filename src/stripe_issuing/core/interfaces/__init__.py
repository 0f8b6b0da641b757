"""Core interfaces.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- The pipeline depends on abstractions; adapters depend on the pipeline.
"""

from stripe_issuing.core.interfaces.http import HTTPSender, RawResponse

__all__ = ["HTTPSender", "RawResponse"]
