"""Form/query encoding of nested parameters.

The API reads nested values with bracket notation:

- mappings:  `metadata[order_id]=6735`, `created[gte]=1577836800`
- sequences: `expand[0]=card&expand[1]=cardholder`
- booleans:  `true` / `false`

`None` values are dropped; datetimes are sent as unix seconds.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from datetime import datetime
from enum import Enum
from typing import Any
from urllib.parse import urlencode


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return str(int(value.timestamp()))
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def flatten_params(params: Mapping[str, Any], prefix: str | None = None) -> Iterator[tuple[str, str]]:
    """Yield `(key, value)` pairs in bracket notation, preserving order."""

    for name, value in params.items():
        key = f"{prefix}[{name}]" if prefix else str(name)
        yield from _flatten_value(key, value)


def _flatten_value(key: str, value: Any) -> Iterator[tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        yield from flatten_params(value, key)
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        for index, item in enumerate(value):
            yield from _flatten_value(f"{key}[{index}]", item)
    else:
        yield key, _scalar(value)


def encode_params(params: Mapping[str, Any]) -> str:
    """Encode `params` as an `application/x-www-form-urlencoded` string."""

    return urlencode(list(flatten_params(params)))
