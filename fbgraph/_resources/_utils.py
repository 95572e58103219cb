"""Shared helpers for resource modules."""

from collections.abc import Iterable
from typing import Any


def _build_params(fields: Iterable[str] | str | None = None, **kwargs: Any) -> dict:
    """Build query params dict, omitting None values and joining ``fields`` with commas."""
    params = {k: v for k, v in kwargs.items() if v is not None}
    if fields:
        params["fields"] = fields if isinstance(fields, str) else ",".join(fields)
    return params
