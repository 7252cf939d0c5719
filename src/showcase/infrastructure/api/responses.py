"""Helpers that pull listings out of the API's loosely shaped responses.

Listing endpoints wrap their payload as ``{"data": {"<entity>": [...],
"total": N}}`` but older deployments answer with the bare list, so the
extraction falls back step by step instead of insisting on one shape.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from showcase.errors import MalformedResponseError


def _data_block(body: Any) -> Mapping[str, Any]:
    if isinstance(body, Mapping):
        data = body.get("data")
        if isinstance(data, Mapping):
            return data
    return {}


def extract_items(body: Any, key: str) -> List[Mapping[str, Any]]:
    """Return the records listed under ``data.<key>``, or the body itself when it is a list."""
    nested = _data_block(body).get(key)
    if nested is not None:
        records = nested
    elif isinstance(body, list):
        records = body
    else:
        return []

    if not isinstance(records, list):
        raise MalformedResponseError(f"Expected a list under '{key}', got {type(records).__name__}")
    for record in records:
        if not isinstance(record, Mapping):
            raise MalformedResponseError(f"Expected records under '{key}' to be objects")
    return list(records)


def extract_total(body: Any, items: List[Any]) -> int:
    """Return ``data.total``, falling back to the number of returned items when absent or zero."""
    total = _data_block(body).get("total")
    if not total:
        return len(items)
    if isinstance(total, bool):
        raise MalformedResponseError("Total count must be a number")
    try:
        value = int(total)
    except (TypeError, ValueError) as exc:
        raise MalformedResponseError(f"Total count {total!r} is not a number") from exc
    if value < 0:
        raise MalformedResponseError(f"Total count {value} is negative")
    return value


__all__ = ["extract_items", "extract_total"]
