"""Encoding of Python strings, integers, lists and dicts as bencode text."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

logger = logging.getLogger(__name__)


def encode_string(value: str) -> str:
    """Encode *value* with its UTF-8 byte length; an empty string encodes as ''."""
    if not value:
        return ""
    return f"{len(value.encode('utf-8'))}:{value}"


def encode_integer(value: int) -> str:
    """Encode *value* as a bencode integer."""
    return f"i{value:d}e"


def _encode_value(value: Any) -> str | None:
    """Encode one element, or return None if its type is not supported."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (list, tuple)):
        return encode_list(value)
    if isinstance(value, int):
        return encode_integer(value)
    if isinstance(value, str):
        return encode_string(value)
    if isinstance(value, Mapping):
        if all(isinstance(key, str) for key in value):
            return encode_dict(value)
        return None
    return None


def encode_list(items: Sequence[Any]) -> str:
    """Encode a sequence as a bencode list, skipping unsupported elements.

    A single-element sequence encodes as an empty list.
    """
    if len(items) == 1:
        return "le"

    parts = ["l"]
    for item in items:
        encoded = _encode_value(item)
        if encoded is None:
            logger.warning("cannot process element: %r", item)
            continue
        parts.append(encoded)
    parts.append("e")
    return "".join(parts)


def encode_dict(mapping: Mapping[str, Any]) -> str:
    """Encode a mapping as a bencode dict with sorted keys, skipping unsupported values."""
    if not mapping:
        return "de"

    parts = ["d"]
    for key in sorted(mapping):
        value = mapping[key]
        encoded = _encode_value(value)
        if encoded is None:
            logger.warning("cannot process element: [%s] : %r", key, value)
            continue
        parts.append(encode_string(key))
        parts.append(encoded)
    parts.append("e")
    return "".join(parts)