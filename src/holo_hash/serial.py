"""Embedding HoloHashes in structured serialization formats.

Binary formats carry the 39 raw bytes, text formats carry the text token.
Nothing else is written alongside the hash.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, Optional, Union

from .core import HoloHash
from .errors import HoloHashError, SerializationError
from .hash_type import HashTypeLike
from .hashing import CANONICAL_JSON_KW


def to_serializable(h: HoloHash, binary: bool) -> Union[bytes, str]:
    return h.to_bytes() if binary else h.to_string()


def from_serializable(
    value: Union[bytes, bytearray, memoryview, str],
    expected: Optional[HashTypeLike] = None,
) -> HoloHash:
    """Inverse of ``to_serializable``; the mode is taken from the value type.

    Serialized data comes from outside, so the location is always verified.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return HoloHash.from_full_bytes(bytes(value), expected=expected)
    if isinstance(value, str):
        return HoloHash.from_string(value, expected=expected)
    raise SerializationError(f"Cannot read a HoloHash from {type(value).__name__}")


def json_default(obj: Any) -> str:
    """``json.dumps(default=json_default)`` hook."""
    if isinstance(obj, HoloHash):
        return obj.to_string()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dumps_json(obj: Any) -> str:
    """Canonical JSON with every HoloHash written as its text token."""
    try:
        return json.dumps(obj, default=json_default, **CANONICAL_JSON_KW)
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(str(e)) from e


def loads_json(text: str, keys: Iterable[str] = ()) -> Any:
    """Parse JSON, turning string values under ``keys`` back into HoloHashes."""
    wanted = frozenset(keys)

    def hook(d: dict) -> dict:
        for k in wanted.intersection(d):
            if isinstance(d[k], str):
                d[k] = HoloHash.from_string(d[k])
        return d

    try:
        return json.loads(text, object_hook=hook)
    except HoloHashError:
        raise
    except ValueError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e


__all__ = ["to_serializable", "from_serializable", "json_default", "dumps_json", "loads_json"]
