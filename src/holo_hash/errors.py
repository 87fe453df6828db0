"""Typed failures for every HoloHash operation.

All of these are deterministic: the operations are pure functions of their
input, so repeating a failed call can never succeed.
"""
from __future__ import annotations


class HoloHashError(ValueError):
    """Base class. ``code`` is stable and safe to put in machine output."""

    code = "E_HOLO_HASH"


class UnknownHashType(HoloHashError):
    code = "E_UNKNOWN_HASH_TYPE"


class InvalidDigestLength(HoloHashError):
    code = "E_DIGEST_LENGTH"


class WrongLength(HoloHashError):
    code = "E_WRONG_LENGTH"


class MalformedEncoding(HoloHashError):
    code = "E_MALFORMED_ENCODING"


class UnsupportedEncodingVersion(HoloHashError):
    code = "E_ENCODING_VERSION"


class LocationMismatch(HoloHashError):
    code = "E_LOCATION_MISMATCH"


class SerializationError(HoloHashError):
    code = "E_SERIALIZATION"


__all__ = [
    "HoloHashError",
    "UnknownHashType",
    "InvalidDigestLength",
    "WrongLength",
    "MalformedEncoding",
    "UnsupportedEncodingVersion",
    "LocationMismatch",
    "SerializationError",
]
