"""DHT location derivation.

The location is a 4-byte XOR fold of the 32-byte digest: output byte ``i``
is the XOR of digest bytes ``i, i+4, ..., i+28``. It is read as a
little-endian u32 whenever it is compared or used as a ring coordinate.
"""
from __future__ import annotations

from . import protocol
from .errors import InvalidDigestLength


def dht_location(digest: bytes) -> bytes:
    """Fold a 32-byte digest down to its 4-byte DHT location."""
    if len(digest) != protocol.DIGEST_LEN:
        raise InvalidDigestLength(
            f"Digest must be {protocol.DIGEST_LEN} bytes, got {len(digest)}"
        )
    out = bytearray(protocol.LOCATION_LEN)
    for i, b in enumerate(digest):
        out[i % protocol.LOCATION_LEN] ^= b
    return bytes(out)


def location_to_u32(loc: bytes) -> int:
    if len(loc) != protocol.LOCATION_LEN:
        raise ValueError(f"Location must be {protocol.LOCATION_LEN} bytes, got {len(loc)}")
    return int.from_bytes(loc, protocol.LOCATION_BYTE_ORDER)


def u32_to_location(value: int) -> bytes:
    if not 0 <= value < protocol.LOCATION_SPACE:
        raise ValueError(f"Location {value} outside the u32 range")
    return value.to_bytes(protocol.LOCATION_LEN, protocol.LOCATION_BYTE_ORDER)


def location_distance(a: int, b: int) -> int:
    """Shortest distance between two u32 locations on the wrapping ring."""
    d = (a - b) % protocol.LOCATION_SPACE
    return min(d, protocol.LOCATION_SPACE - d)


__all__ = ["dht_location", "location_to_u32", "u32_to_location", "location_distance"]
