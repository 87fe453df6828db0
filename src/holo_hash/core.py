"""HoloHash: the 39-byte type-tagged, location-carrying identifier."""
from __future__ import annotations

import functools
from typing import Optional

from . import protocol
from .encode import decode_full_bytes, encode_full_bytes
from .errors import InvalidDigestLength, LocationMismatch, UnknownHashType, WrongLength
from .hash_type import HashType, HashTypeLike, from_prefix, matches
from .location import dht_location, location_to_u32

_BYTES_LIKE = (bytes, bytearray, memoryview)


def _restore(buf: bytes) -> "HoloHash":
    # Trusted: pickle only ever replays bytes this process type produced.
    return HoloHash.from_full_bytes(buf, trusted=True)


@functools.total_ordering
class HoloHash:
    """Immutable ``prefix || digest || location`` value.

    Equality, hashing and ordering are over the full 39 bytes. Since the
    location is derived from the digest, that is (type, digest) equality.
    """

    __slots__ = ("_bytes", "_hash_type")

    def __init__(self, full: bytes, hash_type: HashType):
        # Checks layout only; from_full_bytes also verifies the location.
        if not isinstance(full, _BYTES_LIKE) or len(full) != protocol.FULL_LEN:
            raise WrongLength(f"HoloHash must be {protocol.FULL_LEN} bytes")
        if not isinstance(hash_type, HashType):
            raise UnknownHashType(f"{hash_type!r} is not a concrete HashType")
        if bytes(full[: protocol.PREFIX_LEN]) != hash_type.prefix:
            raise UnknownHashType(f"Prefix does not belong to {hash_type!r}")
        object.__setattr__(self, "_bytes", bytes(full))
        object.__setattr__(self, "_hash_type", hash_type)

    # -- construction ---------------------------------------------------

    @classmethod
    def from_raw_bytes_and_type(cls, digest: bytes, hash_type: HashType) -> "HoloHash":
        """Assemble a hash from a 32-byte digest, computing its location."""
        if not isinstance(hash_type, HashType):
            raise UnknownHashType(f"{hash_type!r} is not a concrete HashType")
        if not isinstance(digest, _BYTES_LIKE):
            raise InvalidDigestLength(f"Digest must be bytes, got {type(digest).__name__}")
        digest = bytes(digest)
        if len(digest) != protocol.DIGEST_LEN:
            raise InvalidDigestLength(
                f"Digest must be {protocol.DIGEST_LEN} bytes, got {len(digest)}"
            )
        return cls(hash_type.prefix + digest + dht_location(digest), hash_type)

    @classmethod
    def with_pre_hashed(cls, digest: bytes, hash_type: HashType) -> "HoloHash":
        """For keys that already are 32 uniformly random bytes (agent keys)."""
        return cls.from_raw_bytes_and_type(digest, hash_type)

    @classmethod
    def from_full_bytes(
        cls,
        buf: bytes,
        *,
        trusted: bool = False,
        expected: Optional[HashTypeLike] = None,
    ) -> "HoloHash":
        """Parse a 39-byte buffer.

        The embedded location is recomputed and checked unless ``trusted`` is
        set. Only pass ``trusted=True`` for bytes this library serialized
        itself and that never left the process.
        """
        if not isinstance(buf, _BYTES_LIKE):
            raise WrongLength(f"HoloHash must be {protocol.FULL_LEN} bytes, got {type(buf).__name__}")
        buf = bytes(buf)
        if len(buf) != protocol.FULL_LEN:
            raise WrongLength(f"HoloHash must be {protocol.FULL_LEN} bytes, got {len(buf)}")

        hash_type = from_prefix(buf[: protocol.PREFIX_LEN])
        if expected is not None and not matches(expected, hash_type):
            want = getattr(expected, "hash_name", None) or expected.name
            raise UnknownHashType(f"Expected {want}, got {hash_type.hash_name}")

        if not trusted:
            embedded = buf[protocol.LOCATION_START :]
            computed = dht_location(buf[protocol.DIGEST_START : protocol.LOCATION_START])
            if embedded != computed:
                raise LocationMismatch(
                    f"Embedded location {embedded.hex()} does not match digest location {computed.hex()}"
                )
        return cls(buf, hash_type)

    @classmethod
    def from_string(cls, text: str, expected: Optional[HashTypeLike] = None) -> "HoloHash":
        """Decode a text token. Text is always external, so always verified."""
        return cls.from_full_bytes(decode_full_bytes(text), expected=expected)

    # -- accessors ------------------------------------------------------

    @property
    def hash_type(self) -> HashType:
        return self._hash_type

    @property
    def prefix(self) -> bytes:
        return self._bytes[: protocol.PREFIX_LEN]

    @property
    def digest(self) -> bytes:
        return self._bytes[protocol.DIGEST_START : protocol.LOCATION_START]

    @property
    def location(self) -> bytes:
        return self._bytes[protocol.LOCATION_START :]

    @property
    def location_u32(self) -> int:
        return location_to_u32(self.location)

    def is_a(self, expected: HashTypeLike) -> bool:
        return matches(expected, self._hash_type)

    def to_bytes(self) -> bytes:
        return self._bytes

    def to_string(self) -> str:
        return encode_full_bytes(self._bytes)

    # -- value semantics ------------------------------------------------

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return protocol.FULL_LEN

    def __eq__(self, other):
        if not isinstance(other, HoloHash):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if not isinstance(other, HoloHash):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self._hash_type.hash_name}({self.to_string()})"

    def __reduce__(self):
        return (_restore, (self._bytes,))

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self


__all__ = ["HoloHash"]
