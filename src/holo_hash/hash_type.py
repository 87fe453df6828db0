"""HashType registry: which kind of entity a HoloHash names."""
from __future__ import annotations

import enum
from typing import Iterable, Iterator, Union

from . import protocol
from .errors import UnknownHashType


# Duplicate values would silently alias two types onto one prefix.
# enum.unique turns that into an import-time failure.
@enum.unique
class HashType(enum.Enum):
    """Concrete hash types. The value is the 3-byte wire prefix."""

    AGENT = protocol.PREFIX_AGENT
    ENTRY = protocol.PREFIX_ENTRY
    NET_ID = protocol.PREFIX_NET_ID
    DHT_OP = protocol.PREFIX_DHT_OP
    HEADER = protocol.PREFIX_HEADER
    WASM = protocol.PREFIX_WASM
    DNA = protocol.PREFIX_DNA

    @property
    def prefix(self) -> bytes:
        return self.value

    @property
    def hash_name(self) -> str:
        return _HASH_NAMES[self]


_HASH_NAMES = {
    HashType.AGENT: "AgentPubKey",
    HashType.ENTRY: "EntryHash",
    HashType.NET_ID: "NetIdHash",
    HashType.DHT_OP: "DhtOpHash",
    HashType.HEADER: "HeaderHash",
    HashType.WASM: "WasmHash",
    HashType.DNA: "DnaHash",
}

_BY_PREFIX = {t.value: t for t in HashType}


def _check_registry() -> None:
    for t in HashType:
        if len(t.value) != protocol.PREFIX_LEN:
            raise RuntimeError(f"FATAL: prefix for {t.name} is not {protocol.PREFIX_LEN} bytes")
        if t not in _HASH_NAMES:
            raise RuntimeError(f"FATAL: {t.name} has no display name")


_check_registry()


def prefix(hash_type: HashType) -> bytes:
    """Return the registered 3-byte prefix for ``hash_type``."""
    return hash_type.value


def from_prefix(buf: bytes) -> HashType:
    """Look up the concrete type owning the 3-byte ``buf``."""
    key = bytes(buf)
    t = _BY_PREFIX.get(key)
    if t is None:
        raise UnknownHashType(f"Unknown hash type prefix {key.hex()!r}")
    return t


class CompositeHashType:
    """A wildcard that matches several concrete types.

    Hashes addressed through a composite keep the prefix of their concrete
    type; the composite only decides which prefixes are acceptable.
    """

    __slots__ = ("name", "members")

    def __init__(self, name: str, members: Iterable[HashType]):
        members = frozenset(members)
        if not members:
            raise ValueError(f"Composite hash type {name} has no members")
        for m in members:
            if not isinstance(m, HashType):
                raise TypeError(f"Composite member {m!r} is not a HashType")
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "members", members)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def matches(self, hash_type: HashType) -> bool:
        return hash_type in self.members

    def __contains__(self, hash_type: object) -> bool:
        return hash_type in self.members

    def __iter__(self) -> Iterator[HashType]:
        return iter(sorted(self.members, key=lambda t: t.value))

    def from_prefix(self, buf: bytes) -> HashType:
        t = from_prefix(buf)
        if t not in self.members:
            raise UnknownHashType(f"{t.hash_name} is not a member of {self.name}")
        return t

    def __repr__(self) -> str:
        inner = ", ".join(t.name for t in self)
        return f"CompositeHashType({self.name}: {inner})"


ANY_DHT = CompositeHashType("AnyDhtHash", [HashType.ENTRY, HashType.HEADER])
ANY_LINKABLE = CompositeHashType(
    "AnyLinkableHash", [HashType.ENTRY, HashType.HEADER, HashType.AGENT]
)

COMPOSITES = (ANY_DHT, ANY_LINKABLE)

HashTypeLike = Union[HashType, CompositeHashType]


def matches(expected: HashTypeLike, hash_type: HashType) -> bool:
    """True when ``hash_type`` satisfies ``expected`` (concrete or composite)."""
    if isinstance(expected, CompositeHashType):
        return expected.matches(hash_type)
    return expected is hash_type


def resolve(name: str) -> HashTypeLike:
    """Find a type by enum name (``entry``) or display name (``EntryHash``)."""
    key = name.strip().lower().replace("-", "_")
    for t in HashType:
        if key in (t.name.lower(), t.hash_name.lower()):
            return t
    for c in COMPOSITES:
        if key == c.name.lower():
            return c
    raise UnknownHashType(f"Unknown hash type name {name!r}")


__all__ = [
    "HashType",
    "CompositeHashType",
    "ANY_DHT",
    "ANY_LINKABLE",
    "COMPOSITES",
    "HashTypeLike",
    "prefix",
    "from_prefix",
    "matches",
    "resolve",
]
