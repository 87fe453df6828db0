import enum

import pytest

from holo_hash import ANY_DHT, ANY_LINKABLE, CompositeHashType, HashType, UnknownHashType
from holo_hash import from_prefix, prefix
from holo_hash import protocol
from holo_hash.hash_type import resolve


def test_prefix_bijection(hash_type):
    assert from_prefix(prefix(hash_type)) is hash_type
    assert len(prefix(hash_type)) == 3


def test_prefixes_are_pairwise_distinct():
    # __members__ includes aliases, which iterating the enum would hide.
    prefixes = [t.value for t in HashType.__members__.values()]
    assert len(HashType.__members__) == len(set(prefixes)) == len(list(HashType))


def test_duplicate_prefix_is_fatal():
    with pytest.raises(ValueError, match="duplicate"):

        @enum.unique
        class Clash(enum.Enum):
            A = protocol.PREFIX_AGENT
            B = protocol.PREFIX_AGENT


def test_registered_prefix_values():
    assert prefix(HashType.AGENT) == bytes([0x84, 0x20, 0x24])
    assert prefix(HashType.ENTRY) == bytes([0x84, 0x21, 0x24])
    assert prefix(HashType.DNA) == bytes([0x84, 0x2D, 0x24])
    assert prefix(HashType.HEADER) == bytes([0x84, 0x29, 0x24])


def test_unknown_prefix():
    with pytest.raises(UnknownHashType):
        from_prefix(b"\x00\x00\x00")
    with pytest.raises(UnknownHashType):
        from_prefix(b"\x84\x20")


def test_composite_membership():
    assert HashType.ENTRY in ANY_DHT
    assert HashType.HEADER in ANY_DHT
    assert HashType.AGENT not in ANY_DHT
    assert ANY_LINKABLE.matches(HashType.AGENT)
    assert list(ANY_DHT) == [HashType.ENTRY, HashType.HEADER]


def test_composite_from_prefix():
    assert ANY_DHT.from_prefix(prefix(HashType.ENTRY)) is HashType.ENTRY
    with pytest.raises(UnknownHashType):
        ANY_DHT.from_prefix(prefix(HashType.DNA))


def test_composite_rejects_bad_members():
    with pytest.raises(ValueError):
        CompositeHashType("Empty", [])
    with pytest.raises(TypeError):
        CompositeHashType("Bad", [b"\x84\x21\x24"])


def test_resolve_names():
    assert resolve("entry") is HashType.ENTRY
    assert resolve("AgentPubKey") is HashType.AGENT
    assert resolve("dht-op") is HashType.DHT_OP
    assert resolve("anydhthash") is ANY_DHT
    with pytest.raises(UnknownHashType):
        resolve("nope")


def test_composite_is_immutable():
    with pytest.raises(AttributeError):
        ANY_DHT.name = "Other"
    with pytest.raises(AttributeError):
        ANY_DHT.members = frozenset([HashType.AGENT])
    with pytest.raises(AttributeError):
        del ANY_LINKABLE.members
    assert ANY_DHT.name == "AnyDhtHash"
    assert list(ANY_DHT) == [HashType.ENTRY, HashType.HEADER]
