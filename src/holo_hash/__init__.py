"""HoloHash - type-tagged, content-addressed DHT identifiers."""
from .core import HoloHash
from .encode import decode_full_bytes, encode_full_bytes, holo_hash_decode, holo_hash_encode
from .errors import (
    HoloHashError,
    InvalidDigestLength,
    LocationMismatch,
    MalformedEncoding,
    SerializationError,
    UnknownHashType,
    UnsupportedEncodingVersion,
    WrongLength,
)
from .hash_type import ANY_DHT, ANY_LINKABLE, CompositeHashType, HashType, from_prefix, prefix
from .hashing import HoloHashed, canonical_json_bytes, hash_bytes, hash_content, hash_content_async
from .location import dht_location, location_to_u32

__all__ = [
    "HoloHash",
    "HoloHashed",
    "HashType",
    "CompositeHashType",
    "ANY_DHT",
    "ANY_LINKABLE",
    "prefix",
    "from_prefix",
    "dht_location",
    "location_to_u32",
    "canonical_json_bytes",
    "hash_bytes",
    "hash_content",
    "hash_content_async",
    "encode_full_bytes",
    "decode_full_bytes",
    "holo_hash_encode",
    "holo_hash_decode",
    "HoloHashError",
    "UnknownHashType",
    "InvalidDigestLength",
    "WrongLength",
    "MalformedEncoding",
    "UnsupportedEncodingVersion",
    "LocationMismatch",
    "SerializationError",
]
