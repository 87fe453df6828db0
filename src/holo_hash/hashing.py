"""Content hashing pipeline.

content -> canonical bytes -> BLAKE2b-256 -> location -> HoloHash.

The canonical encoder is pluggable. The default is canonical JSON; callers
with their own canonical format pass ``encoder=``. Identical canonical bytes
always give an identical hash, on any machine.
"""
from __future__ import annotations

import asyncio
import hashlib
import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from . import protocol
from .core import HoloHash
from .errors import SerializationError
from .hash_type import HashType

logger = logging.getLogger(__name__)

CANONICAL_JSON_KW = {
    "sort_keys": True,
    "separators": (",", ":"),
    "ensure_ascii": False,
    "allow_nan": False,
}

Encoder = Callable[[Any], bytes]
C = TypeVar("C")


def canonical_json_bytes(content: Any) -> bytes:
    return json.dumps(content, **CANONICAL_JSON_KW).encode("utf-8")


def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=protocol.DIGEST_LEN).digest()


def _encode(content: Any, encoder: Encoder) -> bytes:
    try:
        data = encoder(content)
    except SerializationError:
        raise
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(f"Cannot canonicalize {type(content).__name__}: {e}") from e
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise SerializationError(
            f"Canonical encoder returned {type(data).__name__}, expected bytes"
        )
    return bytes(data)


def hash_bytes(data: bytes, hash_type: HashType) -> HoloHash:
    """Hash bytes that are already in canonical form."""
    t0 = time.perf_counter()
    h = HoloHash.from_raw_bytes_and_type(blake2b_256(data), hash_type)
    logger.debug(
        "hashed %s",
        hash_type.hash_name,
        extra={
            "hash_type": hash_type.name,
            "size": len(data),
            "elapsed": time.perf_counter() - t0,
        },
    )
    return h


def hash_content(
    content: Any,
    hash_type: HashType,
    encoder: Encoder = canonical_json_bytes,
) -> HoloHash:
    """Canonicalize ``content`` and hash it as ``hash_type``."""
    return hash_bytes(_encode(content, encoder), hash_type)


async def hash_content_async(
    content: Any,
    hash_type: HashType,
    encoder: Encoder = canonical_json_bytes,
) -> HoloHash:
    """Same as ``hash_content`` with the digest pass run in the default executor.

    Nothing here waits on I/O. Offloading only keeps a large payload from
    stalling the event loop.
    """
    data = _encode(content, encoder)
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, hash_bytes, data, hash_type)


@dataclass(frozen=True)
class HoloHashed(Generic[C]):
    """Content paired with the hash it produced."""

    content: C
    hash: HoloHash

    @classmethod
    def from_content(
        cls,
        content: C,
        hash_type: HashType,
        encoder: Encoder = canonical_json_bytes,
    ) -> "HoloHashed[C]":
        return cls(content, hash_content(content, hash_type, encoder))

    @classmethod
    async def from_content_async(
        cls,
        content: C,
        hash_type: HashType,
        encoder: Encoder = canonical_json_bytes,
    ) -> "HoloHashed[C]":
        return cls(content, await hash_content_async(content, hash_type, encoder))

    @property
    def hash_type(self) -> HashType:
        return self.hash.hash_type

    def verify(self, encoder: Encoder = canonical_json_bytes) -> bool:
        """Recompute the hash of ``content`` and compare."""
        return hash_content(self.content, self.hash.hash_type, encoder) == self.hash


__all__ = [
    "CANONICAL_JSON_KW",
    "Encoder",
    "canonical_json_bytes",
    "blake2b_256",
    "hash_bytes",
    "hash_content",
    "hash_content_async",
    "HoloHashed",
]
