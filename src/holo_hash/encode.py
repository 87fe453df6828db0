"""Text form of a HoloHash: ``u`` + unpadded URL-safe base64 of the 39 bytes.

The embedded location is the only integrity check. It catches transcription
and truncation errors, not a forged digest with a matching location.
"""
from __future__ import annotations

import base64
import binascii
import re

from . import protocol
from .errors import MalformedEncoding, UnsupportedEncodingVersion, WrongLength

_URLSAFE_B64_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode_full_bytes(buf: bytes) -> str:
    """Encode a full 39-byte buffer as a text token."""
    if len(buf) != protocol.FULL_LEN:
        raise WrongLength(f"Expected {protocol.FULL_LEN} bytes, got {len(buf)}")
    body = base64.urlsafe_b64encode(bytes(buf)).decode("ascii").rstrip("=")
    return protocol.ENCODING_VERSION + body


def decode_full_bytes(text: str) -> bytes:
    """Decode a text token to its 39 raw bytes.

    Does not look at the prefix or location; see ``HoloHash.from_string``.
    """
    if not isinstance(text, str) or not text:
        raise UnsupportedEncodingVersion("Missing encoding version marker")
    if text[0] != protocol.ENCODING_VERSION:
        raise UnsupportedEncodingVersion(f"Unsupported encoding version {text[0]!r}")

    body = text[1:]
    # b64decode silently drops characters outside the alphabet.
    if not _URLSAFE_B64_RE.fullmatch(body):
        raise MalformedEncoding("Encoded hash contains characters outside the URL-safe base64 alphabet")
    if len(body) % 4 == 1:
        raise MalformedEncoding(f"Impossible base64 length {len(body)}")

    try:
        raw = base64.urlsafe_b64decode(body + "=" * (-len(body) % 4))
    except (binascii.Error, ValueError) as e:
        raise MalformedEncoding(f"Invalid base64: {e}") from None

    if len(raw) != protocol.FULL_LEN:
        raise WrongLength(f"Decoded hash must be {protocol.FULL_LEN} bytes, got {len(raw)}")
    return raw


def holo_hash_encode(h) -> str:
    return encode_full_bytes(h.to_bytes())


def holo_hash_decode(text: str, expected=None):
    """Decode and fully verify a text token. Location is always recomputed."""
    from .core import HoloHash

    return HoloHash.from_string(text, expected=expected)


__all__ = [
    "encode_full_bytes",
    "decode_full_bytes",
    "holo_hash_encode",
    "holo_hash_decode",
]
