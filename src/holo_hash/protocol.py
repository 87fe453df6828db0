"""HoloHash wire protocol constants.

Single source of truth for the binary layout, byte order and text encoding.
Keep this file stable. Every peer must reproduce these bit-for-bit.
"""

# Layout: [Prefix(3) | Digest(32) | Location(4)] = 39 bytes
PREFIX_LEN = 3
DIGEST_LEN = 32
LOCATION_LEN = 4
FULL_LEN = PREFIX_LEN + DIGEST_LEN + LOCATION_LEN

DIGEST_START = PREFIX_LEN
LOCATION_START = PREFIX_LEN + DIGEST_LEN

# Location is read as an unsigned 32-bit integer in this byte order.
LOCATION_BYTE_ORDER = "little"
LOCATION_SPACE = 1 << (8 * LOCATION_LEN)

# Text form: version marker + unpadded URL-safe base64 of the 39 bytes.
ENCODING_VERSION = "u"

# Registered type prefixes
PREFIX_AGENT = b"\x84\x20\x24"  # uhCAk
PREFIX_ENTRY = b"\x84\x21\x24"  # uhCEk
PREFIX_NET_ID = b"\x84\x22\x24"  # uhCIk
PREFIX_DHT_OP = b"\x84\x24\x24"  # uhCQk
PREFIX_HEADER = b"\x84\x29\x24"  # uhCkk
PREFIX_WASM = b"\x84\x2a\x24"  # uhCok
PREFIX_DNA = b"\x84\x2d\x24"  # uhC0k
