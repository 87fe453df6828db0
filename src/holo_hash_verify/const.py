ERRORS = {
  "E_UNKNOWN_HASH_TYPE": "Hash type prefix not registered or not expected",
  "E_DIGEST_LENGTH": "Digest is not 32 bytes",
  "E_WRONG_LENGTH": "Hash is not 39 bytes",
  "E_MALFORMED_ENCODING": "Hash text is not valid unpadded URL-safe base64",
  "E_ENCODING_VERSION": "Hash text version marker missing or unsupported",
  "E_LOCATION_MISMATCH": "Embedded location does not match digest",
  "E_SERIALIZATION": "Content could not be canonicalized",
}
