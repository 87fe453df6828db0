import json

import pytest

from holo_hash import ANY_DHT, HashType, HoloHash, LocationMismatch, SerializationError, UnknownHashType
from holo_hash.serial import dumps_json, from_serializable, json_default, loads_json, to_serializable


def test_binary_mode(holo_hash):
    value = to_serializable(holo_hash, binary=True)
    assert value == holo_hash.to_bytes()
    assert from_serializable(value) == holo_hash
    assert from_serializable(bytearray(value)) == holo_hash
    assert from_serializable(memoryview(value)) == holo_hash


def test_text_mode(holo_hash):
    value = to_serializable(holo_hash, binary=False)
    assert value == str(holo_hash)
    assert from_serializable(value) == holo_hash


def test_binary_mode_verifies_location(holo_hash):
    buf = bytearray(holo_hash.to_bytes())
    buf[10] ^= 0x04
    with pytest.raises(LocationMismatch):
        from_serializable(bytes(buf))


def test_unsupported_value():
    with pytest.raises(SerializationError):
        from_serializable(12345)


def test_expected_type(digest):
    agent = HoloHash.from_raw_bytes_and_type(digest, HashType.AGENT)
    with pytest.raises(UnknownHashType):
        from_serializable(str(agent), expected=ANY_DHT)


def test_json_default(holo_hash):
    text = json.dumps({"h": holo_hash}, default=json_default)
    assert json.loads(text) == {"h": str(holo_hash)}
    with pytest.raises(TypeError):
        json_default(object())


def test_json_round_trip(random_hashes):
    doc = {"author": random_hashes[0], "links": random_hashes[1:4], "n": 3}
    text = dumps_json(doc)
    assert text == dumps_json(doc)
    back = loads_json(text, keys=["author"])
    assert back["author"] == random_hashes[0]
    assert back["links"] == [str(h) for h in random_hashes[1:4]]
    assert back["n"] == 3


def test_json_errors():
    with pytest.raises(SerializationError):
        dumps_json({"x": object()})
    with pytest.raises(SerializationError):
        loads_json("{not json")
    with pytest.raises(LocationMismatch):
        loads_json('{"a": "uhCEkFcZW9J1Z4d0CEHcA0_NJqUbugNS9fc4ly8VYhB9n5y52TXja"}', keys=["a"])
