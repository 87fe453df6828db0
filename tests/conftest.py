import os

import pytest

from holo_hash import HashType, HoloHash


@pytest.fixture(params=list(HashType), ids=lambda t: t.name)
def hash_type(request):
    return request.param


@pytest.fixture
def digest():
    return os.urandom(32)


@pytest.fixture
def holo_hash(digest, hash_type):
    return HoloHash.from_raw_bytes_and_type(digest, hash_type)


@pytest.fixture
def random_hashes():
    types = list(HashType)
    return [
        HoloHash.from_raw_bytes_and_type(os.urandom(32), types[i % len(types)])
        for i in range(64)
    ]
