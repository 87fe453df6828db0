from holo_hash import HoloHash, HoloHashError
from holo_hash.hash_type import HashTypeLike
from .const import ERRORS

def describe(h: HoloHash) -> dict:
    return {
        "type": h.hash_type.name,
        "name": h.hash_type.hash_name,
        "prefix": h.prefix.hex(),
        "digest": h.digest.hex(),
        "location": h.location.hex(),
        "location_u32": h.location_u32,
        "string": h.to_string(),
    }

def inspect_hash(text: str, expected: HashTypeLike | None = None) -> dict:
    try:
        h = HoloHash.from_string(text, expected=expected)
    except HoloHashError as e:
        err = {"code": e.code, "message": ERRORS.get(e.code, "Invalid hash"), "detail": str(e)}
        return {"status": "FAIL", "error_count": 1, "errors": [err]}
    return {"status": "PASS", "error_count": 0, "errors": [], "hash": describe(h)}
