from nacl.exceptions import BadSignatureError
from nacl.signing import SigningKey, VerifyKey

from holo_hash import HashType, HoloHash, UnknownHashType

def agent_pub_key(key) -> HoloHash:
    """AgentPubKey for an Ed25519 key. The raw 32-byte public key is the digest."""
    if isinstance(key, SigningKey):
        key = key.verify_key
    raw = bytes(key)
    return HoloHash.with_pre_hashed(raw, HashType.AGENT)

def verify_key(agent: HoloHash) -> VerifyKey:
    if agent.hash_type is not HashType.AGENT:
        raise UnknownHashType(f"Expected AgentPubKey, got {agent.hash_type.hash_name}")
    return VerifyKey(agent.digest)

def verify_signature(agent: HoloHash, message: bytes, signature: bytes) -> bool:
    vk = verify_key(agent)
    try:
        vk.verify(message, signature)
        return True
    except BadSignatureError:
        return False

def generate_agent() -> tuple[SigningKey, HoloHash]:
    sk = SigningKey.generate()
    return sk, agent_pub_key(sk)
