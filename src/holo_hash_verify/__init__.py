"""Tooling on top of holo_hash: agent keys, inspection and the CLI."""
from .crypto import agent_pub_key, generate_agent, verify_key, verify_signature
from .logic import describe, inspect_hash

__all__ = ["agent_pub_key", "generate_agent", "verify_key", "verify_signature", "describe", "inspect_hash"]
