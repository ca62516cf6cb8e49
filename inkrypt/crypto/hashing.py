"""
BLAKE3 Content Hashing

BLAKE3 is used in extendable-output mode, so any output length is allowed.
"""

from typing import Union

from blake3 import blake3

from inkrypt.common.utils import to_bytes


DEFAULT_HASH_LENGTH = 64


def hash(message: Union[str, bytes], output_len: int = DEFAULT_HASH_LENGTH) -> bytes:
    """
    Compute a BLAKE3 digest of the message.

    Args:
        message: Text (UTF-8 encoded) or bytes
        output_len: Digest length in bytes (default: 64)

    Returns:
        Digest of exactly output_len bytes
    """
    if output_len < 0:
        raise ValueError(f"Hash output length must be non-negative, got {output_len}")
    if output_len == 0:
        return b''
    return blake3(to_bytes(message)).digest(length=output_len)


def hash_hex(message: Union[str, bytes], output_len: int = 32) -> str:
    """Hex-encoded BLAKE3 digest, for content addressing."""
    return hash(message, output_len).hex()
