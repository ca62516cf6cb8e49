"""
Secure Random Bytes and Identifiers

All randomness comes from the operating system CSPRNG via ``secrets``.
There is no seeding API and no state is kept between calls.
"""

import logging
import secrets

from inkrypt.common.utils import b64url_encode


logger = logging.getLogger(__name__)

ID_BYTES_LENGTH = 24  # 192 bits -> 32 base64url characters


def get_random_bytes(length: int = 32) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        length: Number of bytes (default: 32)

    Returns:
        Random bytes; empty for length 0

    Raises:
        ValueError: If length is negative
    """
    if length < 0:
        raise ValueError(f"Random byte length must be non-negative, got {length}")
    return secrets.token_bytes(length)


def generate_id(length: int = ID_BYTES_LENGTH) -> str:
    """
    Generate a URL-safe random identifier.

    Same length as a UUID string but with more entropy than uuid4 or uuid7.

    Args:
        length: Number of random bytes (default: 24 -> 32 characters)

    Returns:
        Unpadded base64url string
    """
    identifier = b64url_encode(get_random_bytes(length))
    logger.debug("Generated %d-character identifier", len(identifier))
    return identifier
