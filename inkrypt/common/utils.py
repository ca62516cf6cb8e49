"""
Utility functions for inkrypt.

Base64 here is always the URL-safe alphabet without padding, which is the
string form used for identifiers and inside robustness tag input.
"""

import base64
import binascii
from typing import Union

from cryptography.hazmat.primitives import constant_time

from .exceptions import EncodingError


def b64url_encode(data: bytes) -> str:
    """
    Base64 encode bytes to an unpadded URL-safe string.

    Args:
        data: Bytes to encode

    Returns:
        String over the alphabet [A-Za-z0-9_-]
    """
    return base64.urlsafe_b64encode(data).rstrip(b'=').decode('ascii')


def b64url_decode(data: str) -> bytes:
    """
    Base64 decode a URL-safe string to bytes.

    Padding is optional. Standard-alphabet input ('+' and '/') is accepted
    as well.

    Args:
        data: Base64-encoded string

    Returns:
        Decoded bytes

    Raises:
        EncodingError: If the input is not valid base64
    """
    if not isinstance(data, str):
        raise EncodingError(f"Expected str, got {type(data).__name__}")

    normalized = data.rstrip('=').replace('+', '-').replace('/', '_')
    padded = normalized + '=' * (-len(normalized) % 4)

    try:
        return base64.b64decode(padded.encode('ascii'), altchars=b'-_', validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise EncodingError(f"Invalid base64 input: {e}") from e


def to_bytes(value: Union[str, bytes, bytearray, memoryview]) -> bytes:
    """Return UTF-8 bytes for text, or the bytes themselves."""
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"Expected str or bytes, got {type(value).__name__}")


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Constant-time comparison to prevent timing attacks.

    Args:
        a: First bytes object
        b: Second bytes object

    Returns:
        True if equal, False otherwise
    """
    return constant_time.bytes_eq(bytes(a), bytes(b))
