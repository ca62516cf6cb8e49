"""
ML-DSA-87 Digital Signatures over Canonical JSON

Content is a mapping of string keys to strings, numbers or nested mappings
of the same. It is serialized with the RFC 8785 JSON Canonicalization Scheme
so that equal content always produces the same bytes, whatever order it was
built in.

The signed message is:

    UTF-8(context) || canonical_json(content)

There is no separator between the two. Contexts should have a fixed,
versioned format (e.g. "MyApp:v1") so a signature made for one context never
verifies under another.
"""

import logging
from typing import Any, Dict, Union

import rfc8785
from dilithium_py.ml_dsa import ML_DSA_87
from pydantic import StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError
from typing_extensions import TypeAliasType

from inkrypt.common.exceptions import InvalidContentError
from inkrypt.common.models import KeyPair
from inkrypt.common.types import PublicKey, SecretKey


logger = logging.getLogger(__name__)

SignableValue = TypeAliasType(
    'SignableValue',
    'Union[StrictStr, StrictInt, StrictFloat, Dict[StrictStr, SignableValue]]',
)
SignableContent = Dict[StrictStr, SignableValue]

_content_adapter = TypeAdapter(SignableContent)


def generate_key_pair() -> KeyPair:
    """
    Generate a fresh ML-DSA-87 key pair.

    Returns:
        KeyPair with public_key (2592 bytes) and secret_key (4896 bytes)
    """
    public_key, secret_key = ML_DSA_87.keygen()
    return KeyPair(public_key=PublicKey(public_key), secret_key=SecretKey(secret_key))


def canonicalize(content: Dict[str, Any]) -> bytes:
    """
    Serialize content to canonical JSON bytes (RFC 8785).

    Args:
        content: Mapping of str keys to str, int, float or nested mappings

    Returns:
        UTF-8 canonical JSON

    Raises:
        InvalidContentError: If content holds unsupported types (bool, None,
            lists, objects), is cyclic, or has numbers JSON cannot represent
            exactly
    """
    try:
        validated = _content_adapter.validate_python(content, strict=True)
        return rfc8785.dumps(validated)
    except (ValidationError, rfc8785.CanonicalizationError, RecursionError) as e:
        raise InvalidContentError("Invalid content") from e


def _signing_message(content: Dict[str, Any], context: str) -> bytes:
    if not isinstance(context, str):
        raise TypeError(f"Signature context must be str, got {type(context).__name__}")
    return context.encode('utf-8') + canonicalize(content)


def sign(content: Dict[str, Any], context: str, secret_key: bytes) -> bytes:
    """
    Sign canonicalized content bound to a signature context.

    Args:
        content: Signable content mapping
        context: Domain separation string, e.g. "MyApp:v1"
        secret_key: ML-DSA-87 secret key

    Returns:
        Signature bytes

    Raises:
        InvalidContentError: If content cannot be canonicalized
        InvalidKeySizeError: If secret_key is not an ML-DSA-87 secret key
    """
    signing_key = SecretKey(secret_key)
    message = _signing_message(content, context)
    signature = ML_DSA_87.sign(signing_key, message)
    logger.debug("Signed %d-byte message under context %r", len(message), context)
    return signature


def verify_signature(
    content: Dict[str, Any],
    context: str,
    signature: bytes,
    public_key: Union[bytes, PublicKey],
) -> bool:
    """
    Verify an ML-DSA-87 signature over content and context.

    Never raises: malformed content, keys or signatures all yield False.

    Args:
        content: Content that was signed
        context: Context the signer used
        signature: Signature bytes
        public_key: Signer's ML-DSA-87 public key

    Returns:
        True if the signature is valid, False otherwise
    """
    try:
        message = _signing_message(content, context)
        verify_key = PublicKey(public_key)
        return bool(ML_DSA_87.verify(verify_key, message, bytes(signature)))
    except InvalidContentError:
        logger.debug("Signature rejected: content cannot be canonicalized")
        return False
    except Exception as e:
        logger.debug("Signature rejected: %s", type(e).__name__)
        return False
