"""
Common utilities, types and models for inkrypt.
"""

from .utils import b64url_encode, b64url_decode, constant_time_compare, to_bytes
from .types import Key, Nonce, SecretKey, PublicKey
from .models import EncryptedMessage, KeyPair, SignedDocument
from .exceptions import *

__all__ = [
    'b64url_encode',
    'b64url_decode',
    'constant_time_compare',
    'to_bytes',
    'Key',
    'Nonce',
    'SecretKey',
    'PublicKey',
    'EncryptedMessage',
    'KeyPair',
    'SignedDocument',
    'InkryptError',
    'InvalidKeySizeError',
    'InvalidNonceSizeError',
    'TagMismatchError',
    'DecryptionError',
    'InvalidContentError',
    'EncodingError',
]
