"""
Cryptographic primitives for inkrypt.

This package provides:
- XChaCha20-Poly1305 encryption with a KMAC256 robustness tag
- BLAKE3 hashing with variable output length
- Secure random bytes and URL-safe identifiers
- ML-DSA-87 signatures over canonical JSON with context separation
"""

from .aead import encrypt_message, decrypt_message, decrypt_message_bytes
from .hashing import hash, hash_hex
from .random import get_random_bytes, generate_id, ID_BYTES_LENGTH
from .sign import generate_key_pair, sign, verify_signature, canonicalize

__all__ = [
    'encrypt_message',
    'decrypt_message',
    'decrypt_message_bytes',
    'hash',
    'hash_hex',
    'get_random_bytes',
    'generate_id',
    'ID_BYTES_LENGTH',
    'generate_key_pair',
    'sign',
    'verify_signature',
    'canonicalize',
]
