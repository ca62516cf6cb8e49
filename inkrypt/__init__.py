"""
inkrypt

Cryptographic primitives for a local-first, end-to-end encrypted notes app:
- XChaCha20-Poly1305 encryption with a KMAC256 robustness tag
- BLAKE3 content hashing
- Secure random bytes and identifiers
- ML-DSA-87 post-quantum signatures over canonical JSON
"""

__version__ = "0.1.0"
