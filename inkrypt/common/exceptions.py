"""
Custom exceptions for inkrypt.
"""


class InkryptError(Exception):
    """Base exception for inkrypt errors."""
    pass


class InvalidKeySizeError(InkryptError, ValueError):
    """Key material has the wrong length."""
    pass


class InvalidNonceSizeError(InkryptError, ValueError):
    """Nonce has the wrong length."""
    pass


class TagMismatchError(InkryptError):
    """Robustness tag did not match (tampering or wrong key/nonce/AAD)."""
    pass


class DecryptionError(InkryptError):
    """AEAD decryption failed after the robustness tag was accepted."""
    pass


class InvalidContentError(InkryptError, ValueError):
    """Content cannot be canonicalized for signing."""
    pass


class EncodingError(InkryptError, ValueError):
    """Input is not valid base64."""
    pass
