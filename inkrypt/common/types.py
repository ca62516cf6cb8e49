"""
Fixed-length byte newtypes for key material.

Each type is a ``bytes`` subclass that checks its length on construction.
Building one newtype from another (a Nonce passed where a Key is expected,
for example) raises TypeError, so swapped arguments fail at the boundary
instead of reaching the cipher.
"""

from typing import Any, Type

from pydantic_core import core_schema

from .exceptions import InvalidKeySizeError, InvalidNonceSizeError


# ML-DSA-87 (FIPS 204) encoded sizes
ML_DSA_87_PUBLIC_KEY_SIZE = 2592
ML_DSA_87_SECRET_KEY_SIZE = 4896


class FixedBytes(bytes):
    """Base class for length-checked byte strings."""

    SIZE = 0
    size_error: Type[ValueError] = ValueError
    secret = False

    def __new__(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, FixedBytes):
            raise TypeError(
                f"{cls.__name__} cannot be built from {type(value).__name__}"
            )
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"{cls.__name__} requires bytes, got {type(value).__name__}"
            )
        if len(value) != cls.SIZE:
            raise cls.size_error(
                f"{cls.SIZE}-byte {cls.__name__} is required, got {len(value)} bytes"
            )
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        if self.secret:
            return f"{type(self).__name__}(<redacted>)"
        return f"{type(self).__name__}({bytes(self)!r})"

    __str__ = __repr__

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(cls)


class Key(FixedBytes):
    """32-byte symmetric key for the AEAD engine."""

    SIZE = 32
    size_error = InvalidKeySizeError
    secret = True


class Nonce(FixedBytes):
    """24-byte XChaCha20 nonce."""

    SIZE = 24
    size_error = InvalidNonceSizeError


class SecretKey(FixedBytes):
    SIZE = ML_DSA_87_SECRET_KEY_SIZE
    size_error = InvalidKeySizeError
    secret = True


class PublicKey(FixedBytes):
    SIZE = ML_DSA_87_PUBLIC_KEY_SIZE
    size_error = InvalidKeySizeError
