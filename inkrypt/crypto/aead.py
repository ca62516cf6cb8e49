"""
XChaCha20-Poly1305 Encryption with a KMAC256 Robustness Tag

Sealed message layout:

    robustnessTag (32 bytes) || aeadCiphertext (plaintext + 16-byte Poly1305 tag)

The robustness tag is KMAC256 keyed with the encryption key over

    b64url(nonce) + b64url(aeadCiphertext) + additional_data

with the customization string "RobustnessTag-v1". It is checked before the
cipher runs, so unverified input never reaches XChaCha20-Poly1305.

Neither key, nonce nor additional data travel inside the sealed message.
"""

import logging
from typing import Optional, Union

from Crypto.Hash import KMAC256
from nacl.bindings import (
    crypto_aead_xchacha20poly1305_ietf_decrypt,
    crypto_aead_xchacha20poly1305_ietf_encrypt,
)
from nacl.exceptions import CryptoError

from inkrypt.common.exceptions import DecryptionError, TagMismatchError
from inkrypt.common.models import EncryptedMessage
from inkrypt.common.types import Key, Nonce
from inkrypt.common.utils import b64url_encode, constant_time_compare, to_bytes
from inkrypt.crypto.random import get_random_bytes


logger = logging.getLogger(__name__)

KEY_SIZE = Key.SIZE  # bytes
NONCE_SIZE = Nonce.SIZE  # XChaCha20, not ChaCha20's 12
ROBUSTNESS_TAG_SIZE = 32
ROBUSTNESS_TAG_CUSTOMIZATION = b'RobustnessTag-v1'


def compute_robustness_tag(key: Key, nonce: Nonce, ciphertext: bytes, additional_data: str) -> bytes:
    """
    Compute the KMAC256 robustness tag.

    The tag input concatenates the encoded nonce, encoded ciphertext and the
    raw additional data with no delimiter. Existing sealed data depends on
    this exact byte layout.

    Args:
        key: 32-byte encryption key (also the KMAC key)
        nonce: 24-byte nonce
        ciphertext: AEAD ciphertext including the Poly1305 tag
        additional_data: Associated data string

    Returns:
        32-byte tag
    """
    tag_input = b64url_encode(nonce) + b64url_encode(ciphertext) + additional_data
    mac = KMAC256.new(
        key=key,
        mac_len=ROBUSTNESS_TAG_SIZE,
        custom=ROBUSTNESS_TAG_CUSTOMIZATION,
    )
    mac.update(tag_input.encode('utf-8'))
    return mac.digest()


def encrypt_message(
    message: Union[str, bytes],
    additional_data: str,
    key: Optional[bytes] = None,
    nonce: Optional[bytes] = None,
) -> EncryptedMessage:
    """
    Encrypt a message and prepend a robustness tag.

    A missing key or nonce is generated; a supplied one is validated.

    Args:
        message: Plaintext as text (UTF-8 encoded) or bytes
        additional_data: Associated data bound to the ciphertext
        key: Optional 32-byte key
        nonce: Optional 24-byte nonce

    Returns:
        EncryptedMessage with the sealed ciphertext and the key and nonce used

    Raises:
        InvalidKeySizeError: If a supplied key is not 32 bytes
        InvalidNonceSizeError: If a supplied nonce is not 24 bytes
    """
    encryption_key = Key(get_random_bytes(KEY_SIZE)) if key is None else Key(key)
    encryption_nonce = Nonce(get_random_bytes(NONCE_SIZE)) if nonce is None else Nonce(nonce)

    message_bytes = to_bytes(message)
    additional_data_bytes = additional_data.encode('utf-8')

    ciphertext = crypto_aead_xchacha20poly1305_ietf_encrypt(
        message_bytes,
        additional_data_bytes,
        encryption_nonce,
        encryption_key,
    )

    robustness_tag = compute_robustness_tag(
        encryption_key, encryption_nonce, ciphertext, additional_data
    )

    logger.debug(
        "Encrypted %d-byte message into %d-byte sealed message",
        len(message_bytes),
        ROBUSTNESS_TAG_SIZE + len(ciphertext),
    )

    return EncryptedMessage(
        ciphertext=robustness_tag + ciphertext,
        key=encryption_key,
        nonce=encryption_nonce,
    )


def decrypt_message_bytes(
    sealed: bytes,
    additional_data: str,
    key: bytes,
    nonce: bytes,
) -> bytes:
    """
    Verify the robustness tag and decrypt a sealed message to raw bytes.

    Args:
        sealed: robustnessTag(32) || aeadCiphertext
        additional_data: Associated data used at encryption
        key: 32-byte key
        nonce: 24-byte nonce

    Returns:
        Plaintext bytes

    Raises:
        InvalidKeySizeError: If key is not 32 bytes
        InvalidNonceSizeError: If nonce is not 24 bytes
        TagMismatchError: If the robustness tag does not match
        DecryptionError: If the XChaCha20-Poly1305 tag check fails
    """
    decryption_key = Key(key)
    decryption_nonce = Nonce(nonce)
    sealed = bytes(sealed)

    received_tag = sealed[:ROBUSTNESS_TAG_SIZE]
    ciphertext = sealed[ROBUSTNESS_TAG_SIZE:]

    expected_tag = compute_robustness_tag(
        decryption_key, decryption_nonce, ciphertext, additional_data
    )

    if len(received_tag) != ROBUSTNESS_TAG_SIZE or not constant_time_compare(received_tag, expected_tag):
        logger.warning("Rejected %d-byte sealed message: robustness tag mismatch", len(sealed))
        raise TagMismatchError("AEAD robustness tag mismatch")

    try:
        plaintext = crypto_aead_xchacha20poly1305_ietf_decrypt(
            ciphertext,
            additional_data.encode('utf-8'),
            decryption_nonce,
            decryption_key,
        )
    except CryptoError as e:
        logger.warning("Rejected %d-byte sealed message: AEAD authentication failed", len(sealed))
        raise DecryptionError("AEAD decryption failed") from e

    return plaintext


def decrypt_message(
    sealed: bytes,
    additional_data: str,
    key: bytes,
    nonce: bytes,
) -> str:
    """
    Decrypt a sealed message produced by encrypt_message.

    Args:
        sealed: robustnessTag(32) || aeadCiphertext
        additional_data: Associated data used at encryption
        key: 32-byte key
        nonce: 24-byte nonce

    Returns:
        Decrypted plaintext string

    Raises:
        TagMismatchError: If the robustness tag does not match
        DecryptionError: If decryption fails or the plaintext is not UTF-8
    """
    plaintext = decrypt_message_bytes(sealed, additional_data, key, nonce)
    try:
        return plaintext.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecryptionError("Decrypted plaintext is not valid UTF-8") from e


# Test function for development
if __name__ == "__main__":
    test_message = "Hello, World!"

    print(f"Original: {test_message}")

    encrypted = encrypt_message(test_message, "test-data")
    print(f"Sealed ({len(encrypted.ciphertext)} bytes): {b64url_encode(encrypted.ciphertext)}")

    decrypted = decrypt_message(encrypted.ciphertext, "test-data", encrypted.key, encrypted.nonce)
    print(f"Decrypted: {decrypted}")

    assert decrypted == test_message, "Encryption/Decryption test failed!"

    try:
        decrypt_message(encrypted.ciphertext, "wrong-data", encrypted.key, encrypted.nonce)
    except TagMismatchError:
        print("[✓] Wrong additional data rejected")
