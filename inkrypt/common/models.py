"""
Result and document models using Pydantic.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from .types import Key, Nonce, PublicKey, SecretKey
from .utils import b64url_decode, b64url_encode


class EncryptedMessage(BaseModel):
    """Output of encrypt_message: sealed bytes plus the key and nonce used."""
    model_config = ConfigDict(frozen=True)

    ciphertext: bytes = Field(..., description="robustnessTag(32) || aeadCiphertext")
    key: Key
    nonce: Nonce


class KeyPair(BaseModel):
    """ML-DSA-87 signing key pair."""
    model_config = ConfigDict(frozen=True)

    public_key: PublicKey
    secret_key: SecretKey

    def export(self) -> Dict[str, str]:
        """Base64url form of both keys, for developer tooling."""
        return {
            "public_key": b64url_encode(self.public_key),
            "secret_key": b64url_encode(self.secret_key),
        }

    @classmethod
    def from_export(cls, data: Dict[str, str]) -> "KeyPair":
        return cls(
            public_key=PublicKey(b64url_decode(data["public_key"])),
            secret_key=SecretKey(b64url_decode(data["secret_key"])),
        )


class SignedDocument(BaseModel):
    """Signed content as exchanged in JSON files."""
    content: Dict[str, Any] = Field(..., description="Signable content mapping")
    context: str = Field(..., description="Signature context, e.g. 'MyApp:v1'")
    signature: str = Field(..., description="Base64url-encoded ML-DSA-87 signature")
    public_key: str = Field(..., description="Base64url-encoded ML-DSA-87 public key")
