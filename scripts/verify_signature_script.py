#!/usr/bin/env python3
"""
Offline Signature Verification Tool

Verifies a signed JSON document of the form:

    {
        "content": {"id": "123", "amount": 10},
        "context": "MyApp:v1",
        "signature": "<base64url>",
        "public_key": "<base64url>"
    }

A trusted public key given with --public-key overrides the one embedded in
the document. Exit status is 0 when the signature is valid, 1 otherwise.

Usage:
    python scripts/verify_signature_script.py --document signed.json
"""

import argparse
import json
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from inkrypt.common import EncodingError, SignedDocument, b64url_decode
from inkrypt.config import configure_logging
from inkrypt.crypto import verify_signature


logger = logging.getLogger("verify_signature_script")


def load_document(document_path: str) -> SignedDocument:
    """Load and validate a signed document from a JSON file."""
    with open(document_path, "r", encoding="utf-8") as f:
        return SignedDocument(**json.load(f))


def verify_document(document: SignedDocument, trusted_public_key: Optional[str] = None) -> bool:
    """
    Verify a signed document.

    Args:
        document: Parsed signed document
        trusted_public_key: Base64url public key to use instead of the
            document's own

    Returns:
        True if the signature is valid, False otherwise
    """
    try:
        public_key = b64url_decode(trusted_public_key or document.public_key)
        signature = b64url_decode(document.signature)
    except EncodingError as e:
        logger.warning("Malformed document encoding: %s", e)
        return False

    return verify_signature(document.content, document.context, signature, public_key)


def main():
    parser = argparse.ArgumentParser(
        description="Verify an ML-DSA-87 signed JSON document"
    )
    parser.add_argument(
        "--document",
        required=True,
        help="Path to signed document JSON file"
    )
    parser.add_argument(
        "--public-key",
        default=None,
        help="Trusted base64url public key (overrides the embedded one)"
    )

    args = parser.parse_args()
    configure_logging()

    try:
        document = load_document(args.document)
    except FileNotFoundError as e:
        print(f"\n[ERROR] File not found: {e}")
        sys.exit(1)
    except (json.JSONDecodeError, ValidationError) as e:
        print(f"\n[ERROR] Invalid document: {e}")
        sys.exit(1)

    print(f"[*] Context: {document.context}")
    print(f"[*] Fields:  {', '.join(sorted(document.content))}")

    if verify_document(document, args.public_key):
        print("[✓] Signature VALID")
        sys.exit(0)

    print("[✗] Signature INVALID")
    sys.exit(1)


if __name__ == "__main__":
    main()
