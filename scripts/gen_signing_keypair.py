#!/usr/bin/env python3
"""
Generate an ML-DSA-87 Signing Key Pair

Prints a JSON object with base64url-encoded public_key and secret_key, or
writes it to a file. This is a developer convenience; storing the secret key
safely is up to the caller.

Usage:
    python scripts/gen_signing_keypair.py --out keys/signing_key.json
"""

import argparse
import json
import logging
import os
import sys

from inkrypt.config import configure_logging
from inkrypt.crypto import generate_key_pair


logger = logging.getLogger("gen_signing_keypair")


def write_key_pair(out_path: str) -> dict:
    """
    Generate a key pair and write its JSON export to out_path.

    The file is created with mode 0600 where the platform supports it.

    Args:
        out_path: Destination file

    Returns:
        The exported key pair
    """
    exported = generate_key_pair().export()

    out_dir = os.path.dirname(out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    fd = os.open(out_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as f:
        json.dump(exported, f, indent=2)

    logger.info("Wrote key pair to %s", out_path)
    return exported


def main():
    parser = argparse.ArgumentParser(
        description="Generate an ML-DSA-87 signing key pair"
    )
    parser.add_argument(
        "--out",
        default=None,
        help="Write the key pair JSON to this file instead of stdout"
    )

    args = parser.parse_args()
    configure_logging()

    if args.out:
        exported = write_key_pair(args.out)
        print(f"[*] Key pair written to {args.out}")
        print(f"    Public key: {exported['public_key'][:48]}...")
    else:
        json.dump(generate_key_pair().export(), sys.stdout, indent=2)
        print()


if __name__ == "__main__":
    main()
