import json
import os
import stat
import sys

import pytest

from inkrypt.common import KeyPair, SignedDocument, b64url_encode
from inkrypt.crypto import generate_key_pair, sign


CONTENT = {"id": "123", "amount": 10}


@pytest.fixture(scope="module")
def key_pair():
    return generate_key_pair()


@pytest.fixture(scope="module")
def document(key_pair):
    return SignedDocument(
        content=CONTENT,
        context="MyApp:v1",
        signature=b64url_encode(sign(CONTENT, "MyApp:v1", key_pair.secret_key)),
        public_key=b64url_encode(key_pair.public_key),
    )


def test_verify_document(verify_script, document):
    assert verify_script.verify_document(document) is True


def test_verify_document_wrong_context(verify_script, document):
    tampered = document.model_copy(update={"context": "MyApp:v2"})
    assert verify_script.verify_document(tampered) is False


def test_verify_document_trusted_key_overrides(verify_script, document):
    stranger = b64url_encode(generate_key_pair().public_key)
    assert verify_script.verify_document(document, trusted_public_key=stranger) is False


def test_verify_document_bad_encoding(verify_script, document):
    tampered = document.model_copy(update={"signature": "not base64!"})
    assert verify_script.verify_document(tampered) is False


def test_load_document(verify_script, document, tmp_path):
    path = tmp_path / "signed.json"
    path.write_text(document.model_dump_json(), encoding="utf-8")

    loaded = verify_script.load_document(str(path))
    assert loaded == document


def test_main_exit_status(verify_script, document, tmp_path, monkeypatch):
    path = tmp_path / "signed.json"
    path.write_text(document.model_dump_json(), encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["verify_signature_script.py", "--document", str(path)])

    with pytest.raises(SystemExit) as exc:
        verify_script.main()
    assert exc.value.code == 0


def test_main_missing_file(verify_script, tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["verify_signature_script.py", "--document", str(tmp_path / "nope.json")])

    with pytest.raises(SystemExit) as exc:
        verify_script.main()
    assert exc.value.code == 1


def test_write_key_pair(keypair_script, tmp_path):
    out_path = tmp_path / "keys" / "signing_key.json"

    exported = keypair_script.write_key_pair(str(out_path))

    with open(out_path, "r") as f:
        assert json.load(f) == exported
    restored = KeyPair.from_export(exported)
    assert len(restored.public_key) == 2592
    if os.name == "posix":
        assert stat.S_IMODE(os.stat(out_path).st_mode) == 0o600
