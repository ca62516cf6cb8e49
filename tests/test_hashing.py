import pytest

from inkrypt.crypto import hash, hash_hex


def test_hash_default_length():
    assert len(hash('hello')) == 64


@pytest.mark.parametrize("length", [0, 1, 16, 32, 100, 1024])
def test_hash_output_length(length):
    assert len(hash(b'content', length)) == length


def test_hash_is_deterministic():
    assert hash('note body', 48) == hash('note body', 48)


def test_hash_text_and_utf8_bytes_match():
    assert hash('héllo') == hash('héllo'.encode('utf-8'))


def test_hash_differs_for_different_input():
    assert hash('a') != hash('b')


def test_hash_known_vector():
    # BLAKE3 of the empty input
    assert hash(b'', 32).hex() == 'af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262'


def test_hash_hex():
    digest = hash_hex('hello')
    assert len(digest) == 64
    assert digest == hash('hello', 32).hex()


def test_hash_rejects_negative_length():
    with pytest.raises(ValueError):
        hash('x', -1)
