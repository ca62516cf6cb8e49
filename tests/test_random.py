import re

import pytest

from inkrypt.crypto import ID_BYTES_LENGTH, generate_id, get_random_bytes


URL_SAFE = re.compile(r'^[A-Za-z0-9_-]*$')


def test_get_random_bytes_default_length():
    assert len(get_random_bytes()) == 32


@pytest.mark.parametrize("length", [1, 8, 16, 32, 64, 128])
def test_get_random_bytes_lengths(length):
    result = get_random_bytes(length)
    assert isinstance(result, bytes)
    assert len(result) == length


def test_get_random_bytes_zero_length():
    assert get_random_bytes(0) == b''


def test_get_random_bytes_negative_length():
    with pytest.raises(ValueError):
        get_random_bytes(-1)


def test_get_random_bytes_differs_between_calls():
    assert get_random_bytes(32) != get_random_bytes(32)


def test_generate_id_default():
    identifier = generate_id()
    assert ID_BYTES_LENGTH == 24
    assert len(identifier) == 32
    assert URL_SAFE.match(identifier)


@pytest.mark.parametrize("length,expected", [(12, 16), (18, 24), (1, 2), (2, 3), (32, 43)])
def test_generate_id_custom_length(length, expected):
    assert len(generate_id(length)) == expected


def test_generate_id_zero_length():
    assert generate_id(0) == ''


def test_generate_id_is_unique():
    ids = {generate_id() for _ in range(1000)}
    assert len(ids) == 1000
