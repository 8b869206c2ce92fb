"""Hash utilities tests."""

import pytest
from twig.core.hash import hash_object, is_digest


def test_hash_object_empty():
    """Test hashing empty bytes."""
    result = hash_object(b'')
    assert result == 'da39a3ee5e6b4b0d3255bfef95601890afd80709'


def test_hash_object_known_value():
    assert hash_object(b'hello') == 'aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d'


def test_hash_object_deterministic():
    """Test hash consistency for same input."""
    data = b'hello world'
    assert hash_object(data) == hash_object(data)


def test_hash_object_different_data():
    """Test different data produces different hashes."""
    assert hash_object(b'hello') != hash_object(b'world')


@pytest.mark.parametrize('value,expected', [
    ('a' * 40, True),
    ('0123456789abcdef0123456789abcdef01234567', True),
    ('A' * 40, False),
    ('a' * 39, False),
    ('g' * 40, False),
    ('', False),
    ('0x' + 'a' * 38, False),
    ('../../etc/passwd', False),
])
def test_is_digest(value, expected):
    assert is_digest(value) is expected
