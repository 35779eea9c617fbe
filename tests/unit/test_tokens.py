import string

import pytest

from rotating_csrf.adapters.tokens import SecureTokenSource
from rotating_csrf.core.services.tokens import TOKEN_ALPHABET, TOKEN_LENGTH, new_token


def test_alphabet_is_alphanumeric():
    assert set(TOKEN_ALPHABET) == set(string.ascii_letters + string.digits)


def test_token_shape():
    for _ in range(50):
        token = new_token()
        assert len(token) == TOKEN_LENGTH == 32
        assert token.isalnum()
        assert token.isascii()


def test_tokens_are_unique():
    tokens = {new_token() for _ in range(100)}
    assert len(tokens) == 100


def test_custom_length():
    assert len(new_token(8)) == 8


def test_non_positive_length_rejected():
    with pytest.raises(ValueError):
        new_token(0)


def test_secure_token_source():
    source = SecureTokenSource()
    token1 = source.new_token()
    token2 = source.new_token()
    assert len(token1) == 32
    assert token1 != token2
