"""Tests for typed service tokens."""

import pytest

from service_registry import Token, create_token


def test_tokens_with_same_name_are_distinct():
    first = create_token("database")
    second = create_token("database")

    assert first != second
    assert len({first, second}) == 2


def test_token_equals_itself():
    token = create_token("database")

    assert token == token
    assert {token: 1}[token] == 1


def test_token_string_representation():
    token = create_token("database")

    assert token.name == "database"
    assert str(token) == "Token(database)"
    assert "database" in repr(token)


@pytest.mark.parametrize("name", ["", None, 42])
def test_token_requires_non_empty_name(name):
    with pytest.raises(ValueError, match="non-empty string"):
        Token(name)
