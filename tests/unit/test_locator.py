"""Unit tests for user document addressing."""

import pytest

from couchdb_admin.client.locator import user_doc_id, user_path, user_url
from couchdb_admin.config import ConnectionConfig


@pytest.mark.unit
def test_user_url_for_plain_name(connection_config):
    assert (
        user_url(connection_config, "jan")
        == "http://localhost:5984/_users/org.couchdb.user:jan"
    )


@pytest.mark.unit
def test_user_url_ignores_database():
    """User documents always live in _users, whatever database is configured."""
    config = ConnectionConfig("https", "couch.example.com", 6984, "inventory")

    assert (
        user_url(config, "jan")
        == "https://couch.example.com:6984/_users/org.couchdb.user:jan"
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "username,escaped",
    [
        ("a/b", "a%2Fb"),
        ("jan doe", "jan%20doe"),
        ("x:y", "x%3Ay"),
        ("ann@example.com", "ann%40example.com"),
        ("q?rev=1", "q%3Frev%3D1"),
        ("jürgen", "j%C3%BCrgen"),
    ],
)
def test_user_path_escapes_username(username, escaped):
    assert user_path(username) == f"/_users/org.couchdb.user:{escaped}"


@pytest.mark.unit
def test_user_doc_id_is_unescaped():
    assert user_doc_id("a/b") == "org.couchdb.user:a/b"


@pytest.mark.unit
def test_user_url_is_deterministic(connection_config):
    assert user_url(connection_config, "Jan") == user_url(connection_config, "Jan")
    assert user_url(connection_config, "Jan") != user_url(connection_config, "jan")
