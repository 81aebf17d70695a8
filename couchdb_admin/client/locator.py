"""Resource addresses for CouchDB user documents."""

from urllib.parse import quote

from couchdb_admin.config import ConnectionConfig
from couchdb_admin.models.users import USER_DOC_PREFIX

USERS_DB = "_users"


def user_doc_id(username: str) -> str:
    """Document id of the account named ``username``."""
    return f"{USER_DOC_PREFIX}{username}"


def user_path(username: str) -> str:
    """Server-relative path of the account document, with the name escaped."""
    return f"/{USERS_DB}/{USER_DOC_PREFIX}{quote(username, safe='')}"


def user_url(config: ConnectionConfig, username: str) -> str:
    """Absolute URL of the account document for ``username``.

    Examples:
        >>> user_url(ConnectionConfig("http", "localhost", 5984, "test"), "jan")
        'http://localhost:5984/_users/org.couchdb.user:jan'
    """
    return f"{config.base_url}{user_path(username)}"
