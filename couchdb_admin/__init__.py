"""Administration of CouchDB server user accounts."""

from couchdb_admin.client import CouchDBClient, UsersClient
from couchdb_admin.config import ConnectionConfig, Settings, get_settings
from couchdb_admin.errors import (
    ConflictError,
    CouchDBAdminError,
    CouchDBHTTPError,
    DecodeError,
    NotFoundError,
    TransportError,
)
from couchdb_admin.models import ErrorKind, Failure, Outcome, Success

__all__ = [
    "CouchDBClient",
    "UsersClient",
    "ConnectionConfig",
    "Settings",
    "get_settings",
    "CouchDBAdminError",
    "ConflictError",
    "NotFoundError",
    "DecodeError",
    "CouchDBHTTPError",
    "TransportError",
    "ErrorKind",
    "Outcome",
    "Success",
    "Failure",
]
