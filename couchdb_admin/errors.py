"""Exception hierarchy for CouchDB user administration.

Conflicts, missing accounts and undecodable records are normally returned to
the caller as ``Failure`` outcomes. The matching exceptions below are only
raised by ``Outcome.raise_for_error()``. ``TransportError`` is the exception
that is always raised, since an unreachable server has no outcome to classify.
"""

from typing import Optional


class CouchDBAdminError(Exception):
    """Base class for all couchdb_admin errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ConflictError(CouchDBAdminError):
    """Server answered 409: duplicate account or stale revision."""


class NotFoundError(CouchDBAdminError):
    """Server answered 404: unknown or deleted account."""


class DecodeError(CouchDBAdminError):
    """A user record could not be decoded or carried no revision."""


class CouchDBHTTPError(CouchDBAdminError):
    """Any other non-2xx answer from the server."""


class TransportError(CouchDBAdminError):
    """The server could not be reached (connection refused, timeout, ...)."""

    def __init__(self, message: str, method: str, url: str):
        super().__init__(message)
        self.method = method
        self.url = url
