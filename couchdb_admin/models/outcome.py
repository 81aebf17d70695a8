"""Outcome of a user administration request."""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple

from couchdb_admin.errors import (
    ConflictError,
    CouchDBHTTPError,
    DecodeError,
    NotFoundError,
)

Headers = List[Tuple[str, str]]


class ErrorKind(Enum):
    """Why a request produced a Failure."""

    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    DECODE = "decode"
    HTTP = "http"


_ERRORS = {
    ErrorKind.CONFLICT: ConflictError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.DECODE: DecodeError,
    ErrorKind.HTTP: CouchDBHTTPError,
}


@dataclass(frozen=True)
class Outcome:
    """Raw response body, plus headers for create and destroy."""

    body: str
    headers: Optional[Headers] = None
    status_code: Optional[int] = None

    ok = False
    error_kind: Optional[ErrorKind] = None

    def json(self) -> Any:
        return json.loads(self.body)

    def raise_for_error(self) -> "Outcome":
        return self


@dataclass(frozen=True)
class Success(Outcome):
    ok = True


@dataclass(frozen=True)
class Failure(Outcome):
    error_kind: Optional[ErrorKind] = ErrorKind.HTTP

    def raise_for_error(self) -> "Outcome":
        kind = self.error_kind or ErrorKind.HTTP
        raise _ERRORS[kind](
            f"CouchDB request failed ({kind.value}, status {self.status_code}): "
            f"{self.body.strip()}",
            status_code=self.status_code,
            body=self.body,
        )
