"""Classification of CouchDB responses into Success / Failure outcomes."""

from typing import Optional

from httpx import Response, codes

from couchdb_admin.models.outcome import ErrorKind, Failure, Headers, Outcome, Success

_STATUS_KINDS = {
    codes.CONFLICT: ErrorKind.CONFLICT,
    codes.NOT_FOUND: ErrorKind.NOT_FOUND,
}


def classify(
    status_code: int,
    body: str,
    headers: Optional[Headers] = None,
    include_headers: bool = False,
) -> Outcome:
    """Turn a status and body into an Outcome.

    Any 2xx status is a Success, everything else a Failure. The body is
    passed through untouched; headers are attached only when requested.
    """
    attached = list(headers or []) if include_headers else None

    if 200 <= status_code <= 299:
        return Success(body=body, headers=attached, status_code=status_code)

    return Failure(
        body=body,
        headers=attached,
        status_code=status_code,
        error_kind=_STATUS_KINDS.get(status_code, ErrorKind.HTTP),
    )


def classify_response(response: Response, include_headers: bool = False) -> Outcome:
    return classify(
        response.status_code,
        response.text,
        headers=list(response.headers.multi_items()),
        include_headers=include_headers,
    )
