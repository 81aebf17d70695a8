"""Client for the CouchDB ``_users`` authentication database."""

import json
import logging
from typing import Iterable, Optional

from httpx import AsyncClient
from pydantic import ValidationError

from couchdb_admin.client.base import BaseCouchDBClient
from couchdb_admin.client.locator import user_doc_id, user_url
from couchdb_admin.client.response import classify_response
from couchdb_admin.config import DEFAULT_USER_ROLES, ConnectionConfig
from couchdb_admin.models.outcome import ErrorKind, Failure, Outcome
from couchdb_admin.models.users import UserCreate, UserRecord

logger = logging.getLogger(__name__)


class UsersClient(BaseCouchDBClient):
    """Create, read and destroy server user accounts."""

    def __init__(
        self,
        http_client: AsyncClient,
        config: ConnectionConfig,
        default_roles: Iterable[str] = DEFAULT_USER_ROLES,
    ):
        super().__init__(http_client, config)
        self.default_roles = tuple(default_roles)

    def _log_outcome(self, action: str, username: str, outcome: Outcome) -> None:
        if outcome.ok:
            logger.info(f"{action} {user_doc_id(username)}: {outcome.status_code}")
        elif outcome.error_kind == ErrorKind.NOT_FOUND:
            logger.debug(f"{action} {user_doc_id(username)}: not found")
        else:
            logger.warning(
                f"{action} {user_doc_id(username)} failed "
                f"({outcome.status_code}): {outcome.body.strip()}"
            )

    async def create_user(
        self,
        username: str,
        password: str,
        roles: Optional[Iterable[str]] = None,
    ) -> Outcome:
        """Create a new user account.

        Args:
            username: Account name
            password: Plaintext password; the server stores only a derived key
            roles: Role names, defaults to the client's ``default_roles``

        Returns:
            Success with the server's body and headers, or Failure (e.g. a
            CONFLICT when the account already exists)
        """
        payload = UserCreate(
            name=username,
            password=password,
            roles=list(self.default_roles if roles is None else roles),
        )
        response = await self._make_request(
            "PUT",
            user_url(self.config, username),
            content=payload.model_dump_json(),
            headers={"Content-Type": "application/json"},
        )
        outcome = classify_response(response, include_headers=True)
        self._log_outcome("Create", username, outcome)
        return outcome

    async def user_info(self, username: str) -> Outcome:
        """Fetch the public record of a user.

        Returns:
            Success with the user document as body, or Failure (NOT_FOUND for
            unknown and deleted accounts). Headers are not attached.
        """
        response = await self._make_request("GET", user_url(self.config, username))
        outcome = classify_response(response, include_headers=False)
        self._log_outcome("Read", username, outcome)
        return outcome

    read_user = user_info

    async def destroy_user(self, username: str) -> Outcome:
        """Delete a user account.

        The account is read first to obtain its current revision, then
        deleted at that revision. If the account changes in between, the
        server rejects the delete and a CONFLICT Failure is returned.

        Returns:
            Success with the server's body and headers, the read's Failure
            unchanged when the account cannot be read, a DECODE Failure when
            the record carries no revision, or the delete's Failure.
        """
        current = await self.user_info(username)
        if not current.ok:
            return current

        try:
            record = UserRecord.model_validate_json(current.body)
        except ValidationError as e:
            logger.warning(f"Could not decode user record for '{username}': {e}")
            return self._decode_failure(current, f"invalid user record: {e}")

        if not record.rev:
            logger.warning(f"User record for '{username}' has no revision")
            return self._decode_failure(current, "user record has no _rev")

        response = await self._make_request(
            "DELETE",
            user_url(self.config, username),
            params={"rev": record.rev},
        )
        outcome = classify_response(response, include_headers=True)
        self._log_outcome("Destroy", username, outcome)
        return outcome

    @staticmethod
    def _decode_failure(current: Outcome, reason: str) -> Failure:
        return Failure(
            body=json.dumps({"error": "decode_error", "reason": reason}),
            status_code=current.status_code,
            error_kind=ErrorKind.DECODE,
        )
