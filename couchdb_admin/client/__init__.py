import logging
from typing import Iterable

from httpx import (
    AsyncBaseTransport,
    AsyncClient,
    AsyncHTTPTransport,
    Auth,
    BasicAuth,
    Request,
    Response,
    Timeout,
)

from couchdb_admin.config import (
    DEFAULT_USER_ROLES,
    ConnectionConfig,
    Settings,
    get_settings,
)

from .users import UsersClient

logger = logging.getLogger(__name__)


async def log_request(request: Request):
    logger.debug(
        "Request event hook: %s %s - Waiting for content",
        request.method,
        request.url,
    )
    logger.debug("Request body: %s", request.content.decode("utf-8", "replace"))


async def log_response(response: Response):
    await response.aread()
    logger.debug("Response [%s] %s", response.status_code, response.text)


class AsyncDisableCookieTransport(AsyncBaseTransport):
    """This Transport disable cookies from accumulating in the httpx AsyncClient

    CouchDB hands out AuthSession cookies; requests must keep using the
    credentials the client was configured with.

    Thanks to: https://github.com/encode/httpx/issues/2992#issuecomment-2133258994
    """

    def __init__(self, transport: AsyncBaseTransport):
        self.transport = transport

    async def handle_async_request(self, request: Request) -> Response:
        response = await self.transport.handle_async_request(request)
        response.headers.pop("set-cookie", None)
        return response

    async def aclose(self) -> None:
        await self.transport.aclose()


class CouchDBClient:
    """Main CouchDB client that owns the HTTP connection pool."""

    def __init__(
        self,
        config: ConnectionConfig,
        auth: Auth | None = None,
        default_roles: Iterable[str] = DEFAULT_USER_ROLES,
        timeout: Timeout | None = None,
        transport: AsyncBaseTransport | None = None,
    ):
        self.config = config
        self._client = AsyncClient(
            base_url=config.base_url,
            auth=auth,
            transport=AsyncDisableCookieTransport(transport or AsyncHTTPTransport()),
            event_hooks={"request": [log_request], "response": [log_response]},
            timeout=timeout or Timeout(timeout=30, connect=5),
        )

        self.users = UsersClient(self._client, config, default_roles=default_roles)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "CouchDBClient":
        auth = None
        if settings.couchdb_admin_username and settings.couchdb_admin_password:
            auth = BasicAuth(
                settings.couchdb_admin_username, settings.couchdb_admin_password
            )

        return cls(
            config=settings.connection_config(),
            auth=auth,
            default_roles=settings.default_roles,
            timeout=Timeout(
                timeout=settings.request_timeout, connect=settings.connect_timeout
            ),
            **kwargs,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "CouchDBClient":
        logger.info("Creating CouchDB client using env vars")
        return cls.from_settings(get_settings(), **kwargs)

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - closes the HTTP client."""
        await self.close()
        return False  # Don't suppress exceptions

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()


__all__ = ["CouchDBClient", "UsersClient"]
