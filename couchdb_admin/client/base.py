"""Base client for CouchDB operations sharing one HTTP connection pool."""

import logging
import time
from abc import ABC

from httpx import AsyncClient, RequestError, Response

from couchdb_admin.config import ConnectionConfig
from couchdb_admin.errors import TransportError

logger = logging.getLogger(__name__)


class BaseCouchDBClient(ABC):
    """Base class for CouchDB API clients."""

    def __init__(self, http_client: AsyncClient, config: ConnectionConfig):
        """Initialize with shared HTTP client and connection config.

        Args:
            http_client: AsyncClient instance, authenticated as a server admin
            config: Address of the CouchDB server
        """
        self._client = http_client
        self.config = config

    async def _make_request(self, method: str, url: str, **kwargs) -> Response:
        """Send a request and return the response whatever its status.

        Status codes are left to the caller to interpret. Connection failures
        and timeouts are raised as TransportError.

        Args:
            method: HTTP method
            url: Request URL
            **kwargs: Additional request parameters

        Returns:
            Response object
        """
        logger.debug(f"Making {method} request to {url}")
        start_time = time.time()

        try:
            response = await self._client.request(method, url, **kwargs)
        except RequestError as e:
            logger.warning(f"RequestError {method} {url}: {e!r}")
            raise TransportError(
                f"{method} {url} failed: {e!r}", method=method, url=url
            ) from e

        duration = time.time() - start_time
        logger.debug(
            f"{method} {url} -> {response.status_code} in {duration * 1000:.1f}ms"
        )
        return response
