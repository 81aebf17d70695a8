import logging
import os
from dataclasses import dataclass
from typing import Optional

# Roles given to a new account when the caller passes none.
DEFAULT_USER_ROLES: tuple[str, ...] = ()

SUPPORTED_PROTOCOLS = ("http", "https")


@dataclass(frozen=True)
class ConnectionConfig:
    """Location of a CouchDB server.

    ``database`` is kept alongside the server address, but user accounts
    always live in the server's ``_users`` database.
    """

    protocol: str
    hostname: str
    port: int
    database: str

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.hostname}:{self.port}"


def parse_roles(value: Optional[str]) -> tuple[str, ...]:
    if not value:
        return DEFAULT_USER_ROLES
    return tuple(role.strip() for role in value.split(",") if role.strip())


@dataclass
class Settings:
    """Application settings from environment variables."""

    # CouchDB server
    couchdb_protocol: str = "http"
    couchdb_host: str = "localhost"
    couchdb_port: int = 5984
    couchdb_database: str = "_users"

    # Server admin credentials, handed to httpx as BasicAuth
    couchdb_admin_username: Optional[str] = None
    couchdb_admin_password: Optional[str] = None

    default_roles: tuple[str, ...] = DEFAULT_USER_ROLES

    # Transport timeouts, in seconds
    request_timeout: float = 30.0
    connect_timeout: float = 5.0

    # Logging
    log_format: str = "text"  # "json" or "text"
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate connection and timeout settings."""
        logger = logging.getLogger(__name__)

        self.couchdb_protocol = self.couchdb_protocol.lower()
        if self.couchdb_protocol not in SUPPORTED_PROTOCOLS:
            raise ValueError(
                f"COUCHDB_PROTOCOL must be one of {', '.join(SUPPORTED_PROTOCOLS)}, "
                f"got '{self.couchdb_protocol}'"
            )

        if not 1 <= self.couchdb_port <= 65535:
            raise ValueError(
                f"COUCHDB_PORT ({self.couchdb_port}) must be between 1 and 65535."
            )

        if self.request_timeout <= 0 or self.connect_timeout <= 0:
            raise ValueError(
                "COUCHDB_TIMEOUT and COUCHDB_CONNECT_TIMEOUT must be positive."
            )

        if self.couchdb_admin_username and not self.couchdb_admin_password:
            logger.warning(
                "COUCHDB_ADMIN_USERNAME is set but COUCHDB_ADMIN_PASSWORD is not. "
                "Requests will be sent without credentials."
            )

    def connection_config(self) -> ConnectionConfig:
        return ConnectionConfig(
            protocol=self.couchdb_protocol,
            hostname=self.couchdb_host,
            port=self.couchdb_port,
            database=self.couchdb_database,
        )


def get_settings() -> Settings:
    """Get application settings from environment variables.

    Returns:
        Settings object with configuration values
    """
    return Settings(
        couchdb_protocol=os.getenv("COUCHDB_PROTOCOL", "http"),
        couchdb_host=os.getenv("COUCHDB_HOST", "localhost"),
        couchdb_port=int(os.getenv("COUCHDB_PORT", "5984")),
        couchdb_database=os.getenv("COUCHDB_DATABASE", "_users"),
        couchdb_admin_username=os.getenv("COUCHDB_ADMIN_USERNAME"),
        couchdb_admin_password=os.getenv("COUCHDB_ADMIN_PASSWORD"),
        default_roles=parse_roles(os.getenv("COUCHDB_DEFAULT_ROLES")),
        request_timeout=float(os.getenv("COUCHDB_TIMEOUT", "30")),
        connect_timeout=float(os.getenv("COUCHDB_CONNECT_TIMEOUT", "5")),
        log_format=os.getenv("LOG_FORMAT", "text"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
