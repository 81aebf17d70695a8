import logging
from typing import Awaitable, Callable

import anyio
import click

from couchdb_admin.client import CouchDBClient
from couchdb_admin.config import Settings, parse_roles
from couchdb_admin.errors import TransportError
from couchdb_admin.models.outcome import Outcome
from couchdb_admin.observability import setup_logging

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_TRANSPORT_ERROR = 2


def _run(
    settings: Settings, operation: Callable[[CouchDBClient], Awaitable[Outcome]]
) -> None:
    """Run one client operation, print the body and exit with its status."""

    async def _main() -> Outcome:
        async with CouchDBClient.from_settings(settings) as client:
            return await operation(client)

    try:
        outcome = anyio.run(_main)
    except TransportError as e:
        click.echo(f"Error: could not reach CouchDB: {e}", err=True)
        raise SystemExit(EXIT_TRANSPORT_ERROR) from e

    click.echo(outcome.body.rstrip("\n"))
    if not outcome.ok:
        kind = outcome.error_kind.value if outcome.error_kind else "http"
        click.echo(
            f"Error: request failed ({kind}, status {outcome.status_code})", err=True
        )
        raise SystemExit(EXIT_FAILURE)


@click.group()
@click.option(
    "--protocol",
    envvar="COUCHDB_PROTOCOL",
    default="http",
    show_default=True,
    type=click.Choice(["http", "https"], case_sensitive=False),
    help="CouchDB protocol (can also use COUCHDB_PROTOCOL env var)",
)
@click.option(
    "--couchdb-host",
    envvar="COUCHDB_HOST",
    default="localhost",
    show_default=True,
    help="CouchDB hostname (can also use COUCHDB_HOST env var)",
)
@click.option(
    "--couchdb-port",
    envvar="COUCHDB_PORT",
    default=5984,
    show_default=True,
    type=click.IntRange(1, 65535),
    help="CouchDB port (can also use COUCHDB_PORT env var)",
)
@click.option(
    "--database",
    envvar="COUCHDB_DATABASE",
    default="_users",
    show_default=True,
    help="Database name (can also use COUCHDB_DATABASE env var)",
)
@click.option(
    "--admin-username",
    envvar="COUCHDB_ADMIN_USERNAME",
    help="Server admin username (can also use COUCHDB_ADMIN_USERNAME env var)",
)
@click.option(
    "--admin-password",
    envvar="COUCHDB_ADMIN_PASSWORD",
    help="Server admin password (can also use COUCHDB_ADMIN_PASSWORD env var)",
)
@click.option(
    "--timeout",
    envvar="COUCHDB_TIMEOUT",
    default=30.0,
    show_default=True,
    type=click.FloatRange(min=0, min_open=True),
    help="Request timeout in seconds (can also use COUCHDB_TIMEOUT env var)",
)
@click.option(
    "--default-roles",
    envvar="COUCHDB_DEFAULT_ROLES",
    help="Comma-separated roles for accounts created without --role "
    "(can also use COUCHDB_DEFAULT_ROLES env var)",
)
@click.option(
    "--log-level",
    "-l",
    envvar="LOG_LEVEL",
    default="warning",
    show_default=True,
    type=click.Choice(
        ["critical", "error", "warning", "info", "debug"], case_sensitive=False
    ),
    help="Logging level",
)
@click.option(
    "--log-format",
    envvar="LOG_FORMAT",
    default="text",
    show_default=True,
    type=click.Choice(["text", "json"], case_sensitive=False),
    help="Log output format",
)
@click.pass_context
def cli(
    ctx: click.Context,
    protocol: str,
    couchdb_host: str,
    couchdb_port: int,
    database: str,
    admin_username: str | None,
    admin_password: str | None,
    timeout: float,
    default_roles: str | None,
    log_level: str,
    log_format: str,
):
    """
    Manage user accounts on a CouchDB server.

    \b
    Examples:
      $ export COUCHDB_ADMIN_USERNAME=admin COUCHDB_ADMIN_PASSWORD=secret
      $ couchdb-admin create-user jan --password relax --role contributor
      $ couchdb-admin user-info jan
      $ couchdb-admin destroy-user jan --yes
    """
    setup_logging(log_format=log_format, log_level=log_level)

    ctx.obj = Settings(
        couchdb_protocol=protocol,
        couchdb_host=couchdb_host,
        couchdb_port=couchdb_port,
        couchdb_database=database,
        couchdb_admin_username=admin_username,
        couchdb_admin_password=admin_password,
        default_roles=parse_roles(default_roles),
        request_timeout=timeout,
        log_format=log_format,
        log_level=log_level.upper(),
    )


@cli.command("create-user")
@click.argument("username")
@click.option(
    "--password",
    "-P",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password for the new account (prompted when omitted)",
)
@click.option(
    "--role",
    "-r",
    "roles",
    multiple=True,
    help="Role for the new account. Can be specified multiple times.",
)
@click.pass_obj
def create_user(
    settings: Settings, username: str, password: str, roles: tuple[str, ...]
):
    """Create the account USERNAME."""
    _run(
        settings,
        lambda client: client.users.create_user(
            username, password, roles=list(roles) if roles else None
        ),
    )


@cli.command("user-info")
@click.argument("username")
@click.pass_obj
def user_info(settings: Settings, username: str):
    """Print the public record of USERNAME."""
    _run(settings, lambda client: client.users.user_info(username))


@cli.command("destroy-user")
@click.argument("username")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def destroy_user(settings: Settings, username: str, yes: bool):
    """Delete the account USERNAME."""
    if not yes:
        click.confirm(f"Delete user '{username}'?", abort=True)
    _run(settings, lambda client: client.users.destroy_user(username))


if __name__ == "__main__":
    cli()
