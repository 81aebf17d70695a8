import logging

import pytest

from couchdb_admin.client import CouchDBClient
from couchdb_admin.config import ConnectionConfig
from tests.fake_couchdb import FakeCouchDB

logger = logging.getLogger(__name__)


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(
        protocol="http", hostname="localhost", port=5984, database="test"
    )


@pytest.fixture
def fake_couchdb() -> FakeCouchDB:
    return FakeCouchDB()


@pytest.fixture
async def couchdb_client(connection_config, fake_couchdb):
    """CouchDBClient wired to the in-memory _users database."""
    async with CouchDBClient(
        connection_config, transport=fake_couchdb.transport()
    ) as client:
        yield client
