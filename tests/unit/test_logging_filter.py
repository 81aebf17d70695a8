"""Unit tests for logging configuration and filters."""

import logging

import pytest

from couchdb_admin.observability.logging_config import (
    PasswordRedactionFilter,
    setup_logging,
)


def make_record(msg, args=()):
    return logging.LogRecord(
        name="couchdb_admin.client",
        level=logging.DEBUG,
        pathname="",
        lineno=0,
        msg=msg,
        args=args,
        exc_info=None,
    )


@pytest.mark.unit
class TestPasswordRedactionFilter:
    def test_redacts_password_in_request_body(self):
        record = make_record(
            "Request body: %s",
            ('{"name":"jan","password":"relax","roles":[],"type":"user"}',),
        )

        assert PasswordRedactionFilter().filter(record) is True
        message = record.getMessage()
        assert "relax" not in message
        assert '"password":"***"' in message
        assert '"name":"jan"' in message

    def test_redacts_password_with_escaped_quotes(self):
        record = make_record('{"password": "a\\"b", "name": "jan"}')

        PasswordRedactionFilter().filter(record)

        assert record.getMessage() == '{"password": "***", "name": "jan"}'

    def test_leaves_other_messages_alone(self):
        record = make_record("Read user '%s': %s", ("jan", 200))

        assert PasswordRedactionFilter().filter(record) is True
        assert record.args == ("jan", 200)
        assert record.getMessage() == "Read user 'jan': 200"


@pytest.mark.unit
@pytest.mark.parametrize("log_format", ["text", "json"])
def test_setup_logging_installs_redacting_handler(log_format):
    root_logger = logging.getLogger()
    saved_handlers = root_logger.handlers[:]
    saved_level = root_logger.level

    try:
        setup_logging(log_format=log_format, log_level="debug")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        handler = root_logger.handlers[0]
        assert any(isinstance(f, PasswordRedactionFilter) for f in handler.filters)
        assert logging.getLogger("httpcore").level == logging.WARNING
    finally:
        root_logger.handlers[:] = saved_handlers
        root_logger.setLevel(saved_level)
