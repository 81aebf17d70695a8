"""
Logging configuration for couchdb-admin.

This module provides:
- Structured JSON logging with python-json-logger
- Human-readable text logging
- Redaction of passwords from request bodies logged by the HTTP hooks
- Log level configuration per component
"""

import logging
import re
import sys

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(levelname)s [%(asctime)s] %(name)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_PASSWORD_PATTERN = re.compile(r'("password"\s*:\s*")((?:[^"\\]|\\.)*)(")')


class PasswordRedactionFilter(logging.Filter):
    """
    Logging filter that masks ``"password": "..."`` values.

    Account creation bodies carry the plaintext password and are logged at
    DEBUG level by the HTTP event hooks.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = _PASSWORD_PATTERN.sub(r"\1***\3", message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


def setup_logging(log_format: str = "text", log_level: str = "INFO") -> None:
    """
    Configure logging for couchdb-admin.

    Args:
        log_format: "json" for JSON logging, "text" for human-readable text (default: "text")
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) (default: "INFO")
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # stdout carries command output, logs go to stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.addFilter(PasswordRedactionFilter())

    if log_format.lower() == "json":
        formatter: logging.Formatter = JsonFormatter(
            JSON_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"
        )
    else:
        formatter = logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    configure_component_loggers(log_level)

    root_logger.debug(f"Logging configured: format={log_format}, level={log_level}")


def configure_component_loggers(default_level: str = "INFO") -> None:
    """
    Configure log levels for specific components.

    Args:
        default_level: Default log level for application loggers
    """
    logger_levels = {
        "couchdb_admin": default_level,
        "couchdb_admin.client": default_level,
        "couchdb_admin.cli": default_level,
        # Third-party libraries stay quiet unless debugging
        "httpx": "WARNING" if default_level.upper() != "DEBUG" else "DEBUG",
        "httpcore": "WARNING",
    }

    for logger_name, level in logger_levels.items():
        logging.getLogger(logger_name).setLevel(
            getattr(logging, level.upper(), logging.INFO)
        )
