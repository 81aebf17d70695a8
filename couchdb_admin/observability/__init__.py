"""
Observability module for couchdb-admin.

Usage:
    from couchdb_admin.observability import setup_logging

    setup_logging(log_format="json", log_level="DEBUG")
"""

from couchdb_admin.observability.logging_config import (
    PasswordRedactionFilter,
    setup_logging,
)

__all__ = ["setup_logging", "PasswordRedactionFilter"]
