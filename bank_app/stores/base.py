"""
Shared helpers for the stores.

Stores talk to SQLAlchemy directly. Driver-level failures
(connection refused, server gone away) are translated into
StorageUnavailable so callers never see SQLAlchemy exceptions
for an outage.
"""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import InterfaceError, OperationalError

from bank_app.errors import StorageUnavailable

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(operation: str):
    """Re-raise database outages as StorageUnavailable."""
    try:
        yield
    except (OperationalError, InterfaceError) as e:
        logger.error("storage unavailable operation=%s error=%s", operation, e)
        raise StorageUnavailable(f"Storage unavailable during {operation}") from e
