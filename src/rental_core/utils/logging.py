"""Logging helpers for booking operations.

Every record emitted through ``get_logger`` carries a ``correlation_id``
attribute taken from the ``correlation_id`` context variable, which the
calling application layer sets per request.
"""

import logging
from contextvars import ContextVar
from typing import Any

correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

NO_CORRELATION_ID = "no-correlation-id"


class CorrelationIdFilter(logging.Filter):
    """Stamp records with the current correlation ID."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id.get() or NO_CORRELATION_ID
        return True


def get_logger(name: str) -> logging.Logger:
    """Get a logger that stamps records with the correlation ID.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger with a single CorrelationIdFilter attached
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())
    return logger


def log_booking_operation(
    logger: logging.Logger,
    operation: str,
    *,
    property_id: Any = None,
    reservation_id: Any = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log the outcome of a booking operation.

    Commits go to ``info``. Rejections are expected business outcomes and
    go to ``warning``.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "register_reservation")
        property_id: Property the operation targeted
        reservation_id: Reservation created, if any
        error: Rejection reason, if the operation was refused
        **extra: Additional fields added to the record
    """
    fields: dict[str, Any] = {"operation": operation}
    if property_id is not None:
        fields["property_id"] = str(property_id)
    if reservation_id is not None:
        fields["reservation_id"] = str(reservation_id)
    if error:
        fields["error"] = error
    fields.update(extra)

    summary = ", ".join(f"{k}={v}" for k, v in fields.items() if k != "operation")
    message = f"{operation}: {summary}" if summary else operation

    level = logging.WARNING if error else logging.INFO
    logger.log(level, message, extra=fields)
