"""Error codes, rejection reasons and exceptions for booking operations.

Business rejections are returned as ``Err`` values (see ``result.py``)
using the codes below. Exceptions are reserved for wiring and input
envelope defects, and for a lost race on the property status.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Codes for expected business rejections."""

    INVALID_PROPERTY_ID = "ERR_001"
    PROPERTY_NOT_FOUND = "ERR_002"
    INVALID_GUEST_COUNT = "ERR_003"
    PROPERTY_BOOKED = "ERR_004"


# Human-readable reasons, formatted with the parameters of the rejection
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_PROPERTY_ID: "Invalid PropertyId '{property_id}'.",
    ErrorCode.PROPERTY_NOT_FOUND: "Property '{property_id}' not found.",
    ErrorCode.INVALID_GUEST_COUNT: (
        "Invalid number of guests, must be between 1 and {max_guests}."
    ),
    ErrorCode.PROPERTY_BOOKED: "Unable to create reservation for booked property.",
}


class PreconditionError(ValueError):
    """Raised when a required argument or collaborator is missing.

    This signals a programming or wiring defect, never a business outcome.
    """


class StatusConflictError(Exception):
    """Raised by the property repository when a conditional status update fails.

    The property either does not exist (``missing`` is True) or no longer
    holds the expected status.
    """

    def __init__(
        self,
        property_id: object,
        expected_status: object = None,
        missing: bool = False,
    ):
        self.property_id = property_id
        self.expected_status = expected_status
        self.missing = missing
        if missing:
            message = f"Property '{property_id}' no longer exists"
        else:
            message = f"Status update conflict for property '{property_id}'"
            if expected_status is not None:
                message += f" (expected {expected_status})"
        super().__init__(message)
