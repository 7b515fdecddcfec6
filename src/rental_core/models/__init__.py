"""Pydantic models for rental booking entities."""

from .enums import PropertyAvailability
from .errors import (
    ERROR_MESSAGES,
    ErrorCode,
    PreconditionError,
    StatusConflictError,
)
from .pricing import GetPropertyPriceArgs
from .property import PropertyCapacityInfo
from .reservation import RegisterReservationArgs, Reservation
from .result import Err, Ok

__all__ = [
    # Enums
    "PropertyAvailability",
    # Property
    "PropertyCapacityInfo",
    # Reservation
    "Reservation",
    "RegisterReservationArgs",
    # Pricing
    "GetPropertyPriceArgs",
    # Results and errors
    "Ok",
    "Err",
    "ErrorCode",
    "ERROR_MESSAGES",
    "PreconditionError",
    "StatusConflictError",
]
