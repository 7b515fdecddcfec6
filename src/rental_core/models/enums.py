"""Enumeration types for rental data models."""

from enum import Enum


class PropertyAvailability(str, Enum):
    """Availability status of a property."""

    AVAILABLE = "available"
    BOOKED = "booked"
