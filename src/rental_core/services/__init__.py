"""Booking rules and their collaborators."""

from .dynamodb import DynamoDBService, get_dynamodb_service, reset_dynamodb_service
from .interfaces import Command, PropertyRepository, Query, ReservationRepository
from .pricing import SURCHARGE_RATES, GetPropertyPrice, surcharge_rate
from .registration import NIL_PROPERTY_ID, RegisterReservation
from .repositories import DynamoDBPropertyRepository, DynamoDBReservationRepository

__all__ = [
    "Command",
    "Query",
    "PropertyRepository",
    "ReservationRepository",
    "RegisterReservation",
    "NIL_PROPERTY_ID",
    "GetPropertyPrice",
    "SURCHARGE_RATES",
    "surcharge_rate",
    "DynamoDBService",
    "get_dynamodb_service",
    "reset_dynamodb_service",
    "DynamoDBPropertyRepository",
    "DynamoDBReservationRepository",
]
