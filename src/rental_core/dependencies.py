"""Factory functions that wire the booking rules to their collaborators.

Instances are created lazily and cached with @lru_cache.

Dependency graph:
    DynamoDBService (singleton via get_dynamodb_service)
        ├── DynamoDBPropertyRepository
        │       ├── GetPropertyPrice
        │       └── RegisterReservation
        └── DynamoDBReservationRepository
                └── RegisterReservation

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from rental_core.services.dynamodb import get_dynamodb_service, reset_dynamodb_service
from rental_core.services.pricing import GetPropertyPrice
from rental_core.services.registration import RegisterReservation
from rental_core.services.repositories import (
    DynamoDBPropertyRepository,
    DynamoDBReservationRepository,
)


@lru_cache
def get_property_repository() -> DynamoDBPropertyRepository:
    """Get cached DynamoDBPropertyRepository instance."""
    return DynamoDBPropertyRepository(db=get_dynamodb_service())


@lru_cache
def get_reservation_repository() -> DynamoDBReservationRepository:
    """Get cached DynamoDBReservationRepository instance."""
    return DynamoDBReservationRepository(db=get_dynamodb_service())


@lru_cache
def get_register_reservation() -> RegisterReservation:
    """Get cached RegisterReservation command."""
    return RegisterReservation(
        property_repository=get_property_repository(),
        reservation_repository=get_reservation_repository(),
    )


@lru_cache
def get_property_price() -> GetPropertyPrice:
    """Get cached GetPropertyPrice query."""
    return GetPropertyPrice(property_repository=get_property_repository())


def reset_services() -> None:
    """Clear all cached instances, including the DynamoDB singleton."""
    get_property_repository.cache_clear()
    get_reservation_repository.cache_clear()
    get_register_reservation.cache_clear()
    get_property_price.cache_clear()
    reset_dynamodb_service()
