"""Contracts between the booking rules and their collaborators.

Commands change state, queries only read it. Repositories are implemented
elsewhere (see ``repositories.py`` for the DynamoDB versions) and are
injected into commands and queries at construction time.
"""

from typing import Protocol, TypeVar
from uuid import UUID

from rental_core.models import PropertyAvailability, PropertyCapacityInfo, Reservation

ArgsT = TypeVar("ArgsT", contravariant=True)
OutT = TypeVar("OutT", covariant=True)


class Command(Protocol[ArgsT, OutT]):
    """An operation that changes state."""

    def execute(self, args: ArgsT) -> OutT: ...


class Query(Protocol[ArgsT, OutT]):
    """An operation that only reads state."""

    def execute(self, args: ArgsT) -> OutT: ...


class PropertyRepository(Protocol):
    """Lookup and status transitions for properties."""

    def find(self, property_id: UUID) -> PropertyCapacityInfo | None:
        """Return the property snapshot, or None if it does not exist."""
        ...

    def update_status(
        self,
        property_id: UUID,
        status: PropertyAvailability,
        expected_status: PropertyAvailability | None = None,
    ) -> None:
        """Transition the property's status.

        Raises:
            StatusConflictError: If the property is missing or does not
                currently hold ``expected_status``.
        """
        ...


class ReservationRepository(Protocol):
    """Persistence for reservations."""

    def persist(self, reservation: Reservation) -> UUID:
        """Store the reservation and return its newly generated ID."""
        ...
