"""Reservation registration: validate a stay request and book the property.

Stages run in a fixed order and the first rejection wins:

1. property ID must not be the nil UUID (no collaborator is called)
2. property must exist
3. guest count must be between 1 and the property's ``max_guests``
4. property must be AVAILABLE
5. property is moved to BOOKED and the reservation is persisted

Capacity is checked before availability, so a booked property that is
also over capacity reports the capacity rejection.
"""

from typing import TYPE_CHECKING
from uuid import UUID

from rental_core.models import (
    Err,
    ErrorCode,
    Ok,
    PreconditionError,
    PropertyAvailability,
    PropertyCapacityInfo,
    RegisterReservationArgs,
    Reservation,
    StatusConflictError,
)
from rental_core.utils.logging import get_logger, log_booking_operation

if TYPE_CHECKING:
    from .interfaces import PropertyRepository, ReservationRepository

logger = get_logger(__name__)

NIL_PROPERTY_ID = UUID(int=0)

OPERATION = "register_reservation"


class RegisterReservation:
    """Command that registers a reservation for a property."""

    def __init__(
        self,
        property_repository: "PropertyRepository",
        reservation_repository: "ReservationRepository",
    ) -> None:
        """Initialize the command.

        Args:
            property_repository: Property lookup and status updates
            reservation_repository: Reservation persistence

        Raises:
            PreconditionError: If either repository is missing
        """
        if property_repository is None:
            raise PreconditionError("property_repository is required")
        if reservation_repository is None:
            raise PreconditionError("reservation_repository is required")
        self.property_repository = property_repository
        self.reservation_repository = reservation_repository

    def execute(self, args: RegisterReservationArgs) -> Ok[UUID] | Err:
        """Register a reservation.

        Args:
            args: Stay request

        Returns:
            Ok with the new reservation ID, or Err with the rejection reason

        Raises:
            PreconditionError: If args is missing
        """
        if args is None:
            raise PreconditionError("args is required")

        if args.property_id == NIL_PROPERTY_ID:
            return self._reject(
                Err.from_code(ErrorCode.INVALID_PROPERTY_ID, property_id=args.property_id),
                args.property_id,
            )

        found = self.property_repository.find(args.property_id)
        if found is None:
            return self._reject(
                Err.from_code(ErrorCode.PROPERTY_NOT_FOUND, property_id=args.property_id),
                args.property_id,
            )

        rejection = self._validate(found, args)
        if rejection is not None:
            return self._reject(rejection, found.id)

        return self._commit(found, args)

    def _validate(
        self, info: PropertyCapacityInfo, args: RegisterReservationArgs
    ) -> Err | None:
        """Apply capacity then availability rules to a found property."""
        if not 1 <= args.total_guests <= info.max_guests:
            return Err.from_code(
                ErrorCode.INVALID_GUEST_COUNT,
                details={
                    "requested": str(args.total_guests),
                    "maximum": str(info.max_guests),
                },
                max_guests=info.max_guests,
            )

        if info.status != PropertyAvailability.AVAILABLE:
            return Err.from_code(ErrorCode.PROPERTY_BOOKED)

        return None

    def _commit(
        self, info: PropertyCapacityInfo, args: RegisterReservationArgs
    ) -> Ok[UUID] | Err:
        """Book the property, then persist the reservation.

        A conditional update that fails because the property disappeared
        after the lookup is reported as not found; any other conflict means
        another registration booked it first.
        """
        try:
            self.property_repository.update_status(
                info.id,
                PropertyAvailability.BOOKED,
                expected_status=PropertyAvailability.AVAILABLE,
            )
        except StatusConflictError as e:
            if e.missing:
                return self._reject(
                    Err.from_code(ErrorCode.PROPERTY_NOT_FOUND, property_id=info.id),
                    info.id,
                )
            return self._reject(
                Err.from_code(
                    ErrorCode.PROPERTY_BOOKED,
                    details={"reason": "booking_conflict"},
                ),
                info.id,
            )

        reservation = Reservation(
            property_id=info.id,
            guests=args.total_guests,
            check_in=args.check_in_date,
            check_out=args.check_out_date,
        )
        reservation_id = self.reservation_repository.persist(reservation)

        log_booking_operation(
            logger,
            OPERATION,
            property_id=info.id,
            reservation_id=reservation_id,
            guests=args.total_guests,
        )
        return Ok[UUID](value=reservation_id)

    def _reject(self, err: Err, property_id: UUID) -> Err:
        log_booking_operation(
            logger,
            OPERATION,
            property_id=property_id,
            error=err.reason,
            error_code=err.error_code.value,
        )
        return err
