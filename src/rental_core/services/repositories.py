"""DynamoDB-backed property and reservation repositories."""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import TYPE_CHECKING, Any
from uuid import UUID

from rental_core.models import (
    PropertyAvailability,
    PropertyCapacityInfo,
    Reservation,
    StatusConflictError,
)
from rental_core.utils.logging import get_logger

if TYPE_CHECKING:
    from .dynamodb import DynamoDBService

logger = get_logger(__name__)


class DynamoDBPropertyRepository:
    """Property lookup and conditional status transitions."""

    TABLE = "properties"

    def __init__(self, db: "DynamoDBService") -> None:
        """Initialize property repository.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def find(self, property_id: UUID) -> PropertyCapacityInfo | None:
        """Get a property's capacity snapshot.

        Args:
            property_id: Property to look up

        Returns:
            PropertyCapacityInfo or None if not found
        """
        item = self.db.get_item(self.TABLE, {"property_id": str(property_id)})
        if not item:
            return None
        return self._item_to_property(item)

    def update_status(
        self,
        property_id: UUID,
        status: PropertyAvailability,
        expected_status: PropertyAvailability | None = None,
    ) -> None:
        """Set a property's availability status.

        The write is conditional: the property must exist and, when
        ``expected_status`` is given, must still hold it. This closes the
        window between reading the status and booking the property.

        Args:
            property_id: Property to update
            status: New status
            expected_status: Status the property must currently hold

        Raises:
            StatusConflictError: If the condition failed
        """
        condition = "attribute_exists(property_id)"
        values: dict[str, Any] = {
            ":status": status.value,
            ":now": datetime.now(timezone.utc).isoformat(),
        }
        if expected_status is not None:
            condition += " AND #s = :expected"
            values[":expected"] = expected_status.value

        attrs = self.db.update_item(
            table=self.TABLE,
            key={"property_id": str(property_id)},
            update_expression="SET #s = :status, updated_at = :now",
            expression_attribute_values=values,
            expression_attribute_names={"#s": "status"},
            condition_expression=condition,
        )
        if attrs is None:
            key = {"property_id": str(property_id)}
            missing = self.db.get_item(self.TABLE, key) is None
            logger.warning(
                "Property status update rejected",
                extra={
                    "property_id": str(property_id),
                    "status": status.value,
                    "missing": missing,
                },
            )
            raise StatusConflictError(property_id, expected_status, missing=missing)

    def save(self, info: PropertyCapacityInfo) -> bool:
        """Store a property snapshot, replacing any existing one.

        Args:
            info: Property data

        Returns:
            True if stored
        """
        item = {
            "property_id": str(info.id),
            "max_guests": info.max_guests,
            "status": info.status.value,
            "price": info.price,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        return self.db.put_item(self.TABLE, item)

    def _item_to_property(self, item: dict[str, Any]) -> PropertyCapacityInfo:
        """Convert DynamoDB item to PropertyCapacityInfo model."""
        # boto3 returns numbers as Decimal
        return PropertyCapacityInfo(
            id=UUID(item["property_id"]),
            max_guests=int(item["max_guests"]),
            status=PropertyAvailability(
                item.get("status", PropertyAvailability.AVAILABLE.value)
            ),
            price=Decimal(str(item["price"])),
        )


class DynamoDBReservationRepository:
    """Reservation persistence."""

    TABLE = "reservations"

    def __init__(self, db: "DynamoDBService") -> None:
        """Initialize reservation repository.

        Args:
            db: DynamoDB service instance
        """
        self.db = db

    def persist(self, reservation: Reservation) -> UUID:
        """Store a reservation under a freshly generated ID.

        Args:
            reservation: Reservation to store

        Returns:
            The generated reservation ID

        Raises:
            RuntimeError: If an item with the generated ID already exists
        """
        reservation_id = uuid.uuid4()
        item = {
            "reservation_id": str(reservation_id),
            "property_id": str(reservation.property_id),
            "guests": reservation.guests,
            "check_in": reservation.check_in.isoformat(),
            "check_out": reservation.check_out.isoformat(),
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        stored = self.db.put_item(
            self.TABLE,
            item,
            condition_expression="attribute_not_exists(reservation_id)",
        )
        if not stored:
            raise RuntimeError(f"Reservation ID collision: {reservation_id}")
        return reservation_id

    def get(self, reservation_id: UUID) -> Reservation | None:
        """Get a reservation by ID.

        Args:
            reservation_id: Reservation to look up

        Returns:
            Reservation or None if not found
        """
        item = self.db.get_item(self.TABLE, {"reservation_id": str(reservation_id)})
        if not item:
            return None
        return Reservation(
            property_id=UUID(item["property_id"]),
            guests=int(item["guests"]),
            check_in=date.fromisoformat(item["check_in"]),
            check_out=date.fromisoformat(item["check_out"]),
        )
