"""Property models used for booking decisions.

The property record itself is owned by the property repository; these
models are read-only snapshots of the fields that matter for reserving
and pricing a stay.
"""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .enums import PropertyAvailability


class PropertyCapacityInfo(BaseModel):
    """Capacity, availability and base price of a property."""

    model_config = ConfigDict(strict=True, frozen=True)

    id: UUID
    max_guests: int = Field(..., ge=1, description="Maximum guests per reservation")
    status: PropertyAvailability = PropertyAvailability.AVAILABLE
    # Collaborators may supply whole-unit integer prices
    price: Decimal = Field(..., ge=0, strict=False, description="Base nightly price")
