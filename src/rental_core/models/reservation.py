"""Reservation models for registering a stay."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Reservation(BaseModel):
    """A committed booking of a property."""

    model_config = ConfigDict(strict=True, frozen=True)

    property_id: UUID
    guests: int = Field(..., ge=1)
    check_in: date
    check_out: date

    @model_validator(mode="after")
    def validate_dates(self) -> "Reservation":
        """Ensure check-out is after check-in."""
        if self.check_out <= self.check_in:
            raise ValueError("check_out must be after check_in")
        return self


class RegisterReservationArgs(BaseModel):
    """Request to reserve a property for a stay.

    The guest count is deliberately unconstrained here: staying within the
    property's capacity is a business rule checked during registration.
    """

    model_config = ConfigDict(strict=True, frozen=True)

    property_id: UUID
    total_guests: int
    check_in_date: date
    check_out_date: date

    @model_validator(mode="after")
    def validate_dates(self) -> "RegisterReservationArgs":
        """Ensure check-out is after check-in."""
        if self.check_out_date <= self.check_in_date:
            raise ValueError("check_out_date must be after check_in_date")
        return self
