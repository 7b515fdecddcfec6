"""Pricing request model."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict


class GetPropertyPriceArgs(BaseModel):
    """Request for the nightly price of a property under demand conditions."""

    model_config = ConfigDict(strict=True, frozen=True)

    property_id: UUID
    hits_holiday: bool
    zone_above_threshold: bool
