"""Nightly price under holiday and zone-demand surcharges."""

from decimal import Decimal
from typing import TYPE_CHECKING

from rental_core.models import GetPropertyPriceArgs, PreconditionError
from rental_core.utils.logging import get_logger

if TYPE_CHECKING:
    from .interfaces import PropertyRepository

logger = get_logger(__name__)

# (hits_holiday, zone_above_threshold) -> surcharge rate.
# Both conditions together are a distinct rate, not the sum of the single ones.
SURCHARGE_RATES: dict[tuple[bool, bool], Decimal] = {
    (False, False): Decimal("0.00"),
    (False, True): Decimal("0.05"),
    (True, False): Decimal("0.05"),
    (True, True): Decimal("0.15"),
}


def surcharge_rate(hits_holiday: bool, zone_above_threshold: bool) -> Decimal:
    """Look up the surcharge rate for a pair of demand conditions."""
    return SURCHARGE_RATES[(hits_holiday, zone_above_threshold)]


class GetPropertyPrice:
    """Query for a property's surcharge-adjusted nightly price."""

    def __init__(self, property_repository: "PropertyRepository") -> None:
        """Initialize the query.

        Args:
            property_repository: Property lookup
        """
        if property_repository is None:
            raise PreconditionError("property_repository is required")
        self.property_repository = property_repository

    def execute(self, args: GetPropertyPriceArgs) -> Decimal | None:
        """Calculate the nightly price.

        Args:
            args: Property and demand conditions

        Returns:
            Base price multiplied by (1 + rate), or None if the property
            does not exist
        """
        if args is None:
            raise PreconditionError("args is required")

        info = self.property_repository.find(args.property_id)
        if info is None:
            logger.info(
                "Price requested for unknown property",
                extra={"property_id": str(args.property_id)},
            )
            return None

        rate = surcharge_rate(args.hits_holiday, args.zone_above_threshold)
        price = info.price * (1 + rate)

        logger.debug(
            "Calculated property price",
            extra={
                "property_id": str(info.id),
                "base_price": str(info.price),
                "rate": str(rate),
                "price": str(price),
            },
        )
        return price
