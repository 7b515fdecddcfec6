"""Unit tests for booking models and result values."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest
from pydantic import ValidationError

from rental_core.models import (
    Err,
    ErrorCode,
    Ok,
    PropertyAvailability,
    PropertyCapacityInfo,
    RegisterReservationArgs,
    Reservation,
    StatusConflictError,
)


class TestPropertyCapacityInfo:
    """Tests for the property snapshot."""

    def test_status_defaults_to_available(self) -> None:
        info = PropertyCapacityInfo(id=uuid4(), max_guests=3, price=Decimal("70"))
        assert info.status == PropertyAvailability.AVAILABLE

    def test_max_guests_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            PropertyCapacityInfo(id=uuid4(), max_guests=0, price=Decimal("70"))

    def test_integer_price_is_accepted(self) -> None:
        info = PropertyCapacityInfo(id=uuid4(), max_guests=9, price=100)
        assert info.price == Decimal("100")
        assert isinstance(info.price, Decimal)

    def test_price_cannot_be_negative(self) -> None:
        with pytest.raises(ValidationError):
            PropertyCapacityInfo(id=uuid4(), max_guests=2, price=Decimal("-1"))

    def test_is_immutable(self) -> None:
        info = PropertyCapacityInfo(id=uuid4(), max_guests=3, price=Decimal("70"))
        with pytest.raises(ValidationError):
            info.status = PropertyAvailability.BOOKED  # type: ignore[misc]


class TestReservation:
    """Tests for reservation invariants."""

    def test_requires_at_least_one_guest(self) -> None:
        with pytest.raises(ValidationError):
            Reservation(
                property_id=uuid4(),
                guests=0,
                check_in=date(2023, 10, 15),
                check_out=date(2023, 10, 20),
            )

    def test_check_out_must_follow_check_in(self) -> None:
        with pytest.raises(ValidationError):
            Reservation(
                property_id=uuid4(),
                guests=2,
                check_in=date(2023, 10, 20),
                check_out=date(2023, 10, 20),
            )


class TestRegisterReservationArgs:
    """Tests for the registration request envelope."""

    def test_guest_count_is_not_validated_here(self) -> None:
        args = RegisterReservationArgs(
            property_id=uuid4(),
            total_guests=0,
            check_in_date=date(2023, 10, 15),
            check_out_date=date(2023, 10, 20),
        )
        assert args.total_guests == 0

    def test_reversed_dates_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RegisterReservationArgs(
                property_id=uuid4(),
                total_guests=2,
                check_in_date=date(2023, 10, 20),
                check_out_date=date(2023, 10, 15),
            )


class TestResults:
    """Tests for Ok and Err values."""

    def test_ok_carries_value(self) -> None:
        reservation_id = uuid4()
        result = Ok(value=reservation_id)
        assert result.is_ok is True
        assert result.value == reservation_id

    def test_err_from_code_renders_reason(self) -> None:
        err = Err.from_code(ErrorCode.INVALID_GUEST_COUNT, max_guests=6)
        assert err.is_ok is False
        assert err.reason == "Invalid number of guests, must be between 1 and 6."
        assert err.details is None

    def test_err_keeps_details(self) -> None:
        err = Err.from_code(ErrorCode.PROPERTY_BOOKED, details={"reason": "booking_conflict"})
        assert err.error_code == ErrorCode.PROPERTY_BOOKED
        assert err.details == {"reason": "booking_conflict"}


def test_status_conflict_message_names_property() -> None:
    property_id = uuid4()
    error = StatusConflictError(property_id, PropertyAvailability.AVAILABLE)
    assert str(property_id) in str(error)
    assert error.expected_status == PropertyAvailability.AVAILABLE
