"""Pytest configuration and fixtures for rental_core tests.

This module provides reusable fixtures for testing:
- DynamoDB mocking with moto
- Sample property and request fixtures
- Mocked repositories for the booking rules
"""

import os
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Generator
from unittest.mock import MagicMock
from uuid import UUID, uuid4

import boto3
import pytest
from moto import mock_aws

from rental_core.models import (
    PropertyAvailability,
    PropertyCapacityInfo,
    RegisterReservationArgs,
)

# === Environment Setup ===

# Set environment variables for testing before any service is created
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("DYNAMODB_TABLE_PREFIX", "test-rental")


@pytest.fixture(autouse=True)
def reset_cached_services() -> Generator[None, None, None]:
    """Reset the DynamoDB singleton and cached services around each test.

    Tests using mock_aws then get a fresh service instance inside the mock
    context rather than one from a previous test.
    """
    from rental_core.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === DynamoDB Fixtures ===


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS Credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"


@pytest.fixture
def dynamodb_client(aws_credentials: None) -> Generator[Any, None, None]:
    """Create a mocked DynamoDB client."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="eu-west-1")
        yield client


@pytest.fixture
def create_tables(dynamodb_client: Any) -> None:
    """Create the property and reservation tables."""
    tables = [
        {
            "TableName": "test-rental-properties",
            "KeySchema": [{"AttributeName": "property_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "property_id", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": "test-rental-reservations",
            "KeySchema": [{"AttributeName": "reservation_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "reservation_id", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
    ]

    for table_config in tables:
        dynamodb_client.create_table(**table_config)


# === Sample Data Fixtures ===


@pytest.fixture
def property_id() -> UUID:
    """A random property ID."""
    return uuid4()


@pytest.fixture
def available_property(property_id: UUID) -> PropertyCapacityInfo:
    """An available property for up to 9 guests at 100 per night."""
    return PropertyCapacityInfo(
        id=property_id,
        max_guests=9,
        status=PropertyAvailability.AVAILABLE,
        price=Decimal("100"),
    )


@pytest.fixture
def booked_property(property_id: UUID) -> PropertyCapacityInfo:
    """A booked property for up to 9 guests."""
    return PropertyCapacityInfo(
        id=property_id,
        max_guests=9,
        status=PropertyAvailability.BOOKED,
        price=Decimal("100"),
    )


@pytest.fixture
def make_args(property_id: UUID) -> Callable[..., RegisterReservationArgs]:
    """Factory for stay requests against the sample property."""

    def _make(
        total_guests: int = 4,
        pid: UUID | None = None,
    ) -> RegisterReservationArgs:
        return RegisterReservationArgs(
            property_id=pid if pid is not None else property_id,
            total_guests=total_guests,
            check_in_date=date(2023, 10, 15),
            check_out_date=date(2023, 10, 20),
        )

    return _make


# === Repository Mocks ===


@pytest.fixture
def property_repo() -> MagicMock:
    """Mocked property repository with no properties."""
    repo = MagicMock()
    repo.find.return_value = None
    return repo


@pytest.fixture
def reservation_repo() -> MagicMock:
    """Mocked reservation repository returning a fixed ID."""
    repo = MagicMock()
    repo.persist.return_value = uuid4()
    return repo
