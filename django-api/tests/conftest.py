"""Pytest configuration and shared fixtures."""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from pricing.domain import Event


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def weekday_event() -> Event:
    return Event(name="Movie Night", is_weekend=False, booking_fee=Decimal("2.00"))


@pytest.fixture
def weekend_event() -> Event:
    return Event(name="Campus Sport Day", is_weekend=True, booking_fee=Decimal("5.00"))


@pytest.fixture
def high_demand_event() -> Event:
    return Event(
        name="Campus Concert",
        is_weekend=True,
        booking_fee=Decimal("5.00"),
        is_high_demand=True,
    )
