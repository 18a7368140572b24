"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from tickets.gateways import InMemoryPaymentGateway, InMemorySeatReservationGateway
from tickets.services import TicketPurchaseService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def payment_gateway() -> InMemoryPaymentGateway:
    return InMemoryPaymentGateway()


@pytest.fixture
def reservation_gateway() -> InMemorySeatReservationGateway:
    return InMemorySeatReservationGateway()


@pytest.fixture
def purchase_service(payment_gateway, reservation_gateway) -> TicketPurchaseService:
    return TicketPurchaseService(payment_gateway, reservation_gateway)


@pytest.fixture
def log_records():
    """Collect loguru records emitted while the test runs."""
    from tickets.logger_config import custom_logger

    records = []
    handler_id = custom_logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    custom_logger.remove(handler_id)
