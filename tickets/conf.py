"""Settings for the tickets app, read from Django settings with defaults."""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    "TICKETS_MAX_PER_PURCHASE": 20,
    "TICKETS_PAYMENT_GATEWAY": "tickets.gateways.memory.InMemoryPaymentGateway",
    "TICKETS_RESERVATION_GATEWAY": "tickets.gateways.memory.InMemorySeatReservationGateway",
    "TICKETS_LOG_LEVEL": "INFO",
}


def get_setting(name: str) -> Any:
    """Return a tickets setting, falling back to its default."""
    return getattr(settings, name, DEFAULTS[name])
