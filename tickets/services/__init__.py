from functools import cache

from tickets.conf import get_setting
from tickets.gateways.loader import load_payment_gateway, load_reservation_gateway
from tickets.services.purchase_service import (
    PurchaseValidator,
    TicketPurchaseService,
    calculate_ticket_price,
    price_of,
)


def build_purchase_service() -> TicketPurchaseService:
    """Wire a purchase service from the configured gateways."""
    return TicketPurchaseService(
        payment_gateway=load_payment_gateway(),
        reservation_gateway=load_reservation_gateway(),
        max_tickets=get_setting("TICKETS_MAX_PER_PURCHASE"),
    )


@cache
def default_purchase_service() -> TicketPurchaseService:
    """Return the process-wide service, built on first use."""
    return build_purchase_service()


__all__ = [
    "PurchaseValidator",
    "TicketPurchaseService",
    "build_purchase_service",
    "default_purchase_service",
    "calculate_ticket_price",
    "price_of",
]
