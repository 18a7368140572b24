from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.gateways.memory import InMemoryPaymentGateway, InMemorySeatReservationGateway

__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "InMemoryPaymentGateway",
    "InMemorySeatReservationGateway",
]
