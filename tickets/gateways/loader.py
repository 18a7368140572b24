"""Build gateways from the dotted paths configured in settings."""

from django.utils.module_loading import import_string

from tickets.conf import get_setting
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway


def load_payment_gateway() -> PaymentGateway:
    gateway_class = import_string(get_setting("TICKETS_PAYMENT_GATEWAY"))
    return gateway_class()


def load_reservation_gateway() -> SeatReservationGateway:
    gateway_class = import_string(get_setting("TICKETS_RESERVATION_GATEWAY"))
    return gateway_class()
