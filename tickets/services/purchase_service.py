"""Ticket purchase service - all purchase rules live here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants before any side effect
- Drive payment, then seat reservation
- Let gateway failures reach the caller unchanged
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from tickets.domain.errors import (
    DomainError,
    InvalidAccountIdError,
    InvalidTicketTypeError,
    MissingAdultTicketError,
    TicketLimitExceededError,
)
from tickets.domain.models import PurchaseReceipt, TicketCounts
from tickets.domain.value_objects import AccountId, TicketType, TicketTypeRequest
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.logger_config import custom_logger

MAX_TICKETS_PER_PURCHASE = 20

TICKET_PRICES: Mapping[TicketType, int] = MappingProxyType(
    {
        TicketType.INFANT: 0,
        TicketType.CHILD: 10,
        TicketType.ADULT: 20,
    }
)


def price_of(ticket_type: TicketType) -> int:
    """Return the unit price of a ticket type.

    Raises:
        InvalidTicketTypeError: If the ticket type has no price.
    """
    try:
        return TICKET_PRICES[ticket_type]
    except (KeyError, TypeError):
        raise InvalidTicketTypeError(ticket_type) from None


def calculate_ticket_price(ticket_type: TicketType, quantity: int) -> int:
    return price_of(ticket_type) * quantity


def validate_account_id(account_id: int) -> None:
    try:
        AccountId(account_id)
    except ValueError:
        raise InvalidAccountIdError() from None


def validate_ticket_limit(requests: Sequence[TicketTypeRequest], limit: int) -> None:
    attempted_total = sum(request.quantity for request in requests)
    if attempted_total > limit:
        raise TicketLimitExceededError(attempted_total=attempted_total, limit=limit)


def validate_adult_present(counts: TicketCounts) -> None:
    if counts.adult > 0:
        return
    if counts.child > 0:
        raise MissingAdultTicketError(TicketType.CHILD)
    if counts.infant > 0:
        raise MissingAdultTicketError(TicketType.INFANT)


class TicketPurchaseService:
    """Service for validating and completing ticket purchases."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        reservation_gateway: SeatReservationGateway,
        max_tickets: int = MAX_TICKETS_PER_PURCHASE,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._reservation_gateway = reservation_gateway
        self._max_tickets = max_tickets

    @property
    def payment_gateway(self) -> PaymentGateway:
        return self._payment_gateway

    @property
    def reservation_gateway(self) -> SeatReservationGateway:
        return self._reservation_gateway

    @staticmethod
    def price_of(ticket_type: TicketType) -> int:
        return price_of(ticket_type)

    @staticmethod
    def calculate_ticket_price(ticket_type: TicketType, quantity: int) -> int:
        return calculate_ticket_price(ticket_type, quantity)

    def purchase(
        self, account_id: int, requests: Sequence[TicketTypeRequest]
    ) -> PurchaseReceipt:
        """Validate an order, take payment and reserve seats.

        Checks run in a fixed order and the first failure wins: account ID,
        ticket limit, adult presence, then pricing. Nothing is charged or
        reserved for an invalid order.

        Raises:
            InvalidAccountIdError: If account_id is not a positive integer.
            TicketLimitExceededError: If the order exceeds the ticket limit.
            MissingAdultTicketError: If child or infant tickets have no adult.
            InvalidTicketTypeError: If a request has an unknown ticket type.
        """
        log = custom_logger.bind(account_id=account_id)
        requests = tuple(requests)

        try:
            validate_account_id(account_id)
            validate_ticket_limit(requests, self._max_tickets)
            counts = TicketCounts.from_requests(requests)
            validate_adult_present(counts)
            total_amount = sum(
                calculate_ticket_price(request.ticket_type, request.quantity)
                for request in requests
            )
        except DomainError as e:
            log.bind(stage="validation").warning(f"Purchase rejected: {e.code.value}")
            raise

        try:
            self._payment_gateway.make_payment(account_id, total_amount)
        except Exception as e:
            log.bind(stage="payment").error(f"Error during payment: {e!r}")
            raise

        # No refund is attempted if a reservation fails after payment.
        seats_reserved = 0
        for request in requests:
            if not request.ticket_type.occupies_seat:
                continue
            try:
                self._reservation_gateway.reserve_seat(account_id, request.quantity)
            except Exception as e:
                log.bind(stage="reservation").error(
                    f"Error during seat reservation after payment of {total_amount}: {e!r}"
                )
                raise
            seats_reserved += request.quantity

        log.bind(stage="complete").info(
            f"Purchased {counts.total} tickets for {total_amount}, {seats_reserved} seats reserved"
        )
        return PurchaseReceipt(
            account_id=account_id,
            total_amount=total_amount,
            seats_reserved=seats_reserved,
            counts=counts,
        )


# Name used by callers that think of this as the order validator.
PurchaseValidator = TicketPurchaseService
