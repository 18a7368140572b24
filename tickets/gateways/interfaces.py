"""Gateway interfaces for the external ticketing services.

Gateways must be swappable; the purchase service never looks past these methods.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for taking payment from an account."""

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """Charge `amount` to the account. Raises on decline or failure."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats for an account."""

    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve `seat_count` seats for the account. Raises on failure."""
        ...
