"""In-memory gateways for local development and tests.

Each gateway records its calls in order and can be told to fail.
"""

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway


class InMemoryPaymentGateway(PaymentGateway):
    """Payment gateway that records payments instead of charging."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[int, int]] = []
        self._error = error

    def make_payment(self, account_id: int, amount: int) -> None:
        if self._error is not None:
            raise self._error
        self.calls.append((account_id, amount))


class InMemorySeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that records reservations in memory."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[int, int]] = []
        self._error = error

    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        if self._error is not None:
            raise self._error
        self.calls.append((account_id, seat_count))
