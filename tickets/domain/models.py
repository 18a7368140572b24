"""Domain models for a single purchase.

Nothing here is persisted; each object lives for one purchase call.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Self

from tickets.domain.value_objects import TicketType, TicketTypeRequest


@dataclass(frozen=True)
class TicketCounts:
    """Quantities of an order summed per ticket type."""

    adult: int = 0
    child: int = 0
    infant: int = 0

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        totals = {ticket_type: 0 for ticket_type in TicketType}
        for request in requests:
            # Unknown types are left for pricing to reject.
            if request.ticket_type in totals:
                totals[request.ticket_type] += request.quantity
        return cls(
            adult=totals[TicketType.ADULT],
            child=totals[TicketType.CHILD],
            infant=totals[TicketType.INFANT],
        )

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant


@dataclass(frozen=True)
class PurchaseReceipt:
    """Outcome of a completed purchase."""

    account_id: int
    total_amount: int
    seats_reserved: int
    counts: TicketCounts
