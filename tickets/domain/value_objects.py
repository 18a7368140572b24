"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class TicketType(Enum):
    """Ticket categories sold per order."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @property
    def occupies_seat(self) -> bool:
        return self is not TicketType.INFANT


@dataclass(frozen=True)
class AccountId:
    """Identifier of the purchasing account."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Account ID must be an integer")
        if self.value <= 0:
            raise ValueError("Account ID must be greater than zero")


@dataclass(frozen=True)
class TicketTypeRequest:
    """A request for a number of tickets of a single type."""

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("Ticket quantity must be an integer")
        if self.quantity < 0:
            raise ValueError("Ticket quantity cannot be negative")

    @classmethod
    def from_strings(cls, ticket_type: str, quantity: int) -> Self:
        try:
            parsed = TicketType(ticket_type)
        except ValueError:
            raise ValueError(f"Unknown ticket type: {ticket_type!r}") from None
        return cls(ticket_type=parsed, quantity=quantity)
