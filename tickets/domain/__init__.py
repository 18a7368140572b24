from tickets.domain.models import PurchaseReceipt, TicketCounts
from tickets.domain.value_objects import AccountId, TicketType, TicketTypeRequest

__all__ = [
    "PurchaseReceipt",
    "TicketCounts",
    "AccountId",
    "TicketType",
    "TicketTypeRequest",
]
