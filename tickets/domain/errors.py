"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum

from tickets.domain.value_objects import TicketType


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TICKET_TYPE = "INVALID_TICKET_TYPE"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    MISSING_ADULT_TICKET = "MISSING_ADULT_TICKET"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidPurchaseError(DomainError):
    """Raised when a purchase breaks a business rule."""


class InvalidTicketTypeError(InvalidPurchaseError):
    """Raised when a ticket type has no price."""

    def __init__(self, ticket_type: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TICKET_TYPE,
            message="Invalid ticket type",
        )
        self.ticket_type = ticket_type


class TicketLimitExceededError(InvalidPurchaseError):
    """Raised when an order asks for more tickets than allowed."""

    def __init__(self, attempted_total: int, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"Exceeded maximum ticket limit ({limit})",
        )
        self.attempted_total = attempted_total
        self.limit = limit


class MissingAdultTicketError(InvalidPurchaseError):
    """Raised when child or infant tickets are ordered without an adult."""

    def __init__(self, ticket_type: TicketType) -> None:
        super().__init__(
            code=ErrorCode.MISSING_ADULT_TICKET,
            message=f"{ticket_type.value.capitalize()} tickets cannot be purchased without an Adult ticket",
        )
        self.ticket_type = ticket_type


class InvalidAccountIdError(InvalidPurchaseError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Invalid account ID",
        )
