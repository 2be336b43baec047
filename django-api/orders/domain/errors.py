"""Domain errors raised by the order transaction."""

from catalog.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidRequestError,
    NotFoundError,
)


class EmptyOrderError(InvalidRequestError):
    """Raised when an order has no lines."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EMPTY_ORDER,
            message="Order must contain at least one item",
        )


class InvalidQuantityError(InvalidRequestError):
    """Raised when a line quantity is not a positive integer."""

    def __init__(self, ticket_type_id: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QUANTITY,
            message="Quantity must be a positive integer",
            details={"ticketTypeId": ticket_type_id},
        )
        self.ticket_type_id = ticket_type_id


class MaxPerOrderExceededError(InvalidRequestError):
    """Raised when a ticket type is requested beyond its per-order cap."""

    def __init__(self, ticket_type_name: str, max_per_order: int) -> None:
        super().__init__(
            code=ErrorCode.MAX_PER_ORDER_EXCEEDED,
            message=f"At most {max_per_order} tickets of {ticket_type_name} per order.",
            details={"ticketTypeName": ticket_type_name, "maxPerOrder": max_per_order},
        )
        self.ticket_type_name = ticket_type_name
        self.max_per_order = max_per_order


class TicketTypeNotFoundError(NotFoundError):
    """Raised when a line references a missing ticket type."""

    def __init__(self, ticket_type_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_TYPE_NOT_FOUND,
            message=f"Ticket type with ID {ticket_type_id} not found",
            details={"ticketTypeId": ticket_type_id},
        )
        self.ticket_type_id = ticket_type_id


class OrderNotFoundError(NotFoundError):
    """Raised when an order is missing or belongs to another user."""

    def __init__(self, order_id: int) -> None:
        super().__init__(
            code=ErrorCode.ORDER_NOT_FOUND,
            message="Order not found",
        )
        self.order_id = order_id


class InsufficientInventoryError(DomainError):
    """Raised when a line asks for more tickets than remain."""

    def __init__(self, ticket_type_name: str, remaining: int) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_INVENTORY,
            message=(
                f"Not enough tickets available for {ticket_type_name}. "
                f"Only {remaining} remaining."
            ),
            details={"ticketTypeName": ticket_type_name, "remaining": remaining},
        )
        self.ticket_type_name = ticket_type_name
        self.remaining = remaining
