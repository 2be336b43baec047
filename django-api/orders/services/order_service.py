"""Order service - the checkout transaction.

Every line is validated against the locked ticket types before anything is
written; stock is then taken and the order persisted inside the same store
transaction, so a failing line leaves no trace.
"""

from collections import Counter

from loguru import logger

from catalog.domain import TicketType, TicketTypeId
from catalog.domain.errors import DomainError, InvalidIdentifierError
from orders.domain import (
    DEFAULT_ORDER_STATUS,
    Order,
    OrderDraft,
    OrderId,
    OrderRequest,
    OrderTotals,
    PricedLine,
    UserId,
)
from orders.domain.errors import (
    EmptyOrderError,
    InsufficientInventoryError,
    InvalidQuantityError,
    MaxPerOrderExceededError,
    OrderNotFoundError,
    TicketTypeNotFoundError,
)
from orders.services.identity import require_principal
from orders.stores.interfaces import OrderStore


class OrderService:
    """Service for checkout and order history."""

    def __init__(self, store: OrderStore) -> None:
        self._store = store

    def create_order(self, principal: UserId | None, request: OrderRequest) -> Order:
        """Book the requested tickets and record the order.

        Raises:
            UnauthorizedError: If no principal was resolved.
            EmptyOrderError: If the request has no lines.
            InvalidQuantityError: If a quantity is not positive.
            TicketTypeNotFoundError: If a line references a missing ticket type.
            MaxPerOrderExceededError: If a ticket type exceeds its per-order cap.
            InsufficientInventoryError: If fewer tickets remain than requested.
        """
        user_id = require_principal(principal)
        if not request.lines:
            raise EmptyOrderError()
        for line in request.lines:
            if type(line.quantity) is not int or line.quantity < 1:
                raise InvalidQuantityError(line.ticket_type_id.value)

        requested: Counter[TicketTypeId] = Counter()
        for line in request.lines:
            requested[line.ticket_type_id] += line.quantity

        with self._store.atomic():
            ticket_types = self._store.lock_ticket_types(requested)
            try:
                self._validate(requested, ticket_types)
            except DomainError as exc:
                logger.warning("Order rejected for user {}: {}", user_id.value, exc)
                raise

            lines = tuple(
                PricedLine(
                    ticket_type_id=line.ticket_type_id,
                    quantity=line.quantity,
                    price_per_item=ticket_types[line.ticket_type_id].price,
                )
                for line in request.lines
            )
            totals = OrderTotals.for_lines(lines)
            self._warn_on_claimed_totals(request, totals, lines)

            for ticket_type_id, quantity in requested.items():
                if not self._store.decrement_availability(ticket_type_id, quantity):
                    ticket_type = ticket_types[ticket_type_id]
                    logger.error(
                        "Inventory invariant violated: ticket type {} could not take {} "
                        "after passing the availability check",
                        ticket_type_id.value,
                        quantity,
                    )
                    raise InsufficientInventoryError(
                        ticket_type.name, ticket_type.available_quantity.value
                    )

            order = self._store.save_order(
                OrderDraft(
                    user_id=user_id,
                    status=request.status or DEFAULT_ORDER_STATUS,
                    totals=totals,
                    lines=lines,
                )
            )

        logger.info(
            "Order {} placed by user {}: {} tickets, total {}",
            order.id.value,
            user_id.value,
            sum(requested.values()),
            order.total_amount,
        )
        return order

    def list_orders(self, principal: UserId | None) -> list[Order]:
        """Return the principal's orders with their items.

        Raises:
            UnauthorizedError: If no principal was resolved.
        """
        user_id = require_principal(principal)
        return self._store.list_orders(user_id)

    def get_order(self, principal: UserId | None, order_id: str | int) -> Order:
        """Return one of the principal's orders.

        Raises:
            UnauthorizedError: If no principal was resolved.
            InvalidIdentifierError: If the order_id is not a positive integer.
            OrderNotFoundError: If the order does not exist or is not theirs.
        """
        user_id = require_principal(principal)
        try:
            parsed = OrderId.from_string(order_id)
        except (TypeError, ValueError) as exc:
            raise InvalidIdentifierError("order") from exc
        order = self._store.get_order(parsed)
        if order is None or order.user_id != user_id:
            raise OrderNotFoundError(parsed.value)
        return order

    @staticmethod
    def _validate(
        requested: Counter[TicketTypeId],
        ticket_types: dict[TicketTypeId, TicketType],
    ) -> None:
        for ticket_type_id, quantity in requested.items():
            ticket_type = ticket_types.get(ticket_type_id)
            if ticket_type is None:
                raise TicketTypeNotFoundError(ticket_type_id.value)
            if not ticket_type.available_quantity.covers(quantity):
                raise InsufficientInventoryError(
                    ticket_type.name, ticket_type.available_quantity.value
                )
            if quantity > ticket_type.max_per_order:
                raise MaxPerOrderExceededError(ticket_type.name, ticket_type.max_per_order)

    @staticmethod
    def _warn_on_claimed_totals(
        request: OrderRequest, totals: OrderTotals, lines: tuple[PricedLine, ...]
    ) -> None:
        mismatched = (
            request.claimed_total is not None and request.claimed_total != totals.total.amount
        ) or (
            request.claimed_service_fee is not None
            and request.claimed_service_fee != totals.service_fee.amount
        )
        for submitted, priced in zip(request.lines, lines):
            claimed = submitted.claimed_price
            if claimed is not None and claimed != priced.price_per_item.amount:
                mismatched = True
        if mismatched:
            logger.warning(
                "Ignoring client-supplied totals: claimed total {}, computed {}",
                request.claimed_total,
                totals.total.amount,
            )
