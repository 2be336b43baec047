"""Domain models for checkout.

Orders and their items are immutable once persisted. Totals are always
derived from the ticket types' own prices via OrderTotals.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from catalog.domain import Money, TicketTypeId
from orders.domain.value_objects import OrderId, OrderItemId, UserId

SERVICE_FEE_RATE = Decimal("0.12")
DEFAULT_ORDER_STATUS = "completed"


@dataclass(frozen=True)
class OrderLineRequest:
    """One requested line as submitted by the caller.

    ``claimed_price`` is whatever unit price the client displayed; it is
    never used for pricing.
    """

    ticket_type_id: TicketTypeId
    quantity: int
    claimed_price: Decimal | None = None


@dataclass(frozen=True)
class OrderRequest:
    lines: tuple[OrderLineRequest, ...]
    status: str | None = None
    claimed_total: Decimal | None = None
    claimed_service_fee: Decimal | None = None


@dataclass(frozen=True)
class PricedLine:
    """A validated line with the unit price snapshotted from its ticket type."""

    ticket_type_id: TicketTypeId
    quantity: int
    price_per_item: Money

    @property
    def line_total(self) -> Money:
        return self.price_per_item.times(self.quantity)


@dataclass(frozen=True)
class OrderTotals:
    subtotal: Money
    service_fee: Money
    total: Money

    @classmethod
    def for_lines(cls, lines: tuple[PricedLine, ...]) -> "OrderTotals":
        subtotal = Money(Decimal("0"))
        for line in lines:
            subtotal = subtotal + line.line_total
        service_fee = subtotal.times(SERVICE_FEE_RATE)
        return cls(subtotal=subtotal, service_fee=service_fee, total=subtotal + service_fee)


@dataclass(frozen=True)
class OrderDraft:
    """Everything needed to persist an order, computed server-side."""

    user_id: UserId
    status: str
    totals: OrderTotals
    lines: tuple[PricedLine, ...]


@dataclass(frozen=True)
class OrderItem:
    """Domain representation of an OrderItem."""

    id: OrderItemId
    order_id: OrderId
    ticket_type_id: TicketTypeId
    quantity: int
    price_per_item: Money


@dataclass(frozen=True)
class Order:
    """Domain representation of an Order."""

    id: OrderId
    user_id: UserId
    status: str
    subtotal: Money
    service_fee: Money
    total_amount: Money
    created_at: datetime
    items: tuple[OrderItem, ...] = ()
