from orders.domain.models import (
    DEFAULT_ORDER_STATUS,
    SERVICE_FEE_RATE,
    Order,
    OrderDraft,
    OrderItem,
    OrderLineRequest,
    OrderRequest,
    OrderTotals,
    PricedLine,
)
from orders.domain.value_objects import OrderId, OrderItemId, UserId

__all__ = [
    "DEFAULT_ORDER_STATUS",
    "SERVICE_FEE_RATE",
    "Order",
    "OrderDraft",
    "OrderItem",
    "OrderLineRequest",
    "OrderRequest",
    "OrderTotals",
    "PricedLine",
    "OrderId",
    "OrderItemId",
    "UserId",
]
