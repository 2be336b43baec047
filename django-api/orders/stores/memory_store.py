"""In-process implementation of the OrderStore.

Shares the catalog store's lock and ticket type records. A transaction holds
the lock for its whole duration and restores the snapshot taken on entry if
the block raises.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from catalog.domain import TicketType, TicketTypeId
from catalog.stores.memory_store import MemoryCatalogStore
from orders.domain import Order, OrderDraft, OrderId, OrderItem, OrderItemId, UserId
from orders.stores.interfaces import OrderStore


class MemoryOrderStore(OrderStore):
    """Order store backed by process memory."""

    def __init__(self, catalog: MemoryCatalogStore) -> None:
        self._catalog = catalog
        self._lock = catalog.lock
        self.orders: dict[int, Order] = {}
        self._next_order_id = 1
        self._next_item_id = 1

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with self._lock:
            snapshot = (
                dict(self._catalog.ticket_types),
                dict(self.orders),
                self._next_order_id,
                self._next_item_id,
            )
            try:
                yield
            except BaseException:
                (
                    ticket_types,
                    self.orders,
                    self._next_order_id,
                    self._next_item_id,
                ) = snapshot
                self._catalog.ticket_types.clear()
                self._catalog.ticket_types.update(ticket_types)
                raise

    def lock_ticket_types(
        self, ticket_type_ids: Iterable[TicketTypeId]
    ) -> dict[TicketTypeId, TicketType]:
        with self._lock:
            found = {}
            for ticket_type_id in ticket_type_ids:
                ticket_type = self._catalog.ticket_types.get(ticket_type_id.value)
                if ticket_type is not None:
                    found[ticket_type_id] = ticket_type
            return found

    def decrement_availability(self, ticket_type_id: TicketTypeId, quantity: int) -> bool:
        with self._lock:
            current = self._catalog.ticket_types.get(ticket_type_id.value)
            if current is None or not current.available_quantity.covers(quantity):
                return False
            remaining = current.available_quantity.value - quantity
            self._catalog.ticket_types[ticket_type_id.value] = (
                current.with_available_quantity(remaining)
            )
            return True

    def save_order(self, draft: OrderDraft) -> Order:
        with self._lock:
            order_id = OrderId(self._next_order_id)
            self._next_order_id += 1
            items = []
            for line in draft.lines:
                items.append(
                    OrderItem(
                        id=OrderItemId(self._next_item_id),
                        order_id=order_id,
                        ticket_type_id=line.ticket_type_id,
                        quantity=line.quantity,
                        price_per_item=line.price_per_item,
                    )
                )
                self._next_item_id += 1
            order = Order(
                id=order_id,
                user_id=draft.user_id,
                status=draft.status,
                subtotal=draft.totals.subtotal,
                service_fee=draft.totals.service_fee,
                total_amount=draft.totals.total,
                created_at=datetime.now(timezone.utc),
                items=tuple(items),
            )
            self.orders[order_id.value] = order
            return order

    def list_orders(self, user_id: UserId) -> list[Order]:
        with self._lock:
            return [order for order in self.orders.values() if order.user_id == user_id]

    def get_order(self, order_id: OrderId) -> Order | None:
        with self._lock:
            return self.orders.get(order_id.value)
