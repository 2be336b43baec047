"""Django ORM implementation of the OrderStore.

Ticket type rows are locked with SELECT ... FOR UPDATE (a no-op on SQLite,
which serializes writers itself) and stock is taken with a conditional
UPDATE, so concurrent checkouts can never oversell.
"""

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from django.db import transaction
from django.db.models import F

from catalog import models as catalog_models
from catalog.domain import Money, TicketType, TicketTypeId
from catalog.stores.django_store import storage_errors, to_ticket_type
from orders import models
from orders.domain import Order, OrderDraft, OrderId, OrderItem, OrderItemId, UserId
from orders.stores.interfaces import OrderStore


def to_order(row: models.Order) -> Order:
    return Order(
        id=OrderId(row.pk),
        user_id=UserId(row.user_id),
        status=row.status,
        subtotal=Money(row.subtotal),
        service_fee=Money(row.service_fee),
        total_amount=Money(row.total_amount),
        created_at=row.created_at,
        items=tuple(
            OrderItem(
                id=OrderItemId(item.pk),
                order_id=OrderId(row.pk),
                ticket_type_id=TicketTypeId(item.ticket_type_id),
                quantity=item.quantity,
                price_per_item=Money(item.price_per_item),
            )
            for item in row.items.all()
        ),
    )


class DjangoOrderStore(OrderStore):
    """Database-backed order store using Django ORM."""

    @contextmanager
    def atomic(self) -> Iterator[None]:
        with storage_errors(), transaction.atomic():
            yield

    def lock_ticket_types(
        self, ticket_type_ids: Iterable[TicketTypeId]
    ) -> dict[TicketTypeId, TicketType]:
        ids = sorted({tid.value for tid in ticket_type_ids})
        with storage_errors():
            rows = (
                catalog_models.TicketType.objects.select_for_update()
                .filter(pk__in=ids)
                .order_by("id")
            )
            return {TicketTypeId(row.pk): to_ticket_type(row) for row in rows}

    def decrement_availability(self, ticket_type_id: TicketTypeId, quantity: int) -> bool:
        with storage_errors():
            updated = catalog_models.TicketType.objects.filter(
                pk=ticket_type_id.value, available_quantity__gte=quantity
            ).update(available_quantity=F("available_quantity") - quantity)
        return updated == 1

    def save_order(self, draft: OrderDraft) -> Order:
        with storage_errors():
            row = models.Order.objects.create(
                user_id=draft.user_id.value,
                status=draft.status,
                subtotal=draft.totals.subtotal.amount,
                service_fee=draft.totals.service_fee.amount,
                total_amount=draft.totals.total.amount,
            )
            models.OrderItem.objects.bulk_create(
                [
                    models.OrderItem(
                        order=row,
                        ticket_type_id=line.ticket_type_id.value,
                        quantity=line.quantity,
                        price_per_item=line.price_per_item.amount,
                    )
                    for line in draft.lines
                ]
            )
            return to_order(
                models.Order.objects.prefetch_related("items").get(pk=row.pk)
            )

    def list_orders(self, user_id: UserId) -> list[Order]:
        with storage_errors():
            rows = (
                models.Order.objects.filter(user_id=user_id.value)
                .prefetch_related("items")
                .order_by("created_at", "id")
            )
            return [to_order(row) for row in rows]

    def get_order(self, order_id: OrderId) -> Order | None:
        with storage_errors():
            row = (
                models.Order.objects.prefetch_related("items")
                .filter(pk=order_id.value)
                .first()
            )
        return to_order(row) if row is not None else None
