"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every write performed
inside ``atomic()`` commits together or not at all.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from contextlib import AbstractContextManager

from catalog.domain import TicketType, TicketTypeId
from orders.domain import Order, OrderDraft, OrderId, UserId


class OrderStore(ABC):
    """Interface for order persistence and inventory operations."""

    @abstractmethod
    def atomic(self) -> AbstractContextManager[None]:
        """Open a transaction; an exception leaving the block rolls it back."""
        ...

    @abstractmethod
    def lock_ticket_types(
        self, ticket_type_ids: Iterable[TicketTypeId]
    ) -> dict[TicketTypeId, TicketType]:
        """Return the requested ticket types, locked until the transaction ends.

        Missing ids are absent from the result.
        """
        ...

    @abstractmethod
    def decrement_availability(self, ticket_type_id: TicketTypeId, quantity: int) -> bool:
        """Take ``quantity`` tickets if at least that many remain.

        Returns False, leaving stock untouched, when fewer remain.
        """
        ...

    @abstractmethod
    def save_order(self, draft: OrderDraft) -> Order:
        """Persist an order with its items and return it with assigned ids."""
        ...

    @abstractmethod
    def list_orders(self, user_id: UserId) -> list[Order]:
        """Return the user's orders with their items, oldest first."""
        ...

    @abstractmethod
    def get_order(self, order_id: OrderId) -> Order | None:
        """Return an order with its items, or None if not found."""
        ...
