"""In-process implementation of the CatalogStore.

Records live in dicts keyed by integer id, assigned from per-collection
counters. The lock is shared with the in-memory order store so inventory
changes and catalog reads are serialized.
"""

import threading
from collections.abc import Iterable, Mapping
from dataclasses import replace
from decimal import Decimal
from typing import Any, Self

from catalog.domain import (
    Capacity,
    Category,
    CategoryId,
    City,
    CityId,
    Event,
    EventFilter,
    EventId,
    Money,
    TicketType,
    TicketTypeId,
)
from catalog.stores.interfaces import CatalogStore


class MemoryCatalogStore(CatalogStore):
    """Catalog store backed by process memory."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.categories: dict[int, Category] = {}
        self.cities: dict[int, City] = {}
        self.events: dict[int, Event] = {}
        self.ticket_types: dict[int, TicketType] = {}
        self._next_id = {"category": 1, "city": 1, "event": 1, "ticket_type": 1}

    @classmethod
    def seeded(cls) -> Self:
        """Return a store loaded with the sample catalog."""
        from catalog import seed

        store = cls()
        store.load(seed.CATEGORIES, seed.CITIES, seed.EVENTS, seed.TICKET_TYPES)
        return store

    def _allocate(self, collection: str) -> int:
        with self.lock:
            value = self._next_id[collection]
            self._next_id[collection] = value + 1
            return value

    def load(
        self,
        categories: Iterable[Mapping[str, Any]],
        cities: Iterable[Mapping[str, Any]],
        events: Iterable[Mapping[str, Any]],
        ticket_types: Iterable[Mapping[str, Any]],
    ) -> None:
        for data in categories:
            self.add_category(**data)
        for data in cities:
            self.add_city(**data)
        for data in events:
            self.add_event(**data)
        for data in ticket_types:
            self.add_ticket_type(**data)

    def add_category(self, name: str, icon: str, icon_bg_color: str) -> Category:
        category = Category(
            id=CategoryId(self._allocate("category")),
            name=name,
            icon=icon,
            icon_bg_color=icon_bg_color,
        )
        self.categories[category.id.value] = category
        return category

    def add_city(self, name: str) -> City:
        city = City(id=CityId(self._allocate("city")), name=name)
        self.cities[city.id.value] = city
        return city

    def add_event(self, city_id: int, category_id: int, **fields: Any) -> Event:
        event = Event(
            id=EventId(self._allocate("event")),
            city_id=CityId(city_id),
            category_id=CategoryId(category_id),
            **fields,
        )
        self.events[event.id.value] = event
        return event

    def add_ticket_type(
        self,
        event_id: int,
        name: str,
        description: str,
        price: Any,
        available_quantity: int,
        max_per_order: int = 10,
    ) -> TicketType:
        ticket_type = TicketType(
            id=TicketTypeId(self._allocate("ticket_type")),
            event_id=EventId(event_id),
            name=name,
            description=description,
            price=Money(Decimal(str(price))),
            available_quantity=Capacity(available_quantity),
            max_per_order=max_per_order,
        )
        self.ticket_types[ticket_type.id.value] = ticket_type
        return ticket_type

    def set_price(self, ticket_type_id: TicketTypeId, price: Money) -> None:
        """Reprice a ticket type, the in-memory counterpart of an admin edit.

        Orders already placed keep the price snapshotted on their items.
        """
        with self.lock:
            current = self.ticket_types[ticket_type_id.value]
            self.ticket_types[ticket_type_id.value] = replace(current, price=price)

    def list_events(self, criteria: EventFilter) -> list[Event]:
        with self.lock:
            return [event for event in self.events.values() if criteria.matches(event)]

    def get_event(self, event_id: EventId) -> Event | None:
        with self.lock:
            return self.events.get(event_id.value)

    def event_exists(self, event_id: EventId) -> bool:
        with self.lock:
            return event_id.value in self.events

    def list_ticket_types(self, event_id: EventId) -> list[TicketType]:
        with self.lock:
            return [tt for tt in self.ticket_types.values() if tt.event_id == event_id]

    def list_categories(self) -> list[Category]:
        with self.lock:
            return list(self.categories.values())

    def list_cities(self) -> list[City]:
        with self.lock:
            return list(self.cities.values())
