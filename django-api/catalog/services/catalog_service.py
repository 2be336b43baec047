"""Catalog service - all catalog business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from catalog.domain import (
    Category,
    CategoryId,
    City,
    CityId,
    Event,
    EventFilter,
    EventId,
    TicketType,
)
from catalog.domain.errors import EventNotFoundError, InvalidIdentifierError
from catalog.stores.interfaces import CatalogStore


def parse_event_id(event_id: str | int) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (TypeError, ValueError) as exc:
        raise InvalidIdentifierError("event") from exc


def parse_category_id(category_id: str | int) -> CategoryId:
    try:
        return CategoryId.from_string(category_id)
    except (TypeError, ValueError) as exc:
        raise InvalidIdentifierError("category") from exc


def parse_city_id(city_id: str | int) -> CityId:
    try:
        return CityId.from_string(city_id)
    except (TypeError, ValueError) as exc:
        raise InvalidIdentifierError("city") from exc


class CatalogService:
    """Service for event catalog operations."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    def list_events(
        self,
        *,
        category_id: str | int | None = None,
        city_id: str | int | None = None,
        featured: bool | None = None,
        trending: bool | None = None,
        query: str | None = None,
    ) -> list[Event]:
        """Return events matching every given filter.

        Raises:
            InvalidIdentifierError: If a category or city id is malformed.
        """
        criteria = EventFilter(
            category_id=parse_category_id(category_id) if category_id is not None else None,
            city_id=parse_city_id(city_id) if city_id is not None else None,
            featured=featured,
            trending=trending,
            query=query.strip() if query else None,
        )
        return self._store.list_events(criteria)

    def list_featured_events(self) -> list[Event]:
        return self.list_events(featured=True)

    def list_trending_events(self) -> list[Event]:
        return self.list_events(trending=True)

    def list_events_by_category(self, category_id: str | int) -> list[Event]:
        return self.list_events(category_id=category_id)

    def list_events_by_city(self, city_id: str | int) -> list[Event]:
        return self.list_events(city_id=city_id)

    def get_event(self, event_id: str | int) -> Event:
        """Return an event by ID.

        Raises:
            InvalidIdentifierError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        event = self._store.get_event(parsed)
        if event is None:
            raise EventNotFoundError(parsed.value)
        return event

    def list_ticket_types(self, event_id: str | int) -> list[TicketType]:
        """Return ticket types for an event.

        Raises:
            InvalidIdentifierError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if not self._store.event_exists(parsed):
            raise EventNotFoundError(parsed.value)
        return self._store.list_ticket_types(parsed)

    def list_categories(self) -> list[Category]:
        return self._store.list_categories()

    def list_cities(self) -> list[City]:
        return self._store.list_cities()
