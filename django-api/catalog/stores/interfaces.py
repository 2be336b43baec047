"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from catalog.domain import Category, City, Event, EventFilter, EventId, TicketType


class CatalogStore(ABC):
    """Interface for catalog persistence operations."""

    @abstractmethod
    def list_events(self, criteria: EventFilter) -> list[Event]:
        """Return events matching ``criteria`` in insertion order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def list_ticket_types(self, event_id: EventId) -> list[TicketType]:
        """Return the ticket types of an event in insertion order."""
        ...

    @abstractmethod
    def list_categories(self) -> list[Category]:
        ...

    @abstractmethod
    def list_cities(self) -> list[City]:
        ...
