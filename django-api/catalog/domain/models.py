"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in catalog/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime

from catalog.domain.value_objects import (
    Capacity,
    CategoryId,
    CityId,
    EventId,
    Money,
    TicketTypeId,
)

DEFAULT_MAX_PER_ORDER = 10


@dataclass(frozen=True)
class Category:
    """Domain representation of a Category."""

    id: CategoryId
    name: str
    icon: str
    icon_bg_color: str


@dataclass(frozen=True)
class City:
    """Domain representation of a City."""

    id: CityId
    name: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    title: str
    description: str
    image_url: str
    venue: str
    address: str
    city_id: CityId
    category_id: CategoryId
    start_date: datetime
    end_date: datetime | None = None
    is_featured: bool = False
    is_trending: bool = False
    age_restriction: str | None = None
    entry_policy: str | None = None


@dataclass(frozen=True)
class TicketType:
    """Domain representation of a TicketType."""

    id: TicketTypeId
    event_id: EventId
    name: str
    description: str
    price: Money
    available_quantity: Capacity
    max_per_order: int = DEFAULT_MAX_PER_ORDER

    def __post_init__(self) -> None:
        if self.max_per_order < 1:
            raise ValueError("max_per_order must be positive")

    def with_available_quantity(self, quantity: int) -> "TicketType":
        return replace(self, available_quantity=Capacity(quantity))


@dataclass(frozen=True)
class EventFilter:
    """Conjunction of optional predicates over events.

    Unset fields match everything. ``query`` is a case-insensitive substring
    match against title, description and venue.
    """

    category_id: CategoryId | None = None
    city_id: CityId | None = None
    featured: bool | None = None
    trending: bool | None = None
    query: str | None = None

    def matches(self, event: Event) -> bool:
        if self.category_id is not None and event.category_id != self.category_id:
            return False
        if self.city_id is not None and event.city_id != self.city_id:
            return False
        if self.featured is not None and event.is_featured != self.featured:
            return False
        if self.trending is not None and event.is_trending != self.trending:
            return False
        if self.query:
            needle = self.query.lower()
            haystacks = (event.title, event.description, event.venue)
            if not any(needle in text.lower() for text in haystacks):
                return False
        return True
