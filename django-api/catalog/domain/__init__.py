from catalog.domain.models import Category, City, Event, EventFilter, TicketType
from catalog.domain.value_objects import (
    Capacity,
    CategoryId,
    CityId,
    EventId,
    Money,
    TicketTypeId,
)

__all__ = [
    "Category",
    "City",
    "Event",
    "EventFilter",
    "TicketType",
    "CategoryId",
    "CityId",
    "EventId",
    "TicketTypeId",
    "Money",
    "Capacity",
]
