"""Django ORM implementation of the CatalogStore."""

from collections.abc import Iterator
from contextlib import contextmanager

from django.db import DatabaseError
from django.db.models import Q
from loguru import logger

from catalog import models
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
from catalog.domain.errors import StorageFailureError
from catalog.stores.interfaces import CatalogStore


@contextmanager
def storage_errors() -> Iterator[None]:
    """Translate database failures into StorageFailureError."""
    try:
        yield
    except DatabaseError as exc:
        logger.exception("Database operation failed")
        raise StorageFailureError() from exc


def to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        title=row.title,
        description=row.description,
        image_url=row.image_url,
        venue=row.venue,
        address=row.address,
        city_id=CityId(row.city_id),
        category_id=CategoryId(row.category_id),
        start_date=row.start_date,
        end_date=row.end_date,
        is_featured=row.is_featured,
        is_trending=row.is_trending,
        age_restriction=row.age_restriction,
        entry_policy=row.entry_policy,
    )


def to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.pk),
        event_id=EventId(row.event_id),
        name=row.name,
        description=row.description,
        price=Money(row.price),
        available_quantity=Capacity(row.available_quantity),
        max_per_order=row.max_per_order,
    )


def _event_filter_q(criteria: EventFilter) -> Q:
    q = Q()
    if criteria.category_id is not None:
        q &= Q(category_id=criteria.category_id.value)
    if criteria.city_id is not None:
        q &= Q(city_id=criteria.city_id.value)
    if criteria.featured is not None:
        q &= Q(is_featured=criteria.featured)
    if criteria.trending is not None:
        q &= Q(is_trending=criteria.trending)
    if criteria.query:
        q &= (
            Q(title__icontains=criteria.query)
            | Q(description__icontains=criteria.query)
            | Q(venue__icontains=criteria.query)
        )
    return q


class DjangoCatalogStore(CatalogStore):
    """Database-backed catalog store using Django ORM."""

    def list_events(self, criteria: EventFilter) -> list[Event]:
        with storage_errors():
            rows = models.Event.objects.filter(_event_filter_q(criteria)).order_by("id")
            return [to_event(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        with storage_errors():
            row = models.Event.objects.filter(pk=event_id.value).first()
        return to_event(row) if row is not None else None

    def event_exists(self, event_id: EventId) -> bool:
        with storage_errors():
            return models.Event.objects.filter(pk=event_id.value).exists()

    def list_ticket_types(self, event_id: EventId) -> list[TicketType]:
        with storage_errors():
            rows = models.TicketType.objects.filter(event_id=event_id.value).order_by("id")
            return [to_ticket_type(row) for row in rows]

    def list_categories(self) -> list[Category]:
        with storage_errors():
            return [
                Category(
                    id=CategoryId(row.pk),
                    name=row.name,
                    icon=row.icon,
                    icon_bg_color=row.icon_bg_color,
                )
                for row in models.Category.objects.order_by("id")
            ]

    def list_cities(self) -> list[City]:
        with storage_errors():
            return [
                City(id=CityId(row.pk), name=row.name)
                for row in models.City.objects.order_by("id")
            ]
