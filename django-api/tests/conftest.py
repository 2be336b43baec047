"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest
from rest_framework.test import APIClient

from catalog import models as catalog_models
from catalog.domain import TicketTypeId
from catalog.stores.memory_store import MemoryCatalogStore
from orders.domain import OrderLineRequest, OrderRequest, UserId
from orders.services import OrderService
from orders.stores.memory_store import MemoryOrderStore
from storefront import stores


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="alice", password="secret-pass")


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username="bob", password="secret-pass")


@pytest.fixture
def auth_client(api_client: APIClient, user) -> APIClient:
    api_client.force_authenticate(user=user)
    return api_client


@pytest.fixture
def memory_catalog() -> MemoryCatalogStore:
    """Two events; ticket types 1-3 belong to event 1, type 4 to event 2."""
    store = MemoryCatalogStore()
    store.add_category(name="Concerts", icon="music", icon_bg_color="bg-blue-50")
    store.add_category(name="Sports", icon="basketball-ball", icon_bg_color="bg-orange-50")
    store.add_city(name="New York")
    store.add_city(name="Chicago")
    store.add_event(
        title="Jazz Night",
        description="An intimate evening of jazz",
        image_url="https://example.com/jazz.jpg",
        venue="Blue Note",
        address="131 W 3rd St",
        city_id=1,
        category_id=1,
        start_date=datetime(2030, 8, 15, 20, tzinfo=timezone.utc),
        is_featured=True,
    )
    store.add_event(
        title="Lakers vs. Bulls",
        description="Basketball matchup",
        image_url="https://example.com/nba.jpg",
        venue="United Center",
        address="1901 W Madison St",
        city_id=2,
        category_id=2,
        start_date=datetime(2030, 10, 19, 19, tzinfo=timezone.utc),
        is_trending=True,
    )
    store.add_ticket_type(
        event_id=1,
        name="General Admission",
        description="Standing room",
        price=Decimal("50.00"),
        available_quantity=5,
        max_per_order=8,
    )
    store.add_ticket_type(
        event_id=1,
        name="Balcony",
        description="Upper level",
        price=Decimal("20.00"),
        available_quantity=10,
        max_per_order=10,
    )
    store.add_ticket_type(
        event_id=1,
        name="VIP",
        description="Front row",
        price=Decimal("99.99"),
        available_quantity=10,
        max_per_order=2,
    )
    store.add_ticket_type(
        event_id=2,
        name="Courtside",
        description="Premium courtside seating",
        price=Decimal("450.00"),
        available_quantity=1,
        max_per_order=2,
    )
    return store


@pytest.fixture
def memory_orders(memory_catalog: MemoryCatalogStore) -> MemoryOrderStore:
    return MemoryOrderStore(memory_catalog)


@pytest.fixture
def order_service(memory_orders: MemoryOrderStore) -> OrderService:
    return OrderService(memory_orders)


@pytest.fixture
def principal() -> UserId:
    return UserId(1)


@pytest.fixture
def order_request():
    """Build an OrderRequest from (ticket_type_id, quantity) pairs."""

    def build(*lines: tuple[int, int], **kwargs) -> OrderRequest:
        return OrderRequest(
            lines=tuple(
                OrderLineRequest(ticket_type_id=TicketTypeId(tid), quantity=qty)
                for tid, qty in lines
            ),
            **kwargs,
        )

    return build


@pytest.fixture
def db_catalog(db) -> SimpleNamespace:
    """Database rows mirroring the memory_catalog fixture."""
    concerts = catalog_models.Category.objects.create(
        name="Concerts", icon="music", icon_bg_color="bg-blue-50"
    )
    sports = catalog_models.Category.objects.create(
        name="Sports", icon="basketball-ball", icon_bg_color="bg-orange-50"
    )
    new_york = catalog_models.City.objects.create(name="New York")
    chicago = catalog_models.City.objects.create(name="Chicago")
    jazz = catalog_models.Event.objects.create(
        title="Jazz Night",
        description="An intimate evening of jazz",
        image_url="https://example.com/jazz.jpg",
        venue="Blue Note",
        address="131 W 3rd St",
        city=new_york,
        category=concerts,
        start_date=datetime(2030, 8, 15, 20, tzinfo=timezone.utc),
        is_featured=True,
    )
    game = catalog_models.Event.objects.create(
        title="Lakers vs. Bulls",
        description="Basketball matchup",
        image_url="https://example.com/nba.jpg",
        venue="United Center",
        address="1901 W Madison St",
        city=chicago,
        category=sports,
        start_date=datetime(2030, 10, 19, 19, tzinfo=timezone.utc),
        is_trending=True,
    )
    general = catalog_models.TicketType.objects.create(
        event=jazz,
        name="General Admission",
        description="Standing room",
        price=Decimal("50.00"),
        available_quantity=5,
        max_per_order=8,
    )
    balcony = catalog_models.TicketType.objects.create(
        event=jazz,
        name="Balcony",
        description="Upper level",
        price=Decimal("20.00"),
        available_quantity=10,
        max_per_order=10,
    )
    courtside = catalog_models.TicketType.objects.create(
        event=game,
        name="Courtside",
        description="Premium courtside seating",
        price=Decimal("450.00"),
        available_quantity=1,
        max_per_order=2,
    )
    return SimpleNamespace(
        concerts=concerts,
        sports=sports,
        new_york=new_york,
        chicago=chicago,
        jazz=jazz,
        game=game,
        general=general,
        balcony=balcony,
        courtside=courtside,
    )


@pytest.fixture
def memory_backend(settings):
    """Serve the API from fresh in-memory stores seeded with sample data."""
    settings.STOREFRONT_STORE_BACKEND = "memory"
    stores.memory_catalog_store.cache_clear()
    stores.memory_order_store.cache_clear()
    yield stores.memory_catalog_store()
    stores.memory_catalog_store.cache_clear()
    stores.memory_order_store.cache_clear()
