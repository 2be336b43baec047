"""Store backend selection.

``STOREFRONT_STORE_BACKEND`` picks the Django ORM stores or a single
process-wide in-memory catalog seeded with the sample data.
"""

from functools import lru_cache

from django.conf import settings

from catalog.stores.django_store import DjangoCatalogStore
from catalog.stores.interfaces import CatalogStore
from catalog.stores.memory_store import MemoryCatalogStore
from orders.stores.django_store import DjangoOrderStore
from orders.stores.interfaces import OrderStore
from orders.stores.memory_store import MemoryOrderStore


@lru_cache(maxsize=1)
def memory_catalog_store() -> MemoryCatalogStore:
    return MemoryCatalogStore.seeded()


@lru_cache(maxsize=1)
def memory_order_store() -> MemoryOrderStore:
    return MemoryOrderStore(memory_catalog_store())


def catalog_store() -> CatalogStore:
    if settings.STOREFRONT_STORE_BACKEND == "memory":
        return memory_catalog_store()
    return DjangoCatalogStore()


def order_store() -> OrderStore:
    if settings.STOREFRONT_STORE_BACKEND == "memory":
        return memory_order_store()
    return DjangoOrderStore()
