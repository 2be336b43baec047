from catalog.services.catalog_service import CatalogService

__all__ = ["CatalogService"]
