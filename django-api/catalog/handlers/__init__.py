from catalog.handlers.views import (
    CategoryEventListView,
    CategoryListView,
    CityEventListView,
    CityListView,
    EventDetailView,
    EventListView,
    FeaturedEventListView,
    TicketTypeListView,
    TrendingEventListView,
)

__all__ = [
    "CategoryEventListView",
    "CategoryListView",
    "CityEventListView",
    "CityListView",
    "EventDetailView",
    "EventListView",
    "FeaturedEventListView",
    "TicketTypeListView",
    "TrendingEventListView",
]
